"""SQLAlchemy implementation of curriculum repository."""

from typing import Optional
from uuid import UUID
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domain.entities import Curriculum, ProfessionLink
from domain.enums import ProficiencyLevel
from domain.exceptions import NotFoundError
from domain.repositories import ICurriculumRepository
from infrastructure.database.models import (
    CurriculumModel,
    CurriculumProfessionModel,
    ProfessionalModel,
)


class SQLAlchemyCurriculumRepository(ICurriculumRepository):
    """Concrete implementation of ICurriculumRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, curriculum: Curriculum) -> Curriculum:
        """Create a new curriculum in the database."""
        model = CurriculumModel(
            id=curriculum.id,
            professional_id=curriculum.professional_id,
            created_at=curriculum.created_at,
        )
        self._update_model_from_entity(model, curriculum)
        self.session.add(model)
        await self.session.flush()
        return self._model_to_entity(model)
    
    async def get_by_id(self, curriculum_id: UUID) -> Optional[Curriculum]:
        """Retrieve a curriculum by ID."""
        model = await self._get_model(CurriculumModel.id == curriculum_id)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def get_by_professional_id(self, professional_id: UUID) -> Optional[Curriculum]:
        """Retrieve the curriculum owned by a professional."""
        model = await self._get_model(CurriculumModel.professional_id == professional_id)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def update(self, curriculum: Curriculum) -> Curriculum:
        """Update an existing curriculum."""
        model = await self._get_model(CurriculumModel.id == curriculum.id)
        
        if model is None:
            raise NotFoundError("Curriculum", curriculum.id)
        
        self._update_model_from_entity(model, curriculum)
        await self.session.flush()
        
        return self._model_to_entity(model)
    
    async def count_registered(self, profession_id: UUID) -> int:
        """Count active curricula of active professionals linking a profession."""
        stmt = (
            select(func.count(func.distinct(CurriculumModel.id)))
            .select_from(CurriculumModel)
            .join(
                CurriculumProfessionModel,
                CurriculumProfessionModel.curriculum_id == CurriculumModel.id,
            )
            .join(
                ProfessionalModel,
                ProfessionalModel.id == CurriculumModel.professional_id,
            )
            .where(
                CurriculumProfessionModel.profession_id == profession_id,
                CurriculumModel.is_active == True,  # noqa: E712
                ProfessionalModel.is_active == True,  # noqa: E712
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
    
    async def _get_model(self, condition) -> Optional[CurriculumModel]:
        stmt = (
            select(CurriculumModel)
            .where(condition)
            .options(selectinload(CurriculumModel.professions))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
    
    def _update_model_from_entity(self, model: CurriculumModel, entity: Curriculum) -> None:
        """Update ORM model from domain entity."""
        model.is_active = entity.is_active
        model.updated_at = entity.updated_at
        
        wanted = {link.profession_id: link for link in entity.professions}
        for row in list(model.professions):
            link = wanted.pop(row.profession_id, None)
            if link is None:
                model.professions.remove(row)
            else:
                row.experience_years = link.experience_years
                row.proficiency_level = link.proficiency_level.value
        for link in wanted.values():
            model.professions.append(
                CurriculumProfessionModel(
                    profession_id=link.profession_id,
                    registration_date=link.registration_date,
                    experience_years=link.experience_years,
                    proficiency_level=link.proficiency_level.value,
                )
            )
    
    def _model_to_entity(self, model: CurriculumModel) -> Curriculum:
        """Convert ORM model to domain entity."""
        professions = [
            ProfessionLink(
                profession_id=row.profession_id,
                registration_date=row.registration_date,
                experience_years=row.experience_years,
                proficiency_level=ProficiencyLevel(row.proficiency_level),
            )
            for row in sorted(model.professions, key=lambda r: r.registration_date)
        ]
        
        return Curriculum(
            id=model.id,
            professional_id=model.professional_id,
            professions=professions,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
