"""SQLAlchemy implementation of job offer repository."""

from typing import Optional
from uuid import UUID
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domain.entities import JobOffer
from domain.enums import JobOfferStatus
from domain.exceptions import NotFoundError
from domain.repositories import IJobOfferRepository, JobOfferCriteria
from infrastructure.database.models import JobOfferModel, JobOfferProfessionModel


class SQLAlchemyJobOfferRepository(IJobOfferRepository):
    """Concrete implementation of IJobOfferRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, job_offer: JobOffer) -> JobOffer:
        """Create a new job offer in the database."""
        model = self._entity_to_model(job_offer)
        self.session.add(model)
        await self.session.flush()
        return self._model_to_entity(model)
    
    async def get_by_id(self, job_offer_id: UUID) -> Optional[JobOffer]:
        """Retrieve a job offer by ID."""
        model = await self._get_model(job_offer_id)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def update(self, job_offer: JobOffer) -> JobOffer:
        """Update an existing job offer."""
        model = await self._get_model(job_offer.id)
        
        if model is None:
            raise NotFoundError("Job offer", job_offer.id)
        
        self._update_model_from_entity(model, job_offer)
        await self.session.flush()
        
        return self._model_to_entity(model)
    
    async def count(self, criteria: JobOfferCriteria) -> int:
        """Count job offers matching the criteria."""
        stmt = (
            select(func.count())
            .select_from(JobOfferModel)
            .where(*self._conditions(criteria))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
    
    async def _get_model(self, job_offer_id: UUID) -> Optional[JobOfferModel]:
        stmt = (
            select(JobOfferModel)
            .where(JobOfferModel.id == job_offer_id)
            .options(selectinload(JobOfferModel.required_professions))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
    
    def _conditions(self, criteria: JobOfferCriteria) -> list:
        """Translate criteria into WHERE clauses."""
        conditions = []
        if criteria.required_profession_id is not None:
            conditions.append(
                JobOfferModel.id.in_(
                    select(JobOfferProfessionModel.job_offer_id).where(
                        JobOfferProfessionModel.profession_id == criteria.required_profession_id
                    )
                )
            )
        if criteria.employer_id is not None:
            conditions.append(JobOfferModel.employer_id == criteria.employer_id)
        if criteria.status is not None:
            conditions.append(JobOfferModel.status == criteria.status.value)
        if criteria.is_active is not None:
            conditions.append(JobOfferModel.is_active == criteria.is_active)
        if criteria.deadline_before is not None:
            conditions.append(JobOfferModel.application_deadline < criteria.deadline_before)
        return conditions
    
    def _entity_to_model(self, entity: JobOffer) -> JobOfferModel:
        """Convert domain entity to ORM model."""
        model = JobOfferModel(
            id=entity.id,
            employer_id=entity.employer_id,
            title=entity.title,
            description=entity.description,
            created_at=entity.created_at,
        )
        self._update_model_from_entity(model, entity)
        return model
    
    def _update_model_from_entity(self, model: JobOfferModel, entity: JobOffer) -> None:
        """Update ORM model from domain entity."""
        model.title = entity.title
        model.description = entity.description
        model.status = entity.status.value
        model.is_active = entity.is_active
        model.application_deadline = entity.application_deadline
        model.max_applications = entity.max_applications
        model.view_count = entity.view_count
        model.application_count = entity.application_count
        model.published_at = entity.published_at
        model.updated_at = entity.updated_at
        
        # Diff the links so unchanged rows are never deleted and re-inserted
        wanted = {pid: pos for pos, pid in enumerate(entity.required_profession_ids)}
        for link in list(model.required_professions):
            if link.profession_id in wanted:
                link.position = wanted.pop(link.profession_id)
            else:
                model.required_professions.remove(link)
        for profession_id, position in wanted.items():
            model.required_professions.append(
                JobOfferProfessionModel(profession_id=profession_id, position=position)
            )
    
    def _model_to_entity(self, model: JobOfferModel) -> JobOffer:
        """Convert ORM model to domain entity."""
        links = sorted(model.required_professions, key=lambda link: link.position)
        return JobOffer(
            id=model.id,
            employer_id=model.employer_id,
            title=model.title,
            description=model.description,
            status=JobOfferStatus(model.status),
            is_active=model.is_active,
            application_deadline=model.application_deadline,
            required_profession_ids=[link.profession_id for link in links],
            max_applications=model.max_applications,
            view_count=model.view_count,
            application_count=model.application_count,
            published_at=model.published_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
