"""SQLAlchemy implementation of professional repository."""

from typing import Optional
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Professional
from domain.exceptions import NotFoundError
from domain.repositories import IProfessionalRepository
from infrastructure.database.models import ProfessionalModel


class SQLAlchemyProfessionalRepository(IProfessionalRepository):
    """Concrete implementation of IProfessionalRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, professional: Professional) -> Professional:
        """Create a new professional in the database."""
        model = ProfessionalModel(
            id=professional.id,
            first_name=professional.first_name,
            last_name=professional.last_name,
            email=professional.email,
            is_active=professional.is_active,
            created_at=professional.created_at,
            updated_at=professional.updated_at,
        )
        self.session.add(model)
        await self.session.flush()
        return self._model_to_entity(model)
    
    async def get_by_id(self, professional_id: UUID) -> Optional[Professional]:
        """Retrieve a professional by ID."""
        model = await self.session.get(ProfessionalModel, professional_id)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def lock_for_admission(self, professional_id: UUID) -> Optional[Professional]:
        """Load a professional with SELECT ... FOR UPDATE."""
        stmt = (
            select(ProfessionalModel)
            .where(ProfessionalModel.id == professional_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def update(self, professional: Professional) -> Professional:
        """Update an existing professional."""
        model = await self.session.get(ProfessionalModel, professional.id)
        
        if model is None:
            raise NotFoundError("Professional", professional.id)
        
        model.first_name = professional.first_name
        model.last_name = professional.last_name
        model.email = professional.email
        model.is_active = professional.is_active
        model.updated_at = professional.updated_at
        await self.session.flush()
        
        return self._model_to_entity(model)
    
    def _model_to_entity(self, model: ProfessionalModel) -> Professional:
        """Convert ORM model to domain entity."""
        return Professional(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
