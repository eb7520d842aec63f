"""SQLAlchemy implementation of profession repository."""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, Iterable, Optional
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Profession
from domain.exceptions import NotFoundError
from domain.repositories import IProfessionRepository
from infrastructure.database.models import ProfessionModel


class SQLAlchemyProfessionRepository(IProfessionRepository):
    """Concrete implementation of IProfessionRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, profession: Profession) -> Profession:
        """Create a new profession in the database."""
        model = ProfessionModel(
            id=profession.id,
            name=profession.name,
            code=profession.code,
            category=profession.category,
            description=profession.description,
            is_active=profession.is_active,
            registered_professionals=profession.registered_professionals,
            active_job_offers=profession.active_job_offers,
            last_updated=profession.last_updated,
        )
        self.session.add(model)
        await self.session.flush()
        return self._model_to_entity(model)
    
    async def get_by_id(self, profession_id: UUID) -> Optional[Profession]:
        """Retrieve a profession by ID."""
        model = await self.session.get(ProfessionModel, profession_id)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def get_many(self, profession_ids: Iterable[UUID]) -> list[Profession]:
        """Retrieve the existing professions among the given IDs."""
        ids = list(profession_ids)
        if not ids:
            return []
        stmt = select(ProfessionModel).where(ProfessionModel.id.in_(ids))
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars()]
    
    async def list_active(self) -> list[Profession]:
        """List all active professions ordered by name."""
        stmt = (
            select(ProfessionModel)
            .where(ProfessionModel.is_active == True)  # noqa: E712
            .order_by(ProfessionModel.name)
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars()]
    
    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        """Run the enclosed writes inside a SAVEPOINT."""
        async with self.session.begin_nested():
            yield
    
    async def save_counters(
        self,
        profession_id: UUID,
        registered_professionals: int,
        active_job_offers: int,
        last_updated: datetime,
    ) -> Profession:
        """Write both demand counters in one UPDATE."""
        model = await self.session.get(ProfessionModel, profession_id)
        
        if model is None:
            raise NotFoundError("Profession", profession_id)
        
        model.registered_professionals = registered_professionals
        model.active_job_offers = active_job_offers
        model.last_updated = last_updated
        await self.session.flush()
        
        return self._model_to_entity(model)
    
    def _model_to_entity(self, model: ProfessionModel) -> Profession:
        """Convert ORM model to domain entity."""
        return Profession(
            id=model.id,
            name=model.name,
            code=model.code,
            category=model.category,
            description=model.description,
            is_active=model.is_active,
            registered_professionals=model.registered_professionals,
            active_job_offers=model.active_job_offers,
            last_updated=model.last_updated,
        )
