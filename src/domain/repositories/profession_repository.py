"""Profession repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import AsyncContextManager, Iterable, Optional
from uuid import UUID

from domain.entities import Profession


class IProfessionRepository(ABC):
    """Abstract repository interface for Profession entity."""

    @abstractmethod
    async def create(self, profession: Profession) -> Profession:
        """Persist a new profession."""
        pass

    @abstractmethod
    async def get_by_id(self, profession_id: UUID) -> Optional[Profession]:
        """
        Retrieve a profession by ID.

        Args:
            profession_id: Profession UUID

        Returns:
            Profession if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_many(self, profession_ids: Iterable[UUID]) -> list[Profession]:
        """Retrieve the professions that exist among the given IDs."""
        pass

    @abstractmethod
    async def list_active(self) -> list[Profession]:
        """List all active professions ordered by name."""
        pass

    @abstractmethod
    def savepoint(self) -> AsyncContextManager[None]:
        """
        Open a nested scope whose writes are undone if it exits with an error.

        Earlier writes of the surrounding unit of work are kept, so the
        caller may go on using the same session after a failure.
        """
        pass

    @abstractmethod
    async def save_counters(
        self,
        profession_id: UUID,
        registered_professionals: int,
        active_job_offers: int,
        last_updated: datetime,
    ) -> Profession:
        """
        Write both demand counters in a single update.

        Raises:
            NotFoundError: If the profession does not exist
        """
        pass
