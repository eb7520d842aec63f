"""Professional repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import Professional


class IProfessionalRepository(ABC):
    """Abstract repository interface for Professional entity."""

    @abstractmethod
    async def create(self, professional: Professional) -> Professional:
        """Persist a new professional."""
        pass

    @abstractmethod
    async def get_by_id(self, professional_id: UUID) -> Optional[Professional]:
        """
        Retrieve a professional by ID.

        Args:
            professional_id: Professional UUID

        Returns:
            Professional if found, None otherwise
        """
        pass

    @abstractmethod
    async def lock_for_admission(self, professional_id: UUID) -> Optional[Professional]:
        """
        Retrieve a professional and hold a row lock until the unit of work ends.

        Concurrent admissions of the same professional queue behind the
        lock, so each one counts the applications the previous one stored.

        Returns:
            Professional if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, professional: Professional) -> Professional:
        """Persist an existing professional."""
        pass
