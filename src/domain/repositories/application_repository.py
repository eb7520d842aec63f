"""Application repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import Application
from domain.repositories.criteria import ApplicationCriteria


class IApplicationRepository(ABC):
    """
    Abstract repository interface for Application entity.

    Implementations must enforce uniqueness of
    (professional_id, job_offer_id, status_class) at the storage boundary.
    """

    @abstractmethod
    async def create(self, application: Application) -> Application:
        """
        Insert a new application.

        Args:
            application: Application entity to create

        Returns:
            Created Application

        Raises:
            ConcurrencyConflictError: If an open application already exists
                for the same professional and offer
        """
        pass

    @abstractmethod
    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        """
        Retrieve an application by ID.

        Args:
            application_id: Application UUID

        Returns:
            Application if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, application: Application) -> Application:
        """
        Persist the state of an existing application.

        Raises:
            NotFoundError: If the application does not exist
        """
        pass

    @abstractmethod
    async def count(self, criteria: ApplicationCriteria) -> int:
        """Count applications matching the criteria."""
        pass

    @abstractmethod
    async def find(self, criteria: ApplicationCriteria) -> list[Application]:
        """List applications matching the criteria, newest first."""
        pass
