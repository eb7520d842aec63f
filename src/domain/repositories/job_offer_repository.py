"""Job offer repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import JobOffer
from domain.repositories.criteria import JobOfferCriteria


class IJobOfferRepository(ABC):
    """
    Abstract repository interface for JobOffer entity.

    Concrete implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, job_offer: JobOffer) -> JobOffer:
        """
        Persist a new job offer.

        Args:
            job_offer: JobOffer entity to create

        Returns:
            Created JobOffer
        """
        pass

    @abstractmethod
    async def get_by_id(self, job_offer_id: UUID) -> Optional[JobOffer]:
        """
        Retrieve a job offer by ID.

        Args:
            job_offer_id: Job offer UUID

        Returns:
            JobOffer if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, job_offer: JobOffer) -> JobOffer:
        """
        Persist state, timestamps and profession links of an existing offer.

        Raises:
            NotFoundError: If the offer does not exist
        """
        pass

    @abstractmethod
    async def count(self, criteria: JobOfferCriteria) -> int:
        """Count job offers matching the criteria."""
        pass
