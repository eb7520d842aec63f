"""Application lifecycle service - Review state machine of applications."""

from typing import Any, Optional
from uuid import UUID

from application.services.application_counter import recompute_application_count
from domain.clock import Clock, utc_now
from domain.entities import Application
from domain.enums import ApplicationPriority, ApplicationStatus
from domain.exceptions import NotFoundError
from domain.repositories import IApplicationRepository, IJobOfferRepository
from infrastructure.config import get_logger


class ApplicationLifecycleService:
    """Moves admitted applications from Pending to Accepted or Rejected."""
    
    def __init__(
        self,
        application_repository: IApplicationRepository,
        job_offer_repository: IJobOfferRepository,
        clock: Clock = utc_now,
    ):
        self.application_repo = application_repository
        self.job_offer_repo = job_offer_repository
        self._clock = clock
        self.logger = get_logger(self.__class__.__name__)
    
    async def get(self, application_id: UUID) -> Application:
        """
        Load an application, deleted ones included.
        
        Raises:
            NotFoundError: If the application does not exist
        """
        application = await self.application_repo.get_by_id(application_id)
        if application is None:
            raise NotFoundError("Application", application_id)
        return application
    
    async def update(self, application_id: UUID, **fields: Any) -> Application:
        """Edit the content of a pending application."""
        application = await self.get(application_id)
        application.update(self._clock(), **fields)
        return await self.application_repo.update(application)
    
    async def review(
        self,
        application_id: UUID,
        new_status: ApplicationStatus,
        notes: Optional[str] = None,
        reviewer_id: Optional[UUID] = None,
    ) -> Application:
        """
        Record the review outcome of a pending application.
        
        Args:
            application_id: Application to review
            new_status: ACCEPTED or REJECTED
            notes: Optional reviewer notes
            reviewer_id: Optional reviewing employer
            
        Returns:
            The reviewed application
        """
        application = await self.get(application_id)
        application.review(new_status, self._clock(), notes=notes, reviewer_id=reviewer_id)
        saved = await self.application_repo.update(application)
        self.logger.info(
            f"Application reviewed: {saved.status.value}",
            extra={"application_id": saved.id},
        )
        return saved
    
    async def accept(
        self,
        application_id: UUID,
        reviewer_id: Optional[UUID] = None,
        notes: Optional[str] = None,
    ) -> Application:
        return await self.review(
            application_id, ApplicationStatus.ACCEPTED, notes=notes, reviewer_id=reviewer_id
        )
    
    async def reject(
        self,
        application_id: UUID,
        reviewer_id: Optional[UUID] = None,
        reason: Optional[str] = None,
    ) -> Application:
        return await self.review(
            application_id, ApplicationStatus.REJECTED, notes=reason, reviewer_id=reviewer_id
        )
    
    async def set_priority(
        self,
        application_id: UUID,
        priority: ApplicationPriority,
    ) -> Application:
        application = await self.get(application_id)
        application.set_priority(priority, self._clock())
        return await self.application_repo.update(application)
    
    async def soft_delete(self, application_id: UUID) -> Application:
        """Withdraw a pending application and refresh the offer counter."""
        application = await self.get(application_id)
        application.soft_delete(self._clock())
        saved = await self.application_repo.update(application)
        self.logger.info("Application deleted", extra={"application_id": saved.id})
        
        await recompute_application_count(
            self.application_repo, self.job_offer_repo, saved.job_offer_id
        )
        return saved
