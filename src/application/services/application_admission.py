"""Application admission control - Decides whether a professional may apply."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from application.services.application_counter import recompute_application_count
from domain.clock import Clock, utc_now
from domain.entities import Application
from domain.exceptions import AdmissionDeniedError, NotFoundError, ValidationError
from domain.repositories import (
    ApplicationCriteria,
    IApplicationRepository,
    IJobOfferRepository,
    IProfessionalRepository,
)
from domain.value_objects import EligibilityDecision, MonthWindow
from domain.value_objects.eligibility import (
    DUPLICATE_APPLICATION,
    MONTHLY_LIMIT_REACHED,
    OFFER_NOT_ACCEPTING,
    OFFER_NOT_FOUND,
)
from infrastructure.config import get_logger


class ApplicationAdmissionService:
    """
    Single entry point for "can this professional apply to this offer?".
    
    ``can_apply`` is the fast path. The storage uniqueness constraint on
    open applications is what actually guarantees at most one open
    application per professional and offer. The monthly cap spans offers,
    so ``create_application`` locks the professional row before counting.
    """
    
    def __init__(
        self,
        application_repository: IApplicationRepository,
        job_offer_repository: IJobOfferRepository,
        professional_repository: IProfessionalRepository,
        monthly_cap: int = 3,
        clock: Clock = utc_now,
    ):
        self.application_repo = application_repository
        self.job_offer_repo = job_offer_repository
        self.professional_repo = professional_repository
        self.monthly_cap = monthly_cap
        self._clock = clock
        self.logger = get_logger(self.__class__.__name__)
    
    async def can_apply(
        self,
        professional_id: UUID,
        job_offer_id: UUID,
    ) -> EligibilityDecision:
        """
        Evaluate the admission checks in order, stopping at the first failure.
        
        1. the offer exists
        2. the offer is accepting applications
        3. no open application of the professional to the offer
        4. fewer than ``monthly_cap`` non-rejected applications this month
        
        Args:
            professional_id: Applicant
            job_offer_id: Target offer
            
        Returns:
            EligibilityDecision carrying the current monthly count
        """
        now = self._clock()
        monthly_count = await self._count_in_month(professional_id, now)
        
        offer = await self.job_offer_repo.get_by_id(job_offer_id)
        if offer is None:
            return EligibilityDecision.denied(OFFER_NOT_FOUND, monthly_count)
        
        if not offer.is_accepting_applications(now):
            return EligibilityDecision.denied(OFFER_NOT_ACCEPTING, monthly_count)
        
        open_applications = await self.application_repo.count(
            ApplicationCriteria.open_for(professional_id, job_offer_id)
        )
        if open_applications > 0:
            return EligibilityDecision.denied(DUPLICATE_APPLICATION, monthly_count)
        
        if monthly_count >= self.monthly_cap:
            return EligibilityDecision.denied(MONTHLY_LIMIT_REACHED, monthly_count)
        
        return EligibilityDecision.eligible(monthly_count)
    
    async def monthly_application_count(self, professional_id: UUID) -> int:
        """
        Non-rejected applications of a professional in the current month.
        
        Raises:
            NotFoundError: If the professional does not exist
        """
        if await self.professional_repo.get_by_id(professional_id) is None:
            raise NotFoundError("Professional", professional_id)
        return await self._count_in_month(professional_id, self._clock())
    
    async def create_application(
        self,
        professional_id: Optional[UUID],
        job_offer_id: Optional[UUID],
        **content: Any,
    ) -> Application:
        """
        Admit and store a new Pending application.
        
        Args:
            professional_id: Applicant
            job_offer_id: Target offer
            **content: Cover letter, motivation, salary and other content fields
            
        Returns:
            The stored application
            
        Raises:
            ValidationError: If an id is missing or a content field is unknown
            NotFoundError: If the professional or the offer does not exist
            AdmissionDeniedError: If any admission check fails
            ConcurrencyConflictError: If a concurrent request stored an open
                application for the same pair first
        """
        if professional_id is None:
            raise ValidationError("professional_id", "Professional is required")
        if job_offer_id is None:
            raise ValidationError("job_offer_id", "Job offer is required")
        
        # Held until commit; serializes the monthly count per professional
        if await self.professional_repo.lock_for_admission(professional_id) is None:
            raise NotFoundError("Professional", professional_id)
        
        decision = await self.can_apply(professional_id, job_offer_id)
        if not decision.allowed:
            if decision.reason == OFFER_NOT_FOUND:
                raise NotFoundError("Job offer", job_offer_id)
            self.logger.warning(
                "Application denied",
                extra={
                    "professional_id": professional_id,
                    "job_offer_id": job_offer_id,
                    "reason": decision.reason,
                },
            )
            raise AdmissionDeniedError(decision.reason, decision.monthly_count)
        
        application = Application.submit(
            professional_id, job_offer_id, self._clock(), **content
        )
        created = await self.application_repo.create(application)
        self.logger.info(
            "Application created",
            extra={"application_id": created.id, "job_offer_id": job_offer_id},
        )
        
        await recompute_application_count(
            self.application_repo, self.job_offer_repo, job_offer_id
        )
        return created
    
    async def _count_in_month(self, professional_id: UUID, now: datetime) -> int:
        window = MonthWindow.containing(now)
        return await self.application_repo.count(
            ApplicationCriteria.counted_in_month(professional_id, window.start, window.end)
        )
