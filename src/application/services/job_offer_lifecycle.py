"""Job offer lifecycle service - Publication state machine and offer edits."""

from datetime import datetime
from typing import Iterable, Optional
from uuid import UUID

from application.services.profession_demand_tracker import ProfessionDemandTracker
from domain.clock import Clock, utc_now
from domain.entities import JobOffer
from domain.exceptions import NotFoundError, ValidationError
from domain.repositories import IJobOfferRepository, IProfessionRepository
from infrastructure.config import get_logger


class JobOfferLifecycleService:
    """
    Drives job offers through Draft, Published, Paused, Closed and Filled.
    
    Any change of ``is_active`` or of the required profession set is
    followed by a recompute of the affected profession counters.
    """
    
    def __init__(
        self,
        job_offer_repository: IJobOfferRepository,
        profession_repository: IProfessionRepository,
        demand_tracker: ProfessionDemandTracker,
        default_max_applications: int = 50,
        clock: Clock = utc_now,
    ):
        self.job_offer_repo = job_offer_repository
        self.profession_repo = profession_repository
        self.demand_tracker = demand_tracker
        self.default_max_applications = default_max_applications
        self._clock = clock
        self.logger = get_logger(self.__class__.__name__)
    
    async def get(self, job_offer_id: UUID) -> JobOffer:
        """
        Load an offer.
        
        Raises:
            NotFoundError: If the offer does not exist
        """
        offer = await self.job_offer_repo.get_by_id(job_offer_id)
        if offer is None:
            raise NotFoundError("Job offer", job_offer_id)
        return offer
    
    async def create_job_offer(
        self,
        employer_id: UUID,
        title: str,
        application_deadline: datetime,
        required_profession_ids: Iterable[UUID],
        description: str = "",
        max_applications: Optional[int] = None,
    ) -> JobOffer:
        """
        Create a Draft offer.
        
        Args:
            employer_id: Owning employer
            title: Position title
            application_deadline: Must lie in the future
            required_profession_ids: Active catalog professions
            description: Position description
            max_applications: Defaults to the configured value
            
        Returns:
            The stored offer
        """
        profession_ids = list(dict.fromkeys(required_profession_ids))
        await self._ensure_active_professions(profession_ids)
        
        offer = JobOffer.draft(
            employer_id=employer_id,
            title=title,
            description=description,
            application_deadline=application_deadline,
            required_profession_ids=profession_ids,
            max_applications=max_applications or self.default_max_applications,
            now=self._clock(),
        )
        created = await self.job_offer_repo.create(offer)
        self.logger.info(f"Job offer {created.id} created as draft")
        
        await self.demand_tracker.recompute_many(created.required_profession_ids)
        return created
    
    async def publish(self, job_offer_id: UUID) -> JobOffer:
        """Publish an offer whose deadline is still ahead."""
        offer = await self.get(job_offer_id)
        was_active = offer.is_active
        offer.publish(self._clock())
        return await self._save_transition(offer, was_active, "published")
    
    async def pause(self, job_offer_id: UUID) -> JobOffer:
        offer = await self.get(job_offer_id)
        was_active = offer.is_active
        offer.pause(self._clock())
        return await self._save_transition(offer, was_active, "paused")
    
    async def close(self, job_offer_id: UUID, filled: bool = False) -> JobOffer:
        """Close an offer, as Filled when ``filled`` is set."""
        offer = await self.get(job_offer_id)
        was_active = offer.is_active
        offer.close(self._clock(), filled=filled)
        return await self._save_transition(offer, was_active, "filled" if filled else "closed")
    
    async def reopen(self, job_offer_id: UUID) -> JobOffer:
        offer = await self.get(job_offer_id)
        was_active = offer.is_active
        offer.reopen(self._clock())
        return await self._save_transition(offer, was_active, "reopened")
    
    async def delete(self, job_offer_id: UUID) -> JobOffer:
        """Soft delete: the offer is closed and deactivated, never removed."""
        return await self.close(job_offer_id, filled=False)
    
    async def change_required_professions(
        self,
        job_offer_id: UUID,
        profession_ids: Iterable[UUID],
    ) -> JobOffer:
        """Replace the required professions and refresh the affected counters."""
        offer = await self.get(job_offer_id)
        new_ids = list(dict.fromkeys(profession_ids))
        await self._ensure_active_professions(new_ids)
        
        previous_ids = list(offer.required_profession_ids)
        affected = offer.change_required_professions(new_ids, self._clock())
        saved = await self.job_offer_repo.update(offer)
        
        if affected:
            self.logger.info(
                f"Job offer {saved.id} professions changed ({len(affected)} affected)"
            )
            await self.demand_tracker.recompute_many(
                pid for pid in previous_ids + new_ids if pid in affected
            )
        return saved
    
    async def extend_deadline(self, job_offer_id: UUID, new_deadline: datetime) -> JobOffer:
        offer = await self.get(job_offer_id)
        offer.extend_deadline(new_deadline, self._clock())
        saved = await self.job_offer_repo.update(offer)
        self.logger.info(f"Job offer {saved.id} deadline extended to {new_deadline.isoformat()}")
        return saved
    
    async def record_view(self, job_offer_id: UUID) -> JobOffer:
        offer = await self.get(job_offer_id)
        offer.record_view()
        return await self.job_offer_repo.update(offer)
    
    async def _save_transition(
        self,
        offer: JobOffer,
        was_active: bool,
        verb: str,
    ) -> JobOffer:
        saved = await self.job_offer_repo.update(offer)
        self.logger.info(
            f"Job offer {verb} (status={saved.status.value})",
            extra={"job_offer_id": saved.id},
        )
        
        if saved.is_active != was_active:
            await self.demand_tracker.recompute_many(saved.required_profession_ids)
        return saved
    
    async def _ensure_active_professions(self, profession_ids: list[UUID]) -> None:
        if not profession_ids:
            raise ValidationError(
                "required_profession_ids",
                "At least one required profession must be specified",
            )
        
        professions = await self.profession_repo.get_many(profession_ids)
        usable = {p.id for p in professions if p.is_active}
        missing = [str(pid) for pid in profession_ids if pid not in usable]
        if missing:
            raise ValidationError(
                "required_profession_ids",
                f"Unknown or inactive professions: {', '.join(missing)}",
            )
