"""Profession demand tracker - Recomputes denormalized profession counters."""

from dataclasses import dataclass, field
from typing import Iterable
from uuid import UUID

from domain.clock import Clock, utc_now
from domain.entities import Profession
from domain.exceptions import NotFoundError
from domain.repositories import (
    ICurriculumRepository,
    IJobOfferRepository,
    IProfessionRepository,
    JobOfferCriteria,
)
from infrastructure.config import get_logger


@dataclass
class RecomputeReport:
    """Outcome of a full counter sweep."""
    
    updated: list[Profession] = field(default_factory=list)
    failed: list[UUID] = field(default_factory=list)


class ProfessionDemandTracker:
    """
    Keeps ``registered_professionals`` and ``active_job_offers`` in sync.
    
    Counters are always recomputed from the linking records and written in
    a single update, never incremented. Every mutation that changes a
    profession association calls ``recompute`` for the affected professions
    before it returns.
    """
    
    def __init__(
        self,
        profession_repository: IProfessionRepository,
        curriculum_repository: ICurriculumRepository,
        job_offer_repository: IJobOfferRepository,
        clock: Clock = utc_now,
    ):
        self.profession_repo = profession_repository
        self.curriculum_repo = curriculum_repository
        self.job_offer_repo = job_offer_repository
        self._clock = clock
        self.logger = get_logger(self.__class__.__name__)
    
    async def recompute(self, profession_id: UUID) -> Profession:
        """
        Recompute both counters of one profession.
        
        Args:
            profession_id: Profession to refresh
            
        Returns:
            The profession with its new counters
            
        Raises:
            NotFoundError: If the profession does not exist
        """
        profession = await self.profession_repo.get_by_id(profession_id)
        if profession is None:
            raise NotFoundError("Profession", profession_id)
        
        registered = await self.curriculum_repo.count_registered(profession_id)
        active_offers = await self.job_offer_repo.count(
            JobOfferCriteria(required_profession_id=profession_id, is_active=True)
        )
        
        now = self._clock()
        profession.apply_counters(registered, active_offers, now)
        saved = await self.profession_repo.save_counters(
            profession_id,
            registered_professionals=profession.registered_professionals,
            active_job_offers=profession.active_job_offers,
            last_updated=now,
        )
        
        self.logger.info(
            f"Profession {saved.code} recomputed: "
            f"{saved.registered_professionals} professionals, "
            f"{saved.active_job_offers} active offers"
        )
        return saved
    
    async def recompute_many(self, profession_ids: Iterable[UUID]) -> list[Profession]:
        """Recompute each distinct profession, in the order given."""
        return [
            await self.recompute(profession_id)
            for profession_id in dict.fromkeys(profession_ids)
        ]
    
    async def recompute_all(self) -> RecomputeReport:
        """
        Recompute every active profession.
        
        Each profession runs in its own savepoint. A failure on one
        profession undoes only its own writes, is logged, and the sweep
        moves on.
        
        Returns:
            RecomputeReport with the refreshed professions and the failed ids
        """
        report = RecomputeReport()
        professions = await self.profession_repo.list_active()
        
        for profession in professions:
            try:
                async with self.profession_repo.savepoint():
                    updated = await self.recompute(profession.id)
                report.updated.append(updated)
            except Exception as e:
                self.logger.error(
                    f"Failed to recompute profession {profession.code}: {str(e)}",
                    exc_info=True,
                    extra={"profession_id": profession.id},
                )
                report.failed.append(profession.id)
        
        self.logger.info(
            f"Profession sweep finished: {len(report.updated)} updated, "
            f"{len(report.failed)} failed"
        )
        return report
