"""Statistics aggregator - Read-only views over applications and offers."""

from domain.clock import Clock, utc_now
from domain.enums import ApplicationStatus, JobOfferStatus
from domain.repositories import (
    ApplicationCriteria,
    IApplicationRepository,
    IJobOfferRepository,
    JobOfferCriteria,
)
from domain.value_objects import ApplicationStats, JobOfferStats

SECONDS_PER_DAY = 86400


class StatisticsAggregator:
    """Computes statistics from current records on every call. Holds no state."""
    
    def __init__(
        self,
        application_repository: IApplicationRepository,
        job_offer_repository: IJobOfferRepository,
        clock: Clock = utc_now,
    ):
        self.application_repo = application_repository
        self.job_offer_repo = job_offer_repository
        self._clock = clock
    
    async def application_stats(self) -> ApplicationStats:
        """
        Count non-deleted applications by status.
        
        ``avg_days_to_review`` is the mean of ``reviewed_at - applied_at``
        over reviewed applications, 0.0 when nothing was reviewed yet.
        """
        repo = self.application_repo
        reviewed = await repo.find(ApplicationCriteria(reviewed=True))
        
        avg_days = 0.0
        if reviewed:
            total_seconds = sum(
                (a.reviewed_at - a.applied_at).total_seconds() for a in reviewed
            )
            avg_days = round(total_seconds / len(reviewed) / SECONDS_PER_DAY, 2)
        
        return ApplicationStats(
            total=await repo.count(ApplicationCriteria()),
            pending=await repo.count(self._by_status(ApplicationStatus.PENDING)),
            accepted=await repo.count(self._by_status(ApplicationStatus.ACCEPTED)),
            rejected=await repo.count(self._by_status(ApplicationStatus.REJECTED)),
            avg_days_to_review=avg_days,
        )
    
    async def job_offer_stats(self) -> JobOfferStats:
        repo = self.job_offer_repo
        return JobOfferStats(
            total=await repo.count(JobOfferCriteria()),
            active=await repo.count(JobOfferCriteria(is_active=True)),
            published=await repo.count(JobOfferCriteria(status=JobOfferStatus.PUBLISHED)),
            expired=await repo.count(JobOfferCriteria(deadline_before=self._clock())),
        )
    
    @staticmethod
    def _by_status(status: ApplicationStatus) -> ApplicationCriteria:
        return ApplicationCriteria(statuses=frozenset({status}))
