"""Application services, one per core component."""

from .profession_demand_tracker import ProfessionDemandTracker, RecomputeReport
from .job_offer_lifecycle import JobOfferLifecycleService
from .application_admission import ApplicationAdmissionService
from .application_lifecycle import ApplicationLifecycleService
from .statistics_aggregator import StatisticsAggregator

__all__ = [
    "ProfessionDemandTracker",
    "RecomputeReport",
    "JobOfferLifecycleService",
    "ApplicationAdmissionService",
    "ApplicationLifecycleService",
    "StatisticsAggregator",
]
