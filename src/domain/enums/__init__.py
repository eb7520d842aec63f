"""Domain Enums - Constant values used across the domain."""

from .job_offer_status import JobOfferStatus
from .application_status import ApplicationStatus, ApplicationPriority
from .record_state import RecordState
from .proficiency_level import ProficiencyLevel

__all__ = [
    "JobOfferStatus",
    "ApplicationStatus",
    "ApplicationPriority",
    "RecordState",
    "ProficiencyLevel",
]
