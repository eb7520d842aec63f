"""Pydantic schemas for request/response validation."""

from .common_schemas import ErrorResponse, ActivationRequest, HealthResponse
from .job_offer_schemas import (
    JobOfferCreateRequest,
    JobOfferCloseRequest,
    JobOfferProfessionsRequest,
    ExtendDeadlineRequest,
    JobOfferResponse,
)
from .application_schemas import (
    ApplicationCreateRequest,
    ApplicationUpdateRequest,
    ReviewRequest,
    AcceptRequest,
    RejectRequest,
    PriorityRequest,
    EligibilityResponse,
    MonthlyCountResponse,
    ApplicationResponse,
)
from .profession_schemas import (
    ProfessionResponse,
    RecomputeAllResponse,
    CurriculumProfessionRequest,
    CurriculumResponse,
    ProfessionalResponse,
)
from .statistics_schemas import ApplicationStatsResponse, JobOfferStatsResponse

__all__ = [
    "ErrorResponse",
    "ActivationRequest",
    "HealthResponse",
    "JobOfferCreateRequest",
    "JobOfferCloseRequest",
    "JobOfferProfessionsRequest",
    "ExtendDeadlineRequest",
    "JobOfferResponse",
    "ApplicationCreateRequest",
    "ApplicationUpdateRequest",
    "ReviewRequest",
    "AcceptRequest",
    "RejectRequest",
    "PriorityRequest",
    "EligibilityResponse",
    "MonthlyCountResponse",
    "ApplicationResponse",
    "ProfessionResponse",
    "RecomputeAllResponse",
    "CurriculumProfessionRequest",
    "CurriculumResponse",
    "ProfessionalResponse",
    "ApplicationStatsResponse",
    "JobOfferStatsResponse",
]
