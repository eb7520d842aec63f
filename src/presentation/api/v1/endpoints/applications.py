"""Application endpoints."""

from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query, status

from application.services import ApplicationAdmissionService, ApplicationLifecycleService
from application.use_cases import SubmitApplicationUseCase
from presentation.api.v1.dependencies import (
    get_admission_service,
    get_application_service,
    get_submit_application_use_case,
)
from presentation.schemas import (
    AcceptRequest,
    ApplicationCreateRequest,
    ApplicationResponse,
    ApplicationUpdateRequest,
    EligibilityResponse,
    PriorityRequest,
    RejectRequest,
    ReviewRequest,
)

router = APIRouter(prefix="/applications", tags=["applications"])


@router.get("/eligibility", response_model=EligibilityResponse)
async def check_eligibility(
    professional_id: UUID = Query(..., description="Applicant"),
    job_offer_id: UUID = Query(..., description="Target offer"),
    admission: ApplicationAdmissionService = Depends(get_admission_service),
) -> EligibilityResponse:
    """Tell whether the professional may apply to the offer, and why not."""
    decision = await admission.can_apply(professional_id, job_offer_id)
    return EligibilityResponse.model_validate(decision)


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def create_application(
    request: ApplicationCreateRequest,
    use_case: SubmitApplicationUseCase = Depends(get_submit_application_use_case),
) -> ApplicationResponse:
    """Apply to a job offer. Refusals are reported with their admission reason."""
    application = await use_case.execute(
        request.professional_id,
        request.job_offer_id,
        **request.content_fields(),
    )
    return ApplicationResponse.from_entity(application)


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: UUID,
    service: ApplicationLifecycleService = Depends(get_application_service),
) -> ApplicationResponse:
    return ApplicationResponse.from_entity(await service.get(application_id))


@router.patch("/{application_id}", response_model=ApplicationResponse)
async def update_application(
    application_id: UUID,
    request: ApplicationUpdateRequest,
    service: ApplicationLifecycleService = Depends(get_application_service),
) -> ApplicationResponse:
    """Edit a pending application."""
    application = await service.update(application_id, **request.content_fields())
    return ApplicationResponse.from_entity(application)


@router.post("/{application_id}/review", response_model=ApplicationResponse)
async def review_application(
    application_id: UUID,
    request: ReviewRequest,
    service: ApplicationLifecycleService = Depends(get_application_service),
) -> ApplicationResponse:
    application = await service.review(
        application_id,
        request.status,
        notes=request.notes,
        reviewer_id=request.reviewer_id,
    )
    return ApplicationResponse.from_entity(application)


@router.post("/{application_id}/accept", response_model=ApplicationResponse)
async def accept_application(
    application_id: UUID,
    request: Optional[AcceptRequest] = None,
    service: ApplicationLifecycleService = Depends(get_application_service),
) -> ApplicationResponse:
    request = request or AcceptRequest()
    application = await service.accept(
        application_id, reviewer_id=request.reviewer_id, notes=request.notes
    )
    return ApplicationResponse.from_entity(application)


@router.post("/{application_id}/reject", response_model=ApplicationResponse)
async def reject_application(
    application_id: UUID,
    request: Optional[RejectRequest] = None,
    service: ApplicationLifecycleService = Depends(get_application_service),
) -> ApplicationResponse:
    request = request or RejectRequest()
    application = await service.reject(
        application_id, reviewer_id=request.reviewer_id, reason=request.reason
    )
    return ApplicationResponse.from_entity(application)


@router.post("/{application_id}/priority", response_model=ApplicationResponse)
async def set_application_priority(
    application_id: UUID,
    request: PriorityRequest,
    service: ApplicationLifecycleService = Depends(get_application_service),
) -> ApplicationResponse:
    application = await service.set_priority(application_id, request.priority)
    return ApplicationResponse.from_entity(application)


@router.delete("/{application_id}", response_model=ApplicationResponse)
async def delete_application(
    application_id: UUID,
    service: ApplicationLifecycleService = Depends(get_application_service),
) -> ApplicationResponse:
    """Withdraw a pending application."""
    return ApplicationResponse.from_entity(await service.soft_delete(application_id))
