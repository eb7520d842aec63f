"""Professional endpoints."""

from uuid import UUID
from fastapi import APIRouter, Depends

from application.services import ApplicationAdmissionService
from application.use_cases import SetProfessionalActiveUseCase
from presentation.api.v1.dependencies import (
    get_admission_service,
    get_set_professional_active_use_case,
)
from presentation.schemas import ActivationRequest, MonthlyCountResponse, ProfessionalResponse

router = APIRouter(prefix="/professionals", tags=["professionals"])


@router.post("/{professional_id}/activation", response_model=ProfessionalResponse)
async def set_professional_active(
    professional_id: UUID,
    request: ActivationRequest,
    use_case: SetProfessionalActiveUseCase = Depends(get_set_professional_active_use_case),
) -> ProfessionalResponse:
    """Activate or deactivate a professional and refresh their profession counters."""
    professional = await use_case.execute(professional_id, request.active)
    return ProfessionalResponse.model_validate(professional)


@router.get("/{professional_id}/monthly-application-count", response_model=MonthlyCountResponse)
async def get_monthly_application_count(
    professional_id: UUID,
    admission: ApplicationAdmissionService = Depends(get_admission_service),
) -> MonthlyCountResponse:
    count = await admission.monthly_application_count(professional_id)
    return MonthlyCountResponse(
        professional_id=professional_id,
        monthly_count=count,
        monthly_cap=admission.monthly_cap,
    )
