"""Curriculum profession link endpoints."""

from uuid import UUID
from fastapi import APIRouter, Depends, status

from application.use_cases import (
    AddCurriculumProfessionUseCase,
    RemoveCurriculumProfessionUseCase,
    SetCurriculumActiveUseCase,
)
from presentation.api.v1.dependencies import (
    get_add_curriculum_profession_use_case,
    get_remove_curriculum_profession_use_case,
    get_set_curriculum_active_use_case,
)
from presentation.schemas import (
    ActivationRequest,
    CurriculumProfessionRequest,
    CurriculumResponse,
)

router = APIRouter(prefix="/curricula", tags=["curricula"])


@router.post(
    "/{curriculum_id}/professions",
    response_model=CurriculumResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_curriculum_profession(
    curriculum_id: UUID,
    request: CurriculumProfessionRequest,
    use_case: AddCurriculumProfessionUseCase = Depends(get_add_curriculum_profession_use_case),
) -> CurriculumResponse:
    curriculum = await use_case.execute(
        curriculum_id,
        request.profession_id,
        experience_years=request.experience_years,
        proficiency_level=request.proficiency_level,
    )
    return CurriculumResponse.model_validate(curriculum)


@router.delete("/{curriculum_id}/professions/{profession_id}", response_model=CurriculumResponse)
async def remove_curriculum_profession(
    curriculum_id: UUID,
    profession_id: UUID,
    use_case: RemoveCurriculumProfessionUseCase = Depends(get_remove_curriculum_profession_use_case),
) -> CurriculumResponse:
    curriculum = await use_case.execute(curriculum_id, profession_id)
    return CurriculumResponse.model_validate(curriculum)


@router.post("/{curriculum_id}/activation", response_model=CurriculumResponse)
async def set_curriculum_active(
    curriculum_id: UUID,
    request: ActivationRequest,
    use_case: SetCurriculumActiveUseCase = Depends(get_set_curriculum_active_use_case),
) -> CurriculumResponse:
    curriculum = await use_case.execute(curriculum_id, request.active)
    return CurriculumResponse.model_validate(curriculum)
