"""Profession demand counter endpoints."""

from uuid import UUID
from fastapi import APIRouter, Depends

from application.services import ProfessionDemandTracker
from presentation.api.v1.dependencies import get_demand_tracker
from presentation.schemas import ProfessionResponse, RecomputeAllResponse

router = APIRouter(prefix="/professions", tags=["professions"])


@router.post("/stats", response_model=RecomputeAllResponse)
async def update_all_profession_stats(
    tracker: ProfessionDemandTracker = Depends(get_demand_tracker),
) -> RecomputeAllResponse:
    """Recompute the counters of every active profession."""
    report = await tracker.recompute_all()
    return RecomputeAllResponse(
        updated=[ProfessionResponse.model_validate(p) for p in report.updated],
        failed=report.failed,
    )


@router.post("/{profession_id}/stats", response_model=ProfessionResponse)
async def update_profession_stats(
    profession_id: UUID,
    tracker: ProfessionDemandTracker = Depends(get_demand_tracker),
) -> ProfessionResponse:
    return ProfessionResponse.model_validate(await tracker.recompute(profession_id))
