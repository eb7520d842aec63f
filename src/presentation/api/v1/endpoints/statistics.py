"""Statistics endpoints."""

from fastapi import APIRouter, Depends

from application.services import StatisticsAggregator
from presentation.api.v1.dependencies import get_statistics_aggregator
from presentation.schemas import ApplicationStatsResponse, JobOfferStatsResponse

router = APIRouter(prefix="/statistics", tags=["statistics"])


@router.get("/applications", response_model=ApplicationStatsResponse)
async def get_application_stats(
    aggregator: StatisticsAggregator = Depends(get_statistics_aggregator),
) -> ApplicationStatsResponse:
    return ApplicationStatsResponse.model_validate(await aggregator.application_stats())


@router.get("/job-offers", response_model=JobOfferStatsResponse)
async def get_job_offer_stats(
    aggregator: StatisticsAggregator = Depends(get_statistics_aggregator),
) -> JobOfferStatsResponse:
    return JobOfferStatsResponse.model_validate(await aggregator.job_offer_stats())
