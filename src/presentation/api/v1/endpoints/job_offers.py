"""Job offer endpoints."""

from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, status

from application.services import JobOfferLifecycleService
from domain.clock import Clock
from domain.entities import JobOffer
from presentation.api.v1.dependencies import get_clock, get_job_offer_service
from presentation.schemas import (
    ExtendDeadlineRequest,
    JobOfferCloseRequest,
    JobOfferCreateRequest,
    JobOfferProfessionsRequest,
    JobOfferResponse,
)

router = APIRouter(prefix="/job-offers", tags=["job-offers"])


def _respond(offer: JobOffer, clock: Clock) -> JobOfferResponse:
    return JobOfferResponse.from_entity(offer, clock())


@router.post("", response_model=JobOfferResponse, status_code=status.HTTP_201_CREATED)
async def create_job_offer(
    request: JobOfferCreateRequest,
    service: JobOfferLifecycleService = Depends(get_job_offer_service),
    clock: Clock = Depends(get_clock),
) -> JobOfferResponse:
    """Create a job offer in the Draft state."""
    offer = await service.create_job_offer(
        employer_id=request.employer_id,
        title=request.title,
        description=request.description,
        application_deadline=request.application_deadline,
        required_profession_ids=request.required_profession_ids,
        max_applications=request.max_applications,
    )
    return _respond(offer, clock)


@router.get("/{job_offer_id}", response_model=JobOfferResponse)
async def get_job_offer(
    job_offer_id: UUID,
    service: JobOfferLifecycleService = Depends(get_job_offer_service),
    clock: Clock = Depends(get_clock),
) -> JobOfferResponse:
    return _respond(await service.get(job_offer_id), clock)


@router.post("/{job_offer_id}/publish", response_model=JobOfferResponse)
async def publish_job_offer(
    job_offer_id: UUID,
    service: JobOfferLifecycleService = Depends(get_job_offer_service),
    clock: Clock = Depends(get_clock),
) -> JobOfferResponse:
    """Publish an offer. Fails when the deadline has passed or the offer was filled."""
    return _respond(await service.publish(job_offer_id), clock)


@router.post("/{job_offer_id}/pause", response_model=JobOfferResponse)
async def pause_job_offer(
    job_offer_id: UUID,
    service: JobOfferLifecycleService = Depends(get_job_offer_service),
    clock: Clock = Depends(get_clock),
) -> JobOfferResponse:
    return _respond(await service.pause(job_offer_id), clock)


@router.post("/{job_offer_id}/close", response_model=JobOfferResponse)
async def close_job_offer(
    job_offer_id: UUID,
    request: Optional[JobOfferCloseRequest] = None,
    service: JobOfferLifecycleService = Depends(get_job_offer_service),
    clock: Clock = Depends(get_clock),
) -> JobOfferResponse:
    """Close an offer, optionally marking it as filled."""
    filled = request.filled if request else False
    return _respond(await service.close(job_offer_id, filled=filled), clock)


@router.post("/{job_offer_id}/reopen", response_model=JobOfferResponse)
async def reopen_job_offer(
    job_offer_id: UUID,
    service: JobOfferLifecycleService = Depends(get_job_offer_service),
    clock: Clock = Depends(get_clock),
) -> JobOfferResponse:
    return _respond(await service.reopen(job_offer_id), clock)


@router.put("/{job_offer_id}/professions", response_model=JobOfferResponse)
async def change_required_professions(
    job_offer_id: UUID,
    request: JobOfferProfessionsRequest,
    service: JobOfferLifecycleService = Depends(get_job_offer_service),
    clock: Clock = Depends(get_clock),
) -> JobOfferResponse:
    offer = await service.change_required_professions(job_offer_id, request.profession_ids)
    return _respond(offer, clock)


@router.post("/{job_offer_id}/extend-deadline", response_model=JobOfferResponse)
async def extend_deadline(
    job_offer_id: UUID,
    request: ExtendDeadlineRequest,
    service: JobOfferLifecycleService = Depends(get_job_offer_service),
    clock: Clock = Depends(get_clock),
) -> JobOfferResponse:
    offer = await service.extend_deadline(job_offer_id, request.application_deadline)
    return _respond(offer, clock)


@router.post("/{job_offer_id}/views", response_model=JobOfferResponse)
async def record_view(
    job_offer_id: UUID,
    service: JobOfferLifecycleService = Depends(get_job_offer_service),
    clock: Clock = Depends(get_clock),
) -> JobOfferResponse:
    return _respond(await service.record_view(job_offer_id), clock)


@router.delete("/{job_offer_id}", response_model=JobOfferResponse)
async def delete_job_offer(
    job_offer_id: UUID,
    service: JobOfferLifecycleService = Depends(get_job_offer_service),
    clock: Clock = Depends(get_clock),
) -> JobOfferResponse:
    """Soft delete: the offer is closed and deactivated."""
    return _respond(await service.delete(job_offer_id), clock)
