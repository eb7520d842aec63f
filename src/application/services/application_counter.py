"""Recomputation of the per-offer application counter."""

from uuid import UUID

from domain.entities import JobOffer
from domain.exceptions import NotFoundError
from domain.repositories import (
    ApplicationCriteria,
    IApplicationRepository,
    IJobOfferRepository,
)


async def recompute_application_count(
    application_repository: IApplicationRepository,
    job_offer_repository: IJobOfferRepository,
    job_offer_id: UUID,
) -> JobOffer:
    """
    Store the number of non-deleted applications on the offer.
    
    Args:
        application_repository: Source of the count
        job_offer_repository: Offer storage
        job_offer_id: Offer to refresh
        
    Returns:
        The updated offer
    """
    offer = await job_offer_repository.get_by_id(job_offer_id)
    if offer is None:
        raise NotFoundError("Job offer", job_offer_id)
    
    count = await application_repository.count(
        ApplicationCriteria(job_offer_id=job_offer_id)
    )
    offer.set_application_count(count)
    return await job_offer_repository.update(offer)
