"""Typed query criteria, one per queried entity.

Repositories translate these into storage queries in a single place, so no
caller builds filters out of field-name strings.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from domain.enums import ApplicationStatus, JobOfferStatus


@dataclass(frozen=True)
class ApplicationCriteria:
    """
    Filter over applications. Unset attributes do not constrain the query.

    Deleted applications are excluded unless ``include_deleted`` is set.
    """

    professional_id: Optional[UUID] = None
    job_offer_id: Optional[UUID] = None
    statuses: Optional[frozenset[ApplicationStatus]] = None
    applied_from: Optional[datetime] = None
    applied_before: Optional[datetime] = None
    reviewed: Optional[bool] = None
    include_deleted: bool = False

    @classmethod
    def open_for(cls, professional_id: UUID, job_offer_id: UUID) -> "ApplicationCriteria":
        """Pending or accepted applications of one professional to one offer."""
        return cls(
            professional_id=professional_id,
            job_offer_id=job_offer_id,
            statuses=frozenset({ApplicationStatus.PENDING, ApplicationStatus.ACCEPTED}),
        )

    @classmethod
    def counted_in_month(
        cls, professional_id: UUID, start: datetime, end: datetime
    ) -> "ApplicationCriteria":
        """Non-rejected applications of a professional dated within [start, end)."""
        return cls(
            professional_id=professional_id,
            statuses=frozenset({ApplicationStatus.PENDING, ApplicationStatus.ACCEPTED}),
            applied_from=start,
            applied_before=end,
        )


@dataclass(frozen=True)
class JobOfferCriteria:
    """Filter over job offers. Unset attributes do not constrain the query."""

    required_profession_id: Optional[UUID] = None
    employer_id: Optional[UUID] = None
    status: Optional[JobOfferStatus] = None
    is_active: Optional[bool] = None
    deadline_before: Optional[datetime] = None
