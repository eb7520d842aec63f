"""Read-only aggregate views."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ApplicationStats:
    """Counts of non-deleted applications by status plus mean review time."""

    total: int = 0
    pending: int = 0
    accepted: int = 0
    rejected: int = 0
    avg_days_to_review: float = 0.0


@dataclass(frozen=True)
class JobOfferStats:
    """Counts of job offers by activity, publication and expiry."""

    total: int = 0
    active: int = 0
    published: int = 0
    expired: int = 0
