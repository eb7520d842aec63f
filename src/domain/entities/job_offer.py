"""Job offer entity and its publication state machine."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional
from uuid import UUID, uuid4

from domain.clock import utc_now
from domain.enums import JobOfferStatus
from domain.exceptions import InvalidTransitionError, ValidationError


MIN_MAX_APPLICATIONS = 1
MAX_MAX_APPLICATIONS = 1000

_PUBLISHABLE_FROM = frozenset({
    JobOfferStatus.DRAFT,
    JobOfferStatus.PUBLISHED,
    JobOfferStatus.PAUSED,
    JobOfferStatus.CLOSED,
})
_REOPENABLE_FROM = frozenset({JobOfferStatus.PAUSED, JobOfferStatus.CLOSED})


def _unique_ids(ids: Iterable[UUID]) -> list[UUID]:
    return list(dict.fromkeys(ids))


@dataclass
class JobOffer:
    """
    Entity representing a position posted by an employer.

    Expiry is never stored: ``is_expired`` is evaluated against the caller's
    clock every time. Admission must go through ``is_accepting_applications``,
    not ``status`` alone.
    """

    employer_id: UUID
    title: str
    application_deadline: datetime
    required_profession_ids: list[UUID] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)
    description: str = ""
    status: JobOfferStatus = JobOfferStatus.DRAFT
    is_active: bool = True
    max_applications: int = 50
    view_count: int = 0
    application_count: int = 0
    published_at: Optional[datetime] = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        """Validate offer invariants that hold in every state."""
        self.required_profession_ids = _unique_ids(self.required_profession_ids)
        if not self.required_profession_ids:
            raise ValidationError(
                "required_profession_ids",
                "At least one required profession must be specified",
            )
        if not MIN_MAX_APPLICATIONS <= self.max_applications <= MAX_MAX_APPLICATIONS:
            raise ValidationError(
                "max_applications",
                f"Must be between {MIN_MAX_APPLICATIONS} and {MAX_MAX_APPLICATIONS}",
            )

    @classmethod
    def draft(
        cls,
        employer_id: UUID,
        title: str,
        application_deadline: datetime,
        required_profession_ids: Iterable[UUID],
        now: datetime,
        description: str = "",
        max_applications: int = 50,
    ) -> "JobOffer":
        """
        Create a new offer in the Draft state.

        Args:
            employer_id: Owning employer
            title: Position title
            application_deadline: Last instant applications are accepted
            required_profession_ids: Professions the offer is open to
            now: Current time
            description: Position description
            max_applications: Upper bound on applications for the offer

        Returns:
            The new JobOffer

        Raises:
            ValidationError: If the deadline is not in the future
        """
        if application_deadline <= now:
            raise ValidationError(
                "application_deadline", "Application deadline must be in the future"
            )
        return cls(
            employer_id=employer_id,
            title=title,
            description=description,
            application_deadline=application_deadline,
            required_profession_ids=list(required_profession_ids),
            max_applications=max_applications,
            created_at=now,
            updated_at=now,
        )

    # Derived predicates

    def is_expired(self, now: datetime) -> bool:
        """Check whether the application deadline has passed."""
        return now > self.application_deadline

    def is_accepting_applications(self, now: datetime) -> bool:
        """Check whether a professional may currently apply to this offer."""
        return (
            self.status == JobOfferStatus.PUBLISHED
            and self.is_active
            and not self.is_expired(now)
        )

    def days_until_deadline(self, now: datetime) -> int:
        """Whole days left before the deadline, rounded up. Negative once expired."""
        remaining = (self.application_deadline - now).total_seconds()
        return math.ceil(remaining / 86400)

    # State machine

    def publish(self, now: datetime) -> None:
        """
        Publish the offer.

        ``published_at`` is recorded on the first publication only.

        Raises:
            InvalidTransitionError: If the offer is filled or its deadline is not in the future
        """
        if self.status not in _PUBLISHABLE_FROM:
            raise self._transition_error("publish", "offer has already been filled")
        if self.application_deadline <= now:
            raise self._transition_error(
                "publish", "application deadline must be in the future"
            )

        self.status = JobOfferStatus.PUBLISHED
        self.is_active = True
        if self.published_at is None:
            self.published_at = now
        self._mark_updated(now)

    def pause(self, now: datetime) -> None:
        """Pause a published offer. ``is_active`` is left untouched."""
        if self.status != JobOfferStatus.PUBLISHED:
            raise self._transition_error("pause", "only published offers can be paused")

        self.status = JobOfferStatus.PAUSED
        self._mark_updated(now)

    def close(self, now: datetime, filled: bool = False) -> None:
        """Close the offer, marking it Filled when the position was taken."""
        if self.status == JobOfferStatus.FILLED:
            raise self._transition_error("close", "offer has already been filled")

        self.status = JobOfferStatus.FILLED if filled else JobOfferStatus.CLOSED
        self.is_active = False
        self._mark_updated(now)

    def reopen(self, now: datetime) -> None:
        """Publish a paused or closed offer again."""
        if self.status not in _REOPENABLE_FROM:
            raise self._transition_error(
                "reopen", "only paused or closed offers can be reopened"
            )
        if self.is_expired(now):
            raise self._transition_error(
                "reopen", "application deadline has already passed"
            )

        self.status = JobOfferStatus.PUBLISHED
        self.is_active = True
        self._mark_updated(now)

    # Other mutations

    def change_required_professions(
        self, profession_ids: Iterable[UUID], now: datetime
    ) -> set[UUID]:
        """
        Replace the required profession set.

        Args:
            profession_ids: New required professions
            now: Current time

        Returns:
            Profession ids whose association with this offer changed
        """
        if self.status == JobOfferStatus.FILLED:
            raise self._transition_error(
                "change professions of", "offer has already been filled"
            )
        new_ids = _unique_ids(profession_ids)
        if not new_ids:
            raise ValidationError(
                "required_profession_ids",
                "At least one required profession must be specified",
            )

        affected = set(self.required_profession_ids) ^ set(new_ids)
        self.required_profession_ids = new_ids
        self._mark_updated(now)
        return affected

    def extend_deadline(self, new_deadline: datetime, now: datetime) -> None:
        """Move the application deadline further into the future."""
        if self.status == JobOfferStatus.FILLED:
            raise self._transition_error(
                "extend deadline of", "offer has already been filled"
            )
        if new_deadline <= now:
            raise ValidationError("application_deadline", "New deadline must be in the future")
        if new_deadline <= self.application_deadline:
            raise ValidationError(
                "application_deadline",
                "New deadline must be later than current deadline",
            )

        self.application_deadline = new_deadline
        self._mark_updated(now)

    def record_view(self) -> None:
        """Count one view of the offer."""
        self.view_count += 1

    def set_application_count(self, count: int) -> None:
        """Store the recomputed number of applications."""
        if count < 0:
            raise ValueError("Application count cannot be negative")
        self.application_count = count

    def _transition_error(self, action: str, detail: str) -> InvalidTransitionError:
        return InvalidTransitionError("job offer", self.status.value, action, detail)

    def _mark_updated(self, now: datetime) -> None:
        """Mark the entity as updated."""
        self.updated_at = now

    def __str__(self) -> str:
        return f"JobOffer(id={self.id}, status={self.status})"
