"""Application entity and its review state machine."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from domain.clock import utc_now
from domain.enums import ApplicationPriority, ApplicationStatus, RecordState
from domain.exceptions import InvalidTransitionError, ValidationError
from domain.value_objects import ExpectedSalary


OPEN_STATUS_CLASS = "open"

UPDATABLE_FIELDS = frozenset({
    "cover_letter",
    "motivation",
    "expected_salary",
    "availability_date",
    "additional_skills",
})

_REVIEW_OUTCOMES = frozenset({ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED})


@dataclass
class Application:
    """
    Entity representing a professional's application to a job offer.

    Created only after admission succeeds. PENDING is the single
    non-terminal review state; deletion is a separate lifecycle
    (``record_state``) that never changes ``status``.
    """

    professional_id: UUID
    job_offer_id: UUID
    id: UUID = field(default_factory=uuid4)
    status: ApplicationStatus = ApplicationStatus.PENDING
    record_state: RecordState = RecordState.ACTIVE
    priority: ApplicationPriority = ApplicationPriority.MEDIUM

    # Content
    cover_letter: Optional[str] = None
    motivation: Optional[str] = None
    expected_salary: Optional[ExpectedSalary] = None
    availability_date: Optional[datetime] = None
    additional_skills: list[str] = field(default_factory=list)

    # Review
    applied_at: datetime = field(default_factory=utc_now)
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[UUID] = None
    notes: Optional[str] = None
    updated_at: datetime = field(default_factory=utc_now)

    @classmethod
    def submit(
        cls,
        professional_id: UUID,
        job_offer_id: UUID,
        now: datetime,
        **content: Any,
    ) -> "Application":
        """Build a new pending application dated ``now``."""
        _check_fields(content)
        return cls(
            professional_id=professional_id,
            job_offer_id=job_offer_id,
            applied_at=now,
            updated_at=now,
            **content,
        )

    @property
    def is_active(self) -> bool:
        return self.record_state == RecordState.ACTIVE

    @property
    def is_reviewed(self) -> bool:
        return self.status.is_terminal

    @property
    def status_class(self) -> Optional[str]:
        """
        Uniqueness bucket of the application.

        Non-deleted pending and accepted applications share one bucket per
        (professional, offer) pair; everything else is unconstrained.
        """
        if self.is_active and self.status.is_open:
            return OPEN_STATUS_CLASS
        return None

    def update(self, now: datetime, **fields: Any) -> None:
        """
        Edit the application content before it is reviewed.

        Raises:
            InvalidTransitionError: If the application was reviewed or deleted
            ValidationError: If a field cannot be edited
        """
        self._ensure_pending("update")
        _check_fields(fields)

        for name, value in fields.items():
            setattr(self, name, value)
        self._mark_updated(now)

    def review(
        self,
        new_status: ApplicationStatus,
        now: datetime,
        notes: Optional[str] = None,
        reviewer_id: Optional[UUID] = None,
    ) -> None:
        """
        Record the employer's decision.

        Args:
            new_status: ACCEPTED or REJECTED
            now: Current time
            notes: Optional reviewer notes
            reviewer_id: Optional reviewing employer
        """
        if new_status not in _REVIEW_OUTCOMES:
            raise ValidationError("status", "Review outcome must be Accepted or Rejected")
        self._ensure_pending("review")

        self.status = new_status
        self.reviewed_at = now
        if reviewer_id is not None:
            self.reviewed_by = reviewer_id
        if notes:
            self.notes = notes
        self._mark_updated(now)

    def accept(
        self,
        now: datetime,
        reviewer_id: Optional[UUID] = None,
        notes: Optional[str] = None,
    ) -> None:
        self.review(ApplicationStatus.ACCEPTED, now, notes=notes, reviewer_id=reviewer_id)

    def reject(
        self,
        now: datetime,
        reviewer_id: Optional[UUID] = None,
        reason: Optional[str] = None,
    ) -> None:
        self.review(ApplicationStatus.REJECTED, now, notes=reason, reviewer_id=reviewer_id)

    def set_priority(self, priority: ApplicationPriority, now: datetime) -> None:
        """Change the employer-assigned priority."""
        if not self.is_active:
            raise self._transition_error("set priority of", "application has been deleted")
        self.priority = priority
        self._mark_updated(now)

    def soft_delete(self, now: datetime) -> None:
        """Withdraw a pending application. The review status is kept."""
        self._ensure_pending("delete")
        self.record_state = RecordState.DELETED
        self._mark_updated(now)

    def _ensure_pending(self, action: str) -> None:
        if not self.is_active:
            raise self._transition_error(action, "application has been deleted")
        if self.status != ApplicationStatus.PENDING:
            raise self._transition_error(action, "application has already been reviewed")

    def _transition_error(self, action: str, detail: str) -> InvalidTransitionError:
        state = self.status.value if self.is_active else RecordState.DELETED.value
        return InvalidTransitionError("application", state, action, detail)

    def _mark_updated(self, now: datetime) -> None:
        """Mark the entity as updated."""
        self.updated_at = now

    def __str__(self) -> str:
        return f"Application(id={self.id}, status={self.status})"


def _check_fields(fields: dict[str, Any]) -> None:
    unknown = sorted(set(fields) - UPDATABLE_FIELDS)
    if unknown:
        raise ValidationError(unknown[0], "Field cannot be set on an application")
