"""Application review states and priorities."""

from enum import Enum


class ApplicationStatus(str, Enum):
    """States of the application state machine. PENDING is the only non-terminal state."""

    PENDING = "Pending"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not ApplicationStatus.PENDING

    @property
    def is_open(self) -> bool:
        """Pending and accepted applications block a second one for the same offer."""
        return self in (ApplicationStatus.PENDING, ApplicationStatus.ACCEPTED)

    def __str__(self) -> str:
        return self.value


class ApplicationPriority(str, Enum):
    """Employer-assigned priority of an application."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    def __str__(self) -> str:
        return self.value
