"""Domain exception hierarchy.

Every rule violation in the core is raised as one of these types so the
presentation layer can map it to a response without inspecting messages.
"""

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """A referenced record does not exist."""

    def __init__(self, resource: str, identifier: Any):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidTransitionError(DomainError):
    """A state machine rule was violated."""

    def __init__(
        self,
        entity: str,
        current_state: str,
        action: str,
        detail: Optional[str] = None,
    ):
        self.entity = entity
        self.current_state = current_state
        self.action = action
        self.detail = detail
        message = f"Cannot {action} {entity} in state '{current_state}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class AdmissionDeniedError(DomainError):
    """A professional is not allowed to apply to a job offer."""

    def __init__(self, reason: str, monthly_count: int = 0):
        self.reason = reason
        self.monthly_count = monthly_count
        super().__init__(reason)


class ConcurrencyConflictError(AdmissionDeniedError):
    """The storage uniqueness constraint rejected a concurrent application."""

    def __init__(self, reason: str = "duplicate application", monthly_count: int = 0):
        super().__init__(reason, monthly_count)


class ValidationError(DomainError):
    """Malformed input at the boundary of the core."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")
