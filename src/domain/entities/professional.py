"""Professional entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from domain.clock import utc_now


@dataclass
class Professional:
    """
    Entity representing a job seeker.

    The monthly application count is derived from applications on read and
    is not an attribute of this entity.
    """

    first_name: str
    last_name: str
    email: str
    id: UUID = field(default_factory=uuid4)
    is_active: bool = True
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def set_active(self, active: bool, now: datetime) -> bool:
        """
        Activate or deactivate the professional.

        Returns:
            True if the flag changed
        """
        if self.is_active == active:
            return False
        self.is_active = active
        self.updated_at = now
        return True

    def __str__(self) -> str:
        return f"Professional(id={self.id}, name={self.full_name})"
