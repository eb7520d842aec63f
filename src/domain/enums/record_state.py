"""Record deletion lifecycle."""

from enum import Enum


class RecordState(str, Enum):
    """Lifecycle of a stored record. DELETED is terminal."""

    ACTIVE = "Active"
    DELETED = "Deleted"

    def __str__(self) -> str:
        return self.value
