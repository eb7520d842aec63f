"""Job offer publication states."""

from enum import Enum


class JobOfferStatus(str, Enum):
    """States of the job offer state machine."""

    DRAFT = "Draft"
    PUBLISHED = "Published"
    PAUSED = "Paused"
    CLOSED = "Closed"
    FILLED = "Filled"

    def __str__(self) -> str:
        return self.value
