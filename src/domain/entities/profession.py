"""Profession catalog entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from domain.clock import utc_now


@dataclass
class Profession:
    """
    Entity representing a profession of the catalog.

    ``registered_professionals`` and ``active_job_offers`` cache count
    queries over linking records and are only written by ``apply_counters``.
    """

    name: str
    code: str
    id: UUID = field(default_factory=uuid4)
    category: str = "Other"
    description: str = ""
    is_active: bool = True
    registered_professionals: int = 0
    active_job_offers: int = 0
    last_updated: datetime = field(default_factory=utc_now)

    @property
    def popularity(self) -> int:
        """Weighted demand score, professionals counting more than offers."""
        return round(self.registered_professionals * 0.7 + self.active_job_offers * 0.3)

    def apply_counters(
        self,
        registered_professionals: int,
        active_job_offers: int,
        now: datetime,
    ) -> None:
        """Replace both cached counters with freshly computed values."""
        if registered_professionals < 0 or active_job_offers < 0:
            raise ValueError("Profession counters cannot be negative")
        self.registered_professionals = registered_professionals
        self.active_job_offers = active_job_offers
        self.last_updated = now

    def __str__(self) -> str:
        return f"Profession(code={self.code}, name={self.name})"
