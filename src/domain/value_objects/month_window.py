"""Calendar month window used for the monthly application cap."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MonthWindow:
    """
    Half-open interval [start, end) covering one calendar month.

    Attributes:
        start: First instant of the month
        end: First instant of the following month
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        """Validate window bounds."""
        if self.start >= self.end:
            raise ValueError("Month window start must be before its end")

    @classmethod
    def containing(cls, moment: datetime) -> "MonthWindow":
        """Build the window of the calendar month that contains ``moment``."""
        start = moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        if start.month == 12:
            end = start.replace(year=start.year + 1, month=1)
        else:
            end = start.replace(month=start.month + 1)
        return cls(start=start, end=end)

    def __contains__(self, moment: datetime) -> bool:
        return self.start <= moment < self.end

    def __str__(self) -> str:
        return f"{self.start:%Y-%m}"
