"""Domain Value Objects - Immutable objects without identity."""

from .eligibility import EligibilityDecision
from .expected_salary import ExpectedSalary
from .month_window import MonthWindow
from .statistics import ApplicationStats, JobOfferStats

__all__ = [
    "EligibilityDecision",
    "ExpectedSalary",
    "MonthWindow",
    "ApplicationStats",
    "JobOfferStats",
]
