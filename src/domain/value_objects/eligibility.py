"""Eligibility decision returned by admission control."""

from dataclasses import dataclass


OFFER_NOT_FOUND = "offer not found"
OFFER_NOT_ACCEPTING = "offer not accepting applications"
DUPLICATE_APPLICATION = "duplicate application"
MONTHLY_LIMIT_REACHED = "monthly limit reached"
ELIGIBLE = "eligible"


@dataclass(frozen=True)
class EligibilityDecision:
    """
    Immutable outcome of a "can this professional apply?" check.

    Attributes:
        allowed: Whether an application may be created
        reason: One of the reason constants of this module
        monthly_count: Non-rejected applications of the professional this month
    """

    allowed: bool
    reason: str
    monthly_count: int = 0

    @classmethod
    def eligible(cls, monthly_count: int) -> "EligibilityDecision":
        return cls(allowed=True, reason=ELIGIBLE, monthly_count=monthly_count)

    @classmethod
    def denied(cls, reason: str, monthly_count: int) -> "EligibilityDecision":
        return cls(allowed=False, reason=reason, monthly_count=monthly_count)

    def __str__(self) -> str:
        verdict = "allowed" if self.allowed else "denied"
        return f"{verdict} ({self.reason}, {self.monthly_count} this month)"
