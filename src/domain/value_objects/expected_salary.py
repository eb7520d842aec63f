"""Expected salary value object attached to an application."""

from dataclasses import dataclass

SUPPORTED_CURRENCIES = ("CRC", "USD")


@dataclass(frozen=True)
class ExpectedSalary:
    """
    Immutable salary expectation of an applicant.

    Attributes:
        amount: Expected amount
        currency: Currency code (default: CRC)
        is_negotiable: Whether the amount is open to negotiation
    """

    amount: int
    currency: str = "CRC"
    is_negotiable: bool = True

    def __post_init__(self) -> None:
        """Validate salary constraints."""
        if self.amount < 0:
            raise ValueError("Expected salary cannot be negative")
        if self.currency not in SUPPORTED_CURRENCIES:
            raise ValueError(f"Currency must be one of: {', '.join(SUPPORTED_CURRENCIES)}")

    def __str__(self) -> str:
        negotiable = " (Negotiable)" if self.is_negotiable else ""
        return f"{self.amount:,} {self.currency}{negotiable}"
