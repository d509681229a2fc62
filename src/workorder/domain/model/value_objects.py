"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from workorder.domain.exceptions import ValidationError


def _to_decimal(value: str | float | int | Decimal, label: str) -> Decimal:
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {label}: {value!r}") from exc


@dataclass(frozen=True)
class Money:
    """Monetary amount.

    Uses Decimal so sums and products are exact.  Displayed as a plain
    number; there is no currency handling.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int | Decimal | LaborHours) -> Money:
        if isinstance(factor, LaborHours):
            factor = factor.value
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(self.amount * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return str(self.amount)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(_to_decimal(amount, "money amount"))


@dataclass(frozen=True)
class LaborHours:
    """A non-negative number of labor hours (fractions allowed)."""

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Labor hours must be a Decimal, got {type(self.value).__name__}"
            )
        if self.value < Decimal("0"):
            raise ValidationError(
                f"Labor hours cannot be negative, got {self.value}"
            )

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def of(value: str | float | int | Decimal) -> LaborHours:
        return LaborHours(_to_decimal(value, "labor hours"))
