"""Value Objects for prices and ordered quantities.

The catalog reports bare prices (``precio``) with no currency, so Money
here is a single non-negative Decimal amount.  Both types reject bad
values on construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from orderflow.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """A catalog price, a detail amount or an order total.

    Decimal keeps sums of JSON-number prices free of float drift.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite() or self.amount < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, quantity: int) -> Money:
        if not isinstance(quantity, int):
            raise TypeError(f"Can only multiply Money by int, got {type(quantity).__name__}")
        return Money(self.amount * quantity)

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal | None) -> Money:
        """Coerce a wire value (JSON number or string) to Money."""
        if amount is None:
            raise ValidationError("Invalid money amount: None")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """Units of a product requested on one order detail; always positive."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
