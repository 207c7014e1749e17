"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
Values built from user input are validated on construction; values read
back from the backend go through the ``stored()`` factories unchecked.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from insuite.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount (prices and costs), non-negative when entered.

    The backend stores plain numerics; the Decimal keeps sums exact
    until they are formatted for display.
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
        return Money._unchecked(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money._unchecked(self.amount * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return format_amount(self.amount)

    def __float__(self) -> float:
        return float(self.amount)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def stored(amount: str | float | int | Decimal | None) -> Money:
        """Rebuild an amount read back from the backend.

        Rows may have been written by other clients without any checks, so
        negative amounts are kept as they are. A null amount reads as zero.
        """
        try:
            value = Decimal(str(amount if amount is not None else 0).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money._unchecked(value)

    @staticmethod
    def _unchecked(amount: Decimal) -> Money:
        money = object.__new__(Money)
        object.__setattr__(money, "amount", amount)
        return money


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot sell zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    @staticmethod
    def stored(value: int) -> Quantity:
        """Rebuild a quantity read back from the backend, unchecked."""
        quantity = object.__new__(Quantity)
        object.__setattr__(quantity, "value", int(value))
        return quantity

    def __str__(self) -> str:
        return str(self.value)


def format_amount(amount: Decimal) -> str:
    """Two-decimal currency display; negative amounts keep their sign."""
    if amount < 0:
        return f"-${-amount:.2f}"
    return f"${amount:.2f}"
