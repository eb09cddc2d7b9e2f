"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from wansilog.domain.exceptions import FormatError, ValidationError

# Plain digits with an optional fraction: no sign, exponent or underscores.
AMOUNT_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)?")
MAX_TENDER = Decimal("1000000.00")


@dataclass(frozen=True)
class Money:
    """Cash amount in the stall's single currency.

    Uses Decimal so totals and change come out exact to the cent; a
    float would leave 0.30000000000000004 on the receipt.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def parse(raw: str) -> Money:
        """Read an amount typed by the operator, e.g. ``"400"`` or ``"$400.50"``.

        Raises FormatError for anything that is not plain digits with an
        optional fraction, or that exceeds MAX_TENDER.
        """
        text = raw.strip().removeprefix("$").replace(",", "")
        if not AMOUNT_PATTERN.fullmatch(text):
            raise FormatError(f"Invalid input {raw!r}. Please enter a valid amount.")
        value = Decimal(text)
        if value > MAX_TENDER:
            raise FormatError(f"Amount {raw!r} is too large. Maximum is ${MAX_TENDER:.2f}.")
        return Money(value)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative servings.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError("Quantity must be at least 1")

    def __str__(self) -> str:
        return str(self.value)
