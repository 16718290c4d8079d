"""
Value types: Money, Quantity and SKU.

All three are immutable. Arithmetic returns new instances.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from .errors import CurrencyMismatchError

Numeric = Union[int, Decimal, str]

SKU_MIN_LENGTH = 3
SKU_MAX_LENGTH = 20


@dataclass(frozen=True)
class Money:
    """Monetary amount with an ISO currency code"""
    amount: Decimal
    currency: str = "USD"

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))

    @classmethod
    def usd(cls, amount: Numeric) -> "Money":
        return cls(Decimal(str(amount)), "USD")

    @classmethod
    def zero(cls, currency: str = "USD") -> "Money":
        return cls(Decimal("0"), currency)

    def add(self, other: "Money") -> "Money":
        """Add two amounts of the same currency"""
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot add {self.currency} and {other.currency}",
                self.currency,
                other.currency,
            )
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: "Money") -> "Money":
        """Subtract an amount of the same currency (result may be negative)"""
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot subtract {other.currency} from {self.currency}",
                self.currency,
                other.currency,
            )
        return Money(self.amount - other.amount, self.currency)

    def multiply(self, multiplier: Numeric) -> "Money":
        """Scale by a scalar. No rounding is applied."""
        return Money(self.amount * Decimal(str(multiplier)), self.currency)

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        return self.subtract(other)

    def __mul__(self, multiplier: Numeric) -> "Money":
        return self.multiply(multiplier)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


@dataclass(frozen=True)
class Quantity:
    """Whole-unit product quantity"""
    value: int

    def add(self, other: "Quantity") -> "Quantity":
        return Quantity(self.value + other.value)

    def subtract(self, other: "Quantity") -> "Quantity":
        # Not floored at zero
        return Quantity(self.value - other.value)

    @property
    def is_positive(self) -> bool:
        return self.value > 0

    @property
    def is_zero(self) -> bool:
        return self.value == 0

    def __add__(self, other: "Quantity") -> "Quantity":
        return self.add(other)

    def __sub__(self, other: "Quantity") -> "Quantity":
        return self.subtract(other)

    def __str__(self) -> str:
        return str(self.value)


def is_valid_sku(code: str) -> bool:
    """
    Check SKU format.

    A valid code is 3-20 characters long and contains only letters,
    digits and hyphens.
    """
    if not code or not code.strip():
        return False

    if len(code) < SKU_MIN_LENGTH or len(code) > SKU_MAX_LENGTH:
        return False

    return all(c.isalnum() or c == "-" for c in code)


@dataclass(frozen=True)
class SKU:
    """Stock keeping unit. Construction does not validate the code."""
    code: str

    def is_valid(self) -> bool:
        return is_valid_sku(self.code)

    def __str__(self) -> str:
        return self.code
