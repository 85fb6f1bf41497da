"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Self

CENT = Decimal("0.01")


@dataclass(frozen=True)
class TicketTypeId:
    """Unique identifier for a TicketType."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("TicketTypeId must be a positive integer")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=Decimal("0"))

    @classmethod
    def rounded(cls, amount: Decimal) -> Self:
        """Clamp at zero and round half-up to cents."""
        amount = max(amount, Decimal("0"))
        return cls(amount=amount.quantize(CENT, rounding=ROUND_HALF_UP))

    def __add__(self, other: Self) -> Self:
        return type(self)(amount=self.amount + other.amount)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")

    def decrement(self) -> Self:
        return type(self)(value=self.value - 1)

    def increment(self) -> Self:
        return type(self)(value=self.value + 1)

    def is_empty(self) -> bool:
        return self.value == 0


@dataclass(frozen=True)
class DiscountPercent:
    """Percentage off a ticket's price, between 0 and 100."""

    value: Decimal

    def __post_init__(self) -> None:
        if not Decimal("0") <= self.value <= Decimal("100"):
            raise ValueError("Discount percent must be between 0 and 100")

    def of(self, amount: Decimal) -> Decimal:
        return amount * self.value / Decimal("100")
