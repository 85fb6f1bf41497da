"""Domain models for the ticket catalog, pricing and cart.

These are pure domain objects with no I/O. Catalog state is replaced,
never mutated in place; stores hold the current version of each TicketType.
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Self

from tickets.domain.value_objects import Capacity, DiscountPercent, Money, TicketTypeId

PriceRule = Callable[[Decimal], Decimal]


def scale_by(factor: Decimal) -> PriceRule:
    """Return a price rule multiplying the price by ``factor``."""
    return lambda price: price * factor


@dataclass(frozen=True)
class TicketKind:
    """Variant of a ticket: tier premium plus delivery capabilities."""

    name: str
    premium: PriceRule = field(compare=False)
    printable: bool = True
    emailable: bool = False

    def apply_premium(self, price: Decimal) -> Decimal:
        return self.premium(price)

    def supports_printing(self) -> bool:
        return self.printable

    def supports_email(self) -> bool:
        return self.emailable


STANDARD = TicketKind(name="standard", premium=scale_by(Decimal("1")))
VIP = TicketKind(name="vip", premium=scale_by(Decimal("1.5")), emailable=True)
ELECTRONIC = TicketKind(
    name="electronic", premium=scale_by(Decimal("1")), printable=False, emailable=True
)
FREE_PASS = TicketKind(
    name="free_pass", premium=scale_by(Decimal("0")), printable=False
)

TICKET_KINDS: dict[str, TicketKind] = {
    kind.name: kind for kind in (STANDARD, VIP, ELECTRONIC, FREE_PASS)
}


@dataclass(frozen=True)
class DiscountCode:
    """A named price rule matched case-insensitively."""

    code: str
    apply: PriceRule = field(compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", self.normalize(self.code))

    @staticmethod
    def normalize(code: str) -> str:
        return code.strip().upper()

    @classmethod
    def multiplier(cls, code: str, factor: Decimal) -> Self:
        return cls(code=code, apply=scale_by(factor))


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType in the catalog."""

    id: TicketTypeId
    label: str
    base_price: Money
    discount: DiscountPercent
    quantity: Capacity
    kind: TicketKind = STANDARD

    @property
    def list_price(self) -> Decimal:
        """Base price with the kind's premium applied."""
        return self.kind.apply_premium(self.base_price.amount)

    def with_quantity(self, quantity: Capacity) -> Self:
        return replace(self, quantity=quantity)


@dataclass(frozen=True)
class CartItem:
    """Snapshot of a TicketType taken when it was added to a cart."""

    ticket_type_id: TicketTypeId
    label: str
    price: Money
    discount: DiscountPercent
    quantity: int = 1

    @classmethod
    def snapshot(cls, ticket: TicketType, price: Money | None = None) -> Self:
        """Copy the ticket into a cart item, charging ``price`` if given."""
        return cls(
            ticket_type_id=ticket.id,
            label=ticket.label,
            price=price if price is not None else Money.rounded(ticket.list_price),
            discount=ticket.discount,
        )

    @property
    def savings(self) -> Decimal:
        """The item's own discount, rounded to cents."""
        return Money.rounded(self.discount.of(self.price.amount)).amount


@dataclass(frozen=True)
class CheckoutReceipt:
    """Result of checking out a cart."""

    items: tuple[CartItem, ...]
    subtotal: Money
    savings: Money
    total: Money


@dataclass(frozen=True)
class PurchaseResult:
    """Result of buying a single ticket."""

    ticket_type_id: TicketTypeId
    final_price: Money
    remaining_quantity: Capacity
