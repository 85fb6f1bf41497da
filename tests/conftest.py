"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from tickets.domain import (
    VIP,
    Capacity,
    DiscountCode,
    DiscountPercent,
    Money,
    TicketType,
    TicketTypeId,
)
from tickets.services import CatalogService, InventoryCart, PricingEngine
from tickets.stores import InMemoryTicketTypeStore


def _ticket_type(
    id: int = 1,
    label: str = "General Admission",
    base_price: str = "50.00",
    discount: str = "0",
    quantity: int = 100,
    **kwargs,
) -> TicketType:
    return TicketType(
        id=TicketTypeId(id),
        label=label,
        base_price=Money(Decimal(base_price)),
        discount=DiscountPercent(Decimal(discount)),
        quantity=Capacity(quantity),
        **kwargs,
    )


@pytest.fixture
def make_ticket_type():
    return _ticket_type


@pytest.fixture
def event_date() -> datetime:
    return datetime(2025, 6, 1, 20, 0, tzinfo=timezone.utc)


@pytest.fixture
def ticket_types() -> list[TicketType]:
    return [
        _ticket_type(1, "General Admission", "50.00", "0", 100),
        _ticket_type(2, "Floor", "150.00", "10", 20),
        _ticket_type(3, "Backstage Pass", "250.00", "0", 5),
        _ticket_type(4, "VIP Lounge", "100.00", "0", 0, kind=VIP),
    ]


@pytest.fixture
def store(ticket_types) -> InMemoryTicketTypeStore:
    return InMemoryTicketTypeStore(ticket_types)


@pytest.fixture
def pricing() -> PricingEngine:
    return PricingEngine(
        discount_codes=[
            DiscountCode.multiplier("SAVE10", Decimal("0.90")),
            DiscountCode.multiplier("SAVE20", Decimal("0.80")),
            DiscountCode.multiplier("HALF", Decimal("0.50")),
        ],
    )


@pytest.fixture
def cart(store, pricing) -> InventoryCart:
    return InventoryCart(store, pricing)


@pytest.fixture
def catalog(store) -> CatalogService:
    return CatalogService(store)
