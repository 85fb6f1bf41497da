"""Inventory cart - keeps a session cart consistent with the catalog.

Quantities are decremented when an item is added and restocked when it
is removed. Checkout only clears the cart.

Every item is priced in whole cents and its own discount is rounded per
item, so ``subtotal() - total_savings() == total()`` always holds.
"""

import logging
import threading
from contextlib import AbstractContextManager
from datetime import datetime
from decimal import Decimal

from tickets.domain import (
    CartItem,
    CheckoutReceipt,
    Money,
    PurchaseResult,
    TicketType,
)
from tickets.domain.errors import (
    EmptyCartError,
    InvalidIndexError,
    OutOfStockError,
    TicketTypeNotFoundError,
)
from tickets.services.catalog_service import ticket_type_key
from tickets.services.pricing_service import PricingEngine
from tickets.stores.interfaces import TicketTypeStore

logger = logging.getLogger(__name__)


class InventoryCart:
    """A purchase cart bound to one catalog store.

    Mutations run under ``lock``. Carts sharing a store must share the
    same lock, since the store replaces whole ticket types on save.
    """

    def __init__(
        self,
        store: TicketTypeStore,
        pricing: PricingEngine,
        lock: AbstractContextManager | None = None,
    ) -> None:
        self._store = store
        self._pricing = pricing
        self._items: list[CartItem] = []
        self._lock = lock if lock is not None else threading.RLock()

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def is_checkout_disabled(self) -> bool:
        return not self._items

    def quantity_in_cart(self, ticket_type_id: int) -> int:
        key = ticket_type_key(ticket_type_id)
        return sum(item.quantity for item in self._items if item.ticket_type_id == key)

    def _get_ticket_type(self, ticket_type_id: int) -> TicketType:
        ticket_type = self._store.get_ticket_type(ticket_type_key(ticket_type_id))
        if ticket_type is None:
            raise TicketTypeNotFoundError(ticket_type_id)
        return ticket_type

    def _take(self, ticket_type: TicketType, price: Money | None = None) -> CartItem:
        if ticket_type.quantity.is_empty():
            logger.warning("Ticket type %s is out of stock", ticket_type.id)
            raise OutOfStockError(ticket_type.id.value)

        item = CartItem.snapshot(ticket_type, price)
        self._store.save_ticket_type(
            ticket_type.with_quantity(ticket_type.quantity.decrement())
        )
        self._items.append(item)
        logger.info("Added ticket type %s to cart", ticket_type.id)
        return item

    def add_to_cart(self, ticket_type_id: int) -> CartItem:
        """Take one ticket out of stock and put its snapshot in the cart.

        Raises:
            TicketTypeNotFoundError: If the ticket type does not exist.
            OutOfStockError: If no tickets of this type are left.
        """
        with self._lock:
            return self._take(self._get_ticket_type(ticket_type_id))

    def remove_from_cart(self, index: int) -> None:
        """Remove the item at ``index`` and restock its ticket type.

        Raises:
            InvalidIndexError: If ``index`` does not reference an item.
        """
        with self._lock:
            if not 0 <= index < len(self._items):
                logger.warning("Rejected removal of cart index %d", index)
                raise InvalidIndexError(index)

            item = self._items[index]
            ticket_type = self._store.get_ticket_type(item.ticket_type_id)
            if ticket_type is None:
                raise TicketTypeNotFoundError(item.ticket_type_id.value)

            del self._items[index]
            self._store.save_ticket_type(
                ticket_type.with_quantity(ticket_type.quantity.increment())
            )
            logger.info("Removed ticket type %s from cart", item.ticket_type_id)

    def subtotal(self) -> Money:
        return Money(sum((item.price.amount for item in self._items), Decimal()))

    def total_savings(self) -> Money:
        return Money(sum((item.savings for item in self._items), Decimal()))

    def total(self) -> Money:
        total = Money.zero()
        for item in self._items:
            total += self._pricing.calculate_final_price(item)
        return total

    def checkout(self) -> CheckoutReceipt:
        """Summarize and clear the cart.

        Raises:
            EmptyCartError: If there is nothing to check out.
        """
        with self._lock:
            if not self._items:
                raise EmptyCartError()
            receipt = CheckoutReceipt(
                items=tuple(self._items),
                subtotal=self.subtotal(),
                savings=self.total_savings(),
                total=self.total(),
            )
            self._items.clear()
            logger.info(
                "Checked out %d items, total %s", len(receipt.items), receipt.total
            )
            return receipt

    def purchase(
        self,
        ticket_type_id: int,
        event_date: datetime,
        discount_code: str | None = None,
        purchase_date: datetime | None = None,
    ) -> PurchaseResult:
        """Price one ticket for this purchase and add it to the cart.

        The cart item records the price from ``calculate_price``, so the
        reported ``final_price`` is what checkout charges for it. Nothing
        changes if pricing fails.

        Raises:
            TicketTypeNotFoundError: If the ticket type does not exist.
            OutOfStockError: If no tickets of this type are left.
        """
        with self._lock:
            ticket_type = self._get_ticket_type(ticket_type_id)
            price = self._pricing.calculate_price(
                ticket_type, purchase_date, event_date, discount_code
            )
            item = self._take(ticket_type, price)
            return PurchaseResult(
                ticket_type_id=ticket_type.id,
                final_price=self._pricing.calculate_final_price(item),
                remaining_quantity=ticket_type.quantity.decrement(),
            )
