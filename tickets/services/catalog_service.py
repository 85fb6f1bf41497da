"""Catalog service - seeding and availability queries."""

import logging
from collections.abc import Iterable
from enum import Enum

from tickets.conf import get_ticketing_settings
from tickets.domain import TicketType, TicketTypeId
from tickets.domain.errors import TicketTypeNotFoundError
from tickets.stores.interfaces import TicketTypeStore

logger = logging.getLogger(__name__)


def ticket_type_key(ticket_type_id: int) -> TicketTypeId:
    """Parse a caller-supplied ID, mapping malformed IDs to not found."""
    try:
        return TicketTypeId(ticket_type_id)
    except (TypeError, ValueError):
        raise TicketTypeNotFoundError(ticket_type_id) from None


class TicketStatus(Enum):
    """Availability label for a single ticket type."""

    SOLD_OUT = "Sold Out"
    ALMOST_GONE = "Almost Gone"
    AVAILABLE = "Available"


class InventoryStatus(Enum):
    """Availability label for the whole catalog."""

    SOLD_OUT = "SOLD OUT"
    SELLING_FAST = "SELLING FAST"
    AVAILABLE = "TICKETS AVAILABLE"


class CatalogService:
    """Service for ticket catalog operations."""

    def __init__(
        self,
        store: TicketTypeStore,
        low_stock_threshold: int | None = None,
        selling_fast_threshold: int | None = None,
    ) -> None:
        options = get_ticketing_settings()
        self._store = store
        self._low_stock_threshold = (
            options.low_stock_threshold
            if low_stock_threshold is None
            else low_stock_threshold
        )
        self._selling_fast_threshold = (
            options.selling_fast_threshold
            if selling_fast_threshold is None
            else selling_fast_threshold
        )

    def seed(self, ticket_types: Iterable[TicketType]) -> None:
        """Load the initial catalog, in order."""
        count = 0
        for ticket_type in ticket_types:
            self._store.save_ticket_type(ticket_type)
            count += 1
        logger.info("Seeded catalog with %d ticket types", count)

    def list_ticket_types(self) -> list[TicketType]:
        return self._store.list_ticket_types()

    def get_ticket_type(self, ticket_type_id: int) -> TicketType:
        """Return a ticket type by ID.

        Raises:
            TicketTypeNotFoundError: If the ticket type does not exist.
        """
        ticket_type = self._store.get_ticket_type(ticket_type_key(ticket_type_id))
        if ticket_type is None:
            raise TicketTypeNotFoundError(ticket_type_id)
        return ticket_type

    def available_tickets(self) -> int:
        return sum(t.quantity.value for t in self._store.list_ticket_types())

    def ticket_status(self, ticket_type: TicketType) -> TicketStatus:
        if ticket_type.quantity.is_empty():
            return TicketStatus.SOLD_OUT
        if ticket_type.quantity.value <= self._low_stock_threshold:
            return TicketStatus.ALMOST_GONE
        return TicketStatus.AVAILABLE

    def inventory_status(self) -> InventoryStatus:
        available = self.available_tickets()
        if available == 0:
            return InventoryStatus.SOLD_OUT
        if available <= self._selling_fast_threshold:
            return InventoryStatus.SELLING_FAST
        return InventoryStatus.AVAILABLE
