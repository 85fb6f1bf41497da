from tickets.services.cart_service import InventoryCart
from tickets.services.catalog_service import (
    CatalogService,
    InventoryStatus,
    TicketStatus,
)
from tickets.services.delivery_service import TicketMailer, TicketPrinter, ticket_info
from tickets.services.pricing_service import PricingEngine

__all__ = [
    "InventoryCart",
    "CatalogService",
    "InventoryStatus",
    "TicketStatus",
    "TicketPrinter",
    "TicketMailer",
    "ticket_info",
    "PricingEngine",
]
