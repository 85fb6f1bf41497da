from tickets.handlers.serializers import (
    CartItemSerializer,
    CheckoutReceiptSerializer,
    PurchaseRequestSerializer,
    PurchaseResultSerializer,
    TicketTypeSeedSerializer,
    build_ticket_type,
    parse_catalog,
)

__all__ = [
    "CartItemSerializer",
    "CheckoutReceiptSerializer",
    "PurchaseRequestSerializer",
    "PurchaseResultSerializer",
    "TicketTypeSeedSerializer",
    "build_ticket_type",
    "parse_catalog",
]
