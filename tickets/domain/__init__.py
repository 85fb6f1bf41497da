from tickets.domain.models import (
    ELECTRONIC,
    FREE_PASS,
    STANDARD,
    TICKET_KINDS,
    VIP,
    CartItem,
    CheckoutReceipt,
    DiscountCode,
    PurchaseResult,
    TicketKind,
    TicketType,
)
from tickets.domain.value_objects import Capacity, DiscountPercent, Money, TicketTypeId

__all__ = [
    "TicketType",
    "TicketKind",
    "CartItem",
    "CheckoutReceipt",
    "DiscountCode",
    "PurchaseResult",
    "STANDARD",
    "VIP",
    "ELECTRONIC",
    "FREE_PASS",
    "TICKET_KINDS",
    "TicketTypeId",
    "Money",
    "Capacity",
    "DiscountPercent",
]
