"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    OUT_OF_STOCK = "OUT_OF_STOCK"
    INVALID_INDEX = "INVALID_INDEX"
    TICKET_TYPE_NOT_FOUND = "TICKET_TYPE_NOT_FOUND"
    EMPTY_CART = "EMPTY_CART"
    TICKET_NOT_PRINTABLE = "TICKET_NOT_PRINTABLE"
    TICKET_NOT_EMAILABLE = "TICKET_NOT_EMAILABLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class OutOfStockError(DomainError):
    """Raised when a ticket type has no quantity left."""

    def __init__(self, ticket_type_id: int) -> None:
        super().__init__(
            code=ErrorCode.OUT_OF_STOCK,
            message="No tickets available for this ticket type",
        )
        self.ticket_type_id = ticket_type_id


class InvalidIndexError(DomainError):
    """Raised when a cart index does not reference an item."""

    def __init__(self, index: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_INDEX,
            message="Cart item does not exist",
        )
        self.index = index


class TicketTypeNotFoundError(DomainError):
    """Raised when a ticket type is not in the catalog."""

    def __init__(self, ticket_type_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_TYPE_NOT_FOUND,
            message="Ticket type not found",
        )
        self.ticket_type_id = ticket_type_id


class EmptyCartError(DomainError):
    """Raised when checking out a cart with no items."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_CART,
            message="Cart is empty",
        )


class TicketNotPrintableError(DomainError):
    """Raised when printing a ticket kind that cannot be printed."""

    def __init__(self, kind: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_PRINTABLE,
            message="This ticket cannot be printed",
        )
        self.kind = kind


class TicketNotEmailableError(DomainError):
    """Raised when emailing a ticket kind that cannot be emailed."""

    def __init__(self, kind: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_EMAILABLE,
            message="This ticket cannot be sent by email",
        )
        self.kind = kind
