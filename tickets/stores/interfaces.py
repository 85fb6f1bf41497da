"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from tickets.domain import TicketType, TicketTypeId


class TicketTypeStore(ABC):
    """Interface for ticket catalog persistence operations."""

    @abstractmethod
    def list_ticket_types(self) -> list[TicketType]:
        """Return all ticket types in seed order."""
        ...

    @abstractmethod
    def get_ticket_type(self, ticket_type_id: TicketTypeId) -> TicketType | None:
        """Return a ticket type by ID, or None if not found."""
        ...

    @abstractmethod
    def save_ticket_type(self, ticket_type: TicketType) -> None:
        """Insert a ticket type or replace the stored version."""
        ...
