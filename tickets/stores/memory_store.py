"""In-memory implementation of the TicketTypeStore."""

from tickets.domain import TicketType, TicketTypeId
from tickets.stores.interfaces import TicketTypeStore


class InMemoryTicketTypeStore(TicketTypeStore):
    """Process-local catalog keyed by ticket type ID."""

    def __init__(self, ticket_types: list[TicketType] | None = None) -> None:
        self._ticket_types: dict[TicketTypeId, TicketType] = {}
        for ticket_type in ticket_types or ():
            self.save_ticket_type(ticket_type)

    def list_ticket_types(self) -> list[TicketType]:
        return list(self._ticket_types.values())

    def get_ticket_type(self, ticket_type_id: TicketTypeId) -> TicketType | None:
        return self._ticket_types.get(ticket_type_id)

    def save_ticket_type(self, ticket_type: TicketType) -> None:
        self._ticket_types[ticket_type.id] = ticket_type
