from tickets.stores.interfaces import TicketTypeStore
from tickets.stores.memory_store import InMemoryTicketTypeStore

__all__ = ["TicketTypeStore", "InMemoryTicketTypeStore"]
