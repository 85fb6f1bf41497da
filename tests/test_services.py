"""Unit tests for CatalogService, TicketPrinter and TicketMailer.

These test availability labels, seeding and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

import pytest

from tickets.domain import ELECTRONIC, FREE_PASS, VIP
from tickets.domain.errors import (
    TicketNotEmailableError,
    TicketNotPrintableError,
    TicketTypeNotFoundError,
)
from tickets.services import (
    CatalogService,
    InventoryStatus,
    TicketMailer,
    TicketPrinter,
    TicketStatus,
)
from tickets.stores import InMemoryTicketTypeStore


class TestCatalogService:
    """Tests for CatalogService."""

    def test_seed_keeps_order(self, ticket_types):
        """Seeded ticket types are listed in seed order."""
        catalog = CatalogService(InMemoryTicketTypeStore())
        catalog.seed(reversed(ticket_types))
        assert [t.id.value for t in catalog.list_ticket_types()] == [4, 3, 2, 1]

    def test_get_ticket_type(self, catalog):
        """get_ticket_type returns the stored ticket type."""
        assert catalog.get_ticket_type(2).label == "Floor"

    def test_get_ticket_type_not_found_raises_error(self, catalog):
        """get_ticket_type raises TicketTypeNotFoundError for unknown IDs."""
        with pytest.raises(TicketTypeNotFoundError) as exc_info:
            catalog.get_ticket_type(42)
        assert exc_info.value.ticket_type_id == 42

    def test_get_ticket_type_malformed_id_raises_error(self, catalog):
        """get_ticket_type maps malformed IDs to TicketTypeNotFoundError."""
        with pytest.raises(TicketTypeNotFoundError):
            catalog.get_ticket_type(0)

    def test_available_tickets(self, catalog):
        """available_tickets sums every ticket type's quantity."""
        assert catalog.available_tickets() == 125

    @pytest.mark.parametrize(
        "quantity, status",
        [
            (0, TicketStatus.SOLD_OUT),
            (1, TicketStatus.ALMOST_GONE),
            (5, TicketStatus.ALMOST_GONE),
            (6, TicketStatus.AVAILABLE),
        ],
    )
    def test_ticket_status(self, catalog, make_ticket_type, quantity, status):
        """Ticket status follows the low-stock threshold."""
        assert catalog.ticket_status(make_ticket_type(quantity=quantity)) is status

    @pytest.mark.parametrize(
        "quantities, status",
        [
            ([0, 0], InventoryStatus.SOLD_OUT),
            ([4, 6], InventoryStatus.SELLING_FAST),
            ([5, 6], InventoryStatus.AVAILABLE),
        ],
    )
    def test_inventory_status(self, make_ticket_type, quantities, status):
        """Inventory status follows the selling-fast threshold."""
        store = InMemoryTicketTypeStore(
            [make_ticket_type(id=i, quantity=q) for i, q in enumerate(quantities, 1)]
        )
        assert CatalogService(store).inventory_status() is status

    def test_thresholds_from_settings(self, settings, store):
        """Thresholds are read from settings.TICKETING."""
        settings.TICKETING = {"SELLING_FAST_THRESHOLD": 500}
        assert CatalogService(store).inventory_status() is InventoryStatus.SELLING_FAST

    def test_availability_tracks_cart(self, catalog, cart):
        """Adding to the cart lowers what the catalog reports."""
        for _ in range(5):
            cart.add_to_cart(3)
        sold_out = catalog.get_ticket_type(3)
        assert catalog.ticket_status(sold_out) is TicketStatus.SOLD_OUT
        assert catalog.available_tickets() == 120


class TestTicketPrinter:
    """Tests for TicketPrinter."""

    def test_print_ticket(self, make_ticket_type):
        """Printable tickets render their label, kind and price."""
        ticket = make_ticket_type(label="VIP Lounge", base_price="100.00", kind=VIP)
        printed = TicketPrinter().print_ticket(ticket)
        assert printed == "VIP Lounge (vip), Price: $150.00"

    def test_print_all_skips_non_printable(self, make_ticket_type):
        """print_all checks the capability instead of failing."""
        tickets = [
            make_ticket_type(1, "General Admission"),
            make_ticket_type(2, "Free Pass", kind=FREE_PASS),
            make_ticket_type(3, "E-Ticket", kind=ELECTRONIC),
        ]
        printed = TicketPrinter().print_all(tickets)
        assert printed == ["General Admission (standard), Price: $50.00"]

    def test_print_non_printable_raises(self, make_ticket_type):
        """Printing without checking the capability raises."""
        with pytest.raises(TicketNotPrintableError):
            TicketPrinter().print_ticket(make_ticket_type(kind=FREE_PASS))


class TestTicketMailer:
    """Tests for TicketMailer."""

    def test_email_ticket(self, make_ticket_type, mailoutbox):
        """Emailable tickets are sent to the recipient."""
        ticket = make_ticket_type(label="E-Ticket", base_price="40.00", kind=ELECTRONIC)
        TicketMailer().email_ticket(ticket, "fan@example.com")
        assert len(mailoutbox) == 1
        message = mailoutbox[0]
        assert message.to == ["fan@example.com"]
        assert message.subject == "Your ticket: E-Ticket"
        assert message.body == "E-Ticket (electronic), Price: $40.00"

    def test_email_non_emailable_raises(self, make_ticket_type, mailoutbox):
        """Emailing a kind without the capability raises and sends nothing."""
        with pytest.raises(TicketNotEmailableError):
            TicketMailer().email_ticket(make_ticket_type(), "fan@example.com")
        assert mailoutbox == []
