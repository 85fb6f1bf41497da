"""Ticket delivery - printed text and email.

Callers check ``TicketKind.supports_printing()`` or ``supports_email()``
before delivering.
"""

import logging
from collections.abc import Iterable

from django.conf import settings
from django.core.mail import send_mail

from tickets.domain import Money, TicketType
from tickets.domain.errors import TicketNotEmailableError, TicketNotPrintableError

logger = logging.getLogger(__name__)


def ticket_info(ticket_type: TicketType) -> str:
    price = Money.rounded(ticket_type.list_price)
    return f"{ticket_type.label} ({ticket_type.kind.name}), Price: ${price}"


class TicketPrinter:
    """Produces printable text for tickets whose kind allows it."""

    def print_ticket(self, ticket_type: TicketType) -> str:
        if not ticket_type.kind.supports_printing():
            raise TicketNotPrintableError(ticket_type.kind.name)
        return ticket_info(ticket_type)

    def print_all(self, ticket_types: Iterable[TicketType]) -> list[str]:
        """Print every printable ticket, skipping the rest."""
        printed = []
        for ticket_type in ticket_types:
            if not ticket_type.kind.supports_printing():
                logger.info("Skipping non-printable ticket type %s", ticket_type.id)
                continue
            printed.append(self.print_ticket(ticket_type))
        return printed


class TicketMailer:
    """Sends tickets by email for kinds that allow it."""

    subject = "Your ticket: {label}"

    def email_ticket(self, ticket_type: TicketType, recipient: str) -> None:
        if not ticket_type.kind.supports_email():
            raise TicketNotEmailableError(ticket_type.kind.name)
        send_mail(
            subject=self.subject.format(label=ticket_type.label),
            message=ticket_info(ticket_type),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[recipient],
        )
        logger.info("Emailed ticket type %s", ticket_type.id)
