"""Pricing engine - computes what a ticket costs.

Policy when more than one reduction applies: the best price wins.
The early-bird price and the discount-code price are both derived from
the premium-adjusted base price and never stack.
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Self

from django.utils import timezone

from tickets.conf import get_ticketing_settings
from tickets.domain import CartItem, DiscountCode, Money, TicketType

logger = logging.getLogger(__name__)


class PricingEngine:
    """Computes ticket prices from a discount-code table and early-bird rule."""

    def __init__(
        self,
        discount_codes: Iterable[DiscountCode] = (),
        early_bird_window: timedelta = timedelta(days=30),
        early_bird_multiplier: Decimal = Decimal("0.90"),
        tax_rate: Decimal = Decimal("0"),
    ) -> None:
        self._discount_codes = {dc.code: dc for dc in discount_codes}
        self._early_bird_window = early_bird_window
        self._early_bird_multiplier = early_bird_multiplier
        self._tax_rate = tax_rate

    @classmethod
    def from_settings(cls) -> Self:
        """Build an engine from ``settings.TICKETING``."""
        options = get_ticketing_settings()
        return cls(
            discount_codes=[
                DiscountCode.multiplier(code, factor)
                for code, factor in options.discount_codes.items()
            ],
            early_bird_window=options.early_bird_window,
            early_bird_multiplier=options.early_bird_multiplier,
            tax_rate=options.tax_rate,
        )

    def find_discount_code(self, code: str | None) -> DiscountCode | None:
        """Return the registered code matching ``code``, ignoring case."""
        if not code:
            return None
        return self._discount_codes.get(DiscountCode.normalize(code))

    def is_early_bird(self, purchase_date: datetime, event_date: datetime) -> bool:
        return _aware(purchase_date) < _aware(event_date) - self._early_bird_window

    def calculate_price(
        self,
        ticket: TicketType,
        purchase_date: datetime | None,
        event_date: datetime,
        discount_code: str | None = None,
    ) -> Money:
        """Return the charged price of one ticket.

        A missing ``purchase_date`` means now. Unknown discount codes
        leave the price unchanged. Tax is added to the best price.
        """
        if purchase_date is None:
            purchase_date = timezone.now()

        price = ticket.list_price
        candidates = [price]

        if self.is_early_bird(purchase_date, event_date):
            candidates.append(price * self._early_bird_multiplier)

        matched = self.find_discount_code(discount_code)
        if matched is not None:
            candidates.append(matched.apply(price))
        elif discount_code:
            logger.debug("Ignoring unknown discount code %r", discount_code)

        final = Money.rounded(min(candidates) * (1 + self._tax_rate))
        logger.debug(
            "Priced ticket type %s at %s (list %s, code %r)",
            ticket.id,
            final,
            price,
            discount_code,
        )
        return final

    def calculate_final_price(self, item: CartItem) -> Money:
        """Return a cart item's price less its own discount."""
        return Money(item.price.amount - item.savings)


def _aware(value: datetime) -> datetime:
    if timezone.is_naive(value):
        return timezone.make_aware(value)
    return value
