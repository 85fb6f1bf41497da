"""Ticketing settings read from ``settings.TICKETING``.

Any key left out of the project settings falls back to ``DEFAULTS``.
"""

from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal

from django.conf import settings

DEFAULTS = {
    "EARLY_BIRD_WINDOW_DAYS": 30,
    "EARLY_BIRD_MULTIPLIER": "0.90",
    "DISCOUNT_CODES": {
        "SAVE10": "0.90",
        "SAVE20": "0.80",
        "HALF": "0.50",
    },
    "LOW_STOCK_THRESHOLD": 5,
    "SELLING_FAST_THRESHOLD": 10,
    "TAX_RATE": "0",
}


@dataclass(frozen=True)
class TicketingSettings:
    early_bird_window: timedelta
    early_bird_multiplier: Decimal
    discount_codes: dict[str, Decimal]
    low_stock_threshold: int
    selling_fast_threshold: int
    tax_rate: Decimal


def get_ticketing_settings() -> TicketingSettings:
    """Merge project overrides onto the defaults."""
    options = {**DEFAULTS, **getattr(settings, "TICKETING", {})}
    return TicketingSettings(
        early_bird_window=timedelta(days=int(options["EARLY_BIRD_WINDOW_DAYS"])),
        early_bird_multiplier=Decimal(str(options["EARLY_BIRD_MULTIPLIER"])),
        discount_codes={
            code: Decimal(str(factor))
            for code, factor in options["DISCOUNT_CODES"].items()
        },
        low_stock_threshold=int(options["LOW_STOCK_THRESHOLD"]),
        selling_fast_threshold=int(options["SELLING_FAST_THRESHOLD"]),
        tax_rate=Decimal(str(options["TAX_RATE"])),
    )
