"""Django settings for the ticketing module.

Only what the domain, services and serializers need: no database,
no URL configuration.
"""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"

INSTALLED_APPS = [
    "rest_framework",
    "tickets.apps.TicketsConfig",
]

DATABASES = {}

USE_TZ = True
TIME_ZONE = "UTC"

EMAIL_BACKEND = os.environ.get(
    "DJANGO_EMAIL_BACKEND", "django.core.mail.backends.console.EmailBackend"
)
DEFAULT_FROM_EMAIL = os.environ.get("DEFAULT_FROM_EMAIL", "tickets@example.com")

TICKETING = {
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

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "{levelname} {name} {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "tickets": {
            "handlers": ["console"],
            "level": os.environ.get("TICKETS_LOG_LEVEL", "INFO"),
        },
    },
}
