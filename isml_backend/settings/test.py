"""
Test settings.

In-memory SQLite and fixed gateway credentials so the suite never
depends on the developer's environment.
"""
from .base import *  # noqa

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PAYU_MERCHANT_KEY = "testkey"
PAYU_MERCHANT_SALT = "testsalt"
PAYU_VERIFY_CALLBACK_HASH = True

BACKEND_URL = "https://api.example.com"
FRONTEND_URL = "https://isml.example.com"
ADMIN_PASSWORD = "letmein"
PORT = 3000

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"null": {"class": "logging.NullHandler"}},
    "root": {"handlers": ["null"]},
}
