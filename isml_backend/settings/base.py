"""
Base settings for the ISML registration backend.

Secrets and URLs come from the process environment (optionally a
``.env`` file).  Gateway credentials and URLs are allowed to be empty
here; the views that need them refuse to run with a 500 instead of the
whole process failing at import time.
"""
import os
from pathlib import Path

import dj_database_url
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent.parent

load_dotenv(os.path.join(BASE_DIR, ".env"))

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-insecure")
DEBUG = os.getenv("DJANGO_DEBUG", "False") == "True"

ALLOWED_HOSTS = [
    h.strip() for h in os.getenv("DJANGO_ALLOWED_HOSTS", "*").split(",") if h.strip()
]

# PayU merchant credentials
PAYU_MERCHANT_KEY = os.getenv("PAYU_MERCHANT_KEY", "").strip()
PAYU_MERCHANT_SALT = os.getenv("PAYU_MERCHANT_SALT", "").strip()
# Turning this off accepts unsigned gateway postbacks. Insecure, local testing only.
PAYU_VERIFY_CALLBACK_HASH = os.getenv("PAYU_VERIFY_CALLBACK_HASH", "True") == "True"

BACKEND_URL = os.getenv("BACKEND_URL", "")
FRONTEND_URL = os.getenv("FRONTEND_URL", "")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "")

PORT = int(os.getenv("PORT", "3000"))

INSTALLED_APPS = [
    # runserver override must come before any app shipping its own
    "registrations",
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",

    # Third-party apps
    "rest_framework",
    "corsheaders",

    # Local apps
    "payu",
    "admin_panel",
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",  # must be first for CORS
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "isml_backend.urls"
WSGI_APPLICATION = "isml_backend.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

# Store: DATABASE_URL connection string, SQLite for local development.
# A real DATABASE_URL connects with sslmode=require unless DATABASE_SSL_REQUIRE=False.
DATABASES = {
    "default": dj_database_url.config(
        default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}",
        conn_max_age=60,
        ssl_require=os.getenv(
            "DATABASE_SSL_REQUIRE", "True" if os.getenv("DATABASE_URL") else "False"
        ) == "True",
    )
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "Asia/Kolkata"
USE_I18N = True
USE_TZ = True

STATIC_URL = "/static/"

# No user accounts: admin routes are gated by ADMIN_PASSWORD inside the views
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
        "rest_framework.parsers.MultiPartParser",
    ],
    "UNAUTHENTICATED_USER": None,
}

# CORS configuration; an empty list means any origin, like a bare cors()
CORS_ALLOWED_ORIGINS = [
    o.strip() for o in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",") if o.strip()
]
CORS_ALLOW_ALL_ORIGINS = not CORS_ALLOWED_ORIGINS

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {"handlers": ["console"], "level": os.getenv("DJANGO_LOG_LEVEL", "INFO")},
    "loggers": {
        "django": {"handlers": ["console"], "level": "WARNING", "propagate": False},
    },
}
