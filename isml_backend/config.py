from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


@dataclass(frozen=True)
class BackendConfig:
    """Gateway credentials, public URLs and the admin password, snapshotted from settings per request."""

    merchant_key: str
    merchant_salt: str
    backend_url: str
    frontend_url: str
    admin_password: str
    verify_callback_hash: bool = True

    @classmethod
    def from_settings(cls):
        return cls(
            merchant_key=(settings.PAYU_MERCHANT_KEY or "").strip(),
            merchant_salt=(settings.PAYU_MERCHANT_SALT or "").strip(),
            backend_url=(settings.BACKEND_URL or "").rstrip("/"),
            frontend_url=(settings.FRONTEND_URL or "").rstrip("/"),
            admin_password=settings.ADMIN_PASSWORD or "",
            verify_callback_hash=settings.PAYU_VERIFY_CALLBACK_HASH,
        )

    def require(self, *names):
        """Return the named values, raising ImproperlyConfigured for any that are empty."""
        missing = [name for name in names if not getattr(self, name)]
        if missing:
            raise ImproperlyConfigured(f"Missing configuration: {', '.join(missing)}")
        values = tuple(getattr(self, name) for name in names)
        return values[0] if len(values) == 1 else values
