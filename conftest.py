"""
Shared fixtures for the API tests.

Provides an unauthenticated DRF client, a registration factory and a
helper that signs postback payloads the way PayU does, using the
credentials from the test settings.
"""
from decimal import Decimal

import pytest
from django.conf import settings as django_settings
from rest_framework.test import APIClient

from payu.hashing import response_hash
from registrations.models import Registration


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_registration(db):
    """Create a registration; ``created_at`` may be forced for ordering tests."""
    counter = {"n": 0}

    def _make(created_at=None, **kwargs):
        counter["n"] += 1
        defaults = dict(
            txnid=f"TXNTEST{counter['n']:04d}",
            name="Asha Rao",
            email="asha@example.com",
            phone="9876543210",
            profession="Teacher",
            state="Karnataka",
            batch="B1",
            amount=Decimal("1.00"),
            payment_status=Registration.INITIATED,
        )
        defaults.update(kwargs)
        registration = Registration.objects.create(**defaults)
        if created_at is not None:
            Registration.objects.filter(pk=registration.pk).update(created_at=created_at)
            registration.refresh_from_db()
        return registration

    return _make


@pytest.fixture
def sign_postback():
    """Attach a valid PayU reverse hash to a postback payload."""

    def _sign(data):
        signed = dict(data)
        signed["hash"] = response_hash(
            django_settings.PAYU_MERCHANT_KEY, django_settings.PAYU_MERCHANT_SALT, signed
        )
        return signed

    return _sign
