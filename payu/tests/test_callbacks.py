"""
Tests for the PayU success and failure postbacks.

Both routes accept fields from the body or the query string, verify the
gateway's reverse hash before touching the store and always finish with
a browser redirect to the frontend.
"""
from unittest.mock import patch
from urllib.parse import urlencode

import pytest
from django.db import DatabaseError

from registrations.models import Registration

SUCCESS_URL = "/payu-success"
FAILURE_URL = "/payu-failure"
FRONTEND = "https://isml.example.com"


def _postback(registration, **extra):
    data = {
        "txnid": registration.txnid,
        "status": "success",
        "mihpayid": "403993715521",
        "amount": "1.00",
        "productinfo": "ISML Foundation Program",
        "firstname": registration.name,
        "email": registration.email,
    }
    data.update(extra)
    return data


@pytest.mark.django_db
def test_success_marks_registration_paid(api_client, make_registration, sign_postback):
    registration = make_registration()
    resp = api_client.post(SUCCESS_URL, sign_postback(_postback(registration)))

    assert resp.status_code == 302
    assert resp["Location"] == f"{FRONTEND}/success"
    registration.refresh_from_db()
    assert registration.payment_status == Registration.SUCCESS
    assert registration.payu_txn_id == "403993715521"


@pytest.mark.django_db
def test_success_reads_query_parameters(api_client, make_registration, sign_postback):
    registration = make_registration()
    resp = api_client.get(SUCCESS_URL, sign_postback(_postback(registration)))

    assert resp.status_code == 302
    registration.refresh_from_db()
    assert registration.payment_status == Registration.SUCCESS


@pytest.mark.django_db
def test_success_without_mihpayid_records_null(api_client, make_registration, sign_postback):
    registration = make_registration()
    data = _postback(registration)
    del data["mihpayid"]
    api_client.post(SUCCESS_URL, sign_postback(data))

    registration.refresh_from_db()
    assert registration.payment_status == Registration.SUCCESS
    assert registration.payu_txn_id is None


@pytest.mark.django_db
def test_success_unknown_txnid_still_redirects(api_client, make_registration, sign_postback):
    registration = make_registration()
    data = _postback(registration, txnid="TXNDOESNOTEXIST")
    resp = api_client.post(SUCCESS_URL, sign_postback(data))

    assert resp.status_code == 302
    assert resp["Location"] == f"{FRONTEND}/success"
    registration.refresh_from_db()
    assert registration.payment_status == Registration.INITIATED


@pytest.mark.django_db
def test_success_ignores_non_success_status(api_client, make_registration, sign_postback):
    registration = make_registration()
    resp = api_client.post(SUCCESS_URL, sign_postback(_postback(registration, status="pending")))

    assert resp["Location"] == f"{FRONTEND}/success"
    registration.refresh_from_db()
    assert registration.payment_status == Registration.INITIATED


@pytest.mark.django_db
@pytest.mark.parametrize("bad_hash", [None, "deadbeef"])
def test_success_rejects_unsigned_postback(api_client, make_registration, bad_hash):
    registration = make_registration()
    data = _postback(registration)
    if bad_hash:
        data["hash"] = bad_hash
    resp = api_client.post(SUCCESS_URL, data)

    assert resp.status_code == 302
    assert resp["Location"] == f"{FRONTEND}/failure"
    registration.refresh_from_db()
    assert registration.payment_status == Registration.INITIATED
    assert registration.payu_txn_id is None


@pytest.mark.django_db
def test_success_rejects_tampered_amount(api_client, make_registration, sign_postback):
    registration = make_registration()
    data = sign_postback(_postback(registration))
    data["amount"] = "0.01"
    api_client.post(SUCCESS_URL, data)

    registration.refresh_from_db()
    assert registration.payment_status == Registration.INITIATED


@pytest.mark.django_db
def test_success_accepts_unsigned_when_verification_disabled(api_client, make_registration, settings):
    settings.PAYU_VERIFY_CALLBACK_HASH = False
    registration = make_registration()
    api_client.post(SUCCESS_URL, {"txnid": registration.txnid, "status": "success", "mihpayid": "1"})

    registration.refresh_from_db()
    assert registration.payment_status == Registration.SUCCESS


@pytest.mark.django_db
def test_success_missing_frontend_url_fails_before_update(api_client, make_registration, sign_postback, settings):
    settings.FRONTEND_URL = ""
    registration = make_registration()
    resp = api_client.post(SUCCESS_URL, sign_postback(_postback(registration)))

    assert resp.status_code == 500
    assert b"FRONTEND_URL missing" in resp.content
    registration.refresh_from_db()
    assert registration.payment_status == Registration.INITIATED


@pytest.mark.django_db
def test_success_missing_salt_with_verification(api_client, make_registration, settings):
    settings.PAYU_MERCHANT_SALT = ""
    registration = make_registration()
    resp = api_client.post(SUCCESS_URL, _postback(registration, hash="x"))

    assert resp.status_code == 500
    registration.refresh_from_db()
    assert registration.payment_status == Registration.INITIATED


@pytest.mark.django_db
def test_success_store_failure(api_client, make_registration, sign_postback):
    registration = make_registration()
    with patch("payu.views.Registration.objects.filter", side_effect=DatabaseError("down")):
        resp = api_client.post(SUCCESS_URL, sign_postback(_postback(registration)))
    assert resp.status_code == 500
    assert resp.content == b"Database error"
    assert "Location" not in resp


@pytest.mark.django_db
def test_failure_marks_registration_failed(api_client, make_registration, sign_postback):
    registration = make_registration()
    resp = api_client.post(FAILURE_URL, sign_postback(_postback(registration, status="failure")))

    assert resp.status_code == 302
    assert resp["Location"] == f"{FRONTEND}/failure"
    registration.refresh_from_db()
    assert registration.payment_status == Registration.FAILED


@pytest.mark.django_db
def test_failure_ignores_status_value(api_client, make_registration, sign_postback):
    registration = make_registration()
    api_client.post(FAILURE_URL, sign_postback(_postback(registration, status="success")))

    registration.refresh_from_db()
    assert registration.payment_status == Registration.FAILED


@pytest.mark.django_db
def test_failure_reads_query_parameters(api_client, make_registration, sign_postback):
    registration = make_registration()
    api_client.get(FAILURE_URL, sign_postback(_postback(registration, status="failure")))

    registration.refresh_from_db()
    assert registration.payment_status == Registration.FAILED


@pytest.mark.django_db
def test_failure_missing_frontend_url_redirects_to_root(api_client, make_registration, sign_postback, settings):
    settings.FRONTEND_URL = ""
    registration = make_registration()
    resp = api_client.post(FAILURE_URL, sign_postback(_postback(registration, status="failure")))

    assert resp.status_code == 302
    assert resp["Location"] == "/"
    registration.refresh_from_db()
    assert registration.payment_status == Registration.FAILED


@pytest.mark.django_db
def test_failure_rejects_unsigned_postback(api_client, make_registration):
    registration = make_registration()
    resp = api_client.post(FAILURE_URL, {"txnid": registration.txnid, "status": "failure"})

    assert resp["Location"] == f"{FRONTEND}/failure"
    registration.refresh_from_db()
    assert registration.payment_status == Registration.INITIATED


@pytest.mark.django_db
def test_failure_without_txnid_only_redirects(api_client):
    resp = api_client.post(FAILURE_URL, {"status": "failure"})
    assert resp.status_code == 302
    assert resp["Location"] == f"{FRONTEND}/failure"


@pytest.mark.django_db
def test_redelivered_failure_overrides_success(api_client, make_registration, sign_postback):
    # Last write wins: nothing guards against out-of-order postbacks
    registration = make_registration()
    api_client.post(SUCCESS_URL, sign_postback(_postback(registration)))
    api_client.post(FAILURE_URL, sign_postback(_postback(registration, status="failure")))

    registration.refresh_from_db()
    assert registration.payment_status == Registration.FAILED
    assert registration.payu_txn_id == "403993715521"


@pytest.mark.django_db
def test_failure_store_failure(api_client, make_registration, sign_postback):
    registration = make_registration()
    with patch("payu.views.Registration.objects.filter", side_effect=DatabaseError("down")):
        resp = api_client.post(FAILURE_URL, sign_postback(_postback(registration, status="failure")))

    assert resp.status_code == 500
    assert resp.content == b"Database error"
    assert "Location" not in resp
    registration.refresh_from_db()
    assert registration.payment_status == Registration.INITIATED


@pytest.mark.django_db
@pytest.mark.parametrize("url", [SUCCESS_URL, FAILURE_URL])
@pytest.mark.parametrize("body", [[1], ["txnid"], 7, "success"])
def test_callbacks_ignore_non_object_json_body(api_client, make_registration, url, body):
    registration = make_registration()
    resp = api_client.post(url, body, format="json")

    assert resp.status_code == 302
    registration.refresh_from_db()
    assert registration.payment_status == Registration.INITIATED


@pytest.mark.django_db
def test_callback_with_array_body_still_reads_query(api_client, make_registration, sign_postback):
    registration = make_registration()
    query = sign_postback(_postback(registration, status="failure"))
    resp = api_client.post(f"{FAILURE_URL}?{urlencode(query)}", [1], format="json")

    assert resp["Location"] == f"{FRONTEND}/failure"
    registration.refresh_from_db()
    assert registration.payment_status == Registration.FAILED
