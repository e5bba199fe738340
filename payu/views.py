import logging
from collections.abc import Mapping
from decimal import Decimal

from django.core.exceptions import ImproperlyConfigured
from django.db import DatabaseError
from django.http import HttpResponse, HttpResponseRedirect
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework.views import APIView

from isml_backend.config import BackendConfig
from registrations.models import Registration
from registrations.utils import generate_txnid
from .hashing import request_hash, verify_response_hash
from .serializers import CreatePaymentSerializer

logger = logging.getLogger(__name__)

PRODUCT_INFO = "ISML Foundation Program"

ALL_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE']


def _postback_data(request):
    """PayU may post the form or append fields to the query string; query wins."""
    data = {}
    for source in (request.data, request.query_params):
        # A JSON array or scalar body carries no fields
        if not isinstance(source, Mapping):
            continue
        if hasattr(source, 'dict'):
            source = source.dict()
        data.update({k: str(v) for k, v in source.items() if v is not None})
    return data


def _signature_ok(config, data):
    if not config.verify_callback_hash:
        return True
    key, salt = config.require('merchant_key', 'merchant_salt')
    return verify_response_hash(key, salt, data)


class CreatePaymentView(APIView):
    """
    Validate the applicant, store an INITIATED registration and return
    the signed form fields the browser posts to PayU.
    """

    def post(self, request):
        config = BackendConfig.from_settings()
        try:
            key, salt, backend_url = config.require('merchant_key', 'merchant_salt', 'backend_url')
        except ImproperlyConfigured as e:
            logger.error(f"CRITICAL: {e}")
            return Response({"error": "Server configuration error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        serializer = CreatePaymentSerializer(data=request.data)
        if not serializer.is_valid():
            if set(serializer.errors) == {'amount'}:
                return Response({"error": "Invalid amount"}, status=status.HTTP_400_BAD_REQUEST)
            return Response({"error": "Missing required fields"}, status=status.HTTP_400_BAD_REQUEST)
        data = serializer.validated_data

        txnid = generate_txnid()
        amount = data['amount']

        try:
            Registration.objects.create(
                txnid=txnid,
                name=data['name'],
                email=data['email'],
                phone=data['phone'],
                profession=data['profession'],
                state=data['state'],
                batch=data['batch'],
                language=data['language'],
                amount=Decimal(amount),
                payment_status=Registration.INITIATED,
            )
        except DatabaseError:
            logger.exception(f"Database error while creating registration {txnid}")
            return Response({"error": "Database error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info(f"Registration {txnid} initiated for {data['email']}")

        return Response({
            "key": key,
            "txnid": txnid,
            "amount": amount,
            "productinfo": PRODUCT_INFO,
            "firstname": data['name'],
            "email": data['email'],
            "phone": data['phone'],
            "surl": f"{backend_url}/payu-success",
            "furl": f"{backend_url}/payu-failure",
            "hash": request_hash(key, salt, txnid, amount, PRODUCT_INFO, data['name'], data['email']),
        })


@api_view(ALL_METHODS)
def payu_success(request):
    data = _postback_data(request)
    txnid = data.get('txnid')
    config = BackendConfig.from_settings()

    # Never redirect to an undefined location
    if not config.frontend_url:
        logger.error("CRITICAL: FRONTEND_URL is not set!")
        return HttpResponse("Configuration Error: FRONTEND_URL missing", status=500, content_type="text/plain")

    if txnid and data.get('status') == 'success':
        try:
            signed = _signature_ok(config, data)
        except ImproperlyConfigured as e:
            logger.error(f"CRITICAL: {e}")
            return HttpResponse("Configuration Error: PayU credentials missing", status=500, content_type="text/plain")
        if not signed:
            logger.warning(f"Rejected success callback for {txnid}: bad or missing hash")
            return HttpResponseRedirect(f"{config.frontend_url}/failure")

        try:
            updated = Registration.objects.filter(txnid=txnid).update(
                payment_status=Registration.SUCCESS,
                payu_txn_id=data.get('mihpayid') or None,
            )
        except DatabaseError:
            logger.exception(f"Database error while marking {txnid} as paid")
            return HttpResponse("Database error", status=500, content_type="text/plain")
        logger.info(f"Success callback for {txnid}: {updated} row(s) updated")

    return HttpResponseRedirect(f"{config.frontend_url}/success")


@api_view(ALL_METHODS)
def payu_failure(request):
    data = _postback_data(request)
    txnid = data.get('txnid')
    config = BackendConfig.from_settings()

    if config.frontend_url:
        redirect_to = f"{config.frontend_url}/failure"
    else:
        logger.error("CRITICAL: FRONTEND_URL is not set, redirecting failure callback to /")
        redirect_to = "/"

    if txnid:
        try:
            signed = _signature_ok(config, data)
        except ImproperlyConfigured as e:
            logger.error(f"CRITICAL: {e}")
            return HttpResponse("Configuration Error: PayU credentials missing", status=500, content_type="text/plain")
        if not signed:
            logger.warning(f"Rejected failure callback for {txnid}: bad or missing hash")
            return HttpResponseRedirect(redirect_to)

        try:
            updated = Registration.objects.filter(txnid=txnid).update(
                payment_status=Registration.FAILED,
            )
        except DatabaseError:
            logger.exception(f"Database error while marking {txnid} as failed")
            return HttpResponse("Database error", status=500, content_type="text/plain")
        logger.info(f"Failure callback for {txnid}: {updated} row(s) updated")

    return HttpResponseRedirect(redirect_to)
