import csv
import logging
from collections.abc import Mapping
from decimal import Decimal
from urllib.parse import urlencode

from django.core.exceptions import ImproperlyConfigured
from django.db import DatabaseError
from django.db.models import Count, Q, Sum
from django.http import HttpResponse
from django.utils.crypto import constant_time_compare
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from isml_backend.config import BackendConfig
from registrations.models import Influencer, Registration
from registrations.utils import generate_ref_code
from .serializers import InfluencerSerializer, InfluencerStatsSerializer

logger = logging.getLogger(__name__)

REGISTRATION_CSV_FIELDS = [
    'txnid', 'name', 'email', 'phone', 'profession', 'state', 'batch',
    'language', 'amount', 'payment_status', 'payu_txn_id', 'referral', 'created_at',
]


class AdminPasswordView(APIView):
    """
    POST-only view gated by the shared ADMIN_PASSWORD sent in the body.

    Subclasses implement ``handle(request, config)``; it is only reached
    once the password matched, so a rejected caller never touches the store.
    """

    def post(self, request):
        config = BackendConfig.from_settings()
        try:
            expected = config.require('admin_password')
        except ImproperlyConfigured as e:
            logger.error(f"CRITICAL: {e}")
            return Response({"error": "Server configuration error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        supplied = request.data.get('password') if isinstance(request.data, Mapping) else None
        if not isinstance(supplied, str) or not constant_time_compare(supplied, expected):
            logger.warning(f"Rejected admin request to {request.path}")
            return Response({"error": "Unauthorized"}, status=status.HTTP_401_UNAUTHORIZED)

        return self.handle(request, config)

    def handle(self, request, config):
        raise NotImplementedError


class DownloadRegistrationsView(AdminPasswordView):
    """Every registration, newest first, as a CSV attachment."""

    def handle(self, request, config):
        try:
            rows = list(
                Registration.objects.order_by('-created_at').values_list(*REGISTRATION_CSV_FIELDS)
            )
        except DatabaseError:
            logger.exception("Database error while exporting registrations")
            return Response({"error": "Failed to export registrations"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        response = HttpResponse(content_type='text/csv')
        response['Content-Disposition'] = 'attachment; filename="registrations.csv"'

        writer = csv.writer(response)
        writer.writerow(REGISTRATION_CSV_FIELDS)
        for row in rows:
            writer.writerow([_csv_value(value) for value in row])

        logger.info(f"Exported {len(rows)} registrations")
        return response


def _csv_value(value):
    if value is None:
        return ""
    if hasattr(value, 'isoformat'):
        return value.isoformat()
    return value


class CreateInfluencerView(AdminPasswordView):
    """Issue a referral code and the shareable signup link that carries it."""

    def handle(self, request, config):
        try:
            frontend_url = config.require('frontend_url')
        except ImproperlyConfigured as e:
            logger.error(f"CRITICAL: {e}")
            return Response({"error": "Server configuration error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        serializer = InfluencerSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"error": "Missing required fields"}, status=status.HTTP_400_BAD_REQUEST)

        ref_code = generate_ref_code()
        try:
            serializer.save(ref_code=ref_code)
        except DatabaseError:
            logger.exception(f"Database error while creating influencer {ref_code}")
            return Response({"error": "Database error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info(f"Influencer {ref_code} created for {serializer.validated_data['email']}")
        return Response({
            "ref_code": ref_code,
            "link": f"{frontend_url}/?{urlencode({'ref': ref_code})}",
        })


class InfluencerStatsView(AdminPasswordView):
    """
    Registration counts and revenue attributed to a referral code.

    Note: no endpoint fills ``Registration.referral`` yet, so this reports
    zeros until a write path for referrals exists.
    """

    def handle(self, request, config):
        serializer = InfluencerStatsSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"error": "ref_code is required"}, status=status.HTTP_400_BAD_REQUEST)
        ref_code = serializer.validated_data['ref_code']

        try:
            stats = Registration.objects.filter(referral=ref_code).aggregate(
                initiated=Count('id', filter=Q(payment_status=Registration.INITIATED)),
                success=Count('id', filter=Q(payment_status=Registration.SUCCESS)),
                revenue=Sum('amount', filter=Q(payment_status=Registration.SUCCESS)),
            )
        except DatabaseError:
            logger.exception(f"Database error while computing stats for {ref_code}")
            return Response({"error": "Database error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        revenue = stats['revenue'] or Decimal('0')
        return Response({
            "initiated": stats['initiated'],
            "success": stats['success'],
            "revenue": f"{revenue:.2f}",
        })
