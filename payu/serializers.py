from decimal import Decimal

from django.core.validators import RegexValidator
from rest_framework import serializers

DEFAULT_AMOUNT = "1.00"
MAX_AMOUNT = Decimal("99999999.99")

# Plain "499" or "499.5" / "499.50"; PayU rejects exponents and signs
plain_amount = RegexValidator(r"^[0-9]+(\.[0-9]{1,2})?\Z", message="Invalid amount")


class CreatePaymentSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.CharField(max_length=254)
    phone = serializers.CharField(max_length=20)
    profession = serializers.CharField(max_length=255)
    state = serializers.CharField(max_length=100)
    batch = serializers.CharField(max_length=100)
    language = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    amount = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default=DEFAULT_AMOUNT,
        validators=[plain_amount],
    )

    def validate_amount(self, value):
        # Keep the caller's string: it is what gets hashed and echoed back
        value = value or DEFAULT_AMOUNT
        parsed = Decimal(value)
        if parsed <= 0 or parsed > MAX_AMOUNT:
            raise serializers.ValidationError("Invalid amount")
        return value
