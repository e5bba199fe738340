from django.apps import AppConfig


class PayuAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "payu"
    verbose_name = "PayU"
