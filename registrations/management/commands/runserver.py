from django.conf import settings
from django.core.management.commands.runserver import Command as BaseRunserverCommand


class Command(BaseRunserverCommand):
    """``runserver`` that listens on ``settings.PORT`` when no address is given."""

    default_addr = "0.0.0.0"
    default_port = str(settings.PORT)
