"""
ASGI config for the ISML backend.

Exposes the ASGI callable as a module-level variable named ``application``.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "isml_backend.settings.base")

application = get_asgi_application()
