"""
WSGI config for the ISML backend.

Exposes the WSGI callable as a module-level variable named ``application``.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "isml_backend.settings.base")

application = get_wsgi_application()
