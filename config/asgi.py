"""
ASGI entry point for the reqlog host project.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.production")

from reqlog.integration import wrap_asgi_application  # noqa: E402

application = wrap_asgi_application(get_asgi_application())
