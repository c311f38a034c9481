"""
WSGI entry point for the reqlog host project.

Django's handler is wrapped with the request-logging middleware, so every
request produces ``req_start`` / ``req_served`` records.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.production")

from reqlog.integration import wrap_wsgi_application  # noqa: E402

application = wrap_wsgi_application(get_wsgi_application())
