"""
reqlog.integration
~~~~~~~~~~~~~~~~~~
Build the request-logging middleware from Django settings and wrap Django's
WSGI / ASGI handlers with it.

Settings read:

    REQLOG_APP_NAME           – ``app`` field on ``req_served`` (required)
    REQLOG_REQUEST_ID_HEADER  – header carrying the request id; blank means
                                no request id (``req_id`` is ``""``)
    REQLOG_LOGGER_NAME        – structlog logger name, default ``"reqlog"``
"""
from __future__ import annotations

import structlog
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from reqlog import asgi, wsgi
from reqlog.request_id import empty_request_id, header_request_id


def _middleware_args() -> tuple:
    app_name = getattr(settings, "REQLOG_APP_NAME", "")
    if not app_name:
        raise ImproperlyConfigured("REQLOG_APP_NAME must be a non-empty string.")

    header = getattr(settings, "REQLOG_REQUEST_ID_HEADER", "")
    resolver = header_request_id(header) if header else empty_request_id
    logger = structlog.get_logger(getattr(settings, "REQLOG_LOGGER_NAME", "reqlog"))
    return logger, app_name, resolver


def wrap_wsgi_application(application):
    """
    Wrap a WSGI application (normally ``get_wsgi_application()``) with
    :class:`reqlog.wsgi.LoggingMiddleware` configured from ``REQLOG_*`` settings.

    Raises:
        ImproperlyConfigured: ``REQLOG_APP_NAME`` is blank.
    """
    logger, app_name, resolver = _middleware_args()
    return wsgi.new_logging_middleware_with_request_id(logger, app_name, resolver)(application)


def wrap_asgi_application(application):
    """ASGI counterpart of :func:`wrap_wsgi_application`."""
    logger, app_name, resolver = _middleware_args()
    return asgi.new_logging_middleware_with_request_id(logger, app_name, resolver)(application)
