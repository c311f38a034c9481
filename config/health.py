"""
config.health
~~~~~~~~~~~~~
GET /health/ – lightweight liveness probe.

Returns:
    200  {"status": "ok", "app": "<REQLOG_APP_NAME>"}
"""
import structlog
from django.conf import settings
from django.http import JsonResponse

logger = structlog.get_logger(__name__)


def health_check(request):
    """Return service liveness and the application name stamped on request logs."""
    logger.debug("health_check", app=settings.REQLOG_APP_NAME)
    return JsonResponse({"status": "ok", "app": settings.REQLOG_APP_NAME})
