"""
reqlog
~~~~~~
Structured request logging for WSGI and ASGI applications.
"""
from .request_id import (  # noqa: F401
    contextvar_request_id,
    empty_request_id,
    header_request_id,
)
from .wsgi import (  # noqa: F401
    LoggingMiddleware,
    new_logging_middleware,
    new_logging_middleware_with_request_id,
)
