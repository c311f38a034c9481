"""
reqlog.wsgi
~~~~~~~~~~~
Structured request-logging middleware for WSGI applications, powered by
structlog.

Emits exactly two records per request:

    req_start   – before the wrapped application runs
    req_served  – after its response body has been fully produced

Usage::

    import structlog
    from reqlog.wsgi import new_logging_middleware

    logger = structlog.get_logger("reqlog")
    application = new_logging_middleware(logger, "my-app")(application)

If the application raises, or the server closes the body early (client gone),
``req_served`` is not emitted.  Exceptions are never caught here.
"""
from __future__ import annotations

import time

from reqlog import records
from reqlog.observer import ResponseObserver
from reqlog.request_id import empty_request_id


class ObservedBody:
    """
    Iterable handed back to the server in place of the application's body.

    Streams chunks unchanged and calls ``on_complete`` once the inner iterable
    is exhausted.  ``close()`` is forwarded as PEP 3333 requires.
    """

    def __init__(self, body, observer: ResponseObserver, on_complete) -> None:
        self._body = body
        self._observer = observer
        self._on_complete = on_complete

    def __iter__(self):
        for chunk in self._body:
            self._observer.mark_body_started()
            yield chunk
        self._observer.finalize_if_unset()
        self._on_complete()

    def close(self) -> None:
        close = getattr(self._body, "close", None)
        if close is not None:
            close()


class LoggingMiddleware:
    """
    WSGI middleware that logs ``req_start`` / ``req_served`` for every request.

    Args:
        app:        the wrapped WSGI application.
        logger:     anything with ``info(event, **fields)``; normally a
                    structlog logger.  Must be safe for concurrent use.
        app_name:   value of the ``app`` field on ``req_served``.
        request_id: resolver ``(environ) -> str``.
    """

    def __init__(self, app, logger, app_name: str, request_id=empty_request_id) -> None:
        if not callable(request_id):
            raise TypeError("request_id must be callable, got %r" % (request_id,))
        self.app = app
        self.logger = logger
        self.app_name = app_name
        self.request_id = request_id

    def __call__(self, environ, start_response):
        start = time.perf_counter()
        req_id = self.request_id(environ)
        uri = records.environ_uri(environ)
        method = records.environ_method(environ)
        remote = records.environ_remote(environ)

        self.logger.info(
            records.START_EVENT,
            **records.start_fields(req_id, uri, method, remote),
        )
        observer = ResponseObserver(start_response)

        def served() -> None:
            self.logger.info(
                records.SERVED_EVENT,
                **records.served_fields(
                    req_id,
                    observer.status,
                    method,
                    uri,
                    remote,
                    records.elapsed_ms(start),
                    self.app_name,
                ),
            )

        body = self.app(environ, observer.start_response)
        return ObservedBody(body, observer, served)


def new_logging_middleware(logger, app_name: str):
    """Return a decorator wrapping a WSGI app; ``req_id`` is always empty."""
    return new_logging_middleware_with_request_id(logger, app_name, empty_request_id)


def new_logging_middleware_with_request_id(logger, app_name: str, request_id):
    """
    Return a decorator wrapping a WSGI app, with ``request_id`` plugged in to
    resolve the ``req_id`` field from the environ.

    Example::

        from reqlog.request_id import header_request_id

        middleware = new_logging_middleware_with_request_id(
            logger, "my-app", header_request_id("X-Request-ID")
        )
        application = middleware(application)
    """

    def middleware(app):
        return LoggingMiddleware(app, logger, app_name, request_id)

    return middleware
