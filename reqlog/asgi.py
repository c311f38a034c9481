"""
reqlog.asgi
~~~~~~~~~~~
ASGI flavour of the request-logging middleware.

Same records and same construction API as :mod:`reqlog.wsgi`; the request
context handed to the resolver is the ASGI ``scope``.  Only ``http`` scopes
are logged, ``lifespan`` and ``websocket`` pass straight through.
"""
from __future__ import annotations

import time

from reqlog import records
from reqlog.observer import AsgiResponseObserver
from reqlog.request_id import empty_request_id


class AsgiLoggingMiddleware:
    """Pure ASGI middleware logging ``req_start`` / ``req_served``."""

    def __init__(self, app, logger, app_name: str, request_id=empty_request_id) -> None:
        if not callable(request_id):
            raise TypeError("request_id must be callable, got %r" % (request_id,))
        self.app = app
        self.logger = logger
        self.app_name = app_name
        self.request_id = request_id

    async def __call__(self, scope, receive, send):
        if scope.get("type") != "http":
            return await self.app(scope, receive, send)

        start = time.perf_counter()
        req_id = self.request_id(scope)
        uri = records.scope_uri(scope)
        method = records.scope_method(scope)
        remote = records.scope_remote(scope)

        self.logger.info(
            records.START_EVENT,
            **records.start_fields(req_id, uri, method, remote),
        )
        observer = AsgiResponseObserver(send)

        await self.app(scope, receive, observer.send)
        await observer.finalize_if_unset()

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


def new_logging_middleware(logger, app_name: str):
    """Return a decorator wrapping an ASGI app; ``req_id`` is always empty."""
    return new_logging_middleware_with_request_id(logger, app_name, empty_request_id)


def new_logging_middleware_with_request_id(logger, app_name: str, request_id):
    """Return a decorator wrapping an ASGI app, resolving ``req_id`` from the scope."""

    def middleware(app):
        return AsgiLoggingMiddleware(app, logger, app_name, request_id)

    return middleware
