"""
reqlog.request_id
~~~~~~~~~~~~~~~~~
Request-identifier resolvers.

A resolver is any callable ``resolver(context) -> str`` where ``context`` is
the WSGI ``environ`` or the ASGI ``scope`` of the current request.  It must be
pure and non-blocking; returning ``""`` means "no request id available".

Generating and propagating ids is somebody else's job (a reverse proxy, a
correlation-id middleware further out, ...).  These resolvers only read what
is already there.
"""
from __future__ import annotations

from typing import Callable

import structlog

RequestIdResolver = Callable[[dict], str]


def empty_request_id(context: dict) -> str:
    """Default resolver for deployments without request-id infrastructure."""
    return ""


def header_request_id(header: str = "X-Request-ID") -> RequestIdResolver:
    """
    Build a resolver that reads ``header`` from the incoming request.

    Works on both WSGI environs (``HTTP_X_REQUEST_ID``) and ASGI scopes
    (raw ``headers`` list).
    """
    environ_key = "HTTP_" + header.upper().replace("-", "_")
    raw_name = header.lower().encode("latin-1")

    def resolve(context: dict) -> str:
        if "headers" in context and "type" in context:
            for name, value in context["headers"]:
                if name.lower() == raw_name:
                    return value.decode("latin-1")
            return ""
        return context.get(environ_key, "")

    return resolve


def contextvar_request_id(key: str = "request_id") -> RequestIdResolver:
    """
    Build a resolver that reads ``key`` from structlog's context variables.

    Pairs with an outer middleware that calls
    ``structlog.contextvars.bind_contextvars(request_id=...)``.
    """

    def resolve(context: dict) -> str:
        value = structlog.contextvars.get_contextvars().get(key)
        return "" if value is None else str(value)

    return resolve
