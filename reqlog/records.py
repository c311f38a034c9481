"""
reqlog.records
~~~~~~~~~~~~~~
Field builders for the two structured records emitted per request.

Event names and field names are a contract with downstream log consumers and
must not change:

    req_start   – req_id, uri, method, remote
    req_served  – req_id, status, method, uri, remote, latency, app

``latency`` is a string in ``"%6.4f ms"`` form, e.g. ``"12.3456 ms"``.
"""
from __future__ import annotations

import time
from urllib.parse import quote

START_EVENT = "req_start"
SERVED_EVENT = "req_served"


def elapsed_ms(start: float) -> float:
    """Milliseconds since ``start`` (a ``time.perf_counter()`` reading)."""
    return (time.perf_counter() - start) * 1000.0


def format_latency(latency_ms: float) -> str:
    return "%6.4f ms" % latency_ms


def start_fields(req_id: str, uri: str, method: str, remote: str) -> dict:
    return {
        "req_id": req_id,
        "uri": uri,
        "method": method,
        "remote": remote,
    }


def served_fields(
    req_id: str,
    status: int,
    method: str,
    uri: str,
    remote: str,
    latency_ms: float,
    app: str,
) -> dict:
    return {
        "req_id": req_id,
        "status": status,
        "method": method,
        "uri": uri,
        "remote": remote,
        "latency": format_latency(latency_ms),
        "app": app,
    }


def _join_host_port(host: str, port) -> str:
    if not host:
        return ""
    if port in (None, ""):
        return host
    if ":" in host:
        # IPv6 literal
        return f"[{host}]:{port}"
    return f"{host}:{port}"


# ---------------------------------------------------------------------------
# WSGI
# ---------------------------------------------------------------------------

def environ_uri(environ: dict) -> str:
    """
    The raw request target as the client sent it.

    Prefers ``REQUEST_URI`` / ``RAW_URI`` (set by uWSGI, gunicorn and
    friends); otherwise rebuilds it from ``SCRIPT_NAME``, ``PATH_INFO`` and
    ``QUERY_STRING``.
    """
    raw = environ.get("REQUEST_URI") or environ.get("RAW_URI")
    if raw:
        return raw
    path = environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", "")
    # PATH_INFO is latin-1 decoded bytes per PEP 3333
    uri = quote(path.encode("latin-1"), safe="/;=,:@&+$!~*'()") or "/"
    query = environ.get("QUERY_STRING")
    if query:
        uri += "?" + query
    return uri


def environ_remote(environ: dict) -> str:
    return _join_host_port(environ.get("REMOTE_ADDR", ""), environ.get("REMOTE_PORT"))


def environ_method(environ: dict) -> str:
    return environ.get("REQUEST_METHOD", "")


# ---------------------------------------------------------------------------
# ASGI
# ---------------------------------------------------------------------------

def scope_uri(scope: dict) -> str:
    raw_path = scope.get("raw_path")
    if raw_path:
        uri = raw_path.decode("latin-1")
    else:
        path = scope.get("root_path", "") + scope.get("path", "")
        uri = quote(path, safe="/;=,:@&+$!~*'()") or "/"
    query = scope.get("query_string", b"")
    if query:
        uri += "?" + query.decode("latin-1")
    return uri


def scope_remote(scope: dict) -> str:
    client = scope.get("client")
    if not client:
        return ""
    host, port = client
    return _join_host_port(host, port)


def scope_method(scope: dict) -> str:
    return scope.get("method", "")
