"""
reqlog.observer
~~~~~~~~~~~~~~~
Response writers that proxy a server's output channel while recording the
HTTP status code that was actually sent.

Two flavours, one contract:

* :class:`ResponseObserver` wraps a WSGI ``start_response`` callable
  (plus the ``write`` callable it returns).
* :class:`AsgiResponseObserver` wraps an ASGI ``send`` coroutine.

Status bookkeeping rules (shared by both):

1. The first status code observed wins.  Later calls still reach the server
   unchanged (so the server keeps its own validation), but never alter the
   recorded code.
2. Body bytes leaving before any status means the server would send an
   implicit ``200``; the observer sends that ``200`` itself and records it.
3. :meth:`finalize_if_unset` is called once the wrapped application has
   finished.  If no status was ever written, it sends ``200`` exactly once.

An observer lives for exactly one request and is never shared.
"""
from __future__ import annotations

from http import HTTPStatus

DEFAULT_STATUS = 200


def status_line(code: int) -> str:
    """Return a PEP 3333 status line, e.g. ``404`` → ``"404 Not Found"``."""
    try:
        phrase = HTTPStatus(code).phrase
    except ValueError:
        phrase = "Unknown"
    return f"{code} {phrase}"


def parse_status(status: str) -> int:
    """Return the integer code of a WSGI status line (``"201 Created"`` → 201)."""
    return int(status.split(None, 1)[0])


class ResponseObserver:
    """
    WSGI response writer that records the status handed to ``start_response``.

    Pass :meth:`start_response` to the wrapped application in place of the
    server's own callable.
    """

    def __init__(self, start_response) -> None:
        self._start_response = start_response
        self._write = None
        self._status = DEFAULT_STATUS
        self._written = False

    @property
    def status(self) -> int:
        """The captured status code (``200`` until something is written)."""
        return self._status

    @property
    def written(self) -> bool:
        return self._written

    def _record(self, code: int) -> None:
        if not self._written:
            self._status = code
            self._written = True

    def start_response(self, status: str, headers: list, exc_info=None):
        self._write = self._start_response(status, headers, exc_info)
        self._record(parse_status(status))
        return self.write

    def write_header(self, code: int, headers: list | None = None):
        """Send ``code`` to the server and record it if it is the first."""
        return self.start_response(status_line(code), list(headers or []))

    def write(self, data: bytes) -> None:
        """Legacy PEP 3333 ``write`` callable."""
        self.mark_body_started()
        self._write(data)

    def mark_body_started(self) -> None:
        """Send the implicit ``200`` if body output begins before any status."""
        if not self._written:
            self.write_header(DEFAULT_STATUS)

    def finalize_if_unset(self) -> None:
        if not self._written:
            self.write_header(DEFAULT_STATUS, [("Content-Length", "0")])


class AsgiResponseObserver:
    """
    ASGI ``send`` wrapper that records the status of ``http.response.start``.

    Once a status has gone out every later message (``http.response.body``,
    ``http.response.pathsend``, ...) is forwarded untouched; completing or
    aborting the response stays the application's and the server's business.
    """

    def __init__(self, send) -> None:
        self._send = send
        self._status = DEFAULT_STATUS
        self._written = False

    @property
    def status(self) -> int:
        return self._status

    @property
    def written(self) -> bool:
        return self._written

    async def send(self, message: dict) -> None:
        message_type = message.get("type")
        if message_type == "http.response.start":
            if not self._written:
                self._status = int(message.get("status", DEFAULT_STATUS))
                self._written = True
        elif message_type == "http.response.body":
            if not self._written:
                await self.write_header(DEFAULT_STATUS)
        await self._send(message)

    async def write_header(self, code: int, headers: list | None = None) -> None:
        await self.send(
            {
                "type": "http.response.start",
                "status": code,
                "headers": list(headers or []),
            }
        )

    async def finalize_if_unset(self) -> None:
        """Send an empty ``200`` response if the application sent nothing at all."""
        if self._written:
            return
        await self.write_header(DEFAULT_STATUS, [(b"content-length", b"0")])
        await self.send({"type": "http.response.body", "body": b"", "more_body": False})
