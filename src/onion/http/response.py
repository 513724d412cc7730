"""The response sink.

Handlers and middleware write to a ``ResponseWriter`` instead of
returning a response object. The writer follows the usual HTTP
ordering rules:

1. Headers may be changed freely until the status is committed.
2. The status is committed once, by the first ``write_header()`` call or
   implicitly (200) by the first ``write()``. Later ``write_header()``
   calls are ignored and logged.
3. Body writes append; there is no limit on the number of calls.

Output is buffered and flushed to the ASGI server after the handler
returns.
"""

import logging
from http import HTTPStatus

from onion.http.headers import MutableHeaders

logger = logging.getLogger("onion.http")


class ResponseWriter:
    """Mutable, per-request response sink.

    Usage::

        response.headers["X-Request-Id"] = "abc"
        response.write_header(201)
        response.write(b"created")
    """

    __slots__ = ("_chunks", "_committed_headers", "_status", "headers")

    def __init__(self) -> None:
        self.headers: MutableHeaders = MutableHeaders()
        self._status: int | None = None
        self._committed_headers: MutableHeaders | None = None
        self._chunks: list[bytes] = []

    @property
    def committed(self) -> bool:
        """True once the status line has been written."""
        return self._status is not None

    @property
    def status(self) -> int:
        """The committed status, or 200 if nothing committed it yet."""
        return self._status if self._status is not None else HTTPStatus.OK

    def write_header(self, status: int) -> None:
        """Commit the status code and snapshot the current headers."""
        if self._status is not None:
            logger.warning(
                "superfluous write_header(%d) call; status already %d", status, self._status
            )
            return
        self._status = int(status)
        self._committed_headers = self.headers.copy()

    def write(self, data: str | bytes) -> int:
        """Append body data, committing a 200 status first if needed.

        ``str`` data is encoded as UTF-8. Returns the number of bytes
        written.
        """
        if self._status is None:
            self.write_header(HTTPStatus.OK)
        chunk = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        self._chunks.append(chunk)
        return len(chunk)

    @property
    def body(self) -> bytes:
        return b"".join(self._chunks)

    def final_headers(self) -> MutableHeaders:
        """Headers as they stood when the status was committed.

        Changes made after the commit are not sent. If nothing was ever
        committed, the live headers are used.
        """
        if self._committed_headers is not None:
            return self._committed_headers
        return self.headers

    def __repr__(self) -> str:
        return f"<ResponseWriter status={self.status} bytes={len(self.body)}>"
