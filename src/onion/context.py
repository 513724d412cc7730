"""The per-request Context.

A Context carries the request, the response sink and the path parameter
bindings through the middleware chain and into the handler. One is
created per request, right before middleware runs, and dropped when the
handler returns.

The active Context is also published through a ``ContextVar`` for code
that cannot take it as an argument::

    from onion.context import get_context

    def current_user_id() -> str:
        return get_context().param("userId")

``ContextVar`` values are task-local under asyncio, so concurrent
requests never see each other's Context.
"""

import json as json_module
from collections.abc import Mapping
from contextvars import ContextVar
from http import HTTPStatus
from types import MappingProxyType
from typing import Any

from onion.config import DEFAULT_NOT_FOUND_BODY
from onion.http.request import Request
from onion.http.response import ResponseWriter


class Context:
    """Request, response sink, and path parameters for one request."""

    __slots__ = ("_params", "request", "response")

    def __init__(
        self,
        request: Request,
        response: ResponseWriter,
        params: dict[str, str] | None = None,
    ) -> None:
        self.request = request
        self.response = response
        self._params: dict[str, str] = dict(params) if params else {}

    @property
    def params(self) -> Mapping[str, str]:
        """Read-only view of the path parameter bindings."""
        return MappingProxyType(self._params)

    def param(self, name: str, default: str = "") -> str:
        """Fetch a path parameter by name (``"bookId"`` for ``/:bookId``)."""
        return self._params.get(name, default)

    # -- Response helpers --

    def string(self, status: int, text: str) -> None:
        """Send plain text.

        Sets ``Content-Type: text/plain; charset=utf-8`` unless a content
        type is already present.
        """
        self.response.headers.setdefault("Content-Type", "text/plain; charset=utf-8")
        self.response.write_header(status)
        self.response.write(text)

    def json(self, status: int, data: Any) -> None:
        """Send *data* serialized as JSON."""
        self.response.headers["Content-Type"] = "application/json"
        self.response.write_header(status)
        self.response.write(json_module.dumps(data) + "\n")

    def not_found(self, body: str = DEFAULT_NOT_FOUND_BODY) -> None:
        """Send the plain 404 response used by the default not-found handler."""
        self.response.headers["X-Content-Type-Options"] = "nosniff"
        self.string(HTTPStatus.NOT_FOUND, body)

    def __repr__(self) -> str:
        return f"<Context {self.request.method} {self.request.path} params={self._params!r}>"


context_var: ContextVar[Context] = ContextVar("onion_context")
"""The current Context. Set by the dispatcher for the duration of a request."""


def get_context() -> Context:
    """Return the Context of the request being dispatched.

    Raises ``LookupError`` if called outside a request.
    """
    return context_var.get()
