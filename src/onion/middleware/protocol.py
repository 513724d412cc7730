"""Middleware protocol.

A middleware is any callable taking the request Context::

    def stamp(ctx: Context) -> None:
        ctx.response.headers["X-Served-By"] = "onion"

Functions, coroutine functions and callable objects all qualify. Every
registered middleware runs, in registration order, before the matched
handler. There is no ``next`` callable and no early exit: a middleware
that writes a response does not stop the chain, and the handler still
runs afterwards.
"""

from collections.abc import Awaitable
from typing import Any, Protocol

from onion.context import Context


class Middleware(Protocol):
    """Protocol for onion middleware.

    Accepts both functions and callable objects::

        # Function middleware
        async def audit(ctx: Context) -> None:
            await record(ctx.request.method, ctx.request.path)

        # Class middleware
        class Tagger:
            def __call__(self, ctx: Context) -> None:
                ctx.response.headers["X-Tag"] = "1"
    """

    def __call__(self, ctx: Context) -> None | Awaitable[Any]: ...
