"""Shared type aliases used across onion modules."""

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from onion.context import Context

# Route handler, not-found handler and middleware all share this shape.
# Return values are ignored; output goes through ctx.response.
HandlerFunc: TypeAlias = Callable[["Context"], None | Awaitable[Any]]
