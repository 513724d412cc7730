"""Invoke helpers: call sync or async callables uniformly.

Handlers, middleware and the not-found handler can be ``def`` or
``async def``. The sync/async check lives here and nowhere else.

Usage::

    from onion._internal.invoke import invoke

    await invoke(handler, ctx)
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it is awaitable.

    Works with both sync and async callables::

        def hello(ctx):
            ctx.string(200, "hi")

        async def slow_hello(ctx):
            body = await ctx.request.text()
            ctx.string(200, body)
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
