"""Middleware: plain callables run before every routed handler.

A middleware is any callable matching:
    def mw(ctx: Context) -> None        (or async def)

Built-in middleware:
    DefaultHeaders -- Set a fixed group of response headers
    RequestLogger -- Log method and path of each routed request
"""

from onion.middleware.builtin import DefaultHeaders, HeadersConfig, RequestLogger
from onion.middleware.protocol import Middleware

__all__ = [
    "DefaultHeaders",
    "HeadersConfig",
    "Middleware",
    "RequestLogger",
]
