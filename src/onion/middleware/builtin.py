"""Built-in middleware: request logging and default response headers."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from onion.context import Context

logger = logging.getLogger("onion.access")


class RequestLogger:
    """Log the method and path of every routed request.

    Usage::

        app.use(RequestLogger())
        app.use(RequestLogger(logging.getLogger("myapp"), level=logging.DEBUG))
    """

    __slots__ = ("level", "logger")

    def __init__(self, log: logging.Logger | None = None, *, level: int = logging.INFO) -> None:
        self.logger = log or logger
        self.level = level

    def __call__(self, ctx: Context) -> None:
        request = ctx.request
        self.logger.log(self.level, "%s %s", request.method, request.url)


@dataclass(frozen=True, slots=True)
class HeadersConfig:
    """Headers set on every routed response.

    Values are applied as-is and replace any header of the same name
    already on the response.
    """

    headers: Mapping[str, str] = field(
        default_factory=lambda: {
            "X-Content-Type-Options": "nosniff",
            "X-Frame-Options": "DENY",
            "Referrer-Policy": "strict-origin-when-cross-origin",
        }
    )


class DefaultHeaders:
    """Set a fixed group of response headers before the handler runs.

    Because middleware runs before the handler, these headers are in
    place when the handler commits the status, and the handler can still
    override them.

    Usage::

        app.use(DefaultHeaders())
        app.use(DefaultHeaders(HeadersConfig(headers={"X-Test": "MiddlewarePassed"})))
    """

    __slots__ = ("config",)

    def __init__(self, config: HeadersConfig | None = None) -> None:
        self.config = config or HeadersConfig()

    def __call__(self, ctx: Context) -> None:
        for name, value in self.config.headers.items():
            ctx.response.headers[name] = value
