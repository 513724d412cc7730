"""Onion: a small ASGI router with path parameters and a middleware chain.

Basic usage::

    from onion import App, Context, new_group

    app = App()

    def show_book(ctx: Context) -> None:
        ctx.string(200, "book " + ctx.param("bookId"))

    app.use_routes(new_group("books").get("/:bookId", show_book).routes())
    app.run()

Routes match segment by segment; ``:name`` segments bind path
parameters. Every middleware registered with ``app.use()`` runs, in
order, before the matched handler. Unmatched requests go to the
not-found handler.
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "Context",
    "Middleware",
    "OnionError",
    "Request",
    "ResponseWriter",
    "Route",
    "RouteGroup",
    "get_context",
    "new_group",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import onion`` fast while providing a clean top-level API.
    """
    if name == "App":
        from onion.app import App

        return App

    if name == "AppConfig":
        from onion.config import AppConfig

        return AppConfig

    if name in ("Context", "get_context"):
        from onion import context

        return getattr(context, name)

    if name in ("OnionError", "ConfigurationError"):
        from onion import errors

        return getattr(errors, name)

    if name == "Middleware":
        from onion.middleware.protocol import Middleware

        return Middleware

    if name == "Request":
        from onion.http.request import Request

        return Request

    if name == "ResponseWriter":
        from onion.http.response import ResponseWriter

        return ResponseWriter

    if name in ("Route", "RouteGroup", "new_group"):
        from onion import routing

        return getattr(routing, name)

    msg = f"module 'onion' has no attribute {name!r}"
    raise AttributeError(msg)
