"""Onion application class.

Mutable during setup (routes, middleware, not-found handler).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import logging
import threading
from collections.abc import Callable, Iterable

from onion._internal.asgi import Receive, Scope, Send
from onion._internal.invoke import invoke
from onion._internal.types import HandlerFunc
from onion.config import AppConfig
from onion.context import Context, context_var
from onion.errors import ConfigurationError
from onion.http.request import Request
from onion.http.response import ResponseWriter
from onion.middleware.protocol import Middleware
from onion.routing.route import Route
from onion.routing.router import Router
from onion.server.handler import handle_request

logger = logging.getLogger("onion.app")


class App:
    """The onion application.

    Mutable during setup (route registration, middleware, not-found
    handler). Frozen at runtime when ``app.run()`` or ``__call__()`` is
    first invoked; after that every registration method raises
    ``RuntimeError``, so the route table and middleware chain are
    read-only while requests are served.

    Usage::

        app = App()
        app.use(RequestLogger())
        app.use_routes(book_routes, user_routes)

        @app.route("/hello")
        def hello(ctx: Context) -> None:
            ctx.string(200, "Hello, World!")

        app.run()

    Thread safety:
        The setup phase is single-threaded. The freeze transition uses a
        Lock + double-check so exactly one thread compiles the app even
        if several workers deliver their first request at once.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_middleware",
        "_middleware_list",
        "_not_found",
        "_router",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._router: Router = Router()
        self._middleware_list: list[Middleware] = []
        self._not_found: HandlerFunc = self._default_not_found
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set during _freeze()
        self._middleware: tuple[Middleware, ...] = ()

    # -- Route registration --

    def add_route(self, method: str, pattern: str, handler: HandlerFunc) -> Route:
        """Register *handler* for *method* requests whose path matches *pattern*.

        Registering the same ``(method, pattern)`` again replaces the
        handler; the route keeps the scan position of its first
        registration.
        """
        self._check_not_frozen()
        if not method:
            msg = f"Route {pattern!r} needs an HTTP method."
            raise ConfigurationError(msg)
        if not callable(handler):
            msg = f"Handler for {method} {pattern!r} is not callable: {handler!r}"
            raise ConfigurationError(msg)
        if (method, pattern) in self._router:
            logger.debug("Replacing handler for %s %s", method, pattern)
        return self._router.register(method, pattern, handler)

    def route(
        self,
        pattern: str,
        *,
        methods: list[str] | None = None,
    ) -> Callable[[HandlerFunc], HandlerFunc]:
        """Register a route handler via decorator.

        Args:
            pattern: URL pattern. Use ``:name`` segments for path parameters.
            methods: HTTP methods. Defaults to ``["GET"]``.
        """

        def decorator(func: HandlerFunc) -> HandlerFunc:
            for method in methods or ["GET"]:
                self.add_route(method, pattern, func)
            return func

        return decorator

    def use_routes(self, *groups: Iterable[Route]) -> None:
        """Register several batches of routes, e.g. from ``RouteGroup.routes()``."""
        for group in groups:
            for route in group:
                self.add_route(route.method, route.pattern, route.handler)

    @property
    def routes(self) -> list[Route]:
        """Registered routes, in scan order."""
        return self._router.routes

    # -- Middleware --

    def use(self, middleware: Middleware) -> None:
        """Append a middleware to the global chain."""
        self._check_not_frozen()
        if not callable(middleware):
            msg = f"Middleware is not callable: {middleware!r}"
            raise ConfigurationError(msg)
        self._middleware_list.append(middleware)

    # -- Not found --

    def not_found_handler(self, handler: HandlerFunc) -> HandlerFunc:
        """Replace the handler for unmatched requests.

        There is a single slot; the last call wins. Usable as a decorator.
        """
        self._check_not_frozen()
        if not callable(handler):
            msg = f"Not-found handler is not callable: {handler!r}"
            raise ConfigurationError(msg)
        self._not_found = handler
        return handler

    def _default_not_found(self, ctx: Context) -> None:
        ctx.not_found(self.config.not_found_body)

    # -- Dispatch --

    async def dispatch(self, request: Request, response: ResponseWriter) -> None:
        """Route one request and run its pipeline.

        Unmatched requests (unknown path, or a known pattern under another
        method) go to the not-found handler without running middleware.
        Matched requests run every middleware in registration order, then
        the handler, all with the same Context. Exceptions propagate.
        """
        self._ensure_frozen()

        match = self._router.lookup(request.method, request.path)
        if match is None:
            logger.debug("No route for %s %s", request.method, request.path)
            ctx = Context(request, response)
            token = context_var.set(ctx)
            try:
                await invoke(self._not_found, ctx)
            finally:
                context_var.reset(token)
            return

        ctx = Context(request, response, match.params)
        token = context_var.set(ctx)
        try:
            for mw in self._middleware:
                await invoke(mw, ctx)
            await invoke(match.route.handler, ctx)
        finally:
            context_var.reset(token)

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start serving with pounce (requires the ``server`` extra).

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        from onion.server.serve import serve

        self._ensure_frozen()
        serve(
            self,
            host if host is not None else self.config.host,
            port if port is not None else self.config.port,
            workers=self.config.workers,
            reload=self.config.debug,
            log_level=self.config.log_level,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()
        await handle_request(scope, receive, send, dispatch=self.dispatch)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol, freezing the app at startup."""
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                self._ensure_frozen()
                await send({"type": "lifespan.startup.complete"})
            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the route table and snapshot the middleware chain."""
        self._router.compile()
        self._middleware = tuple(self._middleware_list)
        self._frozen = True
        logger.debug(
            "App frozen with %d routes and %d middleware",
            len(self._router),
            len(self._middleware),
        )

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes, middleware, and handlers before calling app.run()."
            )
            raise RuntimeError(msg)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "setup"
        return f"<App routes={len(self._router)} middleware={len(self._middleware_list)} {state}>"
