"""Ordered route table with first-match lookup.

Routes are stored in a dict keyed by ``(method, pattern)``, so a key is
never duplicated. Registering an existing key replaces its handler but
keeps the key's original scan position.

Lookup scans in registration order and returns the first route whose
method equals the request method and whose pattern matches the path.
When two patterns can both match a path (``/books/new`` and
``/books/:id``), the one registered first wins.
"""

from onion._internal.types import HandlerFunc
from onion.routing.matcher import match_segments
from onion.routing.route import Route, RouteMatch


class Router:
    """Route table with first-match, scan-order lookup.

    Usage::

        router = Router()
        router.register("GET", "/users/:id", show_user)
        router.compile()
        match = router.lookup("GET", "/users/42")
        # match.route.handler is show_user, match.params == {"id": "42"}
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], Route] = {}
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add or replace a route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        self._routes[route.key] = route

    def register(self, method: str, pattern: str, handler: HandlerFunc) -> Route:
        """Build a Route from its parts and add it."""
        route = Route(method, pattern, handler)
        self.add(route)
        return route

    def compile(self) -> None:
        """Freeze the table. No more routes can be added."""
        self._compiled = True

    @property
    def compiled(self) -> bool:
        return self._compiled

    @property
    def routes(self) -> list[Route]:
        """All routes, in scan order."""
        return list(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, key: object) -> bool:
        return key in self._routes

    def lookup(self, method: str, path: str) -> RouteMatch | None:
        """Find the first route matching *method* and *path*.

        Returns ``None`` when nothing matches, including when a pattern
        matches the path under a different method.
        """
        for route in self._routes.values():
            if route.method != method:
                continue
            params = match_segments(route.segments, path)
            if params is not None:
                return RouteMatch(route=route, params=params)
        return None
