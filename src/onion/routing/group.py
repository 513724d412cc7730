"""Fluent prefix-group builder.

Builds a batch of routes sharing a path prefix, for bulk registration
with ``App.use_routes``::

    book_routes = (
        new_group("books")
        .get("/", list_books)
        .get("/:bookId", show_book)
        .post("/", create_book)
        .routes()
    )

The pattern of each route is ``"/" + prefix + pattern``, plain string
concatenation: ``new_group("books").get("/", h)`` yields ``/books/`` and
``new_group("/books")`` would yield ``//books...``. Grouping only shapes
patterns; middleware stays global.
"""

from typing import Self

from onion._internal.types import HandlerFunc
from onion.routing.route import Route


class RouteGroup:
    """Accumulates routes under a shared prefix. Each verb helper returns the group."""

    __slots__ = ("_routes", "prefix")

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        self._routes: list[Route] = []

    def add(self, method: str, pattern: str, handler: HandlerFunc) -> Self:
        self._routes.append(Route(method, "/" + self.prefix + pattern, handler))
        return self

    def get(self, pattern: str, handler: HandlerFunc) -> Self:
        return self.add("GET", pattern, handler)

    def post(self, pattern: str, handler: HandlerFunc) -> Self:
        return self.add("POST", pattern, handler)

    def put(self, pattern: str, handler: HandlerFunc) -> Self:
        return self.add("PUT", pattern, handler)

    def patch(self, pattern: str, handler: HandlerFunc) -> Self:
        return self.add("PATCH", pattern, handler)

    def delete(self, pattern: str, handler: HandlerFunc) -> Self:
        return self.add("DELETE", pattern, handler)

    def routes(self) -> tuple[Route, ...]:
        """Finish the group: the accumulated routes, in the order added."""
        return tuple(self._routes)

    def __repr__(self) -> str:
        return f"RouteGroup(prefix={self.prefix!r}, routes={len(self._routes)})"


def new_group(prefix: str) -> RouteGroup:
    """Start a route group, e.g. ``new_group("books")``."""
    return RouteGroup(prefix)
