"""Tests for onion.routing.group: fluent prefix-group builder."""

import pytest

from onion.routing.group import RouteGroup, new_group
from onion.routing.router import Router


def _handler(ctx) -> None:
    pass


class TestRouteGroup:
    def test_prefix_concatenation(self) -> None:
        routes = new_group("books").get("/:id", _handler).routes()
        assert len(routes) == 1
        assert routes[0].method == "GET"
        assert routes[0].pattern == "/books/:id"
        assert routes[0].handler is _handler

    def test_root_of_group_keeps_trailing_slash(self) -> None:
        routes = new_group("books").get("/", _handler).routes()
        assert routes[0].pattern == "/books/"

    def test_no_slash_normalization(self) -> None:
        routes = new_group("/books").get("//x", _handler).routes()
        assert routes[0].pattern == "//books//x"

    def test_chaining_returns_same_builder(self) -> None:
        group = RouteGroup("users")
        assert group.get("/", _handler) is group
        assert group.post("/", _handler) is group

    @pytest.mark.parametrize(
        ("verb", "method"),
        [("get", "GET"), ("post", "POST"), ("put", "PUT"), ("patch", "PATCH"), ("delete", "DELETE")],
    )
    def test_verb_helpers(self, verb: str, method: str) -> None:
        group = new_group("items")
        getattr(group, verb)("/:id", _handler)
        (route,) = group.routes()
        assert route.method == method

    def test_generic_add(self) -> None:
        (route,) = new_group("items").add("OPTIONS", "/", _handler).routes()
        assert route.method == "OPTIONS"
        assert route.pattern == "/items/"

    def test_order_preserved(self) -> None:
        routes = (
            new_group("books")
            .get("/", _handler)
            .get("/:bookId", _handler)
            .post("/", _handler)
            .put("/:bookId", _handler)
            .delete("/:bookId", _handler)
            .routes()
        )
        assert [(r.method, r.pattern) for r in routes] == [
            ("GET", "/books/"),
            ("GET", "/books/:bookId"),
            ("POST", "/books/"),
            ("PUT", "/books/:bookId"),
            ("DELETE", "/books/:bookId"),
        ]

    def test_routes_is_immutable_snapshot(self) -> None:
        group = new_group("a").get("/", _handler)
        first = group.routes()
        group.get("/x", _handler)
        assert isinstance(first, tuple)
        assert len(first) == 1
        assert len(group.routes()) == 2

    def test_group_route_matches_after_registration(self) -> None:
        r = Router()
        for route in new_group("books").get("/:id", _handler).routes():
            r.add(route)
        match = r.lookup("GET", "/books/42")
        assert match is not None
        assert match.params == {"id": "42"}
