"""Tests for onion.routing.matcher: segment-by-segment pattern matching."""

import pytest

from onion.routing.matcher import match_path, match_segments, parse_pattern


class TestParsePattern:
    def test_literal(self) -> None:
        segments = parse_pattern("/books")
        assert [s.value for s in segments] == ["", "books"]
        assert not any(s.is_param for s in segments)

    def test_param(self) -> None:
        segments = parse_pattern("/users/:id")
        assert segments[2].is_param is True
        assert segments[2].param_name == "id"
        assert segments[2].value == ":id"

    def test_keeps_empty_segments(self) -> None:
        assert len(parse_pattern("/books/")) == 3
        assert len(parse_pattern("/books")) == 2

    def test_colon_inside_segment_is_literal(self) -> None:
        segments = parse_pattern("/a:b")
        assert segments[1].is_param is False


class TestLiteralMatching:
    def test_exact_match_binds_nothing(self) -> None:
        assert match_path("/hello", "/hello") == {}

    def test_root(self) -> None:
        assert match_path("/", "/") == {}

    def test_mismatch(self) -> None:
        assert match_path("/hello", "/goodbye") is None

    def test_case_sensitive(self) -> None:
        assert match_path("/Hello", "/hello") is None

    def test_trailing_slash_is_distinct(self) -> None:
        assert match_path("/books", "/books/") is None
        assert match_path("/books/", "/books") is None
        assert match_path("/books/", "/books/") == {}

    def test_no_prefix_matching(self) -> None:
        assert match_path("/bar", "/bar/foo") is None

    def test_double_slash_compared_literally(self) -> None:
        assert match_path("//books", "//books") == {}
        assert match_path("//books", "/books") is None


class TestParamMatching:
    def test_single_param(self) -> None:
        assert match_path("/users/:id", "/users/123") == {"id": "123"}

    def test_multiple_params(self) -> None:
        params = match_path("/users/:userId/books/:bookId", "/users/7/books/42")
        assert params == {"userId": "7", "bookId": "42"}

    def test_wrong_segment_count(self) -> None:
        assert match_path("/users/:id", "/users") is None
        assert match_path("/users/:id", "/users/1/2") is None

    def test_param_binds_empty_segment(self) -> None:
        assert match_path("/users/:id", "/users/") == {"id": ""}

    def test_value_not_validated_or_decoded(self) -> None:
        assert match_path("/files/:name", "/files/a%20b") == {"name": "a%20b"}
        assert match_path("/files/:name", "/files/..") == {"name": ".."}

    def test_literal_after_param_must_match(self) -> None:
        assert match_path("/users/:id/edit", "/users/1/show") is None

    def test_duplicate_name_keeps_last_value(self) -> None:
        assert match_path("/:x/:x", "/a/b") == {"x": "b"}

    def test_bindings_are_fresh_per_call(self) -> None:
        segments = parse_pattern("/users/:id")
        first = match_segments(segments, "/users/1")
        second = match_segments(segments, "/users/2")
        assert first == {"id": "1"}
        assert second == {"id": "2"}
        assert first is not second


@pytest.mark.parametrize(
    ("pattern", "path", "expected"),
    [
        ("/a/:b/c", "/a/x/c", {"b": "x"}),
        ("/a/:b/c", "/a/x/d", None),
        ("/a/b/c", "/a/b/c", {}),
        (":all", "anything", {"all": "anything"}),
        ("", "", {}),
    ],
)
def test_match_table(pattern: str, path: str, expected: dict[str, str] | None) -> None:
    assert match_path(pattern, path) == expected
