"""Segment-by-segment pattern matching.

Both the pattern and the path are split on ``/`` with every segment kept,
empty ones included, so ``/books`` and ``/books/`` never match each
other. Literal segments compare exactly (case-sensitive); parameter
segments bind whatever the path holds at that position, empty string
included. One left-to-right pass, no backtracking.

Examples::

    match_path("/users/:id", "/users/123")  -> {"id": "123"}
    match_path("/users/:id", "/users")      -> None
    match_path("/hello", "/hello")          -> {}
"""

from onion.routing.route import PathSegment


def parse_pattern(pattern: str) -> tuple[PathSegment, ...]:
    """Parse a pattern into its segments.

    ``"/books/:id"`` -> ``(PathSegment(""), PathSegment("books"),
    PathSegment(":id", is_param=True, param_name="id"))``
    """
    return tuple(PathSegment.parse(part) for part in pattern.split("/"))


def match_segments(segments: tuple[PathSegment, ...], path: str) -> dict[str, str] | None:
    """Match pre-parsed pattern *segments* against *path*.

    Returns the parameter bindings on success (possibly empty), ``None``
    when the path does not match.
    """
    parts = path.split("/")
    if len(parts) != len(segments):
        return None

    params: dict[str, str] = {}
    for segment, part in zip(segments, parts, strict=True):
        if segment.param_name is not None:
            params[segment.param_name] = part
        elif segment.value != part:
            return None
    return params


def match_path(pattern: str, path: str) -> dict[str, str] | None:
    """Match a raw *pattern* string against *path*.

    Convenience wrapper around ``parse_pattern`` + ``match_segments`` for
    one-off checks; registered routes keep their parsed segments.
    """
    return match_segments(parse_pattern(pattern), path)
