"""Path parameter segments.

A pattern segment starting with ``:`` binds the request segment at the
same position, e.g. ``/books/:bookId``. Captured values are raw strings.
"""

PARAM_SIGIL = ":"


def is_param(segment: str) -> bool:
    """True if *segment* is a parameter placeholder."""
    return segment.startswith(PARAM_SIGIL)


def param_name(segment: str) -> str:
    """The parameter name with the sigil stripped (``":id"`` -> ``"id"``)."""
    return segment[len(PARAM_SIGIL):]
