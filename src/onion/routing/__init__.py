"""Routing: segment matcher, ordered route table, prefix groups.

Routes are registered during setup and frozen when the app starts
serving. Lookup is a scan in registration order; the first route whose
method and pattern both match wins.
"""

from onion.routing.group import RouteGroup, new_group
from onion.routing.matcher import match_path, match_segments, parse_pattern
from onion.routing.route import PathSegment, Route, RouteMatch
from onion.routing.router import Router

__all__ = [
    "PathSegment",
    "Route",
    "RouteGroup",
    "RouteMatch",
    "Router",
    "match_path",
    "match_segments",
    "new_group",
    "parse_pattern",
]
