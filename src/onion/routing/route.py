"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass, field

from onion._internal.types import HandlerFunc
from onion.routing.params import is_param, param_name


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Literal:  ``books``  (is_param=False)
    Param:    ``:id``    (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None

    @classmethod
    def parse(cls, segment: str) -> "PathSegment":
        if is_param(segment):
            return cls(value=segment, is_param=True, param_name=param_name(segment))
        return cls(value=segment)


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition: method, pattern and handler.

    The pattern is parsed once, at creation.
    """

    method: str
    pattern: str
    handler: HandlerFunc
    segments: tuple[PathSegment, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        from onion.routing.matcher import parse_pattern

        object.__setattr__(self, "segments", parse_pattern(self.pattern))

    @property
    def key(self) -> tuple[str, str]:
        """The route table key."""
        return (self.method, self.pattern)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful lookup."""

    route: Route
    params: dict[str, str]
