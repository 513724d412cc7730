"""Query string of an inbound request.

Routing ignores the query entirely; only ``Request.url`` and handlers
read it.
"""

from dataclasses import dataclass, field
from urllib.parse import parse_qsl


@dataclass(frozen=True, slots=True)
class QueryParams:
    """The raw query string plus its decoded ``(name, value)`` pairs.

    Pairs keep their order and repeats. Blank values are kept, so
    ``?draft`` yields ``("draft", "")``. Lookups mirror ``Context.param``:
    a missing name reads as ``""`` unless a default is given.
    """

    raw: bytes = b""
    pairs: tuple[tuple[str, str], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        decoded = parse_qsl(self.raw.decode("latin-1"), keep_blank_values=True)
        object.__setattr__(self, "pairs", tuple(decoded))

    def get(self, name: str, default: str = "") -> str:
        for key, value in self.pairs:
            if key == name:
                return value
        return default

    def get_list(self, name: str) -> list[str]:
        """Every value given for *name*, in order."""
        return [value for key, value in self.pairs if key == name]

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self.pairs)
