"""Case-insensitive HTTP headers.

``Headers`` is the immutable view over the raw byte pairs of an ASGI
scope. ``MutableHeaders`` backs the response sink: handlers and
middleware set values on it until the status line is committed.
"""

from collections.abc import Iterator, Mapping, MutableMapping


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive request headers.

    ``__getitem__`` returns the first matching value.
    ``get_list`` returns all values for a header.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        object.__setattr__(self, "_raw", raw)

    def __getitem__(self, key: str) -> str:
        key_lower = key.lower().encode("latin-1")
        for name, value in self._raw:
            if name.lower() == key_lower:
                return value.decode("latin-1")
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = key.lower().encode("latin-1")
        return any(name.lower() == key_lower for name, _ in self._raw)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._raw:
            key = name.decode("latin-1").lower()
            if key not in seen:
                seen.add(key)
                yield key

    def __len__(self) -> int:
        return len(set(self))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"Headers({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        key_lower = key.lower().encode("latin-1")
        return [value.decode("latin-1") for name, value in self._raw if name.lower() == key_lower]

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """Raw header byte pairs, as received."""
        return self._raw


class MutableHeaders(MutableMapping[str, str]):
    """Mutable, case-insensitive response headers.

    Keeps the casing of the first assignment for output. ``h[key] = value``
    replaces every existing value, ``add`` appends another one.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[str, str] | None = None) -> None:
        self._items: list[tuple[str, str]] = []
        for name, value in (items or {}).items():
            self[name] = value

    def __getitem__(self, key: str) -> str:
        key_lower = key.lower()
        for name, value in self._items:
            if name.lower() == key_lower:
                return value
        raise KeyError(key)

    def __setitem__(self, key: str, value: str) -> None:
        key_lower = key.lower()
        kept: list[tuple[str, str]] = []
        replaced = False
        for name, existing in self._items:
            if name.lower() != key_lower:
                kept.append((name, existing))
            elif not replaced:
                kept.append((name, value))
                replaced = True
        if not replaced:
            kept.append((key, value))
        self._items = kept

    def __delitem__(self, key: str) -> None:
        key_lower = key.lower()
        kept = [(name, value) for name, value in self._items if name.lower() != key_lower]
        if len(kept) == len(self._items):
            raise KeyError(key)
        self._items = kept

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._items:
            key = name.lower()
            if key not in seen:
                seen.add(key)
                yield key

    def __len__(self) -> int:
        return len(set(self))

    def __repr__(self) -> str:
        return f"MutableHeaders({self._items!r})"

    def add(self, key: str, value: str) -> None:
        """Append a value without replacing existing ones (e.g. ``Set-Cookie``)."""
        self._items.append((key, value))

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        key_lower = key.lower()
        return [value for name, value in self._items if name.lower() == key_lower]

    def copy(self) -> "MutableHeaders":
        clone = MutableHeaders()
        clone._items = list(self._items)
        return clone

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """Header pairs encoded for ASGI (lowercased names)."""
        return tuple(
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in self._items
        )
