"""Looping through a sequence of named shapes, one per animation step."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from clipmorph.svg.serializer import polygon


class ShapeCycle:
    """Cycle of polygon() values drawn from a polygon table.

    The first call to `next()` returns the first name's polygon; after the
    last name the cycle wraps back to the start.
    """

    def __init__(self, table: Mapping[str, str], names: Sequence[str] | None = None) -> None:
        self.names = list(table.keys() if names is None else names)
        if not self.names:
            raise ValueError("ShapeCycle needs at least one shape name")
        missing = [name for name in self.names if name not in table]
        if missing:
            raise KeyError(f"Unknown shape name(s): {', '.join(missing)}")
        self._values = {name: polygon(table[name]) for name in self.names}
        self.index = 0

    @property
    def next_name(self) -> str:
        return self.names[self.index]

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        value = self._values[self.names[self.index]]
        self.index = (self.index + 1) % len(self.names)
        return value

    def reset(self) -> None:
        self.index = 0
