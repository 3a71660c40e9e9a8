"""Board coordinates and ship extents."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A cell of the board: ``col`` is vertical, ``row`` is horizontal."""

    col: int
    row: int


@dataclass(frozen=True)
class Ship:
    """A ship running from ``p1`` (its beginning) to ``p2`` (its end)."""

    p1: Point
    p2: Point

    def is_horizontal(self) -> bool:
        """True when the ship lies along a single column."""
        return self.p1.col == self.p2.col

    def cells(self) -> Iterator[Point]:
        """Yield every cell of the ship from beginning to end."""
        if self.is_horizontal():
            for row in range(self.p1.row, self.p2.row + 1):
                yield Point(self.p1.col, row)
        else:
            for col in range(self.p1.col, self.p2.col + 1):
                yield Point(col, self.p1.row)