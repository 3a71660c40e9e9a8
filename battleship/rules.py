"""Board rules: winning, ship extents and room for new ships."""

from __future__ import annotations

from typing import Protocol

from .constants import SHIP_ITEMS
from .errors import BattleshipError
from .geometry import Point, Ship


class _Board(Protocol):
    width: int
    length: int

    def cell_state(self, point: Point, player: int) -> bool: ...

    def visibility(self, point: Point, player: int) -> bool: ...


def _enemy(player: int) -> int:
    return 3 - player


def check_win(desk: _Board, player: int) -> bool:
    """True if ``player`` has hit every ship cell of the enemy."""
    enemy = _enemy(player)
    blasted = sum(
        1
        for col in range(desk.length)
        for row in range(desk.width)
        if desk.visibility(Point(col, row), enemy)
        and desk.cell_state(Point(col, row), enemy)
    )
    return blasted == SHIP_ITEMS


def _next_neighbor(desk: _Board, p: Point, player: int, forward: bool) -> Point | None:
    if forward:
        candidates = []
        if p.row != desk.width - 1:
            candidates.append(Point(p.col, p.row + 1))
        if p.col != desk.length - 1:
            candidates.append(Point(p.col + 1, p.row))
    else:
        candidates = []
        if p.row != 0:
            candidates.append(Point(p.col, p.row - 1))
        if p.col != 0:
            candidates.append(Point(p.col - 1, p.row))
    return next((c for c in candidates if desk.cell_state(c, player)), None)


def ship_coordinates(desk: _Board, point: Point, player: int) -> Ship:
    """Return the whole ship that occupies ``point``."""
    if not desk.cell_state(point, player):
        raise BattleshipError(
            "No possibility to get coordinates of nonexistent ship"
        )
    start = end = point
    while (step := _next_neighbor(desk, start, player, False)) is not None:
        start = step
    while (step := _next_neighbor(desk, end, player, True)) is not None:
        end = step
    return Ship(start, end)


def ship_items_number(desk: _Board, point: Point, player: int) -> int:
    """Count ship cells in the 3x3 area around ``point``.

    A point with fewer than four cells of that area on the board
    (so lying off the board) counts as occupied.
    """
    rows = range(max(point.row - 1, 0), min(point.row + 2, desk.width))
    cols = range(max(point.col - 1, 0), min(point.col + 2, desk.length))
    if len(rows) * len(cols) < 4:
        return 1
    return sum(
        1 for row in rows for col in cols if desk.cell_state(Point(col, row), player)
    )


def space_for_ship(desk: _Board, ship: Ship, player: int) -> None:
    """Raise BattleshipError unless ``ship`` can be placed on free water."""
    for cell in ship.cells():
        if ship_items_number(desk, cell, player) != 0:
            raise BattleshipError("No space for this ship")