"""Computer player."""

from __future__ import annotations

import random

from .chance import random_below, random_with_unequal_chances
from .desk import PLAYERS
from .errors import BattleshipError
from .geometry import Point
from .proxy import GameDeskProxy
from .rules import check_win


def _line_cell(p1: Point, p2: Point) -> Point:
    """Cell next to ``p1`` on the far side from its neighbour ``p2``."""
    return Point(2 * p1.col - p2.col, 2 * p1.row - p2.row)


class Bot:
    """Chooses cells to shoot at, using only what its player may see."""

    def __init__(
        self,
        desk: GameDeskProxy,
        bot_number: int,
        rng: random.Random | None = None,
    ) -> None:
        if desk is None:
            raise BattleshipError(
                "Received no GameDeskProxy when try to create Bot"
            )
        if bot_number not in PLAYERS:
            raise BattleshipError("Invalid bot's number when try to create Bot")
        self._desk = desk
        self.bot_number = bot_number
        self._enemy = 3 - bot_number
        self._rng = rng

    def get_index(self) -> Point:
        """Return the cell the bot wants to shoot at."""
        if check_win(self._desk, self.bot_number):
            raise BattleshipError("Bot won and shouldn't make any moves.")
        good_cells = [p for p in self._desk.points() if self._check_coordinate(p)]
        if good_cells:
            return self._best_cell(good_cells)
        return self._random_rational_cell()

    def _is_valid(self, p: Point) -> bool:
        return 0 <= p.col < self._desk.length and 0 <= p.row < self._desk.width

    def _sunk_or_burning(self, p: Point) -> bool:
        return self._desk.visibility(p, self._enemy) and self._desk.cell_state(
            p, self._enemy
        )

    def _is_good_neighbor(self, neighbor: Point, p: Point) -> bool:
        if neighbor.row == p.row or neighbor.col == p.col:
            return not self._desk.flooding(neighbor, self._enemy)
        return not self._sunk_or_burning(neighbor)

    def _check_neighboring_cells(self, p: Point) -> bool:
        for row in range(max(p.row - 1, 0), min(p.row + 2, self._desk.width)):
            for col in range(max(p.col - 1, 0), min(p.col + 2, self._desk.length)):
                neighbor = Point(col, row)
                if neighbor != p and not self._is_good_neighbor(neighbor, p):
                    return False
        return True

    def _visible_or_sunk_neighbor(self, p: Point) -> bool:
        return self._desk.visibility(
            p, self._enemy
        ) or not self._check_neighboring_cells(p)

    def _neighboring_burning_cell(self, p: Point) -> Point | None:
        candidates = (
            Point(p.col, p.row - 1),
            Point(p.col - 1, p.row),
            Point(p.col + 1, p.row),
            Point(p.col, p.row + 1),
        )
        for cell in candidates:
            if (
                self._is_valid(cell)
                and self._sunk_or_burning(cell)
                and not self._desk.flooding(cell, self._enemy)
            ):
                return cell
        return None

    def _check_coordinate(self, p: Point) -> bool:
        if self._visible_or_sunk_neighbor(p):
            return False
        return self._neighboring_burning_cell(p) is not None

    def _random_rational_cell(self) -> Point:
        while True:
            p = Point(
                random_below(self._desk.length, self._rng),
                random_below(self._desk.width, self._rng),
            )
            if not self._visible_or_sunk_neighbor(p):
                return p

    def _evaluate_cell(self, p: Point) -> int:
        mark = 1
        previous = self._neighboring_burning_cell(p)
        current = p
        following = _line_cell(current, previous)
        while self._is_valid(following):
            if self._visible_or_sunk_neighbor(following):
                break
            previous, current = current, following
            following = _line_cell(current, previous)
            mark += 1
        return mark

    def _best_cell(self, cells: list[Point]) -> Point:
        estimates = [self._evaluate_cell(p) for p in cells]
        return cells[random_with_unequal_chances(estimates, self._rng)]