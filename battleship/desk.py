"""The game board holding both players' territories."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .constants import MAX_LENGTH, MAX_WIDTH, MIN_LENGTH, MIN_WIDTH
from .errors import BattleshipError
from .geometry import Point

PLAYERS = (1, 2)


@dataclass
class Cell:
    """Everything known about one cell of a player's territory."""

    is_ship: bool = False
    is_sunken_ship: bool = False
    is_visible: bool = False


class GameDesk:
    """State of the board for both players."""

    def __init__(self, width: int, length: int) -> None:
        if not MIN_WIDTH <= width <= MAX_WIDTH:
            raise BattleshipError("width of desk is out of allowable range")
        if not MIN_LENGTH <= length <= MAX_LENGTH:
            raise BattleshipError("length of desk is out of allowable range")
        self.width = width
        self.length = length
        square = width * length
        self._cells = {player: [Cell() for _ in range(square)] for player in PLAYERS}

    def _cell(self, point: Point, player: int, action: str) -> Cell:
        if not (0 <= point.col < self.length and 0 <= point.row < self.width):
            raise BattleshipError(
                "Model: index of cell in some arguments of GameDesk's "
                "methods is out of range."
            )
        try:
            cells = self._cells[player]
        except KeyError:
            raise BattleshipError(
                f"Received invalid player number in {action} of GameDesk. "
                "It must be 1 or 2."
            ) from None
        return cells[point.col * self.width + point.row]

    def cell_state(self, point: Point, player: int) -> bool:
        """True if a ship occupies the cell on ``player``'s territory."""
        return self._cell(point, player, "cell_state").is_ship

    def set_cell_state(self, point: Point, state: bool, player: int) -> None:
        self._cell(point, player, "set_cell_state").is_ship = state

    def flooding(self, point: Point, player: int) -> bool:
        """True if a sunken ship occupies the cell."""
        return self._cell(point, player, "flooding").is_sunken_ship

    def set_flooding(self, point: Point, is_sunken: bool, player: int) -> None:
        self._cell(point, player, "set_flooding").is_sunken_ship = is_sunken

    def visibility(self, point: Point, player: int) -> bool:
        """True if the enemy can see the cell."""
        return self._cell(point, player, "visibility").is_visible

    def set_visibility(self, point: Point, is_visible: bool, player: int) -> None:
        self._cell(point, player, "set_visibility").is_visible = is_visible

    def points(self) -> Iterator[Point]:
        """Yield every cell of the board, column by column."""
        for col in range(self.length):
            for row in range(self.width):
                yield Point(col, row)