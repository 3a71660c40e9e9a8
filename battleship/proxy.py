"""Read-only view of the board restricted to what one player may know."""

from __future__ import annotations

from collections.abc import Iterator

from .desk import PLAYERS, GameDesk
from .errors import BattleshipError
from .geometry import Point


class GameDeskProxy:
    """Gives a player access to their own cells and to visible enemy cells."""

    def __init__(self, desk: GameDesk, player: int) -> None:
        if player not in PLAYERS:
            raise BattleshipError(
                "Invalid player number when try to create GameDeskProxy"
            )
        if desk is None:
            raise BattleshipError(
                "Received no GameDesk when try to create GameDeskProxy"
            )
        self._desk = desk
        self.player_number = player

    @property
    def width(self) -> int:
        return self._desk.width

    @property
    def length(self) -> int:
        return self._desk.length

    def cell_state(self, point: Point, player: int) -> bool:
        """Ship presence, available only for own or visible cells."""
        if player == self.player_number or self._desk.visibility(point, player):
            return self._desk.cell_state(point, player)
        raise BattleshipError(
            "Player tries to get state of cell that is not visible for him."
        )

    def flooding(self, point: Point, player: int) -> bool:
        return self._desk.flooding(point, player)

    def visibility(self, point: Point, player: int) -> bool:
        return self._desk.visibility(point, player)

    def points(self) -> Iterator[Point]:
        return self._desk.points()