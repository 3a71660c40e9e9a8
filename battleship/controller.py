"""Making moves and setting ships on the game board."""

from __future__ import annotations

from .desk import PLAYERS, GameDesk
from .errors import BattleshipError
from .geometry import Point, Ship
from .rules import ship_coordinates, space_for_ship


def _enemy(player: int) -> int:
    return 3 - player


class GameController:
    """Changes the board according to the rules of the game."""

    def __init__(self, desk: GameDesk) -> None:
        if desk is None:
            raise BattleshipError(
                "Received no GameDesk when try to create GameController"
            )
        self._desk = desk

    def initial_state_of_board(self) -> None:
        """Clear the board: no ships, no visible cells, no sunken ships."""
        for point in self._desk.points():
            for player in PLAYERS:
                self._desk.set_cell_state(point, False, player)
                self._desk.set_flooding(point, False, player)
                self._desk.set_visibility(point, False, player)

    def make_move(self, player: int, point: Point) -> None:
        """Let ``player`` shoot at ``point`` on the enemy's territory."""
        enemy = _enemy(player)
        if self._desk.visibility(point, enemy):
            raise BattleshipError(
                "Some of players wants to shoot at cell which has already "
                "shot down"
            )
        self._desk.set_visibility(point, True, enemy)
        if self._desk.cell_state(point, enemy):
            ship = ship_coordinates(self._desk, point, enemy)
            if self._is_burst(ship, enemy):
                for cell in ship.cells():
                    self._desk.set_flooding(cell, True, enemy)

    def set_ship(self, player: int, ship: Ship) -> None:
        """Put ``ship`` on ``player``'s territory."""
        try:
            space_for_ship(self._desk, ship, player)
        except BattleshipError:
            raise BattleshipError(
                "Can't set ship in cells with this location"
            ) from None
        for cell in ship.cells():
            self._desk.set_cell_state(cell, True, player)

    def _is_burst(self, ship: Ship, player: int) -> bool:
        return all(self._desk.visibility(cell, player) for cell in ship.cells())