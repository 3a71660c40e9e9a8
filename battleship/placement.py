"""Random placement of ships at the beginning of a game."""

from __future__ import annotations

import random

from .chance import random_below
from .constants import MAX_SHIP_LENGTH, MIN_SHIP_LENGTH
from .controller import GameController
from .desk import GameDesk
from .errors import BattleshipError
from .geometry import Point, Ship
from .rules import space_for_ship


def find_place(
    desk: GameDesk, player: int, length: int, rng: random.Random | None = None
) -> Ship:
    """Find a random free location for a ship of ``length`` cells."""
    attempts = desk.width * desk.length * 10
    for _ in range(attempts):
        if random_below(2, rng) == 0:
            col1 = random_below(desk.length, rng)
            col2 = col1
            row1 = random_below(desk.width - length + 1, rng)
            row2 = row1 + length - 1
        else:
            col1 = random_below(desk.length - length + 1, rng)
            col2 = col1 + length - 1
            row1 = random_below(desk.width, rng)
            row2 = row1
        ship = Ship(Point(col1, row1), Point(col2, row2))
        try:
            space_for_ship(desk, ship, player)
        except BattleshipError:
            continue
        return ship
    raise BattleshipError("No place for a ship")


def _try_place_ships(
    controller: GameController,
    desk: GameDesk,
    player: int,
    rng: random.Random | None,
) -> None:
    for length in range(MAX_SHIP_LENGTH, MIN_SHIP_LENGTH - 1, -1):
        for _ in range(MAX_SHIP_LENGTH + 1 - length):
            controller.set_ship(player, find_place(desk, player, length, rng))


def place_ships(
    controller: GameController,
    desk: GameDesk,
    player: int,
    rng: random.Random | None = None,
) -> None:
    """Place the full fleet of ``player`` at random, retrying until it fits."""
    while True:
        try:
            _try_place_ships(controller, desk, player, rng)
            return
        except BattleshipError:
            controller.initial_state_of_board()