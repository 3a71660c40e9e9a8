import random

import pytest

from battleship.constants import SHIP_ITEMS
from battleship.controller import GameController
from battleship.desk import GameDesk
from battleship.errors import BattleshipError
from battleship.placement import find_place, place_ships
from battleship.rules import ship_coordinates


@pytest.fixture
def desk():
    return GameDesk(11, 11)


@pytest.mark.parametrize("length", [2, 3, 4, 5])
def test_find_place_returns_ship_of_length(desk, length):
    ship = find_place(desk, 1, length, random.Random(length))
    cells = list(ship.cells())
    assert len(cells) == length
    assert all(
        0 <= p.col < desk.length and 0 <= p.row < desk.width for p in cells
    )


def test_find_place_fails_on_full_board(desk):
    for p in desk.points():
        desk.set_cell_state(p, True, 1)
    with pytest.raises(BattleshipError):
        find_place(desk, 1, 2, random.Random(0))


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_place_ships_total_cells(desk, seed):
    controller = GameController(desk)
    place_ships(controller, desk, 1, random.Random(seed))
    count = sum(1 for p in desk.points() if desk.cell_state(p, 1))
    assert count == SHIP_ITEMS


@pytest.mark.parametrize("seed", [5, 6, 7])
def test_place_ships_fleet_composition(desk, seed):
    controller = GameController(desk)
    place_ships(controller, desk, 2, random.Random(seed))
    ships = {
        ship_coordinates(desk, p, 2)
        for p in desk.points()
        if desk.cell_state(p, 2)
    }
    lengths = sorted(len(list(s.cells())) for s in ships)
    assert lengths == [2, 2, 2, 2, 3, 3, 3, 4, 4, 5]


def test_place_ships_is_deterministic_with_seed():
    results = []
    for _ in range(2):
        desk = GameDesk(12, 12)
        place_ships(GameController(desk), desk, 1, random.Random(42))
        results.append([p for p in desk.points() if desk.cell_state(p, 1)])
    assert results[0] == results[1]