import pytest

from battleship.controller import GameController
from battleship.desk import GameDesk
from battleship.errors import BattleshipError
from battleship.geometry import Point, Ship


@pytest.fixture
def desk():
    return GameDesk(11, 11)


@pytest.fixture
def controller(desk):
    return GameController(desk)


def test_requires_desk():
    with pytest.raises(BattleshipError):
        GameController(None)


def test_set_ship_marks_cells(desk, controller):
    ship = Ship(Point(3, 3), Point(3, 5))
    controller.set_ship(2, ship)
    assert all(desk.cell_state(p, 2) for p in ship.cells())
    assert not desk.cell_state(Point(3, 6), 2)
    assert not any(desk.cell_state(p, 1) for p in ship.cells())


def test_set_ship_next_to_other_ship_fails(desk, controller):
    controller.set_ship(1, Ship(Point(3, 3), Point(3, 5)))
    with pytest.raises(BattleshipError):
        controller.set_ship(1, Ship(Point(4, 6), Point(5, 6)))
    assert not desk.cell_state(Point(4, 6), 1)


def test_set_ship_off_board_fails(controller):
    with pytest.raises(BattleshipError):
        controller.set_ship(1, Ship(Point(-5, 0), Point(-5, 1)))


def test_miss_makes_cell_visible(desk, controller):
    controller.make_move(1, Point(2, 2))
    assert desk.visibility(Point(2, 2), 2)
    assert not desk.flooding(Point(2, 2), 2)
    assert not desk.visibility(Point(2, 2), 1)


def test_shooting_twice_fails(controller):
    controller.make_move(1, Point(2, 2))
    with pytest.raises(BattleshipError):
        controller.make_move(1, Point(2, 2))


def test_sinking_ship_floods_all_cells(desk, controller):
    ship = Ship(Point(3, 3), Point(3, 4))
    controller.set_ship(2, ship)
    controller.make_move(1, Point(3, 3))
    assert not desk.flooding(Point(3, 3), 2)
    controller.make_move(1, Point(3, 4))
    assert all(desk.flooding(p, 2) for p in ship.cells())


def test_vertical_ship_sinks(desk, controller):
    ship = Ship(Point(4, 7), Point(6, 7))
    controller.set_ship(1, ship)
    for cell in ship.cells():
        controller.make_move(2, cell)
    assert [desk.flooding(p, 1) for p in ship.cells()] == [True, True, True]


def test_initial_state_clears_board(desk, controller):
    controller.set_ship(1, Ship(Point(3, 3), Point(3, 4)))
    controller.make_move(2, Point(3, 3))
    controller.initial_state_of_board()
    assert not any(
        desk.cell_state(p, pl) or desk.visibility(p, pl) or desk.flooding(p, pl)
        for p in desk.points()
        for pl in (1, 2)
    )