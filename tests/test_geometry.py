import pytest

from battleship.geometry import Point, Ship


def test_point_fields():
    p = Point(3, 7)
    assert p.col == 3
    assert p.row == 7


def test_point_is_hashable_and_comparable():
    assert Point(1, 2) == Point(1, 2)
    assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


def test_point_is_immutable():
    p = Point(1, 1)
    with pytest.raises(AttributeError):
        p.col = 5
    assert p.col == 1
    assert p == Point(1, 1)


def test_same_column_is_horizontal():
    assert Ship(Point(2, 3), Point(2, 6)).is_horizontal() is True


def test_same_row_is_not_horizontal():
    assert Ship(Point(2, 3), Point(5, 3)).is_horizontal() is False


def test_single_cell_ship_is_horizontal():
    assert Ship(Point(4, 4), Point(4, 4)).is_horizontal() is True


def test_horizontal_cells_walk_rows():
    ship = Ship(Point(2, 3), Point(2, 6))
    cells = list(ship.cells())
    assert cells[0] == ship.p1
    assert cells[-1] == ship.p2
    assert all(c.col == 2 for c in cells)
    rows = [c.row for c in cells]
    assert rows == list(range(3, 7))


def test_vertical_cells_walk_columns():
    ship = Ship(Point(1, 8), Point(5, 8))
    cells = list(ship.cells())
    assert cells[0] == ship.p1
    assert cells[-1] == ship.p2
    assert all(c.row == 8 for c in cells)
    assert [c.col for c in cells] == list(range(1, 6))


def test_single_cell_ship_has_one_cell():
    ship = Ship(Point(4, 4), Point(4, 4))
    assert list(ship.cells()) == [Point(4, 4)]