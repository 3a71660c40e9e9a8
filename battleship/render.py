"""What a player sees on each cell of a board."""

from __future__ import annotations

from enum import Enum

from .geometry import Point
from .proxy import GameDeskProxy


class CellView(Enum):
    """Picture of a cell; the value is its one-character symbol."""

    SHIP = "#"
    BURNING_SHIP = "*"
    SUNKEN_SHIP = "X"
    WATER = "~"
    NOT_VISIBLE = "."


def cell_view(proxy: GameDeskProxy, point: Point, hostile: bool) -> CellView:
    """Show ``point`` as the proxy's player sees it.

    With ``hostile`` the cell is taken from the enemy's territory, where
    only cells already shot at are revealed; otherwise it is taken from
    the player's own territory, where the player's ships are shown.
    """
    own = proxy.player_number
    enemy = 3 - own
    if hostile:
        if not proxy.visibility(point, enemy):
            return CellView.NOT_VISIBLE
        if proxy.flooding(point, enemy):
            return CellView.SUNKEN_SHIP
        if proxy.cell_state(point, enemy):
            return CellView.BURNING_SHIP
        return CellView.WATER
    if proxy.flooding(point, own):
        return CellView.SUNKEN_SHIP
    visible = proxy.visibility(point, own)
    if proxy.cell_state(point, own):
        return CellView.BURNING_SHIP if visible else CellView.SHIP
    return CellView.WATER if visible else CellView.NOT_VISIBLE


def render_board(proxy: GameDeskProxy, hostile: bool) -> list[list[CellView]]:
    """Return the board as rows (one per ``row``), each listing every column."""
    return [
        [cell_view(proxy, Point(col, row), hostile) for col in range(proxy.length)]
        for row in range(proxy.width)
    ]