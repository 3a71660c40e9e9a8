"""Everything needed to play one game."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .bot import Bot
from .controller import GameController
from .desk import GameDesk
from .proxy import GameDeskProxy


@dataclass
class Game:
    """The board, both players' views of it, their bots and the controller."""

    desk: GameDesk
    proxy1: GameDeskProxy
    proxy2: GameDeskProxy
    bot1: Bot
    bot2: Bot
    controller: GameController


def start_game(width: int, length: int, rng: random.Random | None = None) -> Game:
    """Create all objects needed for a game on a ``width`` x ``length`` board."""
    desk = GameDesk(width, length)
    proxy1 = GameDeskProxy(desk, 1)
    proxy2 = GameDeskProxy(desk, 2)
    return Game(
        desk=desk,
        proxy1=proxy1,
        proxy2=proxy2,
        bot1=Bot(proxy1, 1, rng),
        bot2=Bot(proxy2, 2, rng),
        controller=GameController(desk),
    )