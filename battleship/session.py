"""Turn order and the end of a game in each game mode."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from .constants import DEFAULT_LENGTH, DEFAULT_WIDTH
from .errors import BattleshipError
from .game import Game, start_game
from .geometry import Point
from .placement import place_ships
from .rules import check_win


class GameType(Enum):
    BOT_VS_BOT = "bot-vs-bot"
    BOT_VS_HUMAN = "bot-vs-human"
    HUMAN_VS_HUMAN = "human-vs-human"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of one shot."""

    player: int
    point: Point
    hit: bool
    sunk: bool
    won: bool


class GameSession:
    """One game from the placement of the ships to the winning shot.

    Player 2 moves first. In a bot-versus-human game the bot is player 1.
    A player who hits keeps the turn.
    """

    def __init__(
        self,
        game_type: GameType,
        width: int = DEFAULT_WIDTH,
        length: int = DEFAULT_LENGTH,
        rng: random.Random | None = None,
    ) -> None:
        self.game_type = GameType(game_type)
        self.game: Game = start_game(width, length, rng)
        self.game.controller.initial_state_of_board()
        place_ships(self.game.controller, self.game.desk, 1, rng)
        place_ships(self.game.controller, self.game.desk, 2, rng)
        self.moving_player = 2
        self.finished = False

    @property
    def human_players(self) -> tuple[int, ...]:
        """Players whose moves are made by people."""
        return {
            GameType.BOT_VS_BOT: (),
            GameType.BOT_VS_HUMAN: (2,),
            GameType.HUMAN_VS_HUMAN: (1, 2),
        }[self.game_type]

    def bot_move(self) -> MoveResult:
        """Let the bot of the moving player shoot."""
        self._ensure_running()
        if self.moving_player in self.human_players:
            raise BattleshipError("It is a human player's turn")
        bot = self.game.bot1 if self.moving_player == 1 else self.game.bot2
        return self._shoot(self.moving_player, bot.get_index())

    def human_move(self, player: int, point: Point) -> MoveResult:
        """Let the human ``player`` shoot at ``point``."""
        self._ensure_running()
        if player not in self.human_players:
            raise BattleshipError(f"Player {player} is not a human player")
        if player != self.moving_player:
            raise BattleshipError(f"It is not player {player}'s turn")
        if self.game.desk.visibility(point, 3 - player):
            raise BattleshipError(
                "Do not shoot at cell which has already shot down."
            )
        return self._shoot(player, point)

    def winner(self) -> int | None:
        """Number of the player who won, or None while the game goes on."""
        return self.moving_player if self.finished else None

    def win_message(self) -> str:
        """Message shown when the game is over."""
        if not self.finished:
            raise BattleshipError("The game is not finished yet")
        if self.game_type is GameType.BOT_VS_BOT:
            return "The game is finished"
        if self.game_type is GameType.HUMAN_VS_HUMAN or self.moving_player == 2:
            return "Congratulations. You won!"
        return "Bot won. Try again next time"

    def _ensure_running(self) -> None:
        if self.finished:
            raise BattleshipError("The game is finished")

    def _shoot(self, player: int, point: Point) -> MoveResult:
        desk = self.game.desk
        enemy = 3 - player
        self.game.controller.make_move(player, point)
        hit = desk.cell_state(point, enemy)
        sunk = desk.flooding(point, enemy)
        won = check_win(desk, player)
        if won:
            self.finished = True
        elif not hit:
            self.moving_player = enemy
        return MoveResult(player, point, hit, sunk, won)