"""Play battleship in the terminal."""

from __future__ import annotations

import argparse
import random
import time

from .constants import (
    DEFAULT_LENGTH,
    DEFAULT_WIDTH,
    MAX_LENGTH,
    MAX_WIDTH,
    MIN_LENGTH,
    MIN_WIDTH,
    MOVE_WAIT,
)
from .errors import BattleshipError
from .geometry import Point
from .render import CellView, render_board
from .session import GameSession, GameType, MoveResult


def parse_point(text: str) -> Point:
    """Read a cell written as ``column,row`` or ``column row``."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError("expected a column and a row, e.g. 3,5")
    try:
        col, row = (int(part) for part in parts)
    except ValueError:
        raise ValueError("column and row must be whole numbers") from None
    return Point(col, row)


def _format_board(title: str, board: list[list[CellView]]) -> str:
    columns = len(board[0]) if board else 0
    header = "    " + "".join(f"{col:>3}" for col in range(columns))
    lines = [title, header]
    for row, cells in enumerate(board):
        lines.append(f"{row:>3} " + "".join(f"{cell.value:>3}" for cell in cells))
    return "\n".join(lines)


def _show_player(session: GameSession, player: int) -> None:
    proxy = session.game.proxy1 if player == 1 else session.game.proxy2
    print(_format_board(f"Player {player}: your fleet", render_board(proxy, False)))
    print(_format_board(f"Player {player}: enemy waters", render_board(proxy, True)))


def _show_fleets(session: GameSession) -> None:
    for player, proxy in ((1, session.game.proxy1), (2, session.game.proxy2)):
        print(_format_board(f"Fleet of player {player}", render_board(proxy, False)))


def _describe(result: MoveResult) -> str:
    if result.sunk:
        outcome = "sunk"
    elif result.hit:
        outcome = "hit"
    else:
        outcome = "miss"
    return (
        f"Player {result.player} shoots at "
        f"{result.point.col},{result.point.row}: {outcome}"
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="battleship",
        description="Battleship game with bot and many other modes",
    )
    parser.add_argument(
        "--mode",
        choices=[t.value for t in GameType],
        default=GameType.BOT_VS_HUMAN.value,
        help="who plays against whom",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_LENGTH)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--delay",
        type=float,
        default=MOVE_WAIT / 1000,
        help="seconds to wait before each bot move",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not MIN_WIDTH <= args.width <= MAX_WIDTH:
        parser.error(f"width must be between {MIN_WIDTH} and {MAX_WIDTH}")
    if not MIN_LENGTH <= args.height <= MAX_LENGTH:
        parser.error(f"height must be between {MIN_LENGTH} and {MAX_LENGTH}")
    if args.delay < 0:
        parser.error("delay must not be negative")

    session = GameSession(
        GameType(args.mode), args.width, args.height, random.Random(args.seed)
    )
    while not session.finished:
        player = session.moving_player
        if player in session.human_players:
            _show_player(session, player)
            try:
                line = input(f"Player {player}, your shot (column,row): ")
            except EOFError:
                print()
                return 0
            try:
                result = session.human_move(player, parse_point(line))
            except (ValueError, BattleshipError) as error:
                print(error)
                continue
        else:
            if args.delay:
                time.sleep(args.delay)
            result = session.bot_move()
        print(_describe(result))
    _show_fleets(session)
    print(session.win_message())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())