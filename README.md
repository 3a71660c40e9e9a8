# battleship

A classic Battleship game played in the terminal. It has a bot opponent and
three game modes:

- **bot-vs-human**: you are player 2 and shoot at the bot's board, and the
  bot (player 1) shoots back;
- **bot-vs-bot**: two bots play against each other;
- **human-vs-human**: two players take turns at the same terminal.

Boards are between 11 and 16 cells on each side (13 × 13 by default). Each
player has 30 ship cells: one ship of length 5, two of length 4, three of
length 3 and four of length 2. The ships are placed at random, and no two
ships may touch, not even at a corner. Player 2 shoots first. A player who
hits a ship shoots again. A ship sinks when every one of its cells has been
hit, and the first player to hit all 30 enemy ship cells wins.

## Installation

```
pip install .
```

## Playing

```
battleship [--mode {bot-vs-bot,bot-vs-human,human-vs-human}]
           [--width N] [--height N] [--seed N] [--delay SECONDS]
```

- `--mode`: who plays against whom (default `bot-vs-human`);
- `--width`, `--height`: board size, each from 11 to 16 (default 13);
- `--seed`: seed for the random ship placement and bot moves, to replay a game;
- `--delay`: seconds to wait before each bot move (default 3).

On a human player's turn the game prints that player's own fleet and the
enemy waters, then asks for a shot written as `column,row` or `column row`
(both counted from 0). Cells already shot at are refused with a message and
the player is asked again. Ending the input (Ctrl-D) leaves the game. When
the game is over both fleets are shown together with the result.

Board symbols:

| Symbol | Meaning                     |
|--------|-----------------------------|
| `#`    | your ship, not hit          |
| `*`    | hit ship that is not sunk   |
| `X`    | sunken ship                 |
| `~`    | water that was shot at      |
| `.`    | cell not shot at / unknown  |

## Using the library

The game logic works without the terminal front end:

```python
import random

from battleship.game import start_game
from battleship.placement import place_ships

rng = random.Random(1)
game = start_game(13, 13, rng)
game.controller.initial_state_of_board()
place_ships(game.controller, game.desk, 1, rng)
place_ships(game.controller, game.desk, 2, rng)

point = game.bot1.get_index()
game.controller.make_move(1, point)
```

`battleship.session.GameSession` sets up a game and keeps the turn order
for a `GameType`:

```python
import random

from battleship.session import GameSession, GameType

session = GameSession(GameType.BOT_VS_BOT, rng=random.Random(1))
while not session.finished:
    result = session.bot_move()
print(session.winner(), session.win_message())
```

`GameSession.human_move(player, point)` makes a human player's shot, and each
move returns a `MoveResult` telling whether it hit, sank a ship or won.
`battleship.render.render_board(proxy, hostile)` gives a board as one player
sees it, as rows of `CellView` values. Rule violations raise
`battleship.errors.BattleshipError`.

## What it does not do

There is no graphical window: the game is played in the terminal only. In the
human-vs-human mode both players share one terminal, and nothing hides one
player's fleet from the other between turns.

## Running the tests

```
pip install .[test]
pytest
```