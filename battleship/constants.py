"""Fixed parameters of the game."""

# Waiting time between moves, in milliseconds.
MOVE_WAIT = 3000

DEFAULT_WIDTH = 13
MIN_WIDTH = 11
MAX_WIDTH = 16

DEFAULT_LENGTH = 13
MIN_LENGTH = 11
MAX_LENGTH = 16

MAX_SHIP_LENGTH = 5
MIN_SHIP_LENGTH = 2

# Total number of ship cells on one player's board.
SHIP_ITEMS = 30