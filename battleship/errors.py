"""Exception type shared by the whole game."""


class BattleshipError(Exception):
    """Raised when a game rule or a board constraint is violated."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message