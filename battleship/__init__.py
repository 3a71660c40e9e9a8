"""Battleship game for the terminal with a bot opponent and several play modes."""

__version__ = "0.2.2"