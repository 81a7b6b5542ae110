"""
Errors raised by the TicTacToe game logic.

Illegal clicks (occupied cell, game already finished) are not errors:
the game state ignores them and returns the unchanged snapshot.
"""


class GameError(Exception):
    """Base class for recoverable game logic errors."""


class InvalidGridSize(GameError, ValueError):
    """Grid size is not positive or is not one of the supported sizes."""


class InvalidIndex(GameError, IndexError):
    """Cell index or history index is outside its valid range."""
