"""
Board representation for TicTacToe.
Players, board snapshots and game results.
"""

import operator
from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


# A board is an immutable row-major tuple of N*N cells.
# None means empty, otherwise the Player who marked it.
Cell = Optional[Player]
Board = Tuple[Cell, ...]


def empty_board(board_size: int) -> Board:
    """Create an empty board_size x board_size board."""
    return (None,) * (board_size * board_size)


def place_mark(board: Board, cell_index: int, player: Player) -> Board:
    """Return a copy of the board with player's mark at cell_index."""
    cells = list(board)
    cells[cell_index] = player
    return tuple(cells)


def as_index(value) -> Optional[int]:
    """
    Convert a cell or move index to a plain int.

    Accepts anything usable as a list index (int, numpy integers).

    Returns:
        The int, or None for bools and non-integers.
    """
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def player_for_move(move_number: int) -> Player:
    """X plays on even move numbers, O on odd ones."""
    return Player.X if move_number % 2 == 0 else Player.O


@dataclass(frozen=True)
class WinResult:
    """
    A completed line.
    """
    player: Player              # Who owns the line
    line: Tuple[int, ...]       # Cell indices, in line order


class GameStatusKind(Enum):
    """Whether a board is still being played, won or drawn."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    Status of a single board.

    - IN_PROGRESS: player is whoever moves next
    - WIN: player is the winner and line the winning cells
    - DRAW: no player, no line
    """
    kind: GameStatusKind
    player: Optional[Player] = None
    line: Tuple[int, ...] = ()

    @classmethod
    def in_progress(cls, next_player: Player) -> "GameStatus":
        return cls(GameStatusKind.IN_PROGRESS, next_player)

    @classmethod
    def win(cls, result: WinResult) -> "GameStatus":
        return cls(GameStatusKind.WIN, result.player, result.line)

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(GameStatusKind.DRAW)

    @property
    def is_game_over(self) -> bool:
        return self.kind is not GameStatusKind.IN_PROGRESS

    def describe(self) -> str:
        """Short human readable status, e.g. "Next: X"."""
        if self.kind is GameStatusKind.WIN:
            return f"Winner: {self.player.value}"
        if self.kind is GameStatusKind.DRAW:
            return "Draw!"
        return f"Next: {self.player.value}"
