"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass

from .board import as_index
from .win_checker import WinChecker


class MoveRejection(Enum):
    """Why a move was refused."""
    OUT_OF_RANGE = "out_of_range"   # Error: index not on the board
    GAME_OVER = "game_over"         # Ignored: board already won or drawn
    OCCUPIED = "occupied"           # Ignored: cell already marked


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[MoveRejection] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Index must be a cell of the board
    2. Game must not be over
    3. Can only place on empty cells
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, game_state, cell_index: int) -> ValidationResult:
        """
        Validate a move on the active board of a game.

        Args:
            game_state: Current GameState.
            cell_index: Row-major cell index.

        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        cell_count = game_state.board_size * game_state.board_size

        # Check if index is on the board
        index = as_index(cell_index)
        if index is None or not 0 <= index < cell_count:
            return ValidationResult(
                is_valid=False,
                reason=MoveRejection.OUT_OF_RANGE,
                error_message=f"Invalid cell {cell_index!r}. Must be 0-{cell_count - 1}."
            )

        board = game_state.board

        # Check if game is over
        if self.win_checker.evaluate(board, game_state.board_size).is_game_over:
            return ValidationResult(
                is_valid=False,
                reason=MoveRejection.GAME_OVER,
                error_message="Game is already over!"
            )

        # Check if cell is empty
        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                reason=MoveRejection.OCCUPIED,
                error_message=f"Cell {index} is already occupied by {board[index].value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state) -> List[int]:
        """
        Get all valid moves for the player to move.

        Returns:
            List of empty cell indices, empty if the game is over.
        """
        board = game_state.board

        if self.win_checker.evaluate(board, game_state.board_size).is_game_over:
            return []

        return [idx for idx, cell in enumerate(board) if cell is None]
