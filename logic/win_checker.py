"""
Win checker for TicTacToe.
Checks if a player has completed a line or if the game is a draw,
on any N x N board.
"""

from functools import lru_cache
from typing import Optional, Tuple

import numpy as np

from .board import Board, GameStatus, Player, WinResult
from .errors import InvalidGridSize


Line = Tuple[int, ...]


def generate_winning_lines(board_size: int) -> Tuple[Line, ...]:
    """
    Get every line that wins on a board_size x board_size board.

    Order is fixed: all rows (top to bottom), all columns (left to right),
    the main diagonal, then the anti-diagonal. That is 2N + 2 lines of N
    cell indices each.

    Args:
        board_size: N, the side length of the board.

    Returns:
        Tuple of lines, each a tuple of row-major cell indices.
    """
    if isinstance(board_size, bool) or not isinstance(board_size, int) or board_size <= 0:
        raise InvalidGridSize(f"Board size must be a positive integer, got {board_size!r}")

    return _lines_for_size(board_size)


@lru_cache(maxsize=None)
def _lines_for_size(board_size: int) -> Tuple[Line, ...]:
    grid = np.arange(board_size * board_size).reshape(board_size, board_size)

    lines = [tuple(int(i) for i in row) for row in grid]
    lines += [tuple(int(i) for i in col) for col in grid.T]
    lines.append(tuple(int(i) for i in np.diag(grid)))
    lines.append(tuple(int(i) for i in np.diag(np.fliplr(grid))))

    return tuple(lines)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: N marks of the same player in a row
    (horizontally, vertically, or on one of the two diagonals).

    The checker holds no game state; every call only looks at the
    board it is given.
    """

    def check_winner(self, board: Board, board_size: int) -> Optional[WinResult]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.
            board_size: N for the N x N board.

        Returns:
            WinResult for the first completed line, or None if no winner yet.
        """
        self._check_board(board, board_size)

        for line in generate_winning_lines(board_size):
            winner = self._check_line(board, line)
            if winner is not None:
                return WinResult(player=winner, line=line)

        return None

    def _check_line(self, board: Board, line: Line) -> Optional[Player]:
        """
        Check if a single line has a winner.

        Returns:
            The Player owning every cell of the line, None otherwise.
        """
        first = board[line[0]]
        if first is None:
            return None  # Empty cell, no winner on this line

        if all(board[idx] == first for idx in line):
            return first

        return None

    def check_draw(self, board: Board, board_size: int) -> bool:
        """
        Check if the board is a draw: every cell filled and no winner.
        """
        if self.check_winner(board, board_size) is not None:
            return False
        return all(cell is not None for cell in board)

    def evaluate(self, board: Board, board_size: int) -> GameStatus:
        """
        Get the full status of a board.

        The next player for an unfinished board is X when both players
        have placed the same number of marks, O otherwise.
        """
        result = self.check_winner(board, board_size)
        if result is not None:
            return GameStatus.win(result)

        if all(cell is not None for cell in board):
            return GameStatus.draw()

        x_count = sum(1 for cell in board if cell is Player.X)
        o_count = sum(1 for cell in board if cell is Player.O)
        return GameStatus.in_progress(Player.X if x_count == o_count else Player.O)

    def _check_board(self, board: Board, board_size: int):
        """Make sure the board has N*N cells."""
        if len(board) != board_size * board_size:
            raise ValueError(
                f"Board has {len(board)} cells, expected {board_size * board_size} "
                f"for a {board_size}x{board_size} grid"
            )
