"""
Game state management for TicTacToe.
Tracks the history of boards, the move being viewed, and the score.
"""

import logging
from typing import List, Tuple
from dataclasses import dataclass, field

from .board import (
    Board, GameStatus, Player, as_index, empty_board, place_mark, player_for_move
)
from .config import GameConfig
from .errors import InvalidGridSize, InvalidIndex
from .move_validator import MoveRejection, MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


@dataclass
class ScoreTally:
    """Wins per player for the whole session."""
    x_wins: int = 0
    o_wins: int = 0

    def record_win(self, player: Player):
        if player == Player.X:
            self.x_wins += 1
        else:
            self.o_wins += 1

    @property
    def total(self) -> int:
        return self.x_wins + self.o_wins


@dataclass(frozen=True)
class GameStateSnapshot:
    """
    Everything a front-end needs to draw the game after a call.
    """
    board: Board            # Active board (the one being viewed)
    history_length: int     # Number of recorded boards, including the empty one
    current_move: int       # Index of the active board in the history
    status: GameStatus      # In progress / win / draw for the active board
    score_x: int            # Games won by X this session
    score_o: int            # Games won by O this session


@dataclass
class GameState:
    """
    The complete state of a TicTacToe session.

    Tracks:
    - Every board since the start of the game (history[0] is empty)
    - Which board is being viewed (current_move)
    - Wins per player (kept across restarts)

    Whose turn it is is never stored: X moves when current_move is even,
    O when it is odd.
    """

    board_size: int = GameConfig.DEFAULT_BOARD_SIZE
    scores: ScoreTally = field(default_factory=ScoreTally)
    config: GameConfig = field(default_factory=GameConfig, repr=False)

    _history: List[Board] = field(default_factory=list, init=False, repr=False)
    current_move: int = field(default=0, init=False)

    def __post_init__(self):
        self.win_checker = WinChecker()
        self.validator = MoveValidator(self.win_checker)
        self.new_game(self.board_size)

    @property
    def board(self) -> Board:
        """The active board."""
        return self._history[self.current_move]

    @property
    def history(self) -> Tuple[Board, ...]:
        """Every recorded board, oldest first (read-only copy)."""
        return tuple(self._history)

    @property
    def current_player(self) -> Player:
        """Player whose turn it is on the active board."""
        return player_for_move(self.current_move)

    @property
    def is_game_over(self) -> bool:
        return self.status().is_game_over

    def new_game(self, board_size: int):
        """
        Start a new game on an empty board_size x board_size board.

        Scores are kept.

        Args:
            board_size: N, must be one of GameConfig.SUPPORTED_SIZES.
        """
        if (isinstance(board_size, bool) or not isinstance(board_size, int)
                or board_size <= 0 or board_size not in self.config.SUPPORTED_SIZES):
            raise InvalidGridSize(
                f"Unsupported board size {board_size!r}. "
                f"Choose one of {', '.join(str(s) for s in self.config.SUPPORTED_SIZES)}."
            )

        self.board_size = board_size
        self._history = [empty_board(board_size)]
        self.current_move = 0
        logger.debug("New %dx%d game", board_size, board_size)

    def play(self, cell_index: int) -> GameStateSnapshot:
        """
        Mark a cell for the player to move.

        Clicking an occupied cell or playing on a finished board does
        nothing. Playing from an earlier point of the history throws away
        every later board before the new one is recorded.

        Args:
            cell_index: Row-major cell index (row * N + col).

        Returns:
            Snapshot after the move.
        """
        result = self.validator.validate_move(self, cell_index)

        if not result.is_valid:
            if result.reason == MoveRejection.OUT_OF_RANGE:
                raise InvalidIndex(result.error_message)
            logger.debug("Ignoring move at %s: %s", cell_index, result.error_message)
            return self.snapshot()

        cell_index = as_index(cell_index)
        player = self.current_player
        next_board = place_mark(self.board, cell_index, player)

        # Drop any boards after the one being viewed
        del self._history[self.current_move + 1:]
        self._history.append(next_board)
        self.current_move = len(self._history) - 1

        logger.debug("Move #%d: %s at %d", self.current_move, player.value, cell_index)

        winner = self.win_checker.check_winner(next_board, self.board_size)
        if winner is not None:
            self.scores.record_win(winner.player)
            logger.info(
                "%s wins on line %s (X %d - O %d)",
                winner.player.value, list(winner.line),
                self.scores.x_wins, self.scores.o_wins
            )

        return self.snapshot()

    def jump_to(self, move_index: int) -> GameStateSnapshot:
        """
        View an earlier (or later) board from the history.

        History and scores are left alone.

        Args:
            move_index: 0 for the empty board, up to len(history) - 1.

        Returns:
            Snapshot of the board jumped to.
        """
        index = as_index(move_index)
        if index is None or not 0 <= index < len(self._history):
            raise InvalidIndex(
                f"Invalid move {move_index!r}. Must be 0-{len(self._history) - 1}."
            )

        self.current_move = index
        logger.debug("Jumped to move #%d", move_index)
        return self.snapshot()

    def restart(self) -> GameStateSnapshot:
        """Start over on the same board size, keeping scores."""
        self.new_game(self.board_size)
        return self.snapshot()

    def status(self) -> GameStatus:
        """Status of the active board."""
        status = self.win_checker.evaluate(self.board, self.board_size)
        if status.is_game_over:
            return status
        return GameStatus.in_progress(self.current_player)

    def snapshot(self) -> GameStateSnapshot:
        """Build the read-model for front-ends."""
        return GameStateSnapshot(
            board=self.board,
            history_length=len(self._history),
            current_move=self.current_move,
            status=self.status(),
            score_x=self.scores.x_wins,
            score_o=self.scores.o_wins
        )

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the active board.

        Returns:
            List of cell indices.
        """
        return [idx for idx, cell in enumerate(self.board) if cell is None]
