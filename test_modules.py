"""
Tests for the TicTacToe game logic.
Run with pytest, or as a script to get a pass/fail summary.
"""

import sys

import numpy as np
import pytest

from logic.board import GameStatusKind, Player, empty_board
from logic.config import GameConfig
from logic.errors import GameError, InvalidGridSize, InvalidIndex
from logic.game_state import GameState
from logic.move_validator import MoveRejection, MoveValidator
from logic.win_checker import WinChecker, generate_winning_lines


def make_board(cells: str):
    """Build a board from a string like "XO.X.O..." (row-major)."""
    marks = {"X": Player.X, "O": Player.O, ".": None}
    return tuple(marks[c] for c in cells)


def play_moves(game: GameState, moves):
    snapshot = None
    for cell in moves:
        snapshot = game.play(cell)
    return snapshot


# A full 3x3 game with no completed line:
#   X O X
#   X O O
#   O X X
DRAW_MOVES = [0, 1, 2, 4, 3, 5, 7, 6, 8]


# ==================== WIN CHECKER ====================

@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 7])
def test_line_generation_counts(size):
    """2N + 2 lines of N valid indices each."""
    print(f"\n=== Testing line generation ({size}x{size}) ===")
    lines = generate_winning_lines(size)

    assert len(lines) == 2 * size + 2
    for line in lines:
        assert len(line) == size
        assert all(0 <= idx < size * size for idx in line)


def test_line_generation_order():
    """Rows, then columns, then main diagonal, then anti-diagonal."""
    lines = generate_winning_lines(3)

    assert lines[:3] == ((0, 1, 2), (3, 4, 5), (6, 7, 8))
    assert lines[3:6] == ((0, 3, 6), (1, 4, 7), (2, 5, 8))
    assert lines[6] == (0, 4, 8)
    assert lines[7] == (2, 4, 6)

    lines5 = generate_winning_lines(5)
    assert lines5[0] == (0, 1, 2, 3, 4)
    assert lines5[5] == (0, 5, 10, 15, 20)
    assert lines5[10] == (0, 6, 12, 18, 24)
    assert lines5[11] == (4, 8, 12, 16, 20)


@pytest.mark.parametrize("size", [0, -3, 2.5, "3", True])
def test_line_generation_rejects_bad_size(size):
    with pytest.raises(InvalidGridSize):
        generate_winning_lines(size)


def test_winner_horizontal_vertical_diagonal():
    checker = WinChecker()

    result = checker.check_winner(make_board("XXX" "O.O" "..."), 3)
    assert result.player == Player.X
    assert result.line == (0, 1, 2)

    result = checker.check_winner(make_board("XO." "XO." ".OX"), 3)
    assert result.player == Player.O
    assert result.line == (1, 4, 7)

    result = checker.check_winner(make_board("XO." ".XO" "..X"), 3)
    assert result.player == Player.X
    assert result.line == (0, 4, 8)

    result = checker.check_winner(make_board("XXO" ".O." "OX."), 3)
    assert result.player == Player.O
    assert result.line == (2, 4, 6)

    assert checker.check_winner(make_board("XO." ".O." "..X"), 3) is None
    assert checker.check_winner(empty_board(3), 3) is None


def test_winner_tie_break_follows_line_order():
    """When several lines are complete, the first in enumeration order wins."""
    checker = WinChecker()

    # Row 0 and column 0
    assert checker.check_winner(make_board("XXX" "X.." "X.."), 3).line == (0, 1, 2)
    # Column 0 and main diagonal
    assert checker.check_winner(make_board("X.." "XX." "X.X"), 3).line == (0, 3, 6)
    # Main and anti-diagonal
    assert checker.check_winner(make_board("X.X" ".X." "X.X"), 3).line == (0, 4, 8)


def test_winner_5x5():
    checker = WinChecker()
    board = make_board(
        "....O"
        "...O."
        "..O.."
        ".O..."
        "O...."
    )
    result = checker.check_winner(board, 5)
    assert result.player == Player.O
    assert result.line == (4, 8, 12, 16, 20)

    # Four in a row is not enough on 5x5
    assert checker.check_winner(make_board("XXXX." + "." * 20), 5) is None


def test_draw_and_evaluate():
    checker = WinChecker()
    full = make_board("XOX" "XOO" "OXX")

    assert checker.check_draw(full, 3)
    assert checker.evaluate(full, 3).kind == GameStatusKind.DRAW

    # Full board with a line is a win, not a draw
    won = make_board("XXX" "OOX" "XOO")
    assert not checker.check_draw(won, 3)
    assert checker.evaluate(won, 3).kind == GameStatusKind.WIN

    status = checker.evaluate(make_board("X........"), 3)
    assert status.kind == GameStatusKind.IN_PROGRESS
    assert status.player == Player.O
    assert checker.evaluate(empty_board(3), 3).player == Player.X


def test_evaluate_is_idempotent():
    checker = WinChecker()
    for cells in ["XXX" "OO." "...", "XOX" "XOO" "OXX", "X...O...."]:
        board = make_board(cells)
        assert checker.check_winner(board, 3) == checker.check_winner(board, 3)
        assert checker.evaluate(board, 3) == checker.evaluate(board, 3)


def test_board_length_must_match_size():
    with pytest.raises(ValueError):
        WinChecker().check_winner(empty_board(3), 5)


# ==================== MOVE VALIDATOR ====================

def test_move_validator():
    print("\n=== Testing Move Validator ===")
    game = GameState()
    validator = MoveValidator()

    assert validator.validate_move(game, 4).is_valid
    assert validator.get_valid_moves(game) == list(range(9))

    game.play(4)
    result = validator.validate_move(game, 4)
    assert not result.is_valid
    assert result.reason == MoveRejection.OCCUPIED

    for bad in (-1, 9, "4", None, True):
        result = validator.validate_move(game, bad)
        assert result.reason == MoveRejection.OUT_OF_RANGE

    play_moves(game, [0, 3, 1, 5])  # X completes row 1 (3, 4, 5)
    result = validator.validate_move(game, 8)
    assert result.reason == MoveRejection.GAME_OVER
    assert validator.get_valid_moves(game) == []


# ==================== GAME STATE ====================

def test_new_game_state():
    print("\n=== Testing Game State ===")
    game = GameState()

    assert game.board_size == 3
    assert game.history == (empty_board(3),)
    assert game.current_move == 0
    assert game.current_player == Player.X
    assert game.scores.x_wins == 0 and game.scores.o_wins == 0

    status = game.status()
    assert status.kind == GameStatusKind.IN_PROGRESS
    assert status.player == Player.X


def test_play_appends_and_alternates_turns():
    game = GameState()
    expected = [Player.X, Player.O, Player.X, Player.O, Player.X]

    for move, cell in enumerate([4, 0, 8, 2, 6]):
        assert game.status().player == expected[move]
        before = len(game.history)
        snapshot = game.play(cell)
        assert snapshot.history_length == before + 1
        assert snapshot.current_move == move + 1
        assert game.board[cell] == expected[move]

    # Each history step changes exactly one cell from empty to a mark
    for prev, nxt in zip(game.history, game.history[1:]):
        changed = [i for i, (a, b) in enumerate(zip(prev, nxt)) if a != b]
        assert len(changed) == 1
        assert prev[changed[0]] is None and nxt[changed[0]] is not None


def test_win_scenario_row_zero():
    game = GameState()
    snapshot = play_moves(game, [0, 4, 1, 5, 2])

    status = game.status()
    assert status.kind == GameStatusKind.WIN
    assert status.player == Player.X
    assert status.line == (0, 1, 2)
    assert snapshot.status == status
    assert snapshot.score_x == 1
    assert snapshot.score_o == 0


def test_draw_scenario():
    game = GameState()
    snapshot = play_moves(game, DRAW_MOVES)

    assert game.status().kind == GameStatusKind.DRAW
    assert game.status().player is None
    assert snapshot.history_length == 10
    assert snapshot.score_x == 0 and snapshot.score_o == 0


def test_occupied_cell_is_noop():
    game = GameState()
    game.play(4)
    before = game.snapshot()

    after = game.play(4)

    assert after == before
    assert len(game.history) == 2
    assert game.current_player == Player.O


def test_play_after_win_or_draw_is_noop():
    game = GameState()
    play_moves(game, [0, 4, 1, 5, 2])
    before = game.snapshot()

    assert game.play(8) == before
    assert game.scores.x_wins == 1

    game.restart()
    play_moves(game, DRAW_MOVES)
    before = game.snapshot()
    game.play(0)
    assert game.snapshot() == before


def test_play_out_of_range_raises():
    game = GameState()
    game.play(0)
    before = game.snapshot()

    for bad in (-1, 9, 100):
        with pytest.raises(InvalidIndex):
            game.play(bad)

    assert game.snapshot() == before


def test_branching_play_truncates_history():
    game = GameState()
    play_moves(game, [0, 1, 2, 3])
    assert len(game.history) == 5

    game.jump_to(0)
    snapshot = game.play(0)

    assert snapshot.history_length == 2
    assert snapshot.current_move == 1
    assert game.history[1] == make_board("X........")


def test_branching_from_middle():
    game = GameState()
    play_moves(game, [0, 1, 2, 3, 4])
    game.jump_to(2)
    game.play(8)  # X again, since move 2 is even

    assert len(game.history) == 4
    assert game.board == make_board("XO......X")
    assert game.current_player == Player.O


def test_history_is_read_only():
    """Changing the returned history does not touch the game."""
    game = GameState()
    game.play(0)
    before = game.snapshot()

    history = game.history
    assert isinstance(history, tuple)
    with pytest.raises(AttributeError):
        history.append(history[0])

    copied = list(game.history)
    copied.append(copied[0])
    copied.reverse()

    assert len(game.history) == 2
    assert game.history[1] == make_board("X........")
    assert game.snapshot() == before


def test_numpy_indices_accepted():
    game = GameState()

    snapshot = game.play(np.int64(4))
    assert snapshot.board[4] == Player.X

    game.play(np.int32(0))
    assert game.jump_to(np.int64(1)).current_move == 1
    assert type(game.current_move) is int

    with pytest.raises(InvalidIndex):
        game.play(np.int64(9))
    with pytest.raises(InvalidIndex):
        game.jump_to(np.int64(5))
    with pytest.raises(InvalidIndex):
        game.play(np.float64(2.0))

    assert MoveValidator().validate_move(game, np.int64(8)).is_valid


def test_jump_to_keeps_history():
    game = GameState()
    play_moves(game, [0, 1, 2])

    snapshot = game.jump_to(1)
    assert snapshot.current_move == 1
    assert snapshot.history_length == 4
    assert snapshot.board == make_board("X........")
    assert game.status().player == Player.O

    # Jump forward again
    assert game.jump_to(3).board == make_board("XOX......")


def test_jump_to_out_of_range_raises():
    game = GameState()
    play_moves(game, [0, 1])
    before = game.snapshot()

    for bad in (10, 3, -1, "1"):
        with pytest.raises(InvalidIndex):
            game.jump_to(bad)

    assert game.snapshot() == before


def test_jump_does_not_change_scores():
    game = GameState()
    play_moves(game, [0, 4, 1, 5, 2])
    assert game.scores.x_wins == 1

    game.jump_to(0)
    assert game.snapshot().score_x == 1
    game.jump_to(5)
    assert game.snapshot().score_x == 1

    # Replaying the win from an earlier point counts again
    game.jump_to(4)
    game.play(2)
    assert game.scores.x_wins == 2


def test_score_increases_at_most_one_per_play():
    game = GameState()
    # O completes column 1 on the last move
    moves = [0, 1, 2, 4, 6, 7]
    total = 0
    for cell in moves:
        game.play(cell)
        new_total = game.scores.total
        assert new_total - total in (0, 1)
        total = new_total

    assert game.status().kind == GameStatusKind.WIN
    assert game.status().player == Player.O
    assert game.scores.o_wins == 1
    assert game.scores.x_wins == 0

    # Clicking more does not count the win again
    game.play(8)
    assert game.scores.total == 1


def test_restart_keeps_scores():
    game = GameState()
    play_moves(game, [0, 4, 1, 5, 2])

    snapshot = game.restart()

    assert snapshot.history_length == 1
    assert snapshot.current_move == 0
    assert snapshot.board == empty_board(3)
    assert snapshot.score_x == 1
    assert game.status().player == Player.X


def test_new_game_changes_size():
    game = GameState()
    play_moves(game, [0, 4, 1, 5, 2])

    game.new_game(5)

    assert game.board_size == 5
    assert game.board == empty_board(5)
    assert game.scores.x_wins == 1

    with pytest.raises(InvalidIndex):
        game.play(25)

    play_moves(game, [0, 5, 1, 6, 2, 7, 3, 8])
    assert game.status().kind == GameStatusKind.IN_PROGRESS
    game.play(4)
    assert game.status().line == (0, 1, 2, 3, 4)
    assert game.scores.x_wins == 2


@pytest.mark.parametrize("size", [4, 0, -3, 2, "3", None])
def test_new_game_rejects_bad_size(size):
    game = GameState()
    game.play(4)
    before = game.snapshot()

    with pytest.raises(InvalidGridSize):
        game.new_game(size)

    assert game.board_size == 3
    assert game.snapshot() == before


def test_constructor_rejects_bad_size():
    with pytest.raises(InvalidGridSize):
        GameState(board_size=4)


def test_custom_config_sizes():
    class WideConfig(GameConfig):
        SUPPORTED_SIZES = (3, 4, 5)

    game = GameState(board_size=4, config=WideConfig())
    play_moves(game, [0, 4, 1, 5, 2, 6, 3])

    assert game.status().line == (0, 1, 2, 3)


def test_errors_are_recoverable_game_errors():
    assert issubclass(InvalidIndex, GameError)
    assert issubclass(InvalidIndex, IndexError)
    assert issubclass(InvalidGridSize, GameError)
    assert issubclass(InvalidGridSize, ValueError)


def test_status_describe():
    game = GameState()
    assert game.status().describe() == "Next: X"
    game.play(0)
    assert game.status().describe() == "Next: O"
    play_moves(game, [4, 1, 5, 2])
    assert game.status().describe() == "Winner: X"
    game.restart()
    play_moves(game, DRAW_MOVES)
    assert game.status().describe() == "Draw!"


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)
    return pytest.main([__file__, "-v"])


if __name__ == "__main__":
    sys.exit(run_all_tests())
