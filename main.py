"""
Main script for TicTacToe.

Starts the Tkinter UI by default, or a console game with --no-ui.

Console commands:
    play <cell>   mark a cell (row * N + col)
    jump <move>   go back (or forward) to a move from the history
    restart       clear the board, keep the score
    history       list recorded moves
    save <file>   write the board as an image
    quit          leave
"""

import logging
from typing import List

from logic.board import Board
from logic.config import GameConfig
from logic.errors import GameError
from logic.game_state import GameState, GameStateSnapshot
from render.board_renderer import BoardRenderer


def format_board(board: Board, board_size: int) -> str:
    """
    Text drawing of a board, with cell numbers on empty cells.
    """
    width = len(str(board_size * board_size - 1))
    separator = "+".join(["-" * (width + 2)] * board_size)

    rows: List[str] = []
    for row in range(board_size):
        cells = []
        for col in range(board_size):
            idx = row * board_size + col
            cell = board[idx]
            text = cell.value if cell is not None else str(idx)
            cells.append(f" {text:>{width}} ")
        rows.append("|".join(cells))

    return ("\n" + separator + "\n").join(rows)


class TicTacToeConsole:
    """
    Console front-end for TicTacToe.

    Reads commands from stdin and prints the board after each one.
    """

    def __init__(self, board_size: int = GameConfig.DEFAULT_BOARD_SIZE):
        self.game_state = GameState(board_size=board_size)
        self.renderer = BoardRenderer()
        self.is_running = False

    def start(self):
        """Start the command loop."""
        print(f"\nStarting {self.game_state.board_size}x{self.game_state.board_size} game")
        print("Commands: play <cell>, jump <move>, restart, history, save <file>, quit\n")

        self.is_running = True
        self._show(self.game_state.snapshot())

        while self.is_running:
            try:
                line = input("> ")
            except EOFError:
                break
            self.handle_command(line)

    def handle_command(self, line: str):
        """
        Run one console command.

        Args:
            line: Raw input line, e.g. "play 4".
        """
        parts = line.split()
        if not parts:
            return

        command, args = parts[0].lower(), parts[1:]

        number = None
        if command in ("play", "jump") and len(args) == 1:
            try:
                number = int(args[0])
            except ValueError:
                print(f"Expected a number: {line.strip()}")
                return

        try:
            if command == "play" and number is not None:
                self._show(self.game_state.play(number))
            elif command == "jump" and number is not None:
                self._show(self.game_state.jump_to(number))
            elif command == "restart":
                self._show(self.game_state.restart())
            elif command == "history":
                self._print_history()
            elif command == "save" and len(args) == 1:
                image = self.renderer.render(self.game_state.snapshot(), self.game_state.board_size)
                if self.renderer.save(image, args[0]):
                    print(f"Saved: {args[0]}")
                else:
                    print(f"Could not save {args[0]}")
            elif command in ("quit", "exit", "q"):
                self.is_running = False
            else:
                print(f"Unknown command: {line.strip()}")
        except GameError as e:
            print(f"ERROR: {e}")

    def _show(self, snapshot: GameStateSnapshot):
        """Print the board, status and score."""
        print()
        print(format_board(snapshot.board, self.game_state.board_size))
        print(f"\n{snapshot.status.describe()}   "
              f"(move {snapshot.current_move}/{snapshot.history_length - 1})")
        print(f"X Wins: {snapshot.score_x}   O Wins: {snapshot.score_o}\n")

    def _print_history(self):
        """List the recorded moves, marking the one being viewed."""
        history = self.game_state.history
        for move, board in enumerate(history):
            marker = "*" if move == self.game_state.current_move else " "
            if move == 0:
                print(f"{marker} Start")
                continue
            previous = history[move - 1]
            cell = next(i for i, (a, b) in enumerate(zip(previous, board)) if a != b)
            print(f"{marker} #{move}: {board[cell].value} at {cell}")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--size",
        type=int,
        choices=GameConfig.SUPPORTED_SIZES,
        default=GameConfig.DEFAULT_BOARD_SIZE,
        help="Grid size (N for an N x N board)"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(board_size=args.size)
        ui.run()
        return

    # Console mode (--no-ui)
    console = TicTacToeConsole(board_size=args.size)

    try:
        console.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
