"""
TicTacToe UI
A graphical interface for two-player N x N TicTacToe using Tkinter.

Shows:
- Menu screen with grid size selection (3x3 or 5x5)
- The board, with the winning line drawn over it
- Scoreboard and game status
- Restart button and move history (click a move to jump back to it)
"""

import logging
import tkinter as tk
from tkinter import ttk, messagebox
from typing import List, Optional

from PIL import Image, ImageTk

# Logic imports
from logic.config import GameConfig
from logic.errors import GameError
from logic.game_state import GameState, GameStateSnapshot

# Render imports
from render.config import RenderConfig
from render.board_renderer import BoardRenderer
from render.geometry import pixel_to_cell

logger = logging.getLogger(__name__)


def move_label(move: int) -> str:
    """Label for a move history button."""
    return "Start" if move == 0 else f"#{move}"


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    The UI never keeps its own copy of the game: every click calls into
    GameState and the returned snapshot is drawn as is.
    """

    def __init__(self, board_size: int = GameConfig.DEFAULT_BOARD_SIZE):
        """Initialize the UI."""
        self.game_config = GameConfig()
        self.render_config = RenderConfig()
        self.renderer = BoardRenderer(self.render_config)

        # One session: scores live as long as the window does
        self.game_state = GameState(board_size=board_size, config=self.game_config)

        self.history_buttons: List[tk.Button] = []
        self._photo: Optional[ImageTk.PhotoImage] = None

        # Create UI
        self._create_ui()
        self._show_menu()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='black')

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='black')
        style.configure('TLabel', background='black', foreground='white', font=('Courier', 12))
        style.configure('Title.TLabel', font=('Courier', 36, 'bold'), foreground='white')
        style.configure('Score.TLabel', font=('Courier', 16, 'bold'))
        style.configure('Status.TLabel', font=('Courier', 20, 'bold'))
        style.configure('TRadiobutton', background='black', foreground='white', font=('Courier', 14))

        ttk.Label(self.root, text="TIC TAC TOE", style='Title.TLabel').pack(pady=(20, 10))

        self._create_menu_screen()
        self._create_game_screen()

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _create_menu_screen(self):
        """Grid size choice and Start button."""
        self.menu_frame = ttk.Frame(self.root)

        ttk.Label(self.menu_frame, text="Select your grid size:").pack(pady=10)

        self.size_var = tk.IntVar(value=self.game_state.board_size)
        size_frame = ttk.Frame(self.menu_frame)
        size_frame.pack(pady=10)
        for size in self.game_config.SUPPORTED_SIZES:
            ttk.Radiobutton(
                size_frame,
                text=f"{size}×{size}",
                variable=self.size_var,
                value=size
            ).pack(side=tk.LEFT, padx=10)

        tk.Button(
            self.menu_frame,
            text="Start Game",
            font=('Courier', 16, 'bold'),
            bg='#7e22ce',
            fg='white',
            activebackground='#db2777',
            width=14,
            command=self._start_game
        ).pack(pady=20)

    def _create_game_screen(self):
        """Scoreboard, status, board and controls."""
        self.game_frame = ttk.Frame(self.root)

        # Scoreboard
        score_frame = ttk.Frame(self.game_frame)
        score_frame.pack(pady=5)
        self.score_x_label = ttk.Label(score_frame, text="X Wins: 0", style='Score.TLabel')
        self.score_x_label.pack(side=tk.LEFT, padx=20)
        self.score_o_label = ttk.Label(score_frame, text="O Wins: 0", style='Score.TLabel')
        self.score_o_label.pack(side=tk.LEFT, padx=20)

        # Status message
        self.status_label = ttk.Label(self.game_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Board canvas
        size = self.render_config.BOARD_OUTPUT_SIZE
        self.board_canvas = tk.Canvas(
            self.game_frame, width=size, height=size,
            bg='black', highlightthickness=0
        )
        self.board_canvas.pack(pady=10)
        self.board_canvas.bind("<Button-1>", self._on_board_click)

        # Controls
        control_frame = ttk.Frame(self.game_frame)
        control_frame.pack(pady=5)

        tk.Button(
            control_frame,
            text="Restart",
            font=('Courier', 12, 'bold'),
            bg='#7e22ce',
            fg='white',
            width=10,
            command=self._restart_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Menu",
            font=('Courier', 12, 'bold'),
            bg='#2d3748',
            fg='white',
            width=10,
            command=self._show_menu
        ).pack(side=tk.LEFT, padx=5)

        # Move history
        ttk.Label(self.game_frame, text="Move History").pack(pady=(10, 3))
        self.history_frame = ttk.Frame(self.game_frame)
        self.history_frame.pack(pady=(0, 10))

    def _show_menu(self):
        """Switch to the menu screen."""
        self.game_frame.pack_forget()
        self.size_var.set(self.game_state.board_size)
        self.menu_frame.pack(pady=20)

    def _start_game(self):
        """Start a game with the selected grid size."""
        try:
            self.game_state.new_game(self.size_var.get())
        except GameError as e:
            messagebox.showerror("TicTacToe", str(e))
            return

        print(f"Starting {self.game_state.board_size}x{self.game_state.board_size} game")
        self.menu_frame.pack_forget()
        self.game_frame.pack(fill=tk.BOTH, expand=True)
        self._refresh(self.game_state.snapshot())

    def _on_board_click(self, event):
        """Play the clicked cell."""
        cell = pixel_to_cell(
            event.x, event.y,
            self.game_state.board_size,
            self.render_config.BOARD_OUTPUT_SIZE
        )
        if cell is None:
            return

        try:
            snapshot = self.game_state.play(cell)
        except GameError as e:
            logger.warning("Click rejected: %s", e)
            return

        self._refresh(snapshot)

    def _jump_to(self, move: int):
        """Time travel to a move from the history list."""
        try:
            snapshot = self.game_state.jump_to(move)
        except GameError as e:
            logger.warning("Jump rejected: %s", e)
            return

        self._refresh(snapshot)

    def _restart_game(self):
        """Restart on the same grid size (scores are kept)."""
        print("Restarting game...")
        self._refresh(self.game_state.restart())

    def _refresh(self, snapshot: GameStateSnapshot):
        """Redraw everything from a snapshot."""
        self.score_x_label.configure(text=f"X Wins: {snapshot.score_x}")
        self.score_o_label.configure(text=f"O Wins: {snapshot.score_o}")
        self.status_label.configure(text=snapshot.status.describe())

        self._update_board_canvas(snapshot)
        self._update_history_buttons(snapshot)

    def _update_board_canvas(self, snapshot: GameStateSnapshot):
        """Render the board and put it on the canvas."""
        image = self.renderer.render(snapshot, self.game_state.board_size)

        photo = ImageTk.PhotoImage(Image.fromarray(self.renderer.to_rgb(image)))

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self._photo = photo  # Keep reference

    def _update_history_buttons(self, snapshot: GameStateSnapshot):
        """Rebuild the move history buttons."""
        for btn in self.history_buttons:
            btn.destroy()
        self.history_buttons = []

        for move in range(snapshot.history_length):
            btn = tk.Button(
                self.history_frame,
                text=move_label(move),
                font=('Courier', 10),
                bg='#7e22ce' if move == snapshot.current_move else '#1f1f1f',
                fg='white',
                command=lambda m=move: self._jump_to(m)
            )
            btn.grid(row=move // 13, column=move % 13, padx=2, pady=2)
            self.history_buttons.append(btn)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--size",
        type=int,
        choices=GameConfig.SUPPORTED_SIZES,
        default=GameConfig.DEFAULT_BOARD_SIZE,
        help="Grid size preselected in the menu"
    )

    args = parser.parse_args()

    print("\n" + "="*60)
    print("   TicTacToe")
    print("="*60 + "\n")

    ui = TicTacToeUI(board_size=args.size)
    ui.run()


if __name__ == "__main__":
    main()
