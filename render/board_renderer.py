"""
Board renderer for TicTacToe.
Draws a game snapshot (grid, marks and winning line) into an OpenCV image.
"""

import logging
from typing import Optional

import cv2
import numpy as np

from logic.board import GameStatusKind, Player
from logic.game_state import GameStateSnapshot
from .config import RenderConfig
from .geometry import cell_bounds, cell_center, cell_size, winning_line_segment

logger = logging.getLogger(__name__)


class BoardRenderer:
    """
    Renders the active board of a game to a square BGR image.

    The image is BOARD_OUTPUT_SIZE x BOARD_OUTPUT_SIZE pixels and each
    cell is an equal share of it, whatever the board size.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """
        Initialize the board renderer.

        Args:
            config: Render configuration.
        """
        self.config = config or RenderConfig()
        self.output_size = self.config.BOARD_OUTPUT_SIZE

    def render(self, snapshot: GameStateSnapshot, board_size: int) -> np.ndarray:
        """
        Draw a snapshot.

        Args:
            snapshot: Snapshot returned by the game state.
            board_size: N for the N x N board.

        Returns:
            BGR image of the board.
        """
        if len(snapshot.board) != board_size * board_size:
            raise ValueError(
                f"Snapshot board has {len(snapshot.board)} cells, "
                f"expected {board_size * board_size}"
            )

        image = np.zeros((self.output_size, self.output_size, 3), dtype=np.uint8)
        image[:] = self.config.BACKGROUND_COLOR

        status = snapshot.status
        is_win = status.kind == GameStatusKind.WIN
        winning_cells = set(status.line) if is_win else set()

        # Highlight winning cells first so grid lines stay on top
        for idx in winning_cells:
            x1, y1, x2, y2 = cell_bounds(idx, board_size, self.output_size)
            cv2.rectangle(image, (x1, y1), (x2, y2), self.config.WIN_CELL_COLOR, -1)

        self._draw_grid(image, board_size)

        for idx, cell in enumerate(snapshot.board):
            if cell is None:
                continue
            color = self.config.WIN_MARK_COLOR if is_win and cell == status.player else self.config.MARK_COLOR
            self._draw_mark(image, idx, cell, board_size, color)

        if is_win:
            self._draw_winning_line(image, status.line, board_size)

        return image

    def to_rgb(self, image: np.ndarray) -> np.ndarray:
        """Convert a rendered board to RGB (for PIL / Tkinter)."""
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

    def save(self, image: np.ndarray, path: str) -> bool:
        """
        Save a rendered board to disk.

        Returns:
            True if OpenCV wrote the file.
        """
        try:
            ok = cv2.imwrite(path, image)
        except cv2.error as e:
            logger.warning("Could not write board image to %s: %s", path, e)
            return False
        if ok:
            logger.info("Saved board image to %s", path)
        else:
            logger.warning("Could not write board image to %s", path)
        return ok

    def _draw_grid(self, image: np.ndarray, board_size: int):
        """Draw the cell borders, including the outer frame."""
        last = self.output_size - 1
        thickness = self.config.GRID_THICKNESS
        color = self.config.GRID_COLOR

        for i in range(board_size + 1):
            pos = min(int(round(i * cell_size(board_size, self.output_size))), last)
            # Vertical line
            cv2.line(image, (pos, 0), (pos, last), color, thickness)
            # Horizontal line
            cv2.line(image, (0, pos), (last, pos), color, thickness)

    def _draw_mark(self, image: np.ndarray, cell_index: int, player: Player,
                   board_size: int, color):
        """Draw an X (two strokes) or an O (circle) centred in a cell."""
        size = cell_size(board_size, self.output_size)
        cx, cy = cell_center(cell_index, board_size, self.output_size)
        half = size * self.config.MARK_SCALE / 2
        thickness = max(1, int(round(size * self.config.MARK_THICKNESS_RATIO)))

        if player == Player.X:
            cv2.line(
                image,
                (int(round(cx - half)), int(round(cy - half))),
                (int(round(cx + half)), int(round(cy + half))),
                color, thickness, cv2.LINE_AA
            )
            cv2.line(
                image,
                (int(round(cx + half)), int(round(cy - half))),
                (int(round(cx - half)), int(round(cy + half))),
                color, thickness, cv2.LINE_AA
            )
        else:
            cv2.circle(
                image,
                (int(round(cx)), int(round(cy))),
                int(round(half)),
                color, thickness, cv2.LINE_AA
            )

    def _draw_winning_line(self, image: np.ndarray, line, board_size: int):
        """Draw the overlay from the first winning cell centre to the last."""
        segment = winning_line_segment(line, board_size, self.output_size)

        start = (int(round(segment.start[0])), int(round(segment.start[1])))
        end = (int(round(segment.end[0])), int(round(segment.end[1])))

        cv2.line(image, start, end, self.config.WIN_LINE_COLOR,
                 self.config.WIN_LINE_THICKNESS, cv2.LINE_AA)
