"""
Board geometry for TicTacToe rendering.
Converts between cell indices and pixel positions on a square board image.
"""

from typing import Optional, Sequence, Tuple
from dataclasses import dataclass

import numpy as np


Point = Tuple[float, float]


@dataclass(frozen=True)
class LineSegment:
    """
    Where to draw the line through a winning row, column or diagonal.
    """
    start: Point        # Centre of the first cell of the line
    end: Point          # Centre of the last cell of the line
    midpoint: Point     # Halfway between start and end
    length: float       # Distance from start to end (pixels)
    angle: float        # Direction from start to end, degrees (atan2(dy, dx))


def cell_size(board_size: int, image_size: int) -> float:
    """Side of one cell in pixels."""
    return image_size / board_size


def cell_center(cell_index: int, board_size: int, image_size: int) -> Point:
    """
    Get the centre of a cell in pixels.

    Args:
        cell_index: Row-major cell index.
        board_size: N for the N x N board.
        image_size: Side of the square board image (pixels).

    Returns:
        (x, y) centre position.
    """
    size = cell_size(board_size, image_size)
    row, col = divmod(cell_index, board_size)

    x = col * size + size / 2
    y = row * size + size / 2

    return x, y


def cell_bounds(cell_index: int, board_size: int, image_size: int) -> Tuple[int, int, int, int]:
    """
    Get the pixel rectangle covered by a cell.

    Returns:
        (x1, y1, x2, y2), top-left and bottom-right corners.
    """
    size = cell_size(board_size, image_size)
    row, col = divmod(cell_index, board_size)

    x1 = int(round(col * size))
    y1 = int(round(row * size))
    x2 = int(round((col + 1) * size))
    y2 = int(round((row + 1) * size))

    return x1, y1, x2, y2


def pixel_to_cell(x: float, y: float, board_size: int, image_size: int) -> Optional[int]:
    """
    Find the cell under a pixel (e.g. a mouse click).

    Returns:
        Row-major cell index, or None if the pixel is off the board.
    """
    if not (0 <= x < image_size and 0 <= y < image_size):
        return None

    size = cell_size(board_size, image_size)
    col = min(int(x // size), board_size - 1)
    row = min(int(y // size), board_size - 1)

    return row * board_size + col


def winning_line_segment(line: Sequence[int], board_size: int, image_size: int) -> LineSegment:
    """
    Work out the overlay for a winning line.

    Only the first and last cells matter, so the line must come in the
    order the win checker returns it.

    Args:
        line: Cell indices of the winning line.
        board_size: N for the N x N board.
        image_size: Side of the square board image (pixels).

    Returns:
        LineSegment from the first cell centre to the last.
    """
    if len(line) == 0:
        raise ValueError("Winning line has no cells")

    start = np.array(cell_center(line[0], board_size, image_size))
    end = np.array(cell_center(line[-1], board_size, image_size))

    dx, dy = end - start
    length = float(np.hypot(dx, dy))
    angle = float(np.degrees(np.arctan2(dy, dx)))
    midpoint = (start + end) / 2

    return LineSegment(
        start=(float(start[0]), float(start[1])),
        end=(float(end[0]), float(end[1])),
        midpoint=(float(midpoint[0]), float(midpoint[1])),
        length=length,
        angle=angle
    )
