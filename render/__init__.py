"""
Render module for TicTacToe.
Handles board geometry and drawing the board with OpenCV.
"""

from .config import RenderConfig
from .geometry import LineSegment, cell_center, pixel_to_cell, winning_line_segment
from .board_renderer import BoardRenderer
