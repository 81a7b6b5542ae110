"""
Render configuration for TicTacToe.
All the settings for drawing the board image.

Colours are BGR, as OpenCV expects.
"""


class RenderConfig:
    """
    Configuration class for rendering settings.
    Change these values to restyle the board!
    """

    # ==================== IMAGE SETTINGS ====================
    # Output size for the rendered board image (pixels, square)
    BOARD_OUTPUT_SIZE = 600

    # ==================== COLOURS ====================
    BACKGROUND_COLOR = (0, 0, 0)            # Black
    GRID_COLOR = (255, 255, 255)            # White cell borders
    MARK_COLOR = (255, 255, 255)            # White X and O
    WIN_CELL_COLOR = (119, 39, 219)         # Pink fill behind winning cells
    WIN_MARK_COLOR = (153, 72, 236)         # Pink marks for the winner
    WIN_LINE_COLOR = (255, 0, 132)          # Neon purple line over the win

    # ==================== STROKES ====================
    GRID_THICKNESS = 2
    WIN_LINE_THICKNESS = 8

    # Marks fill this share of the cell (centred)
    MARK_SCALE = 0.6
    # Mark stroke width as a share of the cell size
    MARK_THICKNESS_RATIO = 0.06
