"""
Game configuration for TicTacToe.
Settings for the board sizes the engine accepts.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to allow other grid sizes!
    """

    # ==================== BOARD SETTINGS ====================
    # Grid sizes offered at the menu (N for an N x N board)
    SUPPORTED_SIZES = (3, 5)

    # Grid size used when none is given
    DEFAULT_BOARD_SIZE = 3
