"""
Game configuration for TicTacToe.
Board size limits and the symbols used for each mark.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak the game!
    """

    # ==================== BOARD SETTINGS ====================
    # Classic TicTacToe is 3x3, the resizable variant goes up to 5x5
    MIN_DIMENSION = 3
    MAX_DIMENSION = 5
    DEFAULT_DIMENSION = 3

    # The basic variant is always played on this size
    FIXED_DIMENSION = 3

    # ==================== MARK SETTINGS ====================
    X_SYMBOL = "X"
    O_SYMBOL = "O"
    EMPTY_SYMBOL = " "

    @classmethod
    def dimensions(cls) -> list:
        """All board sizes the game can be played on."""
        return list(range(cls.MIN_DIMENSION, cls.MAX_DIMENSION + 1))
