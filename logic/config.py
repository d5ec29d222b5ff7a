"""
Game configuration for console TicTacToe.
Board dimensions, marks, and the text the console shows.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Everything here is read-only at runtime.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # What an unused cell holds
    EMPTY_CELL = " "

    # ==================== PLAYER SETTINGS ====================
    PLAYER_ONE_MARK = "X"   # Always moves first
    PLAYER_TWO_MARK = "O"

    PLAYER_ONE_NAME = "Player 1"
    PLAYER_TWO_NAME = "Player 2"

    # ==================== CONSOLE TEXT ====================
    EXIT_COMMAND = "exit"
    COMMAND_PROMPT = "Input command: "
    MOVE_PROMPT = "Enter the coordinates: "
    EXIT_MESSAGE = "Exiting..."
    BAD_COMMAND_MESSAGE = "Bad parameters! Expected: start <player1> <player2>"
    AVAILABLE_TYPES_MESSAGE = "Available types: user, easy, medium, hard"
    BAD_MOVE_MESSAGE = f"You should enter numbers from 1 to {BOARD_SIZE}!"
    DRAW_MESSAGE = "Draw"


def opposite_mark(mark: str) -> str:
    """Get the other player's mark."""
    if mark == GameConfig.PLAYER_ONE_MARK:
        return GameConfig.PLAYER_TWO_MARK
    return GameConfig.PLAYER_ONE_MARK
