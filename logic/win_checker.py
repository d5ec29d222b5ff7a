"""
Win checker for console TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional

import numpy as np

from .config import GameConfig
from .game_state import Board, GameState, Player


def has_won(board: Board, mark: str) -> bool:
    """
    Check if `mark` fills a complete line.

    Win condition: N marks in a row
    (horizontally, vertically, or diagonally)

    Args:
        board: The board to check.
        mark: The mark to look for.

    Returns:
        True if any row, column, or diagonal is all `mark`.
    """
    owned = np.array(board) == mark

    row_win = owned.all(axis=1).any()
    col_win = owned.all(axis=0).any()
    diag_win = np.diagonal(owned).all()
    anti_diag_win = np.diagonal(np.fliplr(owned)).all()

    return bool(row_win or col_win or diag_win or anti_diag_win)


def is_draw(game_state: GameState) -> bool:
    """
    Check if every cell has been played.

    This does not look for a winner: callers check has_won first.
    """
    return game_state.move_count == game_state.size * game_state.size


def check_game_end(game_state: GameState, player1: Player, player2: Player) -> Optional[str]:
    """
    Get the game result, if the game is over.

    Args:
        game_state: The current game state.
        player1: First player (checked first).
        player2: Second player.

    Returns:
        "<mark> wins", "Draw", or None while the game is still going.
    """
    if has_won(game_state.board, player1.mark):
        return f"{player1.mark} wins"
    if has_won(game_state.board, player2.mark):
        return f"{player2.mark} wins"
    if is_draw(game_state):
        return GameConfig.DRAW_MESSAGE
    return None
