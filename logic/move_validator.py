"""
Move validator for console TicTacToe.
Validates moves and applies them to produce the next game state.
"""

from typing import Optional
from dataclasses import dataclass, replace

from .config import GameConfig, opposite_mark
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must be on the board
    2. Can only place on empty cells
    """

    def validate_move(
        self,
        game_state: GameState,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the mark (0-based).
            col: Column to place the mark (0-based).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        size = game_state.size

        # Check if row/col are in valid range
        if not (0 <= row < size and 0 <= col < size):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{size - 1}."
            )

        # Check if cell is empty
        occupant = game_state.board[row][col]
        if occupant != GameConfig.EMPTY_CELL:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant}"
            )

        return ValidationResult(is_valid=True)


_VALIDATOR = MoveValidator()


def try_move(game_state: GameState, row: int, col: int, mark: str) -> Optional[GameState]:
    """
    Place a mark and return the resulting state.

    The turn always passes to the other mark, whichever mark was played.
    Nothing checks that `mark` matches game_state.current_player, so a
    caller may place a mark out of turn.

    Args:
        game_state: Current game state (left untouched).
        row: Row index (0-based).
        col: Column index (0-based).
        mark: The mark to place.

    Returns:
        The new GameState, or None if the move is off the board or the
        cell is taken.
    """
    if not _VALIDATOR.validate_move(game_state, row, col).is_valid:
        return None

    new_row = tuple(
        mark if c == col else cell
        for c, cell in enumerate(game_state.board[row])
    )
    new_board = game_state.board[:row] + (new_row,) + game_state.board[row + 1:]

    return replace(
        game_state,
        board=new_board,
        current_player=opposite_mark(game_state.current_player),
        move_count=game_state.move_count + 1,
    )
