"""
AI players for console TicTacToe.

Three levels:
- easy: a random empty cell
- medium: take a win, else block the opponent's win, else random
- hard: same as medium for now
"""

import logging
import random
from typing import Optional

from .config import opposite_mark
from .game_state import GameState, PlayerKind
from .move_validator import try_move
from .win_checker import has_won

LOGGER = logging.getLogger(__name__)

# Shared random source for strategies called without one
_RANDOM = random.Random()


def try_random_move(game_state: GameState, rng: random.Random, mark: str) -> Optional[GameState]:
    """
    Play `mark` on a random empty cell.

    Args:
        game_state: Current game state.
        rng: Random source; a seeded one gives repeatable choices.
        mark: The mark to place.

    Returns:
        The new GameState, or None if the board is full.
    """
    empty_cells = game_state.get_empty_cells()
    if not empty_cells:
        return None

    row, col = empty_cells[rng.randrange(len(empty_cells))]
    LOGGER.debug("Random move for %s at (%d, %d)", mark, row, col)
    return try_move(game_state, row, col, mark)


def try_winning_move(game_state: GameState, mark: str) -> Optional[GameState]:
    """Get the state after the first move (row-major) that wins for `mark`."""
    for row, col in game_state.get_empty_cells():
        new_state = try_move(game_state, row, col, mark)
        if new_state is not None and has_won(new_state.board, mark):
            LOGGER.debug("Winning move for %s at (%d, %d)", mark, row, col)
            return new_state
    return None


def find_blocking_move(game_state: GameState, opponent_mark: str, own_mark: str) -> Optional[GameState]:
    """
    Occupy the first cell (row-major) where the opponent would win.

    Args:
        game_state: Current game state.
        opponent_mark: The mark that threatens to win.
        own_mark: The mark to place in its way.

    Returns:
        The state with `own_mark` in the blocking cell, or None if the
        opponent has no immediate win.
    """
    for row, col in game_state.get_empty_cells():
        threat = try_move(game_state, row, col, opponent_mark)
        if threat is not None and has_won(threat.board, opponent_mark):
            LOGGER.debug("Blocking %s at (%d, %d)", opponent_mark, row, col)
            return try_move(game_state, row, col, own_mark)
    return None


def try_medium_move(
    game_state: GameState,
    mark: str,
    rng: Optional[random.Random] = None
) -> Optional[GameState]:
    """
    Win if possible, otherwise block, otherwise play randomly.

    Args:
        game_state: Current game state.
        mark: The mark to place.
        rng: Random source for the fallback (default: shared module source).

    Returns:
        The new GameState, or None if the board is full.
    """
    # First, try to win
    win_state = try_winning_move(game_state, mark)
    if win_state is not None:
        return win_state

    # Second, block the opponent
    block_state = find_blocking_move(game_state, opposite_mark(mark), mark)
    if block_state is not None:
        return block_state

    # Finally, anything goes
    return try_random_move(game_state, rng or _RANDOM, mark)


def try_hard_move(
    game_state: GameState,
    mark: str,
    rng: Optional[random.Random] = None
) -> Optional[GameState]:
    """
    Hard level. Currently plays exactly like the medium level.
    """
    # TODO: replace with a minimax search so hard play never loses
    return try_medium_move(game_state, mark, rng)


class AIPlayer:
    """
    An automated player for one mark at one difficulty level.
    """

    def __init__(self, kind: PlayerKind, mark: str, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            kind: Difficulty level (EASY, MEDIUM or HARD).
            mark: Which mark the AI plays.
            rng: Random source (default: shared module source).
        """
        if not kind.is_automated:
            raise ValueError(f"{kind.value} is not an AI level")

        self.kind = kind
        self.mark = mark
        self.rng = rng or _RANDOM

    def get_move(self, game_state: GameState) -> Optional[GameState]:
        """
        Play one move.

        Returns:
            The new GameState, or None if no move was possible.
        """
        if self.kind == PlayerKind.EASY:
            return try_random_move(game_state, self.rng, self.mark)
        if self.kind == PlayerKind.MEDIUM:
            return try_medium_move(game_state, self.mark, self.rng)
        return try_hard_move(game_state, self.mark, self.rng)

