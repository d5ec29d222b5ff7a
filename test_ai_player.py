"""
Tests for the AI players.
"""

import random

import pytest

from logic.game_state import GameState, PlayerKind
from logic.move_validator import try_move
from logic.win_checker import has_won
from logic.ai_player import (
    AIPlayer,
    find_blocking_move,
    try_hard_move,
    try_medium_move,
    try_random_move,
    try_winning_move,
)


def board_state(layout, current_player="X"):
    """Build a state from rows like "XO " (space = empty)."""
    state = GameState.new(len(layout))
    for row, line in enumerate(layout):
        for col, cell in enumerate(line):
            if cell != " ":
                state = try_move(state, row, col, cell)
    return GameState(board=state.board, current_player=current_player, move_count=state.move_count)


def placed_cells(before, after):
    return [
        (r, c)
        for r in range(before.size)
        for c in range(before.size)
        if before.board[r][c] != after.board[r][c]
    ]


# Both sides can win; X should take its own win at (0, 2)
WIN_OR_BLOCK = ["XX ",
                "OO ",
                "   "]

# X has no win; O wins at (0, 2) unless blocked
MUST_BLOCK = ["OO ",
              "X  ",
              "  X"]


# ==================== RANDOM ====================

def test_random_move_places_one_mark():
    state = GameState.new()
    new_state = try_random_move(state, random.Random(1), "X")

    assert new_state is not None
    assert new_state.move_count == 1
    assert len(placed_cells(state, new_state)) == 1


def test_random_move_is_reproducible_with_seed():
    state = board_state(["X  ", " O ", "   "])
    first = try_random_move(state, random.Random(42), "X")
    second = try_random_move(state, random.Random(42), "X")
    assert first == second


def test_random_move_only_uses_empty_cells():
    state = board_state(["XOX", "OXO", "O  "])
    rng = random.Random(7)
    for _ in range(20):
        new_state = try_random_move(state, rng, "X")
        assert placed_cells(state, new_state)[0] in [(2, 1), (2, 2)]


def test_random_move_on_full_board_is_rejected():
    state = board_state(["XOX", "XOO", "OXX"])
    assert try_random_move(state, random.Random(0), "X") is None


# ==================== WIN / BLOCK HELPERS ====================

def test_winning_move_found():
    state = board_state(WIN_OR_BLOCK)
    new_state = try_winning_move(state, "X")
    assert placed_cells(state, new_state) == [(0, 2)]
    assert has_won(new_state.board, "X")


def test_winning_move_takes_first_in_row_major_order():
    # X can win at (0, 2) and at (2, 0); (0, 2) comes first
    state = board_state(["XX ", "X  ", "   "])
    new_state = try_winning_move(state, "X")
    assert placed_cells(state, new_state) == [(0, 2)]


def test_no_winning_move():
    assert try_winning_move(GameState.new(), "X") is None


def test_blocking_move_uses_own_mark():
    state = board_state(MUST_BLOCK)
    new_state = find_blocking_move(state, "O", "X")
    assert placed_cells(state, new_state) == [(0, 2)]
    assert new_state.board[0][2] == "X"


def test_no_blocking_move():
    state = board_state(["X  ", "   ", "  O"])
    assert find_blocking_move(state, "O", "X") is None


# ==================== MEDIUM / HARD ====================

def test_medium_prefers_win_over_block():
    state = board_state(WIN_OR_BLOCK)
    new_state = try_medium_move(state, "X", random.Random(0))
    assert placed_cells(state, new_state) == [(0, 2)]
    assert has_won(new_state.board, "X")


def test_medium_blocks_opponent_win():
    state = board_state(MUST_BLOCK)
    new_state = try_medium_move(state, "X", random.Random(0))
    assert new_state.board[0][2] == "X"


def test_medium_plays_random_when_nothing_urgent():
    state = GameState.new()
    new_state = try_medium_move(state, "X")
    assert new_state is not None
    assert len(placed_cells(state, new_state)) == 1


def test_medium_on_full_board_is_rejected():
    state = board_state(["XOX", "XOO", "OXX"])
    assert try_medium_move(state, "X") is None


@pytest.mark.parametrize("layout", [WIN_OR_BLOCK, MUST_BLOCK, ["X  ", "   ", "  O"]])
def test_hard_matches_medium(layout):
    # Hard is still a stand-in for a minimax player and must play like medium
    state = board_state(layout)
    assert try_hard_move(state, "X", random.Random(3)) == try_medium_move(state, "X", random.Random(3))


# ==================== AIPlayer ====================

def test_ai_player_rejects_user_kind():
    with pytest.raises(ValueError):
        AIPlayer(PlayerKind.USER, "X")


@pytest.mark.parametrize("kind", [PlayerKind.EASY, PlayerKind.MEDIUM, PlayerKind.HARD])
def test_ai_player_plays_its_mark(kind):
    ai = AIPlayer(kind, "O", random.Random(5))
    state = board_state(["X  ", "   ", "   "], current_player="O")
    new_state = ai.get_move(state)

    (row, col), = placed_cells(state, new_state)
    assert new_state.board[row][col] == "O"
    assert new_state.current_player == "X"


def test_medium_ai_player_blocks():
    ai = AIPlayer(PlayerKind.MEDIUM, "X", random.Random(0))
    state = board_state(MUST_BLOCK)
    assert ai.get_move(state).board[0][2] == "X"


def test_easy_ai_player_is_seeded():
    state = GameState.new()
    first = AIPlayer(PlayerKind.EASY, "X", random.Random(9)).get_move(state)
    second = AIPlayer(PlayerKind.EASY, "X", random.Random(9)).get_move(state)
    assert first == second
