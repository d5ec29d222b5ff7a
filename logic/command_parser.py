"""
Command parsing for console TicTacToe.
Turns typed text into a match setup or a move.
"""

import re
from typing import Optional

from .config import GameConfig
from .game_state import GameState, MatchConfig, Player, PlayerKind
from .move_validator import try_move

_KIND_PATTERN = "|".join(kind.value for kind in PlayerKind)
MATCH_COMMAND_PATTERN = re.compile(f"start ({_KIND_PATTERN}) ({_KIND_PATTERN})")


def parse_player_kind(token: str) -> PlayerKind:
    """
    Look up a player kind by its command name (e.g., "easy").

    Raises:
        ValueError: If the token names no kind.
    """
    try:
        return PlayerKind(token.lower())
    except ValueError:
        raise ValueError(f"Unknown player type: {token}") from None


def parse_match_command(text: str) -> Optional[MatchConfig]:
    """
    Parse "start <player1> <player2>".

    Kinds are user, easy, medium or hard, lowercase, separated by single
    spaces. Player 1 plays X, player 2 plays O.

    Returns:
        The MatchConfig, or None if the text is anything else.
    """
    match = MATCH_COMMAND_PATTERN.fullmatch(text)
    if match is None:
        return None

    try:
        return MatchConfig(
            player1=Player(GameConfig.PLAYER_ONE_NAME, GameConfig.PLAYER_ONE_MARK,
                           parse_player_kind(match.group(1))),
            player2=Player(GameConfig.PLAYER_TWO_NAME, GameConfig.PLAYER_TWO_MARK,
                           parse_player_kind(match.group(2))),
        )
    except ValueError:
        return None


def parse_move_input(game_state: GameState, text: str) -> Optional[GameState]:
    """
    Parse "<row> <col>" (1-based) and play it for the current player.

    Args:
        game_state: Current game state.
        text: The typed line, e.g. "1 3".

    Returns:
        The new GameState, or None if the text is malformed or the move
        is not allowed.
    """
    # One digit per coordinate, so only the first 9 rows and columns can be typed
    last = min(game_state.size, 9)
    if not re.fullmatch(f"[1-{last}] [1-{last}]", text):
        return None

    row_text, col_text = text.split(" ")
    return try_move(game_state, int(row_text) - 1, int(col_text) - 1, game_state.current_player)
