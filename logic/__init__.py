"""
Logic module for console TicTacToe.
Handles game state, rules, command parsing, and AI opponents.
"""

from .config import GameConfig, opposite_mark
from .game_state import (
    Board, GameState, MatchConfig, Player, PlayerKind,
    create_empty_board, format_board,
)
from .move_validator import MoveValidator, ValidationResult, try_move
from .win_checker import check_game_end, has_won, is_draw
from .ai_player import AIPlayer, try_hard_move, try_medium_move, try_random_move
from .command_parser import parse_match_command, parse_move_input
