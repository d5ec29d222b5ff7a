"""
Main script for console TicTacToe.

This script ties together:
- Logic (game state, move validation, AI, command parsing)
- Storage (optional saving of finished games)

Run this script and type e.g. "start user medium" to play!
"""

import logging
import random
import re
from typing import Callable, Optional

# Logic imports
from logic.config import GameConfig
from logic.game_state import GameState, Player, format_board
from logic.move_validator import MoveValidator
from logic.win_checker import check_game_end
from logic.ai_player import AIPlayer
from logic.command_parser import parse_match_command, parse_move_input

# Storage imports
from storage.game_store import GameStateStore

LOGGER = logging.getLogger(__name__)


class TicTacToeConsole:
    """
    Console front end for TicTacToe.

    Game flow:
    1. Read a "start <player1> <player2>" command
    2. Print the board before every turn
    3. Ask the human for coordinates, or let the AI move
    4. Repeat until someone wins or the board is full
    5. Back to the menu until "exit"
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        rng: Optional[random.Random] = None,
        store: Optional[GameStateStore] = None
    ):
        """
        Initialize the console.

        Args:
            input_func: Reads one line after showing a prompt.
            output_func: Writes one message.
            rng: Random source for the AI players.
            store: Where finished games are saved (None to skip saving).
        """
        self.input_func = input_func
        self.output_func = output_func
        self.rng = rng
        self.store = store
        self.validator = MoveValidator()

    def display_menu(self):
        """Read commands until "exit", playing one game per start command."""
        while True:
            command = self.input_func(GameConfig.COMMAND_PROMPT)

            if command == GameConfig.EXIT_COMMAND:
                self.output_func(GameConfig.EXIT_MESSAGE)
                return

            match_config = parse_match_command(command)
            if match_config is None:
                self.output_func(GameConfig.BAD_COMMAND_MESSAGE)
                self.output_func(GameConfig.AVAILABLE_TYPES_MESSAGE)
                continue

            LOGGER.info(
                "Starting match: %s vs %s",
                match_config.player1.kind.value,
                match_config.player2.kind.value
            )
            result = self.play_game(GameState.new(), match_config.player1, match_config.player2)
            self.output_func(result)

    def play_game(self, state: GameState, player1: Player, player2: Player) -> str:
        """
        Play turns until the game ends.

        Args:
            state: Starting state.
            player1: Player with the first mark.
            player2: Player with the second mark.

        Returns:
            "<mark> wins" or "Draw".
        """
        ai_players = {
            player.mark: AIPlayer(player.kind, player.mark, self.rng)
            for player in (player1, player2)
            if player.kind.is_automated
        }

        while True:
            self.output_func(format_board(state.board))

            result = check_game_end(state, player1, player2)
            if result is not None:
                break

            current = player1 if state.current_player == player1.mark else player2
            if current.kind.is_automated:
                state = self._ai_move(state, current, ai_players[current.mark])
            else:
                state = self._human_move(state)

        LOGGER.info("Game over after %d moves: %s", state.move_count, result)
        self._save(state)
        return result

    def _human_move(self, state: GameState) -> GameState:
        """Ask for coordinates; keep the same state if they are no good."""
        text = self.input_func(GameConfig.MOVE_PROMPT)
        new_state = parse_move_input(state, text)

        if new_state is None:
            self._log_rejected_move(state, text)
            self.output_func(GameConfig.BAD_MOVE_MESSAGE)
            return state

        return new_state

    def _ai_move(self, state: GameState, current: Player, ai: AIPlayer) -> GameState:
        """Let the AI play; keep the same state if it finds no move."""
        self.output_func(f'Making move level "{current.kind.value}"')
        new_state = ai.get_move(state)

        if new_state is None:
            LOGGER.warning("%s AI found no move for %s", current.kind.value, current.mark)
            return state

        return new_state

    def _log_rejected_move(self, state: GameState, text: str):
        """Explain at debug level why typed coordinates were refused."""
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return

        if re.fullmatch(r"\d+ \d+", text, re.ASCII):
            parts = text.split(" ")
            result = self.validator.validate_move(state, int(parts[0]) - 1, int(parts[1]) - 1)
            if not result.is_valid:
                LOGGER.debug("Rejected move %r: %s", text, result.error_message)
                return
        LOGGER.debug("Rejected move %r: not in '<row> <col>' form", text)

    def _save(self, state: GameState):
        """Save the final state if storage is configured."""
        if self.store is None:
            return

        save_result = self.store.save(state)
        if not save_result.saved:
            self.output_func(f"Could not save game: {save_result.error}")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Console TicTacToe")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the AI players' random choices"
    )
    parser.add_argument(
        "--save-db",
        metavar="URL",
        default=None,
        help="Save finished games to this SQLAlchemy database URL"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Python logging level"
    )

    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    rng = random.Random(args.seed) if args.seed is not None else None
    store = GameStateStore(args.save_db) if args.save_db else None

    console = TicTacToeConsole(rng=rng, store=store)

    try:
        console.display_menu()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        if store is not None:
            store.close()
        print("Goodbye!")


if __name__ == "__main__":
    main()
