"""
Game state management for console TicTacToe.
Tracks the board, whose turn it is, and who is playing.

Every value here is immutable. A move never changes a board in place;
it builds a new GameState instead (see move_validator.try_move).
"""

from enum import Enum
from typing import List, Tuple
from dataclasses import dataclass

from .config import GameConfig


# A board is a tuple of rows, each row a tuple of one-character cells
Board = Tuple[Tuple[str, ...], ...]


class PlayerKind(Enum):
    """Who (or what) picks the moves for a player."""
    USER = "user"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def is_automated(self) -> bool:
        """True for every AI level, False for a human."""
        return self != PlayerKind.USER


@dataclass(frozen=True)
class Player:
    """One side of a match."""
    name: str           # Display name (e.g., "Player 1")
    mark: str           # "X" or "O"
    kind: PlayerKind    # Human or AI level


@dataclass(frozen=True)
class MatchConfig:
    """The two players of a match, in mark order (X first)."""
    player1: Player
    player2: Player


def create_empty_board(size: int, empty_cell: str = GameConfig.EMPTY_CELL) -> Board:
    """
    Create a size x size board where every cell is empty.

    Args:
        size: Side length of the board.
        empty_cell: Value for an unused cell.

    Returns:
        The new board.
    """
    if size <= 0:
        raise ValueError(f"Board size must be positive, got {size}")

    return tuple(tuple(empty_cell for _ in range(size)) for _ in range(size))


def format_board(board: Board) -> str:
    """
    Render the board for the console.

    For a 3x3 board this looks like:

        ---------
        | X   O |
        |   X   |
        | O     |
        ---------
    """
    border = "-" * (2 * len(board) + 3)
    lines = [border]
    for row in board:
        lines.append("| " + " ".join(row) + " |")
    lines.append(border)
    return "\n".join(lines)


@dataclass(frozen=True)
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The board
    - Whose mark plays next
    - How many moves have been made (equals the number of filled cells)
    """

    board: Board
    current_player: str = GameConfig.PLAYER_ONE_MARK
    move_count: int = 0

    @classmethod
    def new(cls, size: int = GameConfig.BOARD_SIZE) -> "GameState":
        """Start state: empty board, X to move, no moves made."""
        return cls(
            board=create_empty_board(size, GameConfig.EMPTY_CELL),
            current_player=GameConfig.PLAYER_ONE_MARK,
            move_count=0,
        )

    @property
    def size(self) -> int:
        """Side length of the board."""
        return len(self.board)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board, in row-major order.

        Returns:
            List of (row, col) tuples.
        """
        empty = []
        for row in range(self.size):
            for col in range(self.size):
                if self.board[row][col] == GameConfig.EMPTY_CELL:
                    empty.append((row, col))
        return empty
