"""
Game state storage using SQLAlchemy.

Each saved state is one row: the board flattened row-major into a
string, the mark to move next, and the move count.

Example:
    store = GameStateStore("sqlite:///tictactoe.db")
    result = store.save(state)
    if not result.saved:
        print(result.error)
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    insert,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from logic.game_state import GameState

from .config import StorageConfig

LOGGER = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Raised for failed storage operations.

    Attributes:
        message: Human-readable error description.
        original_error: The underlying SQLAlchemy or database error.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        if self.original_error:
            return f"{self.message}: {self.original_error}"
        return self.message


@dataclass
class SaveResult:
    """Result of a save."""
    saved: bool
    error: Optional[PersistenceError] = None


class GameStateStore:
    """
    Stores game states in a database table.

    The table is created on first use, so constructing a store never
    touches the database.
    """

    def __init__(
        self,
        database_url: str = StorageConfig.DATABASE_URL,
        table_name: str = StorageConfig.TABLE_NAME,
    ):
        self.database_url = database_url
        self.metadata = MetaData()
        self.table = Table(
            table_name,
            self.metadata,
            Column("id", Integer, primary_key=True, autoincrement=True),
            Column("board", String, nullable=False),
            Column("current_player", String(1), nullable=False),
            Column("move_count", Integer, nullable=False),
        )
        self._engine: Optional[Engine] = None

    def _get_engine(self) -> Engine:
        if self._engine is None:
            engine = create_engine(self.database_url, echo=StorageConfig.ECHO_SQL)
            self.metadata.create_all(engine)
            self._engine = engine
        return self._engine

    def save(self, state: GameState) -> SaveResult:
        """
        Save a game state.

        Args:
            state: The state to save.

        Returns:
            SaveResult with saved=True, or saved=False and the error.
        """
        board_text = "".join(cell for row in state.board for cell in row)

        try:
            with self._get_engine().begin() as conn:
                conn.execute(
                    insert(self.table).values(
                        board=board_text,
                        current_player=state.current_player,
                        move_count=state.move_count,
                    )
                )
        except SQLAlchemyError as e:
            error = PersistenceError("Failed to save game state", e)
            LOGGER.warning("%s", error)
            return SaveResult(saved=False, error=error)

        LOGGER.debug("Saved game state after %d moves", state.move_count)
        return SaveResult(saved=True)

    def load_latest(self) -> Optional[GameState]:
        """
        Load the most recently saved state.

        Returns:
            The GameState, or None if nothing has been saved.

        Raises:
            PersistenceError: If the database cannot be read.
        """
        query = select(self.table).order_by(self.table.c.id.desc()).limit(1)

        try:
            with self._get_engine().connect() as conn:
                row = conn.execute(query).first()
        except SQLAlchemyError as e:
            raise PersistenceError("Failed to load game state", e) from e

        if row is None:
            return None

        size = math.isqrt(len(row.board))
        board = tuple(
            tuple(row.board[r * size:(r + 1) * size])
            for r in range(size)
        )
        return GameState(board=board, current_player=row.current_player, move_count=row.move_count)

    def close(self):
        """Release database connections."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
