"""
Storage module for console TicTacToe.
Saves finished game states to a database.
"""

from .config import StorageConfig
from .game_store import GameStateStore, PersistenceError, SaveResult
