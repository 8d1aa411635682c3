from .errors import ArenaFullError, EmptySnakeError, NoTailToRestoreError, SnakeGridError
from .game import Game, Key
from .snake import Cell, Direction, Snake

__all__ = [
    "ArenaFullError",
    "Cell",
    "Direction",
    "EmptySnakeError",
    "Game",
    "Key",
    "NoTailToRestoreError",
    "Snake",
    "SnakeGridError",
]
