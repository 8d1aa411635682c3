from __future__ import annotations


class SnakeGridError(RuntimeError):
    """Base class for broken game invariants."""


class EmptySnakeError(SnakeGridError):
    pass


class NoTailToRestoreError(SnakeGridError):
    """restore_tail() was called before the snake ever moved."""


class ArenaFullError(SnakeGridError):
    """No free interior cell is left to place food on."""
