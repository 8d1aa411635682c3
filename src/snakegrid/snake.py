from __future__ import annotations

from collections import deque, namedtuple
from enum import Enum

from .errors import EmptySnakeError, NoTailToRestoreError

Cell = namedtuple("Cell", ["x", "y"])


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


def step(cell: Cell, direction: Direction) -> Cell:
    dx, dy = direction.delta
    return Cell(cell[0] + dx, cell[1] + dy)


class Snake:
    """A chain of cells, head first.

    `last_removed` remembers the cell dropped by the latest move so that
    eating can grow the snake back onto it.
    """

    def __init__(self, x: int, y: int):
        self.body: deque[Cell] = deque([Cell(x + 2, y), Cell(x + 1, y), Cell(x, y)])
        self.direction = Direction.RIGHT
        self.last_removed: Cell | None = None

    def __len__(self) -> int:
        return len(self.body)

    def cells(self) -> tuple[Cell, ...]:
        return tuple(self.body)

    def head_position(self) -> Cell:
        if not self.body:
            raise EmptySnakeError("snake has no body")
        return self.body[0]

    def head_direction(self) -> Direction:
        return self.direction

    def next_head(self, dir: Direction | None = None) -> Cell:
        moving_dir = self.direction if dir is None else dir
        return step(self.head_position(), moving_dir)

    def move_forward(self, dir: Direction | None = None) -> None:
        # No reversal check here, Game filters those out.
        if dir is not None:
            self.direction = dir
        self.body.appendleft(step(self.head_position(), self.direction))
        self.last_removed = self.body.pop()

    def restore_tail(self) -> None:
        if self.last_removed is None:
            raise NoTailToRestoreError("snake has not moved yet, nothing to restore")
        self.body.append(self.last_removed)

    def overlap_cell(self, x: int, y: int) -> bool:
        """True if (x, y) is on the body, ignoring the current tail cell.

        The tail is vacated on the next move, so landing on it is not a hit.
        Used both for head collisions and for food placement.
        """
        last = len(self.body) - 1
        for i, cell in enumerate(self.body):
            if i == last:
                break
            if cell.x == x and cell.y == y:
                return True
        return False
