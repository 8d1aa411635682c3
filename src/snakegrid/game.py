from __future__ import annotations

import logging
import random
from enum import Enum

from . import config
from .errors import ArenaFullError
from .snake import Cell, Direction, Snake

logger = logging.getLogger(__name__)


class Key(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> Key:
        try:
            return cls(name.lower())
        except ValueError:
            return cls.OTHER


KEY_DIRECTIONS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class Game:
    """Snake simulation driven by key presses and elapsed time.

    The game is either running or over. A movement tick happens whenever more
    than `config.MOVING_PERIOD` seconds have piled up, or right away on a
    direction key. Once over, the game resets itself after
    `config.RESTART_TIME` seconds.
    """

    def __init__(self, width: int, height: int, rng: random.Random | None = None):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()

        self.snake = Snake(config.START_X, config.START_Y)
        self.food = Cell(*config.START_FOOD)
        self.food_exists = True
        self.game_over = False
        self.waiting_time = 0.0

    # --- read-only views for renderers ---

    def snake_cells(self) -> tuple[Cell, ...]:
        return self.snake.cells()

    @property
    def length(self) -> int:
        return len(self.snake)

    # --- input / clock ---

    def handle_key(self, key: Key) -> None:
        if self.game_over:
            return

        dir = KEY_DIRECTIONS.get(key)
        if dir is None:
            return

        if dir == self.snake.head_direction().opposite():
            logger.debug("ignoring reversal to %s", dir.name)
            return

        self.update_snake(dir)

    def tick(self, delta_time: float) -> None:
        self.waiting_time += delta_time

        if self.game_over:
            if self.waiting_time > config.RESTART_TIME:
                self.restart()
            return

        if not self.food_exists:
            self.add_food()

        if self.waiting_time > config.MOVING_PERIOD:
            self.update_snake(None)

    # --- rules ---

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def check_if_snake_alive(self, dir: Direction | None) -> bool:
        next_x, next_y = self.snake.next_head(dir)
        if self.snake.overlap_cell(next_x, next_y):
            return False
        return self.in_bounds(next_x, next_y)

    def check_eating(self) -> None:
        if self.food_exists and self.snake.head_position() == self.food:
            self.food_exists = False
            self.snake.restore_tail()
            logger.debug("food eaten at %s, length now %d", tuple(self.food), len(self.snake))

    def update_snake(self, dir: Direction | None) -> None:
        if self.check_if_snake_alive(dir):
            self.snake.move_forward(dir)
            self.check_eating()
        else:
            self.game_over = True
            logger.info("game over at length %d", len(self.snake))
        self.waiting_time = 0.0

    def add_food(self) -> None:
        # Only interior cells are drawn; the wall ring never holds food.
        for _ in range(config.MAX_SPAWN_ATTEMPTS):
            x = self.rng.randint(1, self.width - 2)
            y = self.rng.randint(1, self.height - 2)
            if not self.snake.overlap_cell(x, y):
                self._place_food(Cell(x, y))
                return

        free = [
            Cell(x, y)
            for y in range(1, self.height - 1)
            for x in range(1, self.width - 1)
            if not self.snake.overlap_cell(x, y)
        ]
        if not free:
            raise ArenaFullError(f"no free cell for food in a {self.width}x{self.height} arena")
        self._place_food(self.rng.choice(free))

    def _place_food(self, cell: Cell) -> None:
        self.food = cell
        self.food_exists = True
        logger.debug("food spawned at %s", tuple(cell))

    def restart(self) -> None:
        self.snake = Snake(config.START_X, config.START_Y)
        self.waiting_time = 0.0
        self.food = Cell(*config.START_FOOD)
        self.food_exists = True
        self.game_over = False
        logger.info("restarted")
