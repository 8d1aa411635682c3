from __future__ import annotations

# Arena size in cells. The outermost ring is wall.
GRID_WIDTH, GRID_HEIGHT = 20, 20

# Pixels per cell.
BLOCK_SIZE = 25

TITLE = "Snake"
FPS = 60

# Seconds.
MOVING_PERIOD = 0.1
RESTART_TIME = 1.0

START_X, START_Y = 2, 2
START_FOOD = (6, 4)

# Rejection-sampling attempts before falling back to a scan of free cells.
MAX_SPAWN_ATTEMPTS = 1000

BACK_COLOR = (128, 128, 128)
SNAKE_COLOR = (0, 204, 0)
FOOD_COLOR = (204, 0, 0)
BORDER_COLOR = (0, 0, 0)
GAMEOVER_COLOR = (230, 0, 0, 128)
