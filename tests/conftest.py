import os
import random

# Must be set before pygame opens a display.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from snakegrid.game import Game


@pytest.fixture
def game():
    return Game(20, 20, rng=random.Random(0))
