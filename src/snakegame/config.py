from dataclasses import dataclass
from enum import Enum
from typing import Tuple
import os

# ----- Board -----
BOARD_SIZE = 20
CELL_SIZE = 24
HUD_HEIGHT = 32
WIDTH = BOARD_SIZE * CELL_SIZE
HEIGHT = BOARD_SIZE * CELL_SIZE + HUD_HEIGHT

# ----- Colors -----
BG    = (20, 20, 24)
GRID  = (30, 30, 36)
GREEN = (80, 200, 80)
LIME  = (160, 240, 120)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)
GOLD  = (240, 200, 80)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Starting position -----
INITIAL_SNAKE = ((10, 10),)
INITIAL_FOOD = (15, 15)
INITIAL_DIRECTION = UP

HIGH_SCORE_KEY = "highScore"
SCORES_ENV = "SNAKEGAME_SCORES"


class Difficulty(Enum):
    """Named difficulty -> base tick period in milliseconds."""

    EASY = 200
    NORMAL = 150
    HARD = 100
    EXTREME = 70

    @property
    def period_ms(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown difficulty: {name}") from None


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    board_size: int = BOARD_SIZE
    difficulty: Difficulty = Difficulty.NORMAL
    points_per_food: int = 10
    speedup_every: int = 50       # score interval between speed-ups
    speedup_step_ms: int = 10
    max_speedup_ms: int = 50      # period never drops below base - this
    initial_snake: Tuple[Tuple[int, int], ...] = INITIAL_SNAKE
    initial_food: Tuple[int, int] = INITIAL_FOOD
    initial_direction: Tuple[int, int] = INITIAL_DIRECTION


CFG = Config()


def default_scores_path() -> str:
    env = os.environ.get(SCORES_ENV)
    if env:
        return env
    return os.path.join(os.path.expanduser("~"), ".snakegame", "scores.json")
