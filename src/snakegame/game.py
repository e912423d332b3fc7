# game.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple
import logging

from .config import CFG, Config
from .food import FoodPlacer

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


# ---------- Helpers ----------
def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def in_bounds(cell: Cell, board_size: int) -> bool:
    return 0 <= cell[0] < board_size and 0 <= cell[1] < board_size


class StepOutcome(Enum):
    MOVED = "moved"
    ATE = "ate"
    COLLIDED = "collided"


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Tuple[int, int]     # committed on the last tick
    pending: Tuple[int, int]       # committed on the next tick
    food: Cell
    score: int
    tick_period_ms: int            # current step interval
    base_tick_period_ms: int       # interval chosen by difficulty
    running: bool = False
    over: bool = False
    ticks: int = 0                 # steps taken this game

    @property
    def head(self) -> Cell:
        return self.snake[0]

def new_game_state(base_period_ms: int, cfg: Config = CFG) -> GameState:
    return GameState(
        snake=list(cfg.initial_snake),
        direction=cfg.initial_direction,
        pending=cfg.initial_direction,
        food=cfg.initial_food,
        score=0,
        tick_period_ms=base_period_ms,
        base_tick_period_ms=base_period_ms,
    )


# ---------- Intents / Update ----------
def try_turn(state: GameState, direction: Tuple[int, int]) -> bool:
    """Queue a new direction for the next tick (no 180° turns). Return True if accepted."""
    if not state.running or state.over:
        return False
    if is_opposite(direction, state.direction):
        return False
    if direction == state.pending:
        return False
    state.pending = direction
    return True

def speed_up(state: GameState, cfg: Config = CFG) -> None:
    floor = state.base_tick_period_ms - cfg.max_speedup_ms
    state.tick_period_ms = max(floor, state.tick_period_ms - cfg.speedup_step_ms)

def step_game(state: GameState, placer: FoodPlacer, cfg: Config = CFG) -> StepOutcome:
    """
    Advance the game by one tick.

    Collision is checked against the body *before* the tail moves, so
    running into the cell the tail is about to leave still ends the game.
    May raise BoardFullError when the grown snake leaves no room for food.
    """
    state.ticks += 1

    # Commit direction once per tick
    state.direction = state.pending

    hx, hy = state.snake[0]
    dx, dy = state.direction
    new_head = (hx + dx, hy + dy)

    # Wall / self collision
    if not in_bounds(new_head, cfg.board_size) or new_head in state.snake:
        state.over = True
        state.running = False
        logger.debug("Collision at %s with score %d", new_head, state.score)
        return StepOutcome.COLLIDED

    state.snake.insert(0, new_head)

    if new_head != state.food:
        state.snake.pop()
        return StepOutcome.MOVED

    before = state.score
    state.score += cfg.points_per_food
    # at most one speed-up per eat, however many thresholds were crossed
    if state.score // cfg.speedup_every > before // cfg.speedup_every:
        speed_up(state, cfg)
    state.food = placer.place(state.snake)
    return StepOutcome.ATE
