from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import numpy as np  # type: ignore

from .clock import TickClock
from .config import CFG, Config, Difficulty
from .controls import (
    InputMapper,
    Intent,
    Quit,
    Restart,
    SelectDifficulty,
    Start,
    ToggleRun,
    ToggleSound,
    Turn,
)
from .exceptions import BoardFullError
from .food import FoodPlacer
from .game import Cell, GameState, StepOutcome, new_game_state, step_game, try_turn
from .sound import NullSoundSink, SoundEvent, SoundSink
from .store import MemoryScoreStore

logger = logging.getLogger(__name__)

EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a session for the presentation layer."""

    snake: Tuple[Cell, ...]
    food: Cell
    direction: Tuple[int, int]
    score: int
    high_score: int
    running: bool
    over: bool
    tick_period_ms: int
    base_tick_period_ms: int
    difficulty: Difficulty
    sound_enabled: bool
    board_size: int
    ticks: int

    @property
    def paused(self) -> bool:
        return not self.running and not self.over and self.ticks > 0

    @property
    def speed_level(self) -> int:
        return round((200 - self.tick_period_ms) / 10)

    @property
    def is_new_record(self) -> bool:
        return self.over and self.score > 0 and self.score == self.high_score

    def grid(self) -> np.ndarray:
        """Board as an int8 array indexed [y, x]: 0 empty, 1 body, 2 head, 3 food."""
        board = np.full((self.board_size, self.board_size), EMPTY, dtype=np.int8)
        fx, fy = self.food
        board[fy, fx] = FOOD
        for x, y in self.snake[1:]:
            board[y, x] = BODY
        hx, hy = self.snake[0]
        board[hy, hx] = HEAD
        return board


class GameSession:
    """
    Owns every piece of mutable game state for one process.

    All intents and ticks arrive on the same thread; after each of them the
    tick clock is re-synchronised with (running, over, tick period).
    """

    def __init__(
        self,
        cfg: Config = CFG,
        store=None,
        sound: Optional[SoundSink] = None,
        placer: Optional[FoodPlacer] = None,
        time_source: Optional[Callable[[], int]] = None,
        mapper: Optional[InputMapper] = None,
    ):
        self.cfg = cfg
        self.store = store if store is not None else MemoryScoreStore()
        self.sound = sound if sound is not None else NullSoundSink()
        self.placer = placer if placer is not None else FoodPlacer(cfg.board_size)
        self.mapper = mapper if mapper is not None else InputMapper()
        self.clock = TickClock(self.tick, time_source)

        self.difficulty = cfg.difficulty
        self.sound_enabled = True
        self.quit_requested = False
        self.high_score = self.store.load()
        self.state: GameState = new_game_state(self.difficulty.period_ms, cfg)
        self._clock_key: Optional[Tuple[bool, bool, int]] = None
        logger.info("New session: difficulty=%s high score=%d", self.difficulty.label, self.high_score)

    # ---------- Clock ----------
    def _sync_clock(self) -> None:
        s = self.state
        key = (s.running, s.over, s.tick_period_ms)
        if key == self._clock_key:
            return
        self._clock_key = key
        self.clock.cancel()
        if s.running and not s.over:
            self.clock.restart(s.tick_period_ms)

    def poll(self) -> bool:
        return self.clock.poll()

    def _emit(self, event: SoundEvent) -> None:
        if self.sound_enabled:
            self.sound.play(event)

    # ---------- Tick ----------
    def tick(self) -> Optional[StepOutcome]:
        s = self.state
        if not s.running or s.over:
            return None
        try:
            outcome = step_game(s, self.placer, self.cfg)
        except BoardFullError:
            logger.info("Board filled with score %d", s.score)
            s.over = True
            s.running = False
            self._record(s.score)
            self._emit(SoundEvent.GAME_OVER)
            self._sync_clock()
            return StepOutcome.COLLIDED

        if outcome is StepOutcome.ATE:
            self._record(s.score)
            self._emit(SoundEvent.EAT)
        elif outcome is StepOutcome.COLLIDED:
            logger.info("Game over: score=%d length=%d", s.score, len(s.snake))
            self._emit(SoundEvent.GAME_OVER)
        self._sync_clock()
        return outcome

    def _record(self, score: int) -> None:
        if score > self.high_score:
            self.high_score = score
            self.store.save(score)

    # ---------- Intents ----------
    def handle_key(self, key: int) -> Optional[Intent]:
        intent = self.mapper.map_key(key)
        if intent is not None:
            self.submit(intent)
        return intent

    def submit(self, intent: Intent) -> bool:
        if isinstance(intent, Turn):
            accepted = self.turn(intent.direction)
        elif isinstance(intent, ToggleRun):
            self.toggle_running()
            accepted = True
        elif isinstance(intent, Start):
            self.start()
            accepted = True
        elif isinstance(intent, Restart):
            self.restart()
            accepted = True
        elif isinstance(intent, SelectDifficulty):
            accepted = self.set_difficulty(intent.difficulty)
        elif isinstance(intent, ToggleSound):
            self.toggle_sound()
            accepted = True
        elif isinstance(intent, Quit):
            self.quit_requested = True
            accepted = True
        else:
            raise TypeError(f"Unknown intent: {intent!r}")
        self._sync_clock()
        return accepted

    def turn(self, direction: Tuple[int, int]) -> bool:
        return try_turn(self.state, direction)

    def toggle_running(self) -> None:
        s = self.state
        if s.over:
            self.restart()
            return
        if not s.running:
            self._emit(SoundEvent.START)
        s.running = not s.running
        logger.debug("Running=%s", s.running)
        self._sync_clock()

    def start(self) -> None:
        if self.state.over:
            self.restart()
        if not self.state.running:
            self._emit(SoundEvent.START)
            self.state.running = True
        self._sync_clock()

    def restart(self) -> None:
        self.state = new_game_state(self.difficulty.period_ms, self.cfg)
        logger.debug("Restarted at %s", self.difficulty.label)
        self._sync_clock()

    def set_difficulty(self, difficulty: Difficulty) -> bool:
        if self.state.running:
            logger.debug("Ignoring difficulty change to %s while running", difficulty.label)
            return False
        self.difficulty = difficulty
        self.state.base_tick_period_ms = difficulty.period_ms
        self.state.tick_period_ms = difficulty.period_ms
        logger.info("Difficulty set to %s (%d ms)", difficulty.label, difficulty.period_ms)
        self._sync_clock()
        return True

    def toggle_sound(self) -> None:
        self.sound_enabled = not self.sound_enabled

    # ---------- View ----------
    def snapshot(self) -> Snapshot:
        s = self.state
        return Snapshot(
            snake=tuple(s.snake),
            food=s.food,
            direction=s.direction,
            score=s.score,
            high_score=self.high_score,
            running=s.running,
            over=s.over,
            tick_period_ms=s.tick_period_ms,
            base_tick_period_ms=s.base_tick_period_ms,
            difficulty=self.difficulty,
            sound_enabled=self.sound_enabled,
            board_size=self.cfg.board_size,
            ticks=s.ticks,
        )
