from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT, Difficulty


# ---------- Intents ----------
@dataclass(frozen=True)
class Turn:
    direction: Tuple[int, int]


@dataclass(frozen=True)
class ToggleRun:
    """Pause/resume while playing; restart once the game is over."""


@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class Restart:
    pass


@dataclass(frozen=True)
class SelectDifficulty:
    difficulty: Difficulty


@dataclass(frozen=True)
class ToggleSound:
    pass


@dataclass(frozen=True)
class Quit:
    pass


Intent = Union[Turn, ToggleRun, Start, Restart, SelectDifficulty, ToggleSound, Quit]


DEFAULT_KEYMAP: Dict[int, Intent] = {
    pygame.K_UP: Turn(UP),
    pygame.K_DOWN: Turn(DOWN),
    pygame.K_LEFT: Turn(LEFT),
    pygame.K_RIGHT: Turn(RIGHT),
    pygame.K_w: Turn(UP),
    pygame.K_s: Turn(DOWN),
    pygame.K_a: Turn(LEFT),
    pygame.K_d: Turn(RIGHT),
    pygame.K_SPACE: ToggleRun(),
    pygame.K_RETURN: Start(),
    pygame.K_r: Restart(),
    pygame.K_1: SelectDifficulty(Difficulty.EASY),
    pygame.K_2: SelectDifficulty(Difficulty.NORMAL),
    pygame.K_3: SelectDifficulty(Difficulty.HARD),
    pygame.K_4: SelectDifficulty(Difficulty.EXTREME),
    pygame.K_m: ToggleSound(),
    pygame.K_ESCAPE: Quit(),
}


class InputMapper:
    """Translates raw key codes into intents. Legality is decided by the session."""

    def __init__(self, keymap: Optional[Dict[int, Intent]] = None):
        self.keymap = dict(DEFAULT_KEYMAP if keymap is None else keymap)

    def map_key(self, key: int) -> Optional[Intent]:
        return self.keymap.get(key)

    def map_event(self, event) -> Optional[Intent]:
        if event.type == pygame.QUIT:
            return Quit()
        if event.type == pygame.KEYDOWN:
            return self.map_key(event.key)
        return None
