from .config import CFG, Config, Difficulty, UP, DOWN, LEFT, RIGHT
from .exceptions import BoardFullError
from .food import FoodPlacer
from .game import GameState, StepOutcome, new_game_state, step_game, try_turn
from .session import GameSession, Snapshot
from .sound import NullSoundSink, SoundEvent, SoundSink
from .store import MemoryScoreStore, ScoreStore

__all__ = [
    "CFG",
    "Config",
    "Difficulty",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "BoardFullError",
    "FoodPlacer",
    "GameState",
    "StepOutcome",
    "new_game_state",
    "step_game",
    "try_turn",
    "GameSession",
    "Snapshot",
    "NullSoundSink",
    "SoundEvent",
    "SoundSink",
    "MemoryScoreStore",
    "ScoreStore",
]
