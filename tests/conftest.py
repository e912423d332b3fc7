import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from snakegame import FoodPlacer, GameSession, MemoryScoreStore, SoundEvent


class FakeTime:
    def __init__(self, now: int = 0):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class RecordingSink:
    def __init__(self):
        self.events: list[SoundEvent] = []

    def play(self, event: SoundEvent) -> None:
        self.events.append(event)


@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def session(fake_time, sink) -> GameSession:
    return GameSession(
        store=MemoryScoreStore(),
        sound=sink,
        placer=FoodPlacer.seeded(1234),
        time_source=fake_time,
    )
