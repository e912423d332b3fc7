from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional, Protocol, Sequence, Tuple

import numpy as np  # type: ignore
import pygame  # type: ignore

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
GAIN_START = 0.3
GAIN_END = 0.01


class SoundEvent(Enum):
    START = "start"
    EAT = "eat"
    GAME_OVER = "game_over"


class SoundSink(Protocol):
    def play(self, event: SoundEvent) -> None: ...


class NullSoundSink:
    """Swallows every event. Used headless, in tests and with --mute."""

    def play(self, event: SoundEvent) -> None:
        return None


# (frequency Hz, duration s, offset s, waveform)
Tone = Tuple[float, float, float, str]

CUES: Dict[SoundEvent, Sequence[Tone]] = {
    SoundEvent.EAT: [(800, 0.1, 0.0, "square")],
    SoundEvent.START: [
        (600, 0.1, 0.0, "sine"),
        (800, 0.1, 0.1, "sine"),
        (1000, 0.2, 0.2, "sine"),
    ],
    SoundEvent.GAME_OVER: [
        (300, 0.3, 0.0, "sine"),
        (250, 0.3, 0.1, "sine"),
        (200, 0.5, 0.2, "sine"),
    ],
}


def synth_tone(freq: float, duration: float, waveform: str = "sine", rate: int = SAMPLE_RATE) -> np.ndarray:
    """One beep as float samples in [-1, 1] with an exponential decay envelope."""
    n = max(1, int(rate * duration))
    t = np.arange(n) / rate
    wave = np.sin(2 * np.pi * freq * t)
    if waveform == "square":
        wave = np.sign(wave)
    elif waveform != "sine":
        raise ValueError(f"Unknown waveform: {waveform}")
    envelope = GAIN_START * (GAIN_END / GAIN_START) ** (t / duration)
    return wave * envelope


def render_cue(tones: Sequence[Tone], rate: int = SAMPLE_RATE) -> np.ndarray:
    """Mix overlapping tones into a single int16 buffer."""
    end = max(offset + duration for _, duration, offset, _ in tones)
    mix = np.zeros(int(rate * end) + 1, dtype=np.float64)
    for freq, duration, offset, waveform in tones:
        samples = synth_tone(freq, duration, waveform, rate)
        start = int(rate * offset)
        mix[start:start + len(samples)] += samples
    mix = np.clip(mix, -1.0, 1.0)
    return (mix * 32767).astype(np.int16)


class PygameSoundSink:
    """
    Plays the cues through pygame.mixer.

    Any failure to bring the mixer up leaves the sink silent; a missing
    audio device must never affect the game.
    """

    def __init__(self) -> None:
        self._sounds: Dict[SoundEvent, "pygame.mixer.Sound"] = {}
        self.ok = False
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            freq, _size, channels = pygame.mixer.get_init()
            for event, tones in CUES.items():
                self._sounds[event] = self._make_sound(render_cue(tones, freq), channels)
            self.ok = True
        except (pygame.error, TypeError, ValueError) as exc:
            logger.warning("Audio unavailable, continuing without sound: %s", exc)

    @staticmethod
    def _make_sound(samples: np.ndarray, channels: int) -> "pygame.mixer.Sound":
        if channels > 1:
            samples = np.repeat(samples[:, None], channels, axis=1)
        return pygame.mixer.Sound(buffer=np.ascontiguousarray(samples).tobytes())

    def play(self, event: SoundEvent) -> None:
        sound: Optional[pygame.mixer.Sound] = self._sounds.get(event)
        if sound is not None:
            sound.play()
