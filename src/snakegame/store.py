from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from .config import HIGH_SCORE_KEY, default_scores_path

logger = logging.getLogger(__name__)


def _parse_score(raw) -> int:
    score = int(str(raw).strip(), 10)
    if score < 0:
        raise ValueError(f"negative score: {score}")
    return score


class ScoreStore:
    """High score kept as a decimal string under one key of a small JSON file."""

    def __init__(self, path: str | os.PathLike | None = None) -> None:
        self.path = Path(path if path is not None else default_scores_path())

    def load(self) -> int:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as exc:
            logger.warning("Cannot read high score from %s: %s", self.path, exc)
            return 0

        if not isinstance(data, dict) or HIGH_SCORE_KEY not in data:
            logger.warning("No %r entry in %s", HIGH_SCORE_KEY, self.path)
            return 0
        try:
            return _parse_score(data[HIGH_SCORE_KEY])
        except ValueError as exc:
            logger.warning("Corrupt high score in %s: %s", self.path, exc)
            return 0

    def save(self, score: int) -> None:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                data = {}
        except (OSError, ValueError):
            data = {}
        data[HIGH_SCORE_KEY] = str(int(score))

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(json.dumps(data), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            logger.warning("Cannot save high score to %s: %s", self.path, exc)
            return
        logger.debug("Saved high score %d to %s", score, self.path)


class MemoryScoreStore:
    """Same interface as ScoreStore, kept in a dict. Used with --no-persist and in tests."""

    def __init__(self, initial: int = 0) -> None:
        self.data = {HIGH_SCORE_KEY: str(initial)} if initial else {}

    def load(self) -> int:
        try:
            return _parse_score(self.data.get(HIGH_SCORE_KEY, 0))
        except ValueError:
            return 0

    def save(self, score: int) -> None:
        self.data[HIGH_SCORE_KEY] = str(int(score))
