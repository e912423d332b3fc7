from __future__ import annotations

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class TickClock:
    """
    A single re-armable interval timer driven by polling from the frame loop.

    `restart` drops whatever was pending and schedules the first tick one
    full period from now; `cancel` guarantees no further callbacks until the
    next `restart`.
    """

    def __init__(self, callback: Callable[[], None], time_source: Optional[Callable[[], int]] = None):
        self._callback = callback
        self._now = time_source or _monotonic_ms
        self._period_ms: Optional[int] = None
        self._deadline: Optional[int] = None

    @property
    def active(self) -> bool:
        return self._deadline is not None

    @property
    def period_ms(self) -> Optional[int]:
        return self._period_ms

    def restart(self, period_ms: int) -> None:
        if period_ms <= 0:
            raise ValueError(f"period must be positive, got {period_ms}")
        self._period_ms = period_ms
        self._deadline = self._now() + period_ms
        logger.debug("Clock armed: every %d ms", period_ms)

    def cancel(self) -> None:
        if self._deadline is not None:
            logger.debug("Clock cancelled")
        self._period_ms = None
        self._deadline = None

    def poll(self) -> bool:
        """Fire the callback if the deadline has passed. Returns True if it fired."""
        if self._deadline is None:
            return False
        now = self._now()
        if now < self._deadline:
            return False
        self._deadline = now + self._period_ms
        self._callback()
        return True
