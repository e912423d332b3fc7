from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

import numpy as np  # type: ignore

from .config import BOARD_SIZE
from .exceptions import BoardFullError

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class FoodPlacer:
    """
    Picks a uniformly random free cell for the next piece of food.

    Rejection sampling is tried first (cheap while the snake is short);
    after `max_tries` misses it falls back to choosing from the explicit
    list of free cells, so it always terminates.
    """

    def __init__(
        self,
        board_size: int = BOARD_SIZE,
        rng: Optional[np.random.Generator] = None,
        max_tries: int = 64,
    ):
        self.board_size = board_size
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_tries = max_tries

    @classmethod
    def seeded(cls, seed: Optional[int], board_size: int = BOARD_SIZE) -> "FoodPlacer":
        return cls(board_size=board_size, rng=np.random.default_rng(seed))

    def place(self, occupied: Iterable[Cell]) -> Cell:
        taken = set(occupied)
        n = self.board_size

        for _ in range(self.max_tries):
            fx, fy = (int(v) for v in self.rng.integers(0, n, size=2))
            if (fx, fy) not in taken:
                return (fx, fy)

        return self._from_free_list(taken)

    def free_cells(self, occupied: Iterable[Cell]) -> np.ndarray:
        """(k, 2) array of free (x, y) cells."""
        n = self.board_size
        mask = np.ones((n, n), dtype=bool)  # indexed [y, x]
        for x, y in occupied:
            if 0 <= x < n and 0 <= y < n:
                mask[y, x] = False
        ys, xs = np.nonzero(mask)
        return np.stack([xs, ys], axis=1)

    def _from_free_list(self, taken: set) -> Cell:
        free = self.free_cells(taken)
        if len(free) == 0:
            raise BoardFullError(self.board_size)
        logger.debug("Rejection sampling missed; choosing among %d free cells", len(free))
        x, y = free[int(self.rng.integers(len(free)))]
        return (int(x), int(y))
