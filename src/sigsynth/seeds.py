"""Process-wide auto-incrementing seed state for noise sources."""

from __future__ import annotations

import logging
import time

logger = logging.getLogger(__name__)


class SeedCounter:
    """Hands out seeds to sources that were asked for seed ``0``.

    The base is initialized lazily from the wall clock the first time it
    is needed (or explicitly via ``set(0)``), and increments by one for
    each seed handed out, so independently built sources decorrelate.
    """

    def __init__(self, seed: int = 0) -> None:
        self._seed = int(seed)

    def set(self, seed: int = 0) -> None:
        if seed == 0:
            now = time.time()
            seconds = int(now)
            micros = int((now - seconds) * 1_000_000)
            self._seed = seconds + micros
            logger.debug("seed counter initialized from wall clock: %d", self._seed)
        else:
            self._seed = int(seed)

    def get(self) -> int:
        if self._seed == 0:
            self.set(0)
        return self._seed

    def next(self) -> int:
        """Return the current base seed and advance it."""
        seed = self.get()
        self._seed = seed + 1
        return seed


default_seeds = SeedCounter()
