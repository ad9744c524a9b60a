"""Fixed-capacity circular sample store."""

from __future__ import annotations

import numpy as np


class RingBuffer:
    """Circular array of float64 samples addressed by absolute position.

    Position ``p`` lives in slot ``p % length``, so only the most recent
    ``length`` positions written are meaningful. No bounds checking here;
    the owning source decides what is retrievable.
    """

    def __init__(self, length: int) -> None:
        if length < 1:
            raise ValueError(f"RingBuffer length must be >= 1, got {length}")
        self.length = int(length)
        self.data = np.zeros(self.length, dtype=np.float64)

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, pos: int) -> float:
        return float(self.data[pos % self.length])

    def __setitem__(self, pos: int, value: float) -> None:
        self.data[pos % self.length] = value

    def reset(self) -> None:
        self.data[:] = 0.0
