"""Discrete sample sources: the forward-only memoizing cache and its subclasses."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Protocol, Sequence

import numpy as np

from sigsynth.errors import CausalityViolation, IndexOutOfRange, StaleAccess
from sigsynth.ring import RingBuffer
from sigsynth.seeds import SeedCounter, default_seeds

if TYPE_CHECKING:
    from sigsynth.filters import Filter
    from sigsynth.signal import Signal

logger = logging.getLogger(__name__)


class SignalSource(Protocol):
    """Anything indexable by a signed sample position."""

    def __getitem__(self, pos: int) -> float: ...

    def reset(self, seed: int = 0) -> None: ...


# ---------------------------------------------------------------------------
# Buffered (memoizing) sources
# ---------------------------------------------------------------------------


class BufferedSignalSource:
    """Forward-only cache over a per-index generation rule.

    Subclasses implement ``getvalue(pos)``. Indices are generated strictly
    in increasing order, each exactly once, and only the last ``length``
    generated positions can be read back. Reading anything older raises
    ``StaleAccess``; a generation rule reading its own index or a later one
    raises ``CausalityViolation``.
    """

    def __init__(self, length: int) -> None:
        self.buffer = RingBuffer(length)
        self.length = self.buffer.length
        self.current = -1
        self._generating: int | None = None

    def getvalue(self, pos: int) -> float:
        raise NotImplementedError

    def reset(self, seed: int = 0) -> None:
        self.buffer.reset()
        self.current = -1
        self._generating = None

    def raw(self, pos: int) -> float:
        """Return the cached (unscaled) value at ``pos``, generating up to it if needed."""
        if self._generating is not None and pos >= self._generating:
            # the generation rule for index i may only read indices below i
            logger.error(
                "%s: non-causal read of %d while generating %d",
                type(self).__name__,
                pos,
                self._generating,
            )
            raise CausalityViolation(
                f"non-causal read of {pos} while generating {self._generating}", index=pos
            )
        if pos <= self.current - self.length:
            logger.error(
                "%s: stale sample access at %d (current %d, capacity %d)",
                type(self).__name__,
                pos,
                self.current,
                self.length,
            )
            raise StaleAccess(
                f"stale sample access at {pos}: only indices > {self.current - self.length} "
                "are retained",
                index=pos,
            )
        if pos > self.current:
            for i in range(self.current + 1, pos + 1):
                self._generating = i
                try:
                    value = self.getvalue(i)
                finally:
                    self._generating = None
                self.buffer[i] = value
                self.current = i
        return self.buffer[pos]

    def __getitem__(self, pos: int) -> float:
        return self.raw(pos)


class WhiteNoiseSource(BufferedSignalSource):
    """Zero-mean Gaussian deviates from a polar Box-Muller transform.

    Each accepted pair of uniform draws yields two deviates: one is returned
    at once, the other is held for the next call. ``pos`` is ignored, so the
    output is only meaningful behind the buffered cache.
    """

    def __init__(
        self,
        length: int,
        seed: int = 0,
        norm: float = 1.0,
        seeds: SeedCounter | None = None,
    ) -> None:
        super().__init__(length)
        self.norm = norm
        self.seeds = seeds if seeds is not None else default_seeds
        self.seed = 0
        self.seed_rng(seed)

    def seed_rng(self, seed: int = 0) -> None:
        self.seed = self.seeds.next() if seed == 0 else int(seed)
        self.rng = np.random.default_rng(self.seed)
        self._cacheset = False
        self._cacherand = 0.0

    def reset(self, seed: int = 0) -> None:
        self.seed_rng(seed)
        super().reset(seed)
        logger.debug("white noise source reseeded with %d", self.seed)

    def getvalue(self, pos: int) -> float:
        if self._cacheset:
            self._cacheset = False
            return self.norm * self._cacherand

        while True:
            x = -1.0 + 2.0 * self.rng.random()
            y = -1.0 + 2.0 * self.rng.random()
            r2 = x * x + y * y
            if 0.0 < r2 <= 1.0:
                break

        root = math.sqrt(-2.0 * math.log(r2) / r2)
        self._cacheset = True
        self._cacherand = x * root
        return self.norm * y * root


class ResampledSignalSource(BufferedSignalSource):
    """Samples a continuous signal at ``pos * deltat - prebuffer``."""

    def __init__(self, length: int, deltat: float, prebuffer: float, signal: Signal) -> None:
        super().__init__(length)
        self.deltat = deltat
        self.prebuffer = prebuffer
        self.signal = signal

    def getvalue(self, pos: int) -> float:
        return self.signal.value(pos * self.deltat - self.prebuffer)

    def reset(self, seed: int = 0) -> None:
        self.signal.reset(seed)
        super().reset(seed)


class _FeedbackView:
    """Unscaled read access to a SignalFilter's own cache."""

    def __init__(self, owner: SignalFilter) -> None:
        self._owner = owner

    def __getitem__(self, pos: int) -> float:
        return self._owner.raw(pos)


class SignalFilter(BufferedSignalSource):
    """Buffered source whose samples are ``filter(source, self, pos)``.

    The filter receives this source's own cache as its feedback input, so
    recursive filters see their earlier output. The cache holds unscaled
    values; ``norm`` is applied on read.
    """

    def __init__(
        self,
        length: int,
        source: SignalSource,
        filter: Filter,
        norm: float = 1.0,
    ) -> None:
        super().__init__(length)
        self.source = source
        self.filter = filter
        self.norm = norm
        self._feedback = _FeedbackView(self)

    def getvalue(self, pos: int) -> float:
        return self.filter.getvalue(self.source, self._feedback, pos)

    def reset(self, seed: int = 0) -> None:
        self.source.reset(seed)
        super().reset(seed)

    def __getitem__(self, pos: int) -> float:
        return self.norm * self.raw(pos)


# ---------------------------------------------------------------------------
# Finite data
# ---------------------------------------------------------------------------


class SampledSignalSource:
    """Read-only view of a finite sample array, zero-padded on the left.

    The array is referenced, not copied, when it is already float64.
    """

    def __init__(self, data: Sequence[float] | np.ndarray, norm: float = 1.0) -> None:
        self.data = np.asarray(data, dtype=np.float64)
        if self.data.ndim != 1:
            raise ValueError(f"sampled data must be one-dimensional, got shape {self.data.shape}")
        self.length = len(self.data)
        self.norm = norm

    def reset(self, seed: int = 0) -> None:
        pass

    def __getitem__(self, pos: int) -> float:
        if pos < 0:
            return 0.0
        if pos >= self.length:
            logger.error(
                "SampledSignalSource: index too large at %d (length %d)", pos, self.length
            )
            raise IndexOutOfRange(
                f"index {pos} past end of sampled data (length {self.length})", index=pos
            )
        return self.norm * float(self.data[pos])
