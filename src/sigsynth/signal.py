"""Continuous-time signals built from discrete sources."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable, Protocol, Sequence

import numpy as np

from sigsynth.errors import StaleAccess

if TYPE_CHECKING:
    from sigsynth.interpolators import Interpolator
    from sigsynth.sources import SignalSource

logger = logging.getLogger(__name__)


class Signal(Protocol):
    """A real function of time that can be reset (and reseeded)."""

    def value(self, time: float) -> float: ...

    def reset(self, seed: int = 0) -> None: ...


class FunctionSignal:
    """Wrap a plain ``float -> float`` callable as a ``Signal``."""

    def __init__(self, func: Callable[[float], float]) -> None:
        self.func = func

    def value(self, time: float) -> float:
        return float(self.func(time))

    def reset(self, seed: int = 0) -> None:
        pass


class InterpolatedSignal:
    """Continuous view of a discrete source.

    Sample ``n`` of the source sits at time ``n * deltat - prebuffer``;
    values in between come from the interpolator. Output is scaled by
    ``norm``, and a zero ``norm`` short-circuits without touching the source.
    """

    def __init__(
        self,
        source: SignalSource,
        interp: Interpolator,
        deltat: float,
        prebuffer: float,
        norm: float = 1.0,
    ) -> None:
        self.source = source
        self.interp = interp
        self.deltat = deltat
        self.prebuffer = prebuffer
        self.norm = norm

    def set_interp(self, interp: Interpolator) -> None:
        self.interp = interp

    def reset(self, seed: int = 0) -> None:
        self.source.reset(seed)

    def value(self, time: float, timecorr: float | None = None) -> float:
        """Evaluate at ``time``, or at ``time + timecorr`` with reduced rounding error.

        The two-argument form floors base and correction separately before
        recombining their fractional parts, which avoids losing the small
        correction when ``time`` is large.
        """
        if self.norm == 0.0:
            return 0.0
        if timecorr is None:
            return self._value(time)
        return self._value_corrected(time, timecorr)

    def _value(self, time: float) -> float:
        ireal = (time + self.prebuffer) / self.deltat
        iint = math.floor(ireal)
        ifrac = ireal - iint
        try:
            return self.norm * self.interp.getvalue(self.source, iint, ifrac)
        except StaleAccess as err:
            logger.error("InterpolatedSignal.value: out of bounds while accessing t=%r", time)
            raise err.add_context(f"while accessing t={time!r}")

    def _value_corrected(self, timebase: float, timecorr: float) -> float:
        irealb = (timebase + self.prebuffer) / self.deltat
        iintb = math.floor(irealb)
        ifracb = irealb - iintb

        irealc = timecorr / self.deltat
        iintc = math.floor(irealc)
        ifracc = irealc - iintc

        ind = iintb + iintc
        ifrac = ifracb + ifracc
        if ifrac >= 1.0:
            ind += 1
            ifrac -= 1.0

        try:
            return self.norm * self.interp.getvalue(self.source, ind, ifrac)
        except StaleAccess as err:
            logger.error(
                "InterpolatedSignal.value: out of bounds while accessing (%r, %r)",
                timebase,
                timecorr,
            )
            raise err.add_context(f"while accessing t=({timebase!r}, {timecorr!r})")

    def values(self, times: Sequence[float] | np.ndarray) -> np.ndarray:
        """Evaluate ``value`` at each time, in order, returning a float64 array."""
        return np.array([self.value(float(t)) for t in times], dtype=np.float64)
