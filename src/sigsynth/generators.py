"""Composite generators: colored noise, sampled data and cached signals."""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from sigsynth.errors import UndefinedParameter
from sigsynth.filters import DiffFilter, Filter, IntFilter, NoFilter
from sigsynth.interpolators import get_interpolator
from sigsynth.seeds import SeedCounter
from sigsynth.signal import InterpolatedSignal, Signal
from sigsynth.sources import (
    ResampledSignalSource,
    SampledSignalSource,
    SignalFilter,
    WhiteNoiseSource,
)

logger = logging.getLogger(__name__)

# Samples kept beyond the pre-buffer so filters and interpolators can look back.
CACHE_MARGIN = 32


def cache_length(deltat: float, prebuffer: float) -> int:
    return int(prebuffer / deltat + CACHE_MARGIN)


def power_law_filter(exponent: float, psd: float, deltat: float) -> tuple[Filter, float]:
    """Return ``(filter, normalization)`` giving a PSD of ``psd * f**exponent``.

    Only exponents 0 (white), +2 (differenced) and -2 (integrated) are defined.
    """
    nyquistf = 0.5 / deltat
    base = math.sqrt(psd) * math.sqrt(nyquistf)
    if exponent == 0.0:
        return NoFilter(), base
    if exponent == 2.0:
        return DiffFilter(), base / (2.0 * math.pi * deltat)
    if exponent == -2.0:
        return IntFilter(), base * (2.0 * math.pi * deltat)
    logger.error("PowerLawNoise: undefined power-law exponent %r", exponent)
    raise UndefinedParameter(
        f"undefined power-law exponent {exponent!r}", field_name="exponent", value=exponent
    )


class _Composite:
    """Shared surface of the composite generators: a wrapped ``InterpolatedSignal``."""

    signal: InterpolatedSignal

    @property
    def norm(self) -> float:
        return self.signal.norm

    @norm.setter
    def norm(self, value: float) -> None:
        self.signal.norm = value

    def value(self, time: float, timecorr: float | None = None) -> float:
        return self.signal.value(time, timecorr)

    def values(self, times: Sequence[float] | np.ndarray) -> np.ndarray:
        return self.signal.values(times)

    def reset(self, seed: int = 0) -> None:
        logger.debug("%s reset (seed %d)", type(self).__name__, seed)
        self.signal.reset(seed)


class PowerLawNoise(_Composite):
    """Gaussian noise with power spectral density ``psd * f**exponent``.

    White noise is filtered (identity, first difference or integrator),
    normalized against the Nyquist frequency, and interpolated to
    continuous time. ``prebuffer`` seconds of history precede ``t = 0``.
    """

    def __init__(
        self,
        deltat: float,
        prebuffer: float,
        psd: float,
        exponent: float,
        interp: int,
        seed: int = 0,
        *,
        seeds: SeedCounter | None = None,
        fast: bool = False,
    ) -> None:
        self.filter, normalize = power_law_filter(exponent, psd, deltat)
        self.deltat = deltat
        self.prebuffer = prebuffer
        self.psd = psd
        self.exponent = exponent

        length = cache_length(deltat, prebuffer)
        self.whitenoise = WhiteNoiseSource(length, seed, seeds=seeds)
        self.filterednoise = SignalFilter(length, self.whitenoise, self.filter, normalize)

        try:
            self.interp = get_interpolator(interp, fast=fast)
        except UndefinedParameter as err:
            logger.error("PowerLawNoise: undefined interpolator length %d", interp)
            raise err.add_context("while building PowerLawNoise")

        self.signal = InterpolatedSignal(self.filterednoise, self.interp, deltat, prebuffer)


class SampledSignal(_Composite):
    """Continuous signal over a finite array sampled every ``deltat``.

    Sample ``k`` of *data* sits at ``k * deltat - prebuffer``; earlier
    times read implicit zeros, later ones past the array fail with
    ``IndexOutOfRange``. An optional filter is applied before interpolation.
    """

    def __init__(
        self,
        data: Sequence[float] | np.ndarray,
        deltat: float,
        prebuffer: float,
        norm: float = 1.0,
        filter: Filter | None = None,
        interp: int = 1,
        *,
        fast: bool = False,
    ) -> None:
        try:
            self.interp = get_interpolator(interp, fast=fast)
        except UndefinedParameter as err:
            logger.error("SampledSignal: undefined interpolator length %d", interp)
            raise err.add_context("while building SampledSignal")

        if self.interp.window > prebuffer / deltat:
            logger.warning(
                "SampledSignal: for t = 0, interpolator (semiwin=%d) will stray beyond "
                "prebuffer, yielding zeros",
                self.interp.window,
            )

        self.deltat = deltat
        self.prebuffer = prebuffer
        self.samples = SampledSignalSource(data, norm)
        self.filter = filter

        if filter is None:
            self.filteredsamples = None
            self.signal = InterpolatedSignal(self.samples, self.interp, deltat, prebuffer)
        else:
            self.filteredsamples = SignalFilter(
                cache_length(deltat, prebuffer), self.samples, filter
            )
            self.signal = InterpolatedSignal(
                self.filteredsamples, self.interp, deltat, prebuffer
            )


class CachedSignal(_Composite):
    """Memoize an expensive continuous signal on a grid of spacing ``deltat``.

    The wrapped signal is evaluated once per grid point, ``length`` points
    are retained, and values in between are interpolated. The pre-buffer is
    ``interp * deltat`` so the interpolator window fits before ``t = 0``.
    """

    def __init__(
        self, signal: Signal, length: int, deltat: float, interp: int, *, fast: bool = False
    ) -> None:
        try:
            self.interp = get_interpolator(interp, fast=fast)
        except UndefinedParameter as err:
            logger.error("CachedSignal: undefined interpolator length %d", interp)
            raise err.add_context("while building CachedSignal")

        self.deltat = deltat
        self.prebuffer = interp * deltat
        self.resample = ResampledSignalSource(length, deltat, self.prebuffer, signal)
        self.signal = InterpolatedSignal(self.resample, self.interp, deltat, self.prebuffer)
