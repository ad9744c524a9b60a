from __future__ import annotations

import math

import pytest

from sigsynth import FunctionSignal, SampledSignalSource, SeedCounter


@pytest.fixture
def seeds() -> SeedCounter:
    """Isolated seed counter with a fixed base."""
    return SeedCounter(1000)


@pytest.fixture
def impulse() -> SampledSignalSource:
    """Unit impulse at index 0 followed by zeros."""
    return SampledSignalSource([1.0] + [0.0] * 63)


@pytest.fixture
def smooth_source() -> SampledSignalSource:
    """Slow sinusoid sampled at 200 points."""
    return SampledSignalSource([math.sin(0.05 * k) + 0.3 * math.cos(0.02 * k) for k in range(200)])


@pytest.fixture
def cubic_signal() -> FunctionSignal:
    return FunctionSignal(lambda t: 0.5 * t**3 - 2.0 * t**2 + t - 4.0)
