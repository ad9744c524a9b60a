"""sigsynth -- causal discrete-sample caches, filters and interpolators for
continuous-time signal synthesis."""

from sigsynth.config import (
    PowerLawNoiseConfig,
    SampledSignalConfig,
    SignalConfig,
    build_signal,
    parse_config,
)
from sigsynth.errors import (
    CausalityViolation,
    IndexOutOfRange,
    SignalError,
    StaleAccess,
    UndefinedParameter,
)
from sigsynth.filters import DiffFilter, FIRFilter, Filter, IIRFilter, IntFilter, NoFilter
from sigsynth.generators import CachedSignal, PowerLawNoise, SampledSignal
from sigsynth.interpolators import (
    Interpolator,
    LagrangeInterpolator,
    LinearExtrapolator,
    LinearInterpolator,
    NearestInterpolator,
    NewLagrangeInterpolator,
    get_interpolator,
)
from sigsynth.ring import RingBuffer
from sigsynth.seeds import SeedCounter, default_seeds
from sigsynth.signal import FunctionSignal, InterpolatedSignal, Signal
from sigsynth.sources import (
    BufferedSignalSource,
    ResampledSignalSource,
    SampledSignalSource,
    SignalFilter,
    SignalSource,
    WhiteNoiseSource,
)
from sigsynth.validate import ConfigIssue, check_config

__all__ = [
    "BufferedSignalSource",
    "CachedSignal",
    "CausalityViolation",
    "ConfigIssue",
    "DiffFilter",
    "FIRFilter",
    "Filter",
    "FunctionSignal",
    "IIRFilter",
    "IndexOutOfRange",
    "IntFilter",
    "InterpolatedSignal",
    "Interpolator",
    "LagrangeInterpolator",
    "LinearExtrapolator",
    "LinearInterpolator",
    "NearestInterpolator",
    "NewLagrangeInterpolator",
    "NoFilter",
    "PowerLawNoise",
    "PowerLawNoiseConfig",
    "ResampledSignalSource",
    "RingBuffer",
    "SampledSignal",
    "SampledSignalConfig",
    "SampledSignalSource",
    "SeedCounter",
    "Signal",
    "SignalConfig",
    "SignalError",
    "SignalFilter",
    "SignalSource",
    "StaleAccess",
    "UndefinedParameter",
    "WhiteNoiseSource",
    "build_signal",
    "check_config",
    "default_seeds",
    "get_interpolator",
    "parse_config",
]
