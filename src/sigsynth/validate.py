from __future__ import annotations

from sigsynth.config import PowerLawNoiseConfig, SampledSignalConfig, SignalConfig
from sigsynth.generators import cache_length
from sigsynth.interpolators import Interpolator, NewLagrangeInterpolator, get_interpolator

POWER_LAW_EXPONENTS = (-2.0, 0.0, 2.0)


class ConfigIssue(str):
    """A structured configuration issue that behaves as a plain string.

    Subclasses ``str`` so callers can print, join or compare issues
    directly while still reading ``kind``, ``field_name`` and ``severity``.
    """

    kind: str
    field_name: str | None
    severity: str  # "error" | "warning"

    def __new__(
        cls,
        kind: str,
        message: str,
        *,
        field_name: str | None = None,
        severity: str = "error",
    ) -> ConfigIssue:
        return super().__new__(cls, message)

    def __init__(
        self,
        kind: str,
        message: str,
        *,
        field_name: str | None = None,
        severity: str = "error",
    ) -> None:
        self.kind = kind
        self.field_name = field_name
        self.severity = severity


def check_config(config: SignalConfig) -> list[ConfigIssue]:
    """Check a generator config and return a list of issues (empty = clean).

    Errors are the conditions that make ``build_signal`` raise or that
    guarantee a ``StaleAccess`` on first use; warnings flag configurations
    that work but read implicit zeros near ``t = 0``. Warnings come last.
    """
    errors: list[ConfigIssue] = []
    warnings: list[ConfigIssue] = []

    # 1. Power-law exponent
    if isinstance(config, PowerLawNoiseConfig) and config.exponent not in POWER_LAW_EXPONENTS:
        errors.append(
            ConfigIssue(
                "undefined_exponent",
                f"Undefined power-law exponent {config.exponent} (expected -2, 0 or 2)",
                field_name="exponent",
            )
        )

    # 2. Interpolator code
    interp: Interpolator | None = None
    window: int | None = None
    if config.interp >= -1:
        interp = get_interpolator(config.interp, fast=config.fast)
        window = interp.window
    else:
        errors.append(
            ConfigIssue(
                "undefined_interp",
                f"Undefined interpolator length {config.interp}",
                field_name="interp",
            )
        )

    length = cache_length(config.deltat, config.prebuffer)
    cached = isinstance(config, PowerLawNoiseConfig) or (
        isinstance(config, SampledSignalConfig) and config.filter is not None
    )

    # 3. Cache capacity -- the interpolator span and filter feedback must fit.
    # LagrangeInterpolator reads outward from ind, so its first sample is
    # still cached when the last is generated; the fast variant reads top-down.
    if interp is not None and cached:
        span = 2 * interp.window
        if not isinstance(interp, NewLagrangeInterpolator):
            span -= 1
        if span > length:
            errors.append(
                ConfigIssue(
                    "short_cache",
                    f"Interpolator needs {span} cached samples but the cache holds {length}",
                    field_name="interp",
                )
            )
    if isinstance(config, SampledSignalConfig) and config.filter is not None:
        # y[p-j] is read before p is written, so j == length is still cached
        if config.filter.feedback > length:
            errors.append(
                ConfigIssue(
                    "short_cache",
                    f"Filter feeds back {config.filter.feedback} samples but the cache "
                    f"holds {length}",
                    field_name="filter",
                )
            )

    # 4. Pre-buffer coverage at t = 0
    if window is not None and window > config.prebuffer / config.deltat:
        warnings.append(
            ConfigIssue(
                "short_prebuffer",
                f"For t = 0, interpolator (semiwin={window}) will stray beyond prebuffer "
                f"({config.prebuffer} s), yielding zeros",
                field_name="prebuffer",
                severity="warning",
            )
        )

    errors.extend(warnings)
    return errors
