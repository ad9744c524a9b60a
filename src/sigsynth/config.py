"""Declarative configuration for the composite generators."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from sigsynth.filters import Filter
from sigsynth.generators import PowerLawNoise, SampledSignal
from sigsynth.seeds import SeedCounter


class PowerLawNoiseConfig(BaseModel):
    type: Literal["powerlaw"] = "powerlaw"
    deltat: float = Field(gt=0.0)
    prebuffer: float = Field(default=0.0, ge=0.0)
    psd: float = Field(ge=0.0)
    exponent: float = 0.0
    interp: int = 1
    seed: int = Field(default=0, ge=0)
    fast: bool = False


class SampledSignalConfig(BaseModel):
    type: Literal["sampled"] = "sampled"
    data: list[float]
    deltat: float = Field(gt=0.0)
    prebuffer: float = Field(default=0.0, ge=0.0)
    norm: float = 1.0
    filter: Filter | None = None
    interp: int = 1
    fast: bool = False


# Discriminated union of all generator configs
SignalConfig = Annotated[
    Union[PowerLawNoiseConfig, SampledSignalConfig],
    Field(discriminator="type"),
]

_signal_config_adapter: TypeAdapter[SignalConfig] = TypeAdapter(SignalConfig)


def parse_config(data: dict[str, Any]) -> SignalConfig:
    """Validate plain dict data (e.g. decoded JSON) into a config model."""
    return _signal_config_adapter.validate_python(data)


def build_signal(
    config: SignalConfig, *, seeds: SeedCounter | None = None
) -> PowerLawNoise | SampledSignal:
    """Construct the generator described by *config*.

    Raises ``UndefinedParameter`` for unsupported exponents or interpolator codes.
    """
    if isinstance(config, PowerLawNoiseConfig):
        return PowerLawNoise(
            config.deltat,
            config.prebuffer,
            config.psd,
            config.exponent,
            config.interp,
            config.seed,
            seeds=seeds,
            fast=config.fast,
        )
    return SampledSignal(
        config.data,
        config.deltat,
        config.prebuffer,
        norm=config.norm,
        filter=config.filter,
        interp=config.interp,
        fast=config.fast,
    )
