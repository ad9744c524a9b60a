"""Causal digital filters as a closed set of tagged variants.

Each filter is a frozen pydantic model that computes output sample ``p``
from an upstream source ``x`` and a feedback source ``y``. The feedback
source is the filtered source that owns the filter, so recursive filters
read their own earlier output through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from sigsynth.sources import SignalSource


class _FilterBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Number of past samples of its own output read from y.
    @property
    def feedback(self) -> int:
        return 0


# ---------------------------------------------------------------------------
# Fixed filters
# ---------------------------------------------------------------------------


class NoFilter(_FilterBase):
    kind: Literal["none"] = "none"

    def getvalue(self, x: SignalSource, y: SignalSource, pos: int) -> float:
        return x[pos]


class IntFilter(_FilterBase):
    """Single-pole recursive integrator: ``y[p] = alpha * y[p-1] + x[p]``."""

    kind: Literal["int"] = "int"
    alpha: float = 1.0

    @property
    def feedback(self) -> int:
        return 1

    def getvalue(self, x: SignalSource, y: SignalSource, pos: int) -> float:
        return self.alpha * y[pos - 1] + x[pos]


class DiffFilter(_FilterBase):
    """First difference: ``y[p] = x[p] - x[p-1]``."""

    kind: Literal["diff"] = "diff"

    def getvalue(self, x: SignalSource, y: SignalSource, pos: int) -> float:
        return x[pos] - x[pos - 1]


# ---------------------------------------------------------------------------
# Coefficient filters
# ---------------------------------------------------------------------------


class FIRFilter(_FilterBase):
    """Finite impulse response: ``y[p] = sum_i a[i] * x[p-i]``.

    Coefficients are copied into a tuple at construction; normally
    ``a[0] = 1``.
    """

    kind: Literal["fir"] = "fir"
    a: tuple[float, ...] = Field(min_length=1)

    def getvalue(self, x: SignalSource, y: SignalSource, pos: int) -> float:
        acc = 0.0
        for i, ai in enumerate(self.a):
            acc += ai * x[pos - i]
        return acc


class IIRFilter(_FilterBase):
    """Recursive filter: ``y[p] = sum_i a[i] x[p-i] + sum_{j>=1} b[j] y[p-j]``.

    ``b[0]`` is never used; by convention it is 0 and ``a[0]`` is 1.
    """

    kind: Literal["iir"] = "iir"
    a: tuple[float, ...] = Field(min_length=1)
    b: tuple[float, ...] = ()

    @property
    def feedback(self) -> int:
        return max(len(self.b) - 1, 0)

    def getvalue(self, x: SignalSource, y: SignalSource, pos: int) -> float:
        acc = 0.0
        for i, ai in enumerate(self.a):
            acc += ai * x[pos - i]
        for j in range(1, len(self.b)):
            acc += self.b[j] * y[pos - j]
        return acc


# Discriminated union of all filter types
Filter = Annotated[
    Union[
        NoFilter,
        IntFilter,
        DiffFilter,
        FIRFilter,
        IIRFilter,
    ],
    Field(discriminator="kind"),
]
