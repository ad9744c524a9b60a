"""Interpolators that present a discrete source as a continuous function.

Every interpolator evaluates the source at the continuous position
``ind + dind``. For all variants but the causal extrapolator
``0 <= dind < 1``; the extrapolator assumes ``1 < dind < 2`` and reads
only ``source[ind-1]`` and ``source[ind]``.

The two polynomial variants implement Neville's algorithm over ``2H``
samples, ``source[ind-H+1]`` to ``source[ind+H]``, placed at abscissae
``1..2H`` and evaluated at ``H + dind``. ``LagrangeInterpolator``
divides by the abscissa spacing on every pass, ``NewLagrangeInterpolator``
multiplies by reciprocals precomputed at construction. Both keep their
tableau in scratch arrays reused across calls, so an instance is not
reentrant.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated, Literal, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from sigsynth.errors import UndefinedParameter

if TYPE_CHECKING:
    from sigsynth.sources import SignalSource

logger = logging.getLogger(__name__)


class _InterpolatorBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def window(self) -> int:
        """Samples read on each side of the interpolation point."""
        return 1


# ---------------------------------------------------------------------------
# Low-order interpolators
# ---------------------------------------------------------------------------


class NearestInterpolator(_InterpolatorBase):
    kind: Literal["nearest"] = "nearest"

    @property
    def window(self) -> int:
        return 0

    def getvalue(self, y: SignalSource, ind: int, dind: float) -> float:
        return y[ind] if dind < 0.5 else y[ind + 1]


class LinearInterpolator(_InterpolatorBase):
    kind: Literal["linear"] = "linear"

    def getvalue(self, y: SignalSource, ind: int, dind: float) -> float:
        return (1.0 - dind) * y[ind] + dind * y[ind + 1]


class LinearExtrapolator(_InterpolatorBase):
    """Causal linear extrapolation from the last two known samples."""

    kind: Literal["extrapolate"] = "extrapolate"

    def getvalue(self, y: SignalSource, ind: int, dind: float) -> float:
        return (-dind) * y[ind - 1] + (1.0 + dind) * y[ind]


# ---------------------------------------------------------------------------
# Polynomial (Neville) interpolators
# ---------------------------------------------------------------------------


class LagrangeInterpolator(_InterpolatorBase):
    kind: Literal["lagrange"] = "lagrange"
    semiwindow: int = Field(ge=1)

    _xa: np.ndarray = PrivateAttr()
    _ya: np.ndarray = PrivateAttr()
    _c: np.ndarray = PrivateAttr()
    _d: np.ndarray = PrivateAttr()

    def model_post_init(self, __context: object) -> None:
        n = 2 * self.semiwindow
        # 1-based tableau; slot 0 unused
        self._xa = np.arange(n + 1, dtype=np.float64)
        self._ya = np.zeros(n + 1, dtype=np.float64)
        self._c = np.zeros(n + 1, dtype=np.float64)
        self._d = np.zeros(n + 1, dtype=np.float64)

    @property
    def window(self) -> int:
        return self.semiwindow

    def getvalue(self, y: SignalSource, ind: int, dind: float) -> float:
        h = self.semiwindow
        ya = self._ya
        for i in range(h):
            ya[h - i] = y[ind - i]
            ya[h + i + 1] = y[ind + i + 1]
        return self.polint(h + dind)

    def polint(self, x: float) -> float:
        n = 2 * self.semiwindow
        xa, ya, c, d = self._xa, self._ya, self._c, self._d

        ns = 1
        dif = abs(x - xa[1])
        for i in range(1, n + 1):
            dift = abs(x - xa[i])
            if dift < dif:
                ns = i
                dif = dift
            c[i] = ya[i]
            d[i] = ya[i]

        res = float(ya[ns])
        ns -= 1

        for m in range(1, n):
            for i in range(1, n - m + 1):
                ho = xa[i] - x
                hp = xa[i + m] - x
                w = c[i + 1] - d[i]
                den = w / (ho - hp)
                d[i] = hp * den
                c[i] = ho * den
            # take the correction along the path closest to x
            if 2 * ns < n - m:
                res += float(c[ns + 1])
            else:
                res += float(d[ns])
                ns -= 1

        return res


class NewLagrangeInterpolator(_InterpolatorBase):
    kind: Literal["new_lagrange"] = "new_lagrange"
    semiwindow: int = Field(ge=1)

    _xa: np.ndarray = PrivateAttr()
    _rspacing: np.ndarray = PrivateAttr()
    _c: np.ndarray = PrivateAttr()
    _d: np.ndarray = PrivateAttr()

    def model_post_init(self, __context: object) -> None:
        n = 2 * self.semiwindow
        self._xa = np.arange(n + 1, dtype=np.float64)
        # xa[i] - xa[i+m] == -m for unit spacing
        self._rspacing = np.zeros(n + 1, dtype=np.float64)
        self._rspacing[1:] = -1.0 / self._xa[1:]
        self._c = np.zeros(n + 1, dtype=np.float64)
        self._d = np.zeros(n + 1, dtype=np.float64)

    @property
    def window(self) -> int:
        return self.semiwindow

    def getvalue(self, y: SignalSource, ind: int, dind: float) -> float:
        n = 2 * self.semiwindow
        base = ind - self.semiwindow
        c, d = self._c, self._d
        for i in range(n, 0, -1):
            c[i] = d[i] = y[base + i]
        return self.polint(self.semiwindow + dind)

    def polint(self, x: float) -> float:
        n = 2 * self.semiwindow
        xa, rs, c, d = self._xa, self._rspacing, self._c, self._d

        ns = 1
        mindif = abs(x - xa[1])
        for i in range(2, n + 1):
            dif = abs(x - xa[i])
            if dif < mindif:
                ns = i
                mindif = dif

        res = float(c[ns])
        ns -= 1

        for m in range(1, n):
            for i in range(1, n - m + 1):
                den = rs[m] * (c[i + 1] - d[i])
                c[i] = (xa[i] - x) * den
                d[i] = (xa[i + m] - x) * den
            if 2 * ns < n - m:
                res += float(c[ns + 1])
            else:
                res += float(d[ns])
                ns -= 1

        return res


# Discriminated union of all interpolator types
Interpolator = Annotated[
    Union[
        NearestInterpolator,
        LinearInterpolator,
        LinearExtrapolator,
        LagrangeInterpolator,
        NewLagrangeInterpolator,
    ],
    Field(discriminator="kind"),
]


def get_interpolator(code: int, *, fast: bool = False) -> Interpolator:
    """Return the interpolator for an integer configuration code.

    ``0`` nearest, ``-1`` causal linear extrapolation, ``1`` linear,
    ``n > 1`` polynomial with half-window ``n`` (the precomputing variant
    when *fast* is true). Any other code raises ``UndefinedParameter``.
    """
    if code == 0:
        return NearestInterpolator()
    if code == -1:
        return LinearExtrapolator()
    if code == 1:
        return LinearInterpolator()
    if code > 1:
        if fast:
            return NewLagrangeInterpolator(semiwindow=code)
        return LagrangeInterpolator(semiwindow=code)
    logger.error("get_interpolator: undefined interpolator length %d", code)
    raise UndefinedParameter(
        f"undefined interpolator length {code}", field_name="interp", value=code
    )
