"""Tests for the interpolators, including agreement of the two Neville variants."""

from __future__ import annotations

import numpy as np
import pytest
from pydantic import TypeAdapter, ValidationError

from sigsynth import (
    Interpolator,
    LagrangeInterpolator,
    LinearExtrapolator,
    LinearInterpolator,
    NearestInterpolator,
    NewLagrangeInterpolator,
    SampledSignalSource,
    StaleAccess,
    UndefinedParameter,
    WhiteNoiseSource,
    get_interpolator,
)


def _poly_source(coeffs: list[float], n: int = 64) -> SampledSignalSource:
    return SampledSignalSource(np.polyval(coeffs, np.arange(n, dtype=np.float64)))


# ---------------------------------------------------------------------------
# A. Factory
# ---------------------------------------------------------------------------


class TestGetInterpolator:
    @pytest.mark.parametrize(
        "code,cls",
        [
            (0, NearestInterpolator),
            (-1, LinearExtrapolator),
            (1, LinearInterpolator),
            (2, LagrangeInterpolator),
            (7, LagrangeInterpolator),
        ],
    )
    def test_codes(self, code: int, cls: type) -> None:
        assert isinstance(get_interpolator(code), cls)

    def test_semiwindow_from_code(self) -> None:
        interp = get_interpolator(5)
        assert isinstance(interp, LagrangeInterpolator)
        assert interp.semiwindow == 5
        assert interp.window == 5

    def test_fast_variant(self) -> None:
        interp = get_interpolator(4, fast=True)
        assert isinstance(interp, NewLagrangeInterpolator)
        assert interp.semiwindow == 4
        assert isinstance(get_interpolator(1, fast=True), LinearInterpolator)

    @pytest.mark.parametrize("code", [-2, -5, -100])
    def test_undefined_code(self, code: int) -> None:
        with pytest.raises(UndefinedParameter, match="undefined interpolator length") as excinfo:
            get_interpolator(code)
        assert excinfo.value.kind == "undefined_parameter"
        assert excinfo.value.field_name == "interp"
        assert excinfo.value.value == code
        assert isinstance(excinfo.value, ValueError)

    def test_undefined_code_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("ERROR", logger="sigsynth.interpolators"):
            with pytest.raises(UndefinedParameter):
                get_interpolator(-3)
        assert "undefined interpolator length -3" in caplog.text

    def test_windows(self) -> None:
        assert NearestInterpolator().window == 0
        assert LinearInterpolator().window == 1
        assert LinearExtrapolator().window == 1


class TestInterpolatorModels:
    def test_semiwindow_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            LagrangeInterpolator(semiwindow=0)
        with pytest.raises(ValidationError):
            NewLagrangeInterpolator(semiwindow=-1)

    def test_discriminated_union(self) -> None:
        interp = TypeAdapter(Interpolator).validate_python({"kind": "lagrange", "semiwindow": 3})
        assert isinstance(interp, LagrangeInterpolator)
        assert interp.semiwindow == 3

    def test_scratch_not_shared(self) -> None:
        a = LagrangeInterpolator(semiwindow=3)
        b = LagrangeInterpolator(semiwindow=3)
        assert a._c is not b._c
        assert len(a._c) == 7


# ---------------------------------------------------------------------------
# B. Low-order interpolators
# ---------------------------------------------------------------------------


class TestLowOrder:
    def test_nearest(self) -> None:
        src = SampledSignalSource([0.0, 10.0, 20.0])
        nn = NearestInterpolator()
        assert nn.getvalue(src, 1, 0.0) == 10.0
        assert nn.getvalue(src, 1, 0.49) == 10.0
        assert nn.getvalue(src, 1, 0.5) == 20.0
        assert nn.getvalue(src, 1, 0.99) == 20.0

    def test_linear_endpoints_exact(self) -> None:
        src = SampledSignalSource([0.3, -1.7, 2.9])
        lin = LinearInterpolator()
        assert lin.getvalue(src, 1, 0.0) == -1.7
        assert lin.getvalue(src, 1, 1.0) == 2.9

    def test_linear_midpoint(self) -> None:
        src = SampledSignalSource([0.0, 1.0, 3.0])
        assert LinearInterpolator().getvalue(src, 1, 0.25) == pytest.approx(1.5)

    def test_extrapolator_reads_only_past(self) -> None:
        src = SampledSignalSource([2.0 * k + 1.0 for k in range(6)])
        ext = LinearExtrapolator()
        # extends the line through samples 4 and 5
        assert ext.getvalue(src, 5, 0.5) == pytest.approx(12.0)
        # would raise if it touched index 6
        assert ext.getvalue(src, 5, 0.99) == pytest.approx(12.98)

    def test_extrapolator_at_zero_offset(self) -> None:
        src = SampledSignalSource([1.0, 4.0])
        assert LinearExtrapolator().getvalue(src, 1, 0.0) == 4.0


# ---------------------------------------------------------------------------
# C. Polynomial interpolators
# ---------------------------------------------------------------------------


POLY_CLASSES = [LagrangeInterpolator, NewLagrangeInterpolator]


class TestPolynomial:
    @pytest.mark.parametrize("cls", POLY_CLASSES)
    @pytest.mark.parametrize("semiwindow", [2, 3, 4])
    def test_reproduces_polynomials(self, cls: type, semiwindow: int) -> None:
        """A degree 2H-1 polynomial is reproduced exactly (up to rounding)."""
        coeffs = [0.01, -0.2, 0.5, 1.0, -3.0, 2.0, 0.7, -1.1][-2 * semiwindow :]
        src = _poly_source(coeffs)
        interp = cls(semiwindow=semiwindow)
        for ind, d in [(10, 0.0), (10, 0.37), (20, 0.5), (30, 0.91)]:
            expected = float(np.polyval(coeffs, ind + d))
            assert interp.getvalue(src, ind, d) == pytest.approx(expected, rel=1e-9, abs=1e-9)

    @pytest.mark.parametrize("cls", POLY_CLASSES)
    def test_passes_through_samples(self, cls: type, smooth_source: SampledSignalSource) -> None:
        interp = cls(semiwindow=4)
        for ind in (20, 50, 100):
            assert interp.getvalue(smooth_source, ind, 0.0) == pytest.approx(
                smooth_source[ind], abs=1e-12
            )

    @pytest.mark.parametrize("semiwindow", range(2, 9))
    def test_variants_agree(self, semiwindow: int, smooth_source: SampledSignalSource) -> None:
        old = LagrangeInterpolator(semiwindow=semiwindow)
        new = NewLagrangeInterpolator(semiwindow=semiwindow)
        for ind in (10, 57, 120, 180):
            for d in np.linspace(0.0, 0.999, 17):
                a = old.getvalue(smooth_source, ind, float(d))
                b = new.getvalue(smooth_source, ind, float(d))
                assert abs(a - b) < 1e-10

    @pytest.mark.parametrize("semiwindow", range(2, 9))
    def test_variants_agree_on_noise(self, semiwindow: int) -> None:
        noise = WhiteNoiseSource(256, seed=99)
        old = LagrangeInterpolator(semiwindow=semiwindow)
        new = NewLagrangeInterpolator(semiwindow=semiwindow)
        # read ahead so both variants see the same cached samples
        noise[200]
        for ind in range(60, 180, 7):
            for d in (0.0, 0.1, 0.5, 0.77):
                assert old.getvalue(noise, ind, d) == pytest.approx(
                    new.getvalue(noise, ind, d), abs=1e-10
                )

    @pytest.mark.parametrize("cls", POLY_CLASSES)
    def test_semiwindow_one_is_linear(self, cls: type) -> None:
        src = SampledSignalSource([0.0, 1.0, 5.0, 2.0])
        interp = cls(semiwindow=1)
        lin = LinearInterpolator()
        assert interp.getvalue(src, 1, 0.3) == pytest.approx(lin.getvalue(src, 1, 0.3))

    @pytest.mark.parametrize("cls", POLY_CLASSES)
    def test_scratch_reuse_is_stateless(
        self, cls: type, smooth_source: SampledSignalSource
    ) -> None:
        interp = cls(semiwindow=3)
        first = interp.getvalue(smooth_source, 40, 0.25)
        interp.getvalue(smooth_source, 90, 0.8)
        assert interp.getvalue(smooth_source, 40, 0.25) == first

    @pytest.mark.parametrize("cls", POLY_CLASSES)
    def test_window_wider_than_cache_is_stale(self, cls: type) -> None:
        noise = WhiteNoiseSource(4, seed=1)
        with pytest.raises(StaleAccess):
            cls(semiwindow=3).getvalue(noise, 10, 0.5)

    def test_zero_padding_on_left(self) -> None:
        src = SampledSignalSource([1.0] * 10)
        interp = LagrangeInterpolator(semiwindow=2)
        # window reaches index -1, which reads as zero
        assert interp.getvalue(src, 0, 0.5) != pytest.approx(1.0)
        assert interp.getvalue(src, 4, 0.5) == pytest.approx(1.0)
