"""Memoize an expensive continuous signal behind a polynomial interpolator."""

import math

from sigsynth import CachedSignal, FunctionSignal


def chirp(t: float) -> float:
    return math.sin(2.0 * math.pi * (0.01 + 0.001 * t) * t)


calls = 0


def counted(t: float) -> float:
    global calls
    calls += 1
    return chirp(t)


cached = CachedSignal(FunctionSignal(counted), length=256, deltat=0.5, interp=4)

if __name__ == "__main__":
    worst = 0.0
    t = 0.0
    while t < 200.0:
        worst = max(worst, abs(cached.value(t) - chirp(t)))
        t += 0.01
    print(f"20000 lookups, {calls} evaluations, max error {worst:.3g}")
