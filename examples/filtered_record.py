"""Run a recorded series through an IIR filter and read it in continuous time."""

import numpy as np

from sigsynth import IIRFilter, SampledSignal

rng = np.random.default_rng(7)
record = rng.standard_normal(1000)

# leaky integrator with a one-sample feedforward tap
smoother = IIRFilter(a=[0.5, 0.5], b=[0.0, 0.9])
signal = SampledSignal(record, deltat=0.1, prebuffer=0.5, filter=smoother, interp=3)

if __name__ == "__main__":
    print(smoother.model_dump_json())
    for t in (0.0, 1.05, 10.0, 50.0):
        print(f"t={t:6.2f}  {signal.value(t): .6f}")
