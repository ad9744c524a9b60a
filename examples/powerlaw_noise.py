"""Random-walk (f^-2) noise from a JSON-style config, sampled off-grid."""

import numpy as np

from sigsynth import build_signal, check_config, parse_config

config = parse_config(
    {
        "type": "powerlaw",
        "deltat": 1.0,
        "prebuffer": 8.0,
        "psd": 1e-2,
        "exponent": -2.0,
        "interp": 4,
        "seed": 42,
    }
)

if __name__ == "__main__":
    issues = check_config(config)
    for issue in issues:
        print(f"{issue.severity}: {issue}")
    if any(i.severity == "error" for i in issues):
        raise SystemExit(1)

    noise = build_signal(config)
    times = np.linspace(0.0, 100.0, 401)
    samples = noise.values(times)
    print(config.model_dump_json(indent=2))
    print(f"{len(samples)} samples, rms {np.sqrt(np.mean(samples**2)):.4g}")
    # large base time plus a small correction
    print(f"value(100, 0.125) = {noise.value(100.0, 0.125):.6g}")
