"""IMU noise covariance model (noise densities and random walks)."""

from __future__ import annotations

import numpy as np

# Accelerometer noise density, gyroscope noise density,
# accelerometer random walk, gyroscope random walk.
_SIGMAS = (0.1, 0.05, 0.002, 4.0e-05)


def imu_noises_covariance(dt: float) -> np.ndarray:
    """Return the 3x12 block [sa^2 I, sg^2 I, sba^2 I, sbg^2 I]; ``dt`` is not used."""
    del dt
    # The sigmas are single-precision values squared in double precision.
    return np.hstack([float(np.float32(s)) ** 2 * np.eye(3) for s in _SIGMAS])