"""Containers shared by the parsing and measurement-simulation code."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

GROUND_TRUTH_ROWS = 8
IMU_ROWS = 7


@dataclass
class OutlierSpecs:
    """Whether outliers are injected and at which rate."""

    on: bool = False
    rate: float = 0.0


@dataclass
class Dataset:
    """Ground truth (8 x n) and IMU readings (7 x n) sampled every ``dt`` seconds."""

    ground_truth: np.ndarray = field(
        default_factory=lambda: np.zeros((GROUND_TRUTH_ROWS, 0))
    )
    imu_meas: np.ndarray = field(default_factory=lambda: np.zeros((IMU_ROWS, 0)))
    n_timesteps: int = 0
    dt: float = 0.0
    initial_timestamp: float = 0.0

    def resize(self) -> None:
        """Reallocate both matrices to hold ``n_timesteps`` columns."""
        if self.n_timesteps < 0:
            raise ValueError("n_timesteps must not be negative")
        self.ground_truth = np.zeros((GROUND_TRUTH_ROWS, self.n_timesteps))
        self.imu_meas = np.zeros((IMU_ROWS, self.n_timesteps))


@dataclass
class PseudoLandmarks:
    """Landmark poses and the noisy measurements taken of them."""

    positions: np.ndarray = field(default_factory=lambda: np.zeros((3, 0)))
    orientations: np.ndarray = field(default_factory=lambda: np.zeros((4, 0)))
    measurements: list[np.ndarray] = field(default_factory=list)


class NormalRandomVariable:
    """Multivariate normal sampler built from an eigen-decomposition of the covariance."""

    def __init__(self, covar, mean=None, rng=None):
        covar = np.asarray(covar, dtype=float)
        if covar.ndim != 2 or covar.shape[0] != covar.shape[1]:
            raise ValueError("covariance must be a square matrix")
        if mean is None:
            mean = np.zeros(covar.shape[0])
        self.mean = np.asarray(mean, dtype=float).reshape(-1)
        if self.mean.size != covar.shape[0]:
            raise ValueError("mean and covariance sizes differ")
        eigenvalues, eigenvectors = np.linalg.eigh(covar)
        self.transform = eigenvectors * np.sqrt(eigenvalues)
        self._rng = rng if rng is not None else np.random.default_rng()

    def __call__(self) -> np.ndarray:
        """Draw one sample."""
        standard = self._rng.standard_normal(self.mean.size)
        return self.mean + self.transform @ standard