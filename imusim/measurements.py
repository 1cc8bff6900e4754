"""Noisy pseudo-measurements of landmarks taken from ground-truth poses."""

from __future__ import annotations

import numpy as np

from .structs import Dataset, OutlierSpecs, PseudoLandmarks

MEASUREMENT_SIZE = 7


def _landmark_indices(num_landmarks: int, n_timesteps: int) -> np.ndarray:
    if num_landmarks == 1:
        return np.array([n_timesteps - 1])
    return np.linspace(0, n_timesteps - 1, num_landmarks).astype(int)


def create_measurements(
    dataset: Dataset,
    pseudo_q,
    outlier_specs: OutlierSpecs,
    num_landmarks: int,
    rng=None,
) -> PseudoLandmarks:
    """Pick evenly spaced ground-truth poses as landmarks and measure them with noise.

    Each measurement column is the displacement from the drone to a landmark
    followed by the drone's quaternion (w first), plus Gaussian noise drawn
    from ``pseudo_q``. After each landmark is measured, a snapshot of the
    current 7 x num_landmarks measurement matrix is recorded. ``outlier_specs``
    is accepted but not used.
    """
    del outlier_specs
    pseudo_q = np.asarray(pseudo_q, dtype=float)
    if pseudo_q.shape != (MEASUREMENT_SIZE, MEASUREMENT_SIZE):
        raise ValueError("pseudo_q must be 7x7")
    if num_landmarks < 0:
        raise ValueError("num_landmarks must not be negative")
    ground_truth = np.asarray(dataset.ground_truth, dtype=float)
    if ground_truth.shape[0] < 8 or ground_truth.shape[1] < dataset.n_timesteps:
        raise ValueError("ground truth does not cover n_timesteps")
    rng = rng if rng is not None else np.random.default_rng()

    positions = ground_truth[1:4]
    orientations = ground_truth[[7, 4, 5, 6]]
    indices = _landmark_indices(num_landmarks, dataset.n_timesteps)
    landmarks = PseudoLandmarks(
        positions=positions[:, indices].copy(),
        orientations=orientations[:, indices].copy(),
    )

    mean = np.zeros(MEASUREMENT_SIZE)
    z_t = np.zeros((MEASUREMENT_SIZE, num_landmarks))
    snapshots: list[np.ndarray] = []
    for t in range(dataset.n_timesteps):
        drone_position = positions[:, t]
        drone_orientation = orientations[:, t]
        for j in range(num_landmarks):
            noise = rng.multivariate_normal(mean, pseudo_q)
            displacement = landmarks.positions[:, j] - drone_position
            z_t[:3, j] = displacement + noise[:3]
            z_t[3:, j] = drone_orientation + noise[3:]
            snapshots.append(z_t.copy())
    landmarks.measurements = snapshots
    return landmarks