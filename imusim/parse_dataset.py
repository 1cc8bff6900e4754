"""Parsing of ground-truth and IMU text files, down-sampled to a fixed timestep."""

from __future__ import annotations

import math
import time
from pathlib import Path

import numpy as np

from .structs import Dataset

DATASET_DIR = Path("datasets") / "Dataset9_indoor"
GROUND_TRUTH_FILE = "davis_groundtruth.txt"
IMU_FILE = "davis_imu.txt"


def split_row(line: str) -> list[str]:
    """Split on single spaces, dropping one trailing empty field."""
    words = line.split(" ")
    if words and words[-1] == "":
        words.pop()
    return words


def _round_ms(value: float) -> float:
    """Round to milliseconds, halves away from zero."""
    scaled = value * 1000.0
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / 1000.0


def _check_dt(dataset: Dataset) -> float:
    if not dataset.dt > 0:
        raise ValueError("dataset.dt must be positive")
    return dataset.dt


def _rows(file_path):
    """Yield the split rows of a file, skipping its header and blank lines."""
    with open(file_path, encoding="utf-8") as handle:
        next(handle, None)
        for line in handle:
            row = split_row(line.rstrip("\r\n"))
            if row:
                yield row


def pre_process_gt(file_path, dataset: Dataset, num_col: int) -> np.ndarray:
    """Parse ground truth, keeping the first row at or past each multiple of ``dt``.

    Sets ``dataset.initial_timestamp`` and ``dataset.n_timesteps``.
    """
    dt = _check_dt(dataset)
    columns: list[list[float]] = []
    init_timestamp = None
    for row in _rows(file_path):
        if len(row) != num_col:
            raise ValueError(f"expected {num_col} fields, got {len(row)}")
        stamp = float(row[0])
        if init_timestamp is None:
            init_timestamp = stamp
            dataset.initial_timestamp = stamp
            elapsed = stamp - init_timestamp
        else:
            elapsed = _round_ms(stamp - init_timestamp)
            if elapsed / dt < len(columns):
                continue
        columns.append([elapsed, *(float(w) for w in row[1:])])
    if init_timestamp is None:
        raise ValueError(f"no data rows in {file_path}")
    dataset.n_timesteps = len(columns)
    return np.array(columns, dtype=float).T


def pre_process_imu(file_path, dataset: Dataset, num_col: int) -> np.ndarray:
    """Parse IMU readings aligned to the ground-truth timesteps.

    The first field of each row is ignored. At most ``n_timesteps - 1`` columns
    are filled; the rest stay zero.
    """
    dt = _check_dt(dataset)
    matrix = np.zeros((num_col, dataset.n_timesteps))
    filled = 0
    for row in _rows(file_path):
        if filled >= dataset.n_timesteps - 1:
            break
        if len(row) - 1 > num_col:
            raise ValueError(f"expected at most {num_col + 1} fields, got {len(row)}")
        stamp = float(row[1])
        if (stamp - dataset.initial_timestamp) / dt >= filled:
            matrix[0, filled] = _round_ms(stamp - dataset.initial_timestamp)
            for k, word in enumerate(row[2:], start=1):
                matrix[k, filled] = float(word)
            filled += 1
    return matrix


def pre_process(dataset: Dataset, root=None) -> None:
    """Fill ``dataset`` from the ground-truth and IMU files under ``root``."""
    start = time.process_time()
    base = Path(root) if root is not None else Path.cwd()
    folder = base / DATASET_DIR
    ground_truth = pre_process_gt(folder / GROUND_TRUTH_FILE, dataset, 8)
    imu_data = pre_process_imu(folder / IMU_FILE, dataset, 7)
    dataset.ground_truth = ground_truth
    dataset.imu_meas = imu_data
    elapsed = time.process_time() - start
    print(f"Parsing time: {elapsed} seconds.")