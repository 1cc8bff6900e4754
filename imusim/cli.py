"""Command line entry: parse the dataset and simulate pseudo-measurements."""

from __future__ import annotations

import argparse
import sys

import numpy as np

from .imu_noise import imu_noises_covariance
from .measurements import create_measurements
from .parse_dataset import pre_process
from .structs import Dataset, OutlierSpecs


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="imusim", description=__doc__)
    parser.add_argument("--root", default=None, help="directory holding datasets/")
    parser.add_argument("--dt", type=float, default=2.0, help="timestep in seconds")
    parser.add_argument("--landmarks", type=int, default=5, help="number of landmarks")
    args = parser.parse_args(argv)

    pseudo_q = 0.1 * np.eye(7)
    dataset = Dataset(dt=args.dt)
    try:
        pre_process(dataset, root=args.root)
    except (OSError, ValueError) as exc:
        print(f"imusim: {exc}", file=sys.stderr)
        return 1

    imu_noises_covariance(args.dt)
    create_measurements(dataset, pseudo_q, OutlierSpecs(), args.landmarks)
    return 0


if __name__ == "__main__":
    sys.exit(main())