# imusim

Reads an IMU / ground-truth pose dataset, down-samples it to a fixed time
step, and generates noisy pseudo-landmark measurements for Kalman filter
experiments.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Dataset layout

The dataset is read from `datasets/Dataset9_indoor/` below a root directory.
The root is the current directory by default.

- `davis_groundtruth.txt` starts with a header line. After it come rows of
  exactly eight space-separated fields: `timestamp x y z qx qy qz qw`.
- `davis_imu.txt` starts with a header line. After it come space-separated
  rows in which the first field is ignored, the second is the timestamp, and
  the rest are the IMU readings.

Blank lines are skipped.

### How ground truth is sampled

The first ground-truth row sets `Dataset.initial_timestamp`. After that, a row
is kept when its time since that first row reaches the next multiple of `dt`.
Times are rounded to milliseconds. The number of rows kept becomes
`Dataset.n_timesteps`.

### How IMU readings are sampled

IMU rows are matched to the same time steps. At most `n_timesteps - 1` columns
are filled, and any columns left over stay zero.

## Command line

```
imusim [--root DIR] [--dt SECONDS] [--landmarks N]
```

| Option | Default | Meaning |
| --- | --- | --- |
| `--root` | current directory | directory that holds `datasets/` |
| `--dt` | `2.0` | time step, in seconds |
| `--landmarks` | `5` | number of pseudo-landmarks |

The command does the following:

1. Parses the dataset and prints `Parsing time: ... seconds.`
2. Builds the IMU noise covariance.
3. Generates noisy measurements with a measurement covariance of `0.1 * I` (7 x 7).

If a file is missing or malformed, it prints an error to stderr and exits with status 1.

## Library use

```python
import numpy as np

from imusim.structs import Dataset, OutlierSpecs
from imusim.parse_dataset import pre_process
from imusim.imu_noise import imu_noises_covariance
from imusim.measurements import create_measurements

dataset = Dataset(dt=2.0)
pre_process(dataset, root=".")

imu_cov = imu_noises_covariance(dataset.dt)   # 3 x 12: four 3 x 3 diagonal blocks

pseudo_q = 0.1 * np.eye(7)
landmarks = create_measurements(
    dataset, pseudo_q, OutlierSpecs(), 5, rng=np.random.default_rng(0),
)
print(landmarks.positions.shape)       # (3, 5)
print(landmarks.orientations.shape)    # (4, 5), quaternions as (qw, qx, qy, qz)
print(len(landmarks.measurements))     # n_timesteps * 5
```

### Parsing (`imusim.parse_dataset`)

- `pre_process_gt(file_path, dataset, num_col)` parses a single ground-truth file.
- `pre_process_imu(file_path, dataset, num_col)` parses a single IMU file.
- `split_row(line)` splits a line on single spaces.

### Measurements (`imusim.measurements`)

- Landmarks are ground-truth poses taken at evenly spaced time steps.
- Each measurement column holds two parts, both with Gaussian noise drawn from `pseudo_q` added:
  - the displacement from the drone to the landmark;
  - the drone's orientation quaternion.
- A snapshot of the 7 x `num_landmarks` matrix is recorded after each landmark is measured.
- The `OutlierSpecs` argument is accepted but has no effect.

### Noise (`imusim.imu_noise`, `imusim.structs`)

- `imu_noises_covariance(dt)` returns squared noise densities and random walks.
  The values are fixed; `dt` does not change the result.
- `NormalRandomVariable(covar, mean=None, rng=None)` draws one sample from a
  multivariate normal distribution each time it is called.

## What it does not do

The package does not run a Kalman filter or any other estimator. It does not
save or print the generated measurements, and it does not inject outliers.