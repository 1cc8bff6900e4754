import numpy as np
import pytest

from imusim.imu_noise import imu_noises_covariance


def test_shape():
    assert imu_noises_covariance(2.0).shape == (3, 12)


def test_blocks_are_scaled_identity():
    cov = imu_noises_covariance(2.0)
    for block in np.hsplit(cov, 4):
        assert np.allclose(block, block[0, 0] * np.eye(3))


def test_values_match_sigmas():
    cov = imu_noises_covariance(1.0)
    diag = [cov[0, 3 * k] for k in range(4)]
    assert diag == pytest.approx([0.1**2, 0.05**2, 0.002**2, 4.0e-05**2], rel=1e-6)


def test_independent_of_dt():
    assert np.array_equal(imu_noises_covariance(0.5), imu_noises_covariance(3.0))