import numpy as np
import pytest

from imusim.structs import Dataset, NormalRandomVariable, OutlierSpecs, PseudoLandmarks


def test_dataset_resize_shapes():
    ds = Dataset(n_timesteps=4)
    ds.resize()
    assert ds.ground_truth.shape == (8, 4)
    assert ds.imu_meas.shape == (7, 4)


def test_dataset_resize_negative_raises():
    ds = Dataset(n_timesteps=-1)
    with pytest.raises(ValueError):
        ds.resize()


def test_defaults_are_empty():
    ds = Dataset()
    assert ds.ground_truth.shape == (8, 0)
    lm = PseudoLandmarks()
    assert lm.measurements == []
    assert OutlierSpecs().on is False


def test_transform_reproduces_covariance():
    cov = np.array([[2.0, 0.5], [0.5, 1.0]])
    nrv = NormalRandomVariable(cov)
    assert np.allclose(nrv.transform @ nrv.transform.T, cov)


def test_zero_covariance_returns_mean():
    nrv = NormalRandomVariable(np.zeros((3, 3)), mean=[1.0, 2.0, 3.0])
    assert np.allclose(nrv(), [1.0, 2.0, 3.0])


def test_sample_statistics():
    rng = np.random.default_rng(0)
    cov = np.diag([1.0, 4.0])
    nrv = NormalRandomVariable(cov, mean=[5.0, -1.0], rng=rng)
    samples = np.array([nrv() for _ in range(20000)])
    assert np.allclose(samples.mean(axis=0), [5.0, -1.0], atol=0.1)
    assert np.allclose(np.cov(samples.T), cov, atol=0.2)


def test_mismatched_mean_raises():
    with pytest.raises(ValueError):
        NormalRandomVariable(np.eye(2), mean=[0.0, 0.0, 0.0])


def test_non_square_covariance_raises():
    with pytest.raises(ValueError):
        NormalRandomVariable(np.zeros((2, 3)))