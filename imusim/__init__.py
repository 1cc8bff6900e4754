"""Parse IMU and ground-truth pose datasets and generate noisy pseudo-landmark measurements."""

__version__ = "1.0.0"