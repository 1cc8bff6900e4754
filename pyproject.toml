[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imusim"
version = "1.0.0"
description = "Parse IMU and ground-truth pose datasets and generate noisy pseudo-landmark measurements"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["imu", "kalman-filter", "simulation", "ground-truth", "measurements", "noise"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
imusim = "imusim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["imusim"]

[tool.pytest.ini_options]
addopts = "-ra"
