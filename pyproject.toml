[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "depthcluster"
version = "0.1.0"
description = "Point cloud, pose, bounding box and KITTI scan utilities for range-image based LiDAR clustering"
requires-python = ">=3.10"
keywords = ["lidar", "point-cloud", "kitti", "velodyne", "pose", "bounding-box"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["depthcluster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
