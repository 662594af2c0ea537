"""Angles, points, poses, point clouds, bounding boxes and KITTI scan readers for LiDAR work."""

__version__ = "0.1.0"

__all__ = [
    "arg",
    "arg_errors",
    "bbox",
    "cloud",
    "folder_reader",
    "pose",
    "radians",
    "rich_point",
    "timer",
    "velodyne",
]