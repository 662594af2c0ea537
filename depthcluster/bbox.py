"""Axis-aligned bounding boxes of point clouds."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from depthcluster.cloud import Cloud
from depthcluster.pose import Pose

_FLOAT_MAX = float(np.finfo(np.float32).max)
_FLOAT_LOWEST = float(np.finfo(np.float32).min)


class Bbox:
    """An axis-aligned box given by its minimum and maximum corners.

    A box with no positive extent along some axis has zero scale and center
    and a volume of ``WRONG_VOLUME``.
    """

    WRONG_VOLUME = -1.0

    def __init__(self, min_point: Any = None, max_point: Any = None) -> None:
        self._min_point = (
            np.full(3, _FLOAT_MAX) if min_point is None else np.array(min_point, dtype=float)
        )
        self._max_point = (
            np.full(3, _FLOAT_LOWEST) if max_point is None else np.array(max_point, dtype=float)
        )
        if self._min_point.shape != (3,) or self._max_point.shape != (3,):
            raise ValueError("corners must have three coordinates")
        self._center = np.zeros(3)
        self._scale = np.zeros(3)
        self._volume = self.WRONG_VOLUME
        self.update_scale_and_center()

    @classmethod
    def from_cloud(cls, cloud: Cloud) -> Bbox:
        """The tightest box around all points of ``cloud``."""
        if len(cloud) == 0:
            return cls()
        coords = np.array([p.as_array() for p in cloud])
        return cls(coords.min(axis=0), coords.max(axis=0))

    def intersect(self, other: Bbox) -> Bbox:
        """The box of the overlap of two boxes."""
        return Bbox(
            np.maximum(self._min_point, other.min_point),
            np.minimum(self._max_point, other.max_point),
        )

    def intersects(self, other: Bbox) -> bool:
        return self.intersect(other).volume > 0.0

    def move_by(self, pose: Pose) -> None:
        """Transform both corners by ``pose`` and re-sort them per axis."""
        moved_min = pose.apply(self._min_point)
        moved_max = pose.apply(self._max_point)
        self._min_point = np.minimum(moved_min, moved_max)
        self._max_point = np.maximum(moved_min, moved_max)
        self.update_scale_and_center()

    def update_scale_and_center(self) -> None:
        scale = self._max_point - self._min_point
        if np.any(scale <= 0.0):
            self._scale = np.zeros(3)
            self._center = np.zeros(3)
            self._volume = self.WRONG_VOLUME
            return
        self._scale = scale
        self._center = 0.5 * (self._min_point + self._max_point)
        self._volume = float(np.prod(scale))

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def center(self) -> np.ndarray:
        return self._center.copy()

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @property
    def min_point(self) -> np.ndarray:
        return self._min_point.copy()

    @property
    def max_point(self) -> np.ndarray:
        return self._max_point.copy()

    def __repr__(self) -> str:
        return f"Bbox(min_point={self._min_point.tolist()}, max_point={self._max_point.tolist()})"