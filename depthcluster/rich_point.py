"""A 3D point carrying the index of the laser ring that measured it."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass
class RichPoint:
    """A point with x, y, z coordinates and a ring index."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    ring: int = 0

    @classmethod
    def from_array(cls, coords: Sequence[float], ring: int = 0) -> RichPoint:
        x, y, z = (float(c) for c in coords)
        return cls(x, y, z, ring)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def dist_to_sensor_2d(self) -> float:
        return math.hypot(self.x, self.y)

    def dist_to_sensor_3d(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)