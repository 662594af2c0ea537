"""A rigid 3D transform with a likelihood, kept as a 4x4 matrix."""

from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np


def _rot_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def _rot_y(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def _rot_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def _euler_xyz(m: np.ndarray) -> np.ndarray:
    """Angles (a, b, c) with m == Rx(a) @ Ry(b) @ Rz(c), a in [0, pi]."""
    first = math.atan2(m[1, 2], m[2, 2])
    c2 = math.hypot(m[0, 0], m[0, 1])
    if first > 0:
        first -= math.pi
        second = math.atan2(-m[0, 2], -c2)
    else:
        second = math.atan2(-m[0, 2], c2)
    s1, c1 = math.sin(first), math.cos(first)
    third = math.atan2(s1 * m[2, 0] - c1 * m[1, 0], c1 * m[1, 1] - s1 * m[2, 1])
    return -np.array([first, second, third])


class Pose:
    """An affine transform in 3D with an associated likelihood."""

    def __init__(self, matrix: Any = None, likelihood: float = 1.0) -> None:
        if matrix is None:
            self.matrix = np.eye(4)
        else:
            self.matrix = np.array(matrix, dtype=float)
            if self.matrix.shape != (4, 4):
                raise ValueError("pose matrix must be 4x4")
        self._likelihood = 1.0
        self.likelihood = likelihood

    @classmethod
    def from_2d(cls, x: float, y: float, theta: float) -> Pose:
        pose = cls()
        pose.theta = theta
        pose.x = x
        pose.y = y
        return pose

    @classmethod
    def from_matrix(cls, matrix: Any) -> Pose:
        return cls(matrix)

    @classmethod
    def from_vector6(cls, vector: Sequence[float]) -> Pose:
        """Build from translation and X-Y-Z Euler angles."""
        values = [float(v) for v in vector]
        if len(values) != 6:
            raise ValueError("expected six values")
        pose = cls()
        pose.matrix[:3, 3] = values[:3]
        pose.matrix[:3, :3] = _rot_x(values[3]) @ _rot_y(values[4]) @ _rot_z(values[5])
        return pose

    def to_vector6(self) -> np.ndarray:
        return np.concatenate([self.matrix[:3, 3], _euler_xyz(self.matrix[:3, :3])])

    @property
    def x(self) -> float:
        return float(self.matrix[0, 3])

    @x.setter
    def x(self, value: float) -> None:
        self.matrix[0, 3] = value

    @property
    def y(self) -> float:
        return float(self.matrix[1, 3])

    @y.setter
    def y(self, value: float) -> None:
        self.matrix[1, 3] = value

    @property
    def z(self) -> float:
        return float(self.matrix[2, 3])

    @z.setter
    def z(self, value: float) -> None:
        self.matrix[2, 3] = value

    @property
    def theta(self) -> float:
        angle = math.acos(max(-1.0, min(1.0, self.matrix[0, 0])))
        return angle if self.matrix[1, 0] > 0 else -angle

    @theta.setter
    def theta(self, value: float) -> None:
        c, s = math.cos(value), math.sin(value)
        self.matrix[0, 0] = c
        self.matrix[1, 1] = c
        self.matrix[0, 1] = -s
        self.matrix[1, 0] = s

    @property
    def likelihood(self) -> float:
        return self._likelihood

    @likelihood.setter
    def likelihood(self, value: float) -> None:
        if not 0.0 <= value <= 1.0:
            raise ValueError("likelihood must lie in [0, 1]")
        self._likelihood = float(value)

    def set_pitch(self, pitch: float) -> None:
        c, s = math.cos(pitch), math.sin(pitch)
        self.matrix[0, 0] = c
        self.matrix[2, 2] = c
        self.matrix[0, 2] = -s
        self.matrix[2, 0] = s

    def set_roll(self, roll: float) -> None:
        c, s = math.cos(roll), math.sin(roll)
        self.matrix[1, 1] = c
        self.matrix[2, 2] = c
        self.matrix[1, 2] = -s
        self.matrix[2, 1] = s

    def set_yaw(self, yaw: float) -> None:
        self.theta = yaw

    def to_local_frame_of(self, other: Pose) -> None:
        """Express this pose relative to ``other``, in place."""
        self.matrix = np.linalg.inv(other.matrix) @ self.matrix

    def in_local_frame_of(self, other: Pose) -> Pose:
        pose = Pose(self.matrix, self._likelihood)
        pose.to_local_frame_of(other)
        return pose

    def apply(self, point: Any) -> np.ndarray:
        """Transform a 3D point given as a sequence or anything with ``as_array``."""
        coords = point.as_array() if hasattr(point, "as_array") else point
        vector = np.asarray(coords, dtype=float)
        if vector.shape != (3,):
            raise ValueError("point must have three coordinates")
        return self.matrix[:3, :3] @ vector + self.matrix[:3, 3]

    def format_2d(self) -> str:
        return f"[{self.x:f}, {self.y:f}, {self.theta:f}]"

    def format_3d(self) -> str:
        return f"[{self.x:f}, {self.y:f}, {self.z:f}]"

    def __neg__(self) -> Pose:
        """A pure translation by the negated translation of this pose."""
        inverted = Pose()
        inverted.x = -self.x
        inverted.y = -self.y
        inverted.z = -self.z
        return inverted

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Pose):
            return Pose(self.matrix @ other.matrix)
        return self.apply(other)

    def __repr__(self) -> str:
        return f"Pose(matrix={self.matrix.tolist()!r}, likelihood={self._likelihood!r})"