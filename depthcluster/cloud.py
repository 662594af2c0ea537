"""A container of rich points with a pose and an optional projection."""

from __future__ import annotations

import copy as _copy
from typing import Any, Iterable, Iterator, Optional

from depthcluster.pose import Pose
from depthcluster.rich_point import RichPoint


def _copy_pose(pose: Pose) -> Pose:
    return Pose(pose.matrix, pose.likelihood)


class Cloud:
    """An ordered collection of points, the pose it was taken at and its sensor pose.

    ``projection`` holds whatever image projection was built from the points;
    it becomes meaningless once the points move, so transforming the cloud
    drops it.
    """

    def __init__(
        self,
        pose: Optional[Pose] = None,
        points: Optional[Iterable[RichPoint]] = None,
        sensor_pose: Optional[Pose] = None,
    ) -> None:
        self.pose = _copy_pose(pose) if pose is not None else Pose()
        self.sensor_pose = _copy_pose(sensor_pose) if sensor_pose is not None else Pose()
        self._points: list[RichPoint] = list(points) if points is not None else []
        self.projection: Any = None

    @property
    def points(self) -> list[RichPoint]:
        """The points of the cloud, in insertion order."""
        return self._points

    def append(self, point: RichPoint) -> None:
        self._points.append(point)

    def resize(self, new_size: int) -> None:
        """Truncate the cloud or pad it with default points."""
        if new_size < 0:
            raise ValueError("size must not be negative")
        if new_size <= len(self._points):
            del self._points[new_size:]
        else:
            self._points.extend(RichPoint() for _ in range(new_size - len(self._points)))

    def copy(self) -> Cloud:
        """A deep copy: points, poses and projection are all duplicated."""
        result = Cloud(
            pose=self.pose,
            points=(RichPoint(p.x, p.y, p.z, p.ring) for p in self._points),
            sensor_pose=self.sensor_pose,
        )
        if self.projection is not None:
            clone = getattr(self.projection, "clone", None)
            result.projection = clone() if callable(clone) else _copy.deepcopy(self.projection)
        return result

    def transform_in_place(self, pose: Pose) -> None:
        """Move every point by ``pose``, keeping ring indices; drops the projection."""
        for point in self._points:
            point.x, point.y, point.z = (float(v) for v in pose.apply(point))
        self.projection = None

    def transform(self, pose: Pose) -> Cloud:
        """Return a transformed copy, leaving this cloud unchanged."""
        result = self.copy()
        result.transform_in_place(pose)
        return result

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> RichPoint:
        return self._points[index]

    def __iter__(self) -> Iterator[RichPoint]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"Cloud(size={len(self._points)}, pose={self.pose!r})"