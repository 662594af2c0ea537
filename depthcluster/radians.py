"""Angles stored in radians, with tolerant comparisons and normalization."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

# Machine epsilon of a single-precision float, used as comparison tolerance.
_FLOAT_EPSILON = 1.1920928955078125e-07


@dataclass(frozen=True)
class Radians:
    """An angle in radians.

    A default-constructed angle is marked as not valid; angles built through
    the factory methods are valid.
    """

    value: float = 0.0
    valid: bool = False

    @classmethod
    def from_radians(cls, radians: float) -> Radians:
        return cls(float(radians), True)

    @classmethod
    def from_degrees(cls, angle: float) -> Radians:
        return cls(float(angle) * math.pi / 180.0, True)

    def to_degrees(self) -> float:
        return 180.0 * self.value / math.pi

    def normalized(self, start: Radians | None = None, end: Radians | None = None) -> Radians:
        """Return the angle shifted by whole periods into ``[start, end]``.

        Defaults to the range from 0 to 360 degrees.
        """
        start = deg(0) if start is None else start
        end = deg(360) if end is None else end
        period = end.value - start.value
        if period <= 0:
            raise ValueError("normalization range must have a positive width")
        angle = self.value
        while angle < start.value:
            angle += period
        while angle > end.value:
            angle -= period
        return Radians.from_radians(angle)

    def floor(self) -> Radians:
        """Round down to a whole number of degrees."""
        return Radians.from_degrees(math.floor(self.to_degrees()))

    def __add__(self, other: Radians) -> Radians:
        if not isinstance(other, Radians):
            return NotImplemented
        return Radians.from_radians(self.value + other.value)

    def __sub__(self, other: Radians) -> Radians:
        if not isinstance(other, Radians):
            return NotImplemented
        return Radians.from_radians(self.value - other.value)

    def __mul__(self, num: float) -> Radians:
        if isinstance(num, Radians):
            return NotImplemented
        return Radians.from_radians(self.value * num)

    __rmul__ = __mul__

    def __truediv__(self, other: Union[Radians, float]) -> Union[Radians, float]:
        if isinstance(other, Radians):
            return self.value / other.value
        return Radians.from_radians(self.value / other)

    def __neg__(self) -> Radians:
        return Radians.from_radians(-self.value)

    def __abs__(self) -> Radians:
        return Radians.from_radians(abs(self.value))

    def __lt__(self, other: Radians) -> bool:
        if not isinstance(other, Radians):
            return NotImplemented
        return self.value < other.value - _FLOAT_EPSILON

    def __gt__(self, other: Radians) -> bool:
        if not isinstance(other, Radians):
            return NotImplemented
        return self.value > other.value + _FLOAT_EPSILON


def deg(angle: float) -> Radians:
    """Build an angle from degrees."""
    return Radians.from_degrees(angle)


def rad(angle: float) -> Radians:
    """Build an angle from radians."""
    return Radians.from_radians(angle)