"""Angles in radians, kept normalised after arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass

from nightfall.vec import Vec2


@dataclass(frozen=True)
class Radian:
    """An angle in radians; zero points up and angles grow counter-clockwise."""

    angle: float = 0.0

    @classmethod
    def from_degrees(cls, degrees: float) -> Radian:
        return Radian.FULL * (degrees / 360.0)

    def to_degrees(self) -> float:
        return self.angle / Radian.FULL.angle * 360.0

    def normalize(self) -> Radian:
        """Bring the angle into the range [0, 2π]."""
        angle = _finite(self.angle)
        full = Radian.FULL.angle
        while angle > full:
            angle -= full
        while angle < 0.0:
            angle += full
        return Radian(angle)

    def normalize_to_half(self) -> Radian:
        """Bring the angle into the range [-π, π]."""
        angle = _finite(self.angle)
        full = Radian.FULL.angle
        half = Radian.HALF.angle
        while angle > half:
            angle -= full
        while angle < -half:
            angle += full
        return Radian(angle)

    def abs(self) -> Radian:
        return Radian(abs(self.angle))

    def unit_vector(self) -> Vec2:
        return Vec2(-math.sin(self.angle), math.cos(self.angle))

    def __add__(self, other: Radian) -> Radian:
        return Radian(self.angle + other.angle).normalize()

    def __sub__(self, other: Radian) -> Radian:
        return Radian(self.angle - other.angle).normalize()

    def __mul__(self, factor: float) -> Radian:
        return Radian(self.angle * factor).normalize()

    def __truediv__(self, divisor: float) -> Radian:
        return Radian(self.angle / divisor).normalize()


def _finite(angle: float) -> float:
    if math.isinf(angle):
        raise ValueError("cannot normalise an infinite angle")
    return angle


Radian.ZERO = Radian(0.0)
Radian.HALF = Radian(math.pi)
Radian.FULL = Radian(math.pi * 2.0)