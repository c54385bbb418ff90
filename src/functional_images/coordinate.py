"""Plane coordinates: cartesian and polar points, displacement vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Cartesian:
    """A point given by its ``x`` and ``y`` coordinates."""

    x: float
    y: float

    @property
    def is_polar(self) -> bool:
        return False


@dataclass(frozen=True)
class Polar:
    """A point given by its distance from the origin and its angle.

    Attributes:
        r: Distance from the origin.
        theta: Angle in radians, measured counter-clockwise from the
            positive x axis.
    """

    r: float
    theta: float

    @property
    def is_polar(self) -> bool:
        return True


# A point of the plane in either representation.
Point = Cartesian | Polar


@dataclass(frozen=True)
class Vector:
    """A displacement on the plane."""

    dx: float
    dy: float

    def __neg__(self) -> Vector:
        return Vector(-self.dx, -self.dy)


def to_polar(p: Cartesian) -> Polar:
    """Convert a cartesian point to polar form (theta in (-pi, pi])."""
    if not isinstance(p, Cartesian):
        raise TypeError(f"Expected a Cartesian point, got {type(p).__name__}")
    return Polar(math.hypot(p.x, p.y), math.atan2(p.y, p.x))


def from_polar(p: Polar) -> Cartesian:
    """Convert a polar point to cartesian form."""
    if not isinstance(p, Polar):
        raise TypeError(f"Expected a Polar point, got {type(p).__name__}")
    return Cartesian(p.r * math.cos(p.theta), p.r * math.sin(p.theta))


def distance(p: Point, q: Point) -> float:
    """Euclidean distance between two points in any representation."""
    a = from_polar(p) if isinstance(p, Polar) else p
    b = from_polar(q) if isinstance(q, Polar) else q
    return math.hypot(a.x - b.x, a.y - b.y)
