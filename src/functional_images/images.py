"""Functional images: values defined at every point of the plane.

A base image is a pure function from a :data:`Point` to a value of some
fixed type.  Three kinds are named after their value type:

  Region  – ``bool``, used as a selection mask
  Image   – :class:`Color`, the picture proper
  Blend   – :data:`Fraction`, a mixing weight in [0, 1]

Nothing is sampled until the final function is called with a point.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from functional_images.color import Color
from functional_images.coordinate import Cartesian, Point, Polar, from_polar, to_polar

T = TypeVar("T")

# A real number in [0, 1].  Not validated anywhere.
Fraction = float

BaseImage = Callable[[Point], T]

Region = BaseImage[bool]
Image = BaseImage[Color]
Blend = BaseImage[Fraction]


def as_polar(p: Point) -> Polar:
    """Return *p* in polar form, converting only if needed."""
    if isinstance(p, Polar):
        return p
    return to_polar(p)


def as_cartesian(p: Point) -> Cartesian:
    """Return *p* in cartesian form, converting only if needed."""
    if isinstance(p, Polar):
        return from_polar(p)
    return p


def constant(t: T) -> BaseImage[T]:
    """A base image that is *t* everywhere.

    ``constant(True)`` is the whole-plane region, ``constant(Colors.vermilion)``
    a flat vermilion image and ``constant(0.42)`` a uniform blend.
    """
    return lambda p: t
