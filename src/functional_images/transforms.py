"""Geometric transforms of base images.

Each transform remaps the sampling point and then queries the wrapped
image, so transforms compose like any other point function.
"""

from __future__ import annotations

from functional_images.coordinate import Cartesian, Polar, Vector, from_polar
from functional_images.functional import compose
from functional_images.images import BaseImage, T, as_cartesian, as_polar


def rotate(image: BaseImage[T], phi: float) -> BaseImage[T]:
    """Rotate *image* counter-clockwise by *phi* radians about the origin."""

    def unrotate(q: Polar) -> Cartesian:
        return from_polar(Polar(q.r, q.theta - phi))

    return compose(as_polar, unrotate, image)


def translate(image: BaseImage[T], v: Vector) -> BaseImage[T]:
    """Move *image* by the vector *v*."""

    def shift_back(q: Cartesian) -> Cartesian:
        return Cartesian(q.x - v.dx, q.y - v.dy)

    return compose(as_cartesian, shift_back, image)


def scale(image: BaseImage[T], s: float) -> BaseImage[T]:
    """Enlarge *image* by the factor *s* (``s == 2`` doubles its size).

    ``s == 0`` is not rejected here; sampling the result raises
    :class:`ZeroDivisionError`.
    """

    def shrink(q: Cartesian) -> Cartesian:
        return Cartesian(q.x / s, q.y / s)

    return compose(as_cartesian, shrink, image)
