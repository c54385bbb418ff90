"""Shape and pattern generators.

Every generator has the same shape: normalize the sampling point,
evaluate a predicate over the normalized coordinates and pick one of two
caller-supplied values.  The values may be colors, booleans or fractions,
so the same generator builds images, regions or blends.
"""

from __future__ import annotations

import math
from typing import Any, Callable

from functional_images.coordinate import Cartesian, Point, Polar, distance
from functional_images.functional import compose
from functional_images.images import BaseImage, T, as_cartesian, as_polar


def _select(this_way: T, that_way: T) -> Callable[[bool], T]:
    return lambda hit: this_way if hit else that_way


def _pattern(
    normalize: Callable[[Point], Any],
    predicate: Callable[[Any], bool],
    this_way: T,
    that_way: T,
) -> BaseImage[T]:
    return compose(normalize, predicate, _select(this_way, that_way))


def _require_positive(name: str, value: float) -> None:
    if not value > 0:
        raise ValueError(f"{name} must be positive, got {value!r}")


def circle(center: Point, r: float, inner: T, outer: T) -> BaseImage[T]:
    """Disk of radius *r* around *center*.

    Points on the circumference belong to *inner*.
    """
    if r < 0:
        raise ValueError(f"r must be non-negative, got {r!r}")
    c = as_cartesian(center)
    return _pattern(as_cartesian, lambda q: distance(q, c) <= r, inner, outer)


def checker(d: float, this_way: T, that_way: T) -> BaseImage[T]:
    """Checkerboard of axis-aligned ``d`` x ``d`` squares.

    The square spanning ``[0, d) x [0, d)`` is *this_way*.
    """
    _require_positive("d", d)

    def even_tile(q: Cartesian) -> bool:
        return (math.floor(q.x / d) + math.floor(q.y / d)) % 2 == 0

    return _pattern(as_cartesian, even_tile, this_way, that_way)


def polar_checker(d: float, n: int, this_way: T, that_way: T) -> BaseImage[T]:
    """Checkerboard of rings of width *d* cut into ``2 * n`` equal sectors.

    Each point is mapped to ``(radius, (sector + 0.5) * d)`` and looked up on a
    plain :func:`checker` of side *d*.  *n* must be even.
    """
    _require_positive("d", d)
    if n <= 0 or n % 2 != 0:
        raise ValueError(f"n must be a positive even number, got {n!r}")

    arc = math.pi / n
    # A whole number of sectors, so the angle is non-negative before the
    # floor division without shifting the pattern.
    offset = 2 * n * arc
    tiles = checker(d, this_way, that_way)

    def to_tile_space(q: Polar) -> Cartesian:
        sector = math.floor((q.theta + offset) / arc)
        # Middle of the tile row, so rounding cannot cross a tile edge.
        return Cartesian(q.r, (sector + 0.5) * d)

    return compose(as_polar, to_tile_space, tiles)


def rings(center: Point, d: float, this_way: T, that_way: T) -> BaseImage[T]:
    """Concentric bands of width *d* around *center*, innermost *this_way*."""
    _require_positive("d", d)
    c = as_cartesian(center)
    return _pattern(
        as_cartesian,
        lambda q: math.floor(distance(q, c) / d) % 2 == 0,
        this_way,
        that_way,
    )


def vertical_stripe(d: float, this_way: T, that_way: T) -> BaseImage[T]:
    """Band of width *d* centered on the y axis, edges included."""
    _require_positive("d", d)
    return _pattern(as_cartesian, lambda q: abs(q.x) <= d / 2, this_way, that_way)
