"""Operators combining two images into one."""

from __future__ import annotations

from functional_images.color import Color, Colors
from functional_images.coordinate import Point
from functional_images.functional import lift
from functional_images.images import Blend, Image, Region, constant


def cond(region: Region, this_way: Image, that_way: Image) -> Image:
    """Take *this_way* where *region* holds and *that_way* elsewhere."""

    def pick(p: Point) -> Color:
        return this_way(p) if region(p) else that_way(p)

    return pick


def lerp(blend: Blend, this_way: Image, that_way: Image) -> Image:
    """Mix two images pointwise with the weight given by *blend*.

    A weight of 0 gives *this_way*, a weight of 1 gives *that_way*.
    """
    return lift(Color.weighted_mean, this_way, that_way, blend)


def darken(image: Image, blend: Blend) -> Image:
    """Fade *image* toward black; ``blend == 1`` is all black."""
    return lerp(blend, image, constant(Colors.black))


def lighten(image: Image, blend: Blend) -> Image:
    """Fade *image* toward white; ``blend == 1`` is all white."""
    return lerp(blend, image, constant(Colors.white))
