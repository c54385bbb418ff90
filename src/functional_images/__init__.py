"""Images as functions of the continuous plane.

Sampling helpers live in :mod:`functional_images.raster` and are not
imported here, so importing the package never reads settings.
"""

from functional_images.color import Color, Colors
from functional_images.compositing import cond, darken, lerp, lighten
from functional_images.coordinate import Cartesian, Point, Polar, Vector, distance, from_polar, to_polar
from functional_images.functional import compose, lift
from functional_images.images import (
    BaseImage,
    Blend,
    Fraction,
    Image,
    Region,
    as_cartesian,
    as_polar,
    constant,
)
from functional_images.shapes import checker, circle, polar_checker, rings, vertical_stripe
from functional_images.transforms import rotate, scale, translate

__version__ = "0.1.0"
__all__ = [
    "BaseImage",
    "Blend",
    "Cartesian",
    "Color",
    "Colors",
    "Fraction",
    "Image",
    "Point",
    "Polar",
    "Region",
    "Vector",
    "as_cartesian",
    "as_polar",
    "checker",
    "circle",
    "compose",
    "cond",
    "constant",
    "darken",
    "distance",
    "from_polar",
    "lerp",
    "lift",
    "lighten",
    "polar_checker",
    "rings",
    "rotate",
    "scale",
    "to_polar",
    "translate",
    "vertical_stripe",
]
