"""Sampling functional images over a finite pixel grid.

Pixel ``(col, row)`` is sampled at the plane point
``(col - width / 2, height / 2 - row)``: the origin sits in the middle of
the grid and ``y`` grows upward.  Base images are pure, so rows can be
sampled on several threads in any order with the same result.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import partial

import numpy as np
from numpy.typing import NDArray

from functional_images.config import settings
from functional_images.coordinate import Cartesian
from functional_images.images import BaseImage, Blend, Image, Region, T

logger = logging.getLogger(__name__)


def pixel_to_point(col: int, row: int, width: int, height: int) -> Cartesian:
    """Plane point sampled for the pixel at *col*, *row*."""
    return Cartesian(col - width / 2, height / 2 - row)


def _sample_row(image: BaseImage[T], row: int, width: int, height: int) -> list[T]:
    return [image(pixel_to_point(col, row, width, height)) for col in range(width)]


def sample(
    image: BaseImage[T],
    width: int | None = None,
    height: int | None = None,
    workers: int | None = None,
) -> list[list[T]]:
    """Evaluate *image* at every pixel of a ``width`` x ``height`` grid.

    Args:
        image: Any base image (region, image or blend).
        width, height: Grid size; default to ``settings.raster_width``
            and ``settings.raster_height``.
        workers: Threads used to sample rows; defaults to
            ``settings.sampling_workers``.

    Returns:
        Row-major list of rows, top row first.
    """
    width = settings.raster_width if width is None else width
    height = settings.raster_height if height is None else height
    workers = settings.sampling_workers if workers is None else workers

    if width <= 0 or height <= 0:
        raise ValueError(f"Grid size must be positive, got {width}x{height}")
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    logger.info("Sampling %dx%d grid with %d worker(s)", width, height, workers)

    sample_row = partial(_sample_row, image, width=width, height=height)
    if workers == 1:
        return [sample_row(row) for row in range(height)]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sample_row, range(height)))


def rasterize(
    image: Image,
    width: int | None = None,
    height: int | None = None,
    workers: int | None = None,
) -> NDArray[np.uint8]:
    """Sample *image* into an RGB array of shape ``(height, width, 3)``."""
    grid = sample(image, width, height, workers)
    return np.array([[color.to_rgb() for color in row] for row in grid], dtype=np.uint8)


def region_mask(
    region: Region,
    width: int | None = None,
    height: int | None = None,
    workers: int | None = None,
) -> NDArray[np.bool_]:
    """Sample *region* into a boolean mask of shape ``(height, width)``."""
    return np.array(sample(region, width, height, workers), dtype=np.bool_)


def blend_field(
    blend: Blend,
    width: int | None = None,
    height: int | None = None,
    workers: int | None = None,
) -> NDArray[np.float64]:
    """Sample *blend* into a float array of shape ``(height, width)``."""
    return np.array(sample(blend, width, height, workers), dtype=np.float64)
