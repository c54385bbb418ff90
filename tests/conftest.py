"""Pytest configuration and fixtures for functional image tests."""

import math

import pytest

from functional_images.coordinate import Cartesian, Polar
from functional_images.images import as_cartesian


@pytest.fixture
def sample_points():
    """Points spread over all four quadrants, off any tile boundary."""
    return [
        Cartesian(0.5, 0.5),
        Cartesian(-3.3, 1.7),
        Cartesian(7.25, -4.75),
        Cartesian(-12.6, -0.4),
        Cartesian(100.1, 42.3),
        Polar(3.7, 2.0),
        Polar(9.2, -math.pi / 3),
    ]


@pytest.fixture
def probe():
    """Base image whose value is the sampled point in cartesian form."""
    return as_cartesian
