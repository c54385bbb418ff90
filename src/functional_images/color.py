"""RGB colors and their weighted mixing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGB color with 8-bit channels."""

    r: int
    g: int
    b: int

    def weighted_mean(self, other: Color, w: float) -> Color:
        """Mix ``w`` parts of *other* with ``1 - w`` parts of this color.

        ``w == 0`` yields this color and ``w == 1`` yields *other*.  The
        weight is not validated; values outside [0, 1] extrapolate.
        """
        return Color(
            round((1 - w) * self.r + w * other.r),
            round((1 - w) * self.g + w * other.g),
            round((1 - w) * self.b + w * other.b),
        )

    def to_rgb(self) -> tuple[int, int, int]:
        """Channels clamped to the displayable 0..255 range."""
        return (
            min(max(self.r, 0), 255),
            min(max(self.g, 0), 255),
            min(max(self.b, 0), 255),
        )


class Colors:
    """Named color constants."""

    black = Color(0, 0, 0)
    white = Color(255, 255, 255)
    red = Color(255, 0, 0)
    green = Color(0, 255, 0)
    blue = Color(0, 0, 255)
    gray = Color(128, 128, 128)
    vermilion = Color(227, 66, 52)
    caramel = Color(255, 213, 154)
