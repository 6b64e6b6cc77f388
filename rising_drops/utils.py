"""Geometry and color utility functions used across the game."""

from __future__ import annotations

import colorsys
import math

import numpy as np

from .config import DROP_LIGHTNESS, DROP_SATURATION, GROWTH_FACTOR, OUTLINE_ALPHA, OUTLINE_LIGHTEN

HSL = tuple[float, float, float]


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a numeric value into the inclusive range [lo, hi]."""
    return max(lo, min(hi, value))


def circles_overlap(ax: float, ay: float, ar: float, bx: float, by: float, br: float) -> bool:
    """True if the two circles overlap (center distance strictly below the radius sum)."""
    return math.hypot(ax - bx, ay - by) < ar + br


def point_in_circle(px: float, py: float, cx: float, cy: float, r: float) -> bool:
    """True if point (px,py) lies strictly inside the circle at (cx,cy) with radius r."""
    return circles_overlap(px, py, 0.0, cx, cy, r)


def merged_radius(r1: float, r2: float, max_radius: float) -> float:
    """Radius of a circle holding both areas plus the growth bonus, capped at max_radius."""
    combined = math.pi * r1 * r1 + math.pi * r2 * r2
    return min(max_radius, math.sqrt((combined * GROWTH_FACTOR) / math.pi))


def split_radius(radius: float, damping: float) -> float:
    """Radius of each half when a drop splits in two."""
    return radius / math.sqrt(2) * damping


def mix_hues(h1: float, h2: float) -> float:
    # Plain average, not the shortest way around the color wheel.
    return ((h1 + h2) / 2) % 360


def drop_color(hue: float) -> HSL:
    """Standard drop color for the given hue."""
    return (hue % 360, DROP_SATURATION, DROP_LIGHTNESS)


def hsl_to_rgb(color: HSL) -> tuple[int, int, int]:
    """Convert an (h 0-360, s 0-100, l 0-100) triple to 8-bit RGB."""
    h, s, l = color
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360.0, clamp(l, 0, 100) / 100.0, clamp(s, 0, 100) / 100.0)
    return (round(r * 255), round(g * 255), round(b * 255))


def faded_color(color: HSL) -> tuple[int, int, int, int]:
    """Lightened, half-transparent RGBA version of a drop color, used for the protection outline."""
    h, s, l = color
    rgb = hsl_to_rgb((h, s, min(100, l + OUTLINE_LIGHTEN)))
    return (*rgb, round(OUTLINE_ALPHA * 255))


def vertical_gradient(w: int, h: int, top: tuple[int, int, int], bottom: tuple[int, int, int]) -> np.ndarray:
    """Build a top-to-bottom RGB gradient as a (w, h, 3) array for surfarray.

    Args:
        w, h: Dimensions.
        top, bottom: End colors.
    """
    t = np.linspace(0.0, 1.0, max(1, h), dtype=np.float32)[None, :, None]
    top_arr = np.asarray(top, dtype=np.float32)[None, None, :]
    bottom_arr = np.asarray(bottom, dtype=np.float32)[None, None, :]
    column = top_arr * (1.0 - t) + bottom_arr * t
    grid = np.broadcast_to(column, (max(1, w), max(1, h), 3))
    return np.clip(grid, 0, 255).astype(np.uint8)
