"""
Viewport bounds and the pixel-to-plane coordinate transform.

The step sizes are computed as (min - max) / size, which is negative,
and then subtracted from the minimum edge. The two negations cancel,
so column 0 is x_min and row 0 is y_min. Because row 0 is the top of
the screen, the imaginary axis grows downward, which mirrors the image
vertically compared to textbook plots (only visible for Julia sets,
since the Mandelbrot set is symmetric about the real axis).
"""

from collections import namedtuple

import numpy as np


class Viewport(namedtuple('Viewport', 'x_min x_max y_min y_max')):
    """Rectangular region of the complex plane: (x_min, x_max, y_min, y_max)."""

    __slots__ = ()

    def __new__(cls, x_min, x_max, y_min, y_max):
        x_min, x_max = float(x_min), float(x_max)
        y_min, y_max = float(y_min), float(y_max)
        if not x_min < x_max:
            raise ValueError(f"x_min ({x_min}) must be less than x_max ({x_max})")
        if not y_min < y_max:
            raise ValueError(f"y_min ({y_min}) must be less than y_max ({y_max})")
        return super().__new__(cls, x_min, x_max, y_min, y_max)


def pixel_steps(width, height, viewport):
    """Per-pixel (dx, dy) steps. Both are negative for a valid viewport."""
    dx = (viewport.x_min - viewport.x_max) / width
    dy = (viewport.y_min - viewport.y_max) / height
    return dx, dy


def pixel_to_plane(px, py, width, height, viewport):
    """
    Map a grid cell to its complex-plane coordinate.

    Args:
        px, py: Column and row of the cell (0-based, row 0 at the top)
        width, height: Grid dimensions
        viewport: Viewport being mapped onto the grid

    Returns:
        (re, im) tuple of floats
    """
    dx, dy = pixel_steps(width, height, viewport)
    return viewport.x_min - px * dx, viewport.y_min - py * dy


def plane_axes(width, height, viewport):
    """
    Real values for every column and imaginary values for every row.

    Returns:
        (re, im): float64 arrays of length width and height
    """
    dx, dy = pixel_steps(width, height, viewport)
    re = viewport.x_min - np.arange(width, dtype=np.float64) * dx
    im = viewport.y_min - np.arange(height, dtype=np.float64) * dy
    return re, im
