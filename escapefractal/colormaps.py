"""
Colormap definitions for escape-time fractals.

Each colormap function returns a numpy array of shape (max_iter + 1, 3)
with RGB values (uint8): entry n is the color of a point that escaped
after n iterations, and the last entry (index max_iter, the interior
sentinel) is always black. Applying a colormap is then a plain table
lookup per pixel.

The default 'hsv' colormap uses a byte-based HSV conversion with
fixed-point truncation and a saturation == value adjustment. Both are
kept exactly as is: changing either shifts the rendered colors.

To add a new colormap:
1. Define a create_colormap_xxx(max_iter, ...) function that returns the table
2. Add it to the COLORMAPS dictionary at the bottom of this file
"""

import numpy as np
from numba import jit, prange


SECTOR_WIDTH = 42.5  # 255 / 6
DEFAULT_SATURATION = 255
DEFAULT_VALUE = 128
INTERIOR_COLOR = (0, 0, 0)


@jit(nopython=True, cache=True)
def hsv_to_rgb(h, s, v):
    """
    Convert a byte-valued HSV triple to an (r, g, b) tuple.

    Hue is a byte in [0, 255] split into six sectors of 42.5. The
    intermediate channels use integer arithmetic with truncating shifts,
    and every intermediate is stored as a byte (wraps modulo 256).

    Args:
        h: Hue byte
        s: Saturation byte (0 gives a gray of value v)
        v: Value byte

    Returns:
        (r, g, b) tuple of ints in [0, 255]
    """
    if s == 0:
        return v, v, v
    if s == v:
        # Nudged up by one, wrapping at 255
        s = (v + 1) & 0xFF

    i = (int(h / SECTOR_WIDTH) + 1) % 6
    m = int((h - i * SECTOR_WIDTH) * 6) & 0xFF

    p = (v * (255 - s)) >> 8
    q = (v * (255 - ((s * m) >> 8))) >> 8
    t = (v * (255 - ((s * (255 - m)) >> 8))) >> 8

    if i == 0:
        return v, p, q
    elif i == 1:
        return v, t, p
    elif i == 2:
        return q, v, p
    elif i == 3:
        return p, v, t
    elif i == 4:
        return p, q, v
    return t, p, v


def iteration_hue(iterations, max_iter, saturation=DEFAULT_SATURATION,
                  value=DEFAULT_VALUE, invert=False):
    """
    Hue byte for an escape step: 255 * iterations / max_iter, truncated.

    With invert=True the hue is reflected as s - (h - v), wrapped to a
    byte, which swaps the direction of the color sweep.
    """
    hue = int(255 * (iterations / max_iter)) & 0xFF
    if invert:
        hue = (saturation - (hue - value)) & 0xFF
    return hue


def create_colormap_hsv(max_iter, saturation=DEFAULT_SATURATION,
                        value=DEFAULT_VALUE, invert=False, offset=0):
    """
    HSV colormap: hue sweeps once around the wheel from 0 to max_iter.

    Entry n takes the hue of step n + offset. Mandelbrot counts start one
    step past the origin, so they use offset=1 to keep the same colors as
    an origin-started count.

    Default palette: fully saturated, half brightness, interior black.
    """
    colors = np.zeros((max_iter + 1, 3), dtype=np.uint8)
    for i in range(max_iter):
        hue = iteration_hue(i + offset, max_iter, saturation, value, invert)
        colors[i] = hsv_to_rgb(hue, saturation, value)
    colors[max_iter] = INTERIOR_COLOR
    return colors


def create_colormap_grayscale(max_iter, saturation=DEFAULT_SATURATION,
                              value=DEFAULT_VALUE, invert=False, offset=0):
    """
    Grayscale colormap: black -> white with escape speed.

    Simple, classic look. Good for seeing raw iteration structure.
    Saturation and value are ignored.
    """
    colors = np.zeros((max_iter + 1, 3), dtype=np.uint8)
    for i in range(max_iter):
        g = min(255, int(255 * (i + offset) / max_iter))
        if invert:
            g = 255 - g
        colors[i] = [g, g, g]
    colors[max_iter] = INTERIOR_COLOR
    return colors


@jit(nopython=True, parallel=True, cache=True)
def apply_colormap(data, colormap, out):
    """
    Apply a colormap to escape-step data.

    Args:
        data: 2D int array of escape steps in [0, max_iter]
        colormap: (max_iter + 1) x 3 array of RGB colors (uint8)
        out: Output RGB image array (modified in place)
    """
    height, width = data.shape
    for py in prange(height):
        for px in range(width):
            idx = data[py, px]
            out[py, px, 0] = colormap[idx, 0]
            out[py, px, 1] = colormap[idx, 1]
            out[py, px, 2] = colormap[idx, 2]


# Registry of all available colormaps.
# Keys are command-line names, values are factory functions.
COLORMAPS = {
    'hsv': create_colormap_hsv,
    'grayscale': create_colormap_grayscale,
}


def get_colormap(name, max_iter, saturation=DEFAULT_SATURATION,
                 value=DEFAULT_VALUE, invert=False, offset=0):
    """
    Get a colormap by name.

    Args:
        name: Key from COLORMAPS dictionary
        max_iter: Iteration cap the table is built for
        offset: Added to each escape step before it is colored

    Returns:
        Colormap array (max_iter + 1, 3) of uint8 RGB values

    Raises:
        KeyError if name not found
    """
    return COLORMAPS[name](max_iter, saturation, value, invert, offset)


def list_colormap_names():
    """Get list of available colormap names."""
    return list(COLORMAPS.keys())
