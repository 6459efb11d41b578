"""
Escape-time fractal computation using Numba JIT compilation.

This module contains the performance-critical functions that are
JIT-compiled for speed:
- Scalar escape-time kernels for Mandelbrot and Julia mode
- Whole-grid evaluation, parallel over rows

Both modes iterate z -> z² + offset:
- Mandelbrot: z starts at the pixel's coordinate (the first step from
  the origin always lands there), offset is the same coordinate
- Julia: z starts at the pixel's coordinate, offset is a fixed seed

A point whose orbit never leaves the escape radius returns max_iter,
which callers treat as the "interior" sentinel rather than a color.
"""

import numpy as np
from numba import jit, prange

from .viewport import Viewport, pixel_steps


MANDELBROT = 'mandelbrot'
JULIA = 'julia'
MODES = (MANDELBROT, JULIA)


@jit(nopython=True, cache=True)
def orbit_escape(zr, zi, cr, ci, max_iter, escape_radius):
    """
    Iterate z -> z² + c from (zr, zi) until it escapes or max_iter is hit.

    Returns:
        Number of completed iterations, in [0, max_iter]
    """
    escape_r2 = escape_radius * escape_radius
    iteration = 0
    while zr * zr + zi * zi < escape_r2 and iteration < max_iter:
        # zi must be computed from the old zr
        temp = zr * zr - zi * zi
        zi = 2 * zr * zi + ci
        zr = temp + cr
        iteration += 1
    return iteration


@jit(nopython=True, cache=True)
def mandelbrot_escape(cr, ci, max_iter, escape_radius):
    """
    Escape step for point c.

    The orbit starts at c rather than at the origin, so a point already
    outside the radius returns 0. An orbit that first leaves on step
    max_iter - 1 counts as interior: started from the origin, that step
    would be number max_iter, which is never tested.
    """
    iteration = orbit_escape(cr, ci, cr, ci, max_iter, escape_radius)
    if iteration > 0 and iteration >= max_iter - 1:
        return max_iter
    return iteration


@jit(nopython=True, cache=True)
def julia_escape(zr, zi, seed_r, seed_i, max_iter, escape_radius):
    """Escape step for starting point z under the fixed seed."""
    return orbit_escape(zr, zi, seed_r, seed_i, max_iter, escape_radius)


@jit(nopython=True, parallel=True, cache=True)
def _escape_grid(x_min, dx, y_min, dy, width, height, max_iter,
                 julia, seed_r, seed_i, escape_radius, result):
    for py in prange(height):
        y0 = y_min - py * dy
        for px in range(width):
            x0 = x_min - px * dx
            if julia:
                result[py, px] = julia_escape(x0, y0, seed_r, seed_i,
                                              max_iter, escape_radius)
            else:
                result[py, px] = mandelbrot_escape(x0, y0, max_iter, escape_radius)


def _as_pair(value):
    """Accept a complex number, a real number or a (re, im) pair."""
    if isinstance(value, complex):
        return value.real, value.imag
    if isinstance(value, (int, float)):
        return float(value), 0.0
    re, im = value
    return float(re), float(im)


def evaluate(c, seed=None, max_iter=64, escape_radius=2.0, mode=MANDELBROT):
    """
    Escape-time iteration count for a single coordinate.

    Args:
        c: Plane coordinate of the pixel (complex or (re, im))
        seed: Julia seed (complex or (re, im)); ignored in Mandelbrot mode
        max_iter: Iteration cap, returned for points that never escape
        escape_radius: Orbit is considered escaped once |z| reaches this

    Returns:
        int in [0, max_iter]

    Raises:
        ValueError for an unknown mode, or Julia mode without a seed
    """
    cr, ci = _as_pair(c)
    if mode == MANDELBROT:
        return int(mandelbrot_escape(cr, ci, max_iter, float(escape_radius)))
    if mode == JULIA:
        if seed is None:
            raise ValueError("Julia mode needs a seed")
        seed_r, seed_i = _as_pair(seed)
        return int(julia_escape(cr, ci, seed_r, seed_i, max_iter, float(escape_radius)))
    raise ValueError(f"Unknown mode {mode!r}, expected one of {MODES}")


def compute_escape_grid(viewport, width, height, max_iter, seed=None,
                        escape_radius=2.0, mode=MANDELBROT, out=None):
    """
    Compute escape steps for every pixel of a width x height grid.

    Rows are evaluated in parallel; every pixel depends only on its own
    coordinate, so the result is identical to a serial evaluation.

    Args:
        viewport: Viewport mapped onto the grid
        width, height: Grid dimensions in cells/pixels
        max_iter: Iteration cap (interior sentinel)
        seed: Julia seed, required in Julia mode
        escape_radius: Escape threshold (default 2.0)
        mode: MANDELBROT or JULIA
        out: Optional int32 array of shape (height, width) to fill in place

    Returns:
        int32 array of shape (height, width)
    """
    if mode not in MODES:
        raise ValueError(f"Unknown mode {mode!r}, expected one of {MODES}")
    julia = mode == JULIA
    if julia and seed is None:
        raise ValueError("Julia mode needs a seed")
    seed_r, seed_i = _as_pair(seed) if julia else (0.0, 0.0)

    if out is None:
        out = np.zeros((height, width), dtype=np.int32)
    dx, dy = pixel_steps(width, height, viewport)
    _escape_grid(viewport.x_min, dx, viewport.y_min, dy, width, height,
                 max_iter, julia, seed_r, seed_i, float(escape_radius), out)
    return out


def warmup_jit():
    """
    Warm up JIT compilation with a tiny grid in both modes.

    Call this once at startup to avoid a compile pause on the first
    real render.
    """
    bounds = Viewport(-2.0, 1.0, -1.0, 1.0)
    compute_escape_grid(bounds, 4, 4, 4)
    compute_escape_grid(bounds, 4, 4, 4, seed=(0.0, 0.0), mode=JULIA)
