"""
Fractal renderer with reusable output buffers.

The FractalRenderer class handles:
- Evaluating the escape-step grid for the configured viewport
- Mapping escape steps to RGB through a prebuilt colormap table
- Keeping the count and RGB buffers between renders, reallocating
  only when the requested size changes (e.g. a window resize)

Rendering is synchronous; the grid kernel itself runs rows in parallel.
"""

import logging
import time
from dataclasses import replace

import numpy as np

from .colormaps import apply_colormap, get_colormap
from .compute import compute_escape_grid

logger = logging.getLogger(__name__)

# Fields whose change requires a new colormap table
_COLOR_FIELDS = ('mode', 'max_iter', 'colormap', 'saturation', 'value', 'invert')


class FractalRenderer:
    """
    Renders a FractalConfig into RGB images.

    Usage:
        renderer = FractalRenderer(JULIA_WINDOW)
        rgb = renderer.render(800, 600)   # (600, 800, 3) uint8

    Attributes:
        config: Current FractalConfig
        colormap: (max_iter + 1, 3) uint8 lookup table
        data: Escape steps of the last render, shape (height, width)
        rgb: RGB image of the last render, shape (height, width, 3)
    """

    def __init__(self, config):
        self.config = config
        self.colormap = self._build_colormap()
        self.data = None
        self.rgb = None

    def _build_colormap(self):
        c = self.config
        # Mandelbrot counts start one step after the origin
        offset = 0 if c.julia else 1
        return get_colormap(c.colormap, c.max_iter, c.saturation, c.value,
                            c.invert, offset)

    def _ensure_buffers(self, width, height):
        if self.data is not None and self.data.shape == (height, width):
            return
        logger.debug("Allocating buffers for %dx%d", width, height)
        self.data = np.zeros((height, width), dtype=np.int32)
        self.rgb = np.zeros((height, width, 3), dtype=np.uint8)

    def update_settings(self, **changes):
        """
        Replace config fields (validated by FractalConfig).

        The colormap table is rebuilt only when a color-affecting field
        changes.
        """
        old = self.config
        self.config = replace(old, **changes)
        if any(getattr(old, f) != getattr(self.config, f) for f in _COLOR_FIELDS):
            self.colormap = self._build_colormap()

    def compute(self, width, height):
        """Fill and return the escape-step buffer for a width x height grid."""
        self._ensure_buffers(width, height)
        c = self.config
        start = time.perf_counter()
        compute_escape_grid(
            c.viewport, width, height, c.max_iter,
            seed=c.seed, escape_radius=c.escape_radius, mode=c.mode,
            out=self.data
        )
        logger.debug(
            "%s: computed %dx%d grid over %s in %.3fs",
            c.mode, width, height, tuple(c.viewport), time.perf_counter() - start
        )
        return self.data

    def render(self, width, height):
        """
        Compute and colorize a width x height image.

        Returns:
            RGB array of shape (height, width, 3); interior points are black
        """
        data = self.compute(width, height)
        apply_colormap(data, self.colormap, self.rgb)
        return self.rgb

    def interior_mask(self):
        """Boolean mask of the last render's points that never escaped."""
        if self.data is None:
            raise RuntimeError("interior_mask() needs a render first")
        return self.data == self.config.max_iter
