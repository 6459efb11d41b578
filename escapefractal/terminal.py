"""
Terminal front end: paints the fractal with ANSI truecolor backgrounds.

Every grid cell is a single space with a 24-bit background color; each
row ends with a reset so the terminal's own colors come back before the
newline.
"""

import logging
import sys

from .renderer import FractalRenderer

logger = logging.getLogger(__name__)

RESET = "\033[0m"
INTERIOR_CELL = "\033[48;2;0;0;0m "


def format_cell(rgb, interior=False):
    """ANSI background escape plus a space for one cell."""
    if interior:
        return INTERIOR_CELL
    r, g, b = rgb
    return "\033[48;2;%03d;%03d;%03dm " % (r, g, b)


def render_rows(data, colormap, max_iter):
    """
    Yield the escape sequences for each row of escape-step data.

    Args:
        data: 2D array of escape steps
        colormap: (max_iter + 1, 3) RGB table
        max_iter: Interior sentinel value

    Yields:
        One string per row, terminated by a reset and a newline
    """
    for row in data:
        cells = [
            format_cell(colormap[n], n == max_iter)
            for n in row
        ]
        yield "".join(cells) + RESET + "\n"


def draw(config, width=None, height=None, stream=None):
    """
    Render config to a text stream (stdout by default).

    Args:
        config: FractalConfig to render
        width, height: Grid size in cells (default config.size)
        stream: Writable text stream
    """
    if stream is None:
        stream = sys.stdout
    if width is None or height is None:
        width, height = config.size
    renderer = FractalRenderer(config)
    data = renderer.compute(width, height)
    logger.debug("Writing %d rows of %d cells", height, width)
    for line in render_rows(data, renderer.colormap, config.max_iter):
        stream.write(line)
    stream.flush()
