"""
Escape-time Fractal Package

Renders Mandelbrot and Julia sets to a terminal (ANSI truecolor
backgrounds) or to a Pygame window, using Numba for JIT-compiled
computation.

Quick Start:
    from escapefractal import evaluate, hsv_to_rgb
    evaluate((0.0, 0.0), max_iter=64)      # 64, never escapes
    hsv_to_rgb(0, 255, 128)                # (128, 1, 0)

Or from command line:
    ansi-mandelbrot
    window-julia --fullscreen
    python -m escapefractal [terminal|julia|mandelbrot]

Package Structure:
    - compute.py: JIT-compiled escape-time kernels and grid evaluation
    - colormaps.py: Byte HSV conversion and colormap tables
    - viewport.py: Viewport bounds and pixel-to-plane mapping
    - config.py: FractalConfig and the presets of each program
    - renderer.py: Grid + colormap rendering with reusable buffers
    - terminal.py: ANSI output
    - window.py: Pygame window and event loop
    - cli.py: Command-line entry points
"""

__version__ = "0.1.0"

from .compute import JULIA, MANDELBROT, compute_escape_grid, evaluate
from .colormaps import COLORMAPS, get_colormap, hsv_to_rgb, list_colormap_names
from .config import FractalConfig
from .renderer import FractalRenderer
from .viewport import Viewport, pixel_to_plane

__all__ = [
    "JULIA",
    "MANDELBROT",
    "evaluate",
    "compute_escape_grid",
    "hsv_to_rgb",
    "COLORMAPS",
    "get_colormap",
    "list_colormap_names",
    "FractalConfig",
    "FractalRenderer",
    "Viewport",
    "pixel_to_plane",
]
