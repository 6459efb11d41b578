"""
Render configuration and the presets of the three programs.

A FractalConfig is passed explicitly to the renderer and front ends;
there is no module-level mutable state. Command-line overrides build a
new config with dataclasses.replace(), which re-runs validation.
"""

from dataclasses import dataclass, field

from .compute import JULIA, MANDELBROT, MODES
from .colormaps import COLORMAPS, DEFAULT_SATURATION, DEFAULT_VALUE
from .viewport import Viewport


# Terminal grid (cells) and window size (pixels)
TERMINAL_WIDTH = 132
TERMINAL_HEIGHT = 33
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

MANDELBROT_BOUNDS = Viewport(-2.25, 0.75, -1.25, 1.25)
JULIA_BOUNDS = Viewport(-1.55, 1.55, -0.9, 0.9)

# Other good seeds: (-0.75, 0.11), (-0.74543, 0.11301)
DEFAULT_SEED = (-0.79, 0.15)
ESCAPE_RADIUS = 2.0


@dataclass(frozen=True)
class FractalConfig:
    """Everything needed to turn a grid size into an image."""
    name: str
    mode: str = MANDELBROT
    viewport: Viewport = MANDELBROT_BOUNDS
    max_iter: int = 64
    escape_radius: float = ESCAPE_RADIUS
    seed: tuple = DEFAULT_SEED
    colormap: str = 'hsv'
    saturation: int = DEFAULT_SATURATION
    value: int = DEFAULT_VALUE
    invert: bool = False
    size: tuple = field(default=(WINDOW_WIDTH, WINDOW_HEIGHT))

    def __post_init__(self):
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode!r}")
        if not isinstance(self.viewport, Viewport):
            object.__setattr__(self, 'viewport', Viewport(*self.viewport))
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be at least 1, got {self.max_iter}")
        if not self.escape_radius > 0:
            raise ValueError(f"escape_radius must be positive, got {self.escape_radius}")
        for label in ('saturation', 'value'):
            byte = getattr(self, label)
            if not 0 <= byte <= 255:
                raise ValueError(f"{label} must be in [0, 255], got {byte}")
        if self.colormap not in COLORMAPS:
            raise KeyError(f"Unknown colormap {self.colormap!r}")
        width, height = self.size
        if width < 1 or height < 1:
            raise ValueError(f"size must be positive, got {width}x{height}")
        object.__setattr__(self, 'seed', (float(self.seed[0]), float(self.seed[1])))

    @property
    def julia(self):
        return self.mode == JULIA


MANDELBROT_TERMINAL = FractalConfig(
    name='ansi-mandelbrot',
    size=(TERMINAL_WIDTH, TERMINAL_HEIGHT),
)

JULIA_TERMINAL = FractalConfig(
    name='ansi-julia',
    mode=JULIA,
    viewport=JULIA_BOUNDS,
    size=(TERMINAL_WIDTH, TERMINAL_HEIGHT),
)

JULIA_WINDOW = FractalConfig(
    name='window-julia',
    mode=JULIA,
    viewport=JULIA_BOUNDS,
    max_iter=224,
)

MANDELBROT_WINDOW = FractalConfig(
    name='window-mandelbrot',
)
