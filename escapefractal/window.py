"""
Window front end for the fractal renderers.

Contains the FractalWindow class which handles:
- Window setup (optionally fullscreen) and the event loop
- Redrawing whenever the window is exposed or resized, using the
  window's current size each time
- Keyboard input: Escape quits, F toggles fullscreen
"""

import logging

import pygame

from .compute import warmup_jit
from .renderer import FractalRenderer

logger = logging.getLogger(__name__)


class DisplayError(RuntimeError):
    """Raised when no window can be opened on the display."""


def render_surface(renderer, width, height):
    """
    Render into a new pygame Surface of the given size.

    Works without an open display, so it can also be used to save images.
    """
    rgb = renderer.render(width, height)
    return pygame.surfarray.make_surface(rgb.swapaxes(0, 1))


class FractalWindow:
    """
    Shows one FractalConfig in a pygame window until the user quits.

    The image is computed once per expose/resize; between those the loop
    only waits for input.
    """

    FPS = 30

    def __init__(self, config, fullscreen=False):
        """
        Args:
            config: FractalConfig to display; config.size is the initial window size
            fullscreen: Start in fullscreen mode
        """
        self.config = config
        self.fullscreen = fullscreen
        self.renderer = FractalRenderer(config)

        # Pygame state (initialized in run())
        self.screen = None
        self.clock = None

        self.needs_redraw = True
        self.running = False

    def run(self):
        """Run the window main loop."""
        try:
            self._init_pygame()
            warmup_jit()
            self.running = True
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if self.running and self.needs_redraw:
                    self.draw()
                self.clock.tick(self.FPS)
        finally:
            pygame.quit()

    def _init_pygame(self):
        """Initialize pygame and create the window."""
        pygame.init()
        self._open_display()
        pygame.display.set_caption(self.config.name)
        self.clock = pygame.time.Clock()

    def _open_display(self):
        flags = pygame.FULLSCREEN if self.fullscreen else pygame.RESIZABLE
        size = (0, 0) if self.fullscreen else self.config.size
        try:
            self.screen = pygame.display.set_mode(size, flags)
        except pygame.error as err:
            raise DisplayError(f"Cannot connect to display: {err}") from err
        self.needs_redraw = True

    def toggle_fullscreen(self):
        """Switch between fullscreen and a normal window."""
        self.fullscreen = not self.fullscreen
        logger.debug("Fullscreen %s", "on" if self.fullscreen else "off")
        self._open_display()

    def handle_event(self, event):
        """Process a single pygame event."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_f:
                self.toggle_fullscreen()
        elif event.type in (pygame.VIDEORESIZE, pygame.VIDEOEXPOSE,
                            pygame.WINDOWEXPOSED):
            self.needs_redraw = True

    def draw(self):
        """Render the fractal at the current window size and show it."""
        self.screen = pygame.display.get_surface()
        width, height = self.screen.get_size()
        logger.info("Drawing %s at %dx%d", self.config.mode, width, height)
        surface = render_surface(self.renderer, width, height)
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()
        self.needs_redraw = False


def run(config, fullscreen=False):
    """
    Open a window showing config.

    Raises:
        DisplayError if no display is available
    """
    window = FractalWindow(config, fullscreen)
    try:
        window.run()
    except KeyboardInterrupt:
        pass
