import pygame
import pytest
from dataclasses import replace

from escapefractal import window as window_module
from escapefractal.config import JULIA_WINDOW, MANDELBROT_WINDOW
from escapefractal.renderer import FractalRenderer
from escapefractal.window import DisplayError, FractalWindow, render_surface


SMALL_JULIA = replace(JULIA_WINDOW, size=(40, 30))


def test_render_surface_matches_renderer():
    renderer = FractalRenderer(MANDELBROT_WINDOW)
    surface = render_surface(renderer, 64, 48)
    assert surface.get_size() == (64, 48)
    for x, y in [(0, 0), (63, 47), (40, 24), (10, 5)]:
        assert tuple(surface.get_at((x, y)))[:3] == tuple(renderer.rgb[y, x])


def test_escape_and_quit_stop_the_loop():
    for event in (pygame.event.Event(pygame.QUIT),
                  pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)):
        window = FractalWindow(SMALL_JULIA)
        window.running = True
        window.handle_event(event)
        assert not window.running


def test_resize_requests_redraw():
    window = FractalWindow(SMALL_JULIA)
    window.needs_redraw = False
    window.handle_event(pygame.event.Event(pygame.VIDEORESIZE, size=(100, 80), w=100, h=80))
    assert window.needs_redraw


def test_run_draws_once_then_quits(monkeypatch):
    batches = iter([[], [pygame.event.Event(pygame.QUIT)]])
    monkeypatch.setattr(window_module.pygame.event, "get", lambda: next(batches))

    window = FractalWindow(SMALL_JULIA)
    window.run()

    assert not window.running
    assert not window.needs_redraw
    assert window.renderer.rgb.shape == (30, 40, 3)


def test_display_failure_raises(monkeypatch):
    def no_display(*args, **kwargs):
        raise pygame.error("No available video device")

    monkeypatch.setattr(window_module.pygame.display, "set_mode", no_display)
    with pytest.raises(DisplayError):
        FractalWindow(SMALL_JULIA).run()
