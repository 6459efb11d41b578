import numpy as np
import pytest

from escapefractal.colormaps import hsv_to_rgb, iteration_hue
from escapefractal.config import JULIA_WINDOW, MANDELBROT_TERMINAL
from escapefractal.renderer import FractalRenderer
from escapefractal.viewport import pixel_to_plane


def origin_started_color(re, im, max_iter):
    """Color of one cell with the orbit started at the origin."""
    zr = zi = 0.0
    i = 0
    while zr * zr + zi * zi < 4.0 and i < max_iter:
        temp = zr * zr - zi * zi
        zi = 2 * zr * zi + im
        zr = temp + re
        i += 1
    if i == max_iter:
        return (0, 0, 0)
    return hsv_to_rgb(iteration_hue(i, max_iter), 255, 128)


def test_render_shape_and_interior():
    renderer = FractalRenderer(MANDELBROT_TERMINAL)
    rgb = renderer.render(132, 33)
    assert rgb.shape == (33, 132, 3)
    assert rgb.dtype == np.uint8

    interior = renderer.interior_mask()
    assert interior.any()
    assert (rgb[interior] == 0).all()
    np.testing.assert_array_equal(rgb, renderer.colormap[renderer.data])


def test_first_pixel_color():
    renderer = FractalRenderer(MANDELBROT_TERMINAL)
    rgb = renderer.render(132, 33)
    # c = -2.25 - 1.25i starts outside the radius; one step from the origin: hue 3
    assert renderer.data[0, 0] == 0
    assert tuple(rgb[0, 0]) == (128, 10, 0)


def test_buffers_are_reused_until_resize():
    renderer = FractalRenderer(JULIA_WINDOW)
    first = renderer.render(40, 30)
    second = renderer.render(40, 30)
    assert first is second
    resized = renderer.render(50, 20)
    assert resized.shape == (20, 50, 3)
    assert resized is not first


def test_update_settings_rebuilds_colormap():
    renderer = FractalRenderer(MANDELBROT_TERMINAL)
    colormap = renderer.colormap
    renderer.update_settings(viewport=(-1.0, 1.0, -1.0, 1.0))
    assert renderer.colormap is colormap

    renderer.update_settings(max_iter=32)
    assert renderer.colormap.shape == (33, 3)
    data = renderer.compute(10, 10)
    assert data.max() <= 32


def test_mandelbrot_colors_match_origin_started_orbits():
    renderer = FractalRenderer(MANDELBROT_TERMINAL)
    width, height = 44, 11
    rgb = renderer.render(width, height)
    for py in range(height):
        for px in range(width):
            re, im = pixel_to_plane(px, py, width, height, MANDELBROT_TERMINAL.viewport)
            assert tuple(rgb[py, px]) == origin_started_color(re, im, 64)


def test_mode_change_rebuilds_colormap():
    renderer = FractalRenderer(MANDELBROT_TERMINAL)
    assert tuple(renderer.colormap[0]) == (128, 10, 0)
    renderer.update_settings(mode='julia')
    assert tuple(renderer.colormap[0]) == (128, 1, 0)


def test_interior_mask_needs_a_render():
    renderer = FractalRenderer(JULIA_WINDOW)
    with pytest.raises(RuntimeError):
        renderer.interior_mask()
    renderer.render(8, 6)
    assert renderer.interior_mask().shape == (6, 8)
