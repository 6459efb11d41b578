import numpy as np
import pytest

from escapefractal.viewport import Viewport, pixel_steps, pixel_to_plane, plane_axes


BOUNDS = Viewport(-2.25, 0.75, -1.25, 1.25)


def test_invalid_bounds():
    with pytest.raises(ValueError):
        Viewport(1.0, -1.0, -1.0, 1.0)
    with pytest.raises(ValueError):
        Viewport(-1.0, 1.0, 0.5, 0.5)


def test_unpacks_like_a_tuple():
    x_min, x_max, y_min, y_max = BOUNDS
    assert (x_min, x_max, y_min, y_max) == (-2.25, 0.75, -1.25, 1.25)


def test_steps_are_negative():
    dx, dy = pixel_steps(132, 33, BOUNDS)
    assert dx == pytest.approx(-3.0 / 132)
    assert dy == pytest.approx(-2.5 / 33)


def test_first_pixel_is_min_corner():
    assert pixel_to_plane(0, 0, 132, 33, BOUNDS) == (-2.25, -1.25)


def test_last_pixel_is_one_step_before_max_corner():
    re, im = pixel_to_plane(131, 32, 132, 33, BOUNDS)
    assert re == pytest.approx(0.75 - 3.0 / 132)
    assert im == pytest.approx(1.25 - 2.5 / 33)


def test_rows_grow_toward_y_max():
    _, top = pixel_to_plane(0, 0, 10, 10, BOUNDS)
    _, below = pixel_to_plane(0, 1, 10, 10, BOUNDS)
    assert below > top


def test_plane_axes_match_pixel_mapping():
    re, im = plane_axes(7, 5, BOUNDS)
    assert re.shape == (7,) and im.shape == (5,)
    for px in range(7):
        for py in range(5):
            assert (re[px], im[py]) == pixel_to_plane(px, py, 7, 5, BOUNDS)
    assert np.all(np.diff(re) > 0)
