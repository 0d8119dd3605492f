"""
Tests for surface <-> grid coordinate mapping.
"""

import pytest

from icon_studio import config
from icon_studio.logic.viewport import map_to_grid, pixel_size, surface_size


@pytest.mark.parametrize("px,py,expected", [
    (0, 0, (0, 0)),
    (511.9, 511.9, (15, 15)),
    (256, 31.99, (8, 0)),
    (32, 64, (1, 2)),
    (-0.5, -40, (-1, -2)),
    (600, 0, (18, 0)),
])
def test_map_to_grid_16x16(px, py, expected):
    assert map_to_grid(px, py, 512, 512, 16, 16) == expected


def test_map_to_grid_non_square():
    # 16x8 icon on a 512x256 surface: square 32px cells
    assert map_to_grid(100, 100, 512, 256, 16, 8) == (3, 3)


def test_pixel_size():
    assert pixel_size(16) == 32.0
    assert pixel_size(10) == 51.2
    assert pixel_size(8, max_canvas_width=256) == 32.0


def test_surface_size_keeps_aspect():
    assert surface_size(16, 16) == (512, 512)
    assert surface_size(16, 8) == (512, 256)
    assert surface_size(3, 1) == (512, 171)


def test_default_canvas_width_comes_from_config():
    assert pixel_size(16) == config.MAX_CANVAS_WIDTH / 16
    assert surface_size(4, 4)[0] == config.MAX_CANVAS_WIDTH
