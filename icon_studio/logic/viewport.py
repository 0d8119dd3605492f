"""
Surface <-> grid coordinate mapping for the editor view.
"""

import math

from ..config import MAX_CANVAS_WIDTH


def map_to_grid(px, py, surface_width, surface_height, grid_width, grid_height):
    """
    Map a point on the drawing surface to integer grid coordinates.

    Not clamped: points outside the surface land outside the grid and are
    clipped later by the rasterizer.
    """
    x = math.floor(px / surface_width * grid_width)
    y = math.floor(py / surface_height * grid_height)
    return int(x), int(y)


def pixel_size(grid_width, max_canvas_width=MAX_CANVAS_WIDTH):
    """Edge length of one icon pixel on the editor surface"""
    return max_canvas_width / grid_width


def surface_size(grid_width, grid_height, max_canvas_width=MAX_CANVAS_WIDTH):
    """Editor surface (width, height): fixed width, height keeps the icon aspect"""
    return max_canvas_width, round(max_canvas_width * grid_height / grid_width)
