"""
Rasterizer for Icon Studio

Pure drawing routines that mutate a Grid in place:
- draw_line: integer Bresenham
- draw_rectangle: filled box
- draw_circle: filled disk built from midpoint-circle spans
- flood_fill: 4-connected breadth-first fill
- shift_grid: translate into a fresh grid (no wrap)

All writes go through Grid.set_pixel, so anything outside the grid is
clipped without error.
"""

import logging
import math
from collections import deque

from .grid import Grid

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round .5 towards +infinity for the circle radius (round() would round half to even)"""
    return int(math.floor(value + 0.5))


def draw_line(grid: Grid, x0: int, y0: int, x1: int, y1: int, value: int):
    """Set every pixel on the 8-connected path from (x0, y0) to (x1, y1), both ends included"""
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    while True:
        grid.set_pixel(x0, y0, value)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        # === Both branches may fire: that is a diagonal step === #
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


def draw_rectangle(grid: Grid, x0: int, y0: int, x1: int, y1: int, value: int):
    """Fill the inclusive box spanned by the two corners"""
    min_x, max_x = min(x0, x1), max(x0, x1)
    min_y, max_y = min(y0, y1), max(y0, y1)

    # === Clip up front so huge off-canvas drags stay cheap === #
    min_x, max_x = max(min_x, 0), min(max_x, grid.width - 1)
    min_y, max_y = max(min_y, 0), min(max_y, grid.height - 1)

    for y in range(min_y, max_y + 1):
        for x in range(min_x, max_x + 1):
            grid.set_pixel(x, y, value)


def _fill_span(grid, left, right, y, value):
    if not (0 <= y < grid.height):
        return
    for i in range(max(left, 0), min(right, grid.width - 1) + 1):
        grid.set_pixel(i, y, value)


def draw_circle(grid: Grid, x0: int, y0: int, x1: int, y1: int, value: int):
    """
    Draw a filled disk centred on (x0, y0) whose edge passes near (x1, y1).

    Runs the midpoint circle loop over one octant, but instead of plotting
    the eight mirrored points it fills the horizontal span between each
    mirrored pair. The result is a solid disk, not an outline.

    Spans are clipped to the grid, so the work is bounded by the grid
    size rather than the radius.
    """
    radius = round_half_up(math.hypot(x1 - x0, y1 - y0))
    x = radius
    y = 0
    err = 0

    while x >= y:
        # === Rows y0 +/- y left the grid; every later row (y0 +/- x, x >= y) is further out === #
        if y0 - y < 0 and y0 + y >= grid.height:
            break
        _fill_span(grid, x0 - x, x0 + x, y0 + y, value)
        _fill_span(grid, x0 - x, x0 + x, y0 - y, value)
        _fill_span(grid, x0 - y, x0 + y, y0 + x, value)
        _fill_span(grid, x0 - y, x0 + y, y0 - x, value)

        if err <= 0:
            y += 1
            err += 2 * y + 1
        if err > 0:
            x -= 1
            err -= 2 * x + 1


def flood_fill(grid: Grid, x: int, y: int, new_value: int) -> int:
    """
    Replace the 4-connected region around (x, y) with new_value.

    Args:
        grid: Grid to fill in place
        x, y: Seed pixel
        new_value: 0 or 1

    Returns:
        int: Number of pixels changed (0 if the seed is off-grid or already new_value)
    """
    if not grid.in_bounds(x, y):
        return 0

    new_value = 1 if new_value else 0
    target_value = grid.get_pixel(x, y)
    if target_value == new_value:
        return 0

    # === Breadth-first: a pixel is written before its neighbours go on the queue === #
    grid.set_pixel(x, y, new_value)
    queue = deque([(x, y)])
    changed = 1

    while queue:
        cx, cy = queue.popleft()
        for nx, ny in ((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)):
            if grid.in_bounds(nx, ny) and grid.get_pixel(nx, ny) == target_value:
                grid.set_pixel(nx, ny, new_value)
                queue.append((nx, ny))
                changed += 1

    logger.debug("🪣 Flood fill from (%d, %d): %d pixels -> %d", x, y, changed, new_value)
    return changed


def shift_grid(source: Grid, offset_x: int, offset_y: int) -> Grid:
    """
    Return a new grid with source translated by (offset_x, offset_y).

    Pixels pushed past an edge are dropped, not wrapped. The vacated area
    is zero.
    """
    target = Grid(source.width, source.height)
    for x, y in source.lit_pixels():
        target.set_pixel(x + offset_x, y + offset_y, 1)
    return target
