"""
Tests for the rasterizer: line, rectangle, circle, flood fill, shift.
"""

import time

import pytest

from icon_studio.logic.grid import Grid
from icon_studio.logic.raster import (
    draw_circle,
    draw_line,
    draw_rectangle,
    flood_fill,
    round_half_up,
    shift_grid,
)


def lit(grid):
    return set(grid.lit_pixels())


# ── Line ────────────────────────────────────────────────────────────────

class TestDrawLine:

    def test_zero_length_sets_one_pixel(self):
        grid = Grid(8, 8)
        draw_line(grid, 3, 4, 3, 4, 1)
        assert lit(grid) == {(3, 4)}

    def test_zero_length_erase(self):
        grid = Grid.from_strings(["##", "##"])
        draw_line(grid, 1, 1, 1, 1, 0)
        assert lit(grid) == {(0, 0), (1, 0), (0, 1)}

    def test_horizontal_and_vertical(self):
        grid = Grid(8, 8)
        draw_line(grid, 7, 2, 0, 2, 1)
        assert lit(grid) == {(x, 2) for x in range(8)}

        grid = Grid(8, 8)
        draw_line(grid, 5, 0, 5, 7, 1)
        assert lit(grid) == {(5, y) for y in range(8)}

    def test_diagonal_steps_both_axes(self):
        grid = Grid(8, 8)
        draw_line(grid, 0, 0, 3, 3, 1)
        assert lit(grid) == {(0, 0), (1, 1), (2, 2), (3, 3)}

    def test_shallow_line_tie_breaks(self):
        grid = Grid(8, 8)
        draw_line(grid, 0, 0, 4, 2, 1)
        assert lit(grid) == {(0, 0), (1, 0), (2, 1), (3, 1), (4, 2)}

    def test_reverse_direction_covers_endpoints(self):
        grid = Grid(8, 8)
        draw_line(grid, 4, 2, 0, 0, 1)
        pixels = lit(grid)
        assert (4, 2) in pixels and (0, 0) in pixels
        assert len(pixels) == 5

    @pytest.mark.parametrize("x0,y0,x1,y1", [(0, 0, 7, 3), (6, 1, 1, 6), (2, 7, 3, 0), (7, 7, 0, 5)])
    def test_path_is_8_connected(self, x0, y0, x1, y1):
        grid = Grid(8, 8)
        draw_line(grid, x0, y0, x1, y1, 1)
        pixels = lit(grid)
        assert len(pixels) == max(abs(x1 - x0), abs(y1 - y0)) + 1
        for x, y in pixels:
            if (x, y) in ((x0, y0), (x1, y1)):
                continue
            neighbours = {(x + dx, y + dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)} - {(x, y)}
            assert len(neighbours & pixels) >= 2

    def test_clips_outside_grid(self):
        grid = Grid(4, 1)
        draw_line(grid, -2, 0, 2, 0, 1)
        assert lit(grid) == {(0, 0), (1, 0), (2, 0)}


# ── Rectangle ───────────────────────────────────────────────────────────

class TestDrawRectangle:

    def test_filled_inclusive_any_corner_order(self):
        grid = Grid(8, 8)
        draw_rectangle(grid, 5, 3, 2, 1, 1)
        assert lit(grid) == {(x, y) for x in range(2, 6) for y in range(1, 4)}

    def test_single_cell(self):
        grid = Grid(4, 4)
        draw_rectangle(grid, 2, 2, 2, 2, 1)
        assert lit(grid) == {(2, 2)}

    def test_clipped(self):
        grid = Grid(4, 4)
        draw_rectangle(grid, -3, -3, 1, 1, 1)
        assert lit(grid) == {(0, 0), (1, 0), (0, 1), (1, 1)}

    def test_erase_value(self):
        grid = Grid.from_strings(["####"] * 4)
        draw_rectangle(grid, 1, 1, 2, 2, 0)
        assert grid.to_strings() == ["####", "#..#", "#..#", "####"]


# ── Circle ──────────────────────────────────────────────────────────────

class TestDrawCircle:

    def test_radius_zero_is_a_point(self):
        grid = Grid(8, 8)
        draw_circle(grid, 3, 3, 3, 3, 1)
        assert lit(grid) == {(3, 3)}

    def test_radius_one_is_a_plus(self):
        grid = Grid(8, 8)
        draw_circle(grid, 3, 3, 4, 3, 1)
        assert lit(grid) == {(2, 3), (3, 3), (4, 3), (3, 2), (3, 4)}

    def test_radius_two_is_a_filled_disk(self):
        grid = Grid(11, 11)
        draw_circle(grid, 5, 5, 7, 5, 1)
        assert grid.to_strings()[3:8] == [
            ".....#.....",
            "....###....",
            "...#####...",
            "....###....",
            ".....#.....",
        ]
        assert grid.count() == 13

    def test_radius_rounds_euclidean_distance(self):
        # hypot(1, 2) = 2.236 -> radius 2, same disk as an axis-aligned radius 2
        a = Grid(11, 11)
        draw_circle(a, 5, 5, 6, 7, 1)
        b = Grid(11, 11)
        draw_circle(b, 5, 5, 7, 5, 1)
        assert a == b

    def test_disk_rows_have_no_holes(self):
        grid = Grid(21, 21)
        draw_circle(grid, 10, 10, 16, 10, 1)
        for line in grid.to_strings():
            stripped = line.strip(".")
            assert "." not in stripped

    def test_clipped_at_corner(self):
        grid = Grid(4, 4)
        draw_circle(grid, 0, 0, 1, 0, 1)
        assert lit(grid) == {(0, 0), (1, 0), (0, 1)}

    def test_clipped_disk_matches_unclipped_crop(self):
        big = Grid(61, 61)
        draw_circle(big, 30, 30, 47, 34, 1)
        # Same disk seen through a 20x15 window at (20, 25)
        small = Grid(20, 15)
        draw_circle(small, 10, 5, 27, 9, 1)
        for y in range(small.height):
            for x in range(small.width):
                assert small.get_pixel(x, y) == big.get_pixel(x + 20, y + 25)

    def test_huge_radius_fills_grid_quickly(self):
        grid = Grid(256, 256)
        start = time.perf_counter()
        draw_circle(grid, 10, 10, 960, 10, 1)
        elapsed = time.perf_counter() - start

        full = Grid(256, 256)
        draw_rectangle(full, 0, 0, 255, 255, 1)
        assert grid == full
        assert elapsed < 0.1

    def test_centre_far_outside_grid(self):
        grid = Grid(8, 8)
        draw_circle(grid, 500, 3, 510, 3, 1)
        assert grid.count() == 0

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(2.4999) == 2
        assert round_half_up(0.0) == 0
        assert round_half_up(0.5) == 1
        assert round_half_up(1.5) == 2
        assert round_half_up(-0.5) == 0


# ── Flood fill ──────────────────────────────────────────────────────────

class TestFloodFill:

    def test_uniform_grid_fills_everything(self):
        grid = Grid(6, 4)
        changed = flood_fill(grid, 2, 3, 1)
        assert changed == 24
        assert grid.count() == 24

    def test_noop_when_seed_already_new_value(self):
        grid = Grid.from_strings(["#.", ".#"])
        before = grid.clone()
        assert flood_fill(grid, 0, 0, 1) == 0
        assert grid == before

    def test_does_not_cross_diagonals(self):
        grid = Grid.from_strings([
            ".#..",
            "#...",
            "....",
        ])
        assert flood_fill(grid, 0, 0, 1) == 1
        assert grid.get_pixel(2, 0) == 0

    def test_enclosed_region_untouched(self):
        grid = Grid.from_strings([
            ".....",
            ".###.",
            ".#.#.",
            ".###.",
            ".....",
        ])
        flood_fill(grid, 0, 0, 1)
        assert grid.get_pixel(2, 2) == 0
        assert grid.count() == 24

    def test_erase_region(self):
        grid = Grid.from_strings([
            "##..",
            "##..",
            "...#",
        ])
        assert flood_fill(grid, 1, 1, 0) == 4
        assert lit(grid) == {(3, 2)}

    def test_seed_off_grid(self):
        grid = Grid(3, 3)
        assert flood_fill(grid, 5, 5, 1) == 0
        assert grid.count() == 0


# ── Shift ───────────────────────────────────────────────────────────────

class TestShiftGrid:

    def test_zero_offset_is_equal_copy(self):
        grid = Grid.from_strings(["#..", ".#.", "..#"])
        shifted = shift_grid(grid, 0, 0)
        assert shifted == grid
        assert shifted is not grid

    def test_shift_drops_pixels_past_the_edge(self):
        grid = Grid.from_strings(["#.#", "...", "..."])
        shifted = shift_grid(grid, 1, 1)
        assert lit(shifted) == {(1, 1)}

    def test_negative_offset(self):
        grid = Grid.from_strings(["...", "...", "..#"])
        assert lit(shift_grid(grid, -2, -1)) == {(0, 1)}

    def test_no_wrap(self):
        grid = Grid.from_strings(["###", "###"])
        assert shift_grid(grid, 10, 0).count() == 0

    def test_source_untouched(self):
        grid = Grid.from_strings(["#."])
        shift_grid(grid, 1, 0)
        assert lit(grid) == {(0, 0)}
