"""
Unit tests for the Grid class

Tests cover:
- Construction and validation
- Pixel access and silent clipping
- Clone independence
- Resizing (shrink keeps top-left, grow zero-fills)
"""

import unittest

from icon_studio.logic.errors import GridError
from icon_studio.logic.grid import Grid


class TestGridBasics(unittest.TestCase):

    def test_blank_grid_is_all_zero(self):
        grid = Grid(5, 3)
        self.assertEqual(grid.width, 5)
        self.assertEqual(grid.height, 3)
        self.assertEqual(grid.count(), 0)
        self.assertEqual(grid.rows(), [[0] * 5] * 3)

    def test_invalid_dimensions(self):
        with self.assertRaises(GridError):
            Grid(0, 4)
        with self.assertRaises(GridError):
            Grid(4, -1)

    def test_set_and_get(self):
        grid = Grid(4, 4)
        grid.set_pixel(1, 2, 1)
        self.assertEqual(grid.get_pixel(1, 2), 1)
        self.assertEqual(grid[1, 2], 1)
        grid[1, 2] = 0
        self.assertEqual(grid.get_pixel(1, 2), 0)

    def test_out_of_bounds_is_ignored(self):
        grid = Grid(4, 4)
        grid.set_pixel(-1, 0, 1)
        grid.set_pixel(4, 0, 1)
        grid.set_pixel(0, 4, 1)
        self.assertEqual(grid.count(), 0)
        self.assertEqual(grid.get_pixel(10, 10), 0)

    def test_truthy_values_are_normalised(self):
        grid = Grid(2, 1)
        grid.set_pixel(0, 0, 5)
        self.assertEqual(grid.get_pixel(0, 0), 1)


class TestGridConstruction(unittest.TestCase):

    def test_blank(self):
        grid = Grid.blank(3, 2)
        self.assertEqual(grid, Grid(3, 2))
        self.assertEqual(grid.count(), 0)

    def test_from_rows(self):
        grid = Grid.from_rows([[1, 0, 1], [0, 1, 0]])
        self.assertEqual((grid.width, grid.height), (3, 2))
        self.assertEqual(list(grid.lit_pixels()), [(0, 0), (2, 0), (1, 1)])

    def test_from_rows_rejects_ragged(self):
        with self.assertRaises(GridError):
            Grid.from_rows([[1, 0], [1]])

    def test_from_rows_rejects_non_binary(self):
        with self.assertRaises(GridError):
            Grid.from_rows([[0, 2]])

    def test_from_rows_rejects_empty(self):
        with self.assertRaises(GridError):
            Grid.from_rows([])

    def test_from_strings_round_trip(self):
        lines = ["#..#", ".##."]
        self.assertEqual(Grid.from_strings(lines).to_strings(), lines)


class TestGridCopyAndResize(unittest.TestCase):

    def test_clone_is_independent(self):
        grid = Grid.from_strings(["#.", ".#"])
        copy = grid.clone()
        self.assertEqual(copy, grid)
        copy.set_pixel(0, 0, 0)
        self.assertEqual(grid.get_pixel(0, 0), 1)
        self.assertNotEqual(copy, grid)

    def test_equality_needs_same_size(self):
        self.assertNotEqual(Grid(2, 2), Grid(2, 3))
        self.assertEqual(Grid(2, 2), Grid(2, 2))

    def test_shrink_keeps_top_left(self):
        grid = Grid(8, 8)
        for y in range(8):
            for x in range(8):
                grid.set_pixel(x, y, (x + y) % 2)
        small = grid.resized(4, 4)
        self.assertEqual((small.width, small.height), (4, 4))
        for y in range(4):
            for x in range(4):
                self.assertEqual(small.get_pixel(x, y), (x + y) % 2)

    def test_grow_zero_fills(self):
        grid = Grid.from_strings(["####"] * 4)
        big = grid.resized(8, 8)
        self.assertEqual(big.count(), 16)
        self.assertEqual(set(big.lit_pixels()), {(x, y) for x in range(4) for y in range(4)})

    def test_resize_does_not_touch_original(self):
        grid = Grid.from_strings(["##", "##"])
        grid.resized(1, 1)
        self.assertEqual(grid.count(), 4)

    def test_clear(self):
        grid = Grid.from_strings(["##", "#."])
        grid.clear()
        self.assertEqual(grid.count(), 0)


if __name__ == '__main__':
    unittest.main()
