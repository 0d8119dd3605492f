"""
Grid Class for Icon Studio

The atomic drawing surface: a fixed-size 1-bit raster.
- Cells are ints, 0 (background) or 1 (foreground)
- Width and height never change after construction
- Writes outside the grid are ignored, reads outside return 0

"""

from .errors import GridError


class Grid:
    """A width x height matrix of 0/1 pixels, stored row-major"""

    __slots__ = ("width", "height", "_rows")

    def __init__(self, width: int, height: int):
        """
        Create a blank grid

        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)
        """
        if width < 1 or height < 1:
            raise GridError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._rows = [[0] * width for _ in range(height)]

    # === Construction === #
    @classmethod
    def blank(cls, width: int, height: int) -> "Grid":
        return cls(width, height)

    @classmethod
    def from_rows(cls, rows) -> "Grid":
        """
        Build a grid from a list of rows.

        Raises:
            GridError: if rows are empty, ragged, or hold values other than 0/1
        """
        rows = [list(row) for row in rows]
        if not rows or not rows[0]:
            raise GridError("Grid needs at least one row and one column")
        width = len(rows[0])
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            if len(row) != width:
                raise GridError(f"Row {y} has length {len(row)}, expected {width}")
            for x, value in enumerate(row):
                if value not in (0, 1):
                    raise GridError(f"Pixel ({x}, {y}) is {value!r}, expected 0 or 1")
                grid._rows[y][x] = int(value)
        return grid

    @classmethod
    def from_strings(cls, lines, on="#") -> "Grid":
        """Build a grid from text art, e.g. ["#..#", ".##."]"""
        return cls.from_rows([[1 if ch == on else 0 for ch in line] for line in lines])

    # === Pixel Access === #
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> int:
        if self.in_bounds(x, y):
            return self._rows[y][x]
        return 0

    def set_pixel(self, x: int, y: int, value: int):
        # Silently clipped: every raster op relies on this
        if self.in_bounds(x, y):
            self._rows[y][x] = 1 if value else 0

    def __getitem__(self, pos):
        x, y = pos
        return self.get_pixel(x, y)

    def __setitem__(self, pos, value):
        x, y = pos
        self.set_pixel(x, y, value)

    # === Whole-Grid Operations === #
    def clone(self) -> "Grid":
        """Structural copy. The copy shares nothing with the original."""
        copy = Grid.__new__(Grid)
        copy.width = self.width
        copy.height = self.height
        copy._rows = [row[:] for row in self._rows]
        return copy

    def clear(self):
        for row in self._rows:
            row[:] = [0] * self.width

    def resized(self, width: int, height: int) -> "Grid":
        """
        Return a new grid of the given size.

        Pixels in the overlapping top-left region keep their (x, y);
        everything else is zero.
        """
        result = Grid(width, height)
        for y in range(min(height, self.height)):
            for x in range(min(width, self.width)):
                result._rows[y][x] = self._rows[y][x]
        return result

    def rows(self):
        """Copy of the pixel data as a list of lists"""
        return [row[:] for row in self._rows]

    def count(self) -> int:
        """Number of foreground pixels"""
        return sum(sum(row) for row in self._rows)

    def lit_pixels(self):
        """Yield (x, y) for every foreground pixel, row by row"""
        for y, row in enumerate(self._rows):
            for x, value in enumerate(row):
                if value:
                    yield x, y

    def same_size(self, other: "Grid") -> bool:
        return self.width == other.width and self.height == other.height

    def to_strings(self, on="#", off="."):
        return ["".join(on if v else off for v in row) for row in self._rows]

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.same_size(other) and self._rows == other._rows

    __hash__ = None  # mutable

    def __repr__(self):
        return f"Grid({self.width}x{self.height}, lit={self.count()})"
