from ..raster import draw_circle, draw_line, draw_rectangle
from .base import BaseTool

# Committed shapes are always additive, whatever the current drawing value
SHAPE_VALUE = 1


class ShapeTool(BaseTool):
    """Line / rectangle / circle: preview while dragging, commit on release"""

    def __init__(self, tool_id, name, icon, rasterize):
        self.tool_id = tool_id
        self.name = name
        self.icon = icon
        self.rasterize = rasterize

    def begin(self, session, gesture):
        gesture.preview = session.document.blank_grid()
        return True

    def drag(self, session, gesture, x, y):
        # === Fresh preview from the original start every time === #
        preview = session.document.blank_grid()
        self._draw(preview, gesture.start, x, y)
        gesture.preview = preview

    def finish(self, session, gesture, x, y):
        self._draw(session.document.active_grid, gesture.start, x, y)

    def _draw(self, grid, start, x, y):
        start_x, start_y = start
        self.rasterize(grid, start_x, start_y, x, y, SHAPE_VALUE)


def line_tool():
    return ShapeTool("line", "Line", "📏", draw_line)


def rectangle_tool():
    return ShapeTool("rectangle", "Rectangle", "⬜", draw_rectangle)


def circle_tool():
    return ShapeTool("circle", "Circle", "⭕", draw_circle)
