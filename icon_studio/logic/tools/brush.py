from ..raster import draw_line
from .base import BaseTool


class PencilTool(BaseTool):
    def __init__(self, is_eraser=False):
        self.is_eraser = is_eraser
        self.tool_id = "eraser" if is_eraser else "pencil"
        self.name = "Eraser" if is_eraser else "Pencil"
        self.icon = "🧼" if is_eraser else "✏️"
        self.cursor = "cell" if is_eraser else "crosshair"
        self.drawing_value = 0 if is_eraser else 1

    def begin(self, session, gesture):
        # === Paint the press point straight onto the live layer === #
        x, y = gesture.start
        session.document.active_grid.set_pixel(x, y, gesture.value)
        return True

    def drag(self, session, gesture, x, y):
        # === Continuous stroke = chain of short segments === #
        last_x, last_y = gesture.last
        draw_line(session.document.active_grid, last_x, last_y, x, y, gesture.value)
        gesture.last = (x, y)
