from ..raster import shift_grid
from .base import BaseTool


class MoveTool(BaseTool):
    tool_id = "move"
    name = "Move"
    icon = "✥"
    cursor = "move"

    def begin(self, session, gesture):
        # === Auto-Lift: snapshot, then blank the layer until release === #
        document = session.document
        gesture.snapshot = document.active_grid.clone()
        document.active_layer.grid = document.blank_grid()
        return True

    def drag(self, session, gesture, x, y):
        gesture.preview = self._shifted(gesture, x, y)

    def finish(self, session, gesture, x, y):
        session.document.active_layer.grid = self._shifted(gesture, x, y)
        gesture.snapshot = None

    def cancel(self, session, gesture):
        # === Put the lifted pixels back where they were === #
        if gesture.snapshot is not None:
            session.document.active_layer.grid = gesture.snapshot
            gesture.snapshot = None

    def _shifted(self, gesture, x, y):
        start_x, start_y = gesture.start
        return shift_grid(gesture.snapshot, x - start_x, y - start_y)
