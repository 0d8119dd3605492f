from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPainter

from ..logic.session import EditingSession
from ..logic.viewport import map_to_grid, pixel_size, surface_size
from ..config import MAX_CANVAS_WIDTH
from .renderer import draw_scene

CURSORS = {
    "crosshair": Qt.CursorShape.CrossCursor,
    "cell": Qt.CursorShape.PointingHandCursor,
    "move": Qt.CursorShape.SizeAllCursor,
}


class Canvas(QWidget):
    """Editor surface: paints the current frame and feeds pointer gestures to the session"""

    document_changed = pyqtSignal()

    def __init__(self, document, parent=None, max_canvas_width=MAX_CANVAS_WIDTH):
        super().__init__(parent)
        self.setMouseTracking(False)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        # === Data === #
        self.document = document
        self.session = EditingSession(document)
        self.max_canvas_width = max_canvas_width
        self.show_onion_skin = True

        self.refresh_geometry()
        self.update_cursor()

    # === View State === #
    def refresh_geometry(self):
        """Call after the document is resized"""
        w, h = surface_size(self.document.width, self.document.height, self.max_canvas_width)
        self.setFixedSize(w, h)
        self.update()

    @property
    def pixel_size(self):
        return pixel_size(self.document.width, self.max_canvas_width)

    def set_tool(self, tool_id):
        self.session.set_tool(tool_id)
        self.update_cursor()

    def update_cursor(self):
        self.setCursor(CURSORS.get(self.session.tool.cursor, Qt.CursorShape.ArrowCursor))

    def paintEvent(self, event):
        painter = QPainter(self)
        onion = self.document.onion_skin() if self.show_onion_skin else None
        draw_scene(
            painter, self.width(), self.height(), self.pixel_size,
            self.document.active_layers, self.document.width, self.document.height,
            onion=onion, preview=self.session.preview,
        )
        painter.end()

    def map_to_grid(self, widget_point):
        return map_to_grid(widget_point.x(), widget_point.y(), self.width(), self.height(),
                           self.document.width, self.document.height)

    # === DELEGATED INPUT EVENTS === #
    def mousePressEvent(self, event):
        self.setFocus()
        x, y = self.map_to_grid(event.position())
        if self.session.begin_gesture(x, y):
            self._changed()

    def mouseMoveEvent(self, event):
        x, y = self.map_to_grid(event.position())
        if self.session.update_gesture(x, y):
            self._changed()

    def mouseReleaseEvent(self, event):
        # Release outside the widget still lands here while the button is grabbed
        x, y = self.map_to_grid(event.position())
        if self.session.end_gesture(x, y):
            self._changed()

    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Escape and self.session.cancel_gesture():
            self._changed()
            return
        super().keyPressEvent(event)

    def _changed(self):
        self.update()
        self.document_changed.emit()
