"""
Scene rendering for the editor, the player and the import preview.

Pure functions of the state they are given: nothing here mutates a
Document.
"""

from PyQt6.QtCore import QRectF, QLineF
from PyQt6.QtGui import QPainter, QPen, QColor, QImage

from ..config import PIXEL_COLOR, PREVIEW_COLOR, GRID_LINE_COLOR, ONION_ALPHA


def _fill_cells(painter, grid, pixel_size, color):
    for x, y in grid.lit_pixels():
        painter.fillRect(QRectF(x * pixel_size, y * pixel_size, pixel_size, pixel_size), color)


def draw_scene(painter: QPainter, surface_width, surface_height, pixel_size, layers,
               width, height, onion=None, preview=None, grid_lines=True, background="#ffffff"):
    """
    Paint one frame onto a surface

    Args:
        painter: Active QPainter on the target surface
        surface_width, surface_height: Surface size in device pixels
        pixel_size: Edge length of one icon pixel
        layers: Ordered layers of the frame; hidden ones are skipped
        width, height: Icon size in pixels
        onion: Previous frame composite, drawn faintly underneath
        preview: Uncommitted shape/move grid, drawn in amber on top
        grid_lines: Draw the cell grid (editor only)
        background: Fill colour for the whole surface, None to leave it untouched
    """
    if background is not None:
        painter.fillRect(QRectF(0, 0, surface_width, surface_height), QColor(background))

    # === 1. Onion Skin (previous frame) === #
    if onion is not None:
        _fill_cells(painter, onion, pixel_size, QColor(0, 0, 0, ONION_ALPHA))

    # === 2. Current Frame Layers === #
    pixel_color = QColor(PIXEL_COLOR)
    for layer in layers:
        if layer.visible:
            _fill_cells(painter, layer.grid, pixel_size, pixel_color)

    # === 3. Preview === #
    if preview is not None:
        _fill_cells(painter, preview, pixel_size, QColor(PREVIEW_COLOR))

    # === 4. Grid Lines === #
    if grid_lines:
        painter.setPen(QPen(QColor(GRID_LINE_COLOR), 1))
        for y in range(height + 1):
            painter.drawLine(QLineF(0, y * pixel_size, surface_width, y * pixel_size))
        for x in range(width + 1):
            painter.drawLine(QLineF(x * pixel_size, 0, x * pixel_size, surface_height))


def render_grid_image(grid, pixel_size, background="#ffffff") -> QImage:
    """Standalone image of a single grid (import preview thumbnails)"""
    size = max(1, int(pixel_size))
    image = QImage(grid.width * size, grid.height * size, QImage.Format.Format_ARGB32)
    image.fill(QColor(background))
    painter = QPainter(image)
    _fill_cells(painter, grid, size, QColor(PIXEL_COLOR))
    painter.end()
    return image
