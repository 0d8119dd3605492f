import logging
import os

from PyQt6.QtWidgets import QFileDialog
from PyQt6.QtGui import QImage, QColor

logger = logging.getLogger(__name__)


def write_c_file(path, code):
    """Write generated C source, always newline-terminated"""
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(code if code.endswith("\n") else code + "\n")
    logger.info("💾 Wrote %d bytes of C source to %s", len(code), path)
    return path


def composite_to_image(grid, scale=1):
    """
    Render a composite grid to a black-on-white QImage

    Args:
        grid: Composite Grid
        scale: Output pixels per icon pixel
    """
    image = QImage(grid.width * scale, grid.height * scale, QImage.Format.Format_RGB32)
    image.fill(QColor("#ffffff"))
    black = QColor("#000000").rgb()
    for x, y in grid.lit_pixels():
        for dy in range(scale):
            for dx in range(scale):
                image.setPixel(x * scale + dx, y * scale + dy, black)
    return image


class ProjectManager:
    @staticmethod
    def export_c_file(parent, code, suggested_name):
        # === Ask where to save === #
        filename, _ = QFileDialog.getSaveFileName(parent, "Export C File", suggested_name, "C Source (*.c *.h)")
        if not filename: return None

        try:
            return write_c_file(filename, code)
        except OSError as e:
            logger.error("❌ Export Failed: %s", e)
            raise

    @staticmethod
    def export_image(parent, document, scale=8):
        filename, _ = QFileDialog.getSaveFileName(parent, "Export PNG", "", "PNG Image (*.png)")
        if not filename: return None
        if not os.path.splitext(filename)[1]:
            filename += ".png"

        # === Flatten the current frame and save === #
        image = composite_to_image(document.composite(), scale)
        if not image.save(filename, "PNG"):
            raise OSError(f"Could not write {filename}")
        logger.info("🖼️ Exported %s", filename)
        return filename
