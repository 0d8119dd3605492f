import logging
import sys

from PyQt6.QtWidgets import QApplication, QMainWindow, QToolBar, QDockWidget, QWidget, QVBoxLayout
from PyQt6.QtCore import Qt, QSize
from PyQt6.QtGui import QAction, QKeySequence

# Custom Imports
from . import config_manager, styles
from .logic.document import Document
from .logic.errors import IconStudioError
from .logic.project import ProjectManager
from .ui.canvas import Canvas
from .ui.export_panel import ExportPanel
from .ui.frame_panel import FramePanel
from .ui.import_dialog import ImportDialog
from .ui.layer_panel import LayerPanel
from .ui.player import PlayerPanel
from .ui.startup_dialog import StartupDialog
from .ui.tool_station import ToolStation

logger = logging.getLogger(__name__)


class IconStudio(QMainWindow):
    def __init__(self, width=None, height=None):
        super().__init__()

        # 1. Config & Window Setup
        self.config = config_manager.CONFIG
        app_settings = self.config['app_settings']

        final_w = width if width else app_settings['default_icon_width']
        final_h = height if height else app_settings['default_icon_height']

        self.setWindowTitle(app_settings['title'])
        self.setStyleSheet(styles.get_stylesheet())

        # 2. The Document & Canvas
        self.document = Document(final_w, final_h)
        self.canvas = Canvas(self.document, self, max_canvas_width=app_settings['max_canvas_width'])
        styles.apply_shadow(self.canvas)
        holder = QWidget()
        holder_layout = QVBoxLayout(holder)
        holder_layout.addWidget(self.canvas, alignment=Qt.AlignmentFlag.AlignCenter)
        self.setCentralWidget(holder)

        # 3. The Docks
        self.station = ToolStation(self.canvas, parent=self)
        self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, self.station)

        self.layer_panel = LayerPanel(self.document, self)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.layer_panel)

        self.frame_panel = FramePanel(self.document, self)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.frame_panel)

        self.player_panel = PlayerPanel(self.document, app_settings['animation_speed_ms'], self)
        self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, self.player_panel)

        self.export_panel = ExportPanel(self.document, self)
        self.addDockWidget(Qt.DockWidgetArea.BottomDockWidgetArea, self.export_panel)

        self.docks = [self.station, self.layer_panel, self.frame_panel, self.player_panel, self.export_panel]

        # 4. Signals
        self.canvas.document_changed.connect(self.on_pixels_changed)
        self.layer_panel.document_changed.connect(self.on_pixels_changed)
        self.frame_panel.document_changed.connect(self.on_frames_changed)
        self.player_panel.frame_selected.connect(self.on_frames_changed)
        for dock in (self.station, self.layer_panel, self.frame_panel, self.export_panel):
            dock.message.connect(self.show_message)

        # 5. Menus & Actions
        self.setup_actions()
        self.setup_menubar()
        self.setup_toolbar()

        # Start Unlocked
        self.toggle_ui_lock(False)
        self.update_title()

    def setup_actions(self):
        """Define logic for menus and buttons"""
        self.act_import = QAction("Import C Array...", self)
        self.act_import.setShortcut(QKeySequence("Ctrl+I"))
        self.act_import.triggered.connect(self.import_array)

        self.act_export_png = QAction("Export PNG...", self)
        self.act_export_png.triggered.connect(self.export_png)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        self.act_clear = QAction("Clear Layer", self)
        self.act_clear.triggered.connect(self.clear_layer)

        self.act_resize = QAction("Resolution...", self)
        self.act_resize.triggered.connect(self.resize_document)

        self.act_onion = QAction("Onion Skin", self)
        self.act_onion.setCheckable(True)
        self.act_onion.setChecked(True)
        self.act_onion.toggled.connect(self.toggle_onion_skin)

        self.act_lock = QAction("Lock Workspace", self)
        self.act_lock.setCheckable(True)
        self.act_lock.toggled.connect(self.toggle_ui_lock)

    def setup_menubar(self):
        """Create the top text menu"""
        menu = self.menuBar()

        file_menu = menu.addMenu("&File")
        file_menu.addAction(self.act_import)
        file_menu.addAction(self.act_export_png)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

        edit_menu = menu.addMenu("&Edit")
        edit_menu.addAction(self.act_clear)
        edit_menu.addAction(self.act_resize)

        view_menu = menu.addMenu("&View")
        view_menu.addAction(self.act_onion)
        view_menu.addAction(self.act_lock)

        # Window menu lets users bring back closed panels
        win_menu = menu.addMenu("&Window")
        for dock in self.docks:
            win_menu.addAction(dock.toggleViewAction())

    def setup_toolbar(self):
        """Create the icon bar"""
        toolbar = QToolBar("Main Toolbar")
        toolbar.setIconSize(QSize(16, 16))
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        toolbar.addAction(self.act_import)
        toolbar.addAction(self.act_clear)
        toolbar.addAction(self.act_resize)
        toolbar.addAction(self.act_lock)

    def toggle_ui_lock(self, locked):
        """Freezes or Unfreezes the panels"""
        for dock in self.docks:
            if locked:
                dock.setFeatures(QDockWidget.DockWidgetFeature.NoDockWidgetFeatures)
            else:
                dock.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable |
                                QDockWidget.DockWidgetFeature.DockWidgetFloatable |
                                QDockWidget.DockWidgetFeature.DockWidgetClosable)

    def toggle_onion_skin(self, enabled):
        self.canvas.show_onion_skin = enabled
        self.canvas.update()

    # === Refresh === #
    def on_pixels_changed(self):
        # Any edit stops playback so the player shows what is being drawn
        self.player_panel.stop()
        self.canvas.update()
        self.layer_panel.refresh()
        self.export_panel.refresh()

    def on_frames_changed(self):
        self.player_panel.stop()
        self.canvas.update()
        self.layer_panel.refresh()
        self.frame_panel.refresh()
        self.export_panel.invalidate()

    def update_title(self):
        title = self.config['app_settings']['title']
        self.setWindowTitle(f"{title} - {self.document.width}x{self.document.height}")

    def show_message(self, text):
        self.statusBar().showMessage(text, 4000)

    # === Actions === #
    def clear_layer(self):
        if self.canvas.session.is_gesturing: return
        self.document.clear_active_layer()
        self.on_pixels_changed()

    def resize_document(self):
        if self.canvas.session.is_gesturing: return
        dialog = StartupDialog(self.document.width, self.document.height, title="Resolution", parent=self)
        if not dialog.exec(): return
        w, h = dialog.get_dimensions()
        self.document.resize(w, h)
        self.canvas.refresh_geometry()
        self.player_panel.view.refresh_geometry()
        self.update_title()
        self.on_frames_changed()

    def import_array(self):
        if self.canvas.session.is_gesturing: return
        dialog = ImportDialog(self.document, self)
        if dialog.exec():
            self.show_message("Import complete")
            self.on_pixels_changed()

    def export_png(self):
        try:
            path = ProjectManager.export_image(self, self.document)
        except (OSError, IconStudioError) as e:
            self.show_message(f"Export failed: {e}")
            return
        if path:
            self.show_message(f"Saved {path}")

    def keyPressEvent(self, event):
        if not event.modifiers() and self.station.handle_shortcut(event.text()):
            return
        super().keyPressEvent(event)


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv if argv is None else argv)
    app_settings = config_manager.CONFIG['app_settings']

    # === STARTUP === #
    dialog = StartupDialog(app_settings['default_icon_width'], app_settings['default_icon_height'])
    if not dialog.exec():
        return 0
    w, h = dialog.get_dimensions()
    window = IconStudio(width=w, height=h)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
