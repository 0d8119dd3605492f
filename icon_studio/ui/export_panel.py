import logging

from PyQt6.QtWidgets import (QDockWidget, QFrame, QVBoxLayout, QPushButton, QLabel,
                             QPlainTextEdit, QHBoxLayout, QApplication)
from PyQt6.QtCore import Qt, QTimer, pyqtSignal

from ..logic.project import ProjectManager

logger = logging.getLogger(__name__)


class ExportPanel(QDockWidget):
    """Generates C arrays for the current frame or the whole animation"""

    message = pyqtSignal(str)

    def __init__(self, document, parent=None):
        super().__init__("Export", parent)
        self.document = document
        self.code = ""
        self.filename = ""

        # 1. Dock Config
        self.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea | Qt.DockWidgetArea.BottomDockWidgetArea)
        self.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable | QDockWidget.DockWidgetFeature.DockWidgetFloatable)

        # 2. Container
        self.container = QFrame()
        self.container.setObjectName("PanelContent")
        self.setWidget(self.container)
        self.layout = QVBoxLayout(self.container)
        self.layout.setContentsMargins(10, 10, 10, 10)

        # 3. Generate Buttons
        gen_row = QHBoxLayout()
        self.btn_single = QPushButton()
        self.btn_single.clicked.connect(self.generate_single)
        self.btn_animation = QPushButton()
        self.btn_animation.clicked.connect(self.generate_animation)
        gen_row.addWidget(self.btn_single)
        gen_row.addWidget(self.btn_animation)
        self.layout.addLayout(gen_row)

        # 4. Output
        self.output = QPlainTextEdit()
        self.output.setReadOnly(True)
        self.output.setVisible(False)
        self.layout.addWidget(self.output)

        out_row = QHBoxLayout()
        self.btn_copy = QPushButton("Copy to Clipboard")
        self.btn_copy.clicked.connect(self.copy_output)
        self.btn_save = QPushButton("Export .c File")
        self.btn_save.clicked.connect(self.save_output)
        out_row.addWidget(self.btn_copy)
        out_row.addWidget(self.btn_save)
        self.layout.addLayout(out_row)

        self.refresh()

    def refresh(self):
        """Byte counts on the buttons. Generated code stays visible until invalidate()"""
        self.btn_single.setText(f"Single Frame ({self.document.single_frame_byte_count()} bytes)")
        self.btn_animation.setText(f"Animation ({self.document.animation_byte_count()} bytes)")
        self.btn_copy.setEnabled(bool(self.code))
        self.btn_save.setEnabled(bool(self.code))

    def invalidate(self):
        self.code = ""
        self.filename = ""
        self.output.setVisible(False)
        self.refresh()

    def generate_single(self):
        self._show(*self.document.export_single_frame())
        self._flash(self.btn_single)

    def generate_animation(self):
        self._show(*self.document.export_animation())
        self._flash(self.btn_animation)

    def _show(self, code, filename):
        self.code = code
        self.filename = filename
        self.output.setPlainText(code)
        self.output.setVisible(True)
        self.refresh()

    def _flash(self, button):
        button.setText("Generated!")
        QTimer.singleShot(2000, self.refresh)

    def copy_output(self):
        if not self.code: return
        QApplication.clipboard().setText(self.code)
        self.btn_copy.setText("Copied!")
        QTimer.singleShot(2000, lambda: self.btn_copy.setText("Copy to Clipboard"))

    def save_output(self):
        if not self.code: return
        try:
            path = ProjectManager.export_c_file(self, self.code, self.filename or "export.c")
        except OSError as e:
            self.message.emit(f"Export failed: {e}")
            return
        if path:
            self.message.emit(f"Saved {path}")
