from PyQt6.QtWidgets import (QDialog, QVBoxLayout, QLabel, QPlainTextEdit,
                             QPushButton, QHBoxLayout)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPixmap

from ..logic.importer import ImportPreview
from .renderer import render_grid_image

PREVIEW_BOX = 192


class ImportDialog(QDialog):
    """Paste a C array, preview it, then replace the active layer"""

    def __init__(self, document, parent=None):
        super().__init__(parent)
        self.document = document
        self.importer = ImportPreview(document.width, document.height)
        self.setWindowTitle("Import C Array")
        self.setMinimumWidth(420)

        layout = QVBoxLayout(self)

        self.lbl_dims = QLabel(f"W: {document.width} H: {document.height}")
        layout.addWidget(self.lbl_dims)

        self.array_input = QPlainTextEdit()
        self.array_input.setPlaceholderText("Paste e.g. { 0x81, 0x00, ... }")
        layout.addWidget(self.array_input)

        self.lbl_bytes = QLabel(self.importer.status_text())
        layout.addWidget(self.lbl_bytes)

        self.lbl_error = QLabel()
        self.lbl_error.setObjectName("ErrorLabel")
        self.lbl_error.setVisible(False)
        layout.addWidget(self.lbl_error)

        self.preview_label = QLabel()
        self.preview_label.setFixedSize(PREVIEW_BOX, PREVIEW_BOX)
        self.preview_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.preview_label, alignment=Qt.AlignmentFlag.AlignCenter)

        # Buttons
        btn_layout = QHBoxLayout()
        self.btn_cancel = QPushButton("Cancel")
        self.btn_cancel.clicked.connect(self.reject)
        self.btn_preview = QPushButton("Preview")
        self.btn_preview.clicked.connect(self.handle_preview)
        self.btn_commit = QPushButton("Import")
        self.btn_commit.setEnabled(False)
        self.btn_commit.clicked.connect(self.handle_import)
        btn_layout.addWidget(self.btn_cancel)
        btn_layout.addWidget(self.btn_preview)
        btn_layout.addWidget(self.btn_commit)
        layout.addLayout(btn_layout)

        # Editing the text invalidates an earlier preview
        self.array_input.textChanged.connect(self._invalidate)
        self.array_input.setFocus()

    def _invalidate(self):
        self.importer.reset()
        self.btn_commit.setEnabled(False)

    def handle_preview(self):
        ok = self.importer.preview(self.array_input.toPlainText())
        self.lbl_bytes.setText(self.importer.status_text())
        if not ok:
            self.lbl_error.setText(self.importer.error)
            self.lbl_error.setVisible(True)
            self.preview_label.clear()
            self.btn_commit.setEnabled(False)
            return

        size = min(PREVIEW_BOX / self.document.width, PREVIEW_BOX / self.document.height)
        self.preview_label.setPixmap(QPixmap.fromImage(render_grid_image(self.importer.grid, size)))
        self.lbl_error.setVisible(False)
        self.btn_commit.setEnabled(True)

    def handle_import(self):
        if not self.importer.ready: return
        self.importer.commit(self.document)
        self.accept()
