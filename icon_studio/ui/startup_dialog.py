from PyQt6.QtWidgets import (QDialog, QVBoxLayout, QLabel, QSpinBox,
                            QPushButton, QHBoxLayout, QFormLayout)
from PyQt6.QtCore import Qt

from ..config import MAX_ICON_SIZE


class StartupDialog(QDialog):
    """Asks for the icon resolution (new document or resize)"""

    def __init__(self, width=16, height=16, title="New Icon", parent=None):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setFixedSize(300, 200)

        layout = QVBoxLayout(self)

        # Title
        heading = QLabel("Icon Studio")
        heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
        heading.setStyleSheet("font-size: 18px; font-weight: bold; margin-bottom: 10px;")
        layout.addWidget(heading)

        # Form
        form_layout = QFormLayout()

        self.spin_width = QSpinBox()
        self.spin_width.setRange(1, MAX_ICON_SIZE)
        self.spin_width.setValue(width)
        self.spin_width.setSuffix(" px")

        self.spin_height = QSpinBox()
        self.spin_height.setRange(1, MAX_ICON_SIZE)
        self.spin_height.setValue(height)
        self.spin_height.setSuffix(" px")

        form_layout.addRow("Width:", self.spin_width)
        form_layout.addRow("Height:", self.spin_height)
        layout.addLayout(form_layout)

        # Buttons
        btn_layout = QHBoxLayout()
        self.btn_create = QPushButton("Apply")
        self.btn_create.clicked.connect(self.accept) # 'accept' closes dialog with Success code

        self.btn_cancel = QPushButton("Cancel")
        self.btn_cancel.clicked.connect(self.reject) # 'reject' closes with Failure code

        btn_layout.addWidget(self.btn_cancel)
        btn_layout.addWidget(self.btn_create)
        layout.addLayout(btn_layout)

    def get_dimensions(self):
        return self.spin_width.value(), self.spin_height.value()
