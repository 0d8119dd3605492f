from PyQt6.QtWidgets import (QDockWidget, QFrame, QVBoxLayout, QPushButton, QListWidget,
                             QListWidgetItem, QHBoxLayout, QLabel)
from PyQt6.QtCore import Qt, pyqtSignal

from ..logic.errors import IconStudioError


class FramePanel(QDockWidget):
    document_changed = pyqtSignal()
    message = pyqtSignal(str)

    def __init__(self, document, parent=None):
        super().__init__("Frames", parent)
        self.document = document

        # 1. Dock Config
        self.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea)
        self.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable | QDockWidget.DockWidgetFeature.DockWidgetFloatable)

        # 2. Container
        self.container = QFrame()
        self.container.setObjectName("PanelContent")
        self.setWidget(self.container)

        # 3. Layout
        self.layout = QVBoxLayout(self.container)
        self.layout.setContentsMargins(10, 10, 10, 10)

        # 4. Content
        self.lbl_count = QLabel()
        self.layout.addWidget(self.lbl_count)

        self.frame_list = QListWidget()
        self.frame_list.itemClicked.connect(self._on_item_clicked)
        self.layout.addWidget(self.frame_list)

        row1 = QHBoxLayout()
        self.btn_duplicate = QPushButton("Duplicate")
        self.btn_duplicate.clicked.connect(lambda: self._run(self.document.add_frame, True))
        self.btn_blank = QPushButton("Blank")
        self.btn_blank.clicked.connect(lambda: self._run(self.document.add_frame, False))
        row1.addWidget(self.btn_duplicate)
        row1.addWidget(self.btn_blank)
        self.layout.addLayout(row1)

        row2 = QHBoxLayout()
        self.btn_up = QPushButton("▲")
        self.btn_up.clicked.connect(lambda: self._run(self.document.move_frame, -1))
        self.btn_down = QPushButton("▼")
        self.btn_down.clicked.connect(lambda: self._run(self.document.move_frame, 1))
        self.btn_del = QPushButton("❌")
        self.btn_del.setObjectName("DangerBtn")
        self.btn_del.setToolTip("Delete Frame")
        self.btn_del.clicked.connect(lambda: self._run(self.document.remove_frame, self.document.current_frame_index))
        for btn in (self.btn_up, self.btn_down, self.btn_del):
            row2.addWidget(btn)
        self.layout.addLayout(row2)

        self.refresh()

    def refresh(self):
        doc = self.document
        self.frame_list.blockSignals(True)
        self.frame_list.clear()
        for index, frame in enumerate(doc.frames):
            item = QListWidgetItem(f"{frame.name} (#{index + 1})")
            item.setData(Qt.ItemDataRole.UserRole, index)
            self.frame_list.addItem(item)
            if index == doc.current_frame_index:
                self.frame_list.setCurrentItem(item)
        self.frame_list.blockSignals(False)

        self.lbl_count.setText(f"Frame {doc.current_frame_index + 1} of {len(doc.frames)}")
        self.btn_up.setEnabled(doc.current_frame_index > 0)
        self.btn_down.setEnabled(doc.current_frame_index < len(doc.frames) - 1)
        self.btn_del.setEnabled(len(doc.frames) > 1)

    def _on_item_clicked(self, item):
        self._run(self.document.select_frame, item.data(Qt.ItemDataRole.UserRole))

    def _run(self, action, *args):
        try:
            action(*args)
        except IconStudioError as e:
            self.message.emit(str(e))
            return
        self.refresh()
        self.document_changed.emit()
