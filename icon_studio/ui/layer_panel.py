from PyQt6.QtWidgets import (QDockWidget, QFrame, QVBoxLayout, QPushButton, QListWidget,
                             QListWidgetItem, QHBoxLayout, QInputDialog)
from PyQt6.QtCore import Qt, pyqtSignal

from ..logic.errors import IconStudioError


class LayerPanel(QDockWidget):
    """Layer stack of the current frame. Shown topmost-first, i.e. reversed storage order."""

    document_changed = pyqtSignal()
    message = pyqtSignal(str)

    def __init__(self, document, parent=None):
        super().__init__("Layers", parent)
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
        self.layer_list = QListWidget()
        self.layer_list.itemClicked.connect(self._on_item_clicked)
        self.layer_list.itemDoubleClicked.connect(lambda item: self.rename_layer())
        self.layout.addWidget(self.layer_list)

        # Button Row
        btn_layout = QHBoxLayout()
        self.btn_add = QPushButton("+")
        self.btn_add.setToolTip("New Layer")
        self.btn_add.clicked.connect(self.add_layer)
        self.btn_vis = QPushButton("👁️")
        self.btn_vis.setToolTip("Toggle Visibility")
        self.btn_vis.clicked.connect(self.toggle_visibility)
        self.btn_rename = QPushButton("✏️")
        self.btn_rename.setToolTip("Rename Layer")
        self.btn_rename.clicked.connect(self.rename_layer)
        self.btn_del = QPushButton("-")
        self.btn_del.setObjectName("DangerBtn")
        self.btn_del.setToolTip("Delete Layer")
        self.btn_del.clicked.connect(self.delete_layer)
        for btn in (self.btn_add, self.btn_vis, self.btn_rename, self.btn_del):
            btn_layout.addWidget(btn)
        self.layout.addLayout(btn_layout)

        self.refresh()

    def refresh(self):
        layers = self.document.active_layers
        self.layer_list.blockSignals(True)
        self.layer_list.clear()
        for index in reversed(range(len(layers))):
            layer = layers[index]
            marker = "👁️" if layer.visible else "🚫"
            item = QListWidgetItem(f"{marker}  {layer.name}")
            item.setData(Qt.ItemDataRole.UserRole, index)
            self.layer_list.addItem(item)
            if index == self.document.active_layer_index:
                self.layer_list.setCurrentItem(item)
        self.layer_list.blockSignals(False)
        self.btn_del.setEnabled(len(layers) > 1)

    def _on_item_clicked(self, item):
        self.document.set_active_layer(item.data(Qt.ItemDataRole.UserRole))
        self.refresh()

    def add_layer(self):
        self.document.add_layer()
        self._changed()

    def delete_layer(self):
        try:
            self.document.delete_layer(self.document.active_layer_index)
        except IconStudioError as e:
            self.message.emit(str(e))
            return
        self._changed()

    def toggle_visibility(self):
        self.document.toggle_layer_visibility(self.document.active_layer_index)
        self._changed()

    def rename_layer(self):
        index = self.document.active_layer_index
        layer = self.document.active_layer
        name, ok = QInputDialog.getText(self, "Rename Layer", f"Enter new name for Layer {index + 1}:", text=layer.name)
        if not ok: return
        try:
            self.document.rename_layer(index, name)
        except ValueError:
            return
        self.refresh()

    def _changed(self):
        self.refresh()
        self.document_changed.emit()
