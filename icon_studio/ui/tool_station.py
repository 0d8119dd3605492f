from PyQt6.QtWidgets import QDockWidget, QFrame, QVBoxLayout, QPushButton, QLabel, QButtonGroup
from PyQt6.QtCore import Qt, pyqtSignal

from ..config import TOOL_ORDER, TOOL_SHORTCUTS
from ..logic.errors import IconStudioError


class ToolStation(QDockWidget):
    message = pyqtSignal(str)

    def __init__(self, canvas_ref, parent=None):
        super().__init__("Tools", parent)
        self.canvas = canvas_ref

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
        self.layout.setSpacing(10)
        self.layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        # 4. Content
        title = QLabel("TOOLS")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-weight: bold; font-size: 10px;")
        self.layout.addWidget(title)

        shortcut_for = {tool_id: key for key, tool_id in TOOL_SHORTCUTS.items()}
        self.group = QButtonGroup(self)
        self.group.setExclusive(True)
        self.buttons = {}
        for tool_id in TOOL_ORDER:
            tool = self.canvas.session.tools[tool_id]
            btn = QPushButton(tool.icon)
            btn.setCheckable(True)
            btn.setFixedSize(40, 40)
            btn.setToolTip(f"{tool.name} ({shortcut_for.get(tool_id, '')})")
            btn.clicked.connect(lambda checked, t=tool_id: self.set_tool(t))
            self.group.addButton(btn)
            self.layout.addWidget(btn)
            self.buttons[tool_id] = btn

        self.buttons[self.canvas.session.current_tool].setChecked(True)
        self.layout.addStretch()

    def set_tool(self, tool_id):
        try:
            self.canvas.set_tool(tool_id)
        except IconStudioError as e:
            self.message.emit(str(e))
        # Keep buttons in sync even when the switch was refused
        self.buttons[self.canvas.session.current_tool].setChecked(True)

    def handle_shortcut(self, key_text):
        tool_id = TOOL_SHORTCUTS.get(key_text.upper())
        if tool_id:
            self.set_tool(tool_id)
            return True
        return False
