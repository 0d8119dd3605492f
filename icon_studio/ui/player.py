from PyQt6.QtWidgets import (QDockWidget, QFrame, QVBoxLayout, QHBoxLayout, QPushButton,
                             QLabel, QSpinBox, QWidget)
from PyQt6.QtCore import Qt, QTimer, QElapsedTimer, pyqtSignal
from PyQt6.QtGui import QPainter

from ..config import MAX_CANVAS_WIDTH, PLAYER_TICK_MS
from ..logic.animation import AnimationPlayer
from ..logic.viewport import pixel_size, surface_size
from .renderer import draw_scene


class PlayerView(QWidget):
    """Draws whatever frame the player is showing, no grid lines or overlays"""

    def __init__(self, player, parent=None, max_width=MAX_CANVAS_WIDTH // 2):
        super().__init__(parent)
        self.player = player
        self.max_width = max_width
        self.refresh_geometry()

    def refresh_geometry(self):
        doc = self.player.document
        self.setFixedSize(*surface_size(doc.width, doc.height, self.max_width))
        self.update()

    def paintEvent(self, event):
        doc = self.player.document
        painter = QPainter(self)
        draw_scene(painter, self.width(), self.height(), pixel_size(doc.width, self.max_width),
                   self.player.displayed_layers(), doc.width, doc.height, grid_lines=False)
        painter.end()


class PlayerPanel(QDockWidget):
    frame_selected = pyqtSignal()

    def __init__(self, document, interval_ms=250, parent=None):
        super().__init__("Player", parent)
        self.document = document
        self.player = AnimationPlayer(document, interval_ms)

        # === Scheduler: one pending tick at a time === #
        self.clock = QElapsedTimer()
        self.timer = QTimer(self)
        self.timer.setInterval(PLAYER_TICK_MS)
        self.timer.timeout.connect(self._on_tick)

        self.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea)
        self.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable | QDockWidget.DockWidgetFeature.DockWidgetFloatable)

        self.container = QFrame()
        self.container.setObjectName("PanelContent")
        self.setWidget(self.container)
        self.layout = QVBoxLayout(self.container)
        self.layout.setContentsMargins(10, 10, 10, 10)

        self.view = PlayerView(self.player)
        self.layout.addWidget(self.view, alignment=Qt.AlignmentFlag.AlignCenter)

        self.lbl_frame = QLabel()
        self.lbl_frame.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.lbl_frame)

        controls = QHBoxLayout()
        self.btn_prev = QPushButton("⏮")
        self.btn_prev.clicked.connect(lambda: self.navigate(-1))
        self.btn_play = QPushButton("▶")
        self.btn_play.clicked.connect(self.toggle)
        self.btn_next = QPushButton("⏭")
        self.btn_next.clicked.connect(lambda: self.navigate(1))
        for btn in (self.btn_prev, self.btn_play, self.btn_next):
            controls.addWidget(btn)
        self.layout.addLayout(controls)

        speed_row = QHBoxLayout()
        speed_row.addWidget(QLabel("Speed:"))
        self.spin_speed = QSpinBox()
        self.spin_speed.setRange(1, 10000)
        self.spin_speed.setSuffix(" ms")
        self.spin_speed.setValue(self.player.interval_ms)
        self.spin_speed.valueChanged.connect(self.player.set_interval)
        speed_row.addWidget(self.spin_speed)
        self.layout.addLayout(speed_row)

        self.refresh()

    def refresh(self):
        index = self.player.frame_index if self.player.is_playing else self.document.current_frame_index
        self.lbl_frame.setText(f"{index + 1} / {len(self.document.frames)}")
        self.btn_play.setText("❚❚" if self.player.is_playing else "▶")
        self.view.update()

    def toggle(self):
        if self.player.is_playing:
            self.stop()
        else:
            self.play()

    def play(self):
        self.clock.start()
        if not self.player.play(now=0):
            self.refresh()
            return
        self.timer.start()
        self.refresh()

    def stop(self):
        """Cancel playback and show the edited frame again"""
        self.timer.stop()
        self.player.stop()
        self.refresh()

    def navigate(self, direction):
        self.stop()
        self.document.navigate_frame(direction)
        self.refresh()
        self.frame_selected.emit()

    def _on_tick(self):
        if self.player.tick(self.clock.elapsed()):
            self.refresh()
