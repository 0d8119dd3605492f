from PyQt6.QtWidgets import QGraphicsDropShadowEffect
from PyQt6.QtGui import QColor

from . import config_manager


def theme():
    return config_manager.CONFIG['theme']


def apply_shadow(widget):
    shadow = QGraphicsDropShadowEffect()
    shadow.setBlurRadius(20)
    shadow.setXOffset(0)
    shadow.setYOffset(4)
    shadow.setColor(QColor(0, 0, 0, 60))
    widget.setGraphicsEffect(shadow)


def get_stylesheet():
    THEME = theme()
    return f"""
    /* === GLOBAL RESET === */
    QWidget {{
        font-family: '{THEME['font_family_ui']}', sans-serif;
        font-size: {THEME['font_size']};
        color: {THEME['text_header']};
    }}

    /* === MAIN WINDOW === */
    QMainWindow {{
        background-color: {THEME['window_bg']};
    }}

    /* === DOCK WIDGETS === */
    QDockWidget {{
        border: none;
    }}

    QDockWidget::title {{
        background: {THEME['panel_bg']};
        padding: 6px;
        border-radius: 12px 12px 0px 0px;
    }}

    QFrame#PanelContent {{
        background-color: {THEME['panel_bg']};
        border-radius: 0px 0px 12px 12px;
        border-bottom: 1px solid {THEME['border_color']};
    }}

    /* === BUTTONS === */
    QPushButton {{
        background-color: {THEME['btn_default']};
        color: {THEME['btn_text']};
        border-radius: 8px;
        padding: 8px;
        font-weight: 600;
        border: none;
    }}

    QPushButton:hover, QPushButton:checked {{
        background-color: {THEME['btn_accent']};
        color: white;
    }}

    QPushButton:disabled {{
        color: {THEME['border_color']};
    }}

    /* === CODE OUTPUT === */
    QPlainTextEdit {{
        font-family: 'Consolas', 'Courier New', monospace;
        background-color: {THEME['window_bg']};
        border: 1px solid {THEME['border_color']};
        border-radius: 8px;
    }}

    QLabel#ErrorLabel {{
        color: {THEME['error_text']};
    }}
    """
