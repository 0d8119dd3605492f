"""
Configuration and Constants for Icon Studio

"""

# ==========================================
# 🛠️ TOOLS (toolbar order, shortcut keys)
# ==========================================
TOOL_ORDER = ["pencil", "eraser", "line", "rectangle", "circle", "move", "fill"]

TOOL_SHORTCUTS = {
    "B": "pencil",
    "E": "eraser",
    "L": "line",
    "R": "rectangle",
    "C": "circle",
    "V": "move",
    "G": "fill",
}

# ==========================================
# 🎨 RENDER COLOURS
# ==========================================
PIXEL_COLOR = "#000000"
PREVIEW_COLOR = "#f59e0b"   # amber
GRID_LINE_COLOR = "#bdbdbd"
ONION_ALPHA = 26            # ~10% black

# ==========================================
# 📐 DEFAULT VALUES
# ==========================================
DEFAULT_ICON_WIDTH = 16
DEFAULT_ICON_HEIGHT = 16
MAX_ICON_SIZE = 256
MAX_CANVAS_WIDTH = 512
DEFAULT_ANIMATION_SPEED = 250
PLAYER_TICK_MS = 16

DEFAULT_CONFIG = {
    "app_settings": {
        "title": "Icon Studio",
        "default_icon_width": DEFAULT_ICON_WIDTH,
        "default_icon_height": DEFAULT_ICON_HEIGHT,
        "max_canvas_width": MAX_CANVAS_WIDTH,
        "animation_speed_ms": DEFAULT_ANIMATION_SPEED,
    },
    "theme": {
        "font_family_ui": "Segoe UI",
        "font_size": "13px",
        "window_bg": "#1c1917",
        "panel_bg": "#292524",
        "border_color": "#44403c",
        "text_header": "#f5f5f4",
        "btn_default": "#44403c",
        "btn_text": "#e7e5e4",
        "btn_accent": "#d97706",
        "error_text": "#f87171",
    },
}
