"""
Logic Package for Icon Studio

Contains data structures and editing logic (no widgets):
- Grid: 1-bit raster
- Layer / Frame / Document: the animation being edited
- raster: line, rectangle, circle, flood fill, shift
- codec: byte packing and C source import/export
- EditingSession: pointer gestures -> grid edits
- AnimationPlayer: frame timing for the preview player

"""

from .animation import AnimationPlayer
from .codec import (
    expected_byte_count,
    format_animation_bytes,
    format_bytes,
    generate_bitmap_bytes,
    parse_bytes,
    parse_c_array,
)
from .compositor import merge_visible_layers
from .document import Document
from .errors import (
    DimensionMismatch,
    GestureInProgressError,
    GridError,
    IconStudioError,
    ImportNotReady,
    InvalidLastFrame,
    InvalidLastLayer,
    UnknownToolError,
)
from .grid import Grid
from .importer import ImportPreview
from .layer import Frame, Layer
from .raster import draw_circle, draw_line, draw_rectangle, flood_fill, shift_grid
from .session import EditingSession, Gesturing, Idle

__all__ = [
    'Grid', 'Layer', 'Frame', 'Document', 'EditingSession', 'Idle', 'Gesturing',
    'AnimationPlayer', 'ImportPreview', 'merge_visible_layers',
    'draw_line', 'draw_rectangle', 'draw_circle', 'flood_fill', 'shift_grid',
    'generate_bitmap_bytes', 'parse_c_array', 'parse_bytes', 'format_bytes',
    'format_animation_bytes', 'expected_byte_count',
    'IconStudioError', 'GridError', 'DimensionMismatch', 'InvalidLastLayer',
    'InvalidLastFrame', 'UnknownToolError', 'GestureInProgressError', 'ImportNotReady',
]
