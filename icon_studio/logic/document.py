"""
Document: the single in-memory icon being edited.

Holds the animation (ordered frames, each an ordered layer stack), the
shared icon size, and which frame/layer is active. Every mutation the UI
can trigger lives here so there is no ambient state anywhere else.
"""

import logging

from . import codec
from .compositor import merge_visible_layers
from .errors import DimensionMismatch, InvalidLastFrame, InvalidLastLayer
from .grid import Grid
from .layer import Frame, Layer

logger = logging.getLogger(__name__)


class Document:
    """Frames + active indices + icon dimensions"""

    def __init__(self, width: int = 16, height: int = 16):
        _check_dimensions(width, height)
        self.width = width
        self.height = height
        self.frames = [Frame.blank("Frame 1", width, height)]
        self.current_frame_index = 0
        self.active_layer_index = 0

    # === Accessors === #
    @property
    def active_frame(self) -> Frame:
        return self.frames[self.current_frame_index]

    @property
    def active_layers(self):
        return self.active_frame.layers

    @property
    def active_layer(self) -> Layer:
        return self.active_layers[self.active_layer_index]

    @property
    def active_grid(self) -> Grid:
        return self.active_layer.grid

    def blank_grid(self) -> Grid:
        return Grid.blank(self.width, self.height)

    # ==========================================
    # 🎞️ FRAMES
    # ==========================================
    def add_frame(self, duplicate: bool = False) -> Frame:
        """
        Append a frame and make it current

        Args:
            duplicate: Copy the current frame's layers (names, visibility, pixels)
                instead of starting from one blank "Base Layer"
        """
        name = f"Frame {len(self.frames) + 1}"
        if duplicate:
            frame = self.active_frame.clone(name)
        else:
            frame = Frame.blank(name, self.width, self.height)
        self.frames.append(frame)
        self.select_frame(len(self.frames) - 1)
        logger.debug("Added %s (duplicate=%s)", name, duplicate)
        return frame

    def select_frame(self, index: int) -> bool:
        if not (0 <= index < len(self.frames)):
            return False
        self.current_frame_index = index
        self.active_layer_index = min(self.active_layer_index, len(self.active_layers) - 1)
        return True

    def remove_frame(self, index: int):
        """
        Raises:
            InvalidLastFrame: if this is the only frame
            IndexError: if index is out of range
        """
        if len(self.frames) <= 1:
            logger.warning("Refused to delete the last frame")
            raise InvalidLastFrame()
        if not (0 <= index < len(self.frames)):
            raise IndexError(f"No frame at index {index}")

        removed = self.frames.pop(index)
        if self.current_frame_index >= index:
            self.current_frame_index = max(0, self.current_frame_index - 1)
        self.select_frame(self.current_frame_index)
        logger.debug("Removed %s", removed.name)

    def move_frame(self, direction: int) -> bool:
        """Move the current frame one slot up (-1) or down (+1); the selection follows it"""
        old_index = self.current_frame_index
        new_index = old_index + direction
        if not (0 <= new_index < len(self.frames)):
            return False
        frame = self.frames.pop(old_index)
        self.frames.insert(new_index, frame)
        self.select_frame(new_index)
        return True

    def navigate_frame(self, direction: int):
        """Step to the previous/next frame, wrapping around at either end"""
        count = len(self.frames)
        self.select_frame((self.current_frame_index + direction + count) % count)

    # ==========================================
    # 🗂️ LAYERS (of the current frame)
    # ==========================================
    def add_layer(self, name: str = None, set_active: bool = True) -> Layer:
        layers = self.active_layers
        if name is None:
            name = f"Layer {len(layers) + 1}"
        layer = Layer(name, self.width, self.height)
        layers.append(layer)
        if set_active:
            self.active_layer_index = len(layers) - 1
        return layer

    def delete_layer(self, index: int):
        """
        Raises:
            InvalidLastLayer: if the frame would be left with no layers
            IndexError: if index is out of range
        """
        layers = self.active_layers
        if len(layers) <= 1:
            logger.warning("Refused to delete the last layer of %s", self.active_frame.name)
            raise InvalidLastLayer()
        if not (0 <= index < len(layers)):
            raise IndexError(f"No layer at index {index}")

        del layers[index]
        if self.active_layer_index >= index and self.active_layer_index > 0:
            self.active_layer_index -= 1

    def set_active_layer(self, index: int):
        if not (0 <= index < len(self.active_layers)):
            raise IndexError(f"No layer at index {index}")
        self.active_layer_index = index

    def toggle_layer_visibility(self, index: int) -> bool:
        layer = self.active_layers[index]
        layer.visible = not layer.visible
        return layer.visible

    def rename_layer(self, index: int, name: str):
        name = (name or "").strip()
        if not name:
            raise ValueError("Layer name cannot be empty")
        self.active_layers[index].name = name

    def clear_active_layer(self):
        self.active_layer.grid = self.blank_grid()

    def replace_active_grid(self, grid: Grid):
        if grid.width != self.width or grid.height != self.height:
            raise DimensionMismatch(
                codec.expected_byte_count(grid.width, grid.height),
                codec.expected_byte_count(self.width, self.height),
            )
        self.active_layer.grid = grid

    # ==========================================
    # 📐 RESIZE
    # ==========================================
    def resize(self, width: int, height: int):
        """
        Change the icon size for every layer of every frame.

        Overlapping pixels keep their coordinates; new area is blank.
        """
        _check_dimensions(width, height)
        for frame in self.frames:
            for layer in frame.layers:
                layer.grid = layer.grid.resized(width, height)
        logger.info("Resized document %dx%d -> %dx%d", self.width, self.height, width, height)
        self.width = width
        self.height = height

    # ==========================================
    # 📦 DERIVED DATA
    # ==========================================
    def composite(self, frame_index: int = None) -> Grid:
        frame = self.active_frame if frame_index is None else self.frames[frame_index]
        return merge_visible_layers(frame.layers, self.width, self.height)

    def onion_skin(self):
        """Composite of the previous frame, or None on the first frame"""
        if self.current_frame_index > 0:
            return self.composite(self.current_frame_index - 1)
        return None

    def frame_bytes(self, frame_index: int = None) -> bytes:
        return codec.generate_bitmap_bytes(self.composite(frame_index))

    def animation_bytes(self):
        return [self.frame_bytes(i) for i in range(len(self.frames))]

    def single_frame_byte_count(self) -> int:
        return codec.expected_byte_count(self.width, self.height)

    def animation_byte_count(self) -> int:
        return self.single_frame_byte_count() * len(self.frames)

    def export_single_frame(self):
        """
        Returns:
            tuple: (C source, suggested file name)
        """
        frame = self.active_frame
        code = codec.format_bytes(self.frame_bytes(), frame.name, self.width, self.height)
        return code, codec.export_filename(frame.name)

    def export_animation(self):
        code = codec.format_animation_bytes(
            self.animation_bytes(),
            [frame.name for frame in self.frames],
            self.width,
            self.height,
        )
        return code, codec.ANIMATION_FILENAME

    def __repr__(self):
        return (f"Document({self.width}x{self.height}, frames={len(self.frames)}, "
                f"frame={self.current_frame_index}, layer={self.active_layer_index})")


def _check_dimensions(width, height):
    if width < 1 or height < 1:
        raise ValueError(f"Icon size must be at least 1x1, got {width}x{height}")
