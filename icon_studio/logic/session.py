"""
Editing Session for Icon Studio

Turns a pointer gesture (press, drag, release) into grid edits.

State machine:
- Idle: nothing in flight
- Gesturing: one tool is mid-gesture, holding its start point, last
  point, drawing value, and optionally a preview grid and/or a snapshot

Only one gesture at a time: a press while Gesturing is ignored, and
the tool cannot be switched until the gesture ends.

"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import GestureInProgressError, UnknownToolError
from .grid import Grid
from .tools import build_tools

logger = logging.getLogger(__name__)


@dataclass
class Idle:
    pass


@dataclass
class Gesturing:
    tool_id: str
    start: Tuple[int, int]
    last: Tuple[int, int]
    value: int
    preview: Optional[Grid] = None
    snapshot: Optional[Grid] = None


IDLE = Idle()


class EditingSession:
    """Routes gestures on a Document through the active tool"""

    def __init__(self, document, tool_id: str = "pencil"):
        self.document = document
        self.tools = build_tools()
        if tool_id not in self.tools:
            raise UnknownToolError(tool_id)
        self.current_tool = tool_id
        self.state = IDLE

    # === State Queries === #
    @property
    def is_gesturing(self) -> bool:
        return isinstance(self.state, Gesturing)

    @property
    def preview(self) -> Optional[Grid]:
        """Uncommitted shape/move result for the renderer, or None"""
        if self.is_gesturing:
            return self.state.preview
        return None

    @property
    def tool(self):
        return self.tools[self.current_tool]

    def set_tool(self, tool_id: str):
        if tool_id not in self.tools:
            raise UnknownToolError(tool_id)
        if self.is_gesturing and tool_id != self.current_tool:
            raise GestureInProgressError(
                f"Finish the current {self.current_tool} gesture before switching tools")
        self.current_tool = tool_id

    # ==========================================
    # 🖱️ GESTURE EVENTS
    # ==========================================
    def begin_gesture(self, x: int, y: int) -> bool:
        """
        Pointer pressed at grid coordinate (x, y).

        Returns:
            bool: False if ignored because a gesture is already running
        """
        if self.is_gesturing:
            return False

        tool = self.tool
        gesture = Gesturing(tool.tool_id, (x, y), (x, y), tool.drawing_value)
        self.state = gesture
        if not tool.begin(self, gesture):
            self.state = IDLE
        return True

    def update_gesture(self, x: int, y: int) -> bool:
        if not self.is_gesturing:
            return False
        self.tool.drag(self, self.state, x, y)
        return True

    def end_gesture(self, x: int, y: int) -> bool:
        if not self.is_gesturing:
            return False
        gesture = self.state
        try:
            self.tool.finish(self, gesture, x, y)
        finally:
            self.state = IDLE
        return True

    def cancel_gesture(self) -> bool:
        """
        Abandon the gesture in flight. Moves are rolled back, previews are
        dropped, and pencil strokes already painted stay.
        """
        if not self.is_gesturing:
            return False
        gesture = self.state
        try:
            self.tool.cancel(self, gesture)
        finally:
            self.state = IDLE
        logger.debug("Cancelled %s gesture", gesture.tool_id)
        return True
