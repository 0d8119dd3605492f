"""
Exceptions raised by the Icon Studio core.

Every failure is terminal for the action that caused it: the document is
left exactly as it was and the UI reports the message.
"""


class IconStudioError(Exception):
    """Base class for all editor errors"""


class GridError(IconStudioError, ValueError):
    """Malformed pixel data (ragged rows, values other than 0/1, bad size)"""


class DimensionMismatch(IconStudioError):
    """Decoded byte count does not match the document dimensions"""

    def __init__(self, found: int, expected: int):
        self.found = found
        self.expected = expected
        super().__init__(f"Byte count mismatch: Found {found}, expected {expected}.")


class InvalidLastLayer(IconStudioError):
    """A frame must keep at least one layer"""

    def __init__(self):
        super().__init__("Cannot delete the last layer of a frame.")


class InvalidLastFrame(IconStudioError):
    """A document must keep at least one frame"""

    def __init__(self):
        super().__init__("Cannot delete the last frame of the animation.")


class UnknownToolError(IconStudioError):
    def __init__(self, tool_id):
        self.tool_id = tool_id
        super().__init__(f"Unknown tool: {tool_id!r}")


class GestureInProgressError(IconStudioError):
    """Raised when the tool is switched before the current gesture ends"""


class ImportNotReady(IconStudioError):
    """Commit attempted without a successful preview"""
