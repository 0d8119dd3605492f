class BaseTool:
    """
    A drawing tool plugged into the EditingSession.

    The session owns the gesture state; tools only say what happens to the
    document at each step of a press-drag-release.
    """

    tool_id = ""
    name = ""
    icon = ""
    cursor = "crosshair"

    # Value painted while dragging: 1 draws, 0 erases
    drawing_value = 1

    def begin(self, session, gesture):
        """
        Called on press. Return False for tools with no drag phase; the
        session then goes straight back to Idle.
        """
        return True

    def drag(self, session, gesture, x, y): pass
    def finish(self, session, gesture, x, y): pass

    def cancel(self, session, gesture): pass

    def __repr__(self):
        return f"{type(self).__name__}({self.tool_id!r})"
