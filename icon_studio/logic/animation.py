"""
Animation Player state.

Scheduling lives in the UI (a repeating QTimer); this class only decides,
for each tick timestamp, whether enough time has passed to advance.
"""

import logging

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 250


class AnimationPlayer:
    """Cycles through a Document's frames at a fixed interval"""

    def __init__(self, document, interval_ms: int = DEFAULT_INTERVAL_MS):
        self.document = document
        self.interval_ms = _valid_interval(interval_ms)
        self.is_playing = False
        self.frame_index = document.current_frame_index
        self._last_timestamp = None

    def play(self, now=None) -> bool:
        """
        Start from the document's current frame.

        Args:
            now: Optional start timestamp; otherwise the first tick records it

        Returns:
            bool: False if there is nothing to animate (fewer than 2 frames)
        """
        if len(self.document.frames) < 2:
            self.frame_index = self.document.current_frame_index
            return False
        if self.is_playing:
            return True
        self.is_playing = True
        self._last_timestamp = now
        self.frame_index = self.document.current_frame_index
        logger.debug("▶ Playing %d frames at %d ms", len(self.document.frames), self.interval_ms)
        return True

    def stop(self) -> bool:
        """Stop and fall back to showing the frame being edited"""
        was_playing = self.is_playing
        self.is_playing = False
        self._last_timestamp = None
        self.frame_index = self.document.current_frame_index
        return was_playing

    def toggle(self) -> bool:
        if self.is_playing:
            self.stop()
        else:
            self.play()
        return self.is_playing

    def tick(self, timestamp_ms: float) -> bool:
        """
        Called by the scheduler with a monotonic timestamp.

        Returns:
            bool: True if the displayed frame advanced
        """
        if not self.is_playing:
            return False
        if self._last_timestamp is None:
            self._last_timestamp = timestamp_ms
        elapsed = timestamp_ms - self._last_timestamp
        if elapsed > self.interval_ms:
            # Frames may have been removed while playing
            self.frame_index = (self.frame_index + 1) % len(self.document.frames)
            self._last_timestamp = timestamp_ms
            return True
        return False

    def set_interval(self, interval_ms):
        self.interval_ms = _valid_interval(interval_ms)
        if self.is_playing:
            self.stop()
            self.play()

    @property
    def displayed_frame(self):
        index = self.frame_index if self.is_playing else self.document.current_frame_index
        return self.document.frames[index % len(self.document.frames)]

    def displayed_layers(self):
        return self.displayed_frame.layers


def _valid_interval(value) -> int:
    try:
        value = int(value)
    except (TypeError, ValueError):
        return DEFAULT_INTERVAL_MS
    return value if value > 0 else DEFAULT_INTERVAL_MS
