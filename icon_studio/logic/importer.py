"""
Two-step import of pasted C arrays.

preview() parses and validates; commit() is only possible after a
preview succeeded. A failed or skipped preview never touches the document.
"""

import logging

from .codec import expected_byte_count, parse_bytes, parse_c_array
from .errors import DimensionMismatch, ImportNotReady

logger = logging.getLogger(__name__)


class ImportPreview:
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.reset()

    @property
    def expected(self) -> int:
        return expected_byte_count(self.width, self.height)

    @property
    def ready(self) -> bool:
        return self.grid is not None

    def reset(self):
        self.found = 0
        self.grid = None
        self.error = None

    def preview(self, text: str) -> bool:
        """
        Parse text against the current icon size.

        Returns:
            bool: True if a grid was produced and can be committed
        """
        values = parse_bytes(text)
        self.found = len(values)
        try:
            self.grid = parse_c_array(values, self.width, self.height)
            self.error = None
        except DimensionMismatch as e:
            self.grid = None
            self.error = str(e)
            logger.info("Import preview rejected: %s", self.error)
        return self.ready

    def status_text(self) -> str:
        return f"Bytes: {self.found} (Expected: {self.expected})"

    def commit(self, document):
        """
        Replace the active layer of document with the previewed grid.

        Raises:
            ImportNotReady: if there is no successfully previewed grid
        """
        if not self.ready:
            raise ImportNotReady(self.error or "Preview the array before importing.")
        document.replace_active_grid(self.grid)
        logger.info("Imported %d bytes into '%s'", self.found, document.active_layer.name)
        self.reset()
