import logging

from ..raster import flood_fill
from .base import BaseTool

logger = logging.getLogger(__name__)


class FillTool(BaseTool):
    tool_id = "fill"
    name = "Fill Bucket"
    icon = "🪣"
    cursor = "cell"

    def begin(self, session, gesture):
        x, y = gesture.start
        changed = flood_fill(session.document.active_grid, x, y, gesture.value)
        logger.debug("Fill at (%d, %d) changed %d pixels", x, y, changed)

        # === No drag phase: the fill is already applied === #
        return False
