"""
Drawing tools, in toolbar order.
"""

from .base import BaseTool
from .brush import PencilTool
from .bucket import FillTool
from .move import MoveTool
from .shapes import ShapeTool, circle_tool, line_tool, rectangle_tool


def build_tools():
    """Fresh tool table keyed by tool id"""
    tools = [
        PencilTool(is_eraser=False),
        PencilTool(is_eraser=True),
        line_tool(),
        rectangle_tool(),
        circle_tool(),
        MoveTool(),
        FillTool(),
    ]
    return {tool.tool_id: tool for tool in tools}


__all__ = [
    'BaseTool', 'PencilTool', 'FillTool', 'MoveTool', 'ShapeTool',
    'build_tools',
]
