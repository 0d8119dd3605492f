"""
Compositor: flattens a frame's visible layers into one grid.
"""

from .grid import Grid


def merge_visible_layers(layers, width: int = None, height: int = None) -> Grid:
    """
    Merge the visible layers of a frame.

    A pixel is 1 if the first visible layer (in list order) that has it set
    is found; otherwise 0. Hidden layers never contribute.

    Args:
        layers: Ordered sequence of Layer
        width, height: Composite size; taken from the first layer when omitted

    Returns:
        Grid: A new grid, the inputs are not touched
    """
    layers = list(layers)
    if width is None or height is None:
        if not layers:
            raise ValueError("Cannot infer composite size from an empty layer list")
        width, height = layers[0].grid.width, layers[0].grid.height

    composite = Grid(width, height)
    visible = [layer.grid for layer in layers if layer.visible]

    for y in range(height):
        for x in range(width):
            for grid in visible:
                if grid.get_pixel(x, y) == 1:
                    composite.set_pixel(x, y, 1)
                    break
    return composite
