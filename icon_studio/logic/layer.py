"""
Layer and Frame Classes for Icon Studio

Layer: a single named 1-bit drawing surface with:
- Grid buffer (the actual pixel data)
- Visibility flag

Frame: one animation step, an ordered list of layers.
List order is compositing order: the first visible layer holding a
pixel wins (see compositor.merge_visible_layers).

"""

from .grid import Grid


class Layer:
    """A single drawing layer"""

    def __init__(self, name: str, width: int, height: int, visible: bool = True):
        """
        Initialize a new blank layer

        Args:
            name: Layer name (e.g., "Base Layer", "Layer 2")
            width: Icon width in pixels
            height: Icon height in pixels
            visible: Whether the layer takes part in compositing
        """
        self.name = name
        self.visible = visible
        self.grid = Grid(width, height)

    @classmethod
    def from_grid(cls, name: str, grid: Grid, visible: bool = True) -> "Layer":
        layer = cls.__new__(cls)
        layer.name = name
        layer.visible = visible
        layer.grid = grid
        return layer

    def clone(self) -> "Layer":
        """Copy with its own grid (used when duplicating frames)"""
        return Layer.from_grid(self.name, self.grid.clone(), self.visible)

    def __repr__(self):
        """String representation for debugging"""
        return f"Layer('{self.name}', visible={self.visible}, lit={self.grid.count()})"


class Frame:
    """An ordered stack of layers shown as one animation step"""

    def __init__(self, name: str, layers=None):
        self.name = name
        self.layers = list(layers) if layers else []

    @classmethod
    def blank(cls, name: str, width: int, height: int) -> "Frame":
        return cls(name, [Layer("Base Layer", width, height)])

    def clone(self, name: str = None) -> "Frame":
        return Frame(name if name is not None else self.name,
                     [layer.clone() for layer in self.layers])

    def __len__(self):
        return len(self.layers)

    def __repr__(self):
        return f"Frame('{self.name}', layers={len(self.layers)})"
