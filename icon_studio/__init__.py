"""
Icon Studio: 1-bit pixel-art and animation editor that exports C byte arrays.
"""

__version__ = "1.0.0"
