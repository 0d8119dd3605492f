"""
Bitmap Codec for Icon Studio

Packed format (what firmware expects):
- Rows top to bottom, each row split into banks of 8 horizontal pixels
- One byte per bank, bit i (LSB first) = pixel (bank * 8 + i, row)
- Bits past the right edge of the icon are always 0
- Total size: height * ceil(width / 8) bytes

Also turns byte blocks into C source and scans pasted C source back into
byte values.
"""

import logging
import re

from .errors import DimensionMismatch
from .grid import Grid

logger = logging.getLogger(__name__)

BITS_PER_BANK = 8
VALUES_PER_LINE = 8

# Hex literal (0x + 1-2 digits) or bare decimal. Hex is tried first so
# "0x1F" is not read as "0" followed by junk.
_TOKEN_RE = re.compile(r"0x[0-9a-fA-F]{1,2}|[0-9]+")


def bank_count(width: int) -> int:
    """Number of bytes per row"""
    return (width + BITS_PER_BANK - 1) // BITS_PER_BANK


def expected_byte_count(width: int, height: int) -> int:
    return bank_count(width) * height


# ==========================================
# 📦 PACK / UNPACK
# ==========================================
def generate_bitmap_bytes(grid: Grid) -> bytes:
    """Pack a composite grid into the row-major, LSB-first byte format"""
    banks = bank_count(grid.width)
    out = bytearray()
    for y in range(grid.height):
        for bank in range(banks):
            start_x = bank * BITS_PER_BANK
            current = 0
            for bit in range(BITS_PER_BANK):
                x = start_x + bit
                if x < grid.width and grid.get_pixel(x, y):
                    current |= 1 << bit
            out.append(current)
    return bytes(out)


def parse_c_array(values, width: int, height: int) -> Grid:
    """
    Unpack a byte sequence into a new grid.

    Args:
        values: Sequence of ints in [0, 255] (bytes, list, ...)
        width, height: Target icon size

    Raises:
        DimensionMismatch: if len(values) != height * ceil(width / 8)
    """
    values = list(values)
    expected = expected_byte_count(width, height)
    if len(values) != expected:
        raise DimensionMismatch(len(values), expected)

    grid = Grid(width, height)
    banks = bank_count(width)
    index = 0
    for y in range(height):
        for bank in range(banks):
            data = values[index]
            index += 1
            start_x = bank * BITS_PER_BANK
            for bit in range(BITS_PER_BANK):
                x = start_x + bit
                if x < width and data & (1 << bit):
                    grid.set_pixel(x, y, 1)
    return grid


def parse_bytes(text: str):
    """
    Pull byte values out of free-form text.

    Deliberately permissive: braces, commas, comments and declarations are
    all skipped, and every hex or decimal token is kept as long as it fits
    in a byte. Tokens outside [0, 255] are dropped without error.
    """
    result = []
    dropped = 0
    for token in _TOKEN_RE.findall(text):
        value = int(token, 16) if token.startswith("0x") else int(token, 10)
        if 0 <= value <= 255:
            result.append(value)
        else:
            dropped += 1
    if dropped:
        logger.debug("Dropped %d out-of-range tokens while parsing import text", dropped)
    return result


# ==========================================
# 📝 C SOURCE FORMATTING
# ==========================================
def format_hex(value: int) -> str:
    return f"0x{value:02X}"


def _wrapped_values(data, indent: str) -> str:
    lines = []
    for i in range(0, len(data), VALUES_PER_LINE):
        lines.append(", ".join(format_hex(v) for v in data[i:i + VALUES_PER_LINE]))
    return (",\n" + indent).join(lines)


def format_bytes(data, name: str, width: int, height: int) -> str:
    """Single-frame `const uint8_t FRAME_BITMAP[n]` declaration"""
    data = list(data)
    output = f"// Frame: {name} ({width}x{height}). Total Bytes: {len(data)}\n"
    output += f"const uint8_t FRAME_BITMAP[{len(data)}] = {{\n    "
    output += _wrapped_values(data, "    ")
    output += "\n};"
    return output


def format_animation_bytes(blocks, names, width: int, height: int) -> str:
    """
    Multi-frame `const uint8_t ANIMATION_BITMAPS[frames][n]` declaration.

    Args:
        blocks: One byte sequence per frame, all the same length
        names: Frame names, same order as blocks
    """
    blocks = [list(block) for block in blocks]
    names = list(names)
    if len(blocks) != len(names):
        raise ValueError(f"Got {len(blocks)} frame blocks but {len(names)} names")

    frame_count = len(blocks)
    bytes_per_frame = len(blocks[0]) if blocks else 0

    output = f"// Animation Frames: {frame_count} frames of {width}x{height}.\n"
    output += f"// Total Data Size: {frame_count * bytes_per_frame} bytes.\n"
    output += f"const uint8_t ANIMATION_BITMAPS[{frame_count}][{bytes_per_frame}] = {{\n"
    for i, (block, name) in enumerate(zip(blocks, names)):
        output += f"    // Frame {i}: {name}\n    {{ "
        output += _wrapped_values(block, "      ")
        output += " }" + ("," if i < frame_count - 1 else "") + "\n"
    output += "};"
    return output


def export_filename(frame_name: str) -> str:
    """File name for a single-frame export, e.g. "Frame 1" -> "frame_1_bitmap.c" """
    return re.sub(r"\s", "_", frame_name.lower()) + "_bitmap.c"


ANIMATION_FILENAME = "animation_bitmaps.c"
