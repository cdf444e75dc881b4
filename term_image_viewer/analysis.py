"""
Terminal Image Viewer - Cell Analysis
=====================================
Split a block of pixels into a foreground and a background class.

The split happens along the colour channel with the widest range in the
block, at the middle of that range. The block renderer uses the resulting
class averages as cell colours.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .color import Rgb, premultiply_array

# Braille dot k (Unicode numbering, 1-based) is flattened block index
# BRAILLE_DOT_ORDER[k - 1] for a 4-row by 2-column block
BRAILLE_DOT_ORDER = (0, 2, 4, 1, 3, 5, 6, 7)


@dataclass(frozen=True)
class CellAnalysis:
    """Result of splitting one cell."""
    bitmask: int          # One bit per pixel, top-left pixel in the MSB
    fg: Rgb               # Average of pixels above the split
    bg: Rgb               # Average of pixels at or below the split
    fg_count: int         # Number of foreground pixels


def split_channel(rgb: np.ndarray) -> Tuple[int, int]:
    """
    Pick the channel with the widest value range and its midpoint.

    Args:
        rgb: (h, w, 3) premultiplied pixels

    Returns:
        (channel index, split value). Ties go to the lower channel index.
    """
    flat = rgb.reshape(-1, 3).astype(np.int32)
    lo = flat.min(axis=0)
    hi = flat.max(axis=0)
    ranges = hi - lo

    index = int(np.argmax(ranges))
    return index, int(lo[index] + ranges[index] // 2)


def average_rgb(pixels: np.ndarray) -> Rgb:
    """Floored mean of an (n, 3) pixel list, black when empty."""
    if len(pixels) == 0:
        return (0, 0, 0)
    total = pixels.astype(np.int64).sum(axis=0)
    return tuple(int(c) for c in total // len(pixels))


def pack_bits(mask: np.ndarray) -> int:
    """Pack a boolean array in raster order, first element in the MSB."""
    bits = 0
    for value in mask.reshape(-1):
        bits = (bits << 1) | int(bool(value))
    return bits


def analyze_cell(block: np.ndarray, bg: Rgb) -> CellAnalysis:
    """
    Classify every pixel of a cell and average each class.

    Args:
        block: (h, w, 4) RGBA pixels of one cell
        bg: Background colour used for premultiplication

    Returns:
        CellAnalysis with the raster-order bitmask and class colours
    """
    rgb = premultiply_array(block, bg)
    index, split_value = split_channel(rgb)

    foreground = rgb[..., index].astype(np.int32) > split_value
    flat = rgb.reshape(-1, 3)
    fg_mask = foreground.reshape(-1)

    return CellAnalysis(
        bitmask=pack_bits(foreground),
        fg=average_rgb(flat[fg_mask]),
        bg=average_rgb(flat[~fg_mask]),
        fg_count=int(fg_mask.sum()),
    )


def braille_bitmask(dots: np.ndarray) -> int:
    """
    Convert a (4, 2) boolean dot block to a Braille pattern offset.

    The k-th visited dot lands on bit k, which is the Unicode numbering:
    dots 1-3 run down the left column, 4-6 down the right, 7 and 8 are the
    bottom row.
    """
    flat = dots.reshape(-1)
    bits = 0
    for bit, index in enumerate(BRAILLE_DOT_ORDER):
        if flat[index]:
            bits |= 1 << bit
    return bits
