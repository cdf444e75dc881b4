"""
Terminal Image Viewer - Frame Resizing
======================================
Fit images into a cell grid so that every cell is complete.
"""

import logging
from typing import Tuple

from PIL import Image

logger = logging.getLogger(__name__)

Size = Tuple[int, int]


def closest_multiple(value: int, base: int) -> int:
    """Nearest multiple of base to value, halves rounding up, at least base."""
    return max(base, base * ((2 * value + base) // (2 * base)))


def fit_dimensions(size: Size, box: Size) -> Size:
    """
    Largest size with the same aspect ratio that fits in box.

    The constraining side takes the box size exactly; the other side is
    scaled with floor division and never drops below 1.
    """
    width, height = size
    box_w, box_h = max(1, box[0]), max(1, box[1])

    # Compare box_w / width against box_h / height without floats
    if box_w * height <= box_h * width:
        return box_w, max(1, height * box_w // width)
    return max(1, width * box_h // height), box_h


def resize_to_cells(image: Image.Image, size: Size, footprint: Size) -> Image.Image:
    """
    Scale an image for a grid of at most size cells.

    Args:
        image: Source image
        size: Maximum (columns, rows) of the output grid
        footprint: Source pixels per cell (width, height)

    Returns:
        Image whose sides are exact multiples of the footprint
    """
    cols, rows = size
    cell_w, cell_h = footprint

    fitted = fit_dimensions(image.size, (cols * cell_w, rows * cell_h))
    snapped = (closest_multiple(fitted[0], cell_w), closest_multiple(fitted[1], cell_h))
    logger.debug("resize %s -> fit %s -> snapped %s", image.size, fitted, snapped)

    if snapped == image.size:
        return image
    return image.resize(snapped, Image.Resampling.NEAREST)


def resize_for_ascii(image: Image.Image, size: Size) -> Image.Image:
    """
    Fit into half the columns, then stretch horizontally by two.

    Terminal glyphs are about twice as tall as they are wide. A single column
    is not stretched.
    """
    cols, rows = size
    fitted = fit_dimensions(image.size, (max(1, cols // 2), rows))
    stretched = (min(cols, fitted[0] * 2), fitted[1])
    logger.debug("ascii resize %s -> %s", image.size, stretched)
    return image.resize(stretched, Image.Resampling.NEAREST)
