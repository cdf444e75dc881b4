"""
Terminal Image Viewer - ASCII Renderer
======================================
Map each pixel's brightness to the printable ASCII glyph of closest
rendered brightness. Output resolution equals the resized pixel grid.
"""

from functools import lru_cache
from typing import Sequence, Tuple

import numpy as np
from PIL import Image

from .cells import Cell, CellGrid
from .color import Rgb, premultiply_array
from .glyphs import ASCII_FONT


def best_glyph(luminance: int, font: Sequence[Tuple[str, int]] = ASCII_FONT) -> str:
    """
    Linear scan for the glyph whose brightness is nearest to luminance.

    Ties keep the earlier entry.
    """
    best_char = font[0][0]
    best_diff = None
    for char, target in font:
        diff = abs(target - int(luminance))
        if best_diff is None or diff < best_diff:
            best_diff = diff
            best_char = char
    return best_char


@lru_cache(maxsize=None)
def _glyph_lookup() -> Tuple[str, ...]:
    return tuple(best_glyph(value) for value in range(256))


def render_ascii(image: Image.Image, background: Rgb) -> CellGrid:
    """
    Render one cell per pixel.

    Args:
        image: Already resized and stretched image
        background: Colour used for premultiplication

    Returns:
        Grid with image.height rows of image.width cells
    """
    lookup = _glyph_lookup()
    luma = np.array(image.convert('L'))
    colours = premultiply_array(np.array(image.convert('RGBA')), background)

    grid = []
    for y in range(luma.shape[0]):
        row = []
        for x in range(luma.shape[1]):
            r, g, b = colours[y, x]
            row.append(Cell(lookup[luma[y, x]], fg=(int(r), int(g), int(b))))
        grid.append(row)
    return grid
