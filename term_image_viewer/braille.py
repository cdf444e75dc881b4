"""
Terminal Image Viewer - Braille Renderer
========================================
Each 2x4 block of dithered pixels becomes one Braille pattern. A dot is
raised where the dithered pixel is dark.
"""

import numpy as np
from PIL import Image

from .analysis import average_rgb, braille_bitmask
from .cells import Cell, CellGrid
from .color import Rgb, premultiply_array
from .constants import BRAILLE_BASE, DitherMethod
from .dither import dither

CELL_WIDTH = 2
CELL_HEIGHT = 4


def braille_glyph(bitmask: int) -> str:
    """Braille pattern character for an 8-bit dot mask."""
    return chr(BRAILLE_BASE + (bitmask & 0xFF))


def render_braille_cell(block: np.ndarray, mono: np.ndarray, background: Rgb) -> Cell:
    """
    Render one cell.

    Args:
        block: (4, 2, 4) RGBA pixels, used for colour
        mono: (4, 2) dithered pixels, 0 or 255, used for the dots
        background: Colour used for premultiplication

    The colour is the average of the pixels under raised dots.
    """
    dots = mono == 0
    rgb = premultiply_array(block, background)
    return Cell(braille_glyph(braille_bitmask(dots)), fg=average_rgb(rgb[dots]))


def render_braille(image: Image.Image, background: Rgb,
                   method: DitherMethod = DitherMethod.FLOYD_STEINBERG) -> CellGrid:
    """Render an RGBA image whose sides are multiples of the 2x4 cell."""
    pixels = np.array(image.convert('RGBA'))
    mono = dither(image, method)

    height, width = pixels.shape[:2]
    grid = []
    for y in range(0, height, CELL_HEIGHT):
        row = []
        for x in range(0, width, CELL_WIDTH):
            row.append(render_braille_cell(
                pixels[y:y + CELL_HEIGHT, x:x + CELL_WIDTH],
                mono[y:y + CELL_HEIGHT, x:x + CELL_WIDTH],
                background,
            ))
        grid.append(row)
    return grid
