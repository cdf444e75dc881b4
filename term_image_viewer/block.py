"""
Terminal Image Viewer - Block Renderer
======================================
Match 4x8 pixel cells against block-drawing glyph bitmaps.
"""

from typing import Tuple

import numpy as np

from .analysis import CellAnalysis, analyze_cell
from .cells import Cell, CellGrid
from .color import Rgb
from .glyphs import GRADIENT_GLYPHS, GlyphTable

CELL_WIDTH = 4
CELL_HEIGHT = 8
CELL_BITS = CELL_WIDTH * CELL_HEIGHT
CELL_MASK = (1 << CELL_BITS) - 1

# Matches worse than this many differing pixels fall back to a gradient
BLEND_THRESHOLD = 10


def hamming(a: int, b: int) -> int:
    """Number of differing bits between two cell bitmaps."""
    return bin((a ^ b) & CELL_MASK).count('1')


def match_glyph(bitmask: int, table: GlyphTable) -> Tuple[str, int, bool]:
    """
    Find the table glyph closest to a cell bitmap.

    Every entry is compared both as-is and complemented. Only a strictly
    smaller distance replaces the current best, so earlier entries win
    ties and the plain comparison beats the complement of the same entry.

    Args:
        bitmask: 32-bit cell bitmap
        table: Glyph table to search

    Returns:
        (glyph, distance, inverted)
    """
    best_distance = CELL_BITS + 1
    best_glyph = ' '
    inverted = False

    for reference, glyph in table:
        distance = hamming(reference, bitmask)
        if distance < best_distance:
            best_distance, best_glyph, inverted = distance, glyph, False

        distance = hamming(~reference & CELL_MASK, bitmask)
        if distance < best_distance:
            best_distance, best_glyph, inverted = distance, glyph, True

    return best_glyph, best_distance, inverted


def gradient_glyph(fg_count: int) -> str:
    """Shade glyph for a cell with fg_count foreground pixels."""
    return GRADIENT_GLYPHS[min(4, fg_count * 5 // CELL_BITS)]


def cell_from_analysis(analysis: CellAnalysis, table: GlyphTable, blend: bool) -> Cell:
    """Choose the glyph and colours for an analysed cell."""
    glyph, distance, inverted = match_glyph(analysis.bitmask, table)

    if blend and distance > BLEND_THRESHOLD:
        glyph = gradient_glyph(analysis.fg_count)
        inverted = False

    if inverted:
        return Cell(glyph, fg=analysis.bg, bg=analysis.fg)
    return Cell(glyph, fg=analysis.fg, bg=analysis.bg)


def render_block_cell(block: np.ndarray, table: GlyphTable,
                      blend: bool, background: Rgb) -> Cell:
    """Render one (8, 4, 4) RGBA block to a cell."""
    return cell_from_analysis(analyze_cell(block, background), table, blend)


def render_block(pixels: np.ndarray, table: GlyphTable,
                 blend: bool, background: Rgb) -> CellGrid:
    """
    Render an RGBA array whose sides are multiples of the 4x8 cell.

    Args:
        pixels: (h, w, 4) uint8 array
        table: Glyph table for the chosen charset
        blend: Fall back to shade glyphs for poor matches
        background: Colour used for premultiplication

    Returns:
        Row-major cell grid of (h // 8) rows by (w // 4) columns
    """
    height, width = pixels.shape[:2]
    grid = []
    for y in range(0, height, CELL_HEIGHT):
        row = []
        for x in range(0, width, CELL_WIDTH):
            block = pixels[y:y + CELL_HEIGHT, x:x + CELL_WIDTH]
            row.append(render_block_cell(block, table, blend, background))
        grid.append(row)
    return grid
