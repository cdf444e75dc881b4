"""
Terminal Image Viewer - Glyph Tables
====================================
Fixed glyph tables for the block and ASCII renderers.

Block bitmaps describe a 4x8 cell packed in raster order with the top-left
pixel in the most significant bit, so ``0x0000ffff`` is the lower half.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

from .constants import Charset


@dataclass(frozen=True)
class GlyphTable:
    """Ordered, immutable set of (reference bitmap, glyph) pairs."""
    name: str
    entries: Tuple[Tuple[int, str], ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return iter(self.entries)

    @classmethod
    def for_charset(cls, charset: Charset) -> 'GlyphTable':
        """Get the shared table for a block charset."""
        return _BLOCK_TABLES[charset]


# =============================================================================
# BLOCK BITMAPS
# =============================================================================

_HALFS = (
    (0x00000000, ' '),
    (0x0000ffff, '▄'),
)

_BLOCKS = (
    (0x00000000, ' '),
    (0x0000000f, '▁'),
    (0x000000ff, '▂'),
    (0x00000fff, '▃'),
    (0x0000ffff, '▄'),
    (0x000fffff, '▅'),
    (0x00ffffff, '▆'),
    (0x0fffffff, '▇'),
)

_NO_SLOPES = _BLOCKS + (
    (0xeeeeeeee, '▊'),
    (0xcccccccc, '▌'),
    (0x88888888, '▎'),
    (0x0000cccc, '▖'),
    (0x00003333, '▗'),
    (0xcccc0000, '▘'),
    (0xcccc3333, '▚'),
    (0x33330000, '▝'),
    (0x000ff000, '━'),
    (0x66666666, '┃'),
    (0x00077666, '┏'),
    (0x000ee666, '┓'),
    (0x66677000, '┗'),
    (0x666ee000, '┛'),
    (0x66677666, '┣'),
    (0x666ee666, '┫'),
    (0x000ff666, '┳'),
    (0x666ff000, '┻'),
    (0x666ff666, '╋'),
    (0x000cc000, '╸'),
    (0x00066000, '╹'),
    (0x00033000, '╺'),
    (0x00066000, '╻'),
    (0x06600660, '╏'),
    (0x000f0000, '─'),
    (0x0000f000, '─'),
    (0x44444444, '│'),
    (0x22222222, '│'),
    (0x000e0000, '╴'),
    (0x0000e000, '╴'),
    (0x44440000, '╵'),
    (0x22220000, '╵'),
    (0x00030000, '╶'),
    (0x00003000, '╶'),
    (0x00004444, '╵'),
    (0x00002222, '╵'),
    (0x44444444, '⎢'),
    (0x22222222, '⎥'),
    (0x0f000000, '⎺'),
    (0x00f00000, '⎻'),
    (0x00000f00, '⎼'),
    (0x000000f0, '⎽'),
    (0x00066000, '▪'),
)

# Triangles render double width in some fonts
_ALL = _NO_SLOPES + (
    (0x000137f0, '◢'),
    (0x0008cef0, '◣'),
    (0x000fec80, '◤'),
    (0x000f7310, '◥'),
)

_BLOCK_TABLES: Dict[Charset, GlyphTable] = {
    Charset.ALL: GlyphTable('all', _ALL),
    Charset.NO_SLOPES: GlyphTable('no_slopes', _NO_SLOPES),
    Charset.BLOCKS: GlyphTable('blocks', _BLOCKS),
    Charset.HALFS: GlyphTable('halfs', _HALFS),
}

# Used by the block renderer when no table entry fits well
GRADIENT_GLYPHS = (' ', '░', '▒', '▓', '█')


# =============================================================================
# ASCII FONT
# =============================================================================

# (glyph, rendered brightness). Order is historical and not sorted; the
# first entry wins ties, so reordering changes output.
ASCII_FONT: Tuple[Tuple[str, int], ...] = (
    ('`', 16), ('.', 22), ("'", 26), ('_', 32), ('-', 36), (',', 40),
    (':', 46), ('"', 52), ('^', 56), ('~', 68), (';', 70), ('|', 72),
    ('(', 76), (')', 76), ('/', 78), ('\\', 78), ('j', 80), ('*', 82),
    ('!', 84), ('r', 84), ('+', 88), ('[', 88), (']', 88), ('i', 88),
    ('<', 92), ('>', 92), ('=', 96), ('?', 100), ('l', 100), ('{', 100),
    ('}', 100), ('c', 102), ('v', 108), ('t', 112), ('z', 112), ('7', 114),
    ('L', 114), ('f', 114), ('x', 116), ('s', 118), ('Y', 122), ('J', 124),
    ('T', 124), ('1', 128), ('n', 128), ('u', 128), ('C', 130), ('y', 136),
    ('I', 138), ('F', 140), ('o', 140), ('2', 144), ('V', 148), ('e', 148),
    ('w', 148), ('%', 150), ('3', 150), ('h', 150), ('k', 150), ('a', 152),
    ('4', 156), ('Z', 156), ('5', 158), ('S', 158), ('X', 158), ('P', 166),
    ('$', 168), ('b', 170), ('d', 170), ('m', 170), ('p', 170), ('q', 170),
    ('A', 172), ('G', 172), ('E', 174), ('U', 174), ('&', 182), ('6', 182),
    ('K', 182), ('9', 184), ('g', 184), ('O', 186), ('H', 188), ('#', 190),
    ('Q', 190), ('D', 192), ('@', 194), ('8', 198), ('R', 198), ('0', 210),
    ('W', 212), ('N', 216), ('B', 218), ('M', 218),
)
