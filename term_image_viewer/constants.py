"""
Terminal Image Viewer - Constants
=================================
Enumerations shared by the renderers, the configuration and the CLI.
"""

from enum import Enum, auto


class RendererKind(Enum):
    """Which renderer turns pixels into cells."""
    BLOCK = auto()        # 4x8 block-drawing glyphs, fg + bg colour
    BRAILLE = auto()      # 2x4 Braille dots, fg colour only
    ASCII = auto()        # One glyph per pixel, fg colour only


class Charset(Enum):
    """Glyph table used by the block renderer."""
    ALL = auto()          # Blocks, box drawing and slopes
    NO_SLOPES = auto()    # Same as ALL without the wide triangle glyphs
    BLOCKS = auto()       # Fractional lower blocks only
    HALFS = auto()        # Lower half block only


class DitherMethod(Enum):
    """Bi-level dithering method for braille patterns."""
    FLOYD_STEINBERG = auto()
    ATKINSON = auto()
    ORDERED = auto()


# Source pixels covered by one rendered character cell (width, height)
CELL_FOOTPRINTS = {
    RendererKind.BLOCK: (4, 8),
    RendererKind.BRAILLE: (2, 4),
    RendererKind.ASCII: (1, 1),
}

# Names accepted on the command line
RENDERER_NAMES = {
    'block': RendererKind.BLOCK,
    'b': RendererKind.BLOCK,
    'dots': RendererKind.BRAILLE,
    'd': RendererKind.BRAILLE,
    'ascii': RendererKind.ASCII,
    'a': RendererKind.ASCII,
}

DITHER_NAMES = {
    'floyd_steinberg': DitherMethod.FLOYD_STEINBERG,
    'atkinson': DitherMethod.ATKINSON,
    'ordered': DitherMethod.ORDERED,
}

BRAILLE_BASE = 0x2800
