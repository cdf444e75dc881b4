"""
Terminal Image Viewer
=====================
Render images and animations as grids of terminal character cells.

Features:
- Block renderer matching 4x8 cells against box-drawing glyphs
- Braille renderer with bi-level dithering
- ASCII renderer mapping brightness to glyphs
- 24-bit or 256-colour ANSI output
- Cancellable animation playback
"""

from .analysis import CellAnalysis, analyze_cell, braille_bitmask
from .animation import AnimationDriver
from .ascii import best_glyph, render_ascii
from .block import match_glyph, render_block
from .braille import render_braille
from .cells import Cell, CellGrid, Frame
from .color import premultiply, rgb_to_ansi256
from .config import RenderConfig
from .constants import Charset, DitherMethod, RendererKind
from .glyphs import ASCII_FONT, GlyphTable
from .renderer import render_frames, render_image
from .resize import resize_for_ascii, resize_to_cells
from .source import ImageSource, ImageSourceError
from .terminal import TerminalWriter

__version__ = '0.1.0'

__all__ = [
    # Rendering
    'render_image',
    'render_frames',
    'render_block',
    'render_braille',
    'render_ascii',
    'RenderConfig',

    # Enums
    'RendererKind',
    'Charset',
    'DitherMethod',

    # Cells and tables
    'Cell',
    'CellGrid',
    'Frame',
    'GlyphTable',
    'ASCII_FONT',

    # Building blocks
    'CellAnalysis',
    'analyze_cell',
    'braille_bitmask',
    'match_glyph',
    'best_glyph',
    'premultiply',
    'rgb_to_ansi256',
    'resize_to_cells',
    'resize_for_ascii',

    # Playback and I/O
    'AnimationDriver',
    'TerminalWriter',
    'ImageSource',
    'ImageSourceError',
]
