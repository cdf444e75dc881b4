"""
Terminal Image Viewer - Configuration
=====================================
Render settings and the helpers that derive them from the environment.
"""

import os
import shutil
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .color import Rgb
from .constants import CELL_FOOTPRINTS, Charset, DitherMethod, RendererKind

# Used when stdout is not a terminal
DEFAULT_SIZE = (80, 25)

# Room left around the image when sizing to the terminal
TERMINAL_MARGIN = (4, 8)


@dataclass
class RenderConfig:
    """Configuration for turning images into cells."""

    # Renderer
    renderer: RendererKind = RendererKind.BLOCK
    charset: Charset = Charset.ALL           # Block renderer only
    blend: bool = True                       # Shade glyphs for poor matches
    dither_method: DitherMethod = DitherMethod.FLOYD_STEINBERG

    # Output
    size: Tuple[int, int] = DEFAULT_SIZE     # Maximum (columns, rows)
    background_color: Rgb = (0, 0, 0)        # Colour behind transparent pixels
    truecolor: bool = False                  # 24-bit escapes, else 256 colours
    animate: bool = True                     # Play animated sources

    @property
    def footprint(self) -> Tuple[int, int]:
        """Source pixels per cell for the selected renderer."""
        return CELL_FOOTPRINTS[self.renderer]

    def validate(self) -> 'RenderConfig':
        """Raise ValueError on settings the renderers cannot honour."""
        cols, rows = self.size
        if cols <= 0 or rows <= 0:
            raise ValueError(f"Grid size must be positive, got {cols}x{rows}")
        if len(self.background_color) != 3 or not all(
                0 <= c <= 255 for c in self.background_color):
            raise ValueError(f"Background colour must be three bytes, got {self.background_color}")
        return self


def parse_rgb_triplet(value: str) -> Optional[Rgb]:
    """Parse 'R,G,B' into a colour, or None if it is not three bytes."""
    parts = value.split(',')
    if len(parts) != 3:
        return None
    try:
        rgb = tuple(int(part.strip()) for part in parts)
    except ValueError:
        return None
    if not all(0 <= c <= 255 for c in rgb):
        return None
    return rgb


def detect_truecolor(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True when the terminal advertises 24-bit colour through COLORTERM."""
    environ = os.environ if environ is None else environ
    return environ.get('COLORTERM', '').lower() == 'truecolor'


def default_size(is_tty: bool) -> Tuple[int, int]:
    """Grid size derived from the terminal, or DEFAULT_SIZE when piped."""
    if not is_tty:
        return DEFAULT_SIZE

    columns, lines = shutil.get_terminal_size(DEFAULT_SIZE)
    return (max(1, columns - TERMINAL_MARGIN[0]), max(1, lines - TERMINAL_MARGIN[1]))
