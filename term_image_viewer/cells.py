"""
Terminal Image Viewer - Cell Model
==================================
Rendered output: cells, grids of cells and animation frames.
"""

from dataclasses import dataclass
from typing import List, Optional

from .color import Rgb


@dataclass(frozen=True)
class Cell:
    """One terminal character position."""
    glyph: str
    fg: Rgb
    bg: Optional[Rgb] = None     # None lets the terminal background show


CellGrid = List[List[Cell]]


@dataclass(frozen=True)
class Frame:
    """A rendered frame and how long it stays on screen."""
    grid: CellGrid
    delay: float                 # Seconds
