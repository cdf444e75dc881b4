"""
Terminal Image Viewer - ANSI Output
===================================
Serialize cell grids with ANSI escape codes.
"""

import sys
from typing import List, Optional, TextIO

from .cells import Cell, CellGrid
from .color import Rgb, rgb_to_ansi256


class TerminalWriter:
    """Write cells and cursor control sequences to a text stream."""

    RESET = "\033[0m"
    CLEAR = "\033[2J"
    HOME = "\033[H"
    HIDE_CURSOR = "\033[?25l"
    SHOW_CURSOR = "\033[?25h"

    def __init__(self, stream: Optional[TextIO] = None, truecolor: bool = False):
        self.stream = stream if stream is not None else sys.stdout
        self.truecolor = truecolor

    def color_code(self, rgb: Rgb, foreground: bool = True) -> str:
        """SGR sequence selecting rgb as foreground or background."""
        code = 38 if foreground else 48
        if self.truecolor:
            r, g, b = rgb
            return f"\033[{code};2;{r};{g};{b}m"
        return f"\033[{code};5;{rgb_to_ansi256(rgb)}m"

    def format_row(self, row: List[Cell]) -> str:
        """One row of cells, colour reset and line terminator."""
        parts = []
        prev_fg = prev_bg = None
        for cell in row:
            # Only add colour codes when they change
            fg = self.color_code(cell.fg, True)
            if fg != prev_fg:
                parts.append(fg)
                prev_fg = fg
            if cell.bg is not None:
                bg = self.color_code(cell.bg, False)
                if bg != prev_bg:
                    parts.append(bg)
                    prev_bg = bg
            parts.append(cell.glyph)

        parts.append(self.RESET)
        parts.append('\n')
        return ''.join(parts)

    def format_grid(self, grid: CellGrid) -> str:
        return ''.join(self.format_row(row) for row in grid)

    def write(self, text: str) -> None:
        self.stream.write(text)

    def write_grid(self, grid: CellGrid) -> None:
        self.write(self.format_grid(grid))

    def move_to_origin(self) -> None:
        self.write(self.HOME)

    def clear(self) -> None:
        self.write(self.CLEAR)

    def hide_cursor(self) -> None:
        self.write(self.HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(self.SHOW_CURSOR)

    def reset(self) -> None:
        self.write(self.RESET)

    def flush(self) -> None:
        self.stream.flush()
