"""
Terminal Image Viewer - Renderer Selection
==========================================
Resize an image for the configured renderer and turn it into cells.
"""

import logging
from typing import Iterable, List, Tuple

import numpy as np
from PIL import Image

from .ascii import render_ascii
from .block import render_block
from .braille import render_braille
from .cells import CellGrid, Frame
from .config import RenderConfig
from .constants import RendererKind
from .glyphs import GlyphTable
from .resize import resize_for_ascii, resize_to_cells

logger = logging.getLogger(__name__)


def prepare_image(image: Image.Image, config: RenderConfig) -> Image.Image:
    """Resize to the renderer's cell grid and convert to RGBA."""
    image = image.convert('RGBA')
    if config.renderer == RendererKind.ASCII:
        return resize_for_ascii(image, config.size)
    return resize_to_cells(image, config.size, config.footprint)


def render_image(image: Image.Image, config: RenderConfig) -> CellGrid:
    """
    Render a still image.

    Args:
        image: Decoded image in any mode
        config: Render settings

    Returns:
        Row-major grid of cells
    """
    resized = prepare_image(image, config)
    background = tuple(config.background_color)

    if config.renderer == RendererKind.BLOCK:
        table = GlyphTable.for_charset(config.charset)
        grid = render_block(np.array(resized), table, config.blend, background)
    elif config.renderer == RendererKind.BRAILLE:
        grid = render_braille(resized, background, config.dither_method)
    elif config.renderer == RendererKind.ASCII:
        grid = render_ascii(resized, background)
    else:
        raise ValueError(f"Unknown renderer: {config.renderer}")

    logger.debug("rendered %s image %s into %d rows",
                 config.renderer.name.lower(), image.size, len(grid))
    return grid


def render_frames(frames: Iterable[Tuple[Image.Image, float]],
                  config: RenderConfig) -> List[Frame]:
    """Render every (image, delay seconds) pair before anything is shown."""
    sequence = [Frame(render_image(image, config), delay) for image, delay in frames]
    logger.debug("built animation of %d frames", len(sequence))
    return sequence
