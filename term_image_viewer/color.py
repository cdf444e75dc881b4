"""
Terminal Image Viewer - Colour Helpers
======================================
Alpha premultiplication and 24-bit to 256-colour reduction.
"""

from typing import Sequence, Tuple

import numpy as np

Rgb = Tuple[int, int, int]


def premultiply(pixel: Sequence[int], bg: Rgb) -> Rgb:
    """
    Composite an RGBA pixel against a background colour.

    Args:
        pixel: (r, g, b, a) byte values
        bg: Background colour the output will be shown on

    Returns:
        Opaque RGB tuple, each channel truncated to a byte
    """
    r, g, b, a = (int(c) for c in pixel[:4])
    if a == 255:
        return (r, g, b)

    alpha = a / 255.0
    return tuple(
        int((1.0 - alpha) * back + alpha * channel)
        for channel, back in zip((r, g, b), bg)
    )


def premultiply_array(pixels: np.ndarray, bg: Rgb) -> np.ndarray:
    """Vectorised premultiply of an (..., 4) RGBA array into (..., 3) uint8."""
    rgb = pixels[..., :3]
    alpha = pixels[..., 3:4]
    if np.all(alpha == 255):
        return rgb.astype(np.uint8)

    a = alpha.astype(np.float64) / 255.0
    back = np.asarray(bg, dtype=np.float64)
    mixed = (1.0 - a) * back + a * rgb.astype(np.float64)
    out = np.clip(mixed, 0, 255).astype(np.uint8)

    # Opaque pixels pass through untouched
    opaque = (alpha == 255)[..., 0]
    out[opaque] = rgb[opaque]
    return out


def cube_component(value: int) -> int:
    """Map one 0-255 channel onto the 0-5 axis of the ANSI colour cube."""
    return int(value) * 5 // 255


def rgb_to_ansi256(rgb: Rgb) -> int:
    """Convert RGB to an index in the 216-colour cube of the 256-colour palette."""
    r, g, b = (cube_component(c) for c in rgb)
    return 16 + 36 * r + 6 * g + b
