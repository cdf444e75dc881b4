"""
Terminal Image Viewer - Dithering
=================================
Bi-level dithering for the braille renderer. Every output pixel is 0 or 255.
"""

import logging

import numpy as np
from PIL import Image

from .constants import DitherMethod

logger = logging.getLogger(__name__)

BAYER_4X4 = np.array([
    [0, 8, 2, 10],
    [12, 4, 14, 6],
    [3, 11, 1, 9],
    [15, 7, 13, 5]
]) / 16.0 * 255


def _floyd_steinberg(gray: Image.Image) -> np.ndarray:
    # Pillow diffuses error natively when converting to mode '1'
    mono = gray.convert('1', dither=Image.Dither.FLOYDSTEINBERG)
    return np.where(np.array(mono, dtype=bool), 255, 0).astype(np.uint8)


def _atkinson(arr: np.ndarray) -> np.ndarray:
    h, w = arr.shape
    # one padding column on the left, two on the right, two rows below
    buf = np.zeros((h + 2, w + 3))
    buf[:h, 1:w + 1] = arr
    out = np.empty((h, w), dtype=np.uint8)

    for y in range(h):
        row = buf[y]
        shares = np.zeros(w + 3)
        for x in range(1, w + 1):
            level = 255.0 if row[x] > 127.5 else 0.0
            share = (row[x] - level) / 8
            row[x + 1] += share
            row[x + 2] += share
            shares[x] = share
            out[y, x - 1] = level
        buf[y + 1, :-1] += shares[1:]
        buf[y + 1] += shares
        buf[y + 1, 1:] += shares[:-1]
        buf[y + 2] += shares
    return out


def _ordered(arr: np.ndarray) -> np.ndarray:
    h, w = arr.shape
    thresholds = np.tile(BAYER_4X4, (h // 4 + 1, w // 4 + 1))[:h, :w]
    return np.where(arr > thresholds, 255, 0).astype(np.uint8)


def dither(image: Image.Image,
           method: DitherMethod = DitherMethod.FLOYD_STEINBERG) -> np.ndarray:
    """
    Convert an image to grayscale and dither it to pure black and white.

    Args:
        image: Image in any mode
        method: Dithering algorithm

    Returns:
        (h, w) uint8 array holding only 0 and 255
    """
    gray = image.convert('L')
    logger.debug("dithering %sx%s with %s", gray.width, gray.height, method.name)

    if method == DitherMethod.FLOYD_STEINBERG:
        return _floyd_steinberg(gray)
    elif method == DitherMethod.ATKINSON:
        return _atkinson(np.array(gray))
    elif method == DitherMethod.ORDERED:
        return _ordered(np.array(gray))
    else:
        raise ValueError(f"Unknown dither method: {method}")
