"""
Terminal Image Viewer - Image Source
====================================
Decode a file or stdin into Pillow images and animation frames.
"""

import io
import logging
import sys
from typing import Iterator, Optional, Tuple

from PIL import Image, ImageSequence, UnidentifiedImageError

logger = logging.getLogger(__name__)

# Frames without a duration are shown this long (milliseconds)
DEFAULT_FRAME_DURATION = 100


class ImageSourceError(Exception):
    """The input could not be read or decoded."""


class ImageSource:
    """A path to an image file, or '-' for standard input."""

    def __init__(self, path: str):
        self.path = path
        self._image: Optional[Image.Image] = None

    def _open(self) -> Image.Image:
        if self._image is not None:
            return self._image
        try:
            if self.path == '-':
                data = sys.stdin.buffer.read()
                image = Image.open(io.BytesIO(data))
            else:
                image = Image.open(self.path)
            image.load()
        except (OSError, UnidentifiedImageError) as e:
            raise ImageSourceError(f"Error loading {self.path}: {e}") from e

        logger.debug("opened %s: %s %s", self.path, image.format, image.size)
        self._image = image
        return image

    def is_animated(self) -> bool:
        """True when the image holds more than one frame."""
        return getattr(self._open(), 'n_frames', 1) > 1

    def image(self) -> Image.Image:
        """First frame as RGBA."""
        image = self._open()
        image.seek(0)
        return image.convert('RGBA')

    def frames(self) -> Iterator[Tuple[Image.Image, float]]:
        """Yield (RGBA frame, delay in seconds) for every frame."""
        for frame in ImageSequence.Iterator(self._open()):
            duration = frame.info.get('duration') or DEFAULT_FRAME_DURATION
            yield frame.convert('RGBA'), duration / 1000.0
