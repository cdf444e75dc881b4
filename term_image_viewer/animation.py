"""
Terminal Image Viewer - Animation Playback
==========================================
Render every frame up front, then cycle them in place until cancelled.
"""

import logging
import threading
import time
from typing import Iterable, List, Optional, Tuple

from PIL import Image

from .cells import Frame
from .config import RenderConfig
from .renderer import render_frames
from .terminal import TerminalWriter

logger = logging.getLogger(__name__)

# Upper bound on how long a cancellation can go unnoticed
DEFAULT_POLL_INTERVAL = 0.05


class AnimationDriver:
    """Play a materialised animation on a terminal writer."""

    def __init__(self, writer: TerminalWriter, cancel: threading.Event,
                 poll_interval: float = DEFAULT_POLL_INTERVAL):
        """
        Args:
            writer: Destination for frames and cursor control
            cancel: Shared flag; once set, playback stops at the next poll
            poll_interval: Longest single wait between cancellation checks
        """
        self.writer = writer
        self.cancel = cancel
        self.poll_interval = poll_interval
        self.frames_shown = 0

    @staticmethod
    def build(frames: Iterable[Tuple[Image.Image, float]],
              config: RenderConfig) -> List[Frame]:
        """Render all (image, delay) pairs before playback starts."""
        return render_frames(frames, config)

    def _sleep(self, delay: float) -> bool:
        """Wait for delay seconds in slices. Returns True if cancelled."""
        deadline = time.monotonic() + delay
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return self.cancel.is_set()
            if self.cancel.wait(min(self.poll_interval, remaining)):
                return True

    def _draw(self, frame: Frame) -> None:
        # Redraw in place without clearing
        self.writer.move_to_origin()
        self.writer.write_grid(frame.grid)
        self.writer.flush()
        self.frames_shown += 1

    def play(self, sequence: List[Frame], loops: Optional[int] = None) -> int:
        """
        Cycle through the frames until cancelled.

        Args:
            sequence: Frames to show, in order
            loops: Number of full cycles to play, None for no limit

        Returns:
            Number of completed cycles
        """
        if not sequence:
            return 0

        cycles = 0
        self.writer.clear()
        self.writer.hide_cursor()
        logger.debug("playing %d frames, loops=%s", len(sequence), loops)
        try:
            while loops is None or cycles < loops:
                for frame in sequence:
                    if self.cancel.is_set():
                        logger.debug("playback cancelled after %d frames", self.frames_shown)
                        return cycles
                    self._draw(frame)
                    if self._sleep(frame.delay):
                        logger.debug("playback cancelled after %d frames", self.frames_shown)
                        return cycles
                cycles += 1
            return cycles
        finally:
            self.writer.reset()
            self.writer.clear()
            self.writer.show_cursor()
            self.writer.flush()
