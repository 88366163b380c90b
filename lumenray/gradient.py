"""
Gradient driver - produces the test image scanline by scanline.

Pixel (i, j), with j counted from the bottom row, gets
r = i / (width - 1), g = j / (height - 1), b = blue.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Optional, TextIO
import numpy as np

from .vec3 import Color
from .image import write_ppm

logger = logging.getLogger(__name__)


@dataclass
class GradientSettings:
    """Configuration for the gradient image."""
    width: int = 256
    height: int = 256
    blue: float = 0.25

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Image dimensions must be positive, got {self.width}x{self.height}")
        if not 0.0 <= self.blue <= 1.0:
            raise ValueError(f"Blue channel must be in [0, 1], got {self.blue}")


def _ramp(index: int, size: int) -> float:
    # A single row or column has nowhere to ramp to
    if size == 1:
        return 0.0
    return index / (size - 1)


def pixel_color(i: int, j: int, settings: GradientSettings) -> Color:
    """Color of pixel column i, row j (row 0 is the bottom)."""
    return Color(_ramp(i, settings.width), _ramp(j, settings.height), settings.blue)


class GradientRenderer:
    """Renders the gradient into a float image."""

    def __init__(self, settings: Optional[GradientSettings] = None):
        """Create a renderer with the given settings.

        Args:
            settings: Image configuration (uses defaults if None)
        """
        self.settings = settings if settings else GradientSettings()
        self._progress_callback: Optional[Callable[[int], None]] = None

    def set_progress_callback(self, callback: Callable[[int], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Called before each scanline with the number of
                scanlines still to go after it (height - 1 down to 0)
        """
        self._progress_callback = callback

    def render(self) -> np.ndarray:
        """Render the gradient and return the image as a numpy array.

        Returns:
            Float image of shape (height, width, 3), row 0 on top
        """
        width = self.settings.width
        height = self.settings.height
        logger.debug("Rendering %dx%d gradient", width, height)

        image = np.zeros((height, width, 3), dtype=np.float64)

        # Scanlines go top to bottom, so j counts down
        for row, j in enumerate(range(height - 1, -1, -1)):
            if self._progress_callback:
                self._progress_callback(j)
            for i in range(width):
                image[row, i] = pixel_color(i, j, self.settings).to_array()

        logger.debug("Finished %d scanlines", height)
        return image

    def write(self, stream: TextIO) -> None:
        """Render and write the image to a stream as PPM."""
        write_ppm(self.render(), stream)
