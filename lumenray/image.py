"""
Image output stage.

Implements:
- Color quantization from float [0, 1] channels to 8-bit integers
- Plain-text PPM (P3) output
- Other raster formats through Pillow

This is the only place where float64 colors are narrowed to integers.
"""

from __future__ import annotations
import math
from pathlib import Path
from typing import TextIO, Tuple, Union
import numpy as np

from .vec3 import Color, NonFiniteError

# floor(255.99 * c) maps [0, 1] onto 0..255 with 1.0 landing on 255
QUANTIZE_SCALE = 255.99
MAX_CHANNEL = 255


def quantize(c: float) -> int:
    """Convert a float color channel to an integer in 0..255.

    Args:
        c: Channel value; clamped to [0, 1] before scaling

    Returns:
        floor(255.99 * c)
    """
    if not math.isfinite(c):
        raise NonFiniteError(f"Cannot quantize non-finite channel value {c}")
    c = min(max(c, 0.0), 1.0)
    return int(math.floor(QUANTIZE_SCALE * c))


def color_to_triple(color: Color) -> Tuple[int, int, int]:
    """Quantize a Color into an (r, g, b) byte triple."""
    return quantize(color.r), quantize(color.g), quantize(color.b)


def to_bytes(image: np.ndarray) -> np.ndarray:
    """Convert a float image to 8-bit.

    Args:
        image: Float image array of shape (height, width, 3)

    Returns:
        uint8 array of the same shape
    """
    image = np.asarray(image, dtype=np.float64)
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an image of shape (height, width, 3), got {image.shape}")
    if not np.all(np.isfinite(image)):
        raise NonFiniteError("Image contains non-finite channel values")
    clamped = np.clip(image, 0.0, 1.0)
    return np.floor(QUANTIZE_SCALE * clamped).astype(np.uint8)


def ppm_header(width: int, height: int) -> str:
    """Header of a plain PPM: format tag, dimensions, max channel value."""
    return f"P3\n{width} {height}\n{MAX_CHANNEL}\n"


def write_ppm(image: np.ndarray, stream: TextIO) -> None:
    """Write an image as plain-text PPM.

    Rows go top to bottom and pixels left to right, one "R G B" line each.

    Args:
        image: Float image array of shape (height, width, 3), row 0 on top
        stream: Text stream to write to
    """
    pixels = to_bytes(image)
    height, width = pixels.shape[:2]

    stream.write(ppm_header(width, height))
    for row in pixels:
        stream.write(''.join(f"{r} {g} {b}\n" for r, g, b in row.tolist()))


def save_image(image: np.ndarray, filename: Union[str, Path]) -> None:
    """Save image to file.

    Args:
        image: Float image array of shape (height, width, 3)
        filename: Output filename (extension determines format)
    """
    path = Path(filename)
    if path.suffix.lower() == '.ppm':
        with open(path, 'w', newline='\n') as f:
            write_ppm(image, f)
        return

    from PIL import Image as PILImage

    pil_image = PILImage.fromarray(to_bytes(image))
    pil_image.save(path)
