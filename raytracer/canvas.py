"""Pixel buffer with plain PPM output.

This module implements a rectangular grid of colors backed by a numpy
array, and its serialization to the plain-text PPM (P3) image format.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

import numpy as np

from raytracer.color import Color
from raytracer.errors import IndexOutOfRangeError

logger = logging.getLogger(__name__)

# Maximum channel value written to the PPM header
PPM_MAX_VALUE = 255

# Plain PPM readers are not required to accept longer lines
PPM_MAX_LINE_LENGTH = 70


class Canvas:
    """Grid of ``width`` x ``height`` colors, black at creation."""

    def __init__(self, width: int, height: int):
        """Initialize canvas.

        Args:
            width: Number of pixel columns
            height: Number of pixel rows
        """
        if width < 1 or height < 1:
            raise ValueError(f"canvas dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)

    def _check_pixel(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexOutOfRangeError(
                f"pixel ({x}, {y}) out of bounds for canvas size ({self.width}, {self.height})"
            )

    def write_pixel(self, x: int, y: int, color: Color) -> Canvas:
        """Set the color at column ``x``, row ``y``."""
        self._check_pixel(x, y)
        self.pixels[y, x] = (color.red, color.green, color.blue)
        return self

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_pixel(x, y)
        red, green, blue = self.pixels[y, x]
        return Color(float(red), float(green), float(blue))

    def __getitem__(self, index: tuple) -> Color:
        x, y = index
        return self.pixel_at(x, y)

    def __setitem__(self, index: tuple, color: Color) -> None:
        x, y = index
        self.write_pixel(x, y, color)

    def to_ppm(self) -> str:
        """Render the canvas as a plain PPM document.

        Returns:
            PPM text: header, then one or more lines per pixel row, each at
            most 70 characters, terminated by a newline
        """
        header = f"P3\n{self.width} {self.height}\n{PPM_MAX_VALUE}\n"

        # Clamp to [0, 1], scale and round ties away from zero
        scaled = np.floor(np.clip(self.pixels, 0.0, 1.0) * PPM_MAX_VALUE + 0.5).astype(int)

        lines: List[str] = []
        for row in scaled:
            lines.extend(_wrap_tokens([str(value) for value in row.ravel()]))

        return header + "\n".join(lines) + "\n"

    def write_ppm(self, path: Union[str, Path]) -> Path:
        """Write the canvas to ``path`` as PPM, creating parent directories.

        Returns:
            Path that was written
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_ppm())

        logger.info(f"Wrote {self.width}x{self.height} canvas to {path}")
        return path


def _wrap_tokens(tokens: List[str], max_length: int = PPM_MAX_LINE_LENGTH) -> List[str]:
    """Join tokens with spaces, breaking lines before they exceed ``max_length``."""
    lines = []
    current = ""
    for token in tokens:
        if current and len(current) + 1 + len(token) > max_length:
            lines.append(current)
            current = token
        else:
            current = f"{current} {token}" if current else token
    if current:
        lines.append(current)
    return lines
