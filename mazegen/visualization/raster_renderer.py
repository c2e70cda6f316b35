"""
Grayscale raster renderer.

One pixel per cell plus a one-pixel frame on every side: wall and frame
pixels are black (0), floor pixels are white (255). Images are written
as uncompressed 8-bit grayscale TGA files through Pillow.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Literal

import numpy as np
from PIL import Image

from mazegen.utils.exceptions import ConfigurationError, ResourceExhaustedError
from mazegen.utils.logging import get_logger

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from mazegen.geometry import Grid

logger = get_logger(__name__)

WALL_INTENSITY = 0
FLOOR_INTENSITY = 255

Origin = Literal["upper_left", "lower_left"]

# Pillow's TGA writer flags top-left storage for positive orientation
_TGA_ORIENTATION = {"upper_left": 1, "lower_left": -1}


class RasterRenderer:
    """Renders a grid as a single-channel image of size (width+2, height+2)."""

    def render(self, grid: Grid) -> NDArray[np.uint8]:
        """
        Render the framed maze as pixel intensities.

        Returns:
            uint8 array of shape (height + 2, width + 2), row 0 at the top
        """
        shape = (grid.height + 2, grid.width + 2)
        try:
            pixels = np.full(shape, WALL_INTENSITY, dtype=np.uint8)
        except (MemoryError, ValueError) as e:
            raise ResourceExhaustedError("raster buffer", shape[0] * shape[1], component="RasterRenderer") from e

        pixels[1:-1, 1:-1] = np.where(grid.wall_mask(), WALL_INTENSITY, FLOOR_INTENSITY)
        return pixels

    def to_image(self, grid: Grid) -> Image.Image:
        """Render the framed maze as a Pillow "L" image."""
        return Image.fromarray(self.render(grid))

    def save(self, grid: Grid, path: str | Path, origin: Origin = "upper_left") -> Path:
        """
        Write the maze as an uncompressed grayscale TGA image.

        Args:
            grid: Maze to render
            path: Destination file
            origin: Pixel row order stored in the file

        Returns:
            Path of the written file
        """
        if origin not in _TGA_ORIENTATION:
            raise ConfigurationError("origin", origin, component="RasterRenderer")

        path = Path(path)
        image = self.to_image(grid)
        image.save(path, format="TGA", orientation=_TGA_ORIENTATION[origin])
        logger.info(f"Wrote {image.width}x{image.height} maze image to {path}")
        return path
