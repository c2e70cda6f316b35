"""
Maze renderers.

- TextRenderer: framed Unicode box-drawing diagram
- RasterRenderer: framed grayscale image, saved as TGA
"""

from .raster_renderer import FLOOR_INTENSITY, WALL_INTENSITY, RasterRenderer
from .text_renderer import FLOOR_GLYPH, WALL_GLYPHS, TextRenderer

__all__ = ["FLOOR_GLYPH", "FLOOR_INTENSITY", "WALL_GLYPHS", "WALL_INTENSITY", "RasterRenderer", "TextRenderer"]
