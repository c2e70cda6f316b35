"""
Unicode box-drawing renderer.

Each wall cell is drawn with the glyph whose arms point at its wall
neighbours. The neighbour mask has one bit per direction (north = 1,
west = 2, east = 4, south = 8); cells outside the grid count as wall.
The maze is framed by a one-cell border whose glyphs join the walls
that touch it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from mazegen.utils.exceptions import InvalidRenderStateError

if TYPE_CHECKING:
    from mazegen.geometry import Grid

MASK_NORTH = 1
MASK_WEST = 2
MASK_EAST = 4
MASK_SOUTH = 8

# Indexed by mask - 1; a wall cell with mask 0 has no glyph
WALL_GLYPHS = (
    "╹",  # N
    "╸",  # W
    "┛",  # N W
    "╺",  # E
    "┗",  # N E
    "━",  # W E
    "┻",  # N W E
    "╻",  # S
    "┃",  # N S
    "┓",  # W S
    "┫",  # N W S
    "┏",  # E S
    "┣",  # N E S
    "┳",  # W E S
    "╋",  # N W E S
)

FLOOR_GLYPH = " "


class TextRenderer:
    """Renders a grid as a framed Unicode line drawing, one text row per grid row."""

    def neighbor_mask(self, grid: Grid, x: int, y: int) -> int:
        """4-bit mask of which orthogonal neighbours of (x, y) are wall."""
        mask = 0
        if grid.is_wall(x, y - 1):
            mask |= MASK_NORTH
        if grid.is_wall(x - 1, y):
            mask |= MASK_WEST
        if grid.is_wall(x + 1, y):
            mask |= MASK_EAST
        if grid.is_wall(x, y + 1):
            mask |= MASK_SOUTH
        return mask

    def glyph(self, grid: Grid, x: int, y: int) -> str:
        """
        Glyph for a single cell.

        Raises:
            InvalidRenderStateError: If (x, y) is a wall with no wall neighbour
        """
        if not grid.is_wall(x, y):
            return FLOOR_GLYPH
        mask = self.neighbor_mask(grid, x, y)
        if mask == 0:
            raise InvalidRenderStateError(x, y, component="TextRenderer")
        return WALL_GLYPHS[mask - 1]

    def render_lines(self, grid: Grid) -> list[str]:
        """Render the framed maze as a list of rows without line terminators."""
        width, height = grid.width, grid.height

        lines = ["┏" + "".join("┳" if grid.is_wall(x, 0) else "━" for x in range(width)) + "┓"]

        for y in range(height):
            left = "┣" if grid.is_wall(0, y) else "┃"
            right = "┫" if grid.is_wall(width - 1, y) else "┃"
            row = "".join(self.glyph(grid, x, y) for x in range(width))
            lines.append(left + row + right)

        lines.append("┗" + "".join("┻" if grid.is_wall(x, height - 1) else "━" for x in range(width)) + "┛")
        return lines

    def render(self, grid: Grid) -> str:
        """Render the framed maze; every row, frame rows included, ends with a newline."""
        return "".join(line + "\n" for line in self.render_lines(grid))

    def write(self, grid: Grid, stream: TextIO) -> None:
        """Render the maze and write it to `stream`."""
        stream.write(self.render(grid))
