"""
Recursive division generator.

Starts from an open grid and repeatedly splits rooms with walls:
1. Pick an intersection point at odd offsets inside the region
2. Draw a full horizontal and a full vertical wall through it, splitting
   the region into four sub-rooms (NW, NE, SW, SE)
3. Exclude one of the four wall segments at random and punch a single
   doorway into each of the other three, at an odd offset from the
   intersection so it lands on a node-parity cell
4. Repeat for each sub-room, shrunk away from the new walls

Three doorways connect the four sub-rooms into a tree; the excluded side
stays solid so no cycle is formed. Regions one cell wide or tall are
left as they are.

Pending regions live on an explicit stack, pushed in reverse so they are
processed NW, NE, SW, SE exactly as a recursive implementation would.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mazegen.geometry import CellState, Direction, Position, Region
from mazegen.utils.logging import get_logger
from mazegen.utils.rng import random_below

from .base import MazeAlgorithm, MazeGenerator

if TYPE_CHECKING:
    import random

    from mazegen.geometry import Grid

logger = get_logger(__name__)

# Order in which doorways are punched into the dividing walls
DOORWAY_ORDER = (Direction.NORTH, Direction.WEST, Direction.SOUTH, Direction.EAST)


class DivisionGenerator(MazeGenerator):
    """Recursive division maze generator building walls in open space."""

    algorithm = MazeAlgorithm.DIVISION
    fill_state = CellState.EMPTY

    def _carve(self, grid: Grid, rng: random.Random) -> None:
        stack = [Region(0, 0, grid.width, grid.height)]
        divided = 0

        while stack:
            region = stack.pop()
            if region.is_thin:
                continue

            self._notify(grid)
            stack.extend(reversed(self.divide(grid, region, rng)))
            divided += 1

        logger.debug(f"Division split {divided} regions on {grid.width}x{grid.height} grid")

    def divide(self, grid: Grid, region: Region, rng: random.Random) -> list[Region]:
        """
        Split one region with two walls and three doorways.

        Args:
            grid: Grid being generated
            region: Region to split; must be at least 2x2
            rng: Random source

        Returns:
            The four sub-regions in NW, NE, SW, SE order
        """
        ox = 1 + random_below(rng, region.width // 2) * 2
        oy = 1 + random_below(rng, region.height // 2) * 2
        poi = Position(region.x + ox, region.y + oy)

        for x in range(region.x, region.x + region.width):
            grid.set(Position(x, poi.y), CellState.WALL)
        for y in range(region.y, region.y + region.height):
            grid.set(Position(poi.x, y), CellState.WALL)

        excluded = Direction(1 << random_below(rng, 4))
        segment_lengths = {
            Direction.NORTH: oy,
            Direction.WEST: ox,
            Direction.SOUTH: region.height - oy,
            Direction.EAST: region.width - ox,
        }

        for direction in DOORWAY_ORDER:
            if direction == excluded:
                continue
            offset = 1 + random_below(rng, segment_lengths[direction] // 2) * 2
            grid.set(poi.moved(direction, offset), CellState.EMPTY)

        east_length = segment_lengths[Direction.EAST]
        south_length = segment_lengths[Direction.SOUTH]
        return [
            Region(region.x, region.y, ox, oy),
            Region(poi.x + 1, region.y, east_length - 1, oy),
            Region(region.x, poi.y + 1, ox, south_length - 1),
            Region(poi.x + 1, poi.y + 1, east_length - 1, south_length - 1),
        ]
