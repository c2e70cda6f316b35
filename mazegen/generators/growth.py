"""
Randomized growth (Prim's-style) generator.

Grows one connected region outward from a random node:
1. Mark the start node open and reserve its unvisited two-away
   neighbours as FRONTIER
2. While the frontier is non-empty:
   - Remove a uniformly random frontier cell and mark it open
   - Scan the directions in random order and carve the edge towards the
     first two-away neighbour that is already open, then stop
   - Reserve this cell's unvisited two-away neighbours

Only one connection is made per absorbed cell, which keeps the result a
tree. The selection is biased: a random frontier cell is picked first,
then a random single direction, rather than a uniform choice over all
edges between the maze and the frontier.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mazegen.geometry import CellState, Direction, FrontierSet
from mazegen.utils.logging import get_logger

from .base import DirectionPermutation, MazeAlgorithm, MazeGenerator, random_start_node

if TYPE_CHECKING:
    import random

    from mazegen.geometry import Grid, Position

logger = get_logger(__name__)

# Order in which the unvisited neighbours of an absorbed cell are reserved
ENQUEUE_ORDER = (Direction.NORTH, Direction.EAST, Direction.WEST, Direction.SOUTH)


class GrowthGenerator(MazeGenerator):
    """Prim's-style maze generator carving out of solid wall."""

    algorithm = MazeAlgorithm.GROWTH
    fill_state = CellState.WALL

    def _carve(self, grid: Grid, rng: random.Random) -> None:
        frontier = FrontierSet()

        current = random_start_node(grid, rng)
        logger.debug(f"Growth starting at {tuple(current)} on {grid.width}x{grid.height} grid")
        grid.set(current, CellState.EMPTY)
        self._reserve_neighbors(grid, frontier, current)

        absorbed = 0
        while frontier:
            self._notify(grid)

            current = frontier.remove_random(rng)
            grid.set(current, CellState.EMPTY)
            absorbed += 1

            for direction in DirectionPermutation(rng):
                if grid.get(current.moved(direction, 2)) == CellState.EMPTY:
                    grid.set(current.moved(direction, 1), CellState.EMPTY)
                    break

            self._reserve_neighbors(grid, frontier, current)

        logger.debug(f"Growth absorbed {absorbed} cells, frontier peaked at {frontier.high_water_mark}")

    @staticmethod
    def _reserve_neighbors(grid: Grid, frontier: FrontierSet, position: Position) -> None:
        """Tag unvisited two-away neighbours as FRONTIER and queue them once."""
        for direction in ENQUEUE_ORDER:
            neighbor = position.moved(direction, 2)
            if grid.get(neighbor) == CellState.WALL:
                grid.set(neighbor, CellState.FRONTIER)
                frontier.add(neighbor)
