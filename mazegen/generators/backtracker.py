"""
Randomized depth-first backtracker.

Carves a spanning tree over the node graph. Each visited node tries the
four directions in a random order; a neighbour two cells away that is
still WALL is unvisited, so the edge cell between them is carved and the
walk continues from the neighbour.

The walk uses an explicit stack of frames instead of recursion, so deep
mazes never exhaust the call stack. Frames keep their own lazily drawn
direction permutation, which reproduces the recursive visiting order and
draw sequence exactly.

Characteristics:
- Long, winding corridors with few dead ends
- One step notification per visited node
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mazegen.geometry import CellState
from mazegen.utils.logging import get_logger

from .base import DirectionPermutation, MazeAlgorithm, MazeGenerator, random_start_node

if TYPE_CHECKING:
    import random

    from mazegen.geometry import Grid, Position

logger = get_logger(__name__)


class BacktrackerGenerator(MazeGenerator):
    """Depth-first maze generator carving out of solid wall."""

    algorithm = MazeAlgorithm.BACKTRACKER
    fill_state = CellState.WALL

    def _carve(self, grid: Grid, rng: random.Random) -> None:
        start = random_start_node(grid, rng)
        logger.debug(f"Backtracker starting at {tuple(start)} on {grid.width}x{grid.height} grid")

        stack = [self._enter(grid, start, rng)]
        max_depth = 1

        while stack:
            position, directions = stack[-1]
            direction = next(directions, None)
            if direction is None:
                stack.pop()
                continue

            # Off-grid neighbours read OUT_OF_BOUNDS and are never WALL
            neighbor = position.moved(direction, 2)
            if grid.get(neighbor) == CellState.WALL:
                grid.set(position.moved(direction, 1), CellState.EMPTY)
                stack.append(self._enter(grid, neighbor, rng))
                max_depth = max(max_depth, len(stack))

        logger.debug(f"Backtracker finished, maximum stack depth {max_depth}")

    def _enter(self, grid: Grid, position: Position, rng: random.Random) -> tuple[Position, DirectionPermutation]:
        """Visit a node: notify, mark it open, and open its direction permutation."""
        self._notify(grid)
        grid.set(position, CellState.EMPTY)
        return position, DirectionPermutation(rng)
