"""
Base hooks for observing maze generation.

Generators call the hooks synchronously on the generating thread; a hook
that blocks (for pacing an animation) halts generation until it returns.
"""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mazegen.geometry import Grid


class GenerationHooks(ABC):
    """
    Base class for generation observers.

    Override any method to observe generation. All methods are optional
    and receive the live grid, which must be treated as read-only.

    Example:
        class CountingHook(GenerationHooks):
            def __init__(self):
                self.steps = 0

            def on_step(self, grid):
                self.steps += 1

        create_maze(21, 21, MazeAlgorithm.GROWTH, hooks=CountingHook())
    """

    def on_generation_start(self, grid: Grid) -> None:
        """
        Called once after the grid is filled with the generator's starting state.

        Args:
            grid: Grid about to be carved or divided
        """

    def on_step(self, grid: Grid) -> None:
        """
        Called after every state-changing move.

        The backtracker calls it on entering each node, the growth
        generator before absorbing each frontier cell, and the division
        generator before splitting each region.

        Args:
            grid: Current partial maze
        """

    def on_generation_end(self, grid: Grid) -> None:
        """
        Called once when the maze is complete.

        Args:
            grid: Finished maze
        """
