"""
Hook composition.

Utilities for combining several generation hooks into one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import GenerationHooks

if TYPE_CHECKING:
    from mazegen.geometry import Grid


class MultiHook(GenerationHooks):
    """
    Compose multiple hooks into one.

    Executes hooks in the order they were given.

    Example:
        combined = MultiHook(AnimationHook(delay_ms=20), LoggingHook(every=100))
        create_maze(41, 21, MazeAlgorithm.BACKTRACKER, hooks=combined)
    """

    def __init__(self, *hooks: GenerationHooks):
        """
        Args:
            *hooks: Variable number of hook instances
        """
        self.hooks = list(hooks)

    def add_hook(self, hook: GenerationHooks) -> None:
        """Add a hook to the composition."""
        self.hooks.append(hook)

    def remove_hook(self, hook: GenerationHooks) -> bool:
        """Remove a hook from the composition. Returns True if found and removed."""
        try:
            self.hooks.remove(hook)
            return True
        except ValueError:
            return False

    def on_generation_start(self, grid: Grid) -> None:
        for hook in self.hooks:
            hook.on_generation_start(grid)

    def on_step(self, grid: Grid) -> None:
        for hook in self.hooks:
            hook.on_step(grid)

    def on_generation_end(self, grid: Grid) -> None:
        for hook in self.hooks:
            hook.on_generation_end(grid)
