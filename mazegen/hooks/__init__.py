"""
Hooks system for mazegen.

Hooks observe generation without changing it. The step observer used for
animated display is AnimationHook.

Basic Usage:
    from mazegen.hooks import AnimationHook

    create_maze(41, 21, MazeAlgorithm.GROWTH, hooks=AnimationHook(delay_ms=20))

Composition:
    from mazegen.hooks import LoggingHook, MultiHook

    combined = MultiHook(AnimationHook(delay_ms=20), LoggingHook(every=50))
"""

from .base import GenerationHooks
from .composition import MultiHook
from .visualization import CURSOR_HOME, ERASE_SCREEN, AnimationHook, LoggingHook

__all__ = ["CURSOR_HOME", "ERASE_SCREEN", "AnimationHook", "GenerationHooks", "LoggingHook", "MultiHook"]
