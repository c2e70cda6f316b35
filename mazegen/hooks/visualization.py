"""
Visualization hooks for maze generation.

AnimationHook redraws the partial maze in a terminal after every step;
LoggingHook records generation progress through the package logger.
"""

from __future__ import annotations

import sys
import time
from typing import TYPE_CHECKING, Any, TextIO

from mazegen.utils.exceptions import validate_parameter_value
from mazegen.utils.logging import get_logger
from mazegen.visualization.text_renderer import TextRenderer

from .base import GenerationHooks

if TYPE_CHECKING:
    from mazegen.geometry import Grid

# VT100 escape sequences
CURSOR_HOME = "\033[H"
ERASE_SCREEN = "\033[2J"

MAX_DELAY_MS = 1000


class AnimationHook(GenerationHooks):
    """
    Step-by-step terminal animation of maze generation.

    After every step the current grid is written to the stream, the
    cursor is moved back to the top so the next frame overwrites it, and
    generation is blocked for the configured delay. The delay always runs
    to completion. A zero delay disables the hook entirely.

    Example:
        animation = AnimationHook(delay_ms=30)
        create_maze(61, 21, MazeAlgorithm.DIVISION, hooks=animation)
    """

    def __init__(
        self,
        delay_ms: int = 0,
        stream: TextIO | None = None,
        renderer: TextRenderer | None = None,
        sleep=time.sleep,
    ):
        """
        Initialize animation hook.

        Args:
            delay_ms: Pause after each frame in milliseconds, 0..1000
            stream: Output channel; defaults to stdout at call time
            renderer: Text renderer used for frames
            sleep: Blocking sleep function taking seconds
        """
        validate_parameter_value(delay_ms, "delay_ms", int, (0, MAX_DELAY_MS), component="AnimationHook")
        self.delay_ms = delay_ms
        self._stream = stream
        self.renderer = renderer or TextRenderer()
        self._sleep = sleep
        self.frames_shown = 0

    @property
    def enabled(self) -> bool:
        return self.delay_ms > 0

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def on_generation_start(self, grid: Grid) -> None:
        if not self.enabled:
            return
        self.stream.write(ERASE_SCREEN + CURSOR_HOME)

    def on_step(self, grid: Grid) -> None:
        if not self.enabled:
            return
        self.renderer.write(grid, self.stream)
        self.stream.write(CURSOR_HOME)
        self.stream.flush()
        self.frames_shown += 1
        self._sleep(self.delay_ms / 1000)

    def on_generation_end(self, grid: Grid) -> None:
        if not self.enabled:
            return
        self.stream.write(CURSOR_HOME)
        self.stream.flush()


class LoggingHook(GenerationHooks):
    """
    Structured logging of generation progress.

    Example:
        progress = LoggingHook(every=500)
        create_maze(401, 401, MazeAlgorithm.GROWTH, hooks=progress)
    """

    def __init__(self, every: int = 100, log_level: str = "DEBUG"):
        """
        Initialize logging hook.

        Args:
            every: Log one record every N steps
            log_level: Level for progress records ("DEBUG", "INFO", ...)
        """
        validate_parameter_value(every, "every", int, (1, None), component="LoggingHook")
        self.every = every
        self.log_level = log_level
        self.logger = get_logger(__name__)
        self.step_count = 0
        self.log_entries: list[dict[str, Any]] = []

    def _log_entry(self, message: str, data: dict[str, Any] | None = None):
        entry = {"level": self.log_level, "message": message, "data": data or {}}
        self.log_entries.append(entry)
        log_func = getattr(self.logger, self.log_level.lower(), self.logger.info)
        log_func(message)

    def on_generation_start(self, grid: Grid) -> None:
        self.step_count = 0
        self._log_entry(
            f"Generation started on {grid.width}x{grid.height} grid",
            {"width": grid.width, "height": grid.height},
        )

    def on_step(self, grid: Grid) -> None:
        self.step_count += 1
        if self.step_count % self.every == 0:
            self._log_entry(f"Step {self.step_count}", {"step": self.step_count})

    def on_generation_end(self, grid: Grid) -> None:
        self._log_entry(f"Generation finished after {self.step_count} steps", {"steps": self.step_count})
