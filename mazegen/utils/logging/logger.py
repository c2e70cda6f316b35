"""
Logging infrastructure for mazegen.

Every mazegen logger gets its own console handler on stderr, so maze
diagrams printed on stdout are never interleaved with log records. An
optional log file receives the same records without colour escapes.
"""

from __future__ import annotations

import logging
import sys
import threading
from pathlib import Path
from typing import ClassVar

import colorlog

LOG_FORMAT = "%(asctime)s - %(name)-20s - %(levelname)-8s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


class MazeFormatter(logging.Formatter):
    """Formats records as one line, optionally coloured and tagged with file:line."""

    def __init__(self, use_colors: bool = False, include_location: bool = False):
        fmt = LOG_FORMAT + (" [%(filename)s:%(lineno)d]" if include_location else "")
        super().__init__(fmt, datefmt=DATE_FORMAT)
        self.use_colors = use_colors
        self.include_location = include_location
        self._colored = (
            colorlog.ColoredFormatter("%(log_color)s" + fmt, datefmt=DATE_FORMAT, log_colors=LEVEL_COLORS)
            if use_colors
            else None
        )

    def format(self, record):
        if self._colored is not None:
            return self._colored.format(record)
        return super().format(record)


def parse_level(level: str | int) -> int:
    """
    Resolve a level name ("info", "DEBUG") or number to a logging level.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


class MazeLogger:
    """
    Registry of mazegen loggers and their shared settings.

    `configure` rewires every logger handed out so far; loggers created
    later pick up the current settings. Cache lookups skip the lock once
    a logger exists.
    """

    _lock: ClassVar[threading.Lock] = threading.Lock()
    _loggers: ClassVar[dict[str, logging.Logger]] = {}
    _level: ClassVar[int] = logging.WARNING
    _log_file: ClassVar[Path | None] = None
    _use_colors: ClassVar[bool] = True
    _include_location: ClassVar[bool] = False

    @classmethod
    def configure(
        cls,
        level: str | int = "WARNING",
        log_file: str | Path | None = None,
        use_colors: bool = True,
        include_location: bool = False,
    ):
        """
        Apply logging settings to all mazegen loggers.

        Args:
            level: Level name or number
            log_file: Also append records to this file; parent directories are created
            use_colors: Colour console output by level
            include_location: Append [file:line] to every record
        """
        resolved = parse_level(level)
        path = Path(log_file) if log_file is not None else None
        if path is not None:
            path.parent.mkdir(parents=True, exist_ok=True)

        with cls._lock:
            cls._level = resolved
            cls._log_file = path
            cls._use_colors = use_colors
            cls._include_location = include_location
            for logger in cls._loggers.values():
                cls._attach(logger)

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Return the cached logger for `name`, creating it on first use."""
        logger = cls._loggers.get(name)
        if logger is not None:
            return logger

        with cls._lock:
            if name not in cls._loggers:
                logger = logging.getLogger(name)
                # Loggers configured elsewhere keep their handlers
                if not logger.handlers:
                    cls._attach(logger)
                cls._loggers[name] = logger
            return cls._loggers[name]

    @classmethod
    def _attach(cls, logger: logging.Logger) -> None:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(cls._level)
        logger.propagate = False
        for handler in cls._make_handlers():
            logger.addHandler(handler)

    @classmethod
    def _make_handlers(cls) -> list[logging.Handler]:
        handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
        handlers[0].setFormatter(MazeFormatter(cls._use_colors, cls._include_location))

        if cls._log_file is not None:
            file_handler = logging.FileHandler(cls._log_file)
            file_handler.setFormatter(MazeFormatter(False, cls._include_location))
            handlers.append(file_handler)

        for handler in handlers:
            handler.setLevel(cls._level)
        return handlers


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a mazegen logger.

    Args:
        name: Logger name; defaults to the calling module's __name__
    """
    if name is None:
        import inspect

        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        name = caller.f_globals.get("__name__", "mazegen") if caller is not None else "mazegen"

    return MazeLogger.get_logger(name)


def configure_logging(**kwargs):
    """
    Configure global logging settings.

    Keyword Args:
        level: Level name or number (default WARNING)
        log_file: Optional file receiving uncoloured records
        use_colors: Colour console output by level
        include_location: Append [file:line] to every record
    """
    MazeLogger.configure(**kwargs)
