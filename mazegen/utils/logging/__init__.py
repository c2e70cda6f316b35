"""
Logging utilities for mazegen.

Usage:
    >>> from mazegen.utils.logging import get_logger, configure_logging
    >>> logger = get_logger(__name__)
    >>> configure_logging(level="DEBUG")
"""

from __future__ import annotations

from .logger import MazeFormatter, MazeLogger, configure_logging, get_logger, parse_level

__all__ = ["MazeFormatter", "MazeLogger", "configure_logging", "get_logger", "parse_level"]
