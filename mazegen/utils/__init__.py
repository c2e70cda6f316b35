"""Shared utilities: logging and exceptions."""

from .exceptions import (
    ConfigurationError,
    InvalidRenderStateError,
    MazeError,
    ResourceExhaustedError,
    validate_parameter_value,
)
from .logging import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "InvalidRenderStateError",
    "MazeError",
    "ResourceExhaustedError",
    "configure_logging",
    "get_logger",
    "validate_parameter_value",
]
