"""Configuration models for mazegen."""

from .maze_config import MazeConfig

__all__ = ["MazeConfig"]
