from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mazegen")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .config import MazeConfig
from .generators import (
    BacktrackerGenerator,
    DivisionGenerator,
    GrowthGenerator,
    MazeAlgorithm,
    MazeGenerator,
    get_generator,
    verify_division_maze,
    verify_perfect_maze,
)
from .geometry import CellState, Direction, FrontierSet, Grid, Position, Region
from .hooks import AnimationHook, GenerationHooks, LoggingHook, MultiHook
from .maze import create_maze, create_maze_from_config, generate_maze, verify_maze
from .utils.exceptions import ConfigurationError, InvalidRenderStateError, MazeError, ResourceExhaustedError
from .utils.logging import configure_logging, get_logger
from .visualization import RasterRenderer, TextRenderer

__all__ = [
    "AnimationHook",
    "BacktrackerGenerator",
    "CellState",
    "ConfigurationError",
    "Direction",
    "DivisionGenerator",
    "FrontierSet",
    "GenerationHooks",
    "Grid",
    "GrowthGenerator",
    "InvalidRenderStateError",
    "LoggingHook",
    "MazeAlgorithm",
    "MazeConfig",
    "MazeError",
    "MazeGenerator",
    "MultiHook",
    "Position",
    "RasterRenderer",
    "Region",
    "ResourceExhaustedError",
    "TextRenderer",
    "__version__",
    "configure_logging",
    "create_maze",
    "create_maze_from_config",
    "generate_maze",
    "get_generator",
    "get_logger",
    "verify_division_maze",
    "verify_maze",
    "verify_perfect_maze",
]
