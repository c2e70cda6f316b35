"""
High-level maze construction.

create_maze allocates a grid, runs the chosen generator on it and
returns the finished grid. Rendering is left to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mazegen.generators import MazeAlgorithm, get_generator, verify_division_maze, verify_perfect_maze
from mazegen.geometry import Grid
from mazegen.hooks import AnimationHook, MultiHook
from mazegen.utils.exceptions import validate_parameter_value
from mazegen.utils.logging import get_logger
from mazegen.utils.rng import resolve_rng

if TYPE_CHECKING:
    import random

    from numpy.typing import NDArray

    from mazegen.config import MazeConfig
    from mazegen.hooks import GenerationHooks

logger = get_logger(__name__)


def create_maze(
    width: int,
    height: int,
    algorithm: MazeAlgorithm | str | int = MazeAlgorithm.BACKTRACKER,
    seed: int | None = None,
    rng: random.Random | None = None,
    delay_ms: int = 0,
    hooks: GenerationHooks | None = None,
) -> Grid:
    """
    Generate a maze.

    Args:
        width: Requested columns; clamped to at least 5 and forced odd
        height: Requested rows; clamped to at least 5 and forced odd
        algorithm: Generation algorithm, as enum member, name or numeric code
        seed: Seed for a fresh random source; None uses OS entropy
        rng: Explicit random source, takes precedence over `seed`
        delay_ms: When non-zero, animate generation on stdout with this
            pause per step
        hooks: Additional generation observers

    Returns:
        The finished maze grid

    Raises:
        ConfigurationError: If width, height, delay_ms or the algorithm code is invalid
        ValueError: If the algorithm name is unknown
        ResourceExhaustedError: If the grid cannot be allocated

    Example:
        >>> maze = create_maze(21, 11, "division", seed=3)
        >>> (maze.width, maze.height)
        (21, 11)
    """
    validate_parameter_value(width, "width", int, (0, None), component="create_maze")
    validate_parameter_value(height, "height", int, (0, None), component="create_maze")

    algorithm = MazeAlgorithm.parse(algorithm)
    generator_cls = get_generator(algorithm)

    if delay_ms:
        animation = AnimationHook(delay_ms=delay_ms)
        hooks = animation if hooks is None else MultiHook(animation, hooks)

    grid = Grid(width, height, fill=generator_cls.fill_state)
    logger.info(f"Generating {grid.width}x{grid.height} maze with {algorithm.value} (requested {width}x{height})")

    generator_cls(hooks=hooks).generate(grid, resolve_rng(seed, rng))
    return grid


def create_maze_from_config(config: MazeConfig, hooks: GenerationHooks | None = None) -> Grid:
    """Generate the maze described by a MazeConfig."""
    return create_maze(
        config.width,
        config.height,
        config.algorithm,
        seed=config.seed,
        delay_ms=config.delay_ms,
        hooks=hooks,
    )


def verify_maze(grid: Grid, algorithm: MazeAlgorithm | str | int) -> dict:
    """Run the structural checks that apply to mazes of `algorithm`."""
    if MazeAlgorithm.parse(algorithm) is MazeAlgorithm.DIVISION:
        return verify_division_maze(grid)
    return verify_perfect_maze(grid)


def generate_maze(
    width: int,
    height: int,
    algorithm: MazeAlgorithm | str | int = MazeAlgorithm.BACKTRACKER,
    seed: int | None = None,
) -> NDArray:
    """
    High-level function to generate and check a perfect maze.

    Args:
        width: Requested columns
        height: Requested rows
        algorithm: Algorithm name ('backtracker', 'growth' or 'division') or code (0, 1, 2)
        seed: Random seed for reproducibility

    Returns:
        Numpy array maze representation (1 = wall, 0 = passage)

    Example:
        >>> maze = generate_maze(20, 10, algorithm='growth', seed=42)
        >>> print(f"Maze shape: {maze.shape}")
        Maze shape: (9, 19)
    """
    grid = create_maze(width, height, algorithm, seed=seed)

    verification = verify_maze(grid, algorithm)
    if not verification["is_perfect"]:
        raise RuntimeError(f"Generated maze is not perfect: {verification}")

    return grid.to_numpy_array()
