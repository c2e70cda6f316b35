"""
Maze generation algorithms.

All three generators share the Grid model and mutate it in place:
- BacktrackerGenerator: randomized depth-first search, carves from wall
- GrowthGenerator: randomized Prim's-style growth, carves from wall
- DivisionGenerator: recursive division, builds walls in open space

Examples
--------
>>> import random
>>> from mazegen.geometry import Grid
>>> from mazegen.generators import MazeAlgorithm, get_generator
>>> grid = Grid(21, 11)
>>> get_generator(MazeAlgorithm.GROWTH)().generate(grid, random.Random(7))
Grid(width=21, height=11)
"""

from __future__ import annotations

from .backtracker import BacktrackerGenerator
from .base import DirectionPermutation, MazeAlgorithm, MazeGenerator, random_start_node
from .division import DivisionGenerator
from .growth import GrowthGenerator
from .verification import has_open_block, verify_division_maze, verify_perfect_maze

GENERATORS: dict[MazeAlgorithm, type[MazeGenerator]] = {
    MazeAlgorithm.BACKTRACKER: BacktrackerGenerator,
    MazeAlgorithm.GROWTH: GrowthGenerator,
    MazeAlgorithm.DIVISION: DivisionGenerator,
}


def get_generator(algorithm: MazeAlgorithm | str | int) -> type[MazeGenerator]:
    """
    Look up the generator class for an algorithm.

    Raises:
        ConfigurationError: If the numeric code is unknown
        ValueError: If the algorithm name is unknown
    """
    return GENERATORS[MazeAlgorithm.parse(algorithm)]


__all__ = [
    "GENERATORS",
    "BacktrackerGenerator",
    "DirectionPermutation",
    "DivisionGenerator",
    "GrowthGenerator",
    "MazeAlgorithm",
    "MazeGenerator",
    "get_generator",
    "has_open_block",
    "random_start_node",
    "verify_division_maze",
    "verify_perfect_maze",
]
