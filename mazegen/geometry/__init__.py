"""
Grid geometry for maze generation.

Examples
--------
>>> from mazegen.geometry import Grid, CellState, Position
>>> grid = Grid(7, 5)
>>> grid.get(Position(-1, 0)) is CellState.OUT_OF_BOUNDS
True
"""

from .frontier import FrontierSet
from .grid import (
    MIN_DIMENSION,
    CellState,
    Direction,
    Grid,
    Position,
    Region,
    normalize_dimension,
)

__all__ = [
    "MIN_DIMENSION",
    "CellState",
    "Direction",
    "FrontierSet",
    "Grid",
    "Position",
    "Region",
    "normalize_dimension",
]
