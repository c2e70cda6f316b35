"""
Grid model shared by every maze generator.

The grid is an embedded graph over odd-sized rectangles:
- Nodes live at positions where both coordinates are even
- Edge cells live at positions with exactly one odd coordinate
- Positions with both coordinates odd are never traversed by the
  node/edge algorithms (only recursive division treats the grid as
  continuous area)

Cells hold one of the CellState values. Reads outside the rectangle
return OUT_OF_BOUNDS, which every consumer treats as wall, so the grid
behaves as if it were surrounded by a permanent frame.
"""

from __future__ import annotations

from enum import IntEnum, IntFlag
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

from mazegen.utils.exceptions import ResourceExhaustedError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from numpy.typing import NDArray

MIN_DIMENSION = 5


class CellState(IntEnum):
    """State of a single grid cell."""

    EMPTY = 0
    WALL = 1
    FRONTIER = 2
    OUT_OF_BOUNDS = 3


class Direction(IntFlag):
    """Cardinal directions as bit flags; north decreases y."""

    NORTH = 1
    EAST = 2
    SOUTH = 4
    WEST = 8

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}


class Position(NamedTuple):
    """An (x, y) grid coordinate."""

    x: int
    y: int

    def moved(self, direction: Direction, step: int = 1) -> Position:
        """Return the position `step` cells away in `direction`."""
        dx, dy = direction.delta
        return Position(self.x + dx * step, self.y + dy * step)


class Region(NamedTuple):
    """Half-open rectangle [x, x+width) x [y, y+height) under subdivision."""

    x: int
    y: int
    width: int
    height: int

    @property
    def origin(self) -> Position:
        return Position(self.x, self.y)

    @property
    def is_thin(self) -> bool:
        """A region one cell wide or tall cannot be subdivided."""
        return self.width <= 1 or self.height <= 1


def normalize_dimension(n: int) -> int:
    """Clamp to the minimum size, then force odd by decrementing even values."""
    n = max(n, MIN_DIMENSION)
    if n % 2 == 0:
        n -= 1
    return n


class Grid:
    """
    Rectangular cell buffer for maze generation.

    Width and height are clamped to a minimum of 5 and forced odd at
    construction, so the effective size can differ from the request.

    Attributes:
        width: Effective (odd) number of columns
        height: Effective (odd) number of rows
        cells: Flat row-major uint8 buffer of length width*height
    """

    def __init__(self, width: int, height: int, fill: CellState = CellState.WALL):
        """
        Initialize grid.

        Args:
            width: Requested number of columns
            height: Requested number of rows
            fill: Initial state of every cell

        Raises:
            ResourceExhaustedError: If the cell buffer cannot be allocated
        """
        self.width = normalize_dimension(width)
        self.height = normalize_dimension(height)

        size = self.width * self.height
        try:
            self.cells: NDArray[np.uint8] = np.full(size, int(fill), dtype=np.uint8)
        except (MemoryError, ValueError) as e:
            # numpy raises ValueError for sizes beyond its addressable maximum
            raise ResourceExhaustedError("grid cell buffer", size, component="Grid") from e

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.cells, other.cells)
        )

    def in_bounds(self, x: int, y: int) -> bool:
        """Boundary predicate: True if (x, y) lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, position: Position) -> CellState:
        """Return the cell state, or OUT_OF_BOUNDS outside the grid."""
        x, y = position
        if not self.in_bounds(x, y):
            return CellState.OUT_OF_BOUNDS
        return CellState(int(self.cells[y * self.width + x]))

    def set(self, position: Position, state: CellState) -> None:
        """Set the cell state; writes outside the grid are ignored."""
        x, y = position
        if self.in_bounds(x, y):
            self.cells[y * self.width + x] = int(state)

    def is_wall(self, x: int, y: int) -> bool:
        """Wall predicate: True outside the grid and for every non-empty cell."""
        if not self.in_bounds(x, y):
            return True
        return bool(self.cells[y * self.width + x] != CellState.EMPTY)

    def fill(self, state: CellState) -> None:
        """Set every cell to `state`."""
        self.cells.fill(int(state))

    @property
    def node_count(self) -> int:
        """Number of node positions (both coordinates even)."""
        return ((self.width + 1) // 2) * ((self.height + 1) // 2)

    def nodes(self) -> Iterator[Position]:
        """Iterate node positions in row-major order."""
        for y in range(0, self.height, 2):
            for x in range(0, self.width, 2):
                yield Position(x, y)

    def count(self, state: CellState) -> int:
        """Number of cells holding `state`."""
        return int(np.count_nonzero(self.cells == int(state)))

    def wall_mask(self) -> NDArray[np.bool_]:
        """Boolean array of shape (height, width), True where is_wall holds."""
        return (self.cells != CellState.EMPTY).reshape(self.height, self.width)

    def to_numpy_array(self) -> NDArray[np.int32]:
        """
        Convert grid to numpy array representation.

        Returns:
            Array of shape (height, width) where 1 = wall, 0 = passage
        """
        return self.wall_mask().astype(np.int32)

    def copy(self) -> Grid:
        """Return an independent copy of this grid."""
        clone = Grid.__new__(Grid)
        clone.width = self.width
        clone.height = self.height
        clone.cells = self.cells.copy()
        return clone
