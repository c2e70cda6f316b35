"""
Base class and shared helpers for maze generators.

Every generator fills the grid with its starting state, then mutates it
in place. After each state-changing move the generator hands the partial
grid to the configured hooks (the step observer).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from mazegen.geometry import CellState, Direction, Position
from mazegen.utils.exceptions import ConfigurationError
from mazegen.utils.rng import random_below

if TYPE_CHECKING:
    import random
    from collections.abc import Iterator

    from mazegen.geometry import Grid
    from mazegen.hooks import GenerationHooks


class MazeAlgorithm(Enum):
    """Available maze generation algorithms."""

    GROWTH = "growth"
    BACKTRACKER = "backtracker"
    DIVISION = "division"

    @classmethod
    def from_code(cls, code: int) -> MazeAlgorithm:
        """
        Look up an algorithm by its numeric command-line code.

        0 = growth (Prim's-style), 1 = backtracker (depth-first),
        2 = recursive division.
        """
        try:
            return _ALGORITHM_CODES[code]
        except (KeyError, TypeError) as e:
            raise ConfigurationError("algorithm", code, valid_range=(0, len(_ALGORITHM_CODES) - 1)) from e

    @classmethod
    def parse(cls, value: MazeAlgorithm | str | int) -> MazeAlgorithm:
        """
        Accept enum members, names ("growth"), or numeric codes (0, "0").

        Raises:
            ConfigurationError: If a numeric code is unknown
            ValueError: If a name is unknown
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_code(value)
        if isinstance(value, str):
            name = value.strip().lower()
            if name.isdigit():
                return cls.from_code(int(name))
            return cls(name)
        return cls(value)

    @property
    def code(self) -> int:
        return list(_ALGORITHM_CODES.values()).index(self)


_ALGORITHM_CODES = {
    0: MazeAlgorithm.GROWTH,
    1: MazeAlgorithm.BACKTRACKER,
    2: MazeAlgorithm.DIVISION,
}

# Order of the working list the random direction permutation draws from
PERMUTATION_ORDER = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)


class DirectionPermutation:
    """
    Lazily drawn random permutation of the four cardinal directions.

    Each draw picks one of the k remaining directions uniformly, moves the
    last remaining direction into its slot, and decrements k. Draws happen
    only when the next direction is requested.
    """

    def __init__(self, rng: random.Random):
        self._rng = rng
        self._dirs = list(PERMUTATION_ORDER)
        self._remaining = len(self._dirs)

    def __iter__(self) -> Iterator[Direction]:
        return self

    def __next__(self) -> Direction:
        if self._remaining == 0:
            raise StopIteration
        i = random_below(self._rng, self._remaining)
        direction = self._dirs[i]
        self._dirs[i] = self._dirs[self._remaining - 1]
        self._remaining -= 1
        return direction


class MazeGenerator(ABC):
    """
    Abstract maze generation strategy.

    Subclasses set `fill_state` (the state the grid starts from) and
    implement `_carve`.
    """

    algorithm: ClassVar[MazeAlgorithm]
    fill_state: ClassVar[CellState] = CellState.WALL

    def __init__(self, hooks: GenerationHooks | None = None):
        """
        Args:
            hooks: Step observer invoked after each state-changing move
        """
        self.hooks = hooks

    def generate(self, grid: Grid, rng: random.Random) -> Grid:
        """
        Generate a maze in place.

        Args:
            grid: Grid to overwrite; its previous contents are discarded
            rng: Random source for every draw

        Returns:
            The same grid, now holding a maze
        """
        grid.fill(self.fill_state)
        if self.hooks is not None:
            self.hooks.on_generation_start(grid)
        self._carve(grid, rng)
        if self.hooks is not None:
            self.hooks.on_generation_end(grid)
        return grid

    @abstractmethod
    def _carve(self, grid: Grid, rng: random.Random) -> None:
        """Run the algorithm on a freshly filled grid."""

    def _notify(self, grid: Grid) -> None:
        if self.hooks is not None:
            self.hooks.on_step(grid)


def random_start_node(grid: Grid, rng: random.Random) -> Position:
    """
    Pick the starting node for node/edge generators.

    Draws x, then y, each as an even coordinate below the last node
    column/row, so the final node column and row are never chosen.
    """
    x = random_below(rng, grid.width // 2) * 2
    y = random_below(rng, grid.height // 2) * 2
    return Position(x, y)
