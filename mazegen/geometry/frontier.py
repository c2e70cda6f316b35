"""
Frontier set for the growth algorithm.

A dense, growable array of positions. Removal swaps the chosen element
with the last one and shrinks the array, so both append and removal of
an arbitrary element are O(1). Element order is therefore not stable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mazegen.utils.exceptions import ResourceExhaustedError
from mazegen.utils.rng import random_below

if TYPE_CHECKING:
    import random
    from collections.abc import Iterator

    from .grid import Position


class FrontierSet:
    """Unordered collection of positions with O(1) random removal."""

    def __init__(self):
        self._items: list[Position] = []
        self.high_water_mark = 0

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._items)

    def add(self, position: Position) -> None:
        """Append a position; callers are responsible for deduplication."""
        try:
            self._items.append(position)
        except MemoryError as e:
            raise ResourceExhaustedError("frontier set", len(self._items) + 1, component="FrontierSet") from e
        self.high_water_mark = max(self.high_water_mark, len(self._items))

    def remove_at(self, index: int) -> Position:
        """Remove and return the element at `index`, moving the last element into its slot."""
        items = self._items
        removed = items[index]
        last = items.pop()
        if index < len(items):
            items[index] = last
        return removed

    def remove_random(self, rng: random.Random) -> Position:
        """Remove and return a uniformly chosen element."""
        return self.remove_at(random_below(rng, len(self._items)))
