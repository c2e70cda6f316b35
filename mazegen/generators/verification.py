"""
Structural checks for generated mazes.

Floor cells are viewed as a 4-connected graph. A perfect maze is a tree
over that graph: every floor cell reachable from every other, and
exactly (n - 1) adjacencies for n floor cells.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from mazegen.geometry import Grid


def _floor_mask(grid: Grid) -> NDArray[np.bool_]:
    return ~grid.wall_mask()


def _count_passages(floor: NDArray[np.bool_]) -> int:
    """Number of adjacent floor pairs (horizontal plus vertical)."""
    horizontal = np.count_nonzero(floor[:, :-1] & floor[:, 1:])
    vertical = np.count_nonzero(floor[:-1, :] & floor[1:, :])
    return int(horizontal + vertical)


def _count_reachable(floor: NDArray[np.bool_]) -> int:
    """Breadth-first count of floor cells reachable from the first floor cell."""
    open_cells = np.argwhere(floor)
    if len(open_cells) == 0:
        return 0

    height, width = floor.shape
    start = tuple(open_cells[0])
    seen = np.zeros_like(floor)
    seen[start] = True
    queue = deque([start])
    visited = 1

    while queue:
        row, col = queue.popleft()
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            r, c = row + dr, col + dc
            if 0 <= r < height and 0 <= c < width and floor[r, c] and not seen[r, c]:
                seen[r, c] = True
                visited += 1
                queue.append((r, c))

    return visited


def _tree_report(floor: NDArray[np.bool_]) -> dict:
    open_cells = int(np.count_nonzero(floor))
    visited = _count_reachable(floor)
    passages = _count_passages(floor)
    expected = max(open_cells - 1, 0)
    return {
        "is_connected": open_cells > 0 and visited == open_cells,
        "is_no_loops": passages == expected,
        "open_cells": open_cells,
        "visited_cells": visited,
        "passage_count": passages,
        "expected_passages": expected,
    }


def verify_perfect_maze(grid: Grid) -> dict:
    """
    Verify a backtracker or growth maze is a spanning tree over its nodes.

    Args:
        grid: Generated maze grid

    Returns:
        Dictionary with verification results including:
        - is_perfect: Overall validity
        - is_connected: Every floor cell reachable
        - is_no_loops: Exactly (n-1) passages for n floor cells
        - all_nodes_open: Every even/even node was carved
        - open_cells, visited_cells, passage_count, expected_passages
    """
    floor = _floor_mask(grid)
    report = _tree_report(floor)
    report["all_nodes_open"] = bool(np.all(floor[::2, ::2]))
    report["is_perfect"] = report["is_connected"] and report["is_no_loops"] and report["all_nodes_open"]
    return report


def has_open_block(grid: Grid) -> bool:
    """True if any 2x2 block of cells is entirely floor."""
    floor = _floor_mask(grid)
    block = floor[:-1, :-1] & floor[1:, :-1] & floor[:-1, 1:] & floor[1:, 1:]
    return bool(np.any(block))


def verify_division_maze(grid: Grid) -> dict:
    """
    Verify a recursive division maze.

    Returns:
        Dictionary with the keys of verify_perfect_maze's tree checks plus
        has_open_block (a 2x2 all-floor block, meaning an extra doorway)
    """
    report = _tree_report(_floor_mask(grid))
    report["has_open_block"] = has_open_block(grid)
    report["is_perfect"] = report["is_connected"] and report["is_no_loops"] and not report["has_open_block"]
    return report
