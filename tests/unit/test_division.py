"""
Unit tests for the recursive division generator.

Tests single division steps against scripted draws, then the structure
of complete mazes: connected, acyclic, and free of 2x2 open blocks.
"""

import random

import pytest

import numpy as np

from mazegen.generators import DivisionGenerator, has_open_block, verify_division_maze
from mazegen.geometry import CellState, Direction, Grid, Position, Region
from mazegen.hooks import GenerationHooks

# 7x5 region: ox = 3, oy = 3, north side excluded, doors at offsets
# 1 (west), 1 (south) and 3 (east)
SCRIPT_7X5 = [1, 1, 0, 0, 0, 1]


class CountingHook(GenerationHooks):
    def __init__(self):
        self.steps = 0

    def on_step(self, grid):
        self.steps += 1


def open_grid(width, height):
    return Grid(width, height, fill=CellState.EMPTY)


class TestDivide:
    """Test a single division step."""

    def test_scripted_division(self, scripted_rng):
        grid = open_grid(7, 5)
        rng = scripted_rng(SCRIPT_7X5)

        subregions = DivisionGenerator().divide(grid, Region(0, 0, 7, 5), rng)

        assert rng.exhausted
        assert rng.requests == [3, 2, 4, 1, 1, 2]
        assert subregions == [
            Region(0, 0, 3, 3),
            Region(4, 0, 3, 3),
            Region(0, 4, 3, 1),
            Region(4, 4, 3, 1),
        ]

        # Intersection and the solid north segment
        assert grid.get(Position(3, 3)) == CellState.WALL
        for y in range(3):
            assert grid.get(Position(3, y)) == CellState.WALL

        # Doorways
        assert grid.get(Position(2, 3)) == CellState.EMPTY
        assert grid.get(Position(3, 4)) == CellState.EMPTY
        assert grid.get(Position(6, 3)) == CellState.EMPTY

        walls = grid.to_numpy_array()
        wall_line_cells = int(walls[3, :].size + walls[:, 3].size - 1)
        assert wall_line_cells - int(walls[3, :].sum() + walls[:, 3].sum() - walls[3, 3]) == 3
        assert grid.count(CellState.WALL) == wall_line_cells - 3

    @pytest.mark.parametrize(
        ("excluded_draw", "excluded"),
        [(0, Direction.NORTH), (1, Direction.EAST), (2, Direction.SOUTH), (3, Direction.WEST)],
    )
    def test_excluded_side_stays_solid(self, excluded_draw, excluded, scripted_rng):
        grid = open_grid(9, 9)
        rng = scripted_rng([1, 1, excluded_draw, 0, 0, 0])

        DivisionGenerator().divide(grid, Region(0, 0, 9, 9), rng)

        poi = Position(3, 3)
        segments = {
            Direction.NORTH: [Position(3, y) for y in range(0, 3)],
            Direction.SOUTH: [Position(3, y) for y in range(4, 9)],
            Direction.WEST: [Position(x, 3) for x in range(0, 3)],
            Direction.EAST: [Position(x, 3) for x in range(4, 9)],
        }
        assert grid.get(poi) == CellState.WALL

        for direction, cells in segments.items():
            doors = sum(1 for p in cells if grid.get(p) == CellState.EMPTY)
            assert doors == (0 if direction == excluded else 1)

    def test_doors_land_on_node_parity(self, seeded_rng):
        for _ in range(50):
            grid = open_grid(15, 11)
            DivisionGenerator().divide(grid, Region(0, 0, 15, 11), seeded_rng)
            walls = grid.to_numpy_array()

            # Each dividing line has at most two doorways
            row = int(np.flatnonzero(walls.sum(axis=1) >= 13)[0])
            col = int(np.flatnonzero(walls.sum(axis=0) >= 9)[0])

            assert row % 2 == 1
            assert col % 2 == 1
            assert all(x % 2 == 0 for x in np.flatnonzero(walls[row] == 0))
            assert all(y % 2 == 0 for y in np.flatnonzero(walls[:, col] == 0))

    def test_subregions_tile_region(self, seeded_rng):
        region = Region(0, 0, 21, 13)
        subregions = DivisionGenerator().divide(open_grid(21, 13), region, seeded_rng)

        area = sum(r.width * r.height for r in subregions)
        nw = subregions[0]
        # Everything except the two wall lines
        assert area == (region.width - 1) * (region.height - 1)
        assert nw.origin == region.origin


class TestDivisionGenerator:
    """Test complete recursive division mazes."""

    @pytest.mark.parametrize(("width", "height"), [(5, 5), (7, 5), (5, 9), (21, 11), (31, 31), (40, 16)])
    def test_maze_is_perfect(self, width, height, seeded_rng):
        grid = DivisionGenerator().generate(Grid(width, height), seeded_rng)

        verification = verify_division_maze(grid)

        assert verification["is_perfect"], f"Maze is not perfect: {verification}"
        assert not has_open_block(grid)

    @pytest.mark.parametrize("seed", range(10))
    def test_many_seeds(self, seed):
        grid = DivisionGenerator().generate(Grid(25, 17), random.Random(seed))
        assert verify_division_maze(grid)["is_perfect"]

    def test_first_division_survives(self, scripted_rng):
        grid = DivisionGenerator().generate(Grid(7, 5), scripted_rng(SCRIPT_7X5, strict=False))

        assert grid.get(Position(2, 3)) == CellState.EMPTY
        assert grid.get(Position(3, 4)) == CellState.EMPTY
        assert grid.get(Position(6, 3)) == CellState.EMPTY
        assert all(grid.get(Position(3, y)) == CellState.WALL for y in range(4))
        assert verify_division_maze(grid)["is_perfect"]

    def test_odd_odd_cells_are_wall(self, seeded_rng):
        walls = DivisionGenerator().generate(Grid(23, 15), seeded_rng).to_numpy_array()
        assert np.all(walls[1::2, 1::2] == 1)

    def test_reproducibility(self):
        a = DivisionGenerator().generate(Grid(25, 15), random.Random(9))
        b = DivisionGenerator().generate(Grid(25, 15), random.Random(9))

        assert a == b

    def test_deep_subdivision_without_recursion(self):
        grid = DivisionGenerator().generate(Grid(301, 301), random.Random(0))
        assert verify_division_maze(grid)["is_connected"]

    def test_one_step_per_divided_region(self, seeded_rng):
        hook = CountingHook()
        DivisionGenerator(hooks=hook).generate(Grid(5, 5), seeded_rng)

        # 5x5 always splits once at the top level
        assert hook.steps >= 1

    def test_steps_match_divide_calls(self, seeded_rng, monkeypatch):
        calls = []
        real_divide = DivisionGenerator.divide

        def counting_divide(self, grid, region, rng):
            calls.append(region)
            return real_divide(self, grid, region, rng)

        monkeypatch.setattr(DivisionGenerator, "divide", counting_divide)
        hook = CountingHook()
        DivisionGenerator(hooks=hook).generate(Grid(31, 21), seeded_rng)

        assert hook.steps == len(calls)
        assert calls[0] == Region(0, 0, 31, 21)
        assert all(not region.is_thin for region in calls)
