"""
Unit tests for FrontierSet.
"""

import pytest

from mazegen.geometry import FrontierSet, Position


@pytest.fixture
def frontier():
    f = FrontierSet()
    for x in range(4):
        f.add(Position(x * 2, 0))
    return f


class TestFrontierSet:
    """Test swap-remove semantics of the frontier."""

    def test_empty(self):
        f = FrontierSet()

        assert len(f) == 0
        assert not f
        assert f.high_water_mark == 0

    def test_add(self, frontier):
        assert len(frontier) == 4
        assert frontier
        assert list(frontier) == [Position(0, 0), Position(2, 0), Position(4, 0), Position(6, 0)]

    def test_remove_at_moves_last_into_slot(self, frontier):
        removed = frontier.remove_at(1)

        assert removed == Position(2, 0)
        assert list(frontier) == [Position(0, 0), Position(6, 0), Position(4, 0)]

    def test_remove_last_element(self, frontier):
        removed = frontier.remove_at(3)

        assert removed == Position(6, 0)
        assert list(frontier) == [Position(0, 0), Position(2, 0), Position(4, 0)]

    def test_remove_only_element(self):
        f = FrontierSet()
        f.add(Position(2, 2))

        assert f.remove_at(0) == Position(2, 2)
        assert not f

    def test_remove_random_uses_one_draw(self, frontier, scripted_rng):
        rng = scripted_rng([2])

        removed = frontier.remove_random(rng)

        assert removed == Position(4, 0)
        assert rng.requests == [4]
        assert list(frontier) == [Position(0, 0), Position(2, 0), Position(6, 0)]

    def test_high_water_mark(self, frontier):
        frontier.remove_at(0)
        frontier.remove_at(0)
        frontier.add(Position(8, 0))

        assert len(frontier) == 3
        assert frontier.high_water_mark == 4
