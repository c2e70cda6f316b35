"""
Pytest configuration and shared fixtures for the mazegen test suite.
"""

import random

import pytest

from mazegen.generators import MazeAlgorithm
from mazegen.utils.logging import configure_logging

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


# =============================================================================
# Random Sources
# =============================================================================


class ScriptedRandom(random.Random):
    """
    Random source replaying a fixed list of randrange results.

    Each randrange(n) call pops the next value, which must lie in [0, n).
    The range sizes requested are recorded in `requests`. Once the script
    runs out a strict source fails; a non-strict one falls back to the
    seeded Mersenne Twister.
    """

    def __init__(self, values, strict=True):
        super().__init__(0)
        self.values = list(values)
        self.strict = strict
        self.requests = []

    def randrange(self, start, stop=None, step=1):
        n = start if stop is None else stop - start
        self.requests.append(n)
        if not self.values:
            if not self.strict:
                return super().randrange(start, stop, step)
            raise AssertionError(f"ScriptedRandom exhausted (randrange({n}) requested)")
        value = self.values.pop(0)
        assert 0 <= value < n, f"scripted value {value} outside [0, {n})"
        return value

    @property
    def exhausted(self):
        return not self.values


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the default WARNING configuration after each test."""
    yield
    configure_logging(level="WARNING")


@pytest.fixture
def scripted_rng():
    """Factory fixture: scripted_rng([1, 0, 3]) -> ScriptedRandom."""
    return ScriptedRandom


@pytest.fixture
def seeded_rng():
    """Deterministic random source."""
    return random.Random(12345)


ALL_ALGORITHMS = list(MazeAlgorithm)
TREE_ALGORITHMS = [MazeAlgorithm.BACKTRACKER, MazeAlgorithm.GROWTH]


@pytest.fixture(params=ALL_ALGORITHMS, ids=lambda a: a.value)
def algorithm(request):
    """Each maze algorithm in turn."""
    return request.param
