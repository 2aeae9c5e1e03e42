import random

import pytest

from trace_puzzle.core.config import Settings
from tests.helpers import make_puzzle


@pytest.fixture
def two_cell_puzzle():
    """Smallest real puzzle: two neighbouring cells joined by one edge."""
    return make_puzzle(4, [(0, 0), (1, 0)])


@pytest.fixture
def u_puzzle():
    """U-shaped path (0,0) -> (0,1) -> (1,1) -> (2,1) -> (2,0)."""
    return make_puzzle(4, [(0, 0), (0, 1), (1, 1), (2, 1), (2, 0)])


@pytest.fixture
def test_settings():
    return Settings(
        MIN_GRID_SIZE=4,
        MAX_GRID_SIZE=12,
        DEFAULT_GRID_SIZE=5,
        MAX_ATTEMPTS=50,
        MAX_CONSECUTIVE_FAILURES=10,
        PROBE_MIN_CELLS=5,
        RANDOM_SEED=None,
    )


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def snake_puzzle():
    """Row-by-row snake through a full 3x3 block; every cell has visited neighbours."""
    return make_puzzle(4, [(0, 0), (1, 0), (2, 0), (2, 1), (1, 1), (0, 1), (0, 2), (1, 2), (2, 2)])
