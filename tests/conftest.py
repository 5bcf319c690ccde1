import numpy as np
import pytest

from cave_percolation.model.grid import Grid


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def crossable_grid():
    return Grid.from_rows([
        [0, 0, 0],
        [1, 1, 0],
        [0, 0, 0],
    ])


@pytest.fixture
def blocked_grid():
    return Grid.from_rows([
        [0, 0, 0],
        [1, 1, 1],
        [0, 0, 0],
    ])
