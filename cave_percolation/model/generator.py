"""Random cave generation for site percolation."""

import numpy as np

from .grid import Grid


def generate_grid(size: int, accessibility: float,
                  rng: np.random.Generator) -> Grid:
    """
    Fill a size x size grid with i.i.d. Bernoulli obstructions.

    Each cell is open with probability `accessibility` and obstructed with
    probability 1 - accessibility. The caller owns the random stream; it is
    consumed, never reseeded.
    """
    if size < 1:
        raise ValueError(f"Grid size must be at least 1, got {size}")
    if not 0.0 <= accessibility <= 1.0:
        raise ValueError(f"Accessibility must be in [0, 1], got {accessibility}")

    # random() is in [0, 1): p=0 blocks every cell, p=1 opens every cell
    draws = rng.random((size, size))
    return Grid(draws < (1.0 - accessibility))
