"""Monte-Carlo sampling and accessibility sweeps."""

import logging
from typing import Callable, List, Optional

import numpy as np

from .generator import generate_grid
from .traversal import traverse
from .state import SampleResult, SweepResult

logger = logging.getLogger(__name__)

DEFAULT_STEP = 0.01


def estimate_crossing_probability(size: int, accessibility: float, samples: int,
                                  rng: np.random.Generator) -> SampleResult:
    """
    Estimate the probability that a random cave can be crossed.

    Each sample generates a fresh grid, runs an early-exit traversal and
    drops the grid, so no discovery state carries over between samples.
    """
    if samples < 1:
        raise ValueError(f"Sample count must be at least 1, got {samples}")

    successes = 0
    for _ in range(samples):
        grid = generate_grid(size, accessibility, rng)
        if traverse(grid, exhaustive=False).found:
            successes += 1

    result = SampleResult(accessibility=accessibility,
                          successes=successes, samples=samples)
    logger.debug("p=%.4f: %d/%d crossings (%.4f)",
                 accessibility, successes, samples, result.probability)
    return result


def sweep_accessibilities(step: float = DEFAULT_STEP) -> List[float]:
    """Values k*step for k = 0, 1, ... up to 1.0, computed from an integer index."""
    if not 0.0 < step <= 1.0:
        raise ValueError(f"Sweep step must be in (0, 1], got {step}")
    count = int(np.floor(1.0 / step + 1e-9))
    return [round(k * step, 10) for k in range(count + 1)]


def sweep(size: int, samples: int, rng: np.random.Generator,
          step: float = DEFAULT_STEP,
          progress: Optional[Callable[[SampleResult], None]] = None) -> SweepResult:
    """Run the estimator once per accessibility value, in increasing order."""
    points = []
    for accessibility in sweep_accessibilities(step):
        point = estimate_crossing_probability(size, accessibility, samples, rng)
        points.append(point)
        if progress is not None:
            progress(point)
    return SweepResult(size=size, samples=samples, points=points)
