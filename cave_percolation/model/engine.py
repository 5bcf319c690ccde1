"""Run orchestration for cave percolation."""

import logging
from typing import Callable, Optional, TYPE_CHECKING

import numpy as np

from .grid import Grid
from .traversal import traverse
from .sampling import estimate_crossing_probability, sweep
from .state import SampleResult, SweepResult, VisualizationResult

if TYPE_CHECKING:
    from ..config import SimulationConfig

logger = logging.getLogger(__name__)


class PercolationEngine:
    """
    Dispatches the three execution modes.

    A: exhaustive traversal of a supplied map
    B: crossing probability estimate for one accessibility value
    C: estimate for every accessibility value in [0, 1]

    The engine owns the single random stream used by every sample it runs.
    """

    def __init__(self, config: "SimulationConfig"):
        self.config = config
        self.rng = np.random.default_rng(config.seed)

    def run_visualization(self, grid: Grid) -> VisualizationResult:
        """Explore every cell reachable from the entry row of a given map."""
        if grid.size != self.config.grid.size:
            logger.warning("map is %dx%d but configured size is %d; using the map size",
                           grid.size, grid.size, self.config.grid.size)
        result = traverse(grid, exhaustive=True)
        return VisualizationResult(
            found=result.found,
            undiscovered=grid.undiscovered_matrix(),
            discovery_order=result.discovery_order
        )

    def run_estimate(self, accessibility: Optional[float] = None) -> SampleResult:
        """Monte-Carlo estimate at the configured (or given) accessibility."""
        if accessibility is None:
            accessibility = self.config.sampling.accessibility
        return estimate_crossing_probability(
            self.config.grid.size,
            accessibility,
            self.config.sampling.samples,
            self.rng
        )

    def run_sweep(self,
                  progress: Optional[Callable[[SampleResult], None]] = None) -> SweepResult:
        """Estimate the percolation curve over the configured step."""
        logger.debug("sweep: size=%d samples=%d step=%s",
                     self.config.grid.size, self.config.sampling.samples,
                     self.config.sampling.step)
        return sweep(
            self.config.grid.size,
            self.config.sampling.samples,
            self.rng,
            step=self.config.sampling.step,
            progress=progress
        )
