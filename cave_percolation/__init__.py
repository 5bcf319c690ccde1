"""Site percolation on square cave maps."""

from .config import SimulationConfig, load_config
from .model import (Grid, PercolationEngine, estimate_crossing_probability,
                    generate_grid, sweep, traverse)

__version__ = "0.1.0"

__all__ = [
    'SimulationConfig',
    'load_config',
    'Grid',
    'PercolationEngine',
    'estimate_crossing_probability',
    'generate_grid',
    'sweep',
    'traverse',
]
