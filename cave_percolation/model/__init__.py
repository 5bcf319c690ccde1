"""Model package for cave percolation."""

from .grid import Cell, Coord, Grid
from .generator import generate_grid
from .traversal import TraversalResult, traverse
from .state import SampleResult, SweepResult, VisualizationResult
from .sampling import estimate_crossing_probability, sweep, sweep_accessibilities
from .engine import PercolationEngine

__all__ = [
    'Cell',
    'Coord',
    'Grid',
    'generate_grid',
    'TraversalResult',
    'traverse',
    'SampleResult',
    'SweepResult',
    'VisualizationResult',
    'estimate_crossing_probability',
    'sweep',
    'sweep_accessibilities',
    'PercolationEngine',
]
