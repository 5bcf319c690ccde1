"""I/O package for cave percolation."""

from .csv_writer import CSVWriter
from .visualizer import Visualizer
from .reporter import Reporter, estimate_threshold, format_estimate, format_visualization

__all__ = [
    'CSVWriter',
    'Visualizer',
    'Reporter',
    'estimate_threshold',
    'format_estimate',
    'format_visualization',
]
