"""Interactive input collection."""

import sys
from typing import Callable, Optional, TextIO, TypeVar

from .config import MODES, SimulationConfig, default_config
from .model.grid import Grid

T = TypeVar('T')


def bounded_value(message: str, cast: Callable[[str], T], lower: T, upper: T,
                  input_fn: Optional[Callable[[str], str]] = None) -> T:
    """Ask until the answer parses with cast and lies in [lower, upper]."""
    input_fn = input_fn or input
    while True:
        answer = input_fn(message).strip()
        try:
            value = cast(answer)
        except ValueError:
            continue
        if lower <= value <= upper:
            return value


def _mode(answer: str) -> str:
    answer = answer.upper()
    if answer not in MODES:
        raise ValueError(answer)
    return answer


def read_grid(size: int, stream: Optional[TextIO] = None) -> Grid:
    """Read size*size whitespace-separated 0/1 values."""
    stream = stream or sys.stdin
    return Grid.parse(stream.read(), size=size)


def collect_config(input_fn: Optional[Callable[[str], str]] = None) -> SimulationConfig:
    """Prompt for mode, size and the mode's parameters."""
    mode = bounded_value("Mode A, B or C ? ", _mode, 'A', 'C', input_fn)
    size = bounded_value("Cave size [>0] ? ", int, 1, sys.maxsize, input_fn)
    config = default_config(mode, size)

    if mode == 'B':
        config.sampling.accessibility = bounded_value(
            "Accessibility [0;1] ? ", float, 0.0, 1.0, input_fn)
    if mode in ('B', 'C'):
        config.sampling.samples = bounded_value(
            "Sample size [>0] ? ", int, 1, sys.maxsize, input_fn)
    return config
