"""Stack-based exploration of a cave grid from entry row to exit row."""

import logging
from dataclasses import dataclass, field
from typing import List

from .grid import Coord, Grid

logger = logging.getLogger(__name__)

ENTRY_ROW = 0

# Push order. The stack is LIFO, so siblings are visited South, West, East, North.
NEIGHBOR_OFFSETS = [
    (-1, 0),  # north
    (0, 1),   # east
    (0, -1),  # west
    (1, 0),   # south
]


@dataclass
class TraversalResult:
    """Outcome of one traversal."""
    found: bool
    exits_reached: int
    discovery_order: List[Coord] = field(default_factory=list)

    @property
    def discovered_count(self) -> int:
        return len(self.discovery_order)


def traverse(grid: Grid, exhaustive: bool = False) -> TraversalResult:
    """
    Depth-first search from every open cell of the entry row.

    Cells are marked discovered on the canonical grid when pushed, so each
    cell enters the stack at most once. With exhaustive=False the search
    stops at the first exit-row cell it pops; with exhaustive=True it runs
    until the stack is empty, leaving every reachable cell discovered.
    """
    exit_row = grid.size - 1
    stack: List[Coord] = []
    order: List[Coord] = []

    def scout(row: int, col: int) -> None:
        if grid.is_accessible(row, col) and not grid.is_discovered(row, col):
            grid.discover(row, col)
            stack.append((row, col))
            order.append((row, col))

    # Cave entries
    for col in range(grid.size):
        scout(ENTRY_ROW, col)

    exits = 0
    while stack:
        row, col = stack.pop()
        if row == exit_row:
            exits += 1
            if not exhaustive:
                break
        for dr, dc in NEIGHBOR_OFFSETS:
            scout(row + dr, col + dc)

    logger.debug("traversal of %dx%d grid: %d cells discovered, %d exits",
                 grid.size, grid.size, len(order), exits)
    return TraversalResult(found=exits > 0, exits_reached=exits,
                           discovery_order=order)
