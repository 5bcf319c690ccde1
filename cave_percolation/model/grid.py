"""Grid model for cave percolation."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

Coord = Tuple[int, int]


@dataclass(frozen=True)
class Cell:
    """Read-only view of one grid position."""
    row: int
    col: int
    obstructed: bool  # True = impassable
    discovered: bool  # True once reached by a traversal

    @property
    def accessible(self) -> bool:
        return not self.obstructed


class Grid:
    """
    Square N x N cave map with two boolean layers.

    Coordinate convention: (row, col), row 0 is the cave entry and
    row N-1 the exit. The obstruction layer is frozen at construction;
    the discovery layer only ever flips False -> True.
    """

    def __init__(self, obstructed: np.ndarray):
        obstructed = np.array(obstructed, dtype=bool)
        if obstructed.ndim != 2 or obstructed.shape[0] != obstructed.shape[1]:
            raise ValueError(f"Grid must be square, got shape {obstructed.shape}")
        if obstructed.shape[0] < 1:
            raise ValueError("Grid size must be at least 1")

        self.size = obstructed.shape[0]

        # Boolean mask: True = obstructed (impassable)
        self.obstructed = obstructed
        self.obstructed.flags.writeable = False

        # Boolean mask: True = seen by the traversal
        self.discovered = np.zeros((self.size, self.size), dtype=bool)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """Build a grid from nested rows of 0/1 values (nonzero = obstructed)."""
        rows = [list(r) for r in rows]
        n = len(rows)
        for i, r in enumerate(rows):
            if len(r) != n:
                raise ValueError(f"Row {i} has {len(r)} cells, expected {n}")
        return cls(np.array(rows, dtype=int).reshape(n, n) != 0)

    @classmethod
    def parse(cls, text: str, size: Optional[int] = None) -> "Grid":
        """
        Parse a whitespace-separated 0/1 matrix.

        When size is given, exactly size*size values are read row-major and
        line breaks are irrelevant; otherwise each non-empty line is a row.
        """
        if size is None:
            rows = [line.split() for line in text.splitlines() if line.strip()]
            return cls.from_rows([[_parse_value(v) for v in r] for r in rows])

        if size < 1:
            raise ValueError("Grid size must be at least 1")
        values = [_parse_value(v) for v in text.split()]
        if len(values) != size * size:
            raise ValueError(f"Expected {size * size} values for a {size}x{size} "
                             f"grid, got {len(values)}")
        return cls(np.array(values, dtype=int).reshape(size, size) != 0)

    @classmethod
    def load(cls, path: Path) -> "Grid":
        """Load a grid file written by save() or by hand."""
        with open(path) as f:
            return cls.parse(f.read())

    def save(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            for row in self.obstructed:
                f.write(" ".join("1" if v else "0" for v in row) + "\n")

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def is_accessible(self, row: int, col: int) -> bool:
        """Check if cell is within bounds and not obstructed."""
        if not self.in_bounds(row, col):
            return False
        return not self.obstructed[row, col]

    def is_discovered(self, row: int, col: int) -> bool:
        return bool(self.discovered[row, col])

    def discover(self, row: int, col: int) -> None:
        """Mark a cell as discovered. Never reverts."""
        self.discovered[row, col] = True

    def cell(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is outside a {self.size}x{self.size} grid")
        return Cell(row, col,
                    bool(self.obstructed[row, col]),
                    bool(self.discovered[row, col]))

    def row_cells(self, row: int) -> List[Cell]:
        return [self.cell(row, col) for col in range(self.size)]

    def cells(self) -> Iterable[Cell]:
        """Iterate over all cells in row-major order."""
        for row in range(self.size):
            yield from self.row_cells(row)

    def undiscovered_matrix(self) -> np.ndarray:
        """0/1 matrix where 1 marks a cell never discovered."""
        return (~self.discovered).astype(np.int8)

    def reached_exit(self) -> bool:
        """True if any cell of the bottom row is discovered."""
        return bool(np.any(self.discovered[self.size - 1]))

    def __repr__(self) -> str:
        return (f"Grid(size={self.size}, open={int(np.count_nonzero(~self.obstructed))}, "
                f"discovered={int(np.count_nonzero(self.discovered))})")


def _parse_value(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"Invalid grid value {token!r}, expected an integer") from None
