"""Result dataclasses for cave percolation runs."""

from dataclasses import dataclass
from typing import List, Dict
import numpy as np


@dataclass(frozen=True)
class SampleResult:
    """Monte-Carlo estimate for one accessibility value."""
    accessibility: float
    successes: int
    samples: int

    @property
    def probability(self) -> float:
        return self.successes / self.samples

    def to_csv_row(self) -> Dict:
        return {
            "accessibility": self.accessibility,
            "successes": self.successes,
            "samples": self.samples,
            "probability": self.probability,
        }


@dataclass
class VisualizationResult:
    """Exhaustive traversal of a user-supplied map."""
    found: bool
    undiscovered: np.ndarray  # 1 = never discovered
    discovery_order: List[tuple]

    def to_rows(self) -> List[List[int]]:
        return [[int(v) for v in row] for row in self.undiscovered]


@dataclass
class SweepResult:
    """Ordered estimates across accessibility values."""
    size: int
    samples: int
    points: List[SampleResult]

    def accessibilities(self) -> np.ndarray:
        return np.array([p.accessibility for p in self.points])

    def probabilities(self) -> np.ndarray:
        return np.array([p.probability for p in self.points])

    def to_csv_rows(self) -> List[Dict]:
        """Convert to CSV-compatible format."""
        return [p.to_csv_row() for p in self.points]
