"""Text output and summary report for cave percolation runs."""

from typing import Optional, TYPE_CHECKING
from pathlib import Path

if TYPE_CHECKING:
    from ..model.state import SampleResult, SweepResult, VisualizationResult


def format_visualization(result: "VisualizationResult") -> str:
    """Exit status line followed by the undiscovered matrix."""
    lines = ["Exit found" if result.found else "Exit NOT found"]
    for row in result.to_rows():
        lines.append(" ".join(str(v) for v in row))
    return "\n".join(lines)


def format_estimate(result: "SampleResult") -> str:
    return (f"Success for accessibility {result.accessibility:.4f} "
            f"is {result.probability:.4f}")


def estimate_threshold(result: "SweepResult", level: float = 0.5) -> Optional[float]:
    """First accessibility whose crossing probability reaches level."""
    for point in result.points:
        if point.probability >= level:
            return point.accessibility
    return None


class Reporter:
    """Generates summary statistics and formatted text report."""

    def __init__(self, config_path: Optional[str], seed: Optional[int]):
        self.config_path = config_path
        self.seed = seed

    def generate_summary(self, sweep: "SweepResult",
                         output_dir: Path,
                         csv_enabled: bool,
                         plot_enabled: bool) -> str:
        """Returns formatted text report for a sweep."""
        threshold = estimate_threshold(sweep)
        total_samples = sweep.samples * len(sweep.points)

        lines = [
            "",
            "=" * 80,
            "                    CAVE PERCOLATION SWEEP REPORT",
            "=" * 80,
            f"Configuration: {self.config_path or '(command line)'}",
            f"Random Seed: {self.seed if self.seed is not None else 'None (random)'}",
            "",
            "SWEEP METRICS",
            "-" * 40,
            f"Grid Size:             {sweep.size}x{sweep.size}",
            f"Accessibility Points:  {len(sweep.points)}",
            f"Samples per Point:     {sweep.samples}",
            f"Total Samples:         {total_samples}",
            ("Estimated Threshold:   "
             + (f"{threshold:.2f} (first p with crossing >= 0.5)"
                if threshold is not None else "not reached")),
            "",
            "OUTPUT FILES",
            "-" * 40,
        ]

        # Output file paths
        if csv_enabled:
            lines.append(f"CSV Log:    {output_dir / 'sweep.csv'}")
        else:
            lines.append("CSV Log:    (disabled)")

        if plot_enabled:
            lines.append(f"Curve:      {output_dir / 'percolation_curve.png'}")
        else:
            lines.append("Curve:      (disabled)")

        lines.append("=" * 80)

        return "\n".join(lines)
