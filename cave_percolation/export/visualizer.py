"""Visualization and export for cave percolation."""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgb
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING
from PIL import Image
import io

if TYPE_CHECKING:
    from ..model.grid import Grid
    from ..model.state import SweepResult


class Visualizer:
    """
    Generates visual outputs using matplotlib.

    Supports:
    - Percolation curve PNG
    - Explored map PNG
    - Animated GIF of the discovery order
    """

    # Color scheme
    COLORS = {
        'rock': '#2C3E50',        # Dark blue-gray
        'open': '#ECF0F1',        # Light gray
        'discovered': '#3498DB',  # Blue
        'exit': '#27AE60',        # Green
        'curve': '#E74C3C',       # Red
        'threshold': '#F39C12',   # Orange
    }

    def __init__(self):
        self.frames: List[Image.Image] = []

    def _grid_image(self, obstructed: np.ndarray,
                    discovered: np.ndarray) -> np.ndarray:
        """RGB array for a map with its discovery layer."""
        size = obstructed.shape[0]
        base = np.ones((size, size, 3))
        base[:, :] = to_rgb(self.COLORS['open'])
        base[obstructed] = to_rgb(self.COLORS['rock'])
        base[discovered] = to_rgb(self.COLORS['discovered'])

        # Highlight discovered exit cells
        exits = np.zeros_like(discovered)
        exits[size - 1] = discovered[size - 1]
        base[exits] = to_rgb(self.COLORS['exit'])
        return base

    def _create_grid_figure(self, obstructed: np.ndarray, discovered: np.ndarray,
                            title: str) -> plt.Figure:
        fig, ax = plt.subplots(figsize=(6, 6))
        size = obstructed.shape[0]
        ax.imshow(self._grid_image(obstructed, discovered), origin='upper',
                  aspect='equal', extent=[-0.5, size - 0.5, size - 0.5, -0.5])
        ax.set_title(title)
        ax.set_xlabel('Column')
        ax.set_ylabel('Row')

        legend_elements = [
            plt.Line2D([0], [0], marker='s', color='w', label='Obstructed',
                       markerfacecolor=self.COLORS['rock'], markersize=8),
            plt.Line2D([0], [0], marker='s', color='w', label='Discovered',
                       markerfacecolor=self.COLORS['discovered'], markersize=8),
            plt.Line2D([0], [0], marker='s', color='w', label='Exit reached',
                       markerfacecolor=self.COLORS['exit'], markersize=8),
        ]
        ax.legend(handles=legend_elements, loc='upper right', fontsize=8,
                  bbox_to_anchor=(1.0, -0.08), ncol=3)

        plt.tight_layout()
        return fig

    def save_grid(self, grid: "Grid", output_path: Path) -> None:
        """Save PNG of a map after traversal."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        status = 'Exit found' if grid.reached_exit() else 'Exit NOT found'
        fig = self._create_grid_figure(grid.obstructed, grid.discovered,
                                       f'{grid.size}x{grid.size} cave | {status}')
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

    def save_curve(self, result: "SweepResult", output_path: Path,
                   threshold: Optional[float] = None) -> None:
        """Save PNG of crossing probability against accessibility."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        fig, ax = plt.subplots(figsize=(8, 5))
        ax.plot(result.accessibilities(), result.probabilities(), 'o-',
                color=self.COLORS['curve'], markersize=3,
                label=f'N = {result.size}, {result.samples} samples')
        if threshold is not None:
            ax.axvline(threshold, color=self.COLORS['threshold'], linestyle='--',
                       label=f'threshold ~ {threshold:.2f}')

        ax.set_xlabel('Accessibility probability p')
        ax.set_ylabel('Crossing probability')
        ax.set_title('Empirical percolation curve')
        ax.set_xlim(0.0, 1.0)
        ax.set_ylim(-0.02, 1.02)
        ax.grid(True, linestyle='--', alpha=0.6)
        ax.legend(loc='upper left')

        plt.tight_layout()
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

    def buffer_traversal(self, grid: "Grid", order: Sequence[Tuple[int, int]],
                         frames: int = 40) -> None:
        """Store frames replaying the discovery order for GIF generation."""
        total = len(order)
        counts = sorted(set(np.linspace(0, total, num=min(frames, total + 1),
                                        dtype=int).tolist()))
        for count in counts:
            discovered = np.zeros_like(grid.discovered)
            for row, col in order[:count]:
                discovered[row, col] = True
            fig = self._create_grid_figure(grid.obstructed, discovered,
                                           f'Discovered {count} / {total} cells')

            # Convert to PIL Image
            buf = io.BytesIO()
            fig.savefig(buf, format='png', dpi=80)
            buf.seek(0)
            img = Image.open(buf).copy()
            self.frames.append(img)
            buf.close()
            plt.close(fig)

    def generate_gif(self, output_path: Path, fps: int = 10) -> None:
        """Compile buffered frames into animated GIF."""
        if not self.frames:
            return

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        duration = int(1000 / fps)  # milliseconds per frame

        self.frames[0].save(
            output_path,
            save_all=True,
            append_images=self.frames[1:],
            duration=duration,
            loop=0
        )

    def clear_frames(self) -> None:
        """Clear buffered frames."""
        self.frames.clear()
