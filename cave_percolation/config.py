"""Configuration dataclasses and YAML loader for cave percolation runs."""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from pathlib import Path
import yaml

MODES = ('A', 'B', 'C')

MODE_NAMES = {
    'A': 'visualization',
    'B': 'estimation',
    'C': 'sweep',
}


@dataclass
class GridConfig:
    size: int


@dataclass
class SamplingConfig:
    accessibility: float = 0.5  # probability that a cell is open
    samples: int = 1000
    step: float = 0.01          # sweep increment (mode C)


@dataclass
class VisualizationConfig:
    map_path: Optional[Path] = None  # None = read from stdin


@dataclass
class SimulationConfig:
    mode: str
    grid: GridConfig
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)

    # Export flags (can be overridden by CLI)
    csv_enabled: bool = True
    plot_enabled: bool = True
    gif_enabled: bool = False
    quiet: bool = False
    seed: Optional[int] = None
    out_dir: Path = field(default_factory=lambda: Path("./output"))

    @property
    def mode_name(self) -> str:
        return MODE_NAMES[self.mode]


def default_config(mode: str = 'B', size: int = 20) -> SimulationConfig:
    """Build a configuration without a YAML file."""
    return SimulationConfig(mode=mode.upper(), grid=GridConfig(size=size))


def validate_config(config: SimulationConfig) -> None:
    """Raise ValueError for values outside the accepted ranges."""
    if config.mode not in MODES:
        raise ValueError(f"Unknown mode: {config.mode!r} (expected one of {', '.join(MODES)})")
    if config.grid.size < 1:
        raise ValueError(f"Grid size must be at least 1, got {config.grid.size}")
    if not 0.0 <= config.sampling.accessibility <= 1.0:
        raise ValueError(f"Accessibility must be in [0, 1], got {config.sampling.accessibility}")
    if config.sampling.samples < 1:
        raise ValueError(f"Sample count must be at least 1, got {config.sampling.samples}")
    if not 0.0 < config.sampling.step <= 1.0:
        raise ValueError(f"Sweep step must be in (0, 1], got {config.sampling.step}")


def _parse_sampling(sampling_raw: Dict[str, Any]) -> SamplingConfig:
    """Parse sampling section from raw YAML data."""
    defaults = SamplingConfig()
    return SamplingConfig(
        accessibility=float(sampling_raw.get('accessibility', defaults.accessibility)),
        samples=int(sampling_raw.get('samples', defaults.samples)),
        step=float(sampling_raw.get('step', defaults.step))
    )


def _parse_visualization(vis_raw: Dict[str, Any], base_dir: Path) -> VisualizationConfig:
    """Parse visualization section; map paths are relative to the config file."""
    map_path = vis_raw.get('map')
    if map_path is None:
        return VisualizationConfig()
    map_path = Path(map_path)
    if not map_path.is_absolute():
        map_path = base_dir / map_path
    return VisualizationConfig(map_path=map_path)


def load_config(config_path: Path) -> SimulationConfig:
    """Load and validate YAML configuration file."""
    config_path = Path(config_path)
    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    if 'grid' not in raw or 'size' not in raw['grid']:
        raise ValueError("Configuration is missing grid.size")

    # Parse grid config
    grid = GridConfig(size=int(raw['grid']['size']))

    # Parse export config (optional)
    export_raw = raw.get('export', {})

    config = SimulationConfig(
        mode=str(raw.get('mode', 'B')).upper(),
        grid=grid,
        sampling=_parse_sampling(raw.get('sampling', {})),
        visualization=_parse_visualization(raw.get('visualization', {}),
                                           config_path.parent),
        csv_enabled=export_raw.get('csv', True),
        plot_enabled=export_raw.get('plot', True),
        gif_enabled=export_raw.get('gif', False),
        seed=raw.get('seed')
    )
    validate_config(config)
    return config
