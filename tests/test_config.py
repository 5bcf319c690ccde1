from pathlib import Path

import pytest

from cave_percolation.config import default_config, load_config, validate_config


def _write(tmp_path, text):
    path = tmp_path / "run.yaml"
    path.write_text(text)
    return path


def test_load_full_config(tmp_path):
    path = _write(tmp_path, """
mode: c
seed: 5
grid:
  size: 12
sampling:
  accessibility: 0.7
  samples: 300
  step: 0.05
visualization:
  map: maps/cave.txt
export:
  csv: false
  plot: true
  gif: true
""")
    config = load_config(path)
    assert config.mode == "C"
    assert config.mode_name == "sweep"
    assert config.seed == 5
    assert config.grid.size == 12
    assert config.sampling.accessibility == 0.7
    assert config.sampling.samples == 300
    assert config.sampling.step == 0.05
    assert config.visualization.map_path == tmp_path / "maps" / "cave.txt"
    assert config.csv_enabled is False
    assert config.gif_enabled is True


def test_defaults_for_optional_sections(tmp_path):
    config = load_config(_write(tmp_path, "grid:\n  size: 4\n"))
    assert config.mode == "B"
    assert config.sampling.samples == 1000
    assert config.sampling.step == 0.01
    assert config.visualization.map_path is None
    assert config.csv_enabled and config.plot_enabled
    assert config.seed is None
    assert config.out_dir == Path("./output")


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_missing_size_raises(tmp_path):
    with pytest.raises(ValueError, match="grid.size"):
        load_config(_write(tmp_path, "mode: A\n"))


@pytest.mark.parametrize("text, message", [
    ("mode: D\ngrid:\n  size: 3\n", "Unknown mode"),
    ("grid:\n  size: 0\n", "Grid size"),
    ("grid:\n  size: 3\nsampling:\n  accessibility: 1.2\n", "Accessibility"),
    ("grid:\n  size: 3\nsampling:\n  samples: 0\n", "Sample count"),
    ("grid:\n  size: 3\nsampling:\n  step: 0\n", "Sweep step"),
])
def test_invalid_values_raise(tmp_path, text, message):
    with pytest.raises(ValueError, match=message):
        load_config(_write(tmp_path, text))


def test_default_config_is_valid():
    config = default_config("a", 7)
    assert config.mode == "A"
    validate_config(config)


def test_bundled_configs_load():
    root = Path(__file__).resolve().parents[1]
    for name in ("default.yaml", "visualize.yaml"):
        config = load_config(root / "configs" / name)
        assert config.visualization.map_path.exists()
