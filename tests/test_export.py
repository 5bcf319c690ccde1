import csv

import numpy as np
from PIL import Image

from cave_percolation.export.csv_writer import CSVWriter
from cave_percolation.export.reporter import (Reporter, estimate_threshold,
                                              format_estimate, format_visualization)
from cave_percolation.export.visualizer import Visualizer
from cave_percolation.model.sampling import sweep
from cave_percolation.model.state import SampleResult, SweepResult, VisualizationResult
from cave_percolation.model.traversal import traverse


def _sweep(probabilities):
    step = 1.0 / (len(probabilities) - 1)
    points = [SampleResult(round(i * step, 10), int(p * 10), 10)
              for i, p in enumerate(probabilities)]
    return SweepResult(size=5, samples=10, points=points)


def test_csv_writer_writes_header_and_rows(tmp_path):
    path = tmp_path / "out" / "sweep.csv"
    with CSVWriter(path) as writer:
        writer.append(SampleResult(0.5, 3, 10))
        writer.append(SampleResult(1.0, 10, 10))

    with open(path, newline='') as f:
        rows = list(csv.DictReader(f))
    assert list(rows[0].keys()) == CSVWriter.FIELDNAMES
    assert rows[0] == {"accessibility": "0.5", "successes": "3",
                       "samples": "10", "probability": "0.3"}
    assert len(rows) == 2


def test_csv_writer_opens_lazily(tmp_path):
    writer = CSVWriter(tmp_path / "lazy.csv")
    writer.append(SampleResult(0.0, 0, 4))
    writer.close()
    assert (tmp_path / "lazy.csv").read_text().splitlines()[1] == "0.0,0,4,0.0"


def test_format_estimate():
    assert format_estimate(SampleResult(0.6, 123, 1000)) == \
        "Success for accessibility 0.6000 is 0.1230"


def test_format_visualization(crossable_grid, blocked_grid):
    traverse(crossable_grid, exhaustive=True)
    found = VisualizationResult(True, crossable_grid.undiscovered_matrix(), [])
    assert format_visualization(found) == "Exit found\n0 0 0\n1 1 0\n0 0 0"

    traverse(blocked_grid, exhaustive=True)
    missing = VisualizationResult(False, blocked_grid.undiscovered_matrix(), [])
    assert format_visualization(missing).splitlines()[0] == "Exit NOT found"


def test_estimate_threshold():
    assert estimate_threshold(_sweep([0.0, 0.1, 0.6, 1.0])) == round(2 / 3, 10)
    assert estimate_threshold(_sweep([0.0, 0.0, 0.2])) is None


def test_reporter_summary(tmp_path):
    reporter = Reporter("configs/default.yaml", 42)
    text = reporter.generate_summary(_sweep([0.0, 0.5, 1.0]), tmp_path,
                                     csv_enabled=True, plot_enabled=False)
    assert "Random Seed: 42" in text
    assert "Estimated Threshold:   0.50" in text
    assert "Total Samples:         30" in text
    assert str(tmp_path / "sweep.csv") in text
    assert "Curve:      (disabled)" in text


def test_reporter_summary_without_seed(tmp_path):
    text = Reporter(None, None).generate_summary(
        _sweep([0.0, 0.1]), tmp_path, csv_enabled=False, plot_enabled=True)
    assert "(command line)" in text
    assert "None (random)" in text
    assert "not reached" in text


def test_save_grid_png(tmp_path, crossable_grid):
    traverse(crossable_grid, exhaustive=True)
    path = tmp_path / "img" / "map.png"
    Visualizer().save_grid(crossable_grid, path)
    assert path.exists()
    with Image.open(path) as img:
        assert img.format == "PNG"


def test_save_curve_png(tmp_path, rng):
    result = sweep(4, 5, rng, step=0.25)
    path = tmp_path / "curve.png"
    Visualizer().save_curve(result, path, threshold=0.5)
    assert path.exists()


def test_traversal_gif(tmp_path, crossable_grid):
    result = traverse(crossable_grid, exhaustive=True)
    visualizer = Visualizer()
    visualizer.buffer_traversal(crossable_grid, result.discovery_order, frames=5)
    assert len(visualizer.frames) == 5

    path = tmp_path / "walk.gif"
    visualizer.generate_gif(path, fps=5)
    with Image.open(path) as img:
        assert img.format == "GIF"
        assert img.n_frames == 5

    visualizer.clear_frames()
    assert visualizer.frames == []


def test_gif_without_frames_writes_nothing(tmp_path):
    Visualizer().generate_gif(tmp_path / "none.gif")
    assert not (tmp_path / "none.gif").exists()


def test_grid_image_colors(crossable_grid):
    traverse(crossable_grid, exhaustive=True)
    visualizer = Visualizer()
    image = visualizer._grid_image(crossable_grid.obstructed, crossable_grid.discovered)
    assert image.shape == (3, 3, 3)
    assert np.allclose(image[1, 0], image[1, 1])
    assert not np.allclose(image[2, 0], image[0, 0])
