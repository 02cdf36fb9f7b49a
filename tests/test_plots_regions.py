import numpy as np
import pytest
from matplotlib.legend import Legend

from dzeroshape.histogram import Profile
from dzeroshape.plots_regions import plot_regions
from dzeroshape.storage import save_histograms

EDGES = (1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 10.0, 12.0, 16.0, 24.0)
PROMPT = ("towardp_ptlead", "transp_ptlead", "awayp_ptlead")
NONPROMPT = ("towardnp_ptlead", "transnp_ptlead", "awaynp_ptlead")


def _profile(offset):
    profile = Profile(EDGES)
    for x in (1.5, 2.5, 4.5, 9.0, 20.0):
        profile.fill(x, 1.0 + offset)
        profile.fill(x, 1.4 + offset)
    return profile


def _write(path, offset):
    items = {}
    for index, name in enumerate(PROMPT + NONPROMPT):
        items[name] = _profile(offset + 0.1 * index)
    save_histograms(path, items)
    return items


@pytest.fixture
def inputs(tmp_path):
    on = tmp_path / "on.json"
    off = tmp_path / "off.json"
    on_items = _write(on, 0.0)
    off_items = _write(off, 0.3)
    return on, off, on_items, off_items


def _legend_texts(ax):
    texts = set()
    for child in ax.get_children():
        if isinstance(child, Legend):
            texts.update(t.get_text() for t in child.get_texts())
    return texts


@pytest.mark.parametrize("species", ["prompt", "nonprompt"])
def test_writes_png_with_six_series(inputs, tmp_path, species):
    on, off, _, _ = inputs
    output = tmp_path / f"{species}.png"
    figure = plot_regions(on, off, species, output)
    assert output.read_bytes()[:4] == b"\x89PNG"
    assert len(figure.axes[0].containers) == 6


def test_prompt_points_are_profile_means(inputs, tmp_path):
    on, off, on_items, off_items = inputs
    figure = plot_regions(on, off, "prompt", tmp_path / "p.png")
    containers = figure.axes[0].containers
    expected = on_items["towardp_ptlead"]
    ydata = containers[0][0].get_ydata()
    assert np.allclose(ydata, expected.means()[expected.weights > 0])
    off_expected = off_items["awayp_ptlead"]
    assert np.allclose(
        containers[5][0].get_ydata(), off_expected.means()[off_expected.weights > 0]
    )


def test_nonprompt_legends(inputs, tmp_path):
    on, off, _, _ = inputs
    figure = plot_regions(on, off, "nonprompt", tmp_path / "np.png")
    texts = _legend_texts(figure.axes[0])
    assert {"Toward", "Transverse", "Away", "MPI on", "MPI off"} <= texts


def test_unknown_species(inputs, tmp_path):
    on, off, _, _ = inputs
    with pytest.raises(ValueError):
        plot_regions(on, off, "charm", tmp_path / "x.png")


def test_missing_profile(tmp_path):
    on = tmp_path / "on.json"
    save_histograms(on, {"towardp_ptlead": _profile(0.0)})
    with pytest.raises(KeyError):
        plot_regions(on, on, "prompt", tmp_path / "x.png")