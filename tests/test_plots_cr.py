import numpy as np
import pytest
from matplotlib.text import Text

from dzeroshape.histogram import Profile
from dzeroshape.leading import PT_LEAD_EDGES
from dzeroshape.plots_cr import cr_ratio, plot_cr_comparison
from dzeroshape.storage import save_histograms


def _profile(factor):
    profile = Profile(PT_LEAD_EDGES)
    profile.fill(1.5, 2.0 * factor)
    profile.fill(1.5, 4.0 * factor)
    profile.fill(3.5, 6.0 * factor)
    profile.fill(11.0, 5.0 * factor)
    return profile


def _write(path, factor):
    save_histograms(
        path,
        {
            "MPIp": _profile(factor),
            "MPInp": _profile(factor),
            "pThatp": _profile(factor),
            "pThatnp": _profile(factor),
        },
    )
    return path


@pytest.fixture
def inputs(tmp_path):
    on = _write(tmp_path / "on.json", 1.0)
    off = _write(tmp_path / "off.json", 2.0)
    return on, off


def _texts(figure):
    return {text.get_text() for text in figure.findobj(Text)}


def test_cr_ratio_of_doubled_values():
    ratio = cr_ratio(_profile(1.0), _profile(2.0))
    filled = _profile(1.0).weights > 0
    assert np.allclose(ratio.contents[filled], 2.0)
    assert np.all(ratio.contents[~filled] == 0.0)


def test_cr_ratio_of_equal_profiles_is_one():
    ratio = cr_ratio(_profile(1.0), _profile(1.0))
    filled = _profile(1.0).weights > 0
    assert np.allclose(ratio.contents[filled], 1.0)
    assert np.all(ratio.errors() >= 0)


def test_cr_ratio_keeps_binning():
    ratio = cr_ratio(_profile(1.0), _profile(3.0))
    assert np.array_equal(ratio.edges, np.asarray(PT_LEAD_EDGES))


def test_cr_ratio_rejects_different_binning():
    other = Profile((0.0, 1.0, 2.0))
    other.fill(0.5, 1.0)
    with pytest.raises(ValueError):
        cr_ratio(_profile(1.0), other)


def test_mpi_plot_writes_pdf(inputs, tmp_path):
    on, off = inputs
    output = tmp_path / "D0_MPI.pdf"
    plot_cr_comparison(on, off, "mpi", output)
    assert output.read_bytes().startswith(b"%PDF")


def test_mpi_plot_ranges(inputs, tmp_path):
    on, off = inputs
    figure = plot_cr_comparison(on, off, "mpi", tmp_path / "out.pdf")
    upper, lower = figure.axes
    assert upper.get_ylim() == pytest.approx((0.5, 10.0))
    assert lower.get_ylim() == pytest.approx((0.9, 1.12))
    assert upper.get_xlim() == pytest.approx((0.1, 24.0))


def test_pthat_plot_ranges(inputs, tmp_path):
    on, off = inputs
    figure = plot_cr_comparison(on, off, "pthat", tmp_path / "out.pdf")
    upper, lower = figure.axes
    assert upper.get_ylim() == pytest.approx((1.0, 40.0))
    assert lower.get_ylim() == pytest.approx((0.9, 1.09))


def test_upper_panel_shows_profile_means(inputs, tmp_path):
    on, off = inputs
    figure = plot_cr_comparison(on, off, "mpi", tmp_path / "out.pdf")
    upper = figure.axes[0]
    assert len(upper.containers) == 4
    expected = _profile(1.0)
    drawn = upper.containers[0].lines[0].get_ydata()
    assert np.allclose(drawn, expected.means()[expected.weights > 0])


def test_lower_panel_shows_ratio(inputs, tmp_path):
    on, off = inputs
    figure = plot_cr_comparison(on, off, "pthat", tmp_path / "out.pdf")
    lower = figure.axes[1]
    assert len(lower.containers) == 2
    for container in lower.containers:
        assert np.allclose(container.lines[0].get_ydata(), 2.0)


def test_mpi_plot_labels(inputs, tmp_path):
    on, off = inputs
    texts = _texts(plot_cr_comparison(on, off, "mpi", tmp_path / "out.pdf"))
    assert {"CR on", "CR off", "Prompt", "Non-prompt", "CR-off/on"} <= texts


def test_pthat_plot_header(inputs, tmp_path):
    on, off = inputs
    texts = _texts(plot_cr_comparison(on, off, "pthat", tmp_path / "out.pdf"))
    assert any("PYTHIA8" in text for text in texts)
    assert "Prompt" not in texts


def test_unknown_quantity(inputs, tmp_path):
    on, off = inputs
    with pytest.raises(ValueError):
        plot_cr_comparison(on, off, "spherocity", tmp_path / "out.pdf")


def test_missing_profile(tmp_path):
    on = tmp_path / "on.json"
    save_histograms(on, {"MPIp": _profile(1.0)})
    off = _write(tmp_path / "off.json", 2.0)
    with pytest.raises(KeyError):
        plot_cr_comparison(on, off, "mpi", tmp_path / "out.pdf")