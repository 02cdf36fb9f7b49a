import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from dzeroshape.plot_style import alice_fraction, style_axes, style_legend  # noqa: E402


def test_alice_fraction_values():
    data = alice_fraction()
    assert len(data.x) == 14
    assert data.x[0] == 0.517
    assert data.y[-1] == 0.13
    assert list(data.x) == sorted(data.x)
    assert all(s > 0 for s in data.stat + data.syst_y)


def test_ratio_panel_has_larger_labels():
    fig, (top, bottom) = plt.subplots(2)
    style_axes(top, "main")
    style_axes(bottom, "ratio")
    assert bottom.yaxis.label.get_size() > top.yaxis.label.get_size()
    assert bottom.xaxis.label.get_size() == top.xaxis.label.get_size()
    plt.close(fig)


def test_unknown_variant_rejected():
    fig, ax = plt.subplots()
    with pytest.raises(ValueError):
        style_axes(ax, "sideways")
    plt.close(fig)


def test_legend_box_is_white():
    fig, ax = plt.subplots()
    ax.plot([0, 1], [0, 1], label="PYTHIA8")
    legend = style_legend(ax.legend())
    assert tuple(legend.get_frame().get_facecolor()) == (1.0, 1.0, 1.0, 1.0)
    assert tuple(legend.get_frame().get_edgecolor()) == (1.0, 1.0, 1.0, 1.0)
    plt.close(fig)