"""Non-prompt D0 fraction in the highest FT0 class, per spherocity selection."""

from __future__ import annotations

import numpy as np
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

from .plot_style import style_axes, style_legend
from .storage import load_histograms

_FIG_SIZE = (7.5, 6.4)
_MARGINS = (0.122984, 0.01604278, 0.123, 0.06818182)  # left, right, bottom, top
_X_RANGE = (0.5, 24.5)
_Y_RANGE = (0.0, 0.35)
_X_TITLE = r"$p_{\mathrm{T}}$ (GeV/$c$)"
_Y_TITLE = r"$f_{\mathrm{non}\mathrm{-}\mathrm{prompt}}$"
_CLASS_LABEL = "(0-1)% FT0M"

# Jetty, isotropic and spherocity-integrated ratios in the top FT0 class.
_NAMES = ("ratio_J_mult_0", "ratio_I_mult_0", "ratio_int_mult_0")
_COLOURS = ("#33cc33", "#cc00cc", "#0000ff")
_MARKERS = ("o", "s", "^")
_MARKER_SIZE = 8.5


def _blank():
    return Line2D([], [], linestyle="None", marker="None")


def _legend(ax, figure, text, box, fontsize):
    x1, y1, x2, y2 = box
    legend = ax.legend(
        [_blank()], [text], loc="upper left", fontsize=fontsize, frameon=True,
        bbox_to_anchor=(x1, y1, x2 - x1, y2 - y1), bbox_transform=figure.transFigure,
    )
    style_legend(legend)
    ax.add_artist(legend)
    return legend


def plot_high_multiplicity(path, output, label):
    """Plot the jetty, isotropic and integrated fractions of the top FT0 class.

    ``label`` names the setting (for example "CR on") in the upper corner. The
    figure is saved to ``output`` and returned.
    """
    stored = load_histograms(path)
    missing = [name for name in _NAMES if name not in stored]
    if missing:
        raise KeyError(f"{path} holds no {missing[0]!r} histogram")

    figure = Figure(figsize=_FIG_SIZE, dpi=100)
    left, right, bottom, top = _MARGINS
    ax = figure.add_axes((left, bottom, 1.0 - left - right, 1.0 - bottom - top))
    ax.set_xlim(*_X_RANGE)
    ax.set_ylim(*_Y_RANGE)
    ax.set_xlabel(_X_TITLE)
    ax.set_ylabel(_Y_TITLE)
    style_axes(ax, "main")

    for name, colour, marker in zip(_NAMES, _COLOURS, _MARKERS):
        histogram = stored[name]
        centres = (histogram.edges[:-1] + histogram.edges[1:]) / 2
        ax.errorbar(
            centres, histogram.contents,
            xerr=np.diff(histogram.edges) / 2, yerr=histogram.errors(),
            fmt=marker, color=colour, markersize=_MARKER_SIZE, linestyle="none",
        )

    points = figure.get_figheight() * 72.0
    _legend(ax, figure, _CLASS_LABEL, (0.5147, 0.13311, 0.78877, 0.2532), 0.045 * points)
    _legend(ax, figure, label, (0.135, 0.7646, 0.409091, 0.88474), 0.05 * points)

    figure.savefig(output)
    return figure