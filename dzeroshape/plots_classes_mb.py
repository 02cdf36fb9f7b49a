"""Minimum-bias non-prompt D0 fraction for jetty, isotropic and integrated events."""

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
_HEADER = r"pp, $\sqrt{s}$ = 13.6 TeV, PYTHIA8, |y|<0.5"
_CLASS_LABEL = "(0-100)% FT0M"

# Jetty, isotropic and spherocity-integrated ratios of the minimum-bias class.
_NAMES = ("ratio_J_mult_7", "ratio_I_mult_7", "ratio_int_mult_7")
_COLOURS = ("#33cc33", "#cc00cc", "#0000ff")
_MARKERS = ("o", "s", "^")
_MARKER_SIZE = 8.5

# Legend order as (index into _NAMES, text).
_SELECTION_ENTRIES = ((0, "Jetty"), (2, r"$S_{0}$ Integrated"), (1, "Isotropic"))

_HEADER_BOX = (0.143048, 0.816558, 0.719251, 0.920455)
_SELECTION_BOX = (0.177807, 0.66396, 0.390374, 0.85876)
_CLASS_BOX = (0.5147, 0.13311, 0.78877, 0.2532)


def _blank():
    return Line2D([], [], linestyle="None", marker="None")


def _legend(ax, figure, entries, box, fontsize):
    x1, y1, x2, y2 = box
    legend = ax.legend(
        [handle for handle, _ in entries], [text for _, text in entries],
        loc="upper left", fontsize=fontsize, frameon=True,
        bbox_to_anchor=(x1, y1, x2 - x1, y2 - y1), bbox_transform=figure.transFigure,
    )
    style_legend(legend)
    ax.add_artist(legend)
    return legend


def plot_minimum_bias_classes(path, output, label=None):
    """Plot the jetty, isotropic and integrated minimum-bias fractions.

    ``label`` optionally names the setting (for example "CR on"); it is shown
    above the multiplicity-class label. The figure is saved to ``output`` and
    returned.
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

    handles = []
    for name, colour, marker in zip(_NAMES, _COLOURS, _MARKERS):
        histogram = stored[name]
        centres = (histogram.edges[:-1] + histogram.edges[1:]) / 2
        handles.append(
            ax.errorbar(
                centres, histogram.contents,
                xerr=np.diff(histogram.edges) / 2, yerr=histogram.errors(),
                fmt=marker, color=colour, markersize=_MARKER_SIZE, linestyle="none",
            )
        )

    points = figure.get_figheight() * 72.0
    _legend(ax, figure, [(_blank(), _HEADER)], _HEADER_BOX, 0.05 * points)
    _legend(
        ax, figure, [(handles[index], text) for index, text in _SELECTION_ENTRIES],
        _SELECTION_BOX, 0.05 * points,
    )
    class_entries = [(_blank(), _CLASS_LABEL)]
    if label:
        class_entries.insert(0, (_blank(), label))
    _legend(ax, figure, class_entries, _CLASS_BOX, 0.045 * points)

    figure.savefig(output)
    return figure