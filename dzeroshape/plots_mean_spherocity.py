"""Mean spherocity versus leading-D0 pT with multiparton interactions on and off."""

from __future__ import annotations

import numpy as np
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

from .plot_style import style_axes, style_legend
from .storage import load_histograms

_FIG_SIZE = (7.5, 6.0)
_MARGINS = (0.1296791, 0.03, 0.13, 0.04)  # left, right, bottom, top
_X_RANGE = (0.0, 24.0)
_Y_RANGE = (0.0, 1.0)
_X_TITLE = r"$p_{\mathrm{T}}^{D^{0}\mathrm{-lead}}$ (GeV/$c$)"
_Y_TITLE = r"$\langle S_{0}\rangle$"
_HEADER = r"pp, $\sqrt{s}$ = 13.6 TeV, PYTHIA8"
_NAMES = ("Spherop", "Spheronp")

# MPI on prompt, MPI on non-prompt, MPI off prompt, MPI off non-prompt.
_COLOURS = ("#0066cc", "#cc33cc", "#0066cc", "#990099")
_MARKERS = (("o", True), ("s", True), ("o", False), ("s", False))
_MARKER_SIZE = 9.0


def _load(path, name):
    stored = load_histograms(path)
    try:
        return stored[name]
    except KeyError:
        raise KeyError(f"{path} holds no {name!r} profile") from None


def _blank():
    return Line2D([], [], linestyle="None", marker="None")


def _row_major(items, ncol):
    """Reorder entries laid out row by row into the column order legends fill."""
    rows = [items[i : i + ncol] for i in range(0, len(items), ncol)]
    return [row[c] for c in range(ncol) for row in rows if c < len(row)]


def _box(x1, y1, x2, y2):
    return (x1, y1, x2 - x1, y2 - y1)


def _draw(ax, profile, colour, marker, filled):
    mask = profile.weights > 0
    centres = (profile.edges[:-1] + profile.edges[1:]) / 2
    half = np.diff(profile.edges) / 2
    return ax.errorbar(
        centres[mask], profile.means()[mask],
        xerr=half[mask], yerr=profile.errors()[mask],
        fmt=marker, color=colour, markersize=_MARKER_SIZE, linestyle="none",
        markerfacecolor=colour if filled else "none",
    )


def _legend(ax, figure, handles, labels, ncol, box, fontsize):
    legend = ax.legend(
        handles, labels, ncol=ncol, loc="upper left", fontsize=fontsize,
        frameon=True, bbox_to_anchor=_box(*box), bbox_transform=figure.transFigure,
    )
    style_legend(legend)
    ax.add_artist(legend)
    return legend


def plot_mpi_spherocity(on_path, off_path, output):
    """Plot prompt and non-prompt mean spherocity for MPI on and off.

    The figure is saved to ``output`` and returned.
    """
    profiles = [
        _load(on_path, _NAMES[0]),
        _load(on_path, _NAMES[1]),
        _load(off_path, _NAMES[0]),
        _load(off_path, _NAMES[1]),
    ]
    figure = Figure(figsize=_FIG_SIZE, dpi=100)
    left, right, bottom, top = _MARGINS
    ax = figure.add_axes((left, bottom, 1.0 - left - right, 1.0 - bottom - top))
    ax.set_xlim(*_X_RANGE)
    ax.set_ylim(*_Y_RANGE)
    ax.set_xlabel(_X_TITLE)
    ax.set_ylabel(_Y_TITLE)
    style_axes(ax, "main")

    handles = [
        _draw(ax, profile, colour, marker, filled)
        for profile, colour, (marker, filled) in zip(profiles, _COLOURS, _MARKERS)
    ]

    points = figure.get_figheight() * 72.0
    settings = _row_major(
        [(_blank(), "MPI on"), (_blank(), "MPI off"), (_blank(), ""), (_blank(), "")], 2
    )
    _legend(
        ax, figure, [h for h, _ in settings], [t for _, t in settings], 2,
        (0.196524, 0.269097, 0.426471, 0.348958), 0.04 * points,
    )
    species = _row_major(
        [
            (handles[0], " "), (handles[2], " "), (_blank(), "Prompt"),
            (handles[1], " "), (handles[3], " "), (_blank(), "Non-prompt"),
        ],
        3,
    )
    _legend(
        ax, figure, [h for h, _ in species], [t for _, t in species], 3,
        (0.256684, 0.201389, 0.93984, 0.300347), 0.04 * points,
    )
    _legend(
        ax, figure, [_blank()], [_HEADER], 1,
        (0.209893, 0.8020833, 0.3529412, 0.9010417), 0.045 * points,
    )

    figure.savefig(output)
    return figure