"""Regional charged-particle multiplicity versus leading-D0 pT, MPI on and off."""

from __future__ import annotations

import numpy as np
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

from .histogram import Profile
from .plot_style import style_axes, style_legend
from .storage import load_histograms

_FIG_SIZE = (8.0, 6.0)
_MARGINS = (0.1296791, 0.03, 0.13, 0.04)  # left, right, bottom, top
_X_RANGE = (0.1, 24.0)
_Y_RANGE = (0.65, 3.5)
_X_TITLE = r"$p_{\mathrm{T}}^{D^{0}\mathrm{-lead}}$ (GeV/$c$)"
_Y_TITLE = (
    r"$\mathrm{d}N_{\mathrm{ch}}/\mathrm{d}\eta\,/\,"
    r"\langle\mathrm{d}N_{\mathrm{ch}}/\mathrm{d}\eta\rangle(|\eta|<0.8)$"
)
_HEADER = r"pp, $\sqrt{s}$ = 13.6 TeV, PYTHIA8, |y|<0.5"

_NAMES = {
    "prompt": ("towardp_ptlead", "transp_ptlead", "awayp_ptlead"),
    "nonprompt": ("towardnp_ptlead", "transnp_ptlead", "awaynp_ptlead"),
}
_SPECIES_LABELS = {
    "prompt": r"Prompt $D^{0}$-lead",
    "nonprompt": r"Non-prompt $D^{0}$-lead",
}
_REGIONS = ("Toward", "Transverse", "Away")

# Toward, transverse and away.
_COLOURS = ("#990000", "#009900", "#000099")
_MARKERS = ("o", "s", "^")
_MARKER_SIZE = 7.5


def _blank():
    return Line2D([], [], linestyle="None", marker="None")


def _row_major(items, ncol):
    """Reorder entries laid out row by row into the column order legends fill."""
    rows = [items[i : i + ncol] for i in range(0, len(items), ncol)]
    return [row[c] for c in range(ncol) for row in rows if c < len(row)]


def _load(path, names):
    stored = load_histograms(path)
    missing = [name for name in names if name not in stored]
    if missing:
        raise KeyError(f"{path} holds no {missing[0]!r} profile")
    return [stored[name] for name in names]


def _points(item):
    centres = (item.edges[:-1] + item.edges[1:]) / 2
    half = np.diff(item.edges) / 2
    if isinstance(item, Profile):
        mask = item.weights > 0
        values, errors = item.means(), item.errors()
    else:
        values, errors = item.contents, item.errors()
        mask = np.ones(values.shape, dtype=bool)
    return centres[mask], values[mask], half[mask], errors[mask]


def _draw(ax, item, colour, marker, filled):
    x, y, xerr, yerr = _points(item)
    return ax.errorbar(
        x, y, xerr=xerr, yerr=yerr,
        fmt=marker, color=colour, markersize=_MARKER_SIZE, linestyle="none",
        markerfacecolor=colour if filled else "none",
    )


def _legend(ax, figure, entries, ncol, box, fontsize):
    x1, y1, x2, y2 = box
    legend = ax.legend(
        [handle for handle, _ in entries], [text for _, text in entries],
        ncol=ncol, loc="upper left", fontsize=fontsize, frameon=True,
        bbox_to_anchor=(x1, y1, x2 - x1, y2 - y1), bbox_transform=figure.transFigure,
    )
    style_legend(legend)
    ax.add_artist(legend)
    return legend


def plot_regions(on_path, off_path, species, output):
    """Plot toward, transverse and away multiplicities for MPI on and off.

    ``species`` is "prompt" or "nonprompt". MPI-on points are filled, MPI-off
    points open. The figure is saved to ``output`` and returned.
    """
    try:
        names = _NAMES[species]
    except KeyError:
        raise ValueError(
            f"unknown species {species!r}; expected one of {sorted(_NAMES)}"
        ) from None
    on_items = _load(on_path, names)
    off_items = _load(off_path, names)

    figure = Figure(figsize=_FIG_SIZE, dpi=100)
    left, right, bottom, top = _MARGINS
    ax = figure.add_axes((left, bottom, 1.0 - left - right, 1.0 - bottom - top))
    ax.set_xlim(*_X_RANGE)
    ax.set_ylim(*_Y_RANGE)
    ax.set_xlabel(_X_TITLE)
    ax.set_ylabel(_Y_TITLE)
    style_axes(ax, "main")

    on_handles = [
        _draw(ax, item, colour, marker, True)
        for item, colour, marker in zip(on_items, _COLOURS, _MARKERS)
    ]
    off_handles = [
        _draw(ax, item, colour, marker, False)
        for item, colour, marker in zip(off_items, _COLOURS, _MARKERS)
    ]

    fontsize = 0.05 * figure.get_figheight() * 72.0
    if species == "prompt":
        _legend(
            ax, figure, [(_blank(), _HEADER)], 1,
            (0.156642, 0.835069, 0.300752, 0.930428), fontsize,
        )
        _legend(
            ax, figure, [(_blank(), _SPECIES_LABELS[species])], 1,
            (0.2101149, 0.6853, 0.352039, 0.784345), fontsize,
        )
    else:
        markers = []
        for on_handle, off_handle in zip(on_handles, off_handles):
            markers.extend([(on_handle, " "), (off_handle, " ")])
        _legend(
            ax, figure, _row_major(markers, 2), 2,
            (0.236842, 0.556424, 0.542607, 0.690104), fontsize,
        )
        _legend(
            ax, figure, [(_blank(), region) for region in _REGIONS], 1,
            (0.45614, 0.555556, 0.56391, 0.690972), fontsize,
        )
        _legend(
            ax, figure, [(_blank(), "MPI on"), (_blank(), "MPI off")], 2,
            (0.16792, 0.697917, 0.444862, 0.777778), fontsize,
        )
        _legend(
            ax, figure, [(_blank(), _SPECIES_LABELS[species])], 1,
            (0.1817043, 0.7864583, 0.3258145, 0.8854167), fontsize,
        )

    figure.savefig(output)
    return figure