"""Leading-D0 mean pT-hat and MPI count with colour reconnection on and off."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

from .plot_style import style_axes, style_legend
from .storage import load_histograms

_FIG_SIZE = (8.5, 6.0)
_X_RANGE = (0.1, 24.0)
_X_TITLE = r"$p_{\mathrm{T}}^{D^{0}\mathrm{-lead}}$ (GeV/$c$)"
_RATIO_TITLE = "CR-off/on"
_HEADER = r"pp, $\sqrt{s}$ = 13.6 TeV, PYTHIA8, |y|<0.5"

# Pads as (left, bottom, width, height) in figure fractions, and their
# margins as (left, right, bottom, top) in pad fractions.
_UPPER_PAD = (0.0, 0.31, 1.0, 0.69)
_LOWER_PAD = (0.0, 0.0, 1.0, 0.31)
_UPPER_MARGINS = (0.13, 0.12, 0.0, 0.05)
_LOWER_MARGINS = (0.13, 0.12, 0.4, 0.0)

# CR on prompt, CR on non-prompt, CR off prompt, CR off non-prompt.
_COLOURS = ("#33cc33", "#cc33cc", "#00991a", "#990099")
_MARKERS = (("o", True), ("s", True), ("o", False), ("s", False))
_MARKER_SIZE = 7.5


@dataclass(frozen=True)
class _Quantity:
    names: tuple
    y_title: str
    y_range: tuple
    ratio_range: tuple
    draw_labels: bool
    draw_header: bool


_QUANTITIES = {
    "mpi": _Quantity(
        names=("MPIp", "MPInp"),
        y_title=r"$\langle N_{\mathrm{mpi}}\rangle$",
        y_range=(0.5, 10.0),
        ratio_range=(0.9, 1.12),
        draw_labels=True,
        draw_header=False,
    ),
    "pthat": _Quantity(
        names=("pThatp", "pThatnp"),
        y_title=r"$\langle\hat{p}_{\mathrm{T}}\rangle$ (GeV/$c$)",
        y_range=(1.0, 40.0),
        ratio_range=(0.9, 1.09),
        draw_labels=False,
        draw_header=True,
    ),
}


def cr_ratio(on_profile, off_profile):
    """Bin means with CR off divided by those with CR on, as a histogram."""
    return off_profile.projection().divide(on_profile.projection())


def _load(path, name):
    stored = load_histograms(path)
    try:
        return stored[name]
    except KeyError:
        raise KeyError(f"{path} holds no {name!r} profile") from None


def _axes_rect(pad, margins):
    x0, y0, width, height = pad
    left, right, bottom, top = margins
    return (
        x0 + left * width,
        y0 + bottom * height,
        width * (1.0 - left - right),
        height * (1.0 - bottom - top),
    )


def _pad_box(pad, box):
    """Turn a box in pad coordinates into figure-fraction (x, y, w, h)."""
    x0, y0, width, height = pad
    x1, y1, x2, y2 = box
    return (x0 + x1 * width, y0 + y1 * height, (x2 - x1) * width, (y2 - y1) * height)


def _pad_points(figure, pad, fraction):
    return fraction * pad[3] * figure.get_figheight() * 72.0


def _blank():
    return Line2D([], [], linestyle="None", marker="None")


def _row_major(items, ncol):
    """Reorder entries laid out row by row into the column order legends fill."""
    rows = [items[i : i + ncol] for i in range(0, len(items), ncol)]
    return [row[c] for c in range(ncol) for row in rows if c < len(row)]


def _errorbar(ax, centres, values, xerr, yerr, colour, marker, filled):
    return ax.errorbar(
        centres, values, xerr=xerr, yerr=yerr,
        fmt=marker, color=colour, markersize=_MARKER_SIZE, linestyle="none",
        markerfacecolor=colour if filled else "none",
    )


def _draw_profile(ax, profile, colour, marker, filled):
    mask = profile.weights > 0
    centres = (profile.edges[:-1] + profile.edges[1:]) / 2
    half = np.diff(profile.edges) / 2
    return _errorbar(
        ax, centres[mask], profile.means()[mask], half[mask], profile.errors()[mask],
        colour, marker, filled,
    )


def _draw_histogram(ax, histogram, colour, marker, filled):
    errors = histogram.errors()
    mask = (histogram.contents != 0) | (errors != 0)
    centres = (histogram.edges[:-1] + histogram.edges[1:]) / 2
    half = np.diff(histogram.edges) / 2
    return _errorbar(
        ax, centres[mask], histogram.contents[mask], half[mask], errors[mask],
        colour, marker, filled,
    )


def plot_cr_comparison(on_path, off_path, quantity, output):
    """Plot ``quantity`` ("mpi" or "pthat") for CR on and off, with their ratio.

    The upper panel holds the prompt and non-prompt profiles of both settings,
    the lower panel the CR-off over CR-on ratio. The figure is saved to
    ``output`` and returned.
    """
    try:
        spec = _QUANTITIES[quantity]
    except KeyError:
        raise ValueError(
            f"unknown quantity {quantity!r}; expected one of {sorted(_QUANTITIES)}"
        ) from None
    prompt_name, nonprompt_name = spec.names
    profiles = [
        _load(on_path, prompt_name),
        _load(on_path, nonprompt_name),
        _load(off_path, prompt_name),
        _load(off_path, nonprompt_name),
    ]
    ratios = [cr_ratio(profiles[0], profiles[2]), cr_ratio(profiles[1], profiles[3])]

    figure = Figure(figsize=_FIG_SIZE, dpi=100)
    upper = figure.add_axes(_axes_rect(_UPPER_PAD, _UPPER_MARGINS))
    lower = figure.add_axes(_axes_rect(_LOWER_PAD, _LOWER_MARGINS), sharex=upper)

    upper.set_xlim(*_X_RANGE)
    upper.set_ylim(*spec.y_range)
    upper.set_ylabel(spec.y_title)
    style_axes(upper, "main")
    upper.tick_params(labelbottom=False)

    lower.set_ylim(*spec.ratio_range)
    lower.set_xlabel(_X_TITLE)
    lower.set_ylabel(_RATIO_TITLE)
    style_axes(lower, "ratio")
    lower.axhline(1.0, color="black", linestyle="--", linewidth=2)

    handles = [
        _draw_profile(upper, profile, colour, marker, filled)
        for profile, colour, (marker, filled) in zip(profiles, _COLOURS, _MARKERS)
    ]
    for ratio, colour, (marker, filled) in zip(ratios, _COLOURS[:2], _MARKERS[2:]):
        _draw_histogram(lower, ratio, colour, marker, filled)

    label_size = _pad_points(figure, _UPPER_PAD, 0.065)
    if spec.draw_labels:
        settings = upper.legend(
            [_blank(), _blank()], ["CR on", "CR off"], ncol=2,
            loc="upper left", fontsize=label_size, frameon=True,
            bbox_to_anchor=_pad_box(_UPPER_PAD, (0.293632, 0.228671, 0.48467, 0.327877)),
            bbox_transform=figure.transFigure,
        )
        style_legend(settings)
        upper.add_artist(settings)
        entries = [
            (handles[0], " "), (handles[2], " "), (_blank(), "Prompt"),
            (handles[1], " "), (handles[3], " "), (_blank(), "Non-prompt"),
        ]
        ordered = _row_major(entries, 3)
        species = upper.legend(
            [handle for handle, _ in ordered], [label for _, label in ordered],
            ncol=3, loc="upper left", fontsize=label_size, frameon=True,
            bbox_to_anchor=_pad_box(_UPPER_PAD, (0.357311, 0.0897817, 0.804245, 0.21875)),
            bbox_transform=figure.transFigure,
        )
        style_legend(species)
        upper.add_artist(species)
    if spec.draw_header:
        header = upper.legend(
            [_blank()], [_HEADER], loc="upper left",
            fontsize=_pad_points(figure, _UPPER_PAD, 0.07), frameon=True,
            bbox_to_anchor=_pad_box(_UPPER_PAD, (0.14033, 0.796627, 0.290094, 0.873512)),
            bbox_transform=figure.transFigure,
        )
        style_legend(header)
        upper.add_artist(header)

    figure.savefig(output)
    return figure