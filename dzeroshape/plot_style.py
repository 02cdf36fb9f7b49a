"""Shared figure styling and the measured non-prompt D0 fraction."""

from __future__ import annotations

from dataclasses import dataclass

from matplotlib.ticker import MaxNLocator

# Relative text sizes are fractions of the pad height; these turn them into points.
_POINTS_PER_UNIT = 320.0
_TICK_POINTS_PER_UNIT = 200.0


@dataclass(frozen=True)
class AliceFraction:
    """Measured non-prompt D0 fraction versus pT, with its uncertainties."""

    x: tuple
    y: tuple
    stat: tuple
    syst_x: tuple
    syst_y: tuple

    def __post_init__(self):
        if len({len(self.x), len(self.y), len(self.stat), len(self.syst_x), len(self.syst_y)}) != 1:
            raise ValueError("all columns must have the same length")


def alice_fraction():
    """The measured minimum-bias fraction, pp at 13.6 TeV, |y| < 0.5."""
    return AliceFraction(
        x=(0.517, 1.3, 1.8, 2.27, 2.75, 3.26, 3.77, 4.52, 5.5, 6.5, 7.5, 10.0, 14.0, 20.0),
        y=(0.05, 0.051, 0.05, 0.056, 0.055, 0.06, 0.056, 0.065, 0.067, 0.071, 0.075,
           0.088, 0.097, 0.13),
        stat=(0.0032, 0.0027, 0.0016, 0.0017, 0.00155, 0.0021, 0.00226, 0.002, 0.00344,
              0.0046435, 0.0065, 0.0061, 0.0105, 0.0187),
        syst_x=(0.2310, 0.2050, 0.2050, 0.2050, 0.2000, 0.2235, 0.2180, 0.2250, 0.2180,
                0.2180, 0.2180, 0.2260, 0.2050, 0.2350),
        syst_y=(0.00917, 0.00720, 0.00535, 0.00565, 0.00551, 0.00628, 0.00610, 0.00765,
                0.01210, 0.012715, 0.01340, 0.01570, 0.01720, 0.02300),
    )


@dataclass(frozen=True)
class _AxisStyle:
    ndivisions: int
    label_offset: float
    label_size: float
    title_size: float
    tick_length: float
    title_offset: float


_STYLES = {
    "main": (
        _AxisStyle(510, 0.005, 0.045, 0.05, 0.03, 0.97),
        _AxisStyle(507, 0.005, 0.045, 0.06, 0.02, 0.99),
    ),
    "ratio": (
        _AxisStyle(512, 0.01, 0.05, 0.05, 0.04, 1.2),
        _AxisStyle(507, 0.01, 0.07, 0.075, 0.025, 0.88),
    ),
}


def style_axes(ax, variant="main"):
    """Apply the frame style used for the main or the ratio panel."""
    try:
        x_style, y_style = _STYLES[variant]
    except KeyError:
        raise ValueError(f"unknown axis style {variant!r}") from None
    for axis, style in ((ax.xaxis, x_style), (ax.yaxis, y_style)):
        axis.label.set_size(style.title_size * _POINTS_PER_UNIT)
        axis.labelpad = style.title_offset * 4.0
        axis.set_tick_params(
            which="major",
            labelsize=style.label_size * _POINTS_PER_UNIT,
            length=style.tick_length * _TICK_POINTS_PER_UNIT,
            pad=style.label_offset * _POINTS_PER_UNIT,
            direction="in",
        )
        axis.set_major_locator(MaxNLocator(nbins=style.ndivisions % 100))
    ax.tick_params(top=True, right=True)
    return ax


def style_legend(legend):
    """Give a legend a plain white box with no visible border."""
    frame = legend.get_frame()
    frame.set_facecolor("white")
    frame.set_edgecolor("white")
    frame.set_alpha(1.0)
    return legend