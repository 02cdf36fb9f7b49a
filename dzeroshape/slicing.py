"""FT0 multiplicity classes from the percentiles of the FT0 distribution."""

from __future__ import annotations

from collections.abc import Sized
from fractions import Fraction

from .histogram import Histogram, uniform_edges

DEFAULT_FRACTIONS = (0.01, 0.05, 0.1, 0.2, 0.4, 0.6, 0.9)


def multiplicity_histogram(events, fraction_of_events=0.01):
    """Histogram FT0 over the leading ``fraction_of_events`` of the events."""
    if not 0 < fraction_of_events <= 1:
        raise ValueError("the fraction of events must lie in (0, 1]")
    if not isinstance(events, Sized):
        events = list(events)
    share = Fraction(fraction_of_events).limit_denominator(10**6)
    count = int(share * len(events))
    histogram = Histogram(uniform_edges(110, -0.5, 109.5))
    for index, event in enumerate(events):
        if index >= count:
            break
        histogram.fill(event.ft0)
    return histogram


def percentile_thresholds(histogram, fractions=DEFAULT_FRACTIONS):
    """Lower FT0 edge of each top-``fraction`` class, as (fraction, centre) pairs.

    For each fraction the bins are summed from the top down; the first bin at
    which the accumulated count reaches that share of the total gives the
    class threshold.
    """
    total = histogram.integral()
    last = histogram.nbins - 1
    thresholds = []
    for fraction in fractions:
        target = fraction * total
        index = next(
            (j for j in range(last, -1, -1) if histogram.integral(j, last) >= target),
            None,
        )
        if index is not None:
            thresholds.append((fraction, histogram.bin_center(index)))
    return thresholds