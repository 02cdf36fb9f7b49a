import pytest

from dzeroshape.events import Event
from dzeroshape.histogram import Histogram, uniform_edges
from dzeroshape.slicing import multiplicity_histogram, percentile_thresholds


def _events(ft0_values):
    return [Event(ft0=v) for v in ft0_values]


def test_histogram_uses_leading_share_of_events():
    histogram = multiplicity_histogram(_events(range(250)))
    assert histogram.entries == 2
    assert histogram.integral() == 2


def test_histogram_with_all_events_from_generator():
    values = [3, 3, 7, 50, 108]
    histogram = multiplicity_histogram((Event(ft0=v) for v in values), 1.0)
    assert histogram.integral() == len(values)
    assert histogram.nbins == 110


def test_histogram_rejects_bad_fraction():
    with pytest.raises(ValueError):
        multiplicity_histogram(_events([1, 2]), 0.0)


def test_thresholds_bracket_requested_share():
    histogram = Histogram(uniform_edges(110, -0.5, 109.5))
    for v in range(100):
        histogram.fill(v)
        if v % 3 == 0:
            histogram.fill(v)
    total = histogram.integral()
    last = histogram.nbins - 1
    for fraction, centre in percentile_thresholds(histogram):
        index = round(centre)
        assert histogram.integral(index, last) >= fraction * total
        if index < last:
            assert histogram.integral(index + 1, last) < fraction * total


def test_thresholds_fall_as_share_grows():
    histogram = multiplicity_histogram(_events(list(range(60)) * 5), 1.0)
    centres = [c for _, c in percentile_thresholds(histogram)]
    assert centres == sorted(centres, reverse=True)


def test_empty_histogram_gives_top_bin():
    histogram = Histogram(uniform_edges(110, -0.5, 109.5))
    thresholds = percentile_thresholds(histogram, [0.1, 0.5])
    assert [c for _, c in thresholds] == pytest.approx([109.0, 109.0])