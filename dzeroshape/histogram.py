"""Fixed-bin histograms and profiles with per-bin statistical errors."""

from __future__ import annotations

import numpy as np


def uniform_edges(nbins, low, high):
    """Return ``nbins + 1`` equally spaced bin edges from ``low`` to ``high``."""
    if nbins < 1:
        raise ValueError("a histogram needs at least one bin")
    if not high > low:
        raise ValueError("the upper edge must lie above the lower edge")
    return np.linspace(low, high, nbins + 1)


def _as_edges(edges):
    arr = np.asarray(edges, dtype=float)
    if arr.ndim != 1 or arr.size < 2:
        raise ValueError("at least two bin edges are needed")
    if np.any(np.diff(arr) <= 0):
        raise ValueError("bin edges must increase strictly")
    return arr


class _Binned:
    """Shared bin lookup for histograms and profiles."""

    def __init__(self, edges):
        self.edges = _as_edges(edges)

    @property
    def nbins(self):
        return self.edges.size - 1

    def _find(self, x):
        # Bins are half open, [low, high); x == last edge is overflow.
        return int(np.searchsorted(self.edges, x, side="right")) - 1

    def _check(self, index):
        if not 0 <= index < self.nbins:
            raise IndexError(f"bin {index} outside 0..{self.nbins - 1}")


class Histogram(_Binned):
    """A one-dimensional weighted histogram with sum-of-squares errors."""

    def __init__(self, edges, contents=None, sumw2=None):
        super().__init__(edges)
        shape = (self.nbins,)
        if contents is None:
            self.contents = np.zeros(shape)
        else:
            self.contents = np.array(contents, dtype=float)
        if self.contents.shape != shape:
            raise ValueError("contents do not match the number of bins")
        if sumw2 is None:
            self.sumw2 = np.abs(self.contents)
        else:
            self.sumw2 = np.array(sumw2, dtype=float)
        if self.sumw2.shape != shape:
            raise ValueError("squared weights do not match the number of bins")
        self.underflow = 0.0
        self.overflow = 0.0
        self.entries = 0

    def fill(self, x, weight=1.0):
        """Add ``weight`` to the bin that holds ``x``."""
        self.entries += 1
        index = self._find(x)
        if index < 0:
            self.underflow += weight
        elif index >= self.nbins:
            self.overflow += weight
        else:
            self.contents[index] += weight
            self.sumw2[index] += weight * weight

    def integral(self, first=0, last=None):
        """Sum of the bins ``first`` to ``last`` inclusive, flows excluded."""
        if last is None:
            last = self.nbins - 1
        self._check(first)
        self._check(last)
        if first > last:
            return 0.0
        return float(self.contents[first : last + 1].sum())

    def bin_center(self, index):
        self._check(index)
        return float((self.edges[index] + self.edges[index + 1]) / 2)

    def bin_width(self, index):
        self._check(index)
        return float(self.edges[index + 1] - self.edges[index])

    def errors(self):
        return np.sqrt(self.sumw2)

    def scale(self, factor):
        """Multiply every bin by ``factor``; errors scale with it."""
        self.contents = self.contents * factor
        self.sumw2 = self.sumw2 * (factor * factor)
        self.underflow *= factor
        self.overflow *= factor
        return self

    def divide(self, other):
        """Divide bin by bin by ``other`` in place; empty divisors give zero."""
        if not np.array_equal(self.edges, other.edges):
            raise ValueError("histograms with different binning cannot be divided")
        c1, c2 = self.contents, other.contents
        e1, e2 = self.sumw2, other.sumw2
        nonzero = c2 != 0
        with np.errstate(divide="ignore", invalid="ignore"):
            ratio = np.where(nonzero, c1 / c2, 0.0)
            variance = np.where(
                nonzero, (e1 * c2 * c2 + e2 * c1 * c1) / c2**4, 0.0
            )
        self.contents = ratio
        self.sumw2 = variance
        return self

    def divide_by_bin_width(self):
        """Turn counts into densities per unit of the binned variable."""
        widths = np.diff(self.edges)
        self.contents = self.contents / widths
        self.sumw2 = self.sumw2 / (widths * widths)
        return self

    def copy(self):
        clone = Histogram(self.edges, self.contents, self.sumw2)
        clone.underflow = self.underflow
        clone.overflow = self.overflow
        clone.entries = self.entries
        return clone


class Profile(_Binned):
    """Mean of a quantity y in bins of x, with the error on each mean."""

    def __init__(self, edges):
        super().__init__(edges)
        shape = (self.nbins,)
        self.weights = np.zeros(shape)
        self.sum_y = np.zeros(shape)
        self.sum_y2 = np.zeros(shape)
        self.total_weight = 0.0
        self.total_y = 0.0

    def fill(self, x, y):
        """Record the value ``y`` at ``x``; values outside the range are dropped."""
        index = self._find(x)
        if not 0 <= index < self.nbins:
            return
        self.weights[index] += 1.0
        self.sum_y[index] += y
        self.sum_y2[index] += y * y
        self.total_weight += 1.0
        self.total_y += y

    def means(self):
        filled = self.weights > 0
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.where(filled, self.sum_y / self.weights, 0.0)

    def errors(self):
        """Standard error on each bin mean; zero for empty bins."""
        filled = self.weights > 0
        mean = self.means()
        with np.errstate(divide="ignore", invalid="ignore"):
            spread = np.abs(np.where(filled, self.sum_y2 / self.weights, 0.0) - mean**2)
            return np.where(filled, np.sqrt(spread) / np.sqrt(self.weights), 0.0)

    def mean_y(self):
        """Mean of y over every recorded value."""
        if self.total_weight == 0:
            return 0.0
        return self.total_y / self.total_weight

    def scale(self, factor):
        """Multiply every recorded y by ``factor``."""
        self.sum_y = self.sum_y * factor
        self.sum_y2 = self.sum_y2 * (factor * factor)
        self.total_y *= factor
        return self

    def projection(self):
        """A histogram holding the bin means and their errors."""
        return Histogram(self.edges, self.means(), self.errors() ** 2)