"""Saving and loading named histograms and profiles as JSON."""

from __future__ import annotations

import json
from pathlib import Path

from .histogram import Histogram, Profile


def _encode(item):
    if isinstance(item, Histogram):
        return {
            "kind": "histogram",
            "edges": item.edges.tolist(),
            "contents": item.contents.tolist(),
            "sumw2": item.sumw2.tolist(),
            "underflow": item.underflow,
            "overflow": item.overflow,
            "entries": item.entries,
        }
    if isinstance(item, Profile):
        return {
            "kind": "profile",
            "edges": item.edges.tolist(),
            "weights": item.weights.tolist(),
            "sum_y": item.sum_y.tolist(),
            "sum_y2": item.sum_y2.tolist(),
            "total_weight": item.total_weight,
            "total_y": item.total_y,
        }
    raise TypeError(f"cannot store object of type {type(item).__name__}")


def _decode(record):
    kind = record.get("kind")
    if kind == "histogram":
        histogram = Histogram(record["edges"], record["contents"], record["sumw2"])
        histogram.underflow = record["underflow"]
        histogram.overflow = record["overflow"]
        histogram.entries = record["entries"]
        return histogram
    if kind == "profile":
        profile = Profile(record["edges"])
        for name in ("weights", "sum_y", "sum_y2"):
            values = Histogram(record["edges"], record[name]).contents
            setattr(profile, name, values)
        profile.total_weight = record["total_weight"]
        profile.total_y = record["total_y"]
        return profile
    raise ValueError(f"unknown stored object kind: {kind!r}")


def save_histograms(path, histograms):
    """Write a mapping of names to histograms or profiles, replacing the file."""
    payload = {name: _encode(item) for name, item in histograms.items()}
    Path(path).write_text(json.dumps(payload, indent=1), encoding="utf-8")


def load_histograms(path):
    """Read back what :func:`save_histograms` wrote, as a name-keyed dict."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    return {name: _decode(record) for name, record in payload.items()}