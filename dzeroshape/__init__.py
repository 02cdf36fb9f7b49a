"""Histograms, profiles, event I/O and figures for D0 event-shape studies in pp collisions."""

__version__ = "0.1.0"