"""Simulated pp collision events and their on-disk JSON Lines form."""

from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass, field
from pathlib import Path

_SWITCHES = ("on", "off")


@dataclass
class Track:
    """A final-state particle with its four-momentum and origin tag."""

    px: float
    py: float
    pz: float
    energy: float
    tag: int = 0
    charge: int = 0

    def pt(self):
        return math.hypot(self.px, self.py)

    def rapidity(self):
        plus = self.energy + self.pz
        minus = self.energy - self.pz
        if minus <= 0:
            return math.inf
        if plus <= 0:
            return -math.inf
        return 0.5 * math.log(plus / minus)


@dataclass
class Event:
    """One event with its multiplicity estimators and leading-D0 summaries.

    Index 1 of ``pt_lead``, ``toward``, ``transverse`` and ``away`` belongs to
    the prompt leading D0, index 2 to the non-prompt one.
    """

    tracks: list = field(default_factory=list)
    ft0: int = 0
    spherocity: float = 0.0
    eta_mult: int = 0
    rap_mult: int = 0
    pt_hat: float = 0.0
    n_mpi: int = 0
    pt_lead: list = field(default_factory=lambda: [0.0] * 4)
    toward: list = field(default_factory=lambda: [0] * 4)
    transverse: list = field(default_factory=lambda: [0] * 4)
    away: list = field(default_factory=lambda: [0] * 4)


def input_path(data_dir, cr, mpi):
    """Path of the event file for a colour-reconnection / MPI setting."""
    if cr not in _SWITCHES or mpi not in _SWITCHES:
        raise ValueError("CR and MPI settings must be 'on' or 'off'")
    if cr == "off" and mpi == "off":
        raise ValueError("Can not run with both CR and MPI cases off")
    return Path(data_dir) / f"CR-{cr}-MPI-{mpi}" / f"pp-{cr}-{mpi}.jsonl"


def _event_from_record(record):
    tracks = [Track(**track) for track in record.pop("tracks", [])]
    return Event(tracks=tracks, **record)


def read_events(path):
    """Yield the events stored in a JSON Lines file, one per line."""
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if line.strip():
                yield _event_from_record(json.loads(line))


def write_events(events, path):
    """Write events as JSON Lines and return how many were written."""
    count = 0
    with open(path, "w", encoding="utf-8") as handle:
        for event in events:
            handle.write(json.dumps(asdict(event)))
            handle.write("\n")
            count += 1
    return count