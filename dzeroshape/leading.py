"""Profiles of event properties versus the pT of the leading prompt and non-prompt D0."""

from __future__ import annotations

from collections.abc import Sized
from dataclasses import dataclass, field

import numpy as np

from .histogram import Profile
from .progress import print_progress

PT_LEAD_EDGES = (1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 10.0, 12.0, 16.0, 24.0)
LEAD_THRESHOLD = 0.15
PROGRESS_EVERY = 100_000

PROMPT = 1
NONPROMPT = 2


def _profile():
    return Profile(PT_LEAD_EDGES)


@dataclass
class LeadingProfiles:
    """Mean pT-hat, MPI count, spherocity and regional multiplicities per leading-D0 pT."""

    pt_hat_prompt: Profile = field(default_factory=_profile)
    pt_hat_nonprompt: Profile = field(default_factory=_profile)
    mpi_prompt: Profile = field(default_factory=_profile)
    mpi_nonprompt: Profile = field(default_factory=_profile)
    spherocity_prompt: Profile = field(default_factory=_profile)
    spherocity_nonprompt: Profile = field(default_factory=_profile)
    toward_prompt: Profile = field(default_factory=_profile)
    transverse_prompt: Profile = field(default_factory=_profile)
    away_prompt: Profile = field(default_factory=_profile)
    toward_nonprompt: Profile = field(default_factory=_profile)
    transverse_nonprompt: Profile = field(default_factory=_profile)
    away_nonprompt: Profile = field(default_factory=_profile)

    def _regions(self):
        return (
            self.toward_prompt,
            self.transverse_prompt,
            self.away_prompt,
            self.toward_nonprompt,
            self.transverse_nonprompt,
            self.away_nonprompt,
        )

    def _add(self, event):
        lead = event.pt_lead
        if lead[PROMPT] > LEAD_THRESHOLD:
            pt = lead[PROMPT]
            self.pt_hat_prompt.fill(pt, event.pt_hat)
            self.mpi_prompt.fill(pt, event.n_mpi)
            self.spherocity_prompt.fill(pt, event.spherocity)
            self.toward_prompt.fill(pt, event.toward[PROMPT])
            self.transverse_prompt.fill(pt, event.transverse[PROMPT])
            self.away_prompt.fill(pt, event.away[PROMPT])
        if lead[NONPROMPT] > LEAD_THRESHOLD:
            pt = lead[NONPROMPT]
            self.pt_hat_nonprompt.fill(pt, event.pt_hat)
            self.mpi_nonprompt.fill(pt, event.n_mpi)
            self.spherocity_nonprompt.fill(pt, event.spherocity)
            self.toward_nonprompt.fill(pt, event.toward[NONPROMPT])
            self.transverse_nonprompt.fill(pt, event.transverse[NONPROMPT])
            self.away_nonprompt.fill(pt, event.away[NONPROMPT])

    def normalise_regions(self):
        """Divide each regional multiplicity profile by its overall mean.

        Profiles that hold no values are left as they are.
        """
        for profile in self._regions():
            mean = profile.mean_y()
            if mean != 0 and np.isfinite(mean):
                profile.scale(1.0 / mean)
        return self

    def as_dict(self):
        """The profiles under the names they are stored with."""
        return {
            "pThatp": self.pt_hat_prompt,
            "pThatnp": self.pt_hat_nonprompt,
            "MPIp": self.mpi_prompt,
            "MPInp": self.mpi_nonprompt,
            "Spherop": self.spherocity_prompt,
            "Spheronp": self.spherocity_nonprompt,
            "towardp_ptlead": self.toward_prompt,
            "transp_ptlead": self.transverse_prompt,
            "awayp_ptlead": self.away_prompt,
            "towardnp_ptlead": self.toward_nonprompt,
            "transnp_ptlead": self.transverse_nonprompt,
            "awaynp_ptlead": self.away_nonprompt,
        }


def leading_profiles(events, progress=False):
    """Fill the leading-D0 profiles from ``events``.

    With ``progress`` set, a progress bar is written to standard output every
    hundred thousand events and once at the end.
    """
    profiles = LeadingProfiles()
    if progress and not isinstance(events, Sized):
        events = list(events)
    total = len(events) if progress else 0
    for index, event in enumerate(events):
        profiles._add(event)
        if progress and index % PROGRESS_EVERY == 0:
            print_progress(index, total)
    if progress:
        print_progress(total, total)
    return profiles