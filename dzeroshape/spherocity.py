"""FT0 multiplicity classes with their jetty and isotropic spherocity cuts."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SpherocityClass:
    """An FT0 range [ft0_low, ft0_high) with the spherocity cuts that apply in it."""

    name: str
    ft0_low: float
    ft0_high: float
    jetty: float
    isotropic: float

    def contains(self, ft0):
        return self.ft0_low <= ft0 < self.ft0_high

    def is_jetty(self, sp):
        return 0.0 <= sp < self.jetty

    def is_isotropic(self, sp):
        return self.isotropic < sp <= 1.0


# Lower FT0 edges, upper FT0 edges, jetty and isotropic cuts for the seven
# multiplicity classes, then the jetty and isotropic cuts for minimum bias.
_CUTS = {
    "on": (
        (46, 26, 18, 13, 9, 7, 3),
        (242, 46, 26, 18, 13, 9, 7),
        (0.68905, 0.61075, 0.55845, 0.531, 0.514, 0.503, 0.491),
        (0.86455, 0.830, 0.800, 0.784, 0.775, 0.768, 0.762),
        (0.557, 0.807),
    ),
    "off": (
        (58, 32, 22, 15, 10, 7, 4),
        (242, 58, 32, 22, 15, 10, 7),
        (0.722, 0.644, 0.572, 0.533, 0.510, 0.495, 0.483),
        (0.879, 0.845, 0.808, 0.786, 0.772, 0.763, 0.756),
        (0.552, 0.807),
    ),
}


def classes_for(cr):
    """The seven FT0 classes and the minimum-bias class for a CR setting."""
    try:
        lows, highs, jetty, isotropic, (mb_jetty, mb_isotropic) = _CUTS[cr]
    except KeyError:
        raise ValueError("CR setting must be 'on' or 'off'") from None
    classes = [
        SpherocityClass(f"mult_{index}", low, high, jet, iso)
        for index, (low, high, jet, iso) in enumerate(zip(lows, highs, jetty, isotropic))
    ]
    classes.append(SpherocityClass("mult_7", 0, math.inf, mb_jetty, mb_isotropic))
    return classes