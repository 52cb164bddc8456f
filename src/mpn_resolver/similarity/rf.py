"""RF front-end calculator.

Not symmetric: compare(required, candidate) asks whether the candidate meets
the required part's band, output power and gain. A 22 dBm module can stand in
for a 20 dBm one; the reverse fails the power check.
"""

import re

from .. import config
from ..types import ComponentRecord
from .base import PASS, FAIL, Check, SimilarityCalculator, insufficient

# Cross-vendor series that fill the same role
RF_EQUIVALENT_SERIES: tuple[frozenset[str], ...] = (
    frozenset({"QPF", "RFFM", "SKY85"}),  # Wi-Fi front-end modules
    frozenset({"QPA", "TQP", "SKY65"}),   # power amplifiers
    frozenset({"QPC", "RFSW", "PE4", "SKY13"}),  # switches
    frozenset({"QPL", "SPF", "SKY67"}),   # LNAs
    frozenset({"SE", "SKY66"}),           # sub-GHz front ends
)

_BAND = re.compile(r"^(\d+(?:\.\d+)?)-(\d+(?:\.\d+)?)\s*MHZ$", re.IGNORECASE)
_NUMBER = re.compile(r"^-?\d+(?:\.\d+)?")


def parse_band(s: str) -> tuple[float, float] | None:
    """Parse band: '2400-2500MHz' -> (2400.0, 2500.0)"""
    if not s:
        return None
    match = _BAND.match(s.strip())
    if not match:
        return None
    low, high = float(match.group(1)), float(match.group(2))
    return (low, high) if low <= high else (high, low)


def parse_level(s: str) -> float | None:
    """Parse a dBm or dB figure: '22' -> 22.0, '20dBm' -> 20.0"""
    if not s:
        return None
    match = _NUMBER.match(s.strip())
    return float(match.group(0)) if match else None


def series_equivalent(first: str, second: str) -> bool:
    first, second = first.upper(), second.upper()
    if first == second:
        return True
    return any(first in group and second in group for group in RF_EQUIVALENT_SERIES)


class RFSimilarityCalculator(SimilarityCalculator):
    name = "rf_ic"
    symmetric = False

    def checks(self, first: ComponentRecord, second: ComponentRecord) -> list[Check]:
        a, b = first.attributes, second.attributes
        return [
            self._series_check(a.get("series"), b.get("series"), 0.3),
            self._band_check(a.get("frequency_band"), b.get("frequency_band"), 0.3),
            self._power_check(a.get("power"), b.get("power"), 0.2),
            self._gain_check(a.get("gain"), b.get("gain"), 0.2),
        ]

    def _series_check(self, required: str | None, candidate: str | None, weight: float) -> Check:
        name = "series"
        if not required or not candidate:
            return insufficient(name, weight, required=True)
        if series_equivalent(required, candidate):
            return Check(name, PASS, weight, True, f"{candidate} is equivalent to {required}")
        return Check(name, FAIL, weight, True, f"{candidate} is not equivalent to {required}")

    def _band_check(self, required: str | None, candidate: str | None, weight: float) -> Check:
        name = "frequency band"
        a, b = parse_band(required or ""), parse_band(candidate or "")
        if a is None or b is None:
            return insufficient(name, weight, required=True)
        if a[0] <= b[1] and b[0] <= a[1]:
            return Check(name, PASS, weight, True, f"frequency band overlaps ({candidate} covers {required})")
        return Check(name, FAIL, weight, True, f"frequency band {candidate} misses {required}")

    def _power_check(self, required: str | None, candidate: str | None, weight: float) -> Check:
        name = "output power"
        a, b = parse_level(required or ""), parse_level(candidate or "")
        if a is None or b is None:
            return insufficient(name, weight, required=True)
        if b >= a:
            return Check(name, PASS, weight, True, f"output power {b:g} dBm meets {a:g} dBm")
        return Check(name, FAIL, weight, True, f"output power {b:g} dBm below {a:g} dBm")

    def _gain_check(self, required: str | None, candidate: str | None, weight: float) -> Check:
        name = "gain"
        a, b = parse_level(required or ""), parse_level(candidate or "")
        if a is None or b is None:
            return insufficient(name, weight, required=True)
        delta = abs(a - b)
        if delta <= config.RF_GAIN_TOLERANCE_DB:
            return Check(name, PASS, weight, True, f"gain within {config.RF_GAIN_TOLERANCE_DB:g} dB ({b:g} vs {a:g})")
        return Check(name, FAIL, weight, True, f"gain differs by {delta:g} dB ({b:g} vs {a:g})")
