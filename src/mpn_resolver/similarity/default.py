"""Fallback calculator for categories without dedicated rules."""

import re

from rapidfuzz import fuzz

from ..types import ComponentRecord
from .base import PASS, FAIL, Check, SimilarityCalculator, pair

_MPN_PARTS = re.compile(r"^([A-Z]*)([0-9]*)(.*)$")

# Weights of the prefix / numeric core / suffix segments
PREFIX_WEIGHT = 0.3
NUMERIC_WEIGHT = 0.5
SUFFIX_WEIGHT = 0.2

# Part numbers at least this similar count as a passing string check
STRING_PASS_THRESHOLD = 0.8


def split_mpn(mpn: str) -> tuple[str, str, str]:
    """Split into letter prefix, numeric core and suffix: 'LM358DR' -> ('LM', '358', 'DR')"""
    match = _MPN_PARTS.match(mpn.upper())
    return match.group(1), match.group(2), match.group(3)


def _ratio(a: str, b: str) -> float:
    if not a and not b:
        return 1.0
    return fuzz.ratio(a, b) / 100.0


def mpn_similarity(first: str, second: str) -> float:
    """Weighted edit-distance similarity of two part numbers, 0.0 to 1.0.

    The numeric core dominates: LM358DR and LM358N score high, LM358DR and
    LM324DR do not.
    """
    if not first or not second:
        return 0.0
    a, b = split_mpn(first), split_mpn(second)
    return (
        PREFIX_WEIGHT * _ratio(a[0], b[0])
        + NUMERIC_WEIGHT * _ratio(a[1], b[1])
        + SUFFIX_WEIGHT * _ratio(a[2], b[2])
    )


class DefaultSimilarityCalculator(SimilarityCalculator):
    """String similarity plus the manufacturer replacement rule (required)."""

    name = "default"

    def checks(self, first: ComponentRecord, second: ComponentRecord) -> list[Check]:
        return [
            self._string_check(first.normalized, second.normalized, 0.4),
            self.replacement_check(first, second, 0.6, required=True),
        ]

    def _string_check(self, first: str, second: str, weight: float) -> Check:
        name = "part number similarity"
        score = mpn_similarity(first, second)
        status = PASS if score >= STRING_PASS_THRESHOLD else FAIL
        return Check(name, status, weight, reason=f"{name} {score:.2f} ({pair(first, second)})", credit=score)
