"""Logic IC calculator.

Not symmetric: compare(required, candidate) asks whether the candidate can be
fitted where the required part was specified. A TTL-input HCT part accepts
the CMOS levels an HC part is driven with, so HCT may replace HC but not the
other way round.
"""

from ..types import ComponentRecord
from .base import PASS, FAIL, Check, SimilarityCalculator, equality_check, insufficient, package_check

# required family -> families that may be fitted instead
FAMILY_REPLACEMENTS: dict[str, tuple[str, ...]] = {
    "HC": ("HCT",),
    "AHC": ("AHCT",),
    "LS": ("HCT", "ALS"),
}


def family_check(required: str | None, candidate: str | None, weight: float) -> Check:
    name = "logic family"
    if not required or not candidate:
        return insufficient(name, weight, required=True)
    required, candidate = required.upper(), candidate.upper()
    if required == candidate:
        return Check(name, PASS, weight, True, f"logic family matches ({required})")
    if candidate in FAMILY_REPLACEMENTS.get(required, ()):
        return Check(name, PASS, weight, True, f"{candidate} can replace {required}")
    return Check(name, FAIL, weight, True, f"{candidate} cannot replace {required}")


class LogicICSimilarityCalculator(SimilarityCalculator):
    name = "logic_ic"
    symmetric = False

    def checks(self, first: ComponentRecord, second: ComponentRecord) -> list[Check]:
        a, b = first.attributes, second.attributes
        return [
            equality_check("function", a.get("function"), b.get("function"), 0.5, required=True),
            family_check(a.get("family"), b.get("family"), 0.3),
            package_check(a.get("package_code"), b.get("package_code"), 0.2),
        ]
