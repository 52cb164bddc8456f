"""Linear voltage regulator calculator."""

import re

from ..types import ComponentRecord
from .base import PASS, FAIL, Check, SimilarityCalculator, equality_check, insufficient, package_check, pair

_VOLTAGE = re.compile(r"^(\d+(?:\.\d+)?)V?$", re.IGNORECASE)


def parse_output_voltage(s: str) -> float | None:
    """Parse regulator output: '3.3' -> 3.3, '5' -> 5.0, 'ADJ' -> None"""
    if not s:
        return None
    match = _VOLTAGE.match(s.strip())
    return float(match.group(1)) if match else None


def output_voltage_check(first: str | None, second: str | None, weight: float) -> Check:
    name = "output voltage"
    if not first or not second:
        return insufficient(name, weight, required=True)
    a, b = parse_output_voltage(first), parse_output_voltage(second)
    if a is None or b is None:
        # Adjustable parts only match each other
        same = first.upper() == second.upper()
    else:
        same = a == b
    if same:
        # "5" and "5.0" render alike
        text = f"{a:g}" if a is not None else first.upper()
        return Check(name, PASS, weight, True, f"output voltage matches ({text})")
    return Check(name, FAIL, weight, True, f"output voltage differs ({pair(first, second)})")


class VoltageRegulatorSimilarityCalculator(SimilarityCalculator):
    """78xx from TI and ST, or any two 1117 parts, compare by family and output."""

    name = "voltage_regulator"

    def checks(self, first: ComponentRecord, second: ComponentRecord) -> list[Check]:
        a, b = first.attributes, second.attributes
        return [
            equality_check("regulator family", a.get("series"), b.get("series"), 0.35, required=True),
            output_voltage_check(a.get("output_voltage"), b.get("output_voltage"), 0.4),
            package_check(a.get("package_code"), b.get("package_code"), 0.25),
        ]
