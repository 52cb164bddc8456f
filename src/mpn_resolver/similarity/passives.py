"""Resistor, capacitor and inductor calculators plus the value-code parsers."""

import re
from typing import Callable

from ..types import ComponentRecord
from .base import (
    FAIL,
    PASS,
    Check,
    SimilarityCalculator,
    equality_check,
    insufficient,
    package_check,
    pair,
    values_match,
)

# =============================================================================
# VALUE CODE PARSERS
# =============================================================================
# Each parser returns a float in base units, or None if unparseable.

_RKM_CODE = re.compile(r"^(\d*)([RKM])(\d*)$", re.IGNORECASE)
_EIA_CODE = re.compile(r"^(\d{2,3})(\d)$")
_DECIMAL_R_CODE = re.compile(r"^(\d*)R(\d*)$", re.IGNORECASE)
_NANO_CODE = re.compile(r"^(\d*)N(\d*)$", re.IGNORECASE)
_TOLERANCE_PATTERN = re.compile(r"([\d.]+)\s*%")

_RKM_MULTIPLIERS = {"R": 1.0, "K": 1e3, "M": 1e6}


def _decimal(whole: str, fraction: str) -> float:
    return float(f"{whole or '0'}.{fraction or '0'}")


def parse_resistance_code(code: str) -> float | None:
    """Parse resistance code in ohms: '10K' -> 10000, '4K7' -> 4700, '10K0' -> 10000, '0R' -> 0, '103' -> 10000"""
    if not code:
        return None
    code = code.strip().upper()
    match = _RKM_CODE.match(code)
    if match:
        whole, unit, fraction = match.groups()
        if not whole and not fraction:
            return None
        return _decimal(whole, fraction) * _RKM_MULTIPLIERS[unit]
    match = _EIA_CODE.match(code)
    if match:
        return float(match.group(1)) * 10 ** int(match.group(2))
    return None


def parse_capacitance_code(code: str) -> float | None:
    """Parse capacitance code in farads: '104' -> 1e-7, '106' -> 1e-5, '1R0' -> 1e-12"""
    if not code:
        return None
    code = code.strip().upper()
    match = _DECIMAL_R_CODE.match(code)
    if match and (match.group(1) or match.group(2)):
        return _decimal(*match.groups()) * 1e-12
    match = _EIA_CODE.match(code)
    if match:
        return float(match.group(1)) * 10 ** int(match.group(2)) * 1e-12
    return None


def parse_inductance_code(code: str) -> float | None:
    """Parse inductance code in henries: '10N' -> 1e-8, '2N2' -> 2.2e-9, 'R10' -> 1e-7, '4R7' -> 4.7e-6, '100' -> 1e-5"""
    if not code:
        return None
    code = code.strip().upper()
    match = _NANO_CODE.match(code)
    if match and (match.group(1) or match.group(2)):
        return _decimal(*match.groups()) * 1e-9
    match = _DECIMAL_R_CODE.match(code)
    if match and (match.group(1) or match.group(2)):
        return _decimal(*match.groups()) * 1e-6
    match = _EIA_CODE.match(code)
    if match:
        return float(match.group(1)) * 10 ** int(match.group(2)) * 1e-6
    return None


def parse_tolerance(s: str) -> float | None:
    """Parse tolerance: '1%' -> 1, '0.1%' -> 0.1, '+80/-20%' -> 80"""
    if not s:
        return None
    values = [float(v) for v in _TOLERANCE_PATTERN.findall(s.replace("/", "% "))]
    return max(values) if values else None


def _size(record: ComponentRecord) -> str | None:
    return record.attributes.get("size") or record.attributes.get("package_code")


def _band(value: float, tolerance: float) -> tuple[float, float]:
    spread = abs(value) * tolerance / 100
    return value - spread, value + spread


def value_band_check(
    name: str,
    first: ComponentRecord,
    second: ComponentRecord,
    parser: Callable[[str], float | None],
    weight: float,
) -> Check:
    """Required value check: the two tolerance bands must overlap.

    Without a tolerance on both sides the nominal values are compared instead.
    """
    code_a = first.attributes.get("value")
    code_b = second.attributes.get("value")
    a = parser(code_a) if code_a else None
    b = parser(code_b) if code_b else None
    if a is None or b is None:
        return insufficient(name, weight, required=True)
    values = pair(code_a, code_b)

    tol_a = parse_tolerance(first.attributes.get("tolerance", ""))
    tol_b = parse_tolerance(second.attributes.get("tolerance", ""))
    if tol_a is None or tol_b is None:
        if values_match(a, b):
            return Check(name, PASS, weight, True, f"{name} matches ({values})")
        return Check(name, FAIL, weight, True, f"{name} differs ({values})")

    low_a, high_a = _band(a, tol_a)
    low_b, high_b = _band(b, tol_b)
    if low_a <= high_b and low_b <= high_a:
        return Check(name, PASS, weight, True, f"{name} tolerance bands overlap ({values})")
    return Check(name, FAIL, weight, True, f"{name} tolerance bands do not overlap ({values})")


def tolerance_check(first: ComponentRecord, second: ComponentRecord, weight: float) -> Check:
    name = "tolerance"
    a = parse_tolerance(first.attributes.get("tolerance", ""))
    b = parse_tolerance(second.attributes.get("tolerance", ""))
    if a is None or b is None:
        return insufficient(name, weight)
    text = pair(first.attributes["tolerance"], second.attributes["tolerance"])
    if a == b:
        return Check(name, PASS, weight, reason=f"tolerance matches ({text})")
    # Partial credit: the looser part still earns a share
    return Check(name, FAIL, weight, reason=f"tolerance differs ({text})", credit=min(a, b) / max(a, b))


# =============================================================================
# CALCULATORS
# =============================================================================


class ResistorSimilarityCalculator(SimilarityCalculator):
    name = "resistor"

    def checks(self, first: ComponentRecord, second: ComponentRecord) -> list[Check]:
        return [
            value_band_check("resistance", first, second, parse_resistance_code, 0.5),
            package_check(_size(first), _size(second), 0.3, required=True),
            tolerance_check(first, second, 0.2),
        ]


class CapacitorSimilarityCalculator(SimilarityCalculator):
    name = "capacitor"

    def checks(self, first: ComponentRecord, second: ComponentRecord) -> list[Check]:
        return [
            value_band_check("capacitance", first, second, parse_capacitance_code, 0.4),
            package_check(_size(first), _size(second), 0.25, required=True),
            tolerance_check(first, second, 0.1),
            equality_check("dielectric", first.attributes.get("dielectric"),
                           second.attributes.get("dielectric"), 0.15),
            equality_check("voltage rating", first.attributes.get("voltage_rating"),
                           second.attributes.get("voltage_rating"), 0.1),
        ]


class InductorSimilarityCalculator(SimilarityCalculator):
    name = "inductor"

    def checks(self, first: ComponentRecord, second: ComponentRecord) -> list[Check]:
        return [
            value_band_check("inductance", first, second, parse_inductance_code, 0.5),
            package_check(_size(first), _size(second), 0.3, required=True),
            tolerance_check(first, second, 0.2),
        ]

