"""Shared machinery for the similarity calculators.

A calculator turns two ComponentRecords into a list of named checks. Each
check passes, fails, or is UNKNOWN when one side lacks the attribute. The
verdict is derived from the checks the same way for every category:

    score = sum(weight * credit) / sum(weight)
    compatible = no required check failed
                 and no required check is UNKNOWN
                 and score >= MIN_COMPATIBILITY_SCORE

Symmetric calculators format every reason from a sorted pair of values, so
(a, b) and (b, a) produce identical verdicts.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Mapping

from .. import config
from ..handlers import ManufacturerHandler
from ..packages import are_packages_compatible
from ..types import CompatibilityVerdict, ComponentRecord

logger = logging.getLogger(__name__)

PASS = "pass"
FAIL = "fail"
UNKNOWN = "unknown"


@dataclass(frozen=True)
class Check:
    name: str
    status: str
    weight: float
    required: bool = False
    reason: str = ""
    credit: float | None = None  # partial credit in [0, 1]; defaults from status

    @property
    def earned(self) -> float:
        if self.credit is not None:
            return self.weight * max(0.0, min(1.0, self.credit))
        return self.weight if self.status == PASS else 0.0


def verdict_from_checks(checks: list[Check]) -> CompatibilityVerdict:
    total = sum(check.weight for check in checks)
    if total <= 0:
        return CompatibilityVerdict(False, 0.0, ("no comparable attributes",))
    score = sum(check.earned for check in checks) / total
    blocked = any(check.required and check.status != PASS for check in checks)
    compatible = not blocked and score >= config.MIN_COMPATIBILITY_SCORE
    return CompatibilityVerdict(compatible, score, tuple(check.reason for check in checks))


def pair(first: object, second: object) -> str:
    """Order-independent rendering of two values: 'LFPAK56 / LFPAK88'."""
    return " / ".join(sorted((str(first), str(second))))


def values_match(first: float, second: float, tolerance: float | None = None) -> bool:
    """Relative comparison, symmetric in its arguments."""
    if tolerance is None:
        tolerance = config.VALUE_MATCH_TOLERANCE
    largest = max(abs(first), abs(second))
    if largest == 0:
        return True
    return abs(first - second) / largest <= tolerance


# =============================================================================
# CHECK BUILDERS
# =============================================================================


def insufficient(name: str, weight: float, required: bool = False) -> Check:
    return Check(name, UNKNOWN, weight, required, f"{name}: insufficient data")


def equality_check(
    name: str,
    first: str | None,
    second: str | None,
    weight: float,
    required: bool = False,
) -> Check:
    if not first or not second:
        return insufficient(name, weight, required)
    if first.upper() == second.upper():
        return Check(name, PASS, weight, required, f"{name} matches ({first})")
    return Check(name, FAIL, weight, required, f"{name} differs ({pair(first, second)})")


def numeric_check(
    name: str,
    first: str | None,
    second: str | None,
    parser: Callable[[str], float | None],
    weight: float,
    required: bool = False,
) -> Check:
    """Compare two coded values after parsing them to base units."""
    a = parser(first) if first else None
    b = parser(second) if second else None
    if a is None or b is None:
        return insufficient(name, weight, required)
    if values_match(a, b):
        return Check(name, PASS, weight, required, f"{name} matches ({pair(first, second)})")
    return Check(name, FAIL, weight, required, f"{name} differs ({pair(first, second)})")


def package_check(first: str | None, second: str | None, weight: float, required: bool = False) -> Check:
    name = "package"
    if not first or not second:
        return insufficient(name, weight, required)
    if are_packages_compatible(first, second):
        return Check(name, PASS, weight, required, f"package compatible ({pair(first, second)})")
    return Check(name, FAIL, weight, required, f"package differs ({pair(first, second)})")


# =============================================================================
# CALCULATOR BASE
# =============================================================================


class SimilarityCalculator:
    """Base class: identical/missing handling plus the handler lookup.

    Subclasses implement checks(). Calculators hold no per-call state and are
    shared across threads.
    """

    name = "default"
    symmetric = True

    def __init__(self, handlers: Mapping[str, ManufacturerHandler], generic: ManufacturerHandler):
        self.handlers = handlers
        self.generic = generic

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def handler_for(self, record: ComponentRecord) -> ManufacturerHandler:
        if record.manufacturer and record.manufacturer in self.handlers:
            return self.handlers[record.manufacturer]
        return self.generic

    def compare(self, first: ComponentRecord, second: ComponentRecord) -> CompatibilityVerdict:
        """Verdict for using second in place of first.

        For symmetric calculators the argument order does not matter.
        """
        if not first.normalized or not second.normalized:
            return CompatibilityVerdict(False, 0.0, ("missing part number",))
        if first.normalized == second.normalized:
            return CompatibilityVerdict(True, 1.0, ("identical part number",))
        verdict = verdict_from_checks(self.checks(first, second))
        logger.debug(
            f"{self.name}: {first.normalized} vs {second.normalized} -> "
            f"{verdict.is_compatible} ({verdict.score:.2f})"
        )
        return verdict

    def checks(self, first: ComponentRecord, second: ComponentRecord) -> list[Check]:
        raise NotImplementedError

    def replacement_check(
        self,
        first: ComponentRecord,
        second: ComponentRecord,
        weight: float,
        required: bool = False,
    ) -> Check:
        """Manufacturer replacement rule, or matching core part numbers across manufacturers."""
        name = "replacement"
        if first.manufacturer == second.manufacturer:
            handler = self.handler_for(first)
            if handler.is_replacement_compatible(first.normalized, second.normalized):
                return Check(name, PASS, weight, required, "same part apart from package/suffix code")
            return Check(name, FAIL, weight, required, "not a drop-in replacement")

        core_a = self.handler_for(first).core_token(first.normalized)
        core_b = self.handler_for(second).core_token(second.normalized)
        if not core_a or not core_b:
            return insufficient(name, weight, required)
        if core_a == core_b:
            return Check(name, PASS, weight, required, f"same core part number ({core_a})")
        return Check(name, FAIL, weight, required, f"core part number differs ({pair(core_a, core_b)})")
