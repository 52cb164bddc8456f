"""Generic manufacturer handler.

Every manufacturer is described by a HandlerSpec table (patterns plus ordered
extraction rules). One ManufacturerHandler class interprets any table, so the
per-manufacturer modules contain data and a few small transforms only.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Mapping

from ..normalizer import normalize
from ..registry import PatternRegistry
from ..types import ComponentType

logger = logging.getLogger(__name__)

Transform = Callable[[str], "str | None"]


# =============================================================================
# RULES
# =============================================================================


@dataclass(frozen=True)
class Rule:
    """One extraction rule: regex search, then constant/group, transform, table.

    The first rule whose pattern matches decides the attribute. If that rule
    cannot map what it captured (code missing from its table, transform
    returns None), the attribute is absent; later rules are not consulted.
    """
    pattern: re.Pattern[str]
    group: int | str = 1
    value: str | None = None
    table: Mapping[str, str] | None = None
    transform: Transform | None = None

    def apply(self, mpn: str) -> tuple[bool, str | None]:
        match = self.pattern.search(mpn)
        if match is None:
            return False, None
        if self.value is not None:
            # Templates may reference groups: r"BC\1xx"
            return True, match.expand(self.value) or None
        try:
            text = match.group(self.group)
        except IndexError:
            text = match.group(0)
        if text is None:
            return True, None
        if self.transform is not None:
            text = self.transform(text)
            if not text:
                return True, None
        if self.table is not None:
            text = self.table.get(text.upper())
        return True, text or None


def rule(
    pattern: str,
    group: int | str = 1,
    *,
    value: str | None = None,
    table: Mapping[str, str] | None = None,
    transform: Transform | None = None,
) -> Rule:
    """Build a Rule from a pattern string (compiled case-insensitive)."""
    return Rule(
        pattern=re.compile(pattern, re.IGNORECASE),
        group=group,
        value=value,
        table=table,
        transform=transform,
    )


def first_match(rules: tuple[Rule, ...], mpn: str) -> str | None:
    for r in rules:
        matched, result = r.apply(mpn)
        if matched:
            return result
    return None


# Small transforms shared by several tables

_LAST_DIGIT = re.compile(r"\d(?!.*\d)")


def after_last_digit(text: str, stop: str = "#") -> str | None:
    """'R5F100LEAFB#30' -> 'LEAFB'. Characters from a stop marker on are ignored."""
    for marker in stop:
        text = text.split(marker, 1)[0]
    match = _LAST_DIGIT.search(text)
    if match is None:
        return None
    return text[match.end():].strip("-") or None


def through_last_digit(text: str, stop: str = "#") -> str | None:
    """'PSMN3R5-30YLT' -> 'PSMN3R5-30'."""
    for marker in stop:
        text = text.split(marker, 1)[0]
    match = _LAST_DIGIT.search(text)
    if match is None:
        return None
    return text[:match.end()]


def strip_leading_zeros(text: str) -> str | None:
    return text.lstrip("0") or None


@dataclass(frozen=True)
class ReplacementRule:
    """How a manufacturer decides two of its own parts are drop-in replacements.

    Both parts need the same series and the same core token (the part number
    without its package/suffix token). Attributes listed in must_match have to
    agree too: both absent, or both present and equal.
    """
    core: tuple[Rule, ...]
    must_match: tuple[str, ...] = ()


@dataclass(frozen=True)
class HandlerSpec:
    """Declarative description of one manufacturer's part numbering."""
    manufacturer_id: str
    patterns: tuple[tuple, ...]  # (ComponentType, regex) or (ComponentType, regex, priority)
    series: tuple[Rule, ...] = ()
    package: tuple[Rule, ...] = ()
    pin_count: tuple[Rule, ...] = ()
    attributes: Mapping[str, tuple[Rule, ...]] = field(default_factory=dict)
    replacement: ReplacementRule | None = None


# =============================================================================
# HANDLER
# =============================================================================


class ManufacturerHandler:
    """Interprets a HandlerSpec. Stateless after construction; safe to share."""

    def __init__(self, spec: HandlerSpec):
        self.spec = spec
        self.manufacturer_id = spec.manufacturer_id
        self._patterns = tuple(
            (entry[0], re.compile(entry[1], re.IGNORECASE), entry[2] if len(entry) > 2 else 0)
            for entry in spec.patterns
        )
        self.supported_types: frozenset[ComponentType] = frozenset(entry[0] for entry in spec.patterns)

    def __repr__(self) -> str:
        return f"ManufacturerHandler({self.manufacturer_id!r})"

    def _normalize(self, mpn: str | None) -> str:
        return normalize(mpn, self.manufacturer_id)

    def register_patterns(self, registry: PatternRegistry) -> None:
        for component_type, pattern, priority in self._patterns:
            registry.register(component_type, pattern.pattern, self.manufacturer_id, priority)

    def recognizes(self, mpn: str | None) -> bool:
        """True if any of this manufacturer's patterns matches."""
        normalized = self._normalize(mpn)
        if not normalized:
            return False
        return any(pattern.match(normalized) for _, pattern, _ in self._patterns)

    def matches(self, mpn: str | None, component_type: ComponentType, registry: PatternRegistry) -> bool:
        """True if one of this manufacturer's registered patterns of component_type matches.

        A base type query also accepts this manufacturer's sub-types
        (MOSFET accepts a MOSFET_NEXPERIA entry).
        """
        normalized = self._normalize(mpn)
        if not normalized:
            return False
        for entry in registry.entries_for(self.manufacturer_id):
            if entry.component_type is not component_type and entry.component_type.base_type is not component_type:
                continue
            if entry.pattern.match(normalized):
                return True
        return False

    def extract_series(self, mpn: str | None) -> str | None:
        normalized = self._normalize(mpn)
        if not normalized:
            return None
        return first_match(self.spec.series, normalized)

    def extract_package_code(self, mpn: str | None) -> str | None:
        normalized = self._normalize(mpn)
        if not normalized:
            return None
        return first_match(self.spec.package, normalized)

    def extract_pin_count(self, mpn: str | None) -> int | None:
        normalized = self._normalize(mpn)
        if not normalized:
            return None
        raw = first_match(self.spec.pin_count, normalized)
        if raw is None:
            return None
        try:
            count = int(raw)
        except ValueError:
            logger.debug(f"{self.manufacturer_id}: pin count code {raw!r} of {normalized} is not numeric")
            return None
        return count if count > 0 else None

    def extract_attribute(self, mpn: str | None, name: str) -> str | None:
        normalized = self._normalize(mpn)
        if not normalized:
            return None
        return first_match(self.spec.attributes.get(name, ()), normalized)

    def extract_attributes(self, mpn: str | None) -> dict[str, str]:
        """All attributes this table can extract. Missing ones are left out."""
        normalized = self._normalize(mpn)
        if not normalized:
            return {}
        result: dict[str, str] = {}
        series = first_match(self.spec.series, normalized)
        if series:
            result["series"] = series
        package = first_match(self.spec.package, normalized)
        if package:
            result["package_code"] = package
        pin_count = self.extract_pin_count(normalized)
        if pin_count:
            result["pin_count"] = str(pin_count)
        for name, rules in self.spec.attributes.items():
            value = first_match(rules, normalized)
            if value:
                result[name] = value
        return result

    def core_token(self, mpn: str | None) -> str | None:
        if self.spec.replacement is None:
            return None
        normalized = self._normalize(mpn)
        if not normalized:
            return None
        return first_match(self.spec.replacement.core, normalized)

    def is_replacement_compatible(self, mpn_a: str | None, mpn_b: str | None) -> bool:
        """Same series, same core rating token, differing only in the package/suffix token."""
        a = self._normalize(mpn_a)
        b = self._normalize(mpn_b)
        if not a or not b:
            return False
        if not (self.recognizes(a) and self.recognizes(b)):
            return False
        if a == b:
            return True
        rule_set = self.spec.replacement
        if rule_set is None:
            return False

        series_a = self.extract_series(a)
        if series_a is None or series_a != self.extract_series(b):
            return False
        core_a = first_match(rule_set.core, a)
        if core_a is None or core_a != first_match(rule_set.core, b):
            return False

        if rule_set.must_match:
            attrs_a = self.extract_attributes(a)
            attrs_b = self.extract_attributes(b)
            for name in rule_set.must_match:
                if attrs_a.get(name) != attrs_b.get(name):
                    return False
        return True
