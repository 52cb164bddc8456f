"""Component type detection over the pattern registry.

Several patterns usually match one MPN: a manufacturer entry, a generic entry
and any manufacturer sub-variant tags. Choosing the primary type is a pure
ranking over the full match set, never first-match-wins:

1. longer literal prefix (strength) first
2. manufacturer-scoped entries before generic ones
3. higher priority
4. lower registration index

Sub-variant tags (MOSFET_NEXPERIA, ...) never take the primary slot; they are
reported next to the primary type when their base type agrees with it.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from .handlers import ManufacturerHandler
from .manufacturer_aliases import resolve_manufacturer
from .normalizer import normalize
from .registry import PatternRegistry
from .types import ComponentType, PatternEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Detection:
    """Result of classifying one MPN."""
    mpn: str
    normalized: str
    component_type: ComponentType = ComponentType.UNKNOWN
    manufacturer: str | None = None
    tags: frozenset[ComponentType] = field(default_factory=frozenset)
    matches: tuple[PatternEntry, ...] = ()

    @property
    def is_unknown(self) -> bool:
        return self.component_type is ComponentType.UNKNOWN

    def to_dict(self) -> dict[str, Any]:
        return {
            "mpn": self.mpn,
            "normalized": self.normalized,
            "component_type": self.component_type.name,
            "base_type": self.component_type.base_type.name,
            "manufacturer": self.manufacturer,
            "tags": sorted(tag.name for tag in self.tags),
        }


def rank_key(entry: PatternEntry) -> tuple[int, bool, int, int]:
    return (-entry.strength, entry.manufacturer is None, -entry.priority, entry.index)


def rank_matches(matches: Iterable[PatternEntry], manufacturer_hint: str | None = None) -> list[PatternEntry]:
    """Order a match set best-first.

    With a manufacturer hint (a handler id), entries scoped to a different
    manufacturer are dropped; generic entries stay.
    """
    candidates = [
        entry for entry in matches
        if manufacturer_hint is None or entry.manufacturer in (None, manufacturer_hint)
    ]
    return sorted(candidates, key=rank_key)


def select_primary(ranked: list[PatternEntry]) -> PatternEntry | None:
    """Best-ranked entry that is not a sub-variant tag."""
    for entry in ranked:
        if not entry.component_type.is_variant_tag:
            return entry
    return None


def collect_tags(ranked: list[PatternEntry], primary: PatternEntry) -> frozenset[ComponentType]:
    base = primary.component_type.base_type
    return frozenset(
        entry.component_type for entry in ranked
        if entry.component_type.is_variant_tag
        and entry.component_type.base_type is base
        and (primary.manufacturer is None or entry.manufacturer in (None, primary.manufacturer))
    )


class ComponentTypeDetector:
    """Resolves MPNs to a primary component type.

    Holds only the frozen registry and the handler map, so one instance is
    shared by all threads.
    """

    def __init__(self, registry: PatternRegistry, handlers: Mapping[str, ManufacturerHandler]):
        self.registry = registry
        self.handlers = handlers

    def resolve(self, mpn: str | None, manufacturer_hint: str | None = None) -> Detection:
        hint_id = resolve_manufacturer(manufacturer_hint) if manufacturer_hint else None
        if manufacturer_hint and hint_id is None:
            logger.debug(f"Ignoring unknown manufacturer hint {manufacturer_hint!r}")

        normalized = normalize(mpn, hint_id)
        raw = mpn or ""
        if not normalized:
            return Detection(mpn=raw, normalized="")

        matches = self.registry.lookup(normalized)
        ranked = rank_matches(matches, hint_id)
        primary = select_primary(ranked)
        if primary is None:
            logger.debug(f"{normalized}: no pattern matches")
            return Detection(mpn=raw, normalized=normalized, matches=tuple(matches))

        tags = collect_tags(ranked, primary)
        logger.debug(
            f"{normalized}: {len(matches)} matches, primary {primary.component_type.name} "
            f"({primary.manufacturer or 'generic'}, strength {primary.strength})"
        )
        return Detection(
            mpn=raw,
            normalized=normalized,
            component_type=primary.component_type,
            manufacturer=primary.manufacturer,
            tags=tags,
            matches=tuple(ranked),
        )

    def detect_type(self, mpn: str | None, manufacturer_hint: str | None = None) -> ComponentType:
        return self.resolve(mpn, manufacturer_hint).component_type

    def detect_manufacturer(self, mpn: str | None) -> str | None:
        """Handler id of the manufacturer whose pattern wins for mpn."""
        return self.resolve(mpn).manufacturer

    def matching_types(self, mpn: str | None) -> set[ComponentType]:
        """Every type any pattern assigns to mpn, plus the base types of those."""
        normalized = normalize(mpn)
        types: set[ComponentType] = set()
        for entry in self.registry.lookup(normalized):
            types.add(entry.component_type)
            types.add(entry.component_type.base_type)
        return types
