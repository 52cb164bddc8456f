"""Catalog construction and the public classification API.

The catalog (frozen pattern registry, handlers, calculators, detector) is
built once on first use and shared by every caller afterwards. Nothing in it
is mutated after construction, so reads need no locking.
"""

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .detector import ComponentTypeDetector, Detection
from .handlers import GENERIC, GENERIC_PATTERNS, HANDLER_SPECS, ManufacturerHandler
from .manufacturer_aliases import resolve_manufacturer
from .registry import PatternRegistry
from .similarity import SimilarityCalculator, build_calculators
from .text import find_mpn_in_text as _find_mpn_in_text
from .types import CompatibilityVerdict, ComponentRecord, ComponentType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalog:
    registry: PatternRegistry
    handlers: Mapping[str, ManufacturerHandler]
    generic: ManufacturerHandler
    calculators: Mapping[ComponentType, SimilarityCalculator]
    detector: ComponentTypeDetector

    def handler_for(self, manufacturer: str | None) -> ManufacturerHandler:
        if manufacturer and manufacturer in self.handlers:
            return self.handlers[manufacturer]
        return self.generic

    def calculator_for(self, component_type: ComponentType) -> SimilarityCalculator:
        return self.calculators[component_type.base_type]


def build_catalog() -> Catalog:
    """Register every manufacturer table, then the generic patterns, and freeze."""
    registry = PatternRegistry()
    handlers: dict[str, ManufacturerHandler] = {}
    for spec in HANDLER_SPECS:
        handler = ManufacturerHandler(spec)
        handler.register_patterns(registry)
        handlers[spec.manufacturer_id] = handler

    # Generic entries carry no manufacturer scope
    for component_type, pattern in GENERIC_PATTERNS:
        registry.register(component_type, pattern)
    registry.freeze()

    generic = ManufacturerHandler(GENERIC)
    frozen_handlers = MappingProxyType(handlers)
    catalog = Catalog(
        registry=registry,
        handlers=frozen_handlers,
        generic=generic,
        calculators=build_calculators(frozen_handlers, generic),
        detector=ComponentTypeDetector(registry, frozen_handlers),
    )
    logger.info(f"Built MPN catalog: {len(registry)} patterns, {len(handlers)} manufacturer handlers")
    return catalog


# =============================================================================
# GLOBAL CATALOG
# =============================================================================

_catalog: Catalog | None = None
_catalog_lock = threading.Lock()


def get_catalog() -> Catalog:
    """Get or build the global catalog (thread-safe)."""
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            # Double-check locking pattern
            if _catalog is None:
                _catalog = build_catalog()
    return _catalog


def reset_catalog() -> None:
    """Drop the global catalog; the next call rebuilds it."""
    global _catalog
    with _catalog_lock:
        _catalog = None


# =============================================================================
# PUBLIC API
# =============================================================================


def resolve(mpn: str | None, manufacturer_hint: str | None = None) -> Detection:
    return get_catalog().detector.resolve(mpn, manufacturer_hint)


def classify(mpn: str | None, manufacturer_hint: str | None = None) -> ComponentType:
    """Primary component type of mpn; ComponentType.UNKNOWN if nothing matches."""
    return resolve(mpn, manufacturer_hint).component_type


def describe(mpn: str | None, manufacturer_hint: str | None = None) -> ComponentRecord:
    """Classify mpn and extract its attributes into a ComponentRecord."""
    catalog = get_catalog()
    detection = catalog.detector.resolve(mpn, manufacturer_hint)
    if not detection.normalized:
        return ComponentRecord(mpn=detection.mpn, normalized="", component_type=ComponentType.UNKNOWN)

    manufacturer = detection.manufacturer
    if manufacturer is None and manufacturer_hint:
        # A generic match with a hint: use that manufacturer's table if it knows the part
        hinted = resolve_manufacturer(manufacturer_hint)
        if hinted in catalog.handlers and catalog.handlers[hinted].recognizes(detection.normalized):
            manufacturer = hinted
    handler = catalog.handler_for(manufacturer)
    return ComponentRecord(
        mpn=detection.mpn,
        normalized=detection.normalized,
        component_type=detection.component_type,
        manufacturer=manufacturer,
        attributes=MappingProxyType(handler.extract_attributes(detection.normalized)),
    )


def extract_attributes(mpn: str | None, manufacturer_hint: str | None = None) -> dict[str, str]:
    """Attributes readable from mpn; {} for empty or unrecognized input."""
    return dict(describe(mpn, manufacturer_hint).attributes)


def are_interchangeable(
    mpn_a: str | None,
    mpn_b: str | None,
    component_type: ComponentType | str,
) -> CompatibilityVerdict:
    """Can mpn_b be used where mpn_a is specified?

    component_type picks the calculator (by its base type). Strings are
    resolved by name; an unknown name raises ValueError.
    """
    component_type = ComponentType.from_name(component_type)
    calculator = get_catalog().calculator_for(component_type)
    return calculator.compare(describe(mpn_a), describe(mpn_b))


def similarity(mpn_a: str | None, mpn_b: str | None) -> float:
    """Verdict score of the calculator for mpn_a's detected type (0.0 for empty input)."""
    first, second = describe(mpn_a), describe(mpn_b)
    if not first.normalized or not second.normalized:
        return 0.0
    calculator = get_catalog().calculator_for(first.component_type)
    return calculator.compare(first, second).score


def matching_types(mpn: str | None) -> set[ComponentType]:
    return get_catalog().detector.matching_types(mpn)


def detect_manufacturer(mpn: str | None) -> str | None:
    return get_catalog().detector.detect_manufacturer(mpn)


def find_mpn_in_text(text: str | None) -> str | None:
    return _find_mpn_in_text(text, get_catalog().registry)
