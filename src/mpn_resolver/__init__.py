"""MPN Resolver - classify manufacturer part numbers and resolve equivalents."""

__version__ = "0.3.0"

from .engine import (
    Catalog,
    are_interchangeable,
    build_catalog,
    classify,
    describe,
    detect_manufacturer,
    extract_attributes,
    find_mpn_in_text,
    get_catalog,
    matching_types,
    reset_catalog,
    resolve,
    similarity,
)
from .detector import Detection
from .manufacturer_aliases import resolve_manufacturer
from .normalizer import normalize
from .packages import are_packages_compatible, resolve_package
from .types import CompatibilityVerdict, ComponentRecord, ComponentType

__all__ = [
    "__version__",
    "Catalog",
    "CompatibilityVerdict",
    "ComponentRecord",
    "ComponentType",
    "Detection",
    "are_interchangeable",
    "are_packages_compatible",
    "build_catalog",
    "classify",
    "describe",
    "detect_manufacturer",
    "extract_attributes",
    "find_mpn_in_text",
    "get_catalog",
    "matching_types",
    "normalize",
    "reset_catalog",
    "resolve",
    "resolve_manufacturer",
    "resolve_package",
    "similarity",
]
