"""Package code registry shared by the manufacturer tables.

Resolves the short package suffix codes used in IC part numbers ("D", "PW",
"DBV", "AU") to package names and groups package names by footprint family
for replacement checks.
"""

import re

# =============================================================================
# SUFFIX CODES
# =============================================================================

STANDARD_CODES: dict[str, str] = {
    # DIP
    "N": "DIP",
    "P": "DIP",
    "PU": "PDIP",
    # Atmel/Microchip AVR
    "AU": "TQFP",
    "MU": "QFN",
    "SU": "SOIC",
    "XU": "TSSOP",
    "CU": "WLCSP",
    # SOIC
    "D": "SOIC",
    "M": "SOIC",
    "DR": "SOIC",
    "DW": "SOIC-Wide",
    # TSSOP / MSOP
    "PW": "TSSOP",
    "DT": "TSSOP",
    "PT": "TSSOP",
    "DGK": "MSOP",
    # SOT
    "DBV": "SOT-23",
    "DCK": "SC-70",
    "GW": "SOT-353",
    "GV": "SOT-753",
    "MP": "SOT-223",
    "DRL": "SOT-553",
    "DRV": "SON",
    # TO
    "T": "TO-220",
    "CT": "TO-220",
    "TA": "TO-220F",
    "FP": "TO-220F",
    "K": "TO-3",
    "H": "TO-39",
    "KC": "TO-252",
    "KV": "TO-252",
    "TU": "TO-251",
    "S": "D2PAK",
    # Diodes
    "RL": "DO-41",
    # Generic
    "SMD": "SMD",
    "THT": "THT",
}

# =============================================================================
# PACKAGE GROUPS
# =============================================================================
# Stored in canonical form: upper case, no dashes or spaces.

POWER_PACKAGES: frozenset[str] = frozenset({
    "TO220", "TO220F", "TO252", "TO247", "TO263", "D2PAK", "DPAK", "SOT223",
    "LFPAK56", "LFPAK88", "LFPAK33",
})

THROUGH_HOLE_PACKAGES: frozenset[str] = frozenset({
    "DIP", "PDIP", "TO220", "TO220F", "TO3", "TO39", "TO247", "TO92",
    "DO41", "DO35", "THT",
})

# Packages that are pin-compatible for small-outline logic and analog parts
_SMALL_OUTLINE: frozenset[str] = frozenset({"DIP", "PDIP", "SOIC", "TSSOP", "MSOP"})

# Footprint-identical aliases
_EQUIVALENT_PACKAGES: tuple[frozenset[str], ...] = (
    frozenset({"SOT23", "SOT233", "TO236AB"}),
    frozenset({"SOD323", "SC76"}),
    frozenset({"SC70", "SOT323"}),
    frozenset({"SOT353", "SC705"}),
    frozenset({"DPAK", "TO252"}),
    frozenset({"D2PAK", "TO263"}),
    frozenset({"LFPAK56", "SOT669"}),
    frozenset({"DIP", "PDIP"}),
)

_CANONICAL_STRIP = re.compile(r"[\s\-_]")


def canonical_package(name: str | None) -> str:
    """'SOT-23' -> 'SOT23', 'to-220f' -> 'TO220F'."""
    if not name:
        return ""
    return _CANONICAL_STRIP.sub("", name.upper())


def resolve_package(code: str | None) -> str:
    """Resolve a suffix code to a package name, or return the code unchanged.

    Examples:
        "PW" -> "TSSOP"
        "dbv" -> "SOT-23"
        "XYZ" -> "XYZ"
    """
    if not code:
        return ""
    code = code.strip().upper()
    return STANDARD_CODES.get(code, code)


def is_power_package(name: str | None) -> bool:
    return canonical_package(name) in POWER_PACKAGES


def is_through_hole(name: str | None) -> bool:
    return canonical_package(name) in THROUGH_HOLE_PACKAGES


def are_packages_compatible(first: str | None, second: str | None) -> bool:
    """True when two package names share a footprint family.

    Symmetric. Same package, documented aliases (SOT-23 / TO-236AB), power
    packages of the same mounting style among themselves and small-outline IC
    packages among themselves.
    """
    a = canonical_package(first)
    b = canonical_package(second)
    if not a or not b:
        return False
    if a == b:
        return True
    for group in _EQUIVALENT_PACKAGES:
        if a in group and b in group:
            return True
    if is_power_package(a) and is_power_package(b):
        return is_through_hole(a) == is_through_hole(b)
    return a in _SMALL_OUTLINE and b in _SMALL_OUTLINE
