"""MPN normalization.

Strips packaging and tape-and-reel markers that distributors and BOM tools
append to part numbers, without touching suffixes that are part of the
part's identity (a Zener's "-C5V1" voltage code, a Renesas "#30" version).
"""

import re

# =============================================================================
# PACKAGING SUFFIX TABLES
# =============================================================================
# Suffixes are matched at the end of the upper-cased MPN, in order.

_WHITESPACE = re.compile(r"\s+")

PACKAGING_SUFFIXES: tuple[re.Pattern[str], ...] = (
    re.compile(r",\d+$"),            # Nexperia/NXP reel codes: ",215", ",115"
    re.compile(r"[-/]T/?R$"),        # "-TR", "/TR", "-T/R"
    re.compile(r"-REEL\d*$"),        # "-REEL", "-REEL7"
    re.compile(r"-ND$"),             # distributor catalog suffix
    re.compile(r"[#-]PBF$"),         # lead-free marker
    re.compile(r"\(T&R\)$"),
)

# Additional packaging suffixes per manufacturer id
MANUFACTURER_PACKAGING_SUFFIXES: dict[str, tuple[re.Pattern[str], ...]] = {
    "diodes": (
        re.compile(r"-(7|13)(-F)?$"),  # 7"/13" reel, optional lead-free "-F"
    ),
    "st": (
        re.compile(r"(?<=T[67])TR$"),  # STM32F103C8T6TR
    ),
    "ti": (
        re.compile(r"(?<=DBV|DCK|DGK|DCY)R$"),  # TLV1117LV33DCYR
        re.compile(r"(?<=PW)R$"),
    ),
    "vishay": (
        re.compile(r"-T1(-G?E3)?$"),
        re.compile(r"-G?E3$"),
    ),
    "infineon": (
        re.compile(r"(?<=\d[A-Z])PBF$"),  # IRF540NPBF
    ),
}


def normalize(raw: str | None, manufacturer: str | None = None) -> str:
    """Normalize a raw MPN: trim, upper-case, drop whitespace and packaging suffixes.

    Examples:
        " pmbt2222a,215 " -> "PMBT2222A"
        "BZX84-C5V1" -> "BZX84-C5V1" (identity suffix kept)
        "BAV99-7-F" with manufacturer="diodes" -> "BAV99"

    Never raises; None or empty input returns "".
    """
    if not raw:
        return ""
    mpn = _WHITESPACE.sub("", str(raw)).upper()
    if not mpn:
        return ""

    suffixes = PACKAGING_SUFFIXES
    if manufacturer:
        suffixes = suffixes + MANUFACTURER_PACKAGING_SUFFIXES.get(manufacturer, ())

    for pattern in suffixes:
        stripped = pattern.sub("", mpn)
        # Never strip a suffix down to nothing
        if stripped:
            mpn = stripped
    return mpn
