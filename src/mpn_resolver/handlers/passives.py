"""Manufacturer tables for passives: Yageo, Murata, Samsung Electro-Mechanics.

Values are kept in the manufacturer's own code ("10K", "104", "10N"); the
similarity calculators parse them into numbers.
"""

from ..types import ComponentType as T
from .discretes import TOLERANCE_CODES
from .engine import HandlerSpec, ReplacementRule, rule, through_last_digit

# =============================================================================
# YAGEO
# =============================================================================

YAGEO_VOLTAGE_CODES: dict[str, str] = {
    "5": "6.3",
    "6": "10",
    "7": "16",
    "8": "25",
    "9": "50",
    "0": "100",
    "A": "200",
}

CERAMIC_DIELECTRICS: dict[str, str] = {
    "NPO": "C0G",
    "NP0": "C0G",
    "C0G": "C0G",
    "X5R": "X5R",
    "X7R": "X7R",
    "X7S": "X7S",
    "X6S": "X6S",
    "Y5V": "Y5V",
}

_YAGEO_CC = r"^CC[0-9]{4}[A-Z]{2}([A-Z0-9]{3})([0-9A])[A-Z]{2}([0-9R]{3})"

YAGEO = HandlerSpec(
    manufacturer_id="yageo",
    patterns=(
        (T.RESISTOR, r"^RC[0-9]{4}"),
        (T.RESISTOR, r"^RT[0-9]{4}"),
        (T.RESISTOR, r"^AC[0-9]{4}"),
        (T.RESISTOR_CHIP_YAGEO, r"^RC[0-9]{4}"),
        (T.RESISTOR_CHIP_YAGEO, r"^AC[0-9]{4}"),
        (T.CAPACITOR, r"^CC[0-9]{4}"),
    ),
    series=(
        rule(r"^(RC|RT|AC|CC)[0-9]{4}"),
    ),
    package=(
        rule(r"^(?:RC|RT|AC|CC)([0-9]{4})"),
    ),
    attributes={
        "size": (rule(r"^(?:RC|RT|AC|CC)([0-9]{4})"),),
        "tolerance": (rule(r"^(?:RC|RT|AC|CC)[0-9]{4}([A-Z])", table=TOLERANCE_CODES),),
        "value": (
            # RC0603FR-07[10K]L
            rule(r"^(?:RC|RT|AC)[0-9]{4}[A-Z]{2}-[0-9]{2}([0-9]+[RKM][0-9]*)"),
            rule(_YAGEO_CC, group=3),
        ),
        "dielectric": (rule(_YAGEO_CC, group=1, table=CERAMIC_DIELECTRICS),),
        "voltage_rating": (rule(_YAGEO_CC, group=2, table=YAGEO_VOLTAGE_CODES),),
    },
    replacement=ReplacementRule(
        # Packaging letter and reel code do not change the part
        core=(
            rule(r"^((?:RC|RT|AC)[0-9]{4}[A-Z])[A-Z]-[0-9]{2}([0-9]+[RKM][0-9]*)", value=r"\1-\2"),
            rule(r"^(CC[0-9]{4}[A-Z])[A-Z]([A-Z0-9]{3}[0-9A][A-Z]{2}[0-9R]{3})", value=r"\1\2"),
        ),
    ),
)

# =============================================================================
# MURATA
# =============================================================================

MURATA_SIZES: dict[str, str] = {
    "02": "01005",
    "03": "0201",
    "15": "0402",
    "18": "0603",
    "21": "0805",
    "31": "1206",
    "32": "1210",
    "43": "1812",
    "55": "2220",
}

MURATA_DIELECTRICS: dict[str, str] = {
    "R7": "X7R",
    "R6": "X5R",
    "5C": "C0G",
    "C7": "X7S",
    "D7": "X7T",
    "F5": "Y5V",
}

MURATA_VOLTAGES: dict[str, str] = {
    "0E": "2.5",
    "0G": "4",
    "0J": "6.3",
    "1A": "10",
    "1C": "16",
    "1E": "25",
    "1V": "35",
    "1H": "50",
    "2A": "100",
    "2E": "250",
}

# GRM 18 8 R7 1H 104 K A93D
_MURATA_CAP = r"^(?:GRM|GRJ|GRT|GCM|GCJ)[0-9]{2}[0-9A-Z]([0-9A-Z]{2})([0-9][A-Z])([0-9R]{3})([A-Z])"
# LQG 15 HS 10N J 02D
_MURATA_INDUCTOR = r"^(?:LQG|LQM|LQW)[0-9]{2}[A-Z]{2}([0-9R]+[NRU]?[0-9]*)([A-Z])"

MURATA = HandlerSpec(
    manufacturer_id="murata",
    patterns=(
        (T.CAPACITOR, r"^GRM[0-9]"),
        (T.CAPACITOR, r"^GRJ[0-9]"),
        (T.CAPACITOR, r"^GRT[0-9]"),
        (T.CAPACITOR, r"^GCM[0-9]"),
        (T.CAPACITOR, r"^GCJ[0-9]"),
        (T.CAPACITOR_CERAMIC_MURATA, r"^GRM[0-9]"),
        (T.CAPACITOR_CERAMIC_MURATA, r"^GCM[0-9]"),
        (T.INDUCTOR, r"^LQG[0-9]"),
        (T.INDUCTOR, r"^LQH[0-9]"),
        (T.INDUCTOR, r"^LQM[0-9]"),
        (T.INDUCTOR, r"^LQW[0-9]"),
        (T.INDUCTOR, r"^DFE[0-9]"),
        (T.INDUCTOR, r"^BLM[0-9]"),
        (T.CRYSTAL, r"^CSTNE"),
        (T.CRYSTAL, r"^XRCGB"),
    ),
    series=(
        rule(r"^(GRM|GRJ|GRT|GCM|GCJ|LQG|LQH|LQM|LQW|DFE|BLM|CSTNE|XRCGB)"),
    ),
    package=(
        rule(r"^(?:GRM|GRJ|GRT|GCM|GCJ|LQG|LQM|LQW|BLM)([0-9]{2})", table=MURATA_SIZES),
    ),
    attributes={
        "size": (rule(r"^(?:GRM|GRJ|GRT|GCM|GCJ|LQG|LQM|LQW|BLM)([0-9]{2})", table=MURATA_SIZES),),
        "dielectric": (rule(_MURATA_CAP, group=1, table=MURATA_DIELECTRICS),),
        "voltage_rating": (rule(_MURATA_CAP, group=2, table=MURATA_VOLTAGES),),
        "value": (
            rule(_MURATA_CAP, group=3),
            rule(_MURATA_INDUCTOR, group=1),
        ),
        "tolerance": (
            rule(_MURATA_CAP, group=4, table=TOLERANCE_CODES),
            rule(_MURATA_INDUCTOR, group=2, table=TOLERANCE_CODES),
        ),
    },
    replacement=ReplacementRule(
        core=(
            rule(r"^((?:GRM|GRJ|GRT|GCM|GCJ)[0-9]{2}[0-9A-Z][0-9A-Z]{2}[0-9][A-Z][0-9R]{3}[A-Z])"),
            rule(r"^((?:LQG|LQM|LQW)[0-9]{2}[A-Z]{2}[0-9R]+[NRU]?[0-9]*[A-Z])"),
            rule(r"^.*", group=0, transform=through_last_digit),
        ),
    ),
)

# =============================================================================
# SAMSUNG ELECTRO-MECHANICS
# =============================================================================

SAMSUNG_SIZES: dict[str, str] = {
    "03": "0201",
    "05": "0402",
    "10": "0603",
    "21": "0805",
    "31": "1206",
    "32": "1210",
}

SAMSUNG_DIELECTRICS: dict[str, str] = {
    "A": "X5R",
    "B": "X7R",
    "C": "C0G",
    "F": "Y5V",
    "X": "X6S",
}

SAMSUNG_VOLTAGES: dict[str, str] = {
    "R": "4",
    "Q": "6.3",
    "P": "10",
    "O": "16",
    "A": "25",
    "L": "35",
    "B": "50",
    "C": "100",
    "D": "200",
}

# CL 10 A 106 K P 8NNNC
_SAMSUNG_CAP = r"^CL([0-9]{2})([A-Z])([0-9R]{3})([A-Z])([A-Z])"

SAMSUNG = HandlerSpec(
    manufacturer_id="samsung",
    patterns=(
        (T.CAPACITOR, r"^CL[0-9]{2}[A-Z]"),
        (T.CAPACITOR_CERAMIC_SAMSUNG, r"^CL[0-9]{2}[A-Z]"),
        (T.INDUCTOR, r"^CIG[0-9]"),
        (T.INDUCTOR, r"^CIH[0-9]"),
    ),
    series=(
        rule(r"^(CL|CIG|CIH)[0-9]"),
    ),
    package=(
        rule(r"^(?:CL|CIG|CIH)([0-9]{2})", table=SAMSUNG_SIZES),
    ),
    attributes={
        "size": (rule(r"^(?:CL|CIG|CIH)([0-9]{2})", table=SAMSUNG_SIZES),),
        "dielectric": (rule(_SAMSUNG_CAP, group=2, table=SAMSUNG_DIELECTRICS),),
        "value": (
            rule(_SAMSUNG_CAP, group=3),
            rule(r"^CI[GH][0-9]{2}[A-Z]([0-9R]{3})"),
        ),
        "tolerance": (
            rule(_SAMSUNG_CAP, group=4, table=TOLERANCE_CODES),
            rule(r"^CI[GH][0-9]{2}[A-Z][0-9R]{3}([A-Z])", table=TOLERANCE_CODES),
        ),
        "voltage_rating": (rule(_SAMSUNG_CAP, group=5, table=SAMSUNG_VOLTAGES),),
    },
    replacement=ReplacementRule(
        core=(
            rule(r"^(CL[0-9]{2}[A-Z][0-9R]{3}[A-Z][A-Z])"),
            rule(r"^(CI[GH][0-9]{2}[A-Z][0-9R]{3}[A-Z])"),
        ),
    ),
)
