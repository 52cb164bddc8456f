"""Manufacturer tables for RF front-end parts: Qorvo, Skyworks.

Frequency band, output power and gain are not encoded in most RF part
numbers. Known parts carry compiled-in datasheet values; otherwise a few
ordering tokens ("2G4", "-P20", "-G15") are recognised.
"""

from ..types import ComponentType as T
from .engine import HandlerSpec, ReplacementRule, Rule, rule

# Datasheet values: (band "min-maxMHz", output power dBm, gain dB)
RF_PART_DATA: dict[str, tuple[str, str, str]] = {
    "QPF4228": ("2400-2500MHz", "22", "32"),
    "QPF4528": ("5150-5925MHz", "20", "32"),
    "SKY85309": ("2400-2500MHz", "20", "31"),
    "SKY85728": ("5150-5925MHz", "20", "32"),
    "SE2435L": ("860-930MHz", "30", "27"),
    "SKY66122": ("860-930MHz", "30", "28"),
}

RF_BAND_TOKENS: tuple[tuple[str, str], ...] = (
    (r"(?:2G4|24G)", "2400-2500MHz"),
    (r"5G", "4900-5925MHz"),
    (r"6G", "5925-7125MHz"),
    (r"(?:SUB|LTE)", "300-1000MHz"),
    (r"UWB", "3100-10600MHz"),
)

QORVO_PACKAGES: dict[str, str] = {
    "TR1": "QFN",
    "BU": "WLCSP",
    "EN": "DFN",
    "GM": "MCM",
    "ML": "QFN",
    "CS": "CSP",
    "LAM": "LAMINATE",
}


def _part_data_rules(field: int) -> tuple[Rule, ...]:
    return tuple(rule(rf"^{part}", value=data[field]) for part, data in RF_PART_DATA.items())


_FREQUENCY_RULES = _part_data_rules(0) + tuple(rule(token, value=band) for token, band in RF_BAND_TOKENS)
_POWER_RULES = _part_data_rules(1) + (rule(r"-P([0-9]{2})"),)
_GAIN_RULES = _part_data_rules(2) + (rule(r"-G([0-9]{2})"),)

_RF_CORE = ReplacementRule(core=(rule(r"^([A-Z]+[0-9]{4,5}[A-Z]?)"),))

# =============================================================================
# QORVO (includes former TriQuint and RFMD parts)
# =============================================================================

QORVO = HandlerSpec(
    manufacturer_id="qorvo",
    patterns=(
        (T.RF_IC, r"^QPA[0-9]{4}"),   # power amplifiers
        (T.RF_IC, r"^TQP[0-9]{4}"),
        (T.RF_IC, r"^QPC[0-9]{4}"),   # switches
        (T.RF_IC, r"^RFSW[0-9]{4}"),
        (T.RF_IC, r"^PE4[0-9]{4}"),
        (T.RF_IC, r"^QPF[0-9]{4}"),   # front-end modules
        (T.RF_IC, r"^RFFM[0-9]{4}"),
        (T.RF_IC, r"^RF5[0-9]{3}"),
        (T.RF_IC, r"^QPL[0-9]{4}"),   # LNAs
        (T.RF_IC, r"^SPF[0-9]{4}"),
        (T.RF_IC, r"^QPM[0-9]{4}"),   # mixers
        (T.RF_IC_QORVO, r"^(QPA|TQP|QPC|QPF|QPL|QPM|SPF)[0-9]{4}"),
        (T.RF_IC_QORVO, r"^(RFSW|RFFM)[0-9]{4}"),
    ),
    series=(
        rule(r"^(QPA|TQP|QPC|RFSW|PE4|QPF|RFFM|RF5|QPL|SPF|QPM)[0-9]"),
    ),
    package=(
        rule(r"-(TR1|BU|EN|GM|ML|CS|LAM)$", table=QORVO_PACKAGES),
        rule(r"(QFN|DFN|LGA)"),
    ),
    attributes={
        "frequency_band": _FREQUENCY_RULES,
        "power": _POWER_RULES,
        "gain": _GAIN_RULES,
    },
    replacement=_RF_CORE,
)

# =============================================================================
# SKYWORKS
# =============================================================================

SKYWORKS = HandlerSpec(
    manufacturer_id="skyworks",
    patterns=(
        (T.RF_IC, r"^SKY[0-9]{5}"),
        (T.RF_IC, r"^SE[0-9]{4}[A-Z]"),
        (T.RF_IC_SKYWORKS, r"^SKY[0-9]{5}"),
        (T.RF_IC_SKYWORKS, r"^SE[0-9]{4}[A-Z]"),
    ),
    series=(
        rule(r"^(SKY[0-9]{2})"),
        rule(r"^(SE)[0-9]{4}"),
    ),
    package=(
        rule(r"^SKY[0-9]{5}", value="QFN"),
        rule(r"^SE[0-9]{4}[A-Z]", value="QFN"),
    ),
    attributes={
        "variant_code": (rule(r"^SKY[0-9]{5}-([0-9]{2,3})"),),
        "frequency_band": _FREQUENCY_RULES,
        "power": _POWER_RULES,
        "gain": _GAIN_RULES,
    },
    replacement=_RF_CORE,
)
