"""Manufacturer tables for connectors: Würth Elektronik, Molex, JST, TE Connectivity.

Würth's WR-PHD/WR-BHD headers encode everything positionally in an 11-digit
number, e.g. 61300211121:

    series      digits 1-5    61300
    pin count   digits 4-6    002
    pitch code  digits 8-10   112
    variant     digit 11      1

Würth magnetics and LEDs share the manufacturer table but not the layout.
"""

from ..types import ComponentType as T
from .engine import HandlerSpec, ReplacementRule, rule, strip_leading_zeros

# =============================================================================
# WÜRTH ELEKTRONIK
# =============================================================================

WURTH_PITCH: dict[str, str] = {
    "61300": "2.54",
    "61301": "2.00",
    "61302": "1.27",
    "61303": "1.00",
}

WURTH_LED_COLORS: dict[str, str] = {
    "RS": "red",
    "GS": "green",
    "BS": "blue",
    "YS": "yellow",
    "VS": "bright green",
    "WS": "white",
    "SS": "orange",
}

WURTH_LED_SIZES: dict[str, str] = {
    "040": "0402",
    "060": "0603",
    "080": "0805",
    "120": "1206",
}

_WURTH_HEADER = r"^6[12][0-9]{9}$"

WURTH = HandlerSpec(
    manufacturer_id="wurth",
    patterns=(
        (T.CONNECTOR, _WURTH_HEADER),
        (T.CONNECTOR_WURTH, _WURTH_HEADER),
        (T.INDUCTOR, r"^7427[0-9]{3}"),
        (T.INDUCTOR, r"^744[0-9]{4}"),
        (T.LED, r"^150[0-9]{3}[A-Z]{2}[0-9]{5}$"),
    ),
    series=(
        rule(r"^(6[12][0-9]{3})[0-9]{6}$"),
        rule(r"^(7427[0-9]{2}|744[0-9]{3})"),
        rule(r"^(150[0-9]{3})[A-Z]{2}"),
    ),
    package=(
        rule(r"^6[12][0-9]{8}([0-9])$"),
        rule(r"^150([0-9]{3})[A-Z]{2}", table=WURTH_LED_SIZES),
    ),
    pin_count=(
        rule(r"^6[12][0-9]([0-9]{3})[0-9]{5}$"),
    ),
    attributes={
        "pitch_code": (rule(r"^6[12][0-9]{5}([0-9]{3})[0-9]$"),),
        "variant_code": (
            rule(r"^6[12][0-9]{8}([0-9])$"),
            rule(r"^150[0-9]{3}([A-Z]{2})", table=WURTH_LED_COLORS),
        ),
        "pitch": (rule(r"^(6130[0-3])[0-9]{6}$", table=WURTH_PITCH),),
        "family": (
            rule(r"^613[0-9]{8}$", value="WR-PHD"),
            rule(r"^615[0-9]{8}$", value="WR-TBL"),
            rule(r"^622[0-9]{8}$", value="WR-BHD"),
        ),
    },
    replacement=ReplacementRule(
        # Headers differing only in the variant digit
        core=(rule(r"^(6[12][0-9]{8})[0-9]$"),),
    ),
)

# =============================================================================
# MOLEX
# =============================================================================

MOLEX_PITCH: dict[str, str] = {
    "53047": "1.25",
    "53048": "1.25",
    "51021": "1.25",
    "22-23": "2.54",
    "22-27": "2.54",
    "43650": "3.00",
    "43045": "3.00",
    "43025": "3.00",
}

MOLEX_FAMILIES: dict[str, str] = {
    "53047": "PicoBlade",
    "53048": "PicoBlade",
    "51021": "PicoBlade",
    "22-23": "KK 254",
    "22-27": "KK 254",
    "43650": "Micro-Fit 3.0",
    "43045": "Micro-Fit 3.0",
    "43025": "Micro-Fit 3.0",
}

MOLEX = HandlerSpec(
    manufacturer_id="molex",
    patterns=(
        (T.CONNECTOR, r"^[0-9]{5}-[0-9]{4}$"),
        (T.CONNECTOR, r"^22-[0-9]{2}-[0-9]{4}$"),
        (T.CONNECTOR_MOLEX, r"^[0-9]{5}-[0-9]{4}$"),
        (T.CONNECTOR_MOLEX, r"^22-[0-9]{2}-[0-9]{4}$"),
    ),
    series=(
        rule(r"^([0-9]{5})-[0-9]{4}$"),
        rule(r"^(22-[0-9]{2})-[0-9]{4}$"),
    ),
    pin_count=(
        # 53047-[02]10, 22-23-2[02]1
        rule(r"^[0-9]{5}-([0-9]{2})[0-9]{2}$", transform=strip_leading_zeros),
        rule(r"^22-[0-9]{2}-[0-9]([0-9]{2})[0-9]$", transform=strip_leading_zeros),
    ),
    attributes={
        "pitch": (rule(r"^([0-9]{5}|22-[0-9]{2})-", table=MOLEX_PITCH),),
        "family": (rule(r"^([0-9]{5}|22-[0-9]{2})-", table=MOLEX_FAMILIES),),
        "variant_code": (
            rule(r"^[0-9]{5}-[0-9]{2}([0-9]{2})$"),
            rule(r"^22-[0-9]{2}-[0-9]{3}([0-9])$"),
        ),
    },
    replacement=ReplacementRule(
        core=(
            rule(r"^([0-9]{5}-[0-9]{2})[0-9]{2}$"),
            rule(r"^(22-[0-9]{2}-[0-9]{3})[0-9]$"),
        ),
    ),
)

# =============================================================================
# JST
# =============================================================================

JST_PITCH: dict[str, str] = {
    "XH": "2.50",
    "PH": "2.00",
    "ZH": "1.50",
    "SH": "1.00",
    "GH": "1.25",
    "SRSS": "1.00",
    "EH": "2.50",
    "VH": "3.96",
}

_JST_HEADER = r"^(?:[BS]|SM)([0-9]{1,2})B-([A-Z]+)"
_JST_HOUSING = r"^(XH|PH|ZH|SH|GH|EH|VH)[PR]-([0-9]{1,2})"

JST = HandlerSpec(
    manufacturer_id="jst",
    patterns=(
        (T.CONNECTOR, r"^[BS][0-9]{1,2}B-"),
        (T.CONNECTOR, r"^SM[0-9]{2}B-"),
        (T.CONNECTOR, r"^(XH|PH|ZH|SH|GH|EH|VH)[PR]-[0-9]"),
        (T.CONNECTOR_JST, r"^[BS][0-9]{1,2}B-"),
        (T.CONNECTOR_JST, r"^SM[0-9]{2}B-"),
        (T.CONNECTOR_JST, r"^(XH|PH|ZH|SH|GH|EH|VH)[PR]-[0-9]"),
    ),
    series=(
        rule(_JST_HEADER, group=2),
        rule(_JST_HOUSING, group=1),
    ),
    package=(
        rule(r"^SM[0-9]{2}B-", value="SMD"),
        rule(r"^[BS][0-9]{1,2}B-", value="THT"),
    ),
    pin_count=(
        rule(_JST_HEADER, group=1),
        rule(_JST_HOUSING, group=2),
    ),
    attributes={
        "pitch": (
            rule(_JST_HEADER, group=2, table=JST_PITCH),
            rule(_JST_HOUSING, group=1, table=JST_PITCH),
        ),
        "variant_code": (
            rule(r"^SM[0-9]{2}B-", value="SMD"),
            rule(r"^B[0-9]{1,2}B-", value="top entry"),
            rule(r"^S[0-9]{1,2}B-", value="side entry"),
            rule(_JST_HOUSING, value="housing"),
        ),
    },
    replacement=ReplacementRule(
        core=(
            rule(r"^((?:[BS]|SM)[0-9]{1,2}B-[A-Z]+)"),
            rule(r"^([A-Z]{3}-[0-9]{1,2})"),
        ),
        must_match=("variant_code",),
    ),
)

# =============================================================================
# TE CONNECTIVITY
# =============================================================================

TE_PITCH: dict[str, str] = {
    "282837": "5.08",
    "282836": "5.00",
    "5-826": "2.54",
    "5-103": "2.54",
    "640456": "2.54",
    "640457": "2.54",
    "350211": "4.14",
}

TE_FAMILIES: dict[str, str] = {
    "282837": "Terminal Block",
    "282836": "Terminal Block",
    "5-826": "PCB Header",
    "5-103": "PCB Header",
    "640456": "IDC Connector",
    "640457": "IDC Connector",
    "1-770966": "Rectangular Connector",
    "1-770967": "Rectangular Connector",
    "350211": "MATE-N-LOK",
}


def _terminal_positions(text: str) -> str | None:
    """'1-282836-0' -> '10', '282836-2' -> '2'. The prefix digit counts tens."""
    prefix, _, rest = text.rpartition("-")
    tens = prefix.split("-")[0] if prefix.count("-") else "0"
    positions = int(tens) * 10 + int(rest)
    return str(positions) if positions else None


TE = HandlerSpec(
    manufacturer_id="te",
    patterns=(
        (T.CONNECTOR, r"^282[0-9]{3}-[0-9]+$"),
        (T.CONNECTOR, r"^[12]-[0-9]{6}-[0-9]+$"),
        (T.CONNECTOR, r"^5-[0-9]{3}-[0-9]+"),
        (T.CONNECTOR, r"^64[0-9]{4}-[0-9]+"),
        (T.CONNECTOR, r"^350[0-9]{3}-[0-9]+"),
        (T.CONNECTOR_TE, r"^282[0-9]{3}-[0-9]+$"),
        (T.CONNECTOR_TE, r"^[12]-[0-9]{6}-[0-9]+$"),
        (T.CONNECTOR_TE, r"^5-[0-9]{3}-[0-9]+"),
        (T.CONNECTOR_TE, r"^64[0-9]{4}-[0-9]+"),
        (T.CONNECTOR_TE, r"^350[0-9]{3}-[0-9]+"),
    ),
    series=(
        rule(r"^(5-[0-9]{3}|1-77096[67])-"),
        rule(r"^(?:[0-9]-)?([0-9]{6})-[0-9]+$"),
    ),
    pin_count=(
        rule(r"^(?:[12]-)?282[0-9]{3}-[0-9]$", group=0, transform=_terminal_positions),
    ),
    attributes={
        "pitch": (
            rule(r"^(5-[0-9]{3})-", table=TE_PITCH),
            rule(r"^(?:[0-9]-)?([0-9]{6})-", table=TE_PITCH),
        ),
        "family": (
            rule(r"^(5-[0-9]{3}|1-77096[67])-", table=TE_FAMILIES),
            rule(r"^(?:[0-9]-)?([0-9]{6})-", table=TE_FAMILIES),
        ),
    },
    replacement=ReplacementRule(
        core=(rule(r"^((?:[0-9]-)?[0-9]{3,7})-"),),
        must_match=("pin_count",),
    ),
)
