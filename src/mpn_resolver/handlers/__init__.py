"""Manufacturer tables and the engine that interprets them."""

from .connectors import JST, MOLEX, TE, WURTH
from .discretes import DIODES, INFINEON, NEXPERIA, VISHAY
from .engine import (
    HandlerSpec,
    ManufacturerHandler,
    ReplacementRule,
    Rule,
    first_match,
    rule,
)
from .generic import GENERIC, GENERIC_PATTERNS
from .ics import ESPRESSIF, MICROCHIP, RENESAS, ST, TI
from .passives import MURATA, SAMSUNG, YAGEO
from .rf import QORVO, SKYWORKS
from .sensors import BOSCH, SENSIRION

# Registration order is the last-resort tie-break between scoped entries
HANDLER_SPECS: tuple[HandlerSpec, ...] = (
    NEXPERIA,
    WURTH,
    RENESAS,
    YAGEO,
    VISHAY,
    MURATA,
    SAMSUNG,
    TI,
    ST,
    MICROCHIP,
    ESPRESSIF,
    BOSCH,
    SENSIRION,
    QORVO,
    SKYWORKS,
    MOLEX,
    JST,
    TE,
    DIODES,
    INFINEON,
)

__all__ = [
    "HANDLER_SPECS",
    "GENERIC",
    "GENERIC_PATTERNS",
    "HandlerSpec",
    "ManufacturerHandler",
    "ReplacementRule",
    "Rule",
    "first_match",
    "rule",
]
