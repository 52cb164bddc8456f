"""Manufacturer aliases for manufacturer hints.

Maps the names BOM tools and distributors use for a manufacturer to the short
ids the handler tables are keyed by. Keys are lowercase for case-insensitive
lookup.

NOTE: The ids themselves ("nexperia", "ti", ...) resolve without an entry
here; only include alternate names and abbreviations.
"""

import re

# Handler ids with a display name, one per manufacturer table
KNOWN_MANUFACTURERS: dict[str, str] = {
    "nexperia": "Nexperia",
    "wurth": "Wurth Elektronik",
    "renesas": "Renesas Electronics",
    "yageo": "YAGEO",
    "vishay": "Vishay Intertechnology",
    "murata": "Murata Electronics",
    "samsung": "Samsung Electro-Mechanics",
    "ti": "Texas Instruments",
    "st": "STMicroelectronics",
    "microchip": "Microchip Technology",
    "espressif": "Espressif Systems",
    "bosch": "Bosch Sensortec",
    "sensirion": "Sensirion",
    "qorvo": "Qorvo",
    "skyworks": "Skyworks Solutions",
    "molex": "Molex",
    "jst": "JST",
    "te": "TE Connectivity",
    "diodes": "Diodes Incorporated",
    "infineon": "Infineon Technologies",
}

MANUFACTURER_ALIASES: dict[str, str] = {
    # Discretes / logic
    "nxp": "nexperia",
    "nxp semiconductors": "nexperia",
    "nexperia b.v": "nexperia",
    "diodes inc": "diodes",
    "international rectifier": "infineon",
    "ir": "infineon",
    # Passives
    "würth": "wurth",
    "würth elektronik": "wurth",
    "we": "wurth",
    "phycomp": "yageo",
    "vishay intertech": "vishay",
    "vishay dale": "vishay",
    "vishay semiconductors": "vishay",
    "murata manufacturing": "murata",
    "semco": "samsung",
    # ICs
    "texas": "ti",
    "national semiconductor": "ti",
    "burr-brown": "ti",
    "stmicro": "st",
    "st microelectronics": "st",
    "microchip tech": "microchip",
    "atmel": "microchip",
    "intersil": "renesas",
    "idt": "renesas",
    # Sensors
    "bosch sensortec gmbh": "bosch",
    # RF
    "triquint": "qorvo",
    "rfmd": "qorvo",
    "rf micro devices": "qorvo",
    "skyworks solutions inc": "skyworks",
    # Connectors
    "molex, llc": "molex",
    "jst sales america": "jst",
    "j.s.t. mfg": "jst",
    "tyco": "te",
    "tyco electronics": "te",
    "amp": "te",
}

_TRAILING_PUNCT = re.compile(r"[\s.,]+$")


def resolve_manufacturer(name: str | None) -> str | None:
    """Resolve a manufacturer hint to a handler id.

    Examples:
        "NXP" -> "nexperia"
        "Würth Elektronik" -> "wurth"
        "ti" -> "ti"
        "Acme Parts" -> None
    """
    if not name:
        return None
    name_lower = _TRAILING_PUNCT.sub("", name.strip().lower())
    if not name_lower:
        return None

    if name_lower in KNOWN_MANUFACTURERS:
        return name_lower
    if name_lower in MANUFACTURER_ALIASES:
        return MANUFACTURER_ALIASES[name_lower]

    # Display names ("Texas Instruments") resolve too
    for manufacturer_id, display in KNOWN_MANUFACTURERS.items():
        if display.lower() == name_lower:
            return manufacturer_id
    return None
