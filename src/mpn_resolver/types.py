"""Core value types shared by the registry, handlers, detector and calculators."""

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class ComponentType(Enum):
    """Component taxonomy.

    Three kinds of members live here:
    - base types (RESISTOR, MOSFET, ...), whose base_type is themselves
    - family types (RL78_MCU, STM32_MCU, ...), which can be a primary
      classification but roll up to a base type
    - manufacturer sub-variant tags (MOSFET_NEXPERIA, ...), which are only
      ever reported next to the primary type, never instead of it
    """

    UNKNOWN = "unknown"

    # Passives
    RESISTOR = "resistor"
    CAPACITOR = "capacitor"
    INDUCTOR = "inductor"
    CRYSTAL = "crystal"

    # Discretes
    MOSFET = "mosfet"
    TRANSISTOR = "transistor"
    DIODE = "diode"
    LED = "led"
    ESD_PROTECTION = "esd_protection"

    # ICs
    MICROCONTROLLER = "microcontroller"
    LOGIC_IC = "logic_ic"
    VOLTAGE_REGULATOR = "voltage_regulator"
    OPAMP = "opamp"
    INTERFACE_IC = "interface_ic"
    MEMORY = "memory"
    SENSOR = "sensor"
    RF_IC = "rf_ic"

    # Electromechanical
    CONNECTOR = "connector"

    # MCU families
    RL78_MCU = "rl78_mcu"
    RX_MCU = "rx_mcu"
    RA_MCU = "ra_mcu"
    RH850_MCU = "rh850_mcu"
    R8C_MCU = "r8c_mcu"
    STM32_MCU = "stm32_mcu"
    PIC_MCU = "pic_mcu"
    AVR_MCU = "avr_mcu"
    ESP32_MCU = "esp32_mcu"

    # Manufacturer sub-variant tags
    MOSFET_NEXPERIA = "mosfet_nexperia"
    MOSFET_INFINEON = "mosfet_infineon"
    LOGIC_IC_NEXPERIA = "logic_ic_nexperia"
    LOGIC_IC_TI = "logic_ic_ti"
    RESISTOR_CHIP_YAGEO = "resistor_chip_yageo"
    RESISTOR_CHIP_VISHAY = "resistor_chip_vishay"
    CAPACITOR_CERAMIC_MURATA = "capacitor_ceramic_murata"
    CAPACITOR_CERAMIC_SAMSUNG = "capacitor_ceramic_samsung"
    CONNECTOR_WURTH = "connector_wurth"
    CONNECTOR_MOLEX = "connector_molex"
    CONNECTOR_JST = "connector_jst"
    CONNECTOR_TE = "connector_te"
    RF_IC_QORVO = "rf_ic_qorvo"
    RF_IC_SKYWORKS = "rf_ic_skyworks"
    SENSOR_BOSCH = "sensor_bosch"
    SENSOR_SENSIRION = "sensor_sensirion"

    @property
    def base_type(self) -> "ComponentType":
        return ComponentType[_BASE_TYPES.get(self.name, self.name)]

    @property
    def is_variant_tag(self) -> bool:
        return self.name in _VARIANT_TAGS

    @classmethod
    def from_name(cls, name: "str | ComponentType") -> "ComponentType":
        """Resolve 'MOSFET', 'mosfet' or a ComponentType to a member.

        Raises ValueError for names that are not in the taxonomy.
        """
        if isinstance(name, ComponentType):
            return name
        key = (name or "").strip()
        if key.upper() in cls.__members__:
            return cls[key.upper()]
        try:
            return cls(key.lower())
        except ValueError:
            raise ValueError(f"Unknown component type: {name!r}") from None


_BASE_TYPES: dict[str, str] = {
    "RL78_MCU": "MICROCONTROLLER",
    "RX_MCU": "MICROCONTROLLER",
    "RA_MCU": "MICROCONTROLLER",
    "RH850_MCU": "MICROCONTROLLER",
    "R8C_MCU": "MICROCONTROLLER",
    "STM32_MCU": "MICROCONTROLLER",
    "PIC_MCU": "MICROCONTROLLER",
    "AVR_MCU": "MICROCONTROLLER",
    "ESP32_MCU": "MICROCONTROLLER",
    "MOSFET_NEXPERIA": "MOSFET",
    "MOSFET_INFINEON": "MOSFET",
    "LOGIC_IC_NEXPERIA": "LOGIC_IC",
    "LOGIC_IC_TI": "LOGIC_IC",
    "RESISTOR_CHIP_YAGEO": "RESISTOR",
    "RESISTOR_CHIP_VISHAY": "RESISTOR",
    "CAPACITOR_CERAMIC_MURATA": "CAPACITOR",
    "CAPACITOR_CERAMIC_SAMSUNG": "CAPACITOR",
    "CONNECTOR_WURTH": "CONNECTOR",
    "CONNECTOR_MOLEX": "CONNECTOR",
    "CONNECTOR_JST": "CONNECTOR",
    "CONNECTOR_TE": "CONNECTOR",
    "RF_IC_QORVO": "RF_IC",
    "RF_IC_SKYWORKS": "RF_IC",
    "SENSOR_BOSCH": "SENSOR",
    "SENSOR_SENSIRION": "SENSOR",
}

_VARIANT_TAGS: frozenset[str] = frozenset(
    name for name, base in _BASE_TYPES.items() if not name.endswith("_MCU")
)


# Attribute names used in ExtractedAttributes dicts
ATTRIBUTE_NAMES: tuple[str, ...] = (
    "series", "pin_count", "pitch_code", "package_code", "variant_code",
    "temperature_grade", "voltage_class",
    # category values
    "value", "tolerance", "size", "dielectric", "voltage_rating",
    "frequency_band", "power", "gain", "function", "family", "pitch",
    "output_voltage",
)


@dataclass(frozen=True)
class PatternEntry:
    """One registered pattern. Never deduplicated, never removed.

    strength is the length of the pattern's literal prefix; index is the
    registration position and the last-resort ordering key.
    """
    component_type: ComponentType
    pattern: re.Pattern[str]
    manufacturer: str | None = None
    priority: int = 0
    index: int = 0
    strength: int = 0

    @property
    def is_scoped(self) -> bool:
        return self.manufacturer is not None

    def matches(self, mpn: str) -> bool:
        return bool(mpn) and self.pattern.match(mpn) is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "component_type": self.component_type.name,
            "pattern": self.pattern.pattern,
            "manufacturer": self.manufacturer,
            "strength": self.strength,
        }


@dataclass(frozen=True)
class ComponentRecord:
    """A classified part ready for comparison."""
    mpn: str
    normalized: str
    component_type: ComponentType
    manufacturer: str | None = None
    attributes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class CompatibilityVerdict:
    is_compatible: bool
    score: float
    reasons: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "compatible": self.is_compatible,
            "score": round(self.score, 3),
            "reasons": list(self.reasons),
        }
