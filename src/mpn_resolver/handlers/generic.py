"""Manufacturer-independent patterns for common industry-standard parts.

These entries carry no manufacturer scope, so any manufacturer-specific entry
of the same strength outranks them. The GENERIC table also extracts what can
be read from an industry-standard number when no manufacturer table applies.
"""

from ..types import ComponentType as T
from .engine import HandlerSpec, ReplacementRule, rule, strip_leading_zeros, through_last_digit

GENERIC_PATTERNS: tuple[tuple[T, str], ...] = (
    # Bipolar transistors
    (T.TRANSISTOR, r"^2N[0-9]{4}"),
    (T.TRANSISTOR, r"^BC[0-9]{3}"),
    (T.TRANSISTOR, r"^MMBT[0-9]"),
    (T.TRANSISTOR, r"^PN2222"),
    (T.TRANSISTOR, r"^TIP[0-9]"),
    # MOSFETs
    (T.MOSFET, r"^IRF[0-9]"),
    (T.MOSFET, r"^BSS[0-9]"),
    (T.MOSFET, r"^2N7000"),
    (T.MOSFET, r"^AO[0-9]{4}"),
    (T.MOSFET, r"^SI[0-9]{4}"),
    # Diodes
    (T.DIODE, r"^1N[0-9]{4}"),
    (T.DIODE, r"^BAT[0-9]"),
    (T.DIODE, r"^BAV[0-9]"),
    (T.DIODE, r"^SS[0-9]{2}"),
    (T.DIODE, r"^MBR[0-9]"),
    (T.DIODE, r"^BZX[0-9]"),
    (T.ESD_PROTECTION, r"^SMBJ[0-9]"),
    (T.ESD_PROTECTION, r"^SMAJ[0-9]"),
    # LEDs
    (T.LED, r"^LTST-"),
    (T.LED, r"^KP-[0-9]"),
    # Logic
    (T.LOGIC_IC, r"^74[A-Z]{0,5}[0-9]{2,4}"),
    (T.LOGIC_IC, r"^SN74[A-Z]{0,5}[0-9]"),
    (T.LOGIC_IC, r"^MC74[A-Z]{0,5}[0-9]"),
    (T.LOGIC_IC, r"^CD4[0-9]{3}"),
    # Regulators
    (T.VOLTAGE_REGULATOR, r"^(LM|UA|L|MC)?78[0-9]{2}"),
    (T.VOLTAGE_REGULATOR, r"^(LM|UA|L|MC)?79[0-9]{2}"),
    (T.VOLTAGE_REGULATOR, r"^LM317"),
    (T.VOLTAGE_REGULATOR, r"^AMS1117"),
    (T.VOLTAGE_REGULATOR, r"^LM1117"),
    # Op-amps
    (T.OPAMP, r"^LM358"),
    (T.OPAMP, r"^LM324"),
    (T.OPAMP, r"^NE5532"),
    (T.OPAMP, r"^TL0[78][0-9]"),
    (T.OPAMP, r"^MCP60[0-9]{2}"),
    # MCUs
    (T.MICROCONTROLLER, r"^STM32"),
    (T.MICROCONTROLLER, r"^ATMEGA"),
    (T.MICROCONTROLLER, r"^PIC1[0268]"),
    # Memory
    (T.MEMORY, r"^24LC[0-9]"),
    (T.MEMORY, r"^W25Q[0-9]"),
    (T.MEMORY, r"^AT24C[0-9]"),
    # Crystals
    (T.CRYSTAL, r"^ABM[0-9]"),
    (T.CRYSTAL, r"^HC-?49"),
    # Sensors
    (T.SENSOR, r"^DS18B20"),
    (T.SENSOR, r"^DHT[0-9]"),
    (T.SENSOR, r"^LM35"),
    (T.SENSOR, r"^MPU-?[0-9]"),
    # Interface
    (T.INTERFACE_IC, r"^MAX232"),
    (T.INTERFACE_IC, r"^MAX3232"),
    (T.INTERFACE_IC, r"^CH340"),
    (T.INTERFACE_IC, r"^CP210[0-9]"),
    (T.INTERFACE_IC, r"^FT232"),
)

_LOGIC = r"^(?:SN|MC)?74([A-Z]{0,5})([0-9]+G?[0-9]*)"

GENERIC = HandlerSpec(
    manufacturer_id="generic",
    patterns=GENERIC_PATTERNS,
    series=(
        rule(r"^(?:SN|MC)?74([A-Z]{0,5})[0-9]", value=r"74\1"),
        rule(r"^(CD4[0-9]{3})"),
        rule(r"^(?:LM|UA|L|MC)?78[LM]?[0-9]{2}", value="78xx"),
        rule(r"^(?:LM|UA|L|MC)?79[LM]?[0-9]{2}", value="79xx"),
        rule(r"^(?:AMS|LM|TLV|LD)1117", value="1117"),
        rule(r"^(LM317|LM358|LM324|NE5532)"),
        rule(r"^([12]N[0-9]{4})"),
        rule(r"^(BC[0-9]{3})"),
    ),
    package=(
        rule(r"-(SMD|THT)$"),
    ),
    attributes={
        "family": (rule(_LOGIC, group=1),),
        "function": (rule(_LOGIC, group=2),),
        "output_voltage": (
            rule(r"^(?:LM|UA|L|MC)?7[89][LM]?([0-9]{2})", transform=strip_leading_zeros),
            rule(r"^(?:AMS|LM)1117\w*-([0-9]+\.[0-9]+|[0-9]+|ADJ)$"),
            rule(r"^LM317", value="ADJ"),
        ),
    },
    replacement=ReplacementRule(
        core=(
            rule(r"^(?:SN|MC)?(74[A-Z]{0,5}[0-9]+G?[0-9]*)"),
            rule(r"^(?:LM|UA|L|MC)?(7[89])[LM]?([0-9]{2})", value=r"\1\2"),
            rule(r"^(?:AMS|LM|TLV|LD)(1117)"),
            rule(r"^.*", group=0, transform=through_last_digit),
        ),
        must_match=("output_voltage",),
    ),
)
