"""Manufacturer tables for integrated circuits: TI, ST, Microchip, Renesas, Espressif."""

from ..packages import resolve_package
from ..types import ComponentType as T
from .engine import (
    HandlerSpec,
    ReplacementRule,
    after_last_digit,
    rule,
    strip_leading_zeros,
    through_last_digit,
)

# =============================================================================
# TEXAS INSTRUMENTS
# =============================================================================

TI_1117_PACKAGES: dict[str, str] = {
    "MP": "SOT-223",
    "MPX": "SOT-223",
    "DCY": "SOT-223",
    "DT": "TO-252",
    "S": "D2PAK",
    "T": "TO-220",
}

TI_LM317_PACKAGES: dict[str, str] = {
    "T": "TO-220",
    "KCS": "TO-220",
    "DCY": "SOT-223",
    "MP": "SOT-223",
}

CD4000_PACKAGES: dict[str, str] = {
    "E": "DIP",
    "M": "SOIC",
    "PW": "TSSOP",
    "NS": "SO",
}

MSP430_PACKAGES: dict[str, str] = {
    "IN": "PDIP",
    "IPW": "TSSOP",
    "IRHB": "QFN",
    "IRGE": "QFN",
    "IDA": "TSSOP",
    "IPM": "LQFP",
}

TI = HandlerSpec(
    manufacturer_id="ti",
    patterns=(
        # Logic
        (T.LOGIC_IC, r"^SN74[A-Z]*[0-9]"),
        (T.LOGIC_IC, r"^SN54[A-Z]*[0-9]"),
        (T.LOGIC_IC, r"^CD4[0-9]{3}"),
        (T.LOGIC_IC_TI, r"^SN74[A-Z]*[0-9]"),
        (T.LOGIC_IC_TI, r"^SN54[A-Z]*[0-9]"),
        # Op-amps
        (T.OPAMP, r"^LM358"),
        (T.OPAMP, r"^LM324"),
        (T.OPAMP, r"^TL07[0-9]"),
        (T.OPAMP, r"^TL08[0-9]"),
        (T.OPAMP, r"^OPA[0-9]"),
        (T.OPAMP, r"^TLV9[0-9]"),
        # Regulators
        (T.VOLTAGE_REGULATOR, r"^LM317"),
        (T.VOLTAGE_REGULATOR, r"^LM1117"),
        (T.VOLTAGE_REGULATOR, r"^TLV1117"),
        (T.VOLTAGE_REGULATOR, r"^TPS7[0-9A-Z]"),
        (T.VOLTAGE_REGULATOR, r"^LM78[0-9]{2}"),
        (T.VOLTAGE_REGULATOR, r"^UA78[0-9]{2}"),
        (T.VOLTAGE_REGULATOR, r"^LM2596"),
        # MCUs
        (T.MICROCONTROLLER, r"^MSP430"),
        # Interface
        (T.INTERFACE_IC, r"^SN65"),
        (T.INTERFACE_IC, r"^TCA9548"),
        (T.INTERFACE_IC, r"^TXS0[0-9]"),
    ),
    series=(
        rule(r"^(?:SN)?(?:74|54)([A-Z]*)[0-9]", value=r"74\1"),
        rule(r"^(CD4[0-9]{3})"),
        rule(r"^(?:LM|UA)78[0-9]{2}", value="78xx"),
        rule(r"^(?:LM|TLV)1117", value="1117"),
        rule(r"^(LM317|LM358|LM324|LM2596)"),
        rule(r"^(TL0[78][0-9])"),
        rule(r"^(OPA[0-9]+)"),
        rule(r"^(TLV9[0-9]+)"),
        rule(r"^(TPS7[0-9A-Z][0-9]{2})"),
        rule(r"^(MSP430[A-Z]+[0-9])"),
        rule(r"^(SN65[A-Z]*[0-9]+|TCA9548|TXS0[0-9]{3})"),
    ),
    package=(
        rule(r"^(?:SN)?(?:74|54)[A-Z]*[0-9]+G?[0-9]*[A-Z]?(DBV|DCK|DGK|DR|DW|PW|D|N)$",
             transform=resolve_package),
        rule(r"^CD4[0-9]{3}[A-Z]?(PW|NS|E|M)$", table=CD4000_PACKAGES),
        rule(r"^(?:LM358|LM324|TL0[78][0-9])[A-Z]?(DGK|DR|PW|D|P|N)$", transform=resolve_package),
        rule(r"^(?:LM|UA)78[0-9]{2}[A-Z]*?(CT|KC|KV|MP|T|S)$", transform=resolve_package),
        rule(r"^(?:LM|TLV)1117[A-Z]*?(?:LV)?[0-9]*(MPX|MP|DCY|DT|S|T)(?:-|$)", table=TI_1117_PACKAGES),
        rule(r"^LM317[A-Z]?(KCS|DCY|MP|T)$", table=TI_LM317_PACKAGES),
        rule(r"^MSP430\w+?(IPW|IN|IRHB|IRGE|IDA|IPM)[0-9]*$", table=MSP430_PACKAGES),
    ),
    pin_count=(
        rule(r"^MSP430\w+?(?:IPW|IN|IRHB|IRGE|IDA|IPM)([0-9]+)$"),
    ),
    attributes={
        "output_voltage": (
            rule(r"^(?:LM|UA)78([0-9]{2})", transform=strip_leading_zeros),
            rule(r"^TLV1117LV([0-9])([0-9])", value=r"\1.\2"),
            rule(r"^(?:LM|TLV)1117\w*-([0-9]+\.[0-9]+|[0-9]+|ADJ)$"),
            rule(r"^LM317", value="ADJ"),
        ),
        "family": (
            rule(r"^(?:SN)?(?:74|54)([A-Z]+)[0-9]"),
            rule(r"^CD4[0-9]{3}", value="CD4000"),
        ),
        "function": (
            rule(r"^(?:SN)?(?:74|54)[A-Z]*([0-9]+G?[0-9]*)"),
            rule(r"^CD(4[0-9]{3})"),
        ),
        "temperature_grade": (
            rule(r"^MSP430\w+?(I)(?:PW|N|RHB|RGE|DA|PM)[0-9]*$", value="-40~85C"),
        ),
    },
    replacement=ReplacementRule(
        core=(
            rule(r"^(?:SN)?((?:74|54)[A-Z]*[0-9]+G?[0-9]*)"),
            rule(r"^(CD4[0-9]{3})"),
            rule(r"^(?:LM|UA)(78[0-9]{2})"),
            rule(r"^(?:LM|TLV)(1117)"),
            rule(r"^(LM358|LM324|LM317|TL0[78][0-9])"),
            rule(r"^.*", group=0, transform=through_last_digit),
        ),
        must_match=("output_voltage",),
    ),
)

# =============================================================================
# STMICROELECTRONICS
# =============================================================================

# Pin-count letter after the line number: STM32F103[C]8T6
STM_PIN_COUNTS: dict[str, str] = {
    "F": "20",
    "G": "28",
    "K": "32",
    "T": "36",
    "S": "44",
    "C": "48",
    "R": "64",
    "V": "100",
    "Z": "144",
    "I": "176",
    "A": "169",
    "B": "208",
    "N": "216",
}

STM_PACKAGES: dict[str, str] = {
    "T": "LQFP",
    "H": "BGA",
    "U": "QFN",
    "Y": "WLCSP",
    "P": "TSSOP",
    "I": "UFBGA",
    "K": "UFBGA",
    "M": "SOIC",
}

STM_TEMPERATURE_GRADES: dict[str, str] = {
    "6": "-40~85C",
    "7": "-40~105C",
    "3": "-40~125C",
}

ST_REGULATOR_PACKAGES: dict[str, str] = {
    "V": "TO-220",
    "P": "TO-220F",
    "T": "TO-3",
    "D2T": "D2PAK",
    "DT": "DPAK",
    "Z": "TO-92",
    "S": "SOT-223",
}

_STM32_LINE = r"STM32[A-Z][0-9][0-9A-Z]{2}"
_STM8_LINE = r"STM8[SLA][0-9]{3}"

ST = HandlerSpec(
    manufacturer_id="st",
    patterns=(
        (T.STM32_MCU, r"^STM32[A-Z][0-9]"),
        (T.MICROCONTROLLER, r"^STM8[SLA]"),
        (T.VOLTAGE_REGULATOR, r"^L78[LM]?[0-9]{2}"),
        (T.VOLTAGE_REGULATOR, r"^L79[LM]?[0-9]{2}"),
        (T.VOLTAGE_REGULATOR, r"^LD1117"),
        (T.VOLTAGE_REGULATOR, r"^LD39[0-9]"),
        (T.SENSOR, r"^LIS[0-9]"),
        (T.SENSOR, r"^LSM[0-9]"),
        (T.SENSOR, r"^LPS[0-9]"),
        (T.SENSOR, r"^HTS221"),
        (T.OPAMP, r"^TSV[0-9]"),
        (T.ESD_PROTECTION, r"^ESDA[0-9]"),
        (T.ESD_PROTECTION, r"^USBLC6"),
    ),
    series=(
        rule(r"^(STM32[A-Z][0-9])"),
        rule(r"^(STM8[SLA])"),
        rule(r"^L78[LM]?[0-9]{2}", value="78xx"),
        rule(r"^L79[LM]?[0-9]{2}", value="79xx"),
        rule(r"^LD1117", value="1117"),
        rule(r"^(LD39[0-9]{2})"),
        rule(r"^((?:LIS|LSM|LPS)[0-9]+[A-Z]{2}[0-9]*|HTS221)"),
        rule(r"^(TSV[0-9]+)"),
        rule(r"^(ESDA[0-9]+|USBLC6)"),
    ),
    package=(
        rule(rf"^(?:{_STM32_LINE}|{_STM8_LINE})[A-Z][0-9A-Z]([A-Z])", table=STM_PACKAGES),
        rule(r"^L7[89][LM]?[0-9]{2}[A-Z]{0,2}?(D2T|DT|V|P|T|Z)$", table=ST_REGULATOR_PACKAGES),
        rule(r"^LD1117[A-Z]?(D2T|DT|S|V)", table=ST_REGULATOR_PACKAGES),
        rule(r"^USBLC6-[0-9]SC6", value="SOT-23-6"),
    ),
    pin_count=(
        rule(rf"^(?:{_STM32_LINE}|{_STM8_LINE})([A-Z])", table=STM_PIN_COUNTS),
    ),
    attributes={
        "variant_code": (
            rule(rf"^(?:{_STM32_LINE}|{_STM8_LINE})[A-Z]([0-9A-Z])"),
        ),
        "temperature_grade": (
            rule(rf"^(?:{_STM32_LINE}|{_STM8_LINE})[A-Z][0-9A-Z][A-Z]([0-9])", table=STM_TEMPERATURE_GRADES),
        ),
        "output_voltage": (
            rule(r"^L7[89][LM]?([0-9]{2})", transform=strip_leading_zeros),
            rule(r"^LD1117[A-Z]*?([0-9])([0-9])", value=r"\1.\2"),
        ),
    },
    replacement=ReplacementRule(
        core=(
            rule(rf"^((?:{_STM32_LINE}|{_STM8_LINE})[A-Z][0-9A-Z])"),
            rule(r"^L7([89])[LM]?([0-9]{2})", value=r"7\1\2"),
            rule(r"^LD(1117)"),
            rule(r"^.*", group=0, transform=through_last_digit),
        ),
        must_match=("output_voltage",),
    ),
)

# =============================================================================
# MICROCHIP (PIC, dsPIC, Atmel AVR, serial memories, analog)
# =============================================================================

# Package code after the temperature letter: PIC16F877A-I/[P]
MICROCHIP_PACKAGES: dict[str, str] = {
    "P": "PDIP",
    "SP": "SPDIP",
    "SO": "SOIC",
    "SN": "SOIC",
    "SM": "SOIJ",
    "ML": "QFN",
    "MV": "UQFN",
    "PT": "TQFP",
    "SS": "SSOP",
    "ST": "TSSOP",
    "MS": "MSOP",
    "TT": "SOT-23",
    "OT": "SOT-23-5",
    "MB": "SOT-89",
    "MC": "DFN",
}

MICROCHIP_TEMPERATURE_GRADES: dict[str, str] = {
    "I": "-40~85C",
    "E": "-40~125C",
    "H": "-40~150C",
}

_MICROCHIP_ORDERING = r"^(?:PIC|DSPIC|MCP|24|25|93)\w*-"

MICROCHIP = HandlerSpec(
    manufacturer_id="microchip",
    patterns=(
        (T.PIC_MCU, r"^PIC1[0268][A-Z]"),
        (T.PIC_MCU, r"^PIC24"),
        (T.PIC_MCU, r"^PIC32"),
        (T.PIC_MCU, r"^DSPIC"),
        (T.AVR_MCU, r"^ATMEGA"),
        (T.AVR_MCU, r"^ATTINY"),
        (T.AVR_MCU, r"^ATXMEGA"),
        (T.AVR_MCU, r"^AT90"),
        (T.MICROCONTROLLER, r"^ATSAM"),
        (T.MEMORY, r"^24LC"),
        (T.MEMORY, r"^24AA"),
        (T.MEMORY, r"^25LC"),
        (T.MEMORY, r"^93LC"),
        (T.MEMORY, r"^AT24C"),
        (T.MEMORY, r"^AT25"),
        (T.VOLTAGE_REGULATOR, r"^MCP17[0-9]{2}"),
        (T.OPAMP, r"^MCP6[0-9]{3}"),
        (T.INTERFACE_IC, r"^MCP2515"),
        (T.INTERFACE_IC, r"^MCP2551"),
        (T.INTERFACE_IC, r"^MCP2200"),
        (T.INTERFACE_IC, r"^MCP2221"),
        (T.INTERFACE_IC, r"^MCP23[0-9]"),
    ),
    series=(
        rule(r"^(PIC[0-9]+[A-Z]+[0-9]+[A-Z]?)"),
        rule(r"^(DSPIC[0-9]+[A-Z]+[0-9]+)"),
        rule(r"^(AT(?:MEGA|TINY|XMEGA)[0-9]+[A-Z]{0,2})"),
        rule(r"^(AT90[A-Z]+[0-9]+)"),
        rule(r"^(ATSAM[A-Z][0-9]{2})"),
        rule(r"^((?:24LC|24AA|25LC|93LC|AT24C|AT25)[0-9]+)"),
        rule(r"^(MCP[0-9]{4})"),
    ),
    package=(
        rule(r"^AT(?:MEGA|TINY|XMEGA)\w*-(?:[0-9]+)?([A-Z]{2})$", transform=resolve_package),
        rule(_MICROCHIP_ORDERING + r"\w*/([A-Z]{1,2})$", table=MICROCHIP_PACKAGES),
    ),
    attributes={
        "family": (
            rule(r"^(PIC[0-9]{2})"),
            rule(r"^DSPIC([0-9]{2})", value=r"DSPIC\1"),
            rule(r"^AT(MEGA|TINY|XMEGA)", value=r"AT\1"),
        ),
        "temperature_grade": (
            rule(_MICROCHIP_ORDERING + r"(?:[0-9]+)?([IEH])/", table=MICROCHIP_TEMPERATURE_GRADES),
        ),
        "output_voltage": (
            rule(r"^MCP17[0-9]{2}[A-Z]?-([0-9])([0-9])", value=r"\1.\2"),
        ),
    },
    replacement=ReplacementRule(
        core=(rule(r"^([^-]+)"),),
        must_match=("output_voltage",),
    ),
)

# =============================================================================
# RENESAS
# =============================================================================

# RL78 pin-count code, third character after "R5F1": R5F100[L]EAFB
RL78_PIN_COUNTS: dict[str, str] = {
    "6": "20",
    "7": "24",
    "8": "25",
    "A": "30",
    "B": "32",
    "C": "36",
    "E": "40",
    "F": "44",
    "G": "48",
    "J": "52",
    "L": "64",
    "M": "80",
    "P": "100",
    "S": "128",
}

# RX package letters at the end of the part number
RX_PACKAGE_PINS: dict[str, str] = {
    "FP": "100",
    "FN": "80",
    "FM": "64",
    "FK": "64",
    "FL": "48",
    "NE": "48",
    "NF": "40",
    "LA": "36",
    "FB": "144",
}

RENESAS_TEMPERATURE_GRADES: dict[str, str] = {
    "A": "-40~85C",
    "D": "-40~85C",
    "G": "-40~105C",
}

_RX_ORDERING = r"^R5F[5-7]\w*?"

RENESAS = HandlerSpec(
    manufacturer_id="renesas",
    patterns=(
        (T.R8C_MCU, r"^R5F21[0-9]+"),
        (T.R8C_MCU, r"^R8C[0-9]+"),
        (T.RL78_MCU, r"^R5F1[0-9]+"),
        (T.RX_MCU, r"^R5F[0-9]+"),
        (T.RA_MCU, r"^R7FA[0-9]+"),
        (T.RH850_MCU, r"^R7F7[0-9]+"),
        (T.MEMORY, r"^R1EX[0-9]+"),
        (T.MEMORY, r"^R1LV[0-9]+"),
    ),
    series=(
        rule(r"^(?:R5F21|R8C)", value="R8C"),
        rule(r"^R5F1", value="RL78"),
        rule(r"^R5F[0-9]", value="RX"),
        rule(r"^R7FA", value="RA"),
        rule(r"^R7F7", value="RH850"),
        rule(r"^R1EX", value="Flash"),
        rule(r"^R1LV", value="Low Voltage"),
    ),
    package=(
        rule(r"^R(?:[5-8]F|8C)\w*", group=0, transform=after_last_digit),
    ),
    pin_count=(
        rule(r"^R5F1[0-9]{2}([0-9A-Z])", table=RL78_PIN_COUNTS),
        rule(_RX_ORDERING + r"([A-Z]{2})(?:#\w*)?$", table=RX_PACKAGE_PINS),
    ),
    attributes={
        "temperature_grade": (
            rule(r"^R5F1[0-9]{2}[0-9A-Z]{2}([ADG])", table=RENESAS_TEMPERATURE_GRADES),
            rule(_RX_ORDERING + r"([DG])[A-Z]{2}(?:#\w*)?$", table=RENESAS_TEMPERATURE_GRADES),
        ),
    },
    replacement=ReplacementRule(
        core=(
            # RL78: through the ROM-size code, so LE and LC parts stay distinct
            rule(r"^(R5F1[0-9]{2}[0-9A-Z]{2})"),
            rule(r"^.*", group=0, transform=through_last_digit),
        ),
        must_match=("pin_count", "temperature_grade"),
    ),
)

# =============================================================================
# ESPRESSIF
# =============================================================================

ESPRESSIF = HandlerSpec(
    manufacturer_id="espressif",
    patterns=(
        (T.ESP32_MCU, r"^ESP32"),
        (T.MICROCONTROLLER, r"^ESP8266"),
        (T.MICROCONTROLLER, r"^ESP8285"),
    ),
    series=(
        rule(r"^(ESP32(?:-[SCH][0-9]+)?)"),
        rule(r"^(ESP8266|ESP8285)"),
    ),
    package=(
        rule(r"-(WROOM|WROVER|MINI|PICO)"),
        rule(r"^ESP32-?D0WD", value="QFN48"),
        rule(r"^ESP8266EX", value="QFN32"),
    ),
    attributes={
        "variant_code": (
            rule(r"-(N[0-9]+(?:R[0-9]+)?)(?:-|$)"),
            rule(r"-(?:WROOM|WROVER)-(\w+)"),
        ),
    },
    replacement=ReplacementRule(
        # Module name without the flash/PSRAM ordering code
        core=(rule(r"^(.*?)(?:-N[0-9]+(?:R[0-9]+)?)?$"),),
    ),
)
