"""Manufacturer tables for discrete semiconductors: Nexperia, Diodes Inc, Infineon, Vishay."""

from ..types import ComponentType as T
from .engine import HandlerSpec, ReplacementRule, rule, through_last_digit

# =============================================================================
# SHARED CODE TABLES
# =============================================================================

LOGIC_PACKAGES: dict[str, str] = {
    "D": "SOIC",
    "PW": "TSSOP",
    "GW": "SOT-353",
    "GV": "SOT-753",
    "GM": "XSON6",
    "BQ": "DHVQFN",
    "DB": "SSOP",
    "N": "DIP",
}

# Nexperia power MOSFET package letter (last letter of the suffix)
PSMN_PACKAGES: dict[str, str] = {
    "T": "LFPAK56",
    "U": "LFPAK88",
    "V": "LFPAK33",
    "B": "SOT754",
    "L": "TO-220",
    "F": "TO-220F",
}

PMEG_PACKAGES: dict[str, str] = {
    "H": "SOD123",
    "D": "SOD323F",
    "T": "SOD523",
}

_LOGIC_FAMILY = r"(AHCT|AHC|AUC|AUP|HCT|HC|ALVC|LVC|LV)"

# =============================================================================
# NEXPERIA
# =============================================================================

NEXPERIA = HandlerSpec(
    manufacturer_id="nexperia",
    patterns=(
        # MOSFETs
        (T.MOSFET, r"^PSMN[0-9]"),
        (T.MOSFET, r"^PSMP[0-9]"),
        (T.MOSFET, r"^PMV[0-9]"),
        (T.MOSFET, r"^BUK[0-9]"),
        (T.MOSFET, r"^2N7002"),
        (T.MOSFET, r"^BSS138"),
        (T.MOSFET_NEXPERIA, r"^PSMN[0-9]"),
        (T.MOSFET_NEXPERIA, r"^PSMP[0-9]"),
        (T.MOSFET_NEXPERIA, r"^PMV[0-9]"),
        (T.MOSFET_NEXPERIA, r"^BUK[0-9]"),
        (T.MOSFET_NEXPERIA, r"^2N7002"),
        # Bipolar transistors
        (T.TRANSISTOR, r"^PMBT[0-9]"),
        (T.TRANSISTOR, r"^PBSS[0-9]"),
        (T.TRANSISTOR, r"^PMP[0-9]"),
        (T.TRANSISTOR, r"^PXN[0-9]"),
        (T.TRANSISTOR, r"^MMBT[0-9]"),
        (T.TRANSISTOR, r"^BC[0-9]"),
        (T.TRANSISTOR, r"^BF[0-9]"),
        # Diodes
        (T.DIODE, r"^PMEG[0-9]"),
        (T.DIODE, r"^BAS[0-9]"),
        (T.DIODE, r"^BAT[0-9]"),
        (T.DIODE, r"^BAV[0-9]"),
        (T.DIODE, r"^BZX[0-9]"),
        (T.DIODE, r"^PZU[0-9]"),
        # ESD protection
        (T.ESD_PROTECTION, r"^PESD[0-9]"),
        (T.ESD_PROTECTION, r"^PRTR[0-9]"),
        (T.ESD_PROTECTION, r"^IP4[0-9]"),
        # Logic
        (T.LOGIC_IC, rf"^74{_LOGIC_FAMILY}[0-9]"),
        (T.LOGIC_IC_NEXPERIA, rf"^74{_LOGIC_FAMILY}[0-9]"),
        # Interface
        (T.INTERFACE_IC, r"^PCA[0-9]"),
        (T.INTERFACE_IC, r"^PCF[0-9]"),
        (T.INTERFACE_IC, r"^PTN[0-9]"),
    ),
    series=(
        rule(r"^(PMBT|PBSS|PSMN|PSMP|PMEG|PESD|PRTR|MMBT|BUK|PMV|PMP|PXN|PZU)"),
        rule(r"^BC([5-8])[0-9]", value=r"BC\1xx"),
        rule(r"^2N7002", value="2N7002"),
        rule(r"^BSS138", value="BSS138"),
        rule(r"^(BAV99|BAV70|BAT54|BAS16|BAS21)"),
        rule(r"^(BZX[0-9]{2,3})"),
        rule(rf"^74{_LOGIC_FAMILY}", value=r"74\1"),
        rule(r"^(PCA|PCF|PTN)[0-9]{4}"),
    ),
    package=(
        rule(r"^PSMN\w+-[0-9]+[A-Z]{2}([TUVBLF])$", table=PSMN_PACKAGES),
        rule(r"^(?:BAV|BAS|BAT)[0-9]+W", value="SOT323"),
        rule(r"^(?:PMBT|MMBT|BAV99|BAV70|BAT54|BAS16|BAS21|2N7002|BSS138|BZX84|BC8)", value="SOT23"),
        rule(r"^BC5", value="TO-92"),
        rule(r"^BZX(?:55|79)", value="DO-35"),
        rule(r"^BZX384", value="SOD323"),
        rule(r"^PESD\w*BL$", value="SOD882"),
        rule(r"^PESD\w*BA$", value="SOD323"),
        rule(r"^PMEG\w*?([HDT])$", table=PMEG_PACKAGES),
        rule(r"^74\w*?(D|PW|GW|GV|GM|BQ|DB|N)$", table=LOGIC_PACKAGES),
    ),
    attributes={
        "voltage_class": (
            rule(r"^BZX[0-9]+-[A-C]?([0-9]+V[0-9]*)$"),
            rule(r"^PZU([0-9]+V[0-9]*)"),
            rule(r"^PESD([0-9]+V[0-9]+)"),
            rule(r"^PSMN\w+?-([0-9]+)"),
            rule(r"^BUK[0-9]+-([0-9]+)"),
        ),
        "family": (
            rule(rf"^74{_LOGIC_FAMILY}"),
        ),
        "function": (
            rule(rf"^74{_LOGIC_FAMILY}([0-9]+G?[0-9]*)", group=2),
        ),
    },
    replacement=ReplacementRule(
        core=(
            rule(rf"^(74{_LOGIC_FAMILY}[0-9]+G?[0-9]*)"),
            rule(r"^.*", group=0, transform=through_last_digit),
        ),
    ),
)

# =============================================================================
# DIODES INCORPORATED
# =============================================================================

DIODES = HandlerSpec(
    manufacturer_id="diodes",
    patterns=(
        (T.MOSFET, r"^DMG[0-9]"),
        (T.MOSFET, r"^DMN[0-9]"),
        (T.MOSFET, r"^DMP[0-9]"),
        (T.VOLTAGE_REGULATOR, r"^AP2112"),
        (T.VOLTAGE_REGULATOR, r"^AP7361"),
        (T.VOLTAGE_REGULATOR, r"^AP[0-9]{4}"),
        (T.DIODE, r"^SBR[0-9]"),
        (T.DIODE, r"^BAV99"),
        (T.DIODE, r"^BAT54"),
        (T.DIODE, r"^B5819W"),
        (T.TRANSISTOR, r"^MMBT[0-9]"),
    ),
    series=(
        rule(r"^(DM[GNP][0-9]{4})"),
        rule(r"^(AP[0-9]{4})"),
        rule(r"^(SBR)[0-9]"),
        rule(r"^(BAV99|BAT54|B5819W)"),
        rule(r"^(MMBT)"),
    ),
    package=(
        rule(r"^DM[GNP][0-9]{3,4}[A-Z]{0,2}?(UW|LW|LK|U|L)$",
             table={"U": "SOT23", "L": "SOT23", "UW": "SOT323", "LW": "SOT323", "LK": "DFN1006"}),
        rule(r"^AP[0-9]{4}([A-Z])",
             table={"K": "SOT-23-5", "W": "SOT-25", "Y": "SOT-89", "D": "TO-252", "S": "SOIC"}),
        rule(r"^(?:BAV|BAT|BAS)[0-9]+W", value="SOT323"),
        rule(r"^(?:BAV99|BAT54|MMBT)", value="SOT23"),
        rule(r"^B5819W", value="SOD123"),
    ),
    attributes={
        "output_voltage": (
            rule(r"^AP[0-9]{4}[A-Z]*-([0-9]+\.[0-9]+|[0-9]+)"),
        ),
    },
    replacement=ReplacementRule(
        core=(
            rule(r"^(AP[0-9]{4})"),
            rule(r"^.*", group=0, transform=through_last_digit),
        ),
        must_match=("output_voltage",),
    ),
)

# =============================================================================
# INFINEON / INTERNATIONAL RECTIFIER
# =============================================================================


def _tens_of_volts(text: str) -> str | None:
    """'04' -> '40' (OptiMOS voltage field is in units of 10V)."""
    return str(int(text) * 10) if text.isdigit() and int(text) else None


INFINEON = HandlerSpec(
    manufacturer_id="infineon",
    patterns=(
        (T.MOSFET, r"^IRF[0-9]"),
        (T.MOSFET, r"^IRF[A-Z][0-9]"),
        (T.MOSFET, r"^IRL[0-9]"),
        (T.MOSFET, r"^IRL[A-Z][0-9]"),
        (T.MOSFET, r"^BSC[0-9]"),
        (T.MOSFET, r"^BSZ[0-9]"),
        (T.MOSFET, r"^IPD[0-9]"),
        (T.MOSFET, r"^IPB[0-9]"),
        (T.MOSFET, r"^IPP[0-9]"),
        (T.MOSFET_INFINEON, r"^IR[FL]"),
        (T.MOSFET_INFINEON, r"^(BSC|BSZ|IPD|IPB|IPP)[0-9]"),
        (T.MICROCONTROLLER, r"^XMC[14][0-9]"),
    ),
    series=(
        rule(r"^(IRLZ|IRLR|IRFR|IRFZ|IRFS|IRF|IRL|BSC|BSZ|IPD|IPB|IPP)"),
        rule(r"^(XMC[14][0-9])"),
    ),
    package=(
        rule(r"^IR[FL]R[0-9]", value="DPAK"),
        rule(r"^IR[FL]U[0-9]", value="IPAK"),
        rule(r"^IR[FL]S[0-9]", value="D2PAK"),
        rule(r"^IR[FL][0-9]+[A-Z]*S$", value="D2PAK"),
        rule(r"^IR[FL]Z?[0-9]", value="TO-220"),
        rule(r"^BSC", value="TDSON-8"),
        rule(r"^BSZ", value="TSDSON-8"),
        rule(r"^IPD", value="DPAK"),
        rule(r"^IPB", value="D2PAK"),
        rule(r"^IPP", value="TO-220"),
    ),
    attributes={
        "voltage_class": (
            rule(r"^(?:BSC|BSZ|IPD|IPB|IPP)[0-9]{3}N([0-9]{2})", transform=_tens_of_volts),
        ),
    },
    replacement=ReplacementRule(
        core=(rule(r"^.*", group=0, transform=through_last_digit),),
    ),
)

# =============================================================================
# VISHAY (resistors, diodes, MOSFETs, optoelectronics)
# =============================================================================

TOLERANCE_CODES: dict[str, str] = {
    "B": "0.1%",
    "C": "0.25%",
    "D": "0.5%",
    "F": "1%",
    "G": "2%",
    "J": "5%",
    "K": "10%",
    "M": "20%",
    "Z": "+80/-20%",
}

VISHAY = HandlerSpec(
    manufacturer_id="vishay",
    patterns=(
        (T.RESISTOR, r"^CRCW[0-9]{4}"),
        (T.RESISTOR_CHIP_VISHAY, r"^CRCW[0-9]{4}"),
        (T.RESISTOR, r"^TNPW[0-9]{4}"),
        (T.DIODE, r"^1N4[0-9]{3}"),
        (T.DIODE, r"^1N5[0-9]{3}"),
        (T.DIODE, r"^SS[0-9]{2}"),
        (T.DIODE, r"^BZX85"),
        (T.MOSFET, r"^SI[0-9]{4}"),
        (T.MOSFET, r"^SIR[0-9]"),
        (T.LED, r"^TLH[A-Z]"),
        (T.LED, r"^VLM[A-Z]"),
        (T.SENSOR, r"^VEML[0-9]"),
        (T.SENSOR, r"^VCNL[0-9]"),
    ),
    series=(
        rule(r"^(CRCW|TNPW)[0-9]{4}"),
        rule(r"^(1N[0-9]{4})"),
        rule(r"^(SS[0-9]{2})"),
        rule(r"^(BZX85)"),
        rule(r"^(SIR?[0-9]{3,4})"),
        rule(r"^(TLH[A-Z]|VLM[A-Z])"),
        rule(r"^(VEML[0-9]{4}|VCNL[0-9]{4})"),
    ),
    package=(
        rule(r"^(?:CRCW|TNPW)([0-9]{4})"),
        rule(r"^1N4148WS", value="SOD323"),
        rule(r"^1N4148W", value="SOD123"),
        rule(r"^1N400[0-9]", value="DO-41"),
        rule(r"^1N4148", value="DO-35"),
        rule(r"^1N58[0-9]{2}", value="DO-41"),
        rule(r"^SS[0-9]{2}", value="SMA"),
        rule(r"^BZX85", value="DO-41"),
        rule(r"^SI[0-9]{4}[A-Z]*?(DS|DH|DV|DY)$",
             table={"DS": "SOT23", "DH": "SC70", "DV": "TSOP6", "DY": "SOIC"}),
    ),
    attributes={
        "size": (rule(r"^(?:CRCW|TNPW)([0-9]{4})"),),
        "value": (rule(r"^(?:CRCW|TNPW)[0-9]{4}([0-9]+[RKM][0-9]*)"),),
        "tolerance": (rule(r"^(?:CRCW|TNPW)[0-9]{4}[0-9]+[RKM][0-9]*([BCDFGJ])", table=TOLERANCE_CODES),),
        "voltage_class": (rule(r"^BZX85-?[A-C]?([0-9]+V[0-9]*)$"),),
    },
    replacement=ReplacementRule(
        core=(
            rule(r"^((?:CRCW|TNPW)[0-9]{4}[0-9]+[RKM][0-9]*[BCDFGJ])"),
            rule(r"^.*", group=0, transform=through_last_digit),
        ),
    ),
)
