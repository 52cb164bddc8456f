"""Tests for the manufacturer tables and the generic handler engine."""

import pytest

from mpn_resolver.handlers import (
    GENERIC,
    HANDLER_SPECS,
    HandlerSpec,
    ManufacturerHandler,
    ReplacementRule,
    rule,
)
from mpn_resolver.handlers.engine import after_last_digit, through_last_digit
from mpn_resolver.registry import PatternRegistry
from mpn_resolver.types import ComponentType


def _handler(manufacturer_id: str) -> ManufacturerHandler:
    for spec in HANDLER_SPECS:
        if spec.manufacturer_id == manufacturer_id:
            return ManufacturerHandler(spec)
    raise KeyError(manufacturer_id)


@pytest.fixture(scope="module")
def registry():
    registry = PatternRegistry()
    for spec in HANDLER_SPECS:
        ManufacturerHandler(spec).register_patterns(registry)
    return registry.freeze()


# =============================================================================
# ENGINE
# =============================================================================


class TestTransforms:
    @pytest.mark.parametrize("text,expected", [
        ("R5F100LEAFB#30", "LEAFB"),
        ("R5F51303ADFM", "ADFM"),
        ("PSMN3R5-30YLT", "YLT"),
        ("12345", None),
        ("ABC", None),
    ])
    def test_after_last_digit(self, text, expected):
        assert after_last_digit(text) == expected

    @pytest.mark.parametrize("text,expected", [
        ("PSMN3R5-30YLT", "PSMN3R5-30"),
        ("R5F100LEAFB#30", "R5F100"),
        ("ABC", None),
    ])
    def test_through_last_digit(self, text, expected):
        assert through_last_digit(text) == expected


class TestRuleEvaluation:
    """First matching rule decides; a code missing from its table means absent."""

    SPEC = HandlerSpec(
        manufacturer_id="acme",
        patterns=((ComponentType.DIODE, r"^AC[0-9]"),),
        series=(rule(r"^(AC)[0-9]"),),
        package=(
            rule(r"([XY])$", table={"X": "SOT23"}),
            rule(r"[0-9]([A-Z])$"),
        ),
        pin_count=(rule(r"-([0-9A-Z]+)$"),),
        replacement=ReplacementRule(core=(rule(r"^(AC[0-9]+)"),)),
    )

    def test_table_hit(self):
        assert ManufacturerHandler(self.SPEC).extract_package_code("AC100X") == "SOT23"

    def test_table_miss_is_absent_not_fallthrough(self):
        assert ManufacturerHandler(self.SPEC).extract_package_code("AC100Y") is None

    def test_later_rule_used_when_earlier_does_not_match(self):
        assert ManufacturerHandler(self.SPEC).extract_package_code("AC100Z") == "Z"

    @pytest.mark.parametrize("mpn,expected", [
        ("AC100-8", 8),
        ("AC100-0", None),
        ("AC100-XX", None),
    ])
    def test_pin_count_parsing(self, mpn, expected):
        assert ManufacturerHandler(self.SPEC).extract_pin_count(mpn) == expected

    @pytest.mark.parametrize("method", [
        "extract_series", "extract_package_code", "extract_pin_count",
    ])
    @pytest.mark.parametrize("mpn", [None, ""])
    def test_empty_input(self, method, mpn):
        assert getattr(ManufacturerHandler(self.SPEC), method)(mpn) is None

    def test_empty_input_attributes_and_replacement(self):
        handler = ManufacturerHandler(self.SPEC)
        assert handler.extract_attributes(None) == {}
        assert handler.is_replacement_compatible(None, "AC100X") is False
        assert handler.is_replacement_compatible("", "") is False

    def test_supported_types(self):
        assert ManufacturerHandler(self.SPEC).supported_types == frozenset({ComponentType.DIODE})


class TestHandlerMatches:
    def test_matches_own_patterns(self, registry):
        nexperia = _handler("nexperia")
        assert nexperia.matches("PSMN3R5-30YLT", ComponentType.MOSFET, registry)
        assert nexperia.matches("PSMN3R5-30YLT", ComponentType.MOSFET_NEXPERIA, registry)
        assert not nexperia.matches("PSMN3R5-30YLT", ComponentType.DIODE, registry)

    def test_does_not_match_other_manufacturers_parts(self, registry):
        assert not _handler("nexperia").matches("R5F100LEAFB#30", ComponentType.RL78_MCU, registry)
        assert _handler("renesas").matches("R5F100LEAFB#30", ComponentType.RL78_MCU, registry)
        assert _handler("renesas").matches("R5F100LEAFB#30", ComponentType.MICROCONTROLLER, registry)


# =============================================================================
# NEXPERIA
# =============================================================================


class TestNexperia:
    @pytest.mark.parametrize("mpn,series,package", [
        ("PMBT2222A,215", "PMBT", "SOT23"),
        ("PBSS4540Z", "PBSS", None),
        ("BC547B", "BC5xx", "TO-92"),
        ("BC817-25", "BC8xx", "SOT23"),
        ("2N7002", "2N7002", "SOT23"),
        ("BAV99", "BAV99", "SOT23"),
        ("BAV99W", "BAV99", "SOT323"),
        ("BAT54", "BAT54", "SOT23"),
        ("BZX84-C5V1", "BZX84", "SOT23"),
        ("BZX55C5V1", "BZX55", "DO-35"),
        ("BZX384-C5V1", "BZX384", "SOD323"),
        ("PESD5V0S1BL", "PESD", "SOD882"),
        ("PESD5V0S1BA", "PESD", "SOD323"),
        ("PMEG3010EH", "PMEG", "SOD123"),
        ("PMEG3010ED", "PMEG", "SOD323F"),
        ("PMEG3010ET", "PMEG", "SOD523"),
        ("74HC00D", "74HC", "SOIC"),
        ("74LVC1G08GW", "74LVC", "SOT-353"),
    ])
    def test_series_and_package(self, mpn, series, package):
        handler = _handler("nexperia")
        assert handler.extract_series(mpn) == series
        assert handler.extract_package_code(mpn) == package

    @pytest.mark.parametrize("suffix,package", [
        ("T", "LFPAK56"),
        ("U", "LFPAK88"),
        ("V", "LFPAK33"),
        ("B", "SOT754"),
        ("L", "TO-220"),
        ("F", "TO-220F"),
    ])
    def test_psmn_package_letter(self, suffix, package):
        assert _handler("nexperia").extract_package_code(f"PSMN3R5-30YL{suffix}") == package

    def test_voltage_class(self):
        handler = _handler("nexperia")
        assert handler.extract_attribute("BZX84-C5V1", "voltage_class") == "5V1"
        assert handler.extract_attribute("PSMN3R5-30YLT", "voltage_class") == "30"

    def test_logic_attributes(self):
        attrs = _handler("nexperia").extract_attributes("74HCT00PW")
        assert attrs["family"] == "HCT"
        assert attrs["function"] == "00"
        assert attrs["package_code"] == "TSSOP"

    def test_psmn_replacement(self):
        handler = _handler("nexperia")
        assert handler.is_replacement_compatible("PSMN3R5-30YLT", "PSMN3R5-30YLU")
        assert not handler.is_replacement_compatible("PSMN3R5-30YLT", "PSMN4R0-30YLT")

    def test_logic_replacement_same_type_number(self):
        handler = _handler("nexperia")
        assert handler.is_replacement_compatible("74HC00D", "74HC00PW")
        assert not handler.is_replacement_compatible("74HC00D", "74HC02D")

    def test_replacement_requires_recognized_parts(self):
        assert not _handler("nexperia").is_replacement_compatible("PSMN3R5-30YLT", "IRF540N")

    def test_extraction_idempotent(self):
        handler = _handler("nexperia")
        assert handler.extract_attributes("PMBT2222A,215") == handler.extract_attributes("PMBT2222A,215")


# =============================================================================
# WÜRTH
# =============================================================================


class TestWurth:
    def test_header_layout(self):
        attrs = _handler("wurth").extract_attributes("61300211121")
        assert attrs["series"] == "61300"
        assert attrs["pin_count"] == "2"
        assert attrs["pitch_code"] == "112"
        assert attrs["variant_code"] == "1"
        assert attrs["package_code"] == "1"
        assert attrs["pitch"] == "2.54"
        assert attrs["family"] == "WR-PHD"

    @pytest.mark.parametrize("mpn,pitch", [
        ("61300211121", "2.54"),
        ("61301211121", "2.00"),
        ("61302211121", "1.27"),
        ("61303211121", "1.00"),
    ])
    def test_pitch_by_series(self, mpn, pitch):
        assert _handler("wurth").extract_attribute(mpn, "pitch") == pitch

    def test_pin_count(self):
        assert _handler("wurth").extract_pin_count("61301011121") == 10

    @pytest.mark.parametrize("other,expected", [
        ("61300211122", True),   # variant digit only
        ("61300411121", False),  # pin count
        ("62200211121", False),  # series
    ])
    def test_replacement(self, other, expected):
        assert _handler("wurth").is_replacement_compatible("61300211121", other) is expected

    def test_led(self):
        handler = _handler("wurth")
        assert handler.extract_package_code("150060RS75000") == "0603"
        assert handler.extract_attribute("150060RS75000", "variant_code") == "red"


# =============================================================================
# RENESAS
# =============================================================================


class TestRenesas:
    def test_rl78(self):
        handler = _handler("renesas")
        attrs = handler.extract_attributes("R5F100LEAFB#30")
        assert attrs["series"] == "RL78"
        assert attrs["package_code"] == "LEAFB"
        assert attrs["pin_count"] == "64"
        assert attrs["temperature_grade"] == "-40~85C"

    def test_rx(self):
        attrs = _handler("renesas").extract_attributes("R5F51303ADFM")
        assert attrs["series"] == "RX"
        assert attrs["package_code"] == "ADFM"
        assert attrs["pin_count"] == "64"
        assert attrs["temperature_grade"] == "-40~85C"

    def test_hash_is_a_hard_stop(self):
        assert _handler("renesas").extract_package_code("R5F100LEAFB#V0") == "LEAFB"

    def test_unknown_pin_code_is_absent(self):
        assert _handler("renesas").extract_pin_count("R5F100XEAFB") is None

    def test_replacement(self):
        handler = _handler("renesas")
        assert handler.is_replacement_compatible("R5F100LEAFB#30", "R5F100LEAFB#V0")
        assert not handler.is_replacement_compatible("R5F100LEAFB#30", "R5F100LCAFB#30")
        assert not handler.is_replacement_compatible("R5F100LEAFB#30", "R5F51303ADFM")


# =============================================================================
# ICS
# =============================================================================


class TestTexasInstruments:
    @pytest.mark.parametrize("mpn,package", [
        ("SN74HC00N", "DIP"),
        ("SN74HC00D", "SOIC"),
        ("SN74HC00PW", "TSSOP"),
        ("LM7805CT", "TO-220"),
        ("LM358DR", "SOIC"),
    ])
    def test_package(self, mpn, package):
        assert _handler("ti").extract_package_code(mpn) == package

    def test_regulator_output_voltage(self):
        handler = _handler("ti")
        assert handler.extract_attribute("LM7805CT", "output_voltage") == "5"
        assert handler.extract_attribute("LM7812CT", "output_voltage") == "12"
        assert handler.extract_attribute("TLV1117LV33DCY", "output_voltage") == "3.3"
        assert handler.extract_attribute("LM317T", "output_voltage") == "ADJ"

    def test_regulator_replacement_needs_same_voltage(self):
        handler = _handler("ti")
        assert handler.is_replacement_compatible("LM7805CT", "LM7805KC")
        assert not handler.is_replacement_compatible("LM7805CT", "LM7812CT")

    def test_logic_attributes(self):
        attrs = _handler("ti").extract_attributes("SN74HCT04N")
        assert attrs["series"] == "74HCT"
        assert attrs["family"] == "HCT"
        assert attrs["function"] == "04"


class TestSTMicro:
    def test_stm32(self):
        attrs = _handler("st").extract_attributes("STM32F103C8T6")
        assert attrs["series"] == "STM32F1"
        assert attrs["pin_count"] == "48"
        assert attrs["package_code"] == "LQFP"
        assert attrs["variant_code"] == "8"
        assert attrs["temperature_grade"] == "-40~85C"

    def test_stm32_replacement_ignores_temperature(self):
        handler = _handler("st")
        assert handler.is_replacement_compatible("STM32F103C8T6", "STM32F103C8T7")
        assert not handler.is_replacement_compatible("STM32F103C8T6", "STM32F103CBT6")

    def test_regulator(self):
        handler = _handler("st")
        assert handler.extract_series("L7805CV") == "78xx"
        assert handler.extract_package_code("L7805CV") == "TO-220"
        assert handler.extract_attribute("L7805CV", "output_voltage") == "5"


class TestEspressif:
    def test_module(self):
        attrs = _handler("espressif").extract_attributes("ESP32-S3-WROOM-1-N8R2")
        assert attrs["series"] == "ESP32-S3"
        assert attrs["package_code"] == "WROOM"
        assert attrs["variant_code"] == "N8R2"

    def test_flash_option_is_a_replacement(self):
        handler = _handler("espressif")
        assert handler.is_replacement_compatible("ESP32-S3-WROOM-1-N8R2", "ESP32-S3-WROOM-1-N16R8")


# =============================================================================
# PASSIVES
# =============================================================================


class TestPassives:
    def test_yageo_resistor(self):
        attrs = _handler("yageo").extract_attributes("RC0603FR-0710KL")
        assert attrs["series"] == "RC"
        assert attrs["size"] == "0603"
        assert attrs["value"] == "10K"
        assert attrs["tolerance"] == "1%"

    def test_yageo_packaging_letter_is_a_replacement(self):
        assert _handler("yageo").is_replacement_compatible("RC0603FR-0710KL", "RC0603FR-1310KL")

    def test_vishay_resistor(self):
        attrs = _handler("vishay").extract_attributes("CRCW060310K0FKEA")
        assert attrs["size"] == "0603"
        assert attrs["value"] == "10K0"
        assert attrs["tolerance"] == "1%"

    def test_murata_capacitor(self):
        attrs = _handler("murata").extract_attributes("GRM188R71H104KA93D")
        assert attrs["size"] == "0603"
        assert attrs["dielectric"] == "X7R"
        assert attrs["voltage_rating"] == "50"
        assert attrs["value"] == "104"
        assert attrs["tolerance"] == "10%"

    def test_samsung_capacitor(self):
        attrs = _handler("samsung").extract_attributes("CL10B104KB8NNNC")
        assert attrs["size"] == "0603"
        assert attrs["dielectric"] == "X7R"
        assert attrs["voltage_rating"] == "50"
        assert attrs["value"] == "104"
        assert attrs["tolerance"] == "10%"


# =============================================================================
# CONNECTORS, SENSORS, RF
# =============================================================================


class TestConnectors:
    def test_molex(self):
        attrs = _handler("molex").extract_attributes("53047-0410")
        assert attrs["series"] == "53047"
        assert attrs["pin_count"] == "4"
        assert attrs["pitch"] == "1.25"
        assert attrs["family"] == "PicoBlade"

    def test_jst_header(self):
        attrs = _handler("jst").extract_attributes("B4B-XH-A")
        assert attrs["series"] == "XH"
        assert attrs["pin_count"] == "4"
        assert attrs["pitch"] == "2.50"
        assert attrs["variant_code"] == "top entry"
        assert attrs["package_code"] == "THT"

    def test_jst_entry_direction_must_match(self):
        handler = _handler("jst")
        assert not handler.is_replacement_compatible("B4B-XH-A", "S4B-XH-A")


class TestSensors:
    def test_bosch(self):
        attrs = _handler("bosch").extract_attributes("BME280")
        assert attrs["family"] == "BME2xx"
        assert attrs["function"] == "environmental"
        assert attrs["package_code"] == "LGA-8"

    def test_sensirion(self):
        attrs = _handler("sensirion").extract_attributes("SHT31-DIS-B")
        assert attrs["series"] == "SHT31"
        assert attrs["family"] == "SHT3x"
        assert attrs["variant_code"] == "DIS-B"
        assert attrs["package_code"] == "DFN-8"


class TestRF:
    def test_known_part_data(self):
        attrs = _handler("qorvo").extract_attributes("QPF4228")
        assert attrs["series"] == "QPF"
        assert attrs["frequency_band"] == "2400-2500MHz"
        assert attrs["power"] == "22"
        assert attrs["gain"] == "32"

    def test_skyworks(self):
        attrs = _handler("skyworks").extract_attributes("SKY85309-11")
        assert attrs["series"] == "SKY85"
        assert attrs["variant_code"] == "11"
        assert attrs["power"] == "20"


class TestGeneric:
    def test_industry_standard_numbers(self):
        generic = ManufacturerHandler(GENERIC)
        assert generic.extract_series("MC7805CT") == "78xx"
        assert generic.extract_attribute("MC7805CT", "output_voltage") == "5"
        assert generic.extract_attribute("AMS1117-3.3", "output_voltage") == "3.3"
        assert generic.extract_series("1N4148") == "1N4148"


def test_every_table_has_a_replacement_rule():
    assert all(spec.replacement is not None for spec in HANDLER_SPECS)


def test_manufacturer_ids_are_unique():
    ids = [spec.manufacturer_id for spec in HANDLER_SPECS]
    assert len(ids) == len(set(ids))
