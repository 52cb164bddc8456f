"""Tests for component type detection and match ranking."""

import re
from concurrent.futures import ThreadPoolExecutor

import pytest

from mpn_resolver import engine
from mpn_resolver.detector import collect_tags, rank_matches, select_primary
from mpn_resolver.types import ComponentType, PatternEntry


def _entry(component_type, manufacturer=None, strength=3, priority=0, index=0):
    return PatternEntry(
        component_type=component_type,
        pattern=re.compile(".*"),
        manufacturer=manufacturer,
        priority=priority,
        index=index,
        strength=strength,
    )


@pytest.fixture(scope="module")
def detector():
    return engine.get_catalog().detector


class TestRanking:
    """rank_matches is a pure ordering over the full match set."""

    def test_longer_prefix_wins(self):
        rx = _entry(ComponentType.RX_MCU, "renesas", strength=3, index=0)
        rl78 = _entry(ComponentType.RL78_MCU, "renesas", strength=4, index=1)
        assert rank_matches([rx, rl78]) == [rl78, rx]

    def test_scoped_beats_generic_on_equal_strength(self):
        generic = _entry(ComponentType.DIODE, None, index=0)
        scoped = _entry(ComponentType.DIODE, "nexperia", index=1)
        assert rank_matches([generic, scoped])[0] is scoped

    def test_priority_then_index(self):
        first = _entry(ComponentType.DIODE, "a", index=0)
        second = _entry(ComponentType.DIODE, "b", index=1)
        boosted = _entry(ComponentType.DIODE, "c", priority=5, index=2)
        assert rank_matches([second, first, boosted]) == [boosted, first, second]

    def test_hint_drops_other_manufacturers(self):
        nexperia = _entry(ComponentType.DIODE, "nexperia", index=0)
        diodes = _entry(ComponentType.DIODE, "diodes", strength=5, index=1)
        generic = _entry(ComponentType.DIODE, None, index=2)
        assert rank_matches([nexperia, diodes, generic], "nexperia") == [nexperia, generic]

    def test_order_independent(self):
        entries = [
            _entry(ComponentType.DIODE, "a", strength=2, index=0),
            _entry(ComponentType.DIODE, None, strength=4, index=1),
            _entry(ComponentType.DIODE, "b", strength=4, index=2),
        ]
        assert rank_matches(entries) == rank_matches(list(reversed(entries)))

    def test_tags_never_primary(self):
        tag = _entry(ComponentType.MOSFET_NEXPERIA, "nexperia", strength=9, index=0)
        base = _entry(ComponentType.MOSFET, "nexperia", strength=4, index=1)
        ranked = rank_matches([tag, base])
        assert select_primary(ranked) is base
        assert collect_tags(ranked, base) == frozenset({ComponentType.MOSFET_NEXPERIA})

    def test_only_tags_means_no_primary(self):
        assert select_primary([_entry(ComponentType.MOSFET_NEXPERIA, "nexperia")]) is None

    def test_tags_of_other_base_types_dropped(self):
        tag = _entry(ComponentType.CONNECTOR_WURTH, "wurth", index=0)
        base = _entry(ComponentType.MOSFET, "wurth", index=1)
        assert collect_tags(rank_matches([tag, base]), base) == frozenset()


class TestDetectType:
    @pytest.mark.parametrize("mpn,expected", [
        ("PMBT2222A,215", ComponentType.TRANSISTOR),
        ("PSMN3R5-30YLT", ComponentType.MOSFET),
        ("2N7002", ComponentType.MOSFET),
        ("2N2222", ComponentType.TRANSISTOR),
        ("BZX84-C5V1", ComponentType.DIODE),
        ("BAV99", ComponentType.DIODE),
        ("PESD5V0S1BL", ComponentType.ESD_PROTECTION),
        ("74HC00D", ComponentType.LOGIC_IC),
        ("SN74HC00N", ComponentType.LOGIC_IC),
        ("R5F100LEAFB#30", ComponentType.RL78_MCU),
        ("R5F51303ADFM", ComponentType.RX_MCU),
        ("R5F21258SNFP", ComponentType.R8C_MCU),
        ("R7FA4M1AB3CFM", ComponentType.RA_MCU),
        ("STM32F103C8T6", ComponentType.STM32_MCU),
        ("ESP32-S3-WROOM-1-N8R2", ComponentType.ESP32_MCU),
        ("61300211121", ComponentType.CONNECTOR),
        ("53047-0410", ComponentType.CONNECTOR),
        ("B4B-XH-A", ComponentType.CONNECTOR),
        ("RC0603FR-0710KL", ComponentType.RESISTOR),
        ("CRCW060310K0FKEA", ComponentType.RESISTOR),
        ("GRM188R71H104KA93D", ComponentType.CAPACITOR),
        ("CL10B104KB8NNNC", ComponentType.CAPACITOR),
        ("LM7805CT", ComponentType.VOLTAGE_REGULATOR),
        ("L7805CV", ComponentType.VOLTAGE_REGULATOR),
        ("QPF4228", ComponentType.RF_IC),
        ("SKY85309-11", ComponentType.RF_IC),
        ("BME280", ComponentType.SENSOR),
        ("SHT31-DIS-B", ComponentType.SENSOR),
    ])
    def test_examples(self, detector, mpn, expected):
        assert detector.detect_type(mpn) is expected

    @pytest.mark.parametrize("mpn", [None, "", "   ", "XYZ-NOT-A-PART", "12"])
    def test_unknown(self, detector, mpn):
        assert detector.detect_type(mpn) is ComponentType.UNKNOWN

    def test_rl78_beats_rx_on_prefix_length(self, detector):
        detection = detector.resolve("R5F100LEAFB#30")
        assert detection.component_type is ComponentType.RL78_MCU
        assert detection.manufacturer == "renesas"
        assert {m.component_type for m in detection.matches} >= {ComponentType.RL78_MCU, ComponentType.RX_MCU}

    def test_longer_manufacturer_prefix_wins(self, detector):
        """Diodes Inc registers ^BAV99, Nexperia only ^BAV[0-9]."""
        assert detector.resolve("BAV99").manufacturer == "diodes"

    def test_manufacturer_hint(self, detector):
        detection = detector.resolve("BAV99", manufacturer_hint="NXP")
        assert detection.component_type is ComponentType.DIODE
        assert detection.manufacturer == "nexperia"

    def test_unknown_hint_is_ignored(self, detector):
        assert detector.resolve("BAV99", manufacturer_hint="Acme Parts").manufacturer == "diodes"

    def test_equal_strength_tie_goes_to_first_registered(self, detector):
        """Nexperia and Diodes Inc both register ^MMBT[0-9]."""
        assert detector.resolve("MMBT3904").manufacturer == "nexperia"

    def test_manufacturer_entry_beats_generic(self, detector):
        detection = detector.resolve("74HC00D")
        assert detection.manufacturer == "nexperia"
        assert detection.tags == frozenset({ComponentType.LOGIC_IC_NEXPERIA})

    def test_generic_match_has_no_manufacturer(self, detector):
        detection = detector.resolve("2N2222")
        assert detection.manufacturer is None
        assert detection.tags == frozenset()

    def test_tags_reported_beside_primary(self, detector):
        detection = detector.resolve("61300211121")
        assert detection.component_type is ComponentType.CONNECTOR
        assert detection.tags == frozenset({ComponentType.CONNECTOR_WURTH})

    def test_to_dict(self, detector):
        data = detector.resolve("PSMN3R5-30YLT").to_dict()
        assert data == {
            "mpn": "PSMN3R5-30YLT",
            "normalized": "PSMN3R5-30YLT",
            "component_type": "MOSFET",
            "base_type": "MOSFET",
            "manufacturer": "nexperia",
            "tags": ["MOSFET_NEXPERIA"],
        }

    def test_family_type_reports_base_type(self, detector):
        assert detector.resolve("R5F51303ADFM").to_dict()["base_type"] == "MICROCONTROLLER"

    def test_deterministic(self, detector):
        assert detector.resolve("BZX84-C5V1") == detector.resolve("BZX84-C5V1")


class TestMatchingTypes:
    def test_includes_tags_and_base_types(self, detector):
        types = detector.matching_types("PSMN3R5-30YLT")
        assert {ComponentType.MOSFET, ComponentType.MOSFET_NEXPERIA} <= types

    def test_family_types_roll_up(self, detector):
        types = detector.matching_types("R5F100LEAFB#30")
        assert {ComponentType.RL78_MCU, ComponentType.RX_MCU, ComponentType.MICROCONTROLLER} <= types

    def test_empty(self, detector):
        assert detector.matching_types(None) == set()


class TestConcurrency:
    MPNS = [
        "PMBT2222A,215", "R5F100LEAFB#30", "R5F51303ADFM", "61300211121",
        "BZX84-C5V1", "74HC00D", "QPF4228", "GRM188R71H104KA93D", "XYZ",
    ]

    def test_parallel_classification_matches_sequential(self, detector):
        expected = [detector.resolve(mpn) for mpn in self.MPNS]
        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda i: detector.resolve(self.MPNS[i % len(self.MPNS)]), range(900)))
        for i, result in enumerate(results):
            assert result == expected[i % len(self.MPNS)]

    def test_catalog_built_once(self):
        engine.reset_catalog()
        with ThreadPoolExecutor(max_workers=16) as pool:
            catalogs = list(pool.map(lambda _: engine.get_catalog(), range(64)))
        assert all(catalog is catalogs[0] for catalog in catalogs)
