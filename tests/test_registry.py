"""Tests for the pattern registry."""

import pytest

from mpn_resolver.registry import PatternRegistry, literal_prefix_length
from mpn_resolver.types import ComponentType


class TestLiteralPrefixLength:
    @pytest.mark.parametrize("pattern,expected", [
        (r"^R5F1[0-9]+", 4),
        (r"^R5F[0-9]+", 3),
        (r"^BZX84-C", 7),
        (r"^BAV99", 5),
        (r"^74(HC|LVC)", 2),
        (r"^(LM|UA)?78[0-9]{2}", 0),
        (r"^A|^B", 0),
        (r"^AB?C", 1),
        (r"^PSMN\d", 4),
        (r"^SN74\-X", 6),
    ])
    def test_prefix_length(self, pattern, expected):
        assert literal_prefix_length(pattern) == expected


class TestPatternRegistry:
    def test_lookup_returns_all_matches_in_order(self):
        registry = PatternRegistry()
        registry.register(ComponentType.RX_MCU, r"^R5F[0-9]+", "renesas")
        registry.register(ComponentType.RL78_MCU, r"^R5F1[0-9]+", "renesas")
        registry.register(ComponentType.MICROCONTROLLER, r"^R5F")

        matches = registry.lookup("R5F100LEAFB")
        assert [m.component_type for m in matches] == [
            ComponentType.RX_MCU,
            ComponentType.RL78_MCU,
            ComponentType.MICROCONTROLLER,
        ]
        assert [m.strength for m in matches] == [3, 4, 3]
        assert [m.index for m in matches] == [0, 1, 2]

    def test_duplicates_are_kept(self):
        registry = PatternRegistry()
        registry.register(ComponentType.DIODE, r"^BAV99", "nexperia")
        registry.register(ComponentType.DIODE, r"^BAV99", "diodes")
        assert len(registry.lookup("BAV99")) == 2

    def test_matching_is_anchored_and_case_insensitive(self):
        registry = PatternRegistry()
        registry.register(ComponentType.TRANSISTOR, r"^PMBT[0-9]")
        assert registry.lookup("pmbt2222a")
        assert registry.lookup("XPMBT2222A") == []

    def test_register_after_freeze_raises(self):
        registry = PatternRegistry()
        registry.register(ComponentType.DIODE, r"^BAT54")
        registry.freeze()
        assert registry.frozen
        with pytest.raises(RuntimeError):
            registry.register(ComponentType.DIODE, r"^BAV99")

    def test_freeze_is_idempotent(self):
        registry = PatternRegistry()
        registry.register(ComponentType.DIODE, r"^BAT54")
        assert registry.freeze() is registry.freeze()
        assert len(registry) == 1

    def test_entries_for(self):
        registry = PatternRegistry()
        registry.register(ComponentType.DIODE, r"^BAT54", "nexperia")
        registry.register(ComponentType.DIODE, r"^BAT54", "diodes")
        registry.register(ComponentType.DIODE, r"^BAT")
        registry.freeze()
        assert [e.manufacturer for e in registry.entries_for("diodes")] == ["diodes"]
        assert registry.entries_for("acme") == ()

    def test_matches_accepts_base_type(self):
        """A base type query also accepts its sub-variant tags."""
        registry = PatternRegistry()
        registry.register(ComponentType.MOSFET_NEXPERIA, r"^PSMN[0-9]", "nexperia")
        assert registry.matches("PSMN3R5-30YLT", ComponentType.MOSFET)
        assert registry.matches("PSMN3R5-30YLT", ComponentType.MOSFET_NEXPERIA)
        assert not registry.matches("PSMN3R5-30YLT", ComponentType.DIODE)

    @pytest.mark.parametrize("mpn", [None, ""])
    def test_empty_lookup(self, mpn):
        registry = PatternRegistry()
        registry.register(ComponentType.DIODE, r".*")
        assert registry.lookup(mpn) == []
