"""Tests for the package-code registry and manufacturer aliases."""

import pytest

from mpn_resolver.manufacturer_aliases import KNOWN_MANUFACTURERS, resolve_manufacturer
from mpn_resolver.packages import (
    are_packages_compatible,
    canonical_package,
    is_power_package,
    is_through_hole,
    resolve_package,
)
from mpn_resolver.handlers import HANDLER_SPECS


class TestResolvePackage:
    @pytest.mark.parametrize("code,expected", [
        ("PW", "TSSOP"),
        ("dbv", "SOT-23"),
        ("D", "SOIC"),
        ("N", "DIP"),
        ("AU", "TQFP"),
        ("CT", "TO-220"),
        ("XYZ", "XYZ"),
        ("", ""),
        (None, ""),
    ])
    def test_resolve(self, code, expected):
        assert resolve_package(code) == expected


class TestPackageGroups:
    def test_canonical(self):
        assert canonical_package("SOT-23") == "SOT23"
        assert canonical_package("to-220f") == "TO220F"

    def test_groupings(self):
        assert is_power_package("LFPAK56")
        assert is_through_hole("TO-92")
        assert not is_through_hole("SOT-23")

    @pytest.mark.parametrize("a,b,expected", [
        ("SOT-23", "SOT23", True),
        ("SOT-23", "TO-236AB", True),
        ("LFPAK56", "LFPAK88", True),
        ("SOIC", "TSSOP", True),
        ("0603", "0603", True),
        ("0603", "0805", False),
        ("SOT-23", "SOD-123", False),
        ("SOT-23", None, False),
        ("TO-220", "TO-247", True),
        ("TO-220", "LFPAK56", False),
    ])
    def test_compatible(self, a, b, expected):
        assert are_packages_compatible(a, b) is expected
        assert are_packages_compatible(b, a) is expected


class TestManufacturerAliases:
    @pytest.mark.parametrize("name,expected", [
        ("NXP", "nexperia"),
        ("Nexperia B.V.", "nexperia"),
        ("Würth Elektronik", "wurth"),
        ("Wurth Elektronik", "wurth"),
        ("Texas Instruments", "ti"),
        ("ti", "ti"),
        ("  ST  ", "st"),
        ("Atmel", "microchip"),
        ("RFMD", "qorvo"),
        ("Acme Parts", None),
        ("", None),
        (None, None),
    ])
    def test_resolve(self, name, expected):
        assert resolve_manufacturer(name) == expected

    def test_every_handler_is_known(self):
        assert {spec.manufacturer_id for spec in HANDLER_SPECS} == set(KNOWN_MANUFACTURERS)
