"""MOSFET, bipolar transistor, diode and ESD protection calculator."""

from ..types import ComponentRecord
from .base import Check, SimilarityCalculator, equality_check, package_check


class DiscreteSimilarityCalculator(SimilarityCalculator):
    """Same series and a manufacturer-sanctioned replacement are required.

    Voltage class and package refine the score: PSMN3R5-30YLT and
    PSMN3R5-30YLU share everything but the LFPAK size letter.
    """

    name = "discrete"

    def checks(self, first: ComponentRecord, second: ComponentRecord) -> list[Check]:
        a, b = first.attributes, second.attributes
        return [
            equality_check("series", a.get("series"), b.get("series"), 0.35, required=True),
            self.replacement_check(first, second, 0.35, required=True),
            equality_check("voltage class", a.get("voltage_class"), b.get("voltage_class"), 0.15),
            package_check(a.get("package_code"), b.get("package_code"), 0.15),
        ]
