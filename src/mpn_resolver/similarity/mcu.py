"""Microcontroller calculator."""

from ..types import ComponentRecord
from .base import Check, SimilarityCalculator, equality_check, package_check


class MCUSimilarityCalculator(SimilarityCalculator):
    """Same series, same core part and same pin count are required.

    Package and temperature grade only adjust the score, so an STM32F103C8T6
    and an STM32F103C8T7 stay interchangeable with a lower score.
    """

    name = "microcontroller"

    def checks(self, first: ComponentRecord, second: ComponentRecord) -> list[Check]:
        a, b = first.attributes, second.attributes
        return [
            equality_check("series", a.get("series"), b.get("series"), 0.3, required=True),
            self.replacement_check(first, second, 0.3, required=True),
            equality_check("pin count", a.get("pin_count"), b.get("pin_count"), 0.2, required=True),
            package_check(a.get("package_code"), b.get("package_code"), 0.1),
            equality_check("temperature grade", a.get("temperature_grade"), b.get("temperature_grade"), 0.1),
        ]
