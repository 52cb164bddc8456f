"""Connector and sensor calculators."""

from ..types import ComponentRecord
from .base import Check, SimilarityCalculator, equality_check, numeric_check


def _pitch(s: str) -> float | None:
    try:
        return float(s)
    except ValueError:
        return None


class ConnectorSimilarityCalculator(SimilarityCalculator):
    """Pin count and pitch decide whether two connectors mate with the same footprint."""

    name = "connector"

    def checks(self, first: ComponentRecord, second: ComponentRecord) -> list[Check]:
        a, b = first.attributes, second.attributes
        return [
            equality_check("series", a.get("series"), b.get("series"), 0.2),
            equality_check("pin count", a.get("pin_count"), b.get("pin_count"), 0.3, required=True),
            numeric_check("pitch", a.get("pitch"), b.get("pitch"), _pitch, 0.3, required=True),
            equality_check("variant", a.get("variant_code"), b.get("variant_code"), 0.2),
        ]


class SensorSimilarityCalculator(SimilarityCalculator):
    name = "sensor"

    def checks(self, first: ComponentRecord, second: ComponentRecord) -> list[Check]:
        a, b = first.attributes, second.attributes
        return [
            equality_check("sensor family", a.get("family"), b.get("family"), 0.3, required=True),
            equality_check("series", a.get("series"), b.get("series"), 0.3),
            equality_check("package", a.get("package_code"), b.get("package_code"), 0.2),
            equality_check("variant", a.get("variant_code"), b.get("variant_code"), 0.2),
        ]
