"""Replacement-compatibility calculators, one per component category."""

from types import MappingProxyType
from typing import Mapping

from ..handlers import ManufacturerHandler
from ..types import ComponentType
from .base import Check, SimilarityCalculator, verdict_from_checks
from .connectors import ConnectorSimilarityCalculator, SensorSimilarityCalculator
from .default import DefaultSimilarityCalculator, mpn_similarity
from .discretes import DiscreteSimilarityCalculator
from .logic import LogicICSimilarityCalculator
from .mcu import MCUSimilarityCalculator
from .passives import (
    CapacitorSimilarityCalculator,
    InductorSimilarityCalculator,
    ResistorSimilarityCalculator,
)
from .regulators import VoltageRegulatorSimilarityCalculator
from .rf import RFSimilarityCalculator

# Base type -> calculator class. Types not listed use the default calculator.
CALCULATOR_CLASSES: dict[ComponentType, type[SimilarityCalculator]] = {
    ComponentType.RESISTOR: ResistorSimilarityCalculator,
    ComponentType.CAPACITOR: CapacitorSimilarityCalculator,
    ComponentType.INDUCTOR: InductorSimilarityCalculator,
    ComponentType.MOSFET: DiscreteSimilarityCalculator,
    ComponentType.TRANSISTOR: DiscreteSimilarityCalculator,
    ComponentType.DIODE: DiscreteSimilarityCalculator,
    ComponentType.ESD_PROTECTION: DiscreteSimilarityCalculator,
    ComponentType.LOGIC_IC: LogicICSimilarityCalculator,
    ComponentType.MICROCONTROLLER: MCUSimilarityCalculator,
    ComponentType.VOLTAGE_REGULATOR: VoltageRegulatorSimilarityCalculator,
    ComponentType.RF_IC: RFSimilarityCalculator,
    ComponentType.CONNECTOR: ConnectorSimilarityCalculator,
    ComponentType.SENSOR: SensorSimilarityCalculator,
}


def build_calculators(
    handlers: Mapping[str, ManufacturerHandler],
    generic: ManufacturerHandler,
) -> Mapping[ComponentType, SimilarityCalculator]:
    """One shared calculator per base type, UNKNOWN included (default calculator)."""
    calculators: dict[ComponentType, SimilarityCalculator] = {}
    instances: dict[type[SimilarityCalculator], SimilarityCalculator] = {}
    for component_type in ComponentType:
        if component_type.base_type is not component_type:
            continue
        cls = CALCULATOR_CLASSES.get(component_type, DefaultSimilarityCalculator)
        if cls not in instances:
            instances[cls] = cls(handlers, generic)
        calculators[component_type] = instances[cls]
    return MappingProxyType(calculators)


__all__ = [
    "CALCULATOR_CLASSES",
    "CapacitorSimilarityCalculator",
    "Check",
    "ConnectorSimilarityCalculator",
    "DefaultSimilarityCalculator",
    "DiscreteSimilarityCalculator",
    "InductorSimilarityCalculator",
    "LogicICSimilarityCalculator",
    "MCUSimilarityCalculator",
    "RFSimilarityCalculator",
    "ResistorSimilarityCalculator",
    "SensorSimilarityCalculator",
    "SimilarityCalculator",
    "VoltageRegulatorSimilarityCalculator",
    "build_calculators",
    "mpn_similarity",
    "verdict_from_checks",
]
