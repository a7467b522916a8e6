"""
Casing string calculator (casingcalc)

Engineering calculation core for oil-well casing strings: burst and
collapse ratings, connection capacity, drilling and running mechanics,
circulating hydraulics, and depth profiles of ECD, torque & drag, hole
cleaning and pressure.

Usage:
    python -m casingcalc make-example
    python -m casingcalc calculate --input example_input.json --summary
    python -m casingcalc catalog --diameter 244.5
"""

__version__ = "0.1.0"

from casingcalc.errors import CasingCalcError, InvalidGeometryError, UnknownEnumerationError
from casingcalc.models.inputs import (
    CalculationInputs,
    ConnectionType,
    PipeSection,
    SteelGrade,
    WellGeometryContext,
)
from casingcalc.models.outputs import Calculation, SafetyClass
from casingcalc.calculator import CasingCalculator, calculate
from casingcalc.history import CalculationHistory

__all__ = [
    "CasingCalcError",
    "InvalidGeometryError",
    "UnknownEnumerationError",
    "CalculationInputs",
    "ConnectionType",
    "PipeSection",
    "SteelGrade",
    "WellGeometryContext",
    "Calculation",
    "SafetyClass",
    "CasingCalculator",
    "calculate",
    "CalculationHistory",
]
