"""
Pydantic models for casing calculation inputs and outputs.
"""

from casingcalc.models.inputs import (
    SteelGrade,
    ConnectionType,
    SectionType,
    PipeSection,
    FrictionCoefficients,
    WellGeometryContext,
    Nozzle,
    TrajectoryPoint,
    DrillingParameters,
    HydraulicsParameters,
    EnabledCalculations,
    CalculationInputs,
    validate_pipe_geometry,
)
from casingcalc.models.outputs import (
    SafetyClass,
    SafetyCheck,
    CollapseRegime,
    PipeRatings,
    FlowRegime,
    ConnectionResult,
    DrillingResult,
    RunningResult,
    HydraulicsResult,
    ECDPoint,
    ECDProfile,
    TorqueModePoint,
    TripLoadPoint,
    TorqueDragProfile,
    CleaningRating,
    CleaningPoint,
    HoleCleaningProfile,
    PressurePoint,
    PressureProfile,
    Calculation,
)

__all__ = [
    "SteelGrade",
    "ConnectionType",
    "SectionType",
    "PipeSection",
    "FrictionCoefficients",
    "WellGeometryContext",
    "Nozzle",
    "TrajectoryPoint",
    "DrillingParameters",
    "HydraulicsParameters",
    "EnabledCalculations",
    "CalculationInputs",
    "validate_pipe_geometry",
    "SafetyClass",
    "SafetyCheck",
    "CollapseRegime",
    "PipeRatings",
    "FlowRegime",
    "ConnectionResult",
    "DrillingResult",
    "RunningResult",
    "HydraulicsResult",
    "ECDPoint",
    "ECDProfile",
    "TorqueModePoint",
    "TripLoadPoint",
    "TorqueDragProfile",
    "CleaningRating",
    "CleaningPoint",
    "HoleCleaningProfile",
    "PressurePoint",
    "PressureProfile",
    "Calculation",
]
