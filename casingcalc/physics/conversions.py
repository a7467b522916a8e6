"""
Bidirectional conversions between SI and field units.

Each quantity has a closed set of unit tags. Every conversion is a single
multiplicative factor derived once from the shared pint registry, so
from_si(to_si(x)) reproduces x to floating-point precision.

SI reference units: m, MPa, kg/m3, kN, kN*m, l/s, m/s, kg/m.
"""

from enum import Enum
from typing import Union

from casingcalc.errors import UnknownEnumerationError
from casingcalc.physics.units import conversion_factor


class LengthUnit(str, Enum):
    FT = "ft"
    IN = "in"
    M = "m"


class PressureUnit(str, Enum):
    PSI = "psi"
    BAR = "bar"
    MPA = "MPa"


class DensityUnit(str, Enum):
    PPG = "ppg"
    SG = "sg"
    KG_M3 = "kg/m3"


class ForceUnit(str, Enum):
    LBF = "lbf"
    KN = "kN"
    TONF = "tonf"  # metric tonne-force


class TorqueUnit(str, Enum):
    FT_LBF = "ft-lbf"
    KN_M = "kN-m"
    N_M = "N-m"


class FlowRateUnit(str, Enum):
    GPM = "gpm"
    L_S = "l/s"
    BPM = "bpm"


class VelocityUnit(str, Enum):
    FT_S = "ft/s"
    M_S = "m/s"
    FT_MIN = "ft/min"


class LinearWeightUnit(str, Enum):
    LB_FT = "lb/ft"
    KG_M = "kg/m"


# (SI pint unit, {tag: pint unit})
_PINT_UNITS: dict[type[Enum], tuple[str, dict[Enum, str]]] = {
    LengthUnit: ("meter", {
        LengthUnit.FT: "foot",
        LengthUnit.IN: "inch",
        LengthUnit.M: "meter",
    }),
    PressureUnit: ("megapascal", {
        PressureUnit.PSI: "psi",
        PressureUnit.BAR: "bar",
        PressureUnit.MPA: "megapascal",
    }),
    DensityUnit: ("kilogram / meter ** 3", {
        DensityUnit.PPG: "pound / gallon",
        DensityUnit.SG: "specific_gravity",
        DensityUnit.KG_M3: "kilogram / meter ** 3",
    }),
    ForceUnit: ("kilonewton", {
        ForceUnit.LBF: "force_pound",
        ForceUnit.KN: "kilonewton",
        ForceUnit.TONF: "force_metric_ton",
    }),
    TorqueUnit: ("kilonewton * meter", {
        TorqueUnit.FT_LBF: "foot * force_pound",
        TorqueUnit.KN_M: "kilonewton * meter",
        TorqueUnit.N_M: "newton * meter",
    }),
    FlowRateUnit: ("liter / second", {
        FlowRateUnit.GPM: "gallon / minute",
        FlowRateUnit.L_S: "liter / second",
        FlowRateUnit.BPM: "oil_barrel / minute",
    }),
    VelocityUnit: ("meter / second", {
        VelocityUnit.FT_S: "foot / second",
        VelocityUnit.M_S: "meter / second",
        VelocityUnit.FT_MIN: "foot / minute",
    }),
    LinearWeightUnit: ("kilogram / meter", {
        LinearWeightUnit.LB_FT: "pound / foot",
        LinearWeightUnit.KG_M: "kilogram / meter",
    }),
}


def _build_factors() -> dict[Enum, float]:
    factors: dict[Enum, float] = {}
    for si_unit, units in _PINT_UNITS.values():
        for tag, pint_unit in units.items():
            factors[tag] = conversion_factor(pint_unit, si_unit)
    return factors


# tag -> factor to SI, computed once at import
TO_SI_FACTORS: dict[Enum, float] = _build_factors()


def parse_unit(unit_type: type[Enum], tag: Union[Enum, str]) -> Enum:
    """Resolve a unit tag (enum member or its string value)."""
    if isinstance(tag, unit_type):
        return tag
    try:
        return unit_type(tag)
    except ValueError:
        raise UnknownEnumerationError(
            unit_type.__name__, tag, [u.value for u in unit_type]
        ) from None


def _to_si(unit_type: type[Enum], value: float, tag: Union[Enum, str]) -> float:
    return value * TO_SI_FACTORS[parse_unit(unit_type, tag)]


def _from_si(unit_type: type[Enum], value: float, tag: Union[Enum, str]) -> float:
    return value / TO_SI_FACTORS[parse_unit(unit_type, tag)]


def length_to_si(value: float, unit: Union[LengthUnit, str]) -> float:
    return _to_si(LengthUnit, value, unit)


def length_from_si(value: float, unit: Union[LengthUnit, str]) -> float:
    return _from_si(LengthUnit, value, unit)


def pressure_to_si(value: float, unit: Union[PressureUnit, str]) -> float:
    return _to_si(PressureUnit, value, unit)


def pressure_from_si(value: float, unit: Union[PressureUnit, str]) -> float:
    return _from_si(PressureUnit, value, unit)


def density_to_si(value: float, unit: Union[DensityUnit, str]) -> float:
    return _to_si(DensityUnit, value, unit)


def density_from_si(value: float, unit: Union[DensityUnit, str]) -> float:
    return _from_si(DensityUnit, value, unit)


def force_to_si(value: float, unit: Union[ForceUnit, str]) -> float:
    return _to_si(ForceUnit, value, unit)


def force_from_si(value: float, unit: Union[ForceUnit, str]) -> float:
    return _from_si(ForceUnit, value, unit)


def torque_to_si(value: float, unit: Union[TorqueUnit, str]) -> float:
    return _to_si(TorqueUnit, value, unit)


def torque_from_si(value: float, unit: Union[TorqueUnit, str]) -> float:
    return _from_si(TorqueUnit, value, unit)


def flow_rate_to_si(value: float, unit: Union[FlowRateUnit, str]) -> float:
    return _to_si(FlowRateUnit, value, unit)


def flow_rate_from_si(value: float, unit: Union[FlowRateUnit, str]) -> float:
    return _from_si(FlowRateUnit, value, unit)


def velocity_to_si(value: float, unit: Union[VelocityUnit, str]) -> float:
    return _to_si(VelocityUnit, value, unit)


def velocity_from_si(value: float, unit: Union[VelocityUnit, str]) -> float:
    return _from_si(VelocityUnit, value, unit)


def linear_weight_to_si(value: float, unit: Union[LinearWeightUnit, str]) -> float:
    return _to_si(LinearWeightUnit, value, unit)


def linear_weight_from_si(value: float, unit: Union[LinearWeightUnit, str]) -> float:
    return _from_si(LinearWeightUnit, value, unit)


class UnitSystem(str, Enum):
    """Display unit system."""
    SI = "SI"
    FIELD = "FIELD"


# Display labels per quantity
UNIT_LABELS: dict[UnitSystem, dict[str, str]] = {
    UnitSystem.SI: {
        "length": "m",
        "pressure": "MPa",
        "density": "kg/m3",
        "force": "kN",
        "torque": "kN-m",
        "flow_rate": "l/s",
        "velocity": "m/s",
        "linear_weight": "kg/m",
    },
    UnitSystem.FIELD: {
        "length": "ft",
        "pressure": "psi",
        "density": "ppg",
        "force": "lbf",
        "torque": "ft-lbf",
        "flow_rate": "gpm",
        "velocity": "ft/s",
        "linear_weight": "lb/ft",
    },
}


def format_value(
    value: float,
    system: Union[UnitSystem, str],
    quantity: str,
    decimals: int = 2,
) -> str:
    """Format a value with the unit label of a quantity, e.g. '54.10 MPa'."""
    system = parse_unit(UnitSystem, system)
    labels = UNIT_LABELS[system]
    if quantity not in labels:
        raise UnknownEnumerationError("quantity", quantity, list(labels))
    return f"{value:.{decimals}f} {labels[quantity]}"


QUANTITY_UNITS: dict[str, type[Enum]] = {
    "length": LengthUnit,
    "pressure": PressureUnit,
    "density": DensityUnit,
    "force": ForceUnit,
    "torque": TorqueUnit,
    "flow_rate": FlowRateUnit,
    "velocity": VelocityUnit,
    "linear_weight": LinearWeightUnit,
}


def display_value(
    si_value: float,
    system: Union[UnitSystem, str],
    quantity: str,
    decimals: int = 2,
) -> str:
    """Convert a value from its SI reference unit into a display system and format it."""
    system = parse_unit(UnitSystem, system)
    if quantity not in QUANTITY_UNITS:
        raise UnknownEnumerationError("quantity", quantity, list(QUANTITY_UNITS))
    unit = UNIT_LABELS[system][quantity]
    return format_value(_from_si(QUANTITY_UNITS[quantity], si_value, unit), system, quantity, decimals)
