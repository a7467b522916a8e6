"""
Unit registry and helpers for dimensional calculations.

Uses pint so that every conversion factor in the package is derived from
one registry instead of hand-typed constants.
"""

import pint

from casingcalc.constants import G, STEEL_DENSITY_SG, PSI_TO_MPA

# Create a shared unit registry for the entire application
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity

# Specific gravity relative to fresh water, used for mud weights
ureg.define("specific_gravity = 1000 * kilogram / meter ** 3")

__all__ = [
    "ureg",
    "Q_",
    "G",
    "STEEL_DENSITY_SG",
    "PSI_TO_MPA",
    "magnitude_in",
    "conversion_factor",
    "sg_to_kg_m3",
]


def magnitude_in(quantity: pint.Quantity, unit: str) -> float:
    """Get the magnitude of a quantity in specified units."""
    return quantity.to(unit).magnitude


def conversion_factor(from_unit: str, to_unit: str) -> float:
    """Multiplicative factor taking a value in from_unit to to_unit."""
    return magnitude_in(Q_(1.0, from_unit), to_unit)


def sg_to_kg_m3(density_sg: float) -> float:
    """Convert specific gravity (g/cm3) to kg/m3."""
    return float(magnitude_in(Q_(density_sg, "specific_gravity"), "kilogram / meter ** 3"))
