"""
Scalar engineering engines for casing strings.

This module provides pure, unit-consistent calculations for:
- Unit conversion between SI and field units (pint-derived factors)
- Burst and collapse pressure estimates
- Connection torque and axial capacity
- Lumped drilling and running mechanics
- Circulating hydraulics

Every function is a pure function of its inputs; nothing here holds state.
"""

from casingcalc.physics.units import ureg, Q_, G, STEEL_DENSITY_SG, PSI_TO_MPA
from casingcalc.physics.grades import get_grade, list_grades
from casingcalc.physics.safety import (
    classify_safety_factor,
    safety_factor,
    check_safety,
)
from casingcalc.physics.strength import (
    validate_pipe_geometry,
    inner_diameter,
    cross_section_area,
    dt_ratio,
    collapse_regime,
    calculate_burst_pressure,
    calculate_collapse_pressure,
    estimate_pipe_ratings,
)
from casingcalc.physics.connections import (
    get_connection_type,
    max_torque_capacity,
    max_axial_load,
    axial_string_load,
    calculate_connections,
)
from casingcalc.physics.drilling import (
    buoyancy_factor,
    buoyed_weight,
    max_rpm,
    calculate_drilling_params,
)
from casingcalc.physics.hydraulics import (
    total_nozzle_area,
    pipe_area,
    annulus_area,
    annular_velocity,
    reynolds_number,
    classify_flow_regime,
    friction_factor,
    frictional_pressure_loss,
    critical_velocity,
    cleaning_efficiency,
    calculate_hydraulics,
)
from casingcalc.physics.running import (
    max_running_speed,
    hydrostatic_pressure,
    calculate_running_params,
)

__all__ = [
    "ureg",
    "Q_",
    "G",
    "STEEL_DENSITY_SG",
    "PSI_TO_MPA",
    "get_grade",
    "list_grades",
    "classify_safety_factor",
    "safety_factor",
    "check_safety",
    "validate_pipe_geometry",
    "inner_diameter",
    "cross_section_area",
    "dt_ratio",
    "collapse_regime",
    "calculate_burst_pressure",
    "calculate_collapse_pressure",
    "estimate_pipe_ratings",
    "get_connection_type",
    "max_torque_capacity",
    "max_axial_load",
    "axial_string_load",
    "calculate_connections",
    "buoyancy_factor",
    "buoyed_weight",
    "max_rpm",
    "calculate_drilling_params",
    "total_nozzle_area",
    "pipe_area",
    "annulus_area",
    "annular_velocity",
    "reynolds_number",
    "classify_flow_regime",
    "friction_factor",
    "frictional_pressure_loss",
    "critical_velocity",
    "cleaning_efficiency",
    "calculate_hydraulics",
    "max_running_speed",
    "hydrostatic_pressure",
    "calculate_running_params",
]
