"""
Drilling with casing: lumped single-point mechanics.

A first-order estimate that superposes buoyed string weight, friction and
weight-on-bit. This is intentionally NOT the stepwise torque & drag model
of casingcalc.profiles.torque_drag; the two are kept separate.

ASSUMPTIONS:
- Whole string weight acts as the normal force (vertical-equivalent well)
- Friction acts at the pipe OD for the string and at the bit radius for WOB
- Weight-on-bit is given in tonnes-force and converted with g = 9.81
"""

import logging
import math
from typing import Union

from casingcalc.models.inputs import SteelGrade, validate_pipe_geometry
from casingcalc.models.outputs import DrillingResult
from casingcalc.physics.grades import get_grade
from casingcalc.physics.units import G, STEEL_DENSITY_SG

logger = logging.getLogger(__name__)

MAX_RPM_CEILING = 120.0

# Empirical torque-per-length coefficient in the RPM limit
RPM_TORQUE_COEFFICIENT = 0.05


def buoyancy_factor(mud_density_sg: float) -> float:
    """Fractional weight reduction of steel in mud: 1 - rho_mud / 7.85."""
    return 1 - mud_density_sg / STEEL_DENSITY_SG


def buoyed_weight(linear_weight_kg_m: float, depth_m: float, mud_density_sg: float) -> float:
    """
    Weight of a string of given length submerged in mud.

    Returns:
        Buoyed weight in kN
    """
    return linear_weight_kg_m * depth_m * buoyancy_factor(mud_density_sg) * G / 1000


def max_rpm(max_torque_knm: float, outer_diameter_mm: float, depth_m: float) -> float:
    """
    Rotary speed limit from the allowed connection torque.

    maxRPM = min(120, sqrt(T_max * 1000 / (0.05 * OD * depth / 1000)))
    """
    denominator = RPM_TORQUE_COEFFICIENT * outer_diameter_mm * depth_m / 1000
    if denominator <= 0:
        return MAX_RPM_CEILING
    return min(MAX_RPM_CEILING, math.sqrt(max_torque_knm * 1000 / denominator))


def calculate_drilling_params(
    outer_diameter_mm: float,
    wall_thickness_mm: float,
    grade: Union[SteelGrade, str],
    depth_m: float,
    rpm: float,
    bit_diameter_mm: float,
    weight_on_bit_t: float,
    mud_density_sg: float,
    friction_coefficient: float,
    max_torque_knm: float,
    linear_weight_kg_m: float,
    bit_torque_knm: float = 0.0,
) -> DrillingResult:
    """
    Estimate drilling loads while rotating the casing string.

    Args:
        outer_diameter_mm: Casing OD
        wall_thickness_mm: Casing wall thickness
        grade: Steel grade tag (validated)
        depth_m: Measured depth of the bit
        rpm: Rotary speed
        bit_diameter_mm: Bit diameter
        weight_on_bit_t: Weight on bit in tonnes
        mud_density_sg: Mud density in g/cm3
        friction_coefficient: Open-hole friction coefficient
        max_torque_knm: Allowed connection torque
        linear_weight_kg_m: Casing linear weight
        bit_torque_knm: On-bottom bit torque added at surface

    Returns:
        DrillingResult

    Equations:
        W      = w * L * BF * g
        T_surf = W * mu * OD/2 + WOB * mu * D_bit/2 + T_bit
        HL     = W + mu * W + WOB
    """
    validate_pipe_geometry(outer_diameter_mm, wall_thickness_mm)
    get_grade(grade)

    bf = buoyancy_factor(mud_density_sg)
    weight_in_mud = buoyed_weight(linear_weight_kg_m, depth_m, mud_density_sg)
    wob_kn = weight_on_bit_t * G

    od_m = outer_diameter_mm / 1000
    bit_m = bit_diameter_mm / 1000

    torque = (
        weight_in_mud * friction_coefficient * od_m / 2
        + wob_kn * friction_coefficient * bit_m / 2
        + bit_torque_knm
    )
    hook_load = weight_in_mud + friction_coefficient * weight_in_mud + wob_kn
    mechanical_speed = rpm * bit_m * math.pi / 60

    logger.debug("drilling at %.0f m: torque=%.2f kN*m hook=%.1f kN", depth_m, torque, hook_load)

    return DrillingResult(
        buoyancy_factor=bf,
        buoyed_weight_kn=weight_in_mud,
        surface_torque_knm=torque,
        hook_load_kn=hook_load,
        weight_on_bit_kn=wob_kn,
        max_rpm=max_rpm(max_torque_knm, outer_diameter_mm, depth_m),
        mechanical_speed_mps=mechanical_speed,
    )
