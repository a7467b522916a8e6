"""
Running (tripping) casing into an existing wellbore.

Lumped single-point estimate, same buoyancy model as the drilling engine.
"""

import logging

from casingcalc.models.outputs import RunningResult
from casingcalc.physics.drilling import buoyed_weight
from casingcalc.physics.hydraulics import annular_velocity
from casingcalc.physics.units import G

logger = logging.getLogger(__name__)

# Running speed limit: 3.0 m/s at surface, -1 m/s per 1000 m, floored
SURFACE_RUNNING_SPEED_MPS = 3.0
RUNNING_SPEED_DECAY_PER_M = 1 / 1000
MIN_RUNNING_SPEED_MPS = 0.5


def max_running_speed(depth_m: float) -> float:
    """Running speed decreasing linearly with depth, floored at 0.5 m/s."""
    return max(
        MIN_RUNNING_SPEED_MPS,
        SURFACE_RUNNING_SPEED_MPS - depth_m * RUNNING_SPEED_DECAY_PER_M,
    )


def hydrostatic_pressure(mud_density_sg: float, depth_m: float) -> float:
    """Mud column pressure in MPa."""
    return mud_density_sg * G * depth_m / 1000


def calculate_running_params(
    outer_diameter_mm: float,
    depth_m: float,
    mud_density_sg: float,
    linear_weight_kg_m: float,
    hole_diameter_mm: float,
    friction_coefficient: float,
    flow_rate_lps: float,
) -> RunningResult:
    """
    Estimate running loads and limits.

    Args:
        outer_diameter_mm: Casing OD
        depth_m: Shoe depth
        mud_density_sg: Mud density (g/cm3)
        linear_weight_kg_m: Casing linear weight
        hole_diameter_mm: Wellbore diameter
        friction_coefficient: Cased-hole friction coefficient
        flow_rate_lps: Circulation rate while running

    Returns:
        RunningResult
    """
    weight = buoyed_weight(linear_weight_kg_m, depth_m, mud_density_sg)
    drag = weight * friction_coefficient

    logger.debug("running to %.0f m: load=%.1f kN", depth_m, weight + drag)

    return RunningResult(
        buoyed_weight_kn=weight,
        drag_force_kn=drag,
        running_load_kn=weight + drag,
        max_running_speed_mps=max_running_speed(depth_m),
        bottom_hole_pressure_mpa=hydrostatic_pressure(mud_density_sg, depth_m),
        annulus_velocity_mps=annular_velocity(flow_rate_lps, hole_diameter_mm, outer_diameter_mm),
    )
