"""
Stepwise torque & drag along the casing string.

Unlike the lumped drilling estimate, loads are evaluated at every depth
step. One loop produces both the per-mode torque points and the trip load
table, so their depths are aligned index by index.

Equations (per depth d):
    W(d)   = w * d * BF * g                 buoyed weight (kN)
    F(d)   = W(d) * mu                      wall friction (kN)
    T_mode = F(d) * OD/2 * k_mode           k: trip-in 0.80,
                                               rotating off bottom 0.70,
                                               trip-out 0.85
    HL     = W(d) + F(d)
    stress = HL / A_body

ASSUMPTIONS:
- Normal force is the full buoyed weight (vertical-equivalent string)
- Circulation lowers effective friction; no circulation is 1.2x torque
"""

import logging
from typing import Union

from casingcalc.constants import DEFAULT_PROFILE_STEPS
from casingcalc.models.inputs import SteelGrade
from casingcalc.models.outputs import TorqueDragProfile, TorqueModePoint, TripLoadPoint
from casingcalc.physics.drilling import buoyed_weight
from casingcalc.physics.grades import get_grade
from casingcalc.physics.safety import check_safety, safety_factor
from casingcalc.physics.strength import cross_section_area
from casingcalc.profiles.depth import depth_steps

logger = logging.getLogger(__name__)

TRIP_IN_FACTOR = 0.80
ROTATING_OFF_BOTTOM_FACTOR = 0.70
TRIP_OUT_FACTOR = 0.85

PICKUP_FACTOR = 1.10
SLACK_OFF_FACTOR = 0.90
ROTATING_LOAD_FACTOR = 0.85
NO_CIRCULATION_TORQUE_FACTOR = 1.2


def calculate_torque_drag_profile(
    total_depth_m: float,
    linear_weight_kg_m: float,
    outer_diameter_mm: float,
    wall_thickness_mm: float,
    grade: Union[SteelGrade, str],
    mud_density_sg: float,
    friction_coefficient: float,
    steps: int = DEFAULT_PROFILE_STEPS,
) -> TorqueDragProfile:
    """
    Build torque-per-mode and trip-load profiles in one pass.

    Args:
        total_depth_m: String length
        linear_weight_kg_m: Casing linear weight
        outer_diameter_mm: Casing OD (lever arm is OD/2)
        wall_thickness_mm: Casing wall thickness (body area for stress)
        grade: Steel grade (yield for the safety factor)
        mud_density_sg: Mud density (g/cm3)
        friction_coefficient: Open-hole friction coefficient
        steps: Number of depth steps

    Returns:
        TorqueDragProfile with steps + 1 points in each table
    """
    yield_mpa = get_grade(grade).yield_mpa
    body_area_m2 = cross_section_area(outer_diameter_mm, wall_thickness_mm)
    lever_arm_m = outer_diameter_mm / 1000 / 2

    torque_points = []
    trip_points = []
    for step in depth_steps(total_depth_m, steps):
        weight = buoyed_weight(linear_weight_kg_m, step.depth_m, mud_density_sg)
        friction_force = weight * friction_coefficient
        base_torque = friction_force * lever_arm_m

        trip_in = base_torque * TRIP_IN_FACTOR
        torque_points.append(TorqueModePoint(
            depth_m=step.depth_m,
            trip_in_rotating_knm=trip_in,
            rotating_off_bottom_knm=base_torque * ROTATING_OFF_BOTTOM_FACTOR,
            trip_out_rotating_knm=base_torque * TRIP_OUT_FACTOR,
        ))

        hook_load = weight + friction_force
        pickup = hook_load * PICKUP_FACTOR
        # kN / m2 = kPa
        stress_mpa = hook_load / body_area_m2 / 1000
        trip_points.append(TripLoadPoint(
            depth_m=step.depth_m,
            hook_load_kn=hook_load,
            pickup_load_kn=pickup,
            slack_off_load_kn=hook_load * SLACK_OFF_FACTOR,
            rotating_load_kn=hook_load * ROTATING_LOAD_FACTOR,
            torque_with_circulation_knm=trip_in,
            torque_no_circulation_knm=trip_in * NO_CIRCULATION_TORQUE_FACTOR,
            overpull_kn=pickup - hook_load,
            pipe_stress_mpa=stress_mpa,
            yield_safety_factor=safety_factor(yield_mpa, stress_mpa),
        ))

    max_stress = max(p.pipe_stress_mpa for p in trip_points)
    logger.debug("torque & drag to %.0f m: max stress %.1f MPa", total_depth_m, max_stress)

    return TorqueDragProfile(
        torque_points=torque_points,
        trip_points=trip_points,
        max_stress_mpa=max_stress,
        yield_safety=check_safety(yield_mpa, max_stress, "Yield strength / max pipe body stress"),
    )
