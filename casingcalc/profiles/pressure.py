"""
Pressure inside and outside the string against depth.

    P_hyd(d)  = rho * g * d / 1000                    (MPa)
    P_circ(d) = P_hyd(d) + dP_pipe * d / D
    P_ann(d)  = P_hyd(d) - dP_annulus * d / D

Burst is checked against the highest circulating pressure, collapse
against the highest annulus pressure.
"""

import logging

from casingcalc.models.outputs import PipeRatings, PressurePoint, PressureProfile
from casingcalc.physics.running import hydrostatic_pressure
from casingcalc.physics.safety import check_safety
from casingcalc.profiles.depth import depth_steps

logger = logging.getLogger(__name__)

PRESSURE_PROFILE_STEPS = 20


def calculate_pressure_profile(
    total_depth_m: float,
    mud_density_sg: float,
    pipe_pressure_loss_mpa: float,
    annulus_pressure_loss_mpa: float,
    ratings: PipeRatings,
    steps: int = PRESSURE_PROFILE_STEPS,
) -> PressureProfile:
    """Build the pressure profile and check it against burst and collapse."""
    points = []
    for step in depth_steps(total_depth_m, steps):
        fraction = step.depth_m / total_depth_m
        hydrostatic = hydrostatic_pressure(mud_density_sg, step.depth_m)
        circulating = hydrostatic + pipe_pressure_loss_mpa * fraction
        annulus = hydrostatic - annulus_pressure_loss_mpa * fraction
        points.append(PressurePoint(
            depth_m=step.depth_m,
            hydrostatic_mpa=hydrostatic,
            circulating_mpa=circulating,
            annulus_mpa=annulus,
            differential_mpa=circulating - annulus,
        ))

    max_circulating = max(p.circulating_mpa for p in points)
    max_annulus = max(p.annulus_mpa for p in points)
    logger.debug(
        "pressure profile to %.0f m: circ %.2f MPa, annulus %.2f MPa",
        total_depth_m, max_circulating, max_annulus,
    )
    return PressureProfile(
        points=points,
        max_circulating_mpa=max_circulating,
        max_annulus_mpa=max_annulus,
        burst_safety=check_safety(ratings.burst_mpa, max_circulating, "Burst rating / max circulating pressure"),
        collapse_safety=check_safety(ratings.collapse_mpa, max_annulus, "Collapse rating / max annulus pressure"),
    )
