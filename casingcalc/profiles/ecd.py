"""
Equivalent circulating density against depth.

Annular friction pressure is spread linearly over the string:
    dP(d) = dP_annulus * d / D

    ECD_circ(d) = rho_static + dP(d) / (g * d)
    ECD_trip(d) = rho_static + 1.15 * dP(d) / (g * d)

At the surface point g * d is replaced by 1 (dP is 0 there anyway).
Fracture and pore gradients are reference lines supplied by the caller.
"""

import logging

from casingcalc.constants import DEFAULT_PROFILE_STEPS
from casingcalc.models.outputs import ECDPoint, ECDProfile
from casingcalc.physics.units import G
from casingcalc.profiles.depth import depth_steps

logger = logging.getLogger(__name__)

# Surge/swab multiplier on the friction term while moving pipe
TRIPPING_SURGE_FACTOR = 1.15


def _friction_density(pressure_mpa: float, depth_m: float) -> float:
    """Pressure expressed as equivalent mud density over a depth (g/cm3)."""
    denominator = G * depth_m or 1.0
    # MPa * 1000 = kPa; kPa / (m/s2 * m) = t/m3 = g/cm3
    return pressure_mpa * 1000 / denominator


def calculate_ecd_profile(
    total_depth_m: float,
    mud_density_sg: float,
    annulus_pressure_loss_mpa: float,
    frac_gradient_sg: float,
    pore_gradient_sg: float,
    steps: int = DEFAULT_PROFILE_STEPS,
) -> ECDProfile:
    """
    Build the ECD profile.

    Args:
        total_depth_m: Depth the annular loss applies over
        mud_density_sg: Static mud density (g/cm3)
        annulus_pressure_loss_mpa: Total annular friction loss
        frac_gradient_sg: Fracture gradient as equivalent density
        pore_gradient_sg: Pore pressure gradient as equivalent density
        steps: Number of depth steps

    Returns:
        ECDProfile with steps + 1 points
    """
    points = []
    for step in depth_steps(total_depth_m, steps):
        pressure_at_depth = annulus_pressure_loss_mpa * step.depth_m / total_depth_m
        friction_term = _friction_density(pressure_at_depth, step.depth_m)
        ecd_circulating = mud_density_sg + friction_term
        ecd_tripping = mud_density_sg + friction_term * TRIPPING_SURGE_FACTOR

        points.append(ECDPoint(
            depth_m=step.depth_m,
            static_density_sg=mud_density_sg,
            ecd_circulating_sg=ecd_circulating,
            ecd_tripping_sg=ecd_tripping,
            frac_gradient_sg=frac_gradient_sg,
            pore_gradient_sg=pore_gradient_sg,
            lost_circulation_risk=max(ecd_circulating, ecd_tripping) > frac_gradient_sg,
            influx_risk=mud_density_sg < pore_gradient_sg,
        ))

    profile = ECDProfile(
        points=points,
        max_ecd_sg=max(max(p.ecd_circulating_sg, p.ecd_tripping_sg) for p in points),
    )
    logger.debug("ECD profile to %.0f m: max %.3f g/cm3", total_depth_m, profile.max_ecd_sg)
    return profile
