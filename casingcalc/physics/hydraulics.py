"""
Circulating hydraulics for a casing string.

Single canonical SI formulation: pipe and annulus velocities, Reynolds
numbers, Darcy-Weisbach pressure losses, bit nozzle jet, hydraulic power
and a simplified hole-cleaning check.

Units:
    Diameters: mm           Flow rate: l/s
    Depth: m                Mud density: g/cm3
    Viscosity: cP (mPa*s)   Pressures: MPa

ASSUMPTIONS:
- Newtonian fluid with the plastic viscosity as its viscosity
- Laminar below Re = 2300; Blasius smooth-pipe friction above that,
  including the 2300-4000 transitional band
- Annulus hydraulic diameter is the radial gap (hole - OD)
- Concentric pipe, no tool joints
"""

import logging
import math
from typing import Iterable, Optional

from casingcalc.models.inputs import Nozzle
from casingcalc.models.outputs import FlowRegime, HydraulicsResult
from casingcalc.physics.units import G, sg_to_kg_m3

logger = logging.getLogger(__name__)

LAMINAR_RE_MAX = 2300.0
TURBULENT_RE_MIN = 4000.0

# Reynolds number used to define the critical (turbulence onset) velocity
CRITICAL_REYNOLDS = 2100.0

# Annular velocity giving full hole cleaning in the simplified model
MIN_CLEANING_VELOCITY_MPS = 0.4

MAX_NOZZLES = 12


def total_nozzle_area(nozzles: Iterable[Nozzle]) -> float:
    """Aggregate flow area of a nozzle set, sum(pi * (d/2)^2), in mm^2."""
    return sum(nozzle.area_mm2 for nozzle in nozzles)


def pipe_area(inner_diameter_mm: float) -> float:
    """Flow area inside the pipe in m^2."""
    return math.pi * (inner_diameter_mm / 1000) ** 2 / 4


def annulus_area(hole_diameter_mm: float, outer_diameter_mm: float) -> float:
    """
    Flow area between pipe OD and hole wall in m^2.

    Shared by hydraulics, running and hole-cleaning calculations.

    Raises:
        ValueError: If the hole is not larger than the pipe
    """
    if hole_diameter_mm <= outer_diameter_mm:
        raise ValueError(
            f"hole diameter ({hole_diameter_mm} mm) must exceed pipe OD ({outer_diameter_mm} mm)"
        )
    return math.pi * ((hole_diameter_mm / 1000) ** 2 - (outer_diameter_mm / 1000) ** 2) / 4


def annular_velocity(flow_rate_lps: float, hole_diameter_mm: float, outer_diameter_mm: float) -> float:
    """Mean annular return velocity in m/s."""
    return (flow_rate_lps / 1000) / annulus_area(hole_diameter_mm, outer_diameter_mm)


def reynolds_number(density_kg_m3: float, velocity_mps: float, diameter_m: float, viscosity_pa_s: float) -> float:
    """Re = rho * v * D / mu."""
    return density_kg_m3 * velocity_mps * diameter_m / viscosity_pa_s


def classify_flow_regime(reynolds: float) -> FlowRegime:
    """Laminar below 2300, turbulent above 4000, transitional between (inclusive)."""
    if reynolds < LAMINAR_RE_MAX:
        return FlowRegime.LAMINAR
    if reynolds <= TURBULENT_RE_MIN:
        return FlowRegime.TRANSITIONAL
    return FlowRegime.TURBULENT


def friction_factor(reynolds: float) -> float:
    """Darcy friction factor: 64/Re laminar, Blasius 0.316/Re^0.25 otherwise."""
    if reynolds <= 0:
        raise ValueError("Reynolds number must be positive")
    if reynolds < LAMINAR_RE_MAX:
        return 64 / reynolds
    return 0.316 / reynolds ** 0.25


def frictional_pressure_loss(
    friction: float,
    density_kg_m3: float,
    velocity_mps: float,
    length_m: float,
    diameter_m: float,
) -> float:
    """
    Darcy-Weisbach pressure loss in MPa.

    Equations:
        h  = f * v^2 * L / (2 * D * g)    (m of mud)
        dP = rho * g * h
    """
    head = friction * velocity_mps ** 2 * length_m / (2 * diameter_m * G)
    return density_kg_m3 * G * head / 1e6


def critical_velocity(viscosity_pa_s: float, density_kg_m3: float, diameter_m: float) -> float:
    """Turbulence onset velocity, 2100 * mu / (rho * D), in m/s."""
    return CRITICAL_REYNOLDS * viscosity_pa_s / (density_kg_m3 * diameter_m)


def cleaning_efficiency(annulus_velocity_mps: float) -> float:
    """Annular velocity over the minimum cleaning velocity, capped at 100 %."""
    return min(100.0, annulus_velocity_mps / MIN_CLEANING_VELOCITY_MPS * 100)


def calculate_hydraulics(
    outer_diameter_mm: float,
    inner_diameter_mm: float,
    hole_diameter_mm: float,
    depth_m: float,
    flow_rate_lps: float,
    mud_density_sg: float,
    viscosity_cp: float,
    nozzles: Optional[Iterable[Nozzle]] = None,
) -> HydraulicsResult:
    """
    Compute circulating pressure losses and related quantities.

    Args:
        outer_diameter_mm: Pipe OD
        inner_diameter_mm: Pipe ID
        hole_diameter_mm: Hole (or previous casing ID) diameter
        depth_m: Circulating length
        flow_rate_lps: Pump rate
        mud_density_sg: Mud density (g/cm3)
        viscosity_cp: Mud plastic viscosity (cP)
        nozzles: Bit nozzles; without them there is no bit pressure drop

    Returns:
        HydraulicsResult
    """
    if flow_rate_lps <= 0:
        raise ValueError("flow rate must be positive")
    if viscosity_cp <= 0:
        raise ValueError("viscosity must be positive")
    if inner_diameter_mm <= 0:
        raise ValueError("inner diameter must be positive")
    nozzles = list(nozzles or [])
    if len(nozzles) > MAX_NOZZLES:
        raise ValueError(f"at most {MAX_NOZZLES} nozzles, got {len(nozzles)}")

    rho = sg_to_kg_m3(mud_density_sg)
    mu = viscosity_cp / 1000
    q = flow_rate_lps / 1000

    id_m = inner_diameter_mm / 1000
    gap_m = (hole_diameter_mm - outer_diameter_mm) / 1000

    v_pipe = q / pipe_area(inner_diameter_mm)
    v_ann = q / annulus_area(hole_diameter_mm, outer_diameter_mm)

    re_pipe = reynolds_number(rho, v_pipe, id_m, mu)
    re_ann = reynolds_number(rho, v_ann, gap_m, mu)

    loss_pipe = frictional_pressure_loss(friction_factor(re_pipe), rho, v_pipe, depth_m, id_m)
    loss_ann = frictional_pressure_loss(friction_factor(re_ann), rho, v_ann, depth_m, gap_m)

    nozzle_area = total_nozzle_area(nozzles)
    if nozzle_area > 0:
        jet_velocity = q / (nozzle_area / 1e6)
        # rho * g * v^2 / (2g)
        loss_nozzles = rho * jet_velocity ** 2 / 2 / 1e6
        impact_force = rho * q * jet_velocity / 1000
    else:
        jet_velocity = 0.0
        loss_nozzles = 0.0
        impact_force = 0.0

    total_loss = loss_pipe + loss_ann + loss_nozzles
    # MPa * m3/s = MW
    hydraulic_power = q * total_loss * 1000

    v_crit = critical_velocity(mu, rho, id_m)

    logger.debug(
        "hydraulics Q=%.1f l/s: Re_pipe=%.0f Re_ann=%.0f dP=%.3f MPa",
        flow_rate_lps, re_pipe, re_ann, total_loss,
    )

    return HydraulicsResult(
        flow_rate_lps=flow_rate_lps,
        pipe_velocity_mps=v_pipe,
        annulus_velocity_mps=v_ann,
        reynolds_pipe=re_pipe,
        reynolds_annulus=re_ann,
        flow_regime_pipe=classify_flow_regime(re_pipe),
        flow_regime_annulus=classify_flow_regime(re_ann),
        pressure_loss_pipe_mpa=loss_pipe,
        pressure_loss_annulus_mpa=loss_ann,
        pressure_loss_nozzles_mpa=loss_nozzles,
        total_pressure_loss_mpa=total_loss,
        nozzle_area_mm2=nozzle_area,
        jet_velocity_mps=jet_velocity,
        jet_impact_force_kn=impact_force,
        hydraulic_power_kw=hydraulic_power,
        critical_velocity_mps=v_crit,
        cleaning_efficiency_pct=cleaning_efficiency(v_ann),
        cleaning_adequate=v_ann >= v_crit,
    )
