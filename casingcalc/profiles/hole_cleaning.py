"""
Hole cleaning against depth.

A coarse cuttings-transport heuristic:
    TR   = v_annulus / v_slip              v_slip = 0.15 m/s
    eff  = min(100, 25 * TR)               (%)
    conc = rate / (Q * 60) * 100 * (1 - eff/100)   (%)
    bed  = conc / 100 * step * 0.1         (m)

The annulus is uniform, so every point shares the same velocity; the
profile keeps the per-depth shape so it can be charted next to the
other profiles.
"""

from casingcalc.constants import DEFAULT_PROFILE_STEPS
from casingcalc.models.outputs import CleaningPoint, CleaningRating, HoleCleaningProfile
from casingcalc.physics.hydraulics import annular_velocity
from casingcalc.profiles.depth import depth_steps

SLIP_VELOCITY_MPS = 0.15
EFFICIENCY_PER_TRANSPORT_RATIO = 25.0
BED_HEIGHT_FACTOR = 0.1

GOOD_EFFICIENCY_MIN = 85.0
FAIR_EFFICIENCY_MIN = 70.0
CRITICAL_CONCENTRATION_PCT = 5.0


def transport_efficiency(transport_ratio: float) -> float:
    """Linear-saturating cleaning efficiency; 100 for any ratio >= 4."""
    return min(100.0, transport_ratio * EFFICIENCY_PER_TRANSPORT_RATIO)


def rate_cleaning(average_efficiency_pct: float) -> CleaningRating:
    if average_efficiency_pct >= GOOD_EFFICIENCY_MIN:
        return CleaningRating.GOOD
    if average_efficiency_pct >= FAIR_EFFICIENCY_MIN:
        return CleaningRating.FAIR
    return CleaningRating.POOR


def calculate_hole_cleaning_profile(
    total_depth_m: float,
    flow_rate_lps: float,
    hole_diameter_mm: float,
    outer_diameter_mm: float,
    cuttings_rate: float,
    steps: int = DEFAULT_PROFILE_STEPS,
    critical_concentration_pct: float = CRITICAL_CONCENTRATION_PCT,
) -> HoleCleaningProfile:
    """
    Build the hole-cleaning profile.

    Raises:
        ValueError: Non-positive flow rate or hole not larger than the pipe
    """
    if flow_rate_lps <= 0:
        raise ValueError("flow rate must be positive")

    velocity = annular_velocity(flow_rate_lps, hole_diameter_mm, outer_diameter_mm)
    ratio = velocity / SLIP_VELOCITY_MPS
    efficiency = transport_efficiency(ratio)
    concentration = cuttings_rate / (flow_rate_lps * 60) * 100 * (1 - efficiency / 100)

    points = [
        CleaningPoint(
            depth_m=step.depth_m,
            flow_rate_lps=flow_rate_lps,
            annulus_velocity_mps=velocity,
            transport_ratio=ratio,
            cleaning_efficiency_pct=efficiency,
            cuttings_concentration_pct=concentration,
            bed_height_m=concentration / 100 * step.step_m * BED_HEIGHT_FACTOR,
        )
        for step in depth_steps(total_depth_m, steps)
    ]

    average = sum(p.cleaning_efficiency_pct for p in points) / len(points)
    max_concentration = max(p.cuttings_concentration_pct for p in points)
    return HoleCleaningProfile(
        points=points,
        average_efficiency_pct=average,
        rating=rate_cleaning(average),
        max_concentration_pct=max_concentration,
        critical_concentration_pct=critical_concentration_pct,
        concentration_exceeded=max_concentration > critical_concentration_pct,
    )
