"""
Pipe body strength: burst and collapse pressure ratings.

Formula-derived estimates per the API 5C3 family. These are distinct from
the manufacturer-certified ratings carried by the catalog.

Units:
    OD, WT: mm
    Yield strength: MPa
    Pressures: MPa

ASSUMPTIONS:
- Burst uses the Barlow thin-wall form without the 0.875 wall tolerance
- Collapse regime is selected by D/t ratio only; the three branches are
  not continuous at r = 15 and r = 25, as in the published formulas
"""

import logging
import math
from typing import Union

from casingcalc.models.inputs import SteelGrade, validate_pipe_geometry
from casingcalc.models.outputs import CollapseRegime, PipeRatings
from casingcalc.physics.grades import get_grade
from casingcalc.physics.units import PSI_TO_MPA

logger = logging.getLogger(__name__)

# Elastic collapse constant (psi) from the field-unit formulation
ELASTIC_COLLAPSE_K_PSI = 46_950_000

# D/t boundaries between collapse regimes; the ratio is compared as
# tabulated, to two decimals
DT_RATIO_DECIMALS = 2
YIELD_COLLAPSE_MAX_DT = 15.0
PLASTIC_COLLAPSE_MAX_DT = 25.0


def inner_diameter(outer_diameter_mm: float, wall_thickness_mm: float) -> float:
    """Inner diameter in mm."""
    validate_pipe_geometry(outer_diameter_mm, wall_thickness_mm)
    return outer_diameter_mm - 2 * wall_thickness_mm


def cross_section_area(outer_diameter_mm: float, wall_thickness_mm: float) -> float:
    """
    Pipe body (steel) cross-section area in m^2.

    A = pi * ((OD/2)^2 - (ID/2)^2)
    """
    id_mm = inner_diameter(outer_diameter_mm, wall_thickness_mm)
    od_m = outer_diameter_mm / 1000
    id_m = id_mm / 1000
    return math.pi * (od_m ** 2 - id_m ** 2) / 4


def dt_ratio(outer_diameter_mm: float, wall_thickness_mm: float) -> float:
    """Outer diameter to wall thickness ratio."""
    validate_pipe_geometry(outer_diameter_mm, wall_thickness_mm)
    return outer_diameter_mm / wall_thickness_mm


def collapse_regime(ratio: float) -> CollapseRegime:
    """Select the collapse branch for a D/t ratio (boundaries inclusive below)."""
    tabulated = round(ratio, DT_RATIO_DECIMALS)
    if tabulated <= YIELD_COLLAPSE_MAX_DT:
        return CollapseRegime.YIELD
    if tabulated <= PLASTIC_COLLAPSE_MAX_DT:
        return CollapseRegime.PLASTIC
    return CollapseRegime.ELASTIC


def calculate_burst_pressure(
    outer_diameter_mm: float,
    wall_thickness_mm: float,
    grade: Union[SteelGrade, str],
) -> float:
    """
    Calculate internal yield (burst) pressure.

    Equations:
        P_burst = 2 * Yp * t / D

    Returns:
        Burst pressure in MPa
    """
    validate_pipe_geometry(outer_diameter_mm, wall_thickness_mm)
    yield_mpa = get_grade(grade).yield_mpa
    return 2 * yield_mpa * wall_thickness_mm / outer_diameter_mm


def calculate_collapse_pressure(
    outer_diameter_mm: float,
    wall_thickness_mm: float,
    grade: Union[SteelGrade, str],
) -> float:
    """
    Calculate collapse pressure by D/t regime.

    Equations (r = D/t):
        r <= 15:       P = 2 * Yp / (r - 1)
        15 < r <= 25:  P = Yp / (0.465 * r - 6.775)
        r > 25:        P = K / r^3, K = 46.95e6 psi

    Returns:
        Collapse pressure in MPa
    """
    ratio = dt_ratio(outer_diameter_mm, wall_thickness_mm)
    yield_mpa = get_grade(grade).yield_mpa
    regime = collapse_regime(ratio)

    if regime is CollapseRegime.YIELD:
        return 2 * yield_mpa / (ratio - 1)
    if regime is CollapseRegime.PLASTIC:
        return yield_mpa / (0.465 * ratio - 6.775)
    return ELASTIC_COLLAPSE_K_PSI * PSI_TO_MPA / ratio ** 3


def estimate_pipe_ratings(
    outer_diameter_mm: float,
    wall_thickness_mm: float,
    grade: Union[SteelGrade, str],
) -> PipeRatings:
    """Burst and collapse estimates with the regime used."""
    steel = get_grade(grade)
    ratio = dt_ratio(outer_diameter_mm, wall_thickness_mm)
    ratings = PipeRatings(
        burst_mpa=calculate_burst_pressure(outer_diameter_mm, wall_thickness_mm, steel),
        collapse_mpa=calculate_collapse_pressure(outer_diameter_mm, wall_thickness_mm, steel),
        collapse_regime=collapse_regime(ratio),
        dt_ratio=ratio,
        yield_strength_mpa=steel.yield_mpa,
    )
    logger.debug(
        "ratings OD=%.1f WT=%.2f %s: burst=%.2f collapse=%.2f (%s)",
        outer_diameter_mm, wall_thickness_mm, steel.value,
        ratings.burst_mpa, ratings.collapse_mpa, ratings.collapse_regime.value,
    )
    return ratings
