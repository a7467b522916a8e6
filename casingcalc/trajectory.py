"""
Well trajectory helpers.

Operates on survey rows that have already been parsed into
TrajectoryPoint records; file formats are handled by the caller.

Dogleg severity between consecutive stations (deg / 10 m):
    DLS = 10 * sqrt(dI^2 + (dA * sin(I_avg))^2) / dMD

dA is wrapped into [-180, 180] so a 359 -> 1 deg turn counts as 2 deg.
"""

import math
from typing import Iterable

from casingcalc.models.inputs import FrictionCoefficients, SectionType, TrajectoryPoint


def _wrap_azimuth(delta_deg: float) -> float:
    return (delta_deg + 180.0) % 360.0 - 180.0


def dogleg_severity(previous: TrajectoryPoint, current: TrajectoryPoint) -> float:
    """
    Dogleg severity between two stations in deg/10 m.

    Raises:
        ValueError: If measured depth does not increase
    """
    delta_md = current.measured_depth_m - previous.measured_depth_m
    if delta_md <= 0:
        raise ValueError(
            f"measured depth must increase: {previous.measured_depth_m} -> {current.measured_depth_m}"
        )
    delta_inc = current.inclination_deg - previous.inclination_deg
    delta_azi = _wrap_azimuth(current.azimuth_deg - previous.azimuth_deg)
    avg_inc = math.radians((current.inclination_deg + previous.inclination_deg) / 2)
    return 10 * math.sqrt(delta_inc ** 2 + (delta_azi * math.sin(avg_inc)) ** 2) / delta_md


def with_dogleg_severity(points: Iterable[TrajectoryPoint]) -> list[TrajectoryPoint]:
    """
    Fill in missing dogleg severities from neighbouring stations.

    Points that already carry a value keep it; the first station gets 0.
    Input points are not modified.

    Raises:
        ValueError: If measured depth does not increase
    """
    result: list[TrajectoryPoint] = []
    previous = None
    for point in points:
        if previous is not None and point.measured_depth_m <= previous.measured_depth_m:
            raise ValueError(
                f"measured depth must increase: {previous.measured_depth_m} -> {point.measured_depth_m}"
            )
        if point.dogleg_deg_per_10m is None:
            dls = 0.0 if previous is None else dogleg_severity(previous, point)
            point = point.model_copy(update={"dogleg_deg_per_10m": dls})
        result.append(point)
        previous = point
    return result


def friction_for_section(
    section: SectionType,
    coefficients: FrictionCoefficients,
    rotating: bool = False,
) -> float:
    """Friction coefficient for a wellbore section and pipe motion."""
    if section is SectionType.CASED:
        return coefficients.rotating_casing if rotating else coefficients.casing_to_casing
    return coefficients.rotating_open_hole if rotating else coefficients.casing_to_open_hole


def max_dogleg(points: Iterable[TrajectoryPoint]) -> float:
    """Highest dogleg severity along the trajectory, filling gaps first."""
    filled = with_dogleg_severity(points)
    return max((p.dogleg_deg_per_10m for p in filled), default=0.0)
