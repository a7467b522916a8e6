"""
Threaded connection capacity and safety factors.

Capacities are derived from pipe-body geometry and grade, scaled by a
make-up torque multiplier per connection type.

Equations:
    T_max = OD * Yp * A * 0.6 * k_conn       (kN*m)
    F_max = Yp * A * 0.8                     (kN)
    SF    = capacity / applied load
"""

import logging
from typing import Union

from casingcalc.models.inputs import ConnectionType, SteelGrade
from casingcalc.models.outputs import ConnectionResult
from casingcalc.physics.grades import get_grade
from casingcalc.physics.safety import check_safety
from casingcalc.physics.strength import cross_section_area
from casingcalc.physics.units import G

logger = logging.getLogger(__name__)

TORSIONAL_FACTOR = 0.6
AXIAL_FACTOR = 0.8

# OD[m] * Yp[MPa] * A[m2] gives MN*m; report kN*m and kN
UNIT_SCALE = 1000.0


def get_connection_type(tag: Union[ConnectionType, str]) -> ConnectionType:
    """
    Resolve a connection type tag (case-insensitive).

    Raises:
        UnknownEnumerationError: If the tag is not a known connection type
    """
    return ConnectionType.from_tag(tag)


def max_torque_capacity(
    outer_diameter_mm: float,
    wall_thickness_mm: float,
    grade: Union[SteelGrade, str],
    connection_type: Union[ConnectionType, str],
) -> float:
    """Connection make-up torque capacity in kN*m."""
    conn = get_connection_type(connection_type)
    area = cross_section_area(outer_diameter_mm, wall_thickness_mm)
    yield_mpa = get_grade(grade).yield_mpa
    od_m = outer_diameter_mm / 1000
    return od_m * yield_mpa * area * TORSIONAL_FACTOR * conn.makeup_multiplier * UNIT_SCALE


def max_axial_load(
    outer_diameter_mm: float,
    wall_thickness_mm: float,
    grade: Union[SteelGrade, str],
) -> float:
    """Connection axial load capacity in kN."""
    area = cross_section_area(outer_diameter_mm, wall_thickness_mm)
    return get_grade(grade).yield_mpa * area * AXIAL_FACTOR * UNIT_SCALE


def axial_string_load(linear_weight_kg_m: float, depth_m: float) -> float:
    """In-air weight of the string hanging from the connection (kN)."""
    return linear_weight_kg_m * depth_m * G / 1000


def calculate_connections(
    outer_diameter_mm: float,
    wall_thickness_mm: float,
    grade: Union[SteelGrade, str],
    connection_type: Union[ConnectionType, str],
    applied_torque_knm: float,
    applied_axial_load_kn: float,
) -> ConnectionResult:
    """
    Evaluate connection capacity against applied torque and axial load.

    Args:
        outer_diameter_mm: Pipe OD
        wall_thickness_mm: Pipe wall thickness
        grade: Steel grade tag
        connection_type: Buttress / API-8rd / Premium / Ultra
        applied_torque_knm: Torque applied to the connection
        applied_axial_load_kn: Axial (tensile) load on the connection

    Returns:
        ConnectionResult with capacities and classified safety factors
    """
    conn = get_connection_type(connection_type)
    torque_cap = max_torque_capacity(outer_diameter_mm, wall_thickness_mm, grade, conn)
    axial_cap = max_axial_load(outer_diameter_mm, wall_thickness_mm, grade)

    result = ConnectionResult(
        connection_type=conn,
        max_torque_knm=torque_cap,
        max_axial_load_kn=axial_cap,
        applied_torque_knm=applied_torque_knm,
        applied_axial_load_kn=applied_axial_load_kn,
        torque_safety=check_safety(
            torque_cap, applied_torque_knm, "Connection torque capacity / applied torque"
        ),
        axial_safety=check_safety(
            axial_cap, applied_axial_load_kn, "Connection axial capacity / string weight"
        ),
    )
    logger.debug(
        "%s connection: T_max=%.1f kN*m, F_max=%.1f kN",
        conn.value, torque_cap, axial_cap,
    )
    return result
