"""
Depth-indexed profilers.

Each profile is regenerated wholesale from its inputs on every call over
an even depth grid from surface to total depth.
"""

from casingcalc.profiles.depth import DepthStep, depth_steps
from casingcalc.profiles.ecd import calculate_ecd_profile
from casingcalc.profiles.torque_drag import calculate_torque_drag_profile
from casingcalc.profiles.hole_cleaning import calculate_hole_cleaning_profile, transport_efficiency
from casingcalc.profiles.pressure import calculate_pressure_profile

__all__ = [
    "DepthStep",
    "depth_steps",
    "calculate_ecd_profile",
    "calculate_torque_drag_profile",
    "calculate_hole_cleaning_profile",
    "transport_efficiency",
    "calculate_pressure_profile",
]
