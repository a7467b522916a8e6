"""
Safety factor banding shared by every module that reports one.

    sf >= 1.5         SAFE
    1.2 <= sf < 1.5   MARGINAL (warn)
    sf < 1.2          CRITICAL (fail)
"""

import math
from typing import Optional

from casingcalc.models.outputs import SafetyCheck, SafetyClass

SAFE_MIN = 1.5
MARGINAL_MIN = 1.2


def classify_safety_factor(safety_factor: Optional[float]) -> SafetyClass:
    """
    Band a safety factor. Lower edges are inclusive.

    None means there was no load to resist and is SAFE; NaN is CRITICAL.
    """
    if safety_factor is None:
        return SafetyClass.SAFE
    if math.isnan(safety_factor):
        return SafetyClass.CRITICAL
    if safety_factor >= SAFE_MIN:
        return SafetyClass.SAFE
    if safety_factor >= MARGINAL_MIN:
        return SafetyClass.MARGINAL
    return SafetyClass.CRITICAL


def safety_factor(capacity: float, load: float) -> Optional[float]:
    """Capacity / load, or None when the load is zero or negative."""
    if load <= 0:
        return None
    return capacity / load


def check_safety(capacity: float, load: float, description: str = "") -> SafetyCheck:
    """Ratio of capacity to load, classified."""
    value = safety_factor(capacity, load)
    return SafetyCheck(
        value=value,
        safety_class=classify_safety_factor(value),
        description=description,
    )
