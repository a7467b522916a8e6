"""
Even depth stepping shared by every profiler.
"""

from dataclasses import dataclass
from typing import Iterator

from casingcalc.constants import DEFAULT_PROFILE_STEPS


@dataclass(frozen=True)
class DepthStep:
    """One point of an evenly spaced depth grid."""
    index: int
    depth_m: float
    step_m: float


def depth_steps(total_depth_m: float, steps: int = DEFAULT_PROFILE_STEPS) -> Iterator[DepthStep]:
    """
    Yield steps + 1 evenly spaced points from surface to total depth.

    Depths are computed as index * step so the last point lands on
    index * (D / N), matching every other profile generated with the
    same arguments.

    Raises:
        ValueError: steps < 1 or total depth <= 0
    """
    if steps < 1:
        raise ValueError(f"steps must be at least 1, got {steps}")
    if total_depth_m <= 0:
        raise ValueError(f"total depth must be positive, got {total_depth_m}")

    step_m = total_depth_m / steps
    for index in range(steps + 1):
        yield DepthStep(index=index, depth_m=index * step_m, step_m=step_m)
