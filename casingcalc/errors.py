"""
Exception types raised by the calculation core.

Physically questionable results (safety factor below 1, capped cleaning
efficiency) are NOT errors; they are returned with a safety class.
Only inputs the formulas cannot evaluate raise.
"""


class CasingCalcError(Exception):
    """Base class for calculation core errors."""


class InvalidGeometryError(CasingCalcError, ValueError):
    """Pipe geometry that would divide by zero or give a non-positive bore."""

    def __init__(self, outer_diameter_mm: float, wall_thickness_mm: float, reason: str):
        self.outer_diameter_mm = outer_diameter_mm
        self.wall_thickness_mm = wall_thickness_mm
        super().__init__(
            f"invalid pipe geometry: OD={outer_diameter_mm} mm, "
            f"WT={wall_thickness_mm} mm ({reason})"
        )


class UnknownEnumerationError(CasingCalcError, ValueError):
    """A grade, connection or unit tag outside its closed enumeration."""

    def __init__(self, kind: str, value: object, allowed: list[str]):
        self.kind = kind
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"unknown enumeration value for {kind}: {value!r} "
            f"(expected one of: {', '.join(allowed)})"
        )
