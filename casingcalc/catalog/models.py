"""
Pydantic models for the casing pipe catalog.

Catalog rows carry manufacturer-certified ratings. They are kept apart
from the formula estimates of casingcalc.physics.strength and are never
substituted for them.
"""

from enum import Enum
from typing import Union

from pydantic import BaseModel, Field

from casingcalc.errors import UnknownEnumerationError
from casingcalc.models.inputs import ConnectionType, PipeSection, SteelGrade


class Manufacturer(str, Enum):
    """Russian casing mills in the catalog."""
    OTTM = "ОТТМ"
    BTS = "БТС"
    TMK = "ТМК"

    @classmethod
    def from_tag(cls, tag: Union["Manufacturer", str]) -> "Manufacturer":
        """
        Resolve a manufacturer by Cyrillic value or Latin name ("TMK").

        Raises:
            UnknownEnumerationError: If the tag names no known mill
        """
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, str):
            key = tag.strip().upper()
            for mill in cls:
                if key in (mill.value, mill.name):
                    return mill
        raise UnknownEnumerationError("manufacturer", tag, [m.value for m in cls])


class CatalogPipe(BaseModel):
    """
    A certified casing pipe from a manufacturer catalog.

    All rated_* values are as published by the mill.
    """
    manufacturer: Manufacturer
    outer_diameter_mm: float = Field(..., gt=0)
    wall_thickness_mm: float = Field(..., gt=0)
    grade: SteelGrade
    weight_kg_m: float = Field(..., gt=0, description="Linear weight (kg/m)")
    inner_diameter_mm: float = Field(..., gt=0)
    yield_strength_mpa: float
    tensile_strength_mpa: float
    connection: str = Field(..., description="Mill connection name, e.g. 'TMK-Ultra'")
    rated_collapse_mpa: float
    rated_burst_mpa: float
    rated_tension_kn: float
    drift_mm: float = Field(..., description="Drift gauge diameter (mm)")

    model_config = {"frozen": True}

    @property
    def connection_type(self) -> ConnectionType:
        """Generic connection family of the mill thread ('ОТТМ-Premium' -> Premium)."""
        return ConnectionType.from_tag(self.connection.rsplit("-", 1)[-1])

    def to_pipe_section(self) -> PipeSection:
        """Geometry and grade as a calculation input."""
        return PipeSection(
            outer_diameter_mm=self.outer_diameter_mm,
            wall_thickness_mm=self.wall_thickness_mm,
            linear_weight_kg_m=self.weight_kg_m,
            grade=self.grade,
        )
