"""
Input models for casing string calculations.

These models define the pipe, well and operating parameters the engines
consume. All inputs are value objects: built per calculation request and
never mutated by the core.
"""

from enum import Enum
from math import pi
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from casingcalc.constants import PSI_TO_MPA, STEEL_DENSITY_SG, DEFAULT_PROFILE_STEPS
from casingcalc.errors import InvalidGeometryError, UnknownEnumerationError


class SteelGrade(str, Enum):
    """
    Casing steel grade.

    API 5CT grades plus GOST 632 strength-group letters, the latter mapped
    onto the nearest API yield strength.
    """
    H40 = "H-40"
    J55 = "J-55"
    K55 = "K-55"
    N80 = "N-80"
    L80 = "L-80"
    C90 = "C-90"
    P110 = "P-110"
    GOST_D = "Д"
    GOST_E = "Е"
    GOST_K = "К"
    GOST_L = "Л"

    @property
    def yield_psi(self) -> float:
        return GRADE_STRENGTHS_PSI[self][0]

    @property
    def tensile_psi(self) -> float:
        return GRADE_STRENGTHS_PSI[self][1]

    @property
    def yield_mpa(self) -> float:
        """Minimum yield strength in MPa."""
        return self.yield_psi * PSI_TO_MPA

    @property
    def tensile_mpa(self) -> float:
        """Minimum tensile strength in MPa."""
        return self.tensile_psi * PSI_TO_MPA

    @classmethod
    def from_tag(cls, tag: Union["SteelGrade", str]) -> "SteelGrade":
        """
        Resolve a grade from its value ("N-80", "Д") or a Latin GOST letter.

        Raises:
            UnknownEnumerationError: If the tag is not a known grade
        """
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, str):
            key = tag.strip()
            if key.upper() in GOST_LATIN_ALIASES:
                return GOST_LATIN_ALIASES[key.upper()]
            try:
                return cls(key.upper())
            except ValueError:
                pass
        raise UnknownEnumerationError("steel grade", tag, [g.value for g in cls])


# (yield, tensile) in psi
GRADE_STRENGTHS_PSI: dict[SteelGrade, tuple[float, float]] = {
    SteelGrade.H40: (40_000, 60_000),
    SteelGrade.J55: (55_000, 75_000),
    SteelGrade.K55: (55_000, 95_000),
    SteelGrade.N80: (80_000, 100_000),
    SteelGrade.L80: (80_000, 95_000),
    SteelGrade.C90: (90_000, 100_000),
    SteelGrade.P110: (110_000, 125_000),
    SteelGrade.GOST_D: (55_000, 75_000),
    SteelGrade.GOST_E: (75_000, 95_000),
    SteelGrade.GOST_K: (95_000, 110_000),
    SteelGrade.GOST_L: (110_000, 125_000),
}

GOST_LATIN_ALIASES: dict[str, SteelGrade] = {
    "D": SteelGrade.GOST_D,
    "E": SteelGrade.GOST_E,
    "K": SteelGrade.GOST_K,
    "L": SteelGrade.GOST_L,
}


class ConnectionType(str, Enum):
    """Thread type of the casing connection."""
    BUTTRESS = "Buttress"
    API_8RD = "API-8rd"
    PREMIUM = "Premium"
    ULTRA = "Ultra"

    @property
    def makeup_multiplier(self) -> float:
        """Make-up torque multiplier applied to the geometric capacity."""
        return MAKEUP_TORQUE_MULTIPLIERS[self]

    @classmethod
    def from_tag(cls, tag: Union["ConnectionType", str]) -> "ConnectionType":
        """
        Resolve a connection type tag (case-insensitive).

        Raises:
            UnknownEnumerationError: If the tag is not a known connection type
        """
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, str):
            for conn in cls:
                if conn.value.lower() == tag.strip().lower():
                    return conn
        raise UnknownEnumerationError("connection type", tag, [c.value for c in cls])


MAKEUP_TORQUE_MULTIPLIERS: dict[ConnectionType, float] = {
    ConnectionType.BUTTRESS: 1.0,
    ConnectionType.API_8RD: 0.85,
    ConnectionType.PREMIUM: 1.15,
    ConnectionType.ULTRA: 1.15,
}


class SectionType(str, Enum):
    """Wellbore section the pipe is in contact with."""
    CASED = "cased"
    OPENHOLE = "openhole"


def validate_pipe_geometry(outer_diameter_mm: float, wall_thickness_mm: float) -> None:
    """
    Reject geometry the strength formulas cannot evaluate.

    Raises:
        InvalidGeometryError: WT <= 0, OD <= 0, or OD <= 2*WT
    """
    if wall_thickness_mm <= 0:
        raise InvalidGeometryError(outer_diameter_mm, wall_thickness_mm, "wall thickness must be positive")
    if outer_diameter_mm <= 0:
        raise InvalidGeometryError(outer_diameter_mm, wall_thickness_mm, "outer diameter must be positive")
    if outer_diameter_mm <= 2 * wall_thickness_mm:
        raise InvalidGeometryError(outer_diameter_mm, wall_thickness_mm, "inner diameter must be positive")


class PipeSection(BaseModel):
    """
    Casing joint geometry and material.

    Inner diameter is derived: ID = OD - 2*WT.
    """
    outer_diameter_mm: float = Field(..., gt=0, description="Outer diameter (mm)")
    wall_thickness_mm: float = Field(..., gt=0, description="Wall thickness (mm)")
    linear_weight_kg_m: float = Field(..., gt=0, description="Nominal linear weight (kg/m)")
    grade: SteelGrade = Field(default=SteelGrade.N80, description="Steel grade")

    @field_validator("grade", mode="before")
    @classmethod
    def resolve_grade(cls, v):
        """Accept Latin GOST letters and lower-case API names."""
        return SteelGrade.from_tag(v)

    @model_validator(mode="after")
    def check_geometry(self) -> "PipeSection":
        validate_pipe_geometry(self.outer_diameter_mm, self.wall_thickness_mm)
        return self

    @property
    def inner_diameter_mm(self) -> float:
        return self.outer_diameter_mm - 2 * self.wall_thickness_mm

    @property
    def dt_ratio(self) -> float:
        return self.outer_diameter_mm / self.wall_thickness_mm


class FrictionCoefficients(BaseModel):
    """Wall friction coefficients by contact type."""
    casing_to_casing: float = Field(default=0.25, ge=0, le=1, description="Pipe sliding inside casing")
    casing_to_open_hole: float = Field(default=0.35, ge=0, le=1, description="Pipe sliding in open hole")
    rotating_casing: float = Field(default=0.20, ge=0, le=1, description="Rotating inside casing")
    rotating_open_hole: float = Field(default=0.28, ge=0, le=1, description="Rotating in open hole")


class WellGeometryContext(BaseModel):
    """Well and mud context for a calculation."""
    depth_m: float = Field(..., gt=0, description="Measured depth of the string (m)")
    mud_density_sg: float = Field(
        ...,
        gt=0,
        lt=STEEL_DENSITY_SG,
        description="Mud density (g/cm3)",
    )
    hole_diameter_mm: float = Field(..., gt=0, description="Borehole diameter (mm)")
    friction: FrictionCoefficients = Field(
        default_factory=FrictionCoefficients,
        description="Cased and open-hole friction coefficients",
    )


class Nozzle(BaseModel):
    """A bit nozzle."""
    id: int = Field(..., description="Nozzle identifier")
    diameter_mm: float = Field(..., gt=0, description="Nozzle diameter (mm)")

    @property
    def area_mm2(self) -> float:
        return pi * (self.diameter_mm / 2) ** 2


class TrajectoryPoint(BaseModel):
    """One survey station of the well trajectory."""
    measured_depth_m: float = Field(..., ge=0, description="Measured depth (m)")
    inclination_deg: float = Field(default=0.0, ge=0, le=180, description="Inclination (deg)")
    azimuth_deg: float = Field(default=0.0, ge=0, le=360, description="Azimuth (deg)")
    tvd_m: Optional[float] = Field(default=None, description="True vertical depth (m); MD if absent")
    northing_m: float = Field(default=0.0, description="North offset (m)")
    easting_m: float = Field(default=0.0, description="East offset (m)")
    dogleg_deg_per_10m: Optional[float] = Field(
        default=None,
        ge=0,
        description="Dogleg severity (deg/10 m); derived from neighbours if absent",
    )
    section: SectionType = Field(default=SectionType.OPENHOLE, description="cased or openhole")

    model_config = {"frozen": True}

    @property
    def true_vertical_depth_m(self) -> float:
        return self.tvd_m if self.tvd_m is not None else self.measured_depth_m


class DrillingParameters(BaseModel):
    """Operating parameters for drilling with casing."""
    rpm: float = Field(default=60.0, ge=0, le=300, description="Rotary speed (rpm)")
    bit_diameter_mm: float = Field(default=215.9, gt=0, description="Bit diameter (mm)")
    weight_on_bit_t: float = Field(default=50.0, ge=0, description="Weight on bit (tonnes)")
    max_torque_knm: float = Field(default=25.0, gt=0, description="Allowed connection torque (kN*m)")
    bit_torque_knm: float = Field(default=0.0, ge=0, description="On-bottom bit torque (kN*m)")


class HydraulicsParameters(BaseModel):
    """Circulation parameters."""
    flow_rate_lps: float = Field(default=30.0, gt=0, description="Pump rate (l/s)")
    viscosity_cp: float = Field(default=40.0, gt=0, description="Plastic viscosity (cP)")
    nozzles: list[Nozzle] = Field(
        default_factory=list,
        max_length=12,
        description="Bit nozzles (0-12)",
    )
    cuttings_rate: float = Field(default=0.5, ge=0, description="Cuttings generation rate")
    frac_gradient_sg: Optional[float] = Field(
        default=None,
        gt=0,
        description="Fracture gradient as equivalent density (g/cm3); 1.8x mud if absent",
    )
    pore_gradient_sg: Optional[float] = Field(
        default=None,
        gt=0,
        description="Pore pressure gradient as equivalent density (g/cm3); 1.0x mud if absent",
    )


class EnabledCalculations(BaseModel):
    """Which optional engines to run."""
    drilling: bool = Field(default=False, description="Drilling with casing estimate")
    running: bool = Field(default=False, description="Running (trip) estimate")
    hydraulics: bool = Field(default=False, description="Hydraulics, ECD, cleaning and pressure profiles")


class CalculationInputs(BaseModel):
    """
    Complete input for one casing string calculation.

    Burst/collapse, connections and torque & drag are always evaluated;
    the other engines are switched by `enabled`.
    """
    name: str = Field(default="Casing string", description="Label for this calculation")
    pipe: PipeSection
    well: WellGeometryContext
    connection_type: ConnectionType = Field(default=ConnectionType.BUTTRESS)
    drilling: DrillingParameters = Field(default_factory=DrillingParameters)
    hydraulics: HydraulicsParameters = Field(default_factory=HydraulicsParameters)
    enabled: EnabledCalculations = Field(default_factory=EnabledCalculations)
    profile_steps: int = Field(
        default=DEFAULT_PROFILE_STEPS,
        ge=1,
        le=200,
        description="Depth steps per profile (N steps give N+1 points)",
    )
    trajectory: list[TrajectoryPoint] = Field(
        default_factory=list,
        description="Survey stations, already parsed",
    )

    @field_validator("connection_type", mode="before")
    @classmethod
    def resolve_connection(cls, v):
        return ConnectionType.from_tag(v)

    @field_validator("trajectory")
    @classmethod
    def check_unique_depths(cls, v: list[TrajectoryPoint]) -> list[TrajectoryPoint]:
        """Stations may come unordered, but each measured depth only once."""
        depths = sorted(p.measured_depth_m for p in v)
        for shallower, deeper in zip(depths, depths[1:]):
            if deeper == shallower:
                raise ValueError(f"duplicate survey station at measured depth {deeper} m")
        return v

    @model_validator(mode="after")
    def check_hole_clearance(self) -> "CalculationInputs":
        """Hole must be larger than the pipe for any annular flow."""
        if self.well.hole_diameter_mm <= self.pipe.outer_diameter_mm:
            raise ValueError("well.hole_diameter_mm must be larger than pipe.outer_diameter_mm")
        return self

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "9-5/8in intermediate",
                "pipe": {
                    "outer_diameter_mm": 244.5,
                    "wall_thickness_mm": 11.99,
                    "linear_weight_kg_m": 69.4,
                    "grade": "N-80",
                },
                "well": {
                    "depth_m": 1500,
                    "mud_density_sg": 1.25,
                    "hole_diameter_mm": 311.0,
                },
                "connection_type": "Buttress",
                "enabled": {"drilling": True, "running": True, "hydraulics": True},
                "hydraulics": {
                    "flow_rate_lps": 30,
                    "viscosity_cp": 40,
                    "nozzles": [
                        {"id": 1, "diameter_mm": 12},
                        {"id": 2, "diameter_mm": 12},
                        {"id": 3, "diameter_mm": 12},
                    ],
                },
            }
        }
    }
