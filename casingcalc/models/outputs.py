"""
Output models for casing string calculations.

Scalar engine results, depth-indexed profiles and the assembled
Calculation record. Low safety factors are ordinary results carrying a
SafetyClass, never errors.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from casingcalc.models.inputs import CalculationInputs, ConnectionType


class SafetyClass(str, Enum):
    """Classification of a safety factor."""
    SAFE = "safe"
    MARGINAL = "marginal"
    CRITICAL = "critical"


class SafetyCheck(BaseModel):
    """A classified safety factor."""
    value: Optional[float] = Field(
        default=None,
        description="Capacity / applied load (None when unloaded)",
    )
    safety_class: SafetyClass = Field(..., description="safe / marginal / critical")
    description: str = Field(default="", description="What was checked")

    @property
    def passed(self) -> bool:
        """Not critical."""
        return self.safety_class is not SafetyClass.CRITICAL


class CollapseRegime(str, Enum):
    """Collapse failure mode selected by D/t ratio."""
    YIELD = "yield"      # thick wall
    PLASTIC = "plastic"
    ELASTIC = "elastic"  # thin wall


class PipeRatings(BaseModel):
    """
    Formula-derived pressure ratings for a pipe body.

    Estimates only; manufacturer-certified values live in the catalog.
    """
    burst_mpa: float = Field(..., description="Estimated burst pressure (MPa)")
    collapse_mpa: float = Field(..., description="Estimated collapse pressure (MPa)")
    collapse_regime: CollapseRegime = Field(..., description="Collapse branch used")
    dt_ratio: float = Field(..., description="Outer diameter / wall thickness")
    yield_strength_mpa: float = Field(..., description="Grade minimum yield (MPa)")


class FlowRegime(str, Enum):
    """Flow regime by Reynolds number."""
    LAMINAR = "laminar"
    TRANSITIONAL = "transitional"
    TURBULENT = "turbulent"


class ConnectionResult(BaseModel):
    """Connection capacities against applied loads."""
    connection_type: ConnectionType
    max_torque_knm: float = Field(..., description="Torque capacity (kN*m)")
    max_axial_load_kn: float = Field(..., description="Axial load capacity (kN)")
    applied_torque_knm: float = Field(..., description="Applied torque (kN*m)")
    applied_axial_load_kn: float = Field(..., description="Applied axial load (kN)")
    torque_safety: SafetyCheck
    axial_safety: SafetyCheck

    @property
    def torque_safety_factor(self) -> Optional[float]:
        return self.torque_safety.value

    @property
    def axial_safety_factor(self) -> Optional[float]:
        return self.axial_safety.value


class DrillingResult(BaseModel):
    """Lumped drilling mechanics estimate."""
    buoyancy_factor: float = Field(..., description="1 - rho_mud / rho_steel")
    buoyed_weight_kn: float = Field(..., description="String weight in mud (kN)")
    surface_torque_knm: float = Field(..., description="Estimated surface torque (kN*m)")
    hook_load_kn: float = Field(..., description="Hook load (kN)")
    weight_on_bit_kn: float = Field(..., description="Weight on bit / drilling force (kN)")
    max_rpm: float = Field(..., description="Maximum allowed rotary speed (rpm)")
    mechanical_speed_mps: float = Field(..., description="Bit peripheral speed (m/s)")


class RunningResult(BaseModel):
    """Loads and limits while running casing."""
    buoyed_weight_kn: float = Field(..., description="String weight in mud (kN)")
    drag_force_kn: float = Field(..., description="Wall friction drag (kN)")
    running_load_kn: float = Field(..., description="Buoyed weight + drag (kN)")
    max_running_speed_mps: float = Field(..., description="Safe running speed (m/s)")
    bottom_hole_pressure_mpa: float = Field(..., description="Hydrostatic pressure at depth (MPa)")
    annulus_velocity_mps: float = Field(..., description="Annular velocity at the given flow rate (m/s)")


class HydraulicsResult(BaseModel):
    """Circulating hydraulics for one flow rate."""
    flow_rate_lps: float = Field(..., description="Flow rate (l/s)")
    pipe_velocity_mps: float = Field(..., description="Mean velocity inside the pipe (m/s)")
    annulus_velocity_mps: float = Field(..., description="Mean annular velocity (m/s)")
    reynolds_pipe: float
    reynolds_annulus: float
    flow_regime_pipe: FlowRegime
    flow_regime_annulus: FlowRegime
    pressure_loss_pipe_mpa: float
    pressure_loss_annulus_mpa: float
    pressure_loss_nozzles_mpa: float
    total_pressure_loss_mpa: float = Field(..., description="Pipe + annulus + nozzles; equals pump pressure")
    nozzle_area_mm2: float = Field(default=0.0, ge=0)
    jet_velocity_mps: float = Field(default=0.0, ge=0)
    jet_impact_force_kn: float = Field(default=0.0, ge=0)
    hydraulic_power_kw: float = Field(..., description="Q * total pressure loss (kW)")
    critical_velocity_mps: float = Field(..., description="Turbulence onset velocity (m/s)")
    cleaning_efficiency_pct: float = Field(..., ge=0, le=100)
    cleaning_adequate: bool = Field(..., description="Annular velocity at or above critical velocity")


# =============================================================================
# Depth profiles
# =============================================================================


class ECDPoint(BaseModel):
    """Equivalent circulating density at one depth (g/cm3)."""
    depth_m: float
    static_density_sg: float
    ecd_circulating_sg: float
    ecd_tripping_sg: float
    frac_gradient_sg: float
    pore_gradient_sg: float
    lost_circulation_risk: bool = Field(..., description="ECD above fracture gradient")
    influx_risk: bool = Field(..., description="Static density below pore gradient")


class ECDProfile(BaseModel):
    """ECD against depth."""
    points: list[ECDPoint]
    max_ecd_sg: float = Field(..., description="Highest circulating or tripping ECD")

    @property
    def depths(self) -> list[float]:
        return [p.depth_m for p in self.points]

    @property
    def at_risk(self) -> bool:
        return any(p.lost_circulation_risk or p.influx_risk for p in self.points)


class TorqueModePoint(BaseModel):
    """Rotating torque per operating mode at one depth (kN*m)."""
    depth_m: float
    trip_in_rotating_knm: float
    rotating_off_bottom_knm: float
    trip_out_rotating_knm: float


class TripLoadPoint(BaseModel):
    """Trip loads and pipe-body stress at one depth."""
    depth_m: float
    hook_load_kn: float
    pickup_load_kn: float
    slack_off_load_kn: float
    rotating_load_kn: float
    torque_with_circulation_knm: float
    torque_no_circulation_knm: float
    overpull_kn: float
    pipe_stress_mpa: float
    yield_safety_factor: Optional[float] = Field(
        default=None,
        description="Yield / pipe stress (None where unloaded)",
    )


class TorqueDragProfile(BaseModel):
    """
    Stepwise torque & drag along the string.

    torque_points and trip_points come from one step loop and share depths.
    """
    torque_points: list[TorqueModePoint]
    trip_points: list[TripLoadPoint]
    max_stress_mpa: float
    yield_safety: SafetyCheck

    @property
    def depths(self) -> list[float]:
        return [p.depth_m for p in self.torque_points]


class CleaningRating(str, Enum):
    """Overall hole-cleaning quality."""
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class CleaningPoint(BaseModel):
    """Cuttings transport at one depth."""
    depth_m: float
    flow_rate_lps: float
    annulus_velocity_mps: float
    transport_ratio: float
    cleaning_efficiency_pct: float = Field(..., ge=0, le=100)
    cuttings_concentration_pct: float
    bed_height_m: float = Field(..., description="Cuttings bed (pillow) height over the step")


class HoleCleaningProfile(BaseModel):
    """Hole cleaning against depth, with a summary."""
    points: list[CleaningPoint]
    average_efficiency_pct: float
    rating: CleaningRating
    max_concentration_pct: float
    critical_concentration_pct: float
    concentration_exceeded: bool


class PressurePoint(BaseModel):
    """Pressures inside and outside the string at one depth (MPa)."""
    depth_m: float
    hydrostatic_mpa: float
    circulating_mpa: float = Field(..., description="Inside the string while circulating")
    annulus_mpa: float
    differential_mpa: float = Field(..., description="Circulating - annulus")


class PressureProfile(BaseModel):
    """Pressure against depth checked against the pipe ratings."""
    points: list[PressurePoint]
    max_circulating_mpa: float
    max_annulus_mpa: float
    burst_safety: SafetyCheck
    collapse_safety: SafetyCheck


# =============================================================================
# Assembled result
# =============================================================================


class Calculation(BaseModel):
    """
    One complete casing string calculation.

    Sub-results are None when their engine was not enabled.
    """
    id: str = Field(..., description="Unique calculation id")
    timestamp: datetime
    inputs: CalculationInputs
    ratings: PipeRatings
    connections: ConnectionResult
    torque_drag: TorqueDragProfile
    drilling: Optional[DrillingResult] = None
    running: Optional[RunningResult] = None
    hydraulics: Optional[HydraulicsResult] = None
    ecd: Optional[ECDProfile] = None
    hole_cleaning: Optional[HoleCleaningProfile] = None
    pressure: Optional[PressureProfile] = None
    max_dogleg_deg_per_10m: Optional[float] = Field(
        default=None,
        description="Highest dogleg severity along the trajectory, if one was given",
    )
    warnings: list[str] = Field(default_factory=list)

    def safety_checks(self) -> list[SafetyCheck]:
        """Every classified safety factor in this result."""
        checks = [
            self.connections.torque_safety,
            self.connections.axial_safety,
            self.torque_drag.yield_safety,
        ]
        if self.pressure is not None:
            checks.extend([self.pressure.burst_safety, self.pressure.collapse_safety])
        return checks

    @property
    def worst_safety_class(self) -> SafetyClass:
        classes = {check.safety_class for check in self.safety_checks()}
        for cls in (SafetyClass.CRITICAL, SafetyClass.MARGINAL):
            if cls in classes:
                return cls
        return SafetyClass.SAFE
