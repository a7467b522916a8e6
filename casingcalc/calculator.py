"""
Casing string calculation orchestrator.

Runs the engines and profilers for one CalculationInputs and assembles a
Calculation record. Burst/collapse, connections and torque & drag always
run; drilling, running and hydraulics (with its ECD, hole-cleaning and
pressure profiles) run when enabled.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from casingcalc.models.inputs import CalculationInputs
from casingcalc.models.outputs import (
    Calculation,
    CleaningRating,
    ConnectionResult,
    DrillingResult,
    HydraulicsResult,
    PipeRatings,
    SafetyCheck,
    SafetyClass,
)
from casingcalc.physics import (
    axial_string_load,
    calculate_connections,
    calculate_drilling_params,
    calculate_hydraulics,
    calculate_running_params,
    estimate_pipe_ratings,
)
from casingcalc.profiles import (
    calculate_ecd_profile,
    calculate_hole_cleaning_profile,
    calculate_pressure_profile,
    calculate_torque_drag_profile,
)
from casingcalc.trajectory import friction_for_section, with_dogleg_severity

logger = logging.getLogger(__name__)

# Default reference gradients as multiples of the mud density
FRAC_GRADIENT_FACTOR = 1.8
PORE_GRADIENT_FACTOR = 1.0


class CasingCalculator:
    """
    Calculator for one casing string.

    Holds only its inputs; every call to calculate() recomputes all
    results from scratch.
    """

    def __init__(self, inputs: CalculationInputs):
        """
        Initialize calculator with validated inputs.

        Args:
            inputs: Pipe, well and operating parameters
        """
        self.inputs = inputs
        self.warnings: list[str] = []

    def calculate(self) -> Calculation:
        """
        Run every enabled engine.

        Returns:
            Calculation with sub-results, profiles and warnings
        """
        self.warnings = []
        inputs = self.inputs
        pipe = inputs.pipe
        well = inputs.well

        ratings = estimate_pipe_ratings(pipe.outer_diameter_mm, pipe.wall_thickness_mm, pipe.grade)

        drilling = self._calculate_drilling() if inputs.enabled.drilling else None
        connections = self._calculate_connections(drilling)

        running = None
        if inputs.enabled.running:
            running = calculate_running_params(
                pipe.outer_diameter_mm,
                well.depth_m,
                well.mud_density_sg,
                pipe.linear_weight_kg_m,
                well.hole_diameter_mm,
                well.friction.casing_to_casing,
                inputs.hydraulics.flow_rate_lps,
            )

        torque_drag = calculate_torque_drag_profile(
            well.depth_m,
            pipe.linear_weight_kg_m,
            pipe.outer_diameter_mm,
            pipe.wall_thickness_mm,
            pipe.grade,
            well.mud_density_sg,
            self._open_hole_friction(),
            steps=inputs.profile_steps,
        )

        hydraulics = ecd = hole_cleaning = pressure = None
        if inputs.enabled.hydraulics:
            hydraulics = self._calculate_hydraulics()
            ecd, hole_cleaning, pressure = self._calculate_hydraulic_profiles(hydraulics, ratings)

        max_dogleg = self._max_dogleg()

        self._check("Connection torque", connections.torque_safety)
        self._check("Connection axial load", connections.axial_safety)
        self._check("Pipe body yield", torque_drag.yield_safety)
        if pressure is not None:
            self._check("Burst", pressure.burst_safety)
            self._check("Collapse", pressure.collapse_safety)
        if ecd is not None:
            if any(p.lost_circulation_risk for p in ecd.points):
                self._warn(f"ECD {ecd.max_ecd_sg:.3f} g/cm3 exceeds the fracture gradient: lost circulation risk")
            if any(p.influx_risk for p in ecd.points):
                self._warn("Mud density is below the pore pressure gradient: influx risk")
        if hole_cleaning is not None:
            if hole_cleaning.rating is CleaningRating.POOR:
                self._warn(f"Poor hole cleaning: average efficiency {hole_cleaning.average_efficiency_pct:.1f} %")
            if hole_cleaning.concentration_exceeded:
                self._warn(
                    f"Cuttings concentration {hole_cleaning.max_concentration_pct:.2f} % exceeds "
                    f"{hole_cleaning.critical_concentration_pct:.1f} %"
                )

        return Calculation(
            id=uuid.uuid4().hex,
            timestamp=datetime.now(timezone.utc),
            inputs=inputs,
            ratings=ratings,
            connections=connections,
            torque_drag=torque_drag,
            drilling=drilling,
            running=running,
            hydraulics=hydraulics,
            ecd=ecd,
            hole_cleaning=hole_cleaning,
            pressure=pressure,
            max_dogleg_deg_per_10m=max_dogleg,
            warnings=list(self.warnings),
        )

    def _open_hole_friction(self) -> float:
        """Sliding friction at the shoe: from the deepest survey station if any."""
        friction = self.inputs.well.friction
        if self.inputs.trajectory:
            deepest = max(self.inputs.trajectory, key=lambda p: p.measured_depth_m)
            return friction_for_section(deepest.section, friction)
        return friction.casing_to_open_hole

    def _max_dogleg(self) -> Optional[float]:
        if not self.inputs.trajectory:
            return None
        points = sorted(self.inputs.trajectory, key=lambda p: p.measured_depth_m)
        return max(p.dogleg_deg_per_10m for p in with_dogleg_severity(points))

    def _calculate_drilling(self) -> DrillingResult:
        inputs = self.inputs
        pipe = inputs.pipe
        drilling = calculate_drilling_params(
            pipe.outer_diameter_mm,
            pipe.wall_thickness_mm,
            pipe.grade,
            inputs.well.depth_m,
            inputs.drilling.rpm,
            inputs.drilling.bit_diameter_mm,
            inputs.drilling.weight_on_bit_t,
            inputs.well.mud_density_sg,
            self._open_hole_friction(),
            inputs.drilling.max_torque_knm,
            pipe.linear_weight_kg_m,
            bit_torque_knm=inputs.drilling.bit_torque_knm,
        )
        if inputs.drilling.rpm > drilling.max_rpm:
            self._warn(f"Rotary speed {inputs.drilling.rpm:.0f} rpm exceeds the limit of {drilling.max_rpm:.0f} rpm")
        if drilling.surface_torque_knm > inputs.drilling.max_torque_knm:
            self._warn(
                f"Surface torque {drilling.surface_torque_knm:.1f} kN*m exceeds the allowed "
                f"{inputs.drilling.max_torque_knm:.1f} kN*m"
            )
        return drilling

    def _calculate_connections(self, drilling: Optional[DrillingResult]) -> ConnectionResult:
        inputs = self.inputs
        pipe = inputs.pipe
        if drilling is not None:
            applied_torque = drilling.surface_torque_knm
        else:
            applied_torque = inputs.drilling.max_torque_knm
        return calculate_connections(
            pipe.outer_diameter_mm,
            pipe.wall_thickness_mm,
            pipe.grade,
            inputs.connection_type,
            applied_torque,
            axial_string_load(pipe.linear_weight_kg_m, inputs.well.depth_m),
        )

    def _calculate_hydraulics(self) -> HydraulicsResult:
        inputs = self.inputs
        return calculate_hydraulics(
            inputs.pipe.outer_diameter_mm,
            inputs.pipe.inner_diameter_mm,
            inputs.well.hole_diameter_mm,
            inputs.well.depth_m,
            inputs.hydraulics.flow_rate_lps,
            inputs.well.mud_density_sg,
            inputs.hydraulics.viscosity_cp,
            inputs.hydraulics.nozzles,
        )

    def _calculate_hydraulic_profiles(self, hydraulics: HydraulicsResult, ratings: PipeRatings):
        inputs = self.inputs
        well = inputs.well
        params = inputs.hydraulics
        frac = params.frac_gradient_sg or well.mud_density_sg * FRAC_GRADIENT_FACTOR
        pore = params.pore_gradient_sg or well.mud_density_sg * PORE_GRADIENT_FACTOR

        ecd = calculate_ecd_profile(
            well.depth_m,
            well.mud_density_sg,
            hydraulics.pressure_loss_annulus_mpa,
            frac,
            pore,
            steps=inputs.profile_steps,
        )
        hole_cleaning = calculate_hole_cleaning_profile(
            well.depth_m,
            params.flow_rate_lps,
            well.hole_diameter_mm,
            inputs.pipe.outer_diameter_mm,
            params.cuttings_rate,
            steps=inputs.profile_steps,
        )
        # Pressure charts use twice the resolution of the other profiles
        pressure = calculate_pressure_profile(
            well.depth_m,
            well.mud_density_sg,
            hydraulics.pressure_loss_pipe_mpa,
            hydraulics.pressure_loss_annulus_mpa,
            ratings,
            steps=inputs.profile_steps * 2,
        )
        return ecd, hole_cleaning, pressure

    def _check(self, name: str, check: SafetyCheck) -> None:
        if check.safety_class is SafetyClass.CRITICAL:
            self._warn(f"{name} safety factor {check.value:.2f} is critical")
        elif check.safety_class is SafetyClass.MARGINAL:
            self._warn(f"{name} safety factor {check.value:.2f} is marginal")

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)


def calculate(inputs: CalculationInputs) -> Calculation:
    """Convenience wrapper: CasingCalculator(inputs).calculate()."""
    return CasingCalculator(inputs).calculate()
