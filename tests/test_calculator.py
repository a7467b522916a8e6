"""
Tests for the calculation orchestrator and history.
"""

import logging

import pytest

from casingcalc.calculator import CasingCalculator, calculate
from casingcalc.history import CalculationHistory
from casingcalc.models.inputs import SectionType, TrajectoryPoint
from casingcalc.models.outputs import Calculation, SafetyClass
from casingcalc.physics.connections import axial_string_load


class TestCasingCalculator:
    """End-to-end calculation."""

    def test_reference_scenario(self, full_inputs):
        result = CasingCalculator(full_inputs).calculate()
        assert result.ratings.burst_mpa == pytest.approx(54.1, abs=0.05)
        assert result.drilling.buoyancy_factor == pytest.approx(0.841, abs=0.001)

    def test_all_engines_run(self, full_inputs):
        result = calculate(full_inputs)
        assert result.drilling is not None
        assert result.running is not None
        assert result.hydraulics is not None
        assert len(result.ecd.points) == 11
        assert len(result.hole_cleaning.points) == 11
        assert len(result.pressure.points) == 21

    def test_optional_engines_skipped(self, minimal_inputs):
        result = calculate(minimal_inputs)
        assert result.drilling is None
        assert result.running is None
        assert result.hydraulics is None
        assert result.ecd is None
        assert result.pressure is None
        assert len(result.torque_drag.trip_points) == 11

    def test_profile_depths_aligned(self, full_inputs):
        result = calculate(full_inputs)
        depths = result.torque_drag.depths
        assert depths == [p.depth_m for p in result.torque_drag.trip_points]
        assert depths == result.ecd.depths
        assert depths == [p.depth_m for p in result.hole_cleaning.points]

    def test_applied_torque_from_drilling(self, full_inputs):
        result = calculate(full_inputs)
        assert result.connections.applied_torque_knm == pytest.approx(result.drilling.surface_torque_knm)

    def test_applied_torque_without_drilling(self, minimal_inputs):
        result = calculate(minimal_inputs)
        assert result.connections.applied_torque_knm == minimal_inputs.drilling.max_torque_knm

    def test_applied_axial_load(self, minimal_inputs):
        result = calculate(minimal_inputs)
        assert result.connections.applied_axial_load_kn == pytest.approx(axial_string_load(69.4, 1500.0))

    def test_default_gradients(self, full_inputs):
        result = calculate(full_inputs)
        assert result.ecd.points[0].frac_gradient_sg == pytest.approx(1.25 * 1.8)
        assert result.ecd.points[0].pore_gradient_sg == pytest.approx(1.25)

    def test_safety_summary(self, full_inputs):
        result = calculate(full_inputs)
        assert len(result.safety_checks()) == 5
        assert result.worst_safety_class is SafetyClass.SAFE

    def test_warnings_logged(self, full_inputs, caplog):
        with caplog.at_level(logging.WARNING, logger="casingcalc.calculator"):
            result = calculate(full_inputs)
        # 60 rpm and 5 kN*m bit torque exceed the limits at 1500 m
        assert any("Surface torque" in w for w in result.warnings)
        assert any("rpm" in w for w in result.warnings)
        assert len([r for r in caplog.records if r.name == "casingcalc.calculator"]) == len(result.warnings)

    def test_trajectory_dogleg(self, full_inputs):
        inputs = full_inputs.model_copy(update={"trajectory": [
            TrajectoryPoint(measured_depth_m=0.0),
            TrajectoryPoint(measured_depth_m=500.0, inclination_deg=0.0),
            TrajectoryPoint(measured_depth_m=600.0, inclination_deg=20.0, section=SectionType.CASED),
        ]})
        result = calculate(inputs)
        assert result.max_dogleg_deg_per_10m == pytest.approx(2.0)

    def test_cased_shoe_uses_cased_friction(self, minimal_inputs):
        cased = minimal_inputs.model_copy(update={"trajectory": [
            TrajectoryPoint(measured_depth_m=1500.0, section=SectionType.CASED),
        ]})
        open_hole = calculate(minimal_inputs).torque_drag.trip_points[-1].hook_load_kn
        in_casing = calculate(cased).torque_drag.trip_points[-1].hook_load_kn
        assert in_casing < open_hole

    def test_result_serializes(self, full_inputs):
        result = calculate(full_inputs)
        restored = Calculation.model_validate_json(result.model_dump_json())
        assert restored.id == result.id
        assert restored.ratings == result.ratings

    def test_each_call_is_fresh(self, full_inputs):
        calculator = CasingCalculator(full_inputs)
        first = calculator.calculate()
        second = calculator.calculate()
        assert first.id != second.id
        assert first.warnings == second.warnings


class TestCalculationHistory:
    """Tests for the bounded history."""

    def test_newest_first_and_bounded(self, minimal_inputs):
        history = CalculationHistory()
        results = [calculate(minimal_inputs) for _ in range(12)]
        for result in results:
            history.add(result)
        assert len(history) == 10
        assert history.latest() is results[-1]
        assert list(history)[-1] is results[2]

    def test_get_by_id(self, minimal_inputs):
        history = CalculationHistory(max_size=2)
        result = calculate(minimal_inputs)
        history.add(result)
        assert history.get(result.id) is result
        assert history.get("missing") is None

    def test_clear(self, minimal_inputs):
        history = CalculationHistory()
        history.add(calculate(minimal_inputs))
        history.clear()
        assert len(history) == 0
        assert history.latest() is None

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            CalculationHistory(max_size=0)
