"""
Tests for depth-indexed profilers.
"""

import math

import pytest

from casingcalc.models.outputs import CleaningRating, SafetyClass
from casingcalc.physics.drilling import buoyed_weight
from casingcalc.physics.strength import estimate_pipe_ratings
from casingcalc.profiles import (
    calculate_ecd_profile,
    calculate_hole_cleaning_profile,
    calculate_pressure_profile,
    calculate_torque_drag_profile,
    depth_steps,
    transport_efficiency,
)


class TestDepthSteps:
    """Tests for the shared depth grid."""

    def test_n_plus_one_points(self):
        steps = list(depth_steps(1500.0, 10))
        assert len(steps) == 11
        assert steps[0].depth_m == 0.0
        assert steps[-1].depth_m == pytest.approx(1500.0)

    def test_even_spacing(self):
        depths = [s.depth_m for s in depth_steps(1000.0, 4)]
        assert depths == pytest.approx([0.0, 250.0, 500.0, 750.0, 1000.0])
        assert all(s.step_m == 250.0 for s in depth_steps(1000.0, 4))

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            list(depth_steps(1000.0, 0))
        with pytest.raises(ValueError):
            list(depth_steps(0.0, 10))


class TestECDProfile:
    """Tests for the ECD profiler."""

    def test_surface_point_is_static(self):
        profile = calculate_ecd_profile(1500.0, 1.25, 0.45, 2.25, 1.25)
        surface = profile.points[0]
        assert surface.depth_m == 0.0
        assert surface.ecd_circulating_sg == 1.25
        assert surface.ecd_tripping_sg == 1.25

    def test_no_nan(self):
        profile = calculate_ecd_profile(1500.0, 1.25, 0.45, 2.25, 1.25)
        for point in profile.points:
            assert math.isfinite(point.ecd_circulating_sg)
            assert math.isfinite(point.ecd_tripping_sg)

    def test_circulating_value(self):
        profile = calculate_ecd_profile(1500.0, 1.25, 0.45, 2.25, 1.25)
        expected = 1.25 + 0.45 * 1000 / (9.81 * 1500)
        assert profile.points[-1].ecd_circulating_sg == pytest.approx(expected)

    def test_tripping_surge(self):
        profile = calculate_ecd_profile(1500.0, 1.25, 0.45, 2.25, 1.25)
        bottom = profile.points[-1]
        assert bottom.ecd_tripping_sg - 1.25 == pytest.approx(1.15 * (bottom.ecd_circulating_sg - 1.25))
        assert profile.max_ecd_sg == pytest.approx(bottom.ecd_tripping_sg)

    def test_risk_flags(self):
        safe = calculate_ecd_profile(1500.0, 1.25, 0.45, 2.25, 1.25)
        assert not safe.at_risk

        lost = calculate_ecd_profile(1500.0, 1.25, 0.45, 1.26, 1.25)
        assert lost.points[-1].lost_circulation_risk
        assert not lost.points[0].lost_circulation_risk

        influx = calculate_ecd_profile(1500.0, 1.25, 0.45, 2.25, 1.30)
        assert all(p.influx_risk for p in influx.points)

    def test_step_count(self):
        assert len(calculate_ecd_profile(1500.0, 1.25, 0.45, 2.25, 1.25, steps=20).points) == 21


class TestTorqueDragProfile:
    """Tests for the torque & drag profiler."""

    def _profile(self, **overrides):
        params = dict(
            total_depth_m=1500.0,
            linear_weight_kg_m=69.4,
            outer_diameter_mm=244.5,
            wall_thickness_mm=11.99,
            grade="N-80",
            mud_density_sg=1.25,
            friction_coefficient=0.35,
        )
        params.update(overrides)
        return calculate_torque_drag_profile(**params)

    def test_depths_aligned(self):
        for steps in (1, 10, 37):
            profile = self._profile(steps=steps)
            torque_depths = [p.depth_m for p in profile.torque_points]
            trip_depths = [p.depth_m for p in profile.trip_points]
            assert torque_depths == trip_depths
            assert len(torque_depths) == steps + 1

    def test_mode_multipliers(self):
        bottom = self._profile().torque_points[-1]
        assert bottom.trip_out_rotating_knm / bottom.trip_in_rotating_knm == pytest.approx(0.85 / 0.80)
        assert bottom.rotating_off_bottom_knm / bottom.trip_in_rotating_knm == pytest.approx(0.70 / 0.80)

    def test_torque_lever_arm_in_metres(self):
        bottom = self._profile().torque_points[-1]
        friction_force = buoyed_weight(69.4, 1500.0, 1.25) * 0.35
        assert bottom.trip_in_rotating_knm == pytest.approx(friction_force * 0.2445 / 2 * 0.8)

    def test_trip_loads(self):
        bottom = self._profile().trip_points[-1]
        weight = buoyed_weight(69.4, 1500.0, 1.25)
        assert bottom.hook_load_kn == pytest.approx(weight * 1.35)
        assert bottom.pickup_load_kn == pytest.approx(bottom.hook_load_kn * 1.1)
        assert bottom.slack_off_load_kn == pytest.approx(bottom.hook_load_kn * 0.9)
        assert bottom.rotating_load_kn == pytest.approx(bottom.hook_load_kn * 0.85)
        assert bottom.overpull_kn == pytest.approx(bottom.hook_load_kn * 0.1)
        assert bottom.torque_no_circulation_knm == pytest.approx(bottom.torque_with_circulation_knm * 1.2)

    def test_surface_is_unloaded(self):
        surface = self._profile().trip_points[0]
        assert surface.hook_load_kn == 0.0
        assert surface.pipe_stress_mpa == 0.0
        assert surface.yield_safety_factor is None

    def test_stress_and_yield_safety(self):
        profile = self._profile()
        assert profile.max_stress_mpa == pytest.approx(profile.trip_points[-1].pipe_stress_mpa)
        assert profile.max_stress_mpa == pytest.approx(132.3, abs=0.5)
        assert profile.yield_safety.value == pytest.approx(551.6 / profile.max_stress_mpa, rel=1e-3)
        assert profile.yield_safety.safety_class is SafetyClass.SAFE

    def test_stress_increases_with_depth(self):
        stresses = [p.pipe_stress_mpa for p in self._profile().trip_points]
        assert stresses == sorted(stresses)


class TestHoleCleaningProfile:
    """Tests for the hole-cleaning profiler."""

    @pytest.mark.parametrize("ratio", [4.0, 4.5, 10.0, 100.0])
    def test_saturation(self, ratio):
        assert transport_efficiency(ratio) == 100.0

    def test_linear_below_saturation(self):
        assert transport_efficiency(2.0) == pytest.approx(50.0)

    def test_good_cleaning(self):
        profile = calculate_hole_cleaning_profile(1500.0, 30.0, 311.0, 244.5, 0.5)
        assert len(profile.points) == 11
        assert all(p.cleaning_efficiency_pct == 100.0 for p in profile.points)
        assert all(p.cuttings_concentration_pct == 0.0 for p in profile.points)
        assert profile.rating is CleaningRating.GOOD
        assert not profile.concentration_exceeded

    def test_poor_cleaning(self):
        profile = calculate_hole_cleaning_profile(1500.0, 1.0, 311.0, 244.5, 0.5)
        point = profile.points[-1]
        efficiency = point.transport_ratio * 25
        assert point.cleaning_efficiency_pct == pytest.approx(efficiency)
        assert point.cuttings_concentration_pct == pytest.approx(0.5 / 60 * 100 * (1 - efficiency / 100))
        assert point.bed_height_m == pytest.approx(point.cuttings_concentration_pct / 100 * 150.0 * 0.1)
        assert profile.rating is CleaningRating.POOR

    def test_concentration_threshold(self):
        profile = calculate_hole_cleaning_profile(1500.0, 1.0, 311.0, 244.5, 5.0)
        assert profile.max_concentration_pct > 5.0
        assert profile.concentration_exceeded

    def test_zero_flow_rejected(self):
        with pytest.raises(ValueError):
            calculate_hole_cleaning_profile(1500.0, 0.0, 311.0, 244.5, 0.5)


class TestPressureProfile:
    """Tests for the pressure profiler."""

    def test_profile(self):
        ratings = estimate_pipe_ratings(244.5, 11.99, "N-80")
        profile = calculate_pressure_profile(1500.0, 1.25, 0.1, 0.45, ratings)
        assert len(profile.points) == 21
        surface, bottom = profile.points[0], profile.points[-1]
        assert surface.hydrostatic_mpa == 0.0
        assert bottom.hydrostatic_mpa == pytest.approx(18.39375)
        assert bottom.circulating_mpa == pytest.approx(18.39375 + 0.1)
        assert bottom.annulus_mpa == pytest.approx(18.39375 - 0.45)
        assert bottom.differential_mpa == pytest.approx(0.55)

    def test_safety_factors(self):
        ratings = estimate_pipe_ratings(244.5, 11.99, "N-80")
        profile = calculate_pressure_profile(1500.0, 1.25, 0.1, 0.45, ratings)
        assert profile.burst_safety.value == pytest.approx(ratings.burst_mpa / profile.max_circulating_mpa)
        assert profile.collapse_safety.value == pytest.approx(ratings.collapse_mpa / profile.max_annulus_mpa)
        assert profile.burst_safety.safety_class is SafetyClass.SAFE
