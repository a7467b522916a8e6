"""
Tests for safety factor banding and connection capacity.
"""

import math

import pytest

from casingcalc.errors import UnknownEnumerationError
from casingcalc.models.inputs import ConnectionType, SteelGrade
from casingcalc.models.outputs import SafetyClass
from casingcalc.physics.connections import (
    axial_string_load,
    calculate_connections,
    get_connection_type,
    max_axial_load,
    max_torque_capacity,
)
from casingcalc.physics.safety import check_safety, classify_safety_factor, safety_factor
from casingcalc.physics.strength import cross_section_area


class TestBanding:
    """Tests for classify_safety_factor."""

    @pytest.mark.parametrize("value,expected", [
        (0.9, SafetyClass.CRITICAL),
        (1.2, SafetyClass.MARGINAL),
        (1.3, SafetyClass.MARGINAL),
        (1.5, SafetyClass.SAFE),
        (2.0, SafetyClass.SAFE),
    ])
    def test_bands(self, value, expected):
        assert classify_safety_factor(value) is expected

    def test_unloaded_is_safe(self):
        assert classify_safety_factor(None) is SafetyClass.SAFE

    def test_nan_is_critical(self):
        assert classify_safety_factor(math.nan) is SafetyClass.CRITICAL

    def test_safety_factor_zero_load(self):
        assert safety_factor(100.0, 0.0) is None

    def test_check_safety(self):
        check = check_safety(150.0, 100.0, "test")
        assert check.value == pytest.approx(1.5)
        assert check.safety_class is SafetyClass.SAFE
        assert check.passed

    def test_critical_check_not_passed(self):
        assert not check_safety(90.0, 100.0).passed


class TestConnectionTypes:
    """Tests for connection type lookup."""

    def test_multipliers(self):
        assert ConnectionType.BUTTRESS.makeup_multiplier == 1.0
        assert ConnectionType.API_8RD.makeup_multiplier == 0.85
        assert ConnectionType.PREMIUM.makeup_multiplier == 1.15
        assert ConnectionType.ULTRA.makeup_multiplier == 1.15

    def test_case_insensitive(self):
        assert get_connection_type("buttress") is ConnectionType.BUTTRESS
        assert get_connection_type("api-8rd") is ConnectionType.API_8RD

    def test_unknown_raises(self):
        with pytest.raises(UnknownEnumerationError, match="connection type"):
            get_connection_type("VAM-TOP")


class TestConnectionCapacity:
    """Tests for connection capacity and safety factors."""

    def test_axial_capacity_formula(self):
        area = cross_section_area(244.5, 11.99)
        expected = SteelGrade.N80.yield_mpa * area * 0.8 * 1000
        assert max_axial_load(244.5, 11.99, "N-80") == pytest.approx(expected)
        assert max_axial_load(244.5, 11.99, "N-80") == pytest.approx(3864.7, rel=1e-3)

    def test_torque_capacity_formula(self):
        area = cross_section_area(244.5, 11.99)
        expected = 0.2445 * SteelGrade.N80.yield_mpa * area * 0.6 * 1000
        assert max_torque_capacity(244.5, 11.99, "N-80", "Buttress") == pytest.approx(expected)

    def test_premium_scales_torque(self):
        buttress = max_torque_capacity(244.5, 11.99, "N-80", ConnectionType.BUTTRESS)
        premium = max_torque_capacity(244.5, 11.99, "N-80", ConnectionType.PREMIUM)
        assert premium / buttress == pytest.approx(1.15)

    def test_axial_string_load(self):
        assert axial_string_load(69.4, 1500.0) == pytest.approx(69.4 * 1500 * 9.81 / 1000)

    def test_calculate_connections(self):
        result = calculate_connections(244.5, 11.99, "N-80", "Buttress", 25.0, 1000.0)
        assert result.torque_safety_factor == pytest.approx(result.max_torque_knm / 25.0)
        assert result.axial_safety_factor == pytest.approx(result.max_axial_load_kn / 1000.0)
        assert result.torque_safety.safety_class is SafetyClass.SAFE

    def test_overloaded_connection_is_critical(self):
        capacity = max_axial_load(244.5, 11.99, "N-80")
        result = calculate_connections(244.5, 11.99, "N-80", "Buttress", 25.0, capacity * 1.1)
        assert result.axial_safety.safety_class is SafetyClass.CRITICAL

    def test_zero_torque_is_unloaded(self):
        result = calculate_connections(244.5, 11.99, "N-80", "Buttress", 0.0, 1000.0)
        assert result.torque_safety_factor is None
        assert result.torque_safety.safety_class is SafetyClass.SAFE
