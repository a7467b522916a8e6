"""
Tests for trajectory helpers.
"""

import pytest

from casingcalc.models.inputs import FrictionCoefficients, SectionType, TrajectoryPoint
from casingcalc.trajectory import (
    dogleg_severity,
    friction_for_section,
    max_dogleg,
    with_dogleg_severity,
)


def _station(md, inc=0.0, azi=0.0, **kwargs):
    return TrajectoryPoint(measured_depth_m=md, inclination_deg=inc, azimuth_deg=azi, **kwargs)


class TestDoglegSeverity:
    """Tests for dogleg severity between stations."""

    def test_pure_build(self):
        assert dogleg_severity(_station(100.0), _station(110.0, inc=3.0)) == pytest.approx(3.0)

    def test_pure_turn_horizontal(self):
        previous = _station(100.0, inc=90.0, azi=10.0)
        current = _station(120.0, inc=90.0, azi=14.0)
        # 10 * 4 * sin(90) / 20
        assert dogleg_severity(previous, current) == pytest.approx(2.0)

    def test_azimuth_wraps_through_north(self):
        previous = _station(100.0, inc=90.0, azi=359.0)
        current = _station(110.0, inc=90.0, azi=1.0)
        assert dogleg_severity(previous, current) == pytest.approx(2.0)

    def test_vertical_turn_has_no_dogleg(self):
        assert dogleg_severity(_station(100.0, azi=0.0), _station(110.0, azi=90.0)) == pytest.approx(0.0)

    def test_non_increasing_depth_raises(self):
        with pytest.raises(ValueError, match="measured depth"):
            dogleg_severity(_station(110.0), _station(110.0, inc=1.0))


class TestWithDoglegSeverity:
    """Tests for filling missing doglegs."""

    def test_fills_missing(self):
        points = with_dogleg_severity([
            _station(0.0),
            _station(100.0, inc=10.0),
            _station(200.0, inc=10.0, dogleg_deg_per_10m=9.9),
        ])
        assert points[0].dogleg_deg_per_10m == 0.0
        assert points[1].dogleg_deg_per_10m == pytest.approx(1.0)
        assert points[2].dogleg_deg_per_10m == 9.9

    def test_does_not_modify_input(self):
        stations = [_station(0.0), _station(100.0, inc=10.0)]
        with_dogleg_severity(stations)
        assert stations[1].dogleg_deg_per_10m is None

    def test_unordered_raises(self):
        with pytest.raises(ValueError):
            with_dogleg_severity([_station(100.0), _station(50.0)])

    def test_max_dogleg(self):
        assert max_dogleg([_station(0.0), _station(100.0, inc=10.0), _station(110.0, inc=12.0)]) == pytest.approx(2.0)

    def test_tvd_defaults_to_md(self):
        assert _station(250.0).true_vertical_depth_m == 250.0
        assert _station(250.0, tvd_m=240.0).true_vertical_depth_m == 240.0


class TestFriction:
    """Tests for section friction lookup."""

    def test_defaults(self):
        coefficients = FrictionCoefficients()
        assert friction_for_section(SectionType.CASED, coefficients) == 0.25
        assert friction_for_section(SectionType.OPENHOLE, coefficients) == 0.35
        assert friction_for_section(SectionType.CASED, coefficients, rotating=True) == 0.20
        assert friction_for_section(SectionType.OPENHOLE, coefficients, rotating=True) == 0.28
