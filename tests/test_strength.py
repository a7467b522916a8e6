"""
Tests for pipe body strength and steel grades.
"""

import pytest

from casingcalc.errors import InvalidGeometryError, UnknownEnumerationError
from casingcalc.models.inputs import SteelGrade
from casingcalc.models.outputs import CollapseRegime
from casingcalc.physics.grades import get_grade, list_grades
from casingcalc.physics.strength import (
    calculate_burst_pressure,
    calculate_collapse_pressure,
    collapse_regime,
    cross_section_area,
    dt_ratio,
    estimate_pipe_ratings,
    inner_diameter,
)


class TestGrades:
    """Tests for grade lookup."""

    def test_n80_yield(self):
        assert SteelGrade.N80.yield_mpa == pytest.approx(551.6, abs=0.05)

    def test_lookup_by_value(self):
        assert get_grade("P-110") is SteelGrade.P110
        assert get_grade("n-80") is SteelGrade.N80

    def test_gost_letters(self):
        assert get_grade("Д") is SteelGrade.GOST_D
        assert get_grade("д") is SteelGrade.GOST_D
        assert get_grade("л") is SteelGrade.GOST_L
        assert get_grade("K") is SteelGrade.GOST_K
        assert SteelGrade.GOST_K.yield_mpa == pytest.approx(655.0, abs=0.1)

    def test_unknown_grade_raises(self):
        with pytest.raises(UnknownEnumerationError, match="steel grade"):
            get_grade("X-99")

    def test_list_grades_covers_enum(self):
        rows = list_grades()
        assert [r["grade"] for r in rows] == [g.value for g in SteelGrade]


class TestGeometry:
    """Tests for derived geometry."""

    def test_inner_diameter(self):
        assert inner_diameter(244.5, 11.99) == pytest.approx(220.52)

    def test_cross_section_area(self):
        # pi/4 * (0.2445^2 - 0.22052^2)
        assert cross_section_area(244.5, 11.99) == pytest.approx(0.0087581, rel=1e-4)

    @pytest.mark.parametrize("od,wt", [(244.5, 0.0), (244.5, -1.0), (20.0, 10.0), (0.0, 5.0)])
    def test_invalid_geometry_raises(self, od, wt):
        with pytest.raises(InvalidGeometryError, match="invalid pipe geometry"):
            dt_ratio(od, wt)

    def test_invalid_geometry_is_value_error(self):
        with pytest.raises(ValueError):
            calculate_burst_pressure(100.0, 0.0, "N-80")


class TestBurst:
    """Tests for burst pressure."""

    def test_reference_value(self):
        # 2 * 551.6 * 11.99 / 244.5
        assert calculate_burst_pressure(244.5, 11.99, "N-80") == pytest.approx(54.1, abs=0.05)

    def test_increases_with_wall_thickness(self):
        values = [calculate_burst_pressure(244.5, wt, SteelGrade.N80) for wt in (8.94, 10.03, 11.99, 13.84)]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_increases_with_yield(self):
        assert calculate_burst_pressure(177.8, 9.19, "P-110") > calculate_burst_pressure(177.8, 9.19, "J-55")

    def test_decreases_with_od(self):
        assert calculate_burst_pressure(273.1, 10.0, "N-80") < calculate_burst_pressure(219.1, 10.0, "N-80")


class TestCollapse:
    """Tests for the three collapse branches."""

    def test_boundary_15_selects_yield(self):
        # 177.8 / 11.85 = 15.004, tabulated as 15.00
        assert collapse_regime(dt_ratio(177.8, 11.85)) is CollapseRegime.YIELD

    def test_boundary_25_selects_plastic(self):
        assert collapse_regime(dt_ratio(177.8, 7.112)) is CollapseRegime.PLASTIC

    def test_around_boundaries(self):
        assert collapse_regime(14.9) is CollapseRegime.YIELD
        assert collapse_regime(15.1) is CollapseRegime.PLASTIC
        assert collapse_regime(24.9) is CollapseRegime.PLASTIC
        assert collapse_regime(25.1) is CollapseRegime.ELASTIC

    def test_yield_branch_formula(self):
        yp = SteelGrade.N80.yield_mpa
        ratio = 177.8 / 11.85
        assert calculate_collapse_pressure(177.8, 11.85, "N-80") == pytest.approx(2 * yp / (ratio - 1))

    def test_plastic_branch_formula(self):
        yp = SteelGrade.N80.yield_mpa
        ratio = 177.8 / 7.112
        assert calculate_collapse_pressure(177.8, 7.112, "N-80") == pytest.approx(yp / (0.465 * ratio - 6.775))

    def test_elastic_branch_formula(self):
        ratio = 273.1 / 8.89
        expected = 46_950_000 * 0.006895 / ratio ** 3
        assert calculate_collapse_pressure(273.1, 8.89, "J-55") == pytest.approx(expected)

    def test_elastic_independent_of_grade(self):
        assert calculate_collapse_pressure(273.1, 8.89, "J-55") == pytest.approx(
            calculate_collapse_pressure(273.1, 8.89, "P-110")
        )


class TestPipeRatings:
    """Tests for the combined estimate."""

    def test_estimate(self):
        ratings = estimate_pipe_ratings(244.5, 11.99, "N-80")
        assert ratings.burst_mpa == pytest.approx(54.1, abs=0.05)
        assert ratings.collapse_regime is CollapseRegime.PLASTIC
        assert ratings.dt_ratio == pytest.approx(20.39, abs=0.01)
        assert ratings.yield_strength_mpa == pytest.approx(551.6, abs=0.05)
