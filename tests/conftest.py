"""
Pytest configuration and shared fixtures.
"""

import pytest

from casingcalc.models.inputs import (
    CalculationInputs,
    ConnectionType,
    DrillingParameters,
    EnabledCalculations,
    HydraulicsParameters,
    Nozzle,
    PipeSection,
    SteelGrade,
    WellGeometryContext,
)


@pytest.fixture
def n80_pipe() -> PipeSection:
    """9-5/8in 11.99 mm N-80 casing."""
    return PipeSection(
        outer_diameter_mm=244.5,
        wall_thickness_mm=11.99,
        linear_weight_kg_m=69.4,
        grade=SteelGrade.N80,
    )


@pytest.fixture
def well() -> WellGeometryContext:
    """1500 m well, 1.25 g/cm3 mud, 311 mm hole."""
    return WellGeometryContext(
        depth_m=1500.0,
        mud_density_sg=1.25,
        hole_diameter_mm=311.0,
    )


@pytest.fixture
def three_nozzles() -> list[Nozzle]:
    return [Nozzle(id=i, diameter_mm=12.0) for i in range(1, 4)]


@pytest.fixture
def full_inputs(n80_pipe, well, three_nozzles) -> CalculationInputs:
    """Every engine enabled."""
    return CalculationInputs(
        name="Test string",
        pipe=n80_pipe,
        well=well,
        connection_type=ConnectionType.BUTTRESS,
        drilling=DrillingParameters(
            rpm=60.0,
            bit_diameter_mm=215.9,
            weight_on_bit_t=50.0,
            max_torque_knm=25.0,
            bit_torque_knm=5.0,
        ),
        hydraulics=HydraulicsParameters(
            flow_rate_lps=30.0,
            viscosity_cp=40.0,
            nozzles=three_nozzles,
        ),
        enabled=EnabledCalculations(drilling=True, running=True, hydraulics=True),
    )


@pytest.fixture
def minimal_inputs(n80_pipe, well) -> CalculationInputs:
    """Only the always-on engines."""
    return CalculationInputs(pipe=n80_pipe, well=well)
