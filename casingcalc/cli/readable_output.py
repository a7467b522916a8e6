"""
Helpers to turn a calculation JSON result into a compact, human-readable
console summary, in SI or field units.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

from casingcalc.physics.conversions import UnitSystem, density_to_si, display_value


def _fmt(value: Any, system: UnitSystem, quantity: str, decimals: int = 2) -> str:
    """Safely format an SI value in the display system."""
    try:
        fval = float(value)
    except (TypeError, ValueError):
        return "n/a"
    return display_value(fval, system, quantity, decimals)


def _fmt_density(value_sg: Any, system: UnitSystem) -> str:
    try:
        fval = float(value_sg)
    except (TypeError, ValueError):
        return "n/a"
    if system is UnitSystem.SI:
        return f"{fval:.3f} g/cm3"
    return display_value(density_to_si(fval, "sg"), system, "density")


def _fmt_check(check: dict[str, Any] | None) -> str:
    if not check:
        return "n/a"
    value = check.get("value")
    shown = f"{value:.2f}" if isinstance(value, (int, float)) else "unloaded"
    return f"{shown} ({check.get('safety_class', '?')})"


def print_readable_output(
    result: Union[Path, dict[str, Any]],
    system: Union[UnitSystem, str] = UnitSystem.SI,
) -> None:
    """
    Print a human-friendly summary of a calculation result.

    Args:
        result: Path to a calculation JSON file, or the parsed dict.
        system: Display unit system (SI or FIELD).
    """
    data = json.loads(Path(result).read_text()) if isinstance(result, (str, Path)) else result
    system = UnitSystem(system)

    inputs = data.get("inputs", {})
    pipe = inputs.get("pipe", {})
    well = inputs.get("well", {})
    ratings = data.get("ratings", {})
    connections = data.get("connections", {})

    print(f"Calculation: {inputs.get('name', '?')} ({data.get('id', '?')})")
    print(
        f"  Pipe: OD {pipe.get('outer_diameter_mm')} mm x WT {pipe.get('wall_thickness_mm')} mm, "
        f"{pipe.get('grade')}, {_fmt(pipe.get('linear_weight_kg_m'), system, 'linear_weight')}"
    )
    print(
        f"  Well: depth {_fmt(well.get('depth_m'), system, 'length', 0)}, "
        f"mud {_fmt_density(well.get('mud_density_sg'), system)}, "
        f"hole {well.get('hole_diameter_mm')} mm"
    )
    print(
        f"  Ratings (estimated): burst {_fmt(ratings.get('burst_mpa'), system, 'pressure')}, "
        f"collapse {_fmt(ratings.get('collapse_mpa'), system, 'pressure')} "
        f"[{ratings.get('collapse_regime')}, D/t {ratings.get('dt_ratio', 0):.2f}]"
    )
    print(
        f"  Connection {connections.get('connection_type')}: "
        f"torque {_fmt(connections.get('max_torque_knm'), system, 'torque')} "
        f"SF {_fmt_check(connections.get('torque_safety'))}, "
        f"axial {_fmt(connections.get('max_axial_load_kn'), system, 'force')} "
        f"SF {_fmt_check(connections.get('axial_safety'))}"
    )

    drilling = data.get("drilling")
    if drilling:
        print(
            f"  Drilling: torque {_fmt(drilling.get('surface_torque_knm'), system, 'torque')}, "
            f"hook load {_fmt(drilling.get('hook_load_kn'), system, 'force')}, "
            f"max {drilling.get('max_rpm', 0):.0f} rpm"
        )

    running = data.get("running")
    if running:
        print(
            f"  Running: load {_fmt(running.get('running_load_kn'), system, 'force')}, "
            f"max speed {_fmt(running.get('max_running_speed_mps'), system, 'velocity')}"
        )

    hydraulics = data.get("hydraulics")
    if hydraulics:
        print(
            f"  Hydraulics: total loss {_fmt(hydraulics.get('total_pressure_loss_mpa'), system, 'pressure')}, "
            f"annulus {_fmt(hydraulics.get('annulus_velocity_mps'), system, 'velocity')} "
            f"({hydraulics.get('flow_regime_annulus')}), "
            f"power {hydraulics.get('hydraulic_power_kw', 0):.1f} kW"
        )

    torque_drag = data.get("torque_drag", {})
    print(
        f"  Torque & drag: max stress {_fmt(torque_drag.get('max_stress_mpa'), system, 'pressure')}, "
        f"yield SF {_fmt_check(torque_drag.get('yield_safety'))}"
    )

    ecd = data.get("ecd")
    if ecd:
        print(f"  ECD: max {_fmt_density(ecd.get('max_ecd_sg'), system)}")

    cleaning = data.get("hole_cleaning")
    if cleaning:
        print(
            f"  Hole cleaning: {cleaning.get('rating')} "
            f"({cleaning.get('average_efficiency_pct', 0):.1f} %)"
        )

    pressure = data.get("pressure")
    if pressure:
        print(
            f"  Pressure: burst SF {_fmt_check(pressure.get('burst_safety'))}, "
            f"collapse SF {_fmt_check(pressure.get('collapse_safety'))}"
        )

    warnings = data.get("warnings") or []
    if warnings:
        print("Warnings:")
        for w in warnings:
            print(f"  - {w}")
