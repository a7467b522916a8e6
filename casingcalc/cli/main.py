"""
Command-line interface for the casing string calculator.

Usage:
    python -m casingcalc make-example [--output example_input.json]
    python -m casingcalc calculate --input example.json [--output result.json] [--summary] [--units FIELD]
    python -m casingcalc summary --input result.json [--units FIELD]
    python -m casingcalc grades
    python -m casingcalc catalog [--diameter 244.5] [--manufacturer TMK]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from casingcalc import __version__
from casingcalc.calculator import CasingCalculator
from casingcalc.catalog import by_manufacturer, find_by_diameter, RUSSIAN_PIPES
from casingcalc.cli.readable_output import print_readable_output
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
from casingcalc.physics.conversions import UnitSystem
from casingcalc.physics.grades import list_grades


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="casingcalc",
        description="Casing string calculator - burst/collapse, connections, drilling, "
                    "running, hydraulics and depth profiles.",
    )
    parser.add_argument("--version", action="version", version=f"casingcalc {__version__}")
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Log engine details to stderr (-v info, -vv debug)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # make-example command
    example_parser = subparsers.add_parser(
        "make-example",
        help="Generate an example input JSON file",
    )
    example_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path("example_input.json"),
        help="Output path for example file (default: example_input.json)",
    )

    # calculate command
    calculate_parser = subparsers.add_parser(
        "calculate",
        help="Run a casing string calculation",
    )
    calculate_parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to JSON input file",
    )
    calculate_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON output (prints to stdout if not specified)",
    )
    calculate_parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a readable summary instead of JSON when no output file is given",
    )
    calculate_parser.add_argument(
        "--units",
        choices=[s.value for s in UnitSystem],
        default=UnitSystem.SI.value,
        help="Unit system for the summary (default: SI)",
    )

    # summary command
    summary_parser = subparsers.add_parser(
        "summary",
        help="Print a readable summary of a saved result",
    )
    summary_parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to a calculation JSON file",
    )
    summary_parser.add_argument(
        "--units",
        choices=[s.value for s in UnitSystem],
        default=UnitSystem.SI.value,
        help="Unit system (default: SI)",
    )

    # grades command
    subparsers.add_parser(
        "grades",
        help="List steel grades",
    )

    # catalog command
    catalog_parser = subparsers.add_parser(
        "catalog",
        help="List catalog pipes",
    )
    catalog_parser.add_argument(
        "--diameter", "-d",
        type=float,
        default=None,
        help="Only pipes within 0.5 mm of this outer diameter (mm)",
    )
    catalog_parser.add_argument(
        "--manufacturer", "-m",
        default=None,
        help="Only pipes from this mill (OTTM, BTS, TMK)",
    )

    return parser


def configure_logging(verbosity: int) -> None:
    """Route package logs to stderr at a level set by -v flags."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_example() -> CalculationInputs:
    """A 9-5/8in N-80 string at 1500 m with every engine enabled."""
    return CalculationInputs(
        name="9-5/8in intermediate",
        pipe=PipeSection(
            outer_diameter_mm=244.5,
            wall_thickness_mm=11.99,
            linear_weight_kg_m=69.4,
            grade=SteelGrade.N80,
        ),
        well=WellGeometryContext(
            depth_m=1500.0,
            mud_density_sg=1.25,
            hole_diameter_mm=311.0,
        ),
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
            nozzles=[Nozzle(id=i, diameter_mm=12.0) for i in range(1, 4)],
        ),
        enabled=EnabledCalculations(drilling=True, running=True, hydraulics=True),
    )


def cmd_make_example(args: argparse.Namespace) -> int:
    """Generate an example input JSON file."""
    example = build_example()

    with open(args.output, "w") as f:
        f.write(example.model_dump_json(indent=2))

    print(f"Created example input file: {args.output}")
    print("\nRun the calculation with:")
    print(f"  python -m casingcalc calculate --input {args.output} --summary")

    return 0


def cmd_calculate(args: argparse.Namespace) -> int:
    """Run a calculation from a JSON input file."""
    try:
        with open(args.input) as f:
            input_data = json.load(f)

        inputs = CalculationInputs.model_validate(input_data)

        print(f"\nCasing calculation: {inputs.name}", file=sys.stderr)
        print(
            f"Pipe: {inputs.pipe.outer_diameter_mm} x {inputs.pipe.wall_thickness_mm} mm "
            f"{inputs.pipe.grade.value} | Depth: {inputs.well.depth_m:.0f} m",
            file=sys.stderr,
        )

        result = CasingCalculator(inputs).calculate()
        output_json = result.model_dump_json(indent=2)

        if args.output:
            with open(args.output, "w") as f:
                f.write(output_json)
            print(f"\nResults saved to {args.output}", file=sys.stderr)

        if args.summary:
            print_readable_output(json.loads(output_json), args.units)
        elif not args.output:
            print(output_json)

        print(
            f"\nOverall: {result.worst_safety_class.value} | warnings: {len(result.warnings)}",
            file=sys.stderr,
        )
        return 0

    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_summary(args: argparse.Namespace) -> int:
    """Print a saved result in readable form."""
    try:
        print_readable_output(args.input, args.units)
        return 0
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_grades(args: argparse.Namespace) -> int:
    """Print the steel grade table."""
    print(f"{'Grade':<8}{'Yield psi':>12}{'Tensile psi':>14}{'Yield MPa':>12}{'Tensile MPa':>14}")
    for row in list_grades():
        print(
            f"{row['grade']:<8}{row['yield_psi']:>12,.0f}{row['tensile_psi']:>14,.0f}"
            f"{row['yield_mpa']:>12.1f}{row['tensile_mpa']:>14.1f}"
        )
    return 0


def cmd_catalog(args: argparse.Namespace) -> int:
    """Print catalog pipes, optionally filtered."""
    try:
        pipes = list(RUSSIAN_PIPES)
        if args.manufacturer:
            pipes = by_manufacturer(args.manufacturer, pipes)
        if args.diameter is not None:
            pipes = find_by_diameter(args.diameter, pipes)
    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1

    if not pipes:
        print("No matching pipes", file=sys.stderr)
        return 0

    for pipe in pipes:
        print(
            f"{pipe.manufacturer.value:<5} {pipe.outer_diameter_mm:>6.1f} x {pipe.wall_thickness_mm:>5.2f} mm "
            f"{pipe.grade.value} {pipe.weight_kg_m:>5.1f} kg/m  {pipe.connection:<14} "
            f"burst {pipe.rated_burst_mpa:>5.1f} MPa  collapse {pipe.rated_collapse_mpa:>5.1f} MPa  "
            f"tension {pipe.rated_tension_kn:>6.0f} kN"
        )
    return 0


def cli(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "make-example": cmd_make_example,
        "calculate": cmd_calculate,
        "summary": cmd_summary,
        "grades": cmd_grades,
        "catalog": cmd_catalog,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
