"""Command-line front end for steam table lookups."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from loguru import logger

from . import engine
from .config import load_settings
from .reporter.console_reporter import (
    export_lookup_json,
    render_compressed_view,
    render_saturation_view,
)
from .reporter.excel_reporter import export_compressed_to_excel, export_saturation_to_excel
from .utils.units import AVAILABLE_UNITS, UnitPreferences, UnsupportedConversion, try_convert
from .utils.validation import (
    InputRangeError,
    read_pressure,
    read_temperature,
    validate_compressed_state,
    validate_saturation_pressure,
    validate_saturation_temperature,
)


def _add_output_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--pressure-unit", choices=AVAILABLE_UNITS["pressure"], help="Display unit for pressure")
    parser.add_argument(
        "--volume-unit", choices=AVAILABLE_UNITS["specific_volume"], help="Display unit for specific volume"
    )
    parser.add_argument(
        "--energy-unit", choices=AVAILABLE_UNITS["energy"], help="Display unit for internal energy and enthalpy"
    )
    parser.add_argument("--entropy-unit", choices=AVAILABLE_UNITS["entropy"], help="Display unit for entropy")
    parser.add_argument("--only", nargs="+", metavar="ID", help="Show only these property ids (e.g. vf hg sfg)")
    parser.add_argument("--json", type=Path, help="Write the raw lookup result to this JSON file")
    parser.add_argument("--excel", type=Path, help="Write a property report to this .xlsx file")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per lookup kind."""
    parser = argparse.ArgumentParser(prog="steam-lookup", description="Water and steam property tables")
    parser.add_argument("--verbose", action="store_true", help="Log table loading and lookup details")
    subparsers = parser.add_subparsers(dest="command", required=True)

    by_temperature = subparsers.add_parser("temperature", help="Saturation properties at a temperature")
    by_temperature.add_argument("value", help="Temperature, e.g. 25 or '298.15 K'")
    by_temperature.add_argument("--show-bounds", action="store_true", help="List the bracketing table rows")
    _add_output_options(by_temperature)

    by_pressure = subparsers.add_parser("pressure", help="Saturation properties at a pressure")
    by_pressure.add_argument("value", help="Pressure, e.g. 0.1 or '1 bar'")
    by_pressure.add_argument("--show-bounds", action="store_true", help="List the bracketing table rows")
    _add_output_options(by_pressure)

    compressed = subparsers.add_parser("compressed", help="Compressed liquid / superheated steam properties")
    compressed.add_argument("--temperature", required=True, help="Temperature, e.g. 150 or '423.15 K'")
    compressed.add_argument("--pressure", required=True, help="Pressure, e.g. 1 or '10 bar'")
    _add_output_options(compressed)

    convert = subparsers.add_parser("convert", help="Convert a value between display units")
    convert.add_argument("value", type=float)
    convert.add_argument("from_unit")
    convert.add_argument("to_unit")

    generate = subparsers.add_parser("generate", help="Rebuild the datasets from IAPWS-IF97")
    generate.add_argument("--out", required=True, type=Path, help="Output directory for the JSON datasets")
    return parser


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def _preferences(args: argparse.Namespace) -> UnitPreferences:
    chosen = dict(load_settings().units)
    overrides = {
        "pressure": args.pressure_unit,
        "specific_volume": args.volume_unit,
        "energy": args.energy_unit,
        "entropy": args.entropy_unit,
    }
    chosen.update({key: value for key, value in overrides.items() if value})
    return UnitPreferences.from_mapping(chosen)


def _run_saturation(args: argparse.Namespace) -> int:
    if args.command == "temperature":
        coordinate = validate_saturation_temperature(read_temperature(args.value))
        result = engine.lookup_by_temperature(coordinate)
        label = f"{coordinate:g}°C"
    else:
        coordinate = validate_saturation_pressure(read_pressure(args.value))
        result = engine.lookup_by_pressure(coordinate)
        label = f"{coordinate:g} MPa"
    if result is None:
        print(f"No saturation data available at {label}", file=sys.stderr)
        return 1

    preferences = _preferences(args)
    render_saturation_view(label, result, args.command, preferences, args.only, args.show_bounds)
    if args.json:
        export_lookup_json(result, args.json)
    if args.excel:
        export_saturation_to_excel(result, args.command, args.excel, preferences, args.only)
    return 0


def _run_compressed(args: argparse.Namespace) -> int:
    temperature, pressure = validate_compressed_state(
        read_temperature(args.temperature), read_pressure(args.pressure)
    )
    result = engine.lookup_compressed(temperature, pressure)
    label = f"{temperature:g}°C, {pressure:g} MPa"
    if result is None:
        print(f"No compressed/superheated data near {label}", file=sys.stderr)
        return 1

    preferences = _preferences(args)
    render_compressed_view(label, result, preferences, args.only)
    if args.json:
        export_lookup_json(result, args.json)
    if args.excel:
        export_compressed_to_excel(result, args.excel, preferences, args.only)
    return 0


def _run_convert(args: argparse.Namespace) -> int:
    result = try_convert(args.value, args.from_unit, args.to_unit)
    if isinstance(result, UnsupportedConversion):
        print(result.message, file=sys.stderr)
        return 1
    print(f"{result.value:.6g} {result.unit}")
    return 0


def _run_generate(args: argparse.Namespace) -> int:
    from .tables.generate import write_datasets

    for path in write_datasets(args.out):
        print(f"  Dataset : {path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``steam-lookup`` command."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        if args.command in ("temperature", "pressure"):
            return _run_saturation(args)
        if args.command == "compressed":
            return _run_compressed(args)
        if args.command == "convert":
            return _run_convert(args)
        return _run_generate(args)
    except InputRangeError as exc:
        print(str(exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
