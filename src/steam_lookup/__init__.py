"""Top-level package for the water/steam property table lookup engine."""

from importlib import metadata

from .engine import (
    convert_unit,
    initialize_compressed_table,
    initialize_pressure_table,
    initialize_temperature_table,
    lookup_by_pressure,
    lookup_by_temperature,
    lookup_compressed,
)


def get_version() -> str:
    """Return the installed package version."""
    try:
        return metadata.version("steam-lookup")
    except metadata.PackageNotFoundError:  # pragma: no cover - local dev fallback
        return "0.0.0"


__all__ = [
    "convert_unit",
    "get_version",
    "initialize_compressed_table",
    "initialize_pressure_table",
    "initialize_temperature_table",
    "lookup_by_pressure",
    "lookup_by_temperature",
    "lookup_compressed",
]
