"""Process-wide lookup engine over the packaged reference tables."""

from __future__ import annotations

from functools import lru_cache

from .config import load_settings
from .interpolation.compressed import CompressedEstimator
from .interpolation.saturation import PressureInterpolator, TemperatureInterpolator
from .tables.records import CompressedLookup, SaturationLookup
from .tables.store import CompressedGrid, SaturationTable
from .utils.units import convert_value


@lru_cache(maxsize=1)
def _temperature_interpolator() -> TemperatureInterpolator:
    table = SaturationTable.from_dataset(load_settings().by_temperature_path, axis="temperature")
    return TemperatureInterpolator(table)


@lru_cache(maxsize=1)
def _pressure_interpolator() -> PressureInterpolator:
    table = SaturationTable.from_dataset(load_settings().by_pressure_path, axis="pressure")
    return PressureInterpolator(table)


@lru_cache(maxsize=1)
def _compressed_estimator() -> CompressedEstimator:
    settings = load_settings()
    grid = CompressedGrid.from_dataset(settings.compressed_path)
    return CompressedEstimator(grid, settings.compressed_search)


def initialize_temperature_table() -> SaturationTable:
    """Load the by-temperature table once; later calls return the cached table."""

    return _temperature_interpolator().table


def initialize_pressure_table() -> SaturationTable:
    """Load the by-pressure table once; later calls return the cached table."""

    return _pressure_interpolator().table


def initialize_compressed_table() -> CompressedGrid:
    """Load the compressed/superheated grid once; later calls return the cached grid."""

    return _compressed_estimator().grid


def lookup_by_temperature(temperature: float) -> SaturationLookup | None:
    """Saturation properties at *temperature* (°C), or ``None`` off the table."""

    return _temperature_interpolator().lookup(temperature)


def lookup_by_pressure(pressure: float) -> SaturationLookup | None:
    """Saturation properties at *pressure* (MPa), or ``None`` off the table."""

    return _pressure_interpolator().lookup(pressure)


def lookup_compressed(temperature: float, pressure: float) -> CompressedLookup | None:
    """Nearest compressed/superheated grid point to (*temperature* °C, *pressure* MPa)."""

    return _compressed_estimator().lookup(temperature, pressure)


def convert_unit(value: float, from_unit: str, to_unit: str) -> float:
    return convert_value(value, from_unit, to_unit)


def reset_tables() -> None:
    """Drop the cached tables and settings so the next call reloads them."""

    _temperature_interpolator.cache_clear()
    _pressure_interpolator.cache_clear()
    _compressed_estimator.cache_clear()
    load_settings.cache_clear()


__all__ = [
    "convert_unit",
    "initialize_compressed_table",
    "initialize_pressure_table",
    "initialize_temperature_table",
    "lookup_by_pressure",
    "lookup_by_temperature",
    "lookup_compressed",
    "reset_tables",
]
