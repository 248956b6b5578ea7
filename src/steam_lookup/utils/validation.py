"""Caller-side domain checks applied before a query reaches the engine."""

from __future__ import annotations

import math

from ..config import Domain, Settings, load_settings
from .quantities import QuantityParseError, parse_pressure, parse_temperature


class InputRangeError(ValueError):
    """Raised when a query is not a number or lies outside its valid domain."""


def _check(value: float, domain: Domain, label: str, unit: str, separator: str = " ") -> float:
    low, high = domain
    if not math.isfinite(value):
        raise InputRangeError(f"Please enter a valid {label.lower()}")
    if value < low or value > high:
        raise InputRangeError(
            f"{label} must be between {low:.10g}{separator}{unit} and {high:.10g}{separator}{unit}"
        )
    return value


def validate_saturation_temperature(value: float, settings: Settings | None = None) -> float:
    settings = settings or load_settings()
    return _check(value, settings.domain("saturation_temperature_C"), "Temperature", "°C", "")


def validate_saturation_pressure(value: float, settings: Settings | None = None) -> float:
    settings = settings or load_settings()
    return _check(value, settings.domain("saturation_pressure_MPa"), "Pressure", "MPa")


def validate_compressed_state(
    temperature: float, pressure: float, settings: Settings | None = None
) -> tuple[float, float]:
    """Check both coordinates of a compressed/superheated query."""

    settings = settings or load_settings()
    return (
        _check(temperature, settings.domain("compressed_temperature_C"), "Temperature", "°C", ""),
        _check(pressure, settings.domain("compressed_pressure_MPa"), "Pressure", "MPa"),
    )


def read_temperature(text: str) -> float:
    """Parse user text as a temperature in °C."""

    try:
        return parse_temperature(text)
    except QuantityParseError as exc:
        raise InputRangeError("Please enter a valid temperature") from exc


def read_pressure(text: str) -> float:
    """Parse user text as a pressure in MPa."""

    try:
        return parse_pressure(text)
    except QuantityParseError as exc:
        raise InputRangeError("Please enter a valid pressure") from exc


__all__ = [
    "InputRangeError",
    "read_pressure",
    "read_temperature",
    "validate_compressed_state",
    "validate_saturation_pressure",
    "validate_saturation_temperature",
]
