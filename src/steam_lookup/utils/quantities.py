"""Pint-backed parsing of user-supplied quantities into native table units."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pint import DimensionalityError, Quantity, UndefinedUnitError, UnitRegistry

NATIVE_TEMPERATURE_UNIT = "degC"
NATIVE_PRESSURE_UNIT = "megapascal"


class QuantityParseError(ValueError):
    """Raised when text cannot be read as a quantity of the expected kind."""


@lru_cache(maxsize=1)
def _build_registry() -> UnitRegistry:
    return UnitRegistry(autoconvert_offset_to_baseunit=True)


ureg = _build_registry()
Q_ = ureg.Quantity


def ensure_quantity(value: Any, unit: str) -> Quantity:
    """Return *value* as a quantity expressed in *unit*."""

    if isinstance(value, Quantity):
        return value.to(unit)
    return Q_(float(value), unit)


def magnitude(value: Any, unit: str) -> float:
    """Return the float magnitude of *value* expressed in *unit*."""

    return float(ensure_quantity(value, unit).magnitude)


def parse_quantity(text: str, native_unit: str) -> float:
    """Read ``"<number> [unit]"`` and return the magnitude in *native_unit*.

    A bare number is taken to be in *native_unit* already. The number and the
    unit are split before handing the unit to Pint so offset units such as
    ``degF`` never go through multiplication.
    """

    number, _, unit = str(text).strip().partition(" ")
    try:
        value = float(number)
    except ValueError as exc:
        raise QuantityParseError(f"'{text}' does not start with a number") from exc
    unit = unit.strip()
    if not unit:
        return value
    try:
        return magnitude(Q_(value, unit), native_unit)
    except (DimensionalityError, UndefinedUnitError) as exc:
        raise QuantityParseError(f"Cannot read '{text}' as {native_unit}") from exc


def parse_temperature(text: str) -> float:
    """Return a temperature in °C, e.g. ``"298.15 K"`` -> ``25.0``."""

    return parse_quantity(text, NATIVE_TEMPERATURE_UNIT)


def parse_pressure(text: str) -> float:
    """Return a pressure in MPa, e.g. ``"10 bar"`` -> ``1.0``."""

    return parse_quantity(text, NATIVE_PRESSURE_UNIT)


__all__ = [
    "NATIVE_PRESSURE_UNIT",
    "NATIVE_TEMPERATURE_UNIT",
    "Q_",
    "QuantityParseError",
    "ensure_quantity",
    "magnitude",
    "parse_pressure",
    "parse_quantity",
    "parse_temperature",
    "ureg",
]
