"""Exact lookup and linear interpolation along the saturation curve."""

from __future__ import annotations

import math

from loguru import logger

from ..tables.records import (
    InterpolationBounds,
    PropertyTriple,
    SaturationLookup,
    SaturationRow,
)
from ..tables.store import SaturationTable


def interpolate_value(y1: float, y2: float, x1: float, x2: float, x: float) -> float:
    """Linear interpolation of *y* at *x* between ``(x1, y1)`` and ``(x2, y2)``."""

    return y1 + (x - x1) * (y2 - y1) / (x2 - x1)


def interpolate_triple(
    first: PropertyTriple, second: PropertyTriple, x1: float, x2: float, x: float
) -> PropertyTriple:
    return PropertyTriple(
        f=interpolate_value(first.f, second.f, x1, x2, x),
        g=interpolate_value(first.g, second.g, x1, x2, x),
        fg=interpolate_value(first.fg, second.fg, x1, x2, x),
    )


def interpolate_row(lower: SaturationRow, upper: SaturationRow, axis: str, x: float) -> SaturationRow:
    """Interpolate every field of two rows independently at coordinate *x*."""

    x1 = lower.coordinate(axis)
    x2 = upper.coordinate(axis)
    if axis == "temperature":
        temperature = x
        pressure = interpolate_value(lower.pressure, upper.pressure, x1, x2, x)
    else:
        pressure = x
        temperature = interpolate_value(lower.temperature, upper.temperature, x1, x2, x)
    return SaturationRow(
        temperature=temperature,
        pressure=pressure,
        specific_volume=interpolate_triple(lower.specific_volume, upper.specific_volume, x1, x2, x),
        internal_energy=interpolate_triple(lower.internal_energy, upper.internal_energy, x1, x2, x),
        enthalpy=interpolate_triple(lower.enthalpy, upper.enthalpy, x1, x2, x),
        entropy=interpolate_triple(lower.entropy, upper.entropy, x1, x2, x),
    )


class SaturationInterpolator:
    """Resolve a scalar coordinate against a saturation table.

    Exact table keys are returned unchanged with ``is_exact`` set. Any other
    coordinate is bracketed by two stored rows and every field is linearly
    interpolated on its own. ``None`` means the coordinate could not be
    bracketed.
    """

    def __init__(self, table: SaturationTable) -> None:
        self.table = table

    @property
    def axis(self) -> str:
        return self.table.axis

    def bracket(self, coordinate: float) -> tuple[SaturationRow, SaturationRow] | None:
        return self.table.bracket(coordinate)

    def lookup(self, coordinate: float) -> SaturationLookup | None:
        exact = self.table.exact(coordinate)
        if exact is not None:
            return SaturationLookup(
                data=exact,
                bounds=InterpolationBounds(lower=exact, upper=exact, is_exact=True),
            )

        bracket = self.bracket(coordinate)
        if bracket is None:
            logger.debug("No {} bracket for {}", self.axis, coordinate)
            return None
        lower, upper = bracket
        return SaturationLookup(
            data=interpolate_row(lower, upper, self.axis, coordinate),
            bounds=InterpolationBounds(lower=lower, upper=upper, is_exact=False),
        )


class TemperatureInterpolator(SaturationInterpolator):
    """Temperature-keyed lookup using the integer rows around the query.

    Tables without a row at every integer degree fall back to the
    breakpoint search used for pressure.
    """

    def __init__(self, table: SaturationTable) -> None:
        if table.axis != "temperature":
            raise ValueError("TemperatureInterpolator requires a temperature-keyed table")
        super().__init__(table)

    def bracket(self, coordinate: float) -> tuple[SaturationRow, SaturationRow] | None:
        if not math.isfinite(coordinate):
            return None
        lower = self.table.exact(float(math.floor(coordinate)))
        upper = self.table.exact(float(math.ceil(coordinate)))
        if lower is not None and upper is not None and lower is not upper:
            return lower, upper
        return super().bracket(coordinate)


class PressureInterpolator(SaturationInterpolator):
    """Pressure-keyed lookup using binary search over breakpoint ranges."""

    def __init__(self, table: SaturationTable) -> None:
        if table.axis != "pressure":
            raise ValueError("PressureInterpolator requires a pressure-keyed table")
        super().__init__(table)


__all__ = [
    "PressureInterpolator",
    "SaturationInterpolator",
    "TemperatureInterpolator",
    "interpolate_row",
    "interpolate_triple",
    "interpolate_value",
]
