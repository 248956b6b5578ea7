"""Nearest-neighbour estimation over the compressed liquid / superheated grid.

The region has no one-dimensional ordering, and phase boundaries are curved
in (T, P) space. Instead of blending neighbours, the estimator returns the
single closest grid point from a coarse candidate window and flags the result
when that window spans more than one phase.
"""

from __future__ import annotations

import math
from typing import Sequence

from loguru import logger

from ..config import CompressedSearchSettings
from ..tables.records import CompressedLookup, CompressedPoint
from ..tables.store import CompressedGrid
from ..utils.warnings import format_warning

PHASE_WARNING_DETAIL = "the lower and upper bounds must be the same phase for accurate interpolation"


def nearest_coordinates(values: Sequence[float], target: float, count: int = 2) -> list[float]:
    """Return up to *count* values ordered by distance to *target*."""

    return sorted(values, key=lambda value: abs(value - target))[:count]


def _within(value: float, anchors: Sequence[float], window: float) -> bool:
    return any(abs(value - anchor) < window for anchor in anchors)


class CompressedEstimator:
    """Estimate compressed/superheated properties at a (temperature, pressure) pair."""

    def __init__(
        self,
        grid: CompressedGrid,
        search: CompressedSearchSettings | None = None,
    ) -> None:
        self.grid = grid
        self.search = search or CompressedSearchSettings()

    def distance(self, point: CompressedPoint, temperature: float, pressure: float) -> float:
        """Euclidean distance with each axis normalised by its maximum valid value."""

        return math.sqrt(
            ((point.temperature - temperature) / self.search.temperature_scale_C) ** 2
            + ((point.pressure - pressure) / self.search.pressure_scale_MPa) ** 2
        )

    def candidates(self, temperature: float, pressure: float) -> list[CompressedPoint]:
        """Grid points near the two closest temperatures and the two closest pressures."""

        nearest_temperatures = nearest_coordinates(self.grid.temperatures, temperature)
        nearest_pressures = nearest_coordinates(self.grid.pressures, pressure)
        near_temperature = {
            point
            for value in self.grid.temperatures
            if _within(value, nearest_temperatures, self.search.temperature_window_C)
            for point in self.grid.at_temperature(value)
        }
        return [
            point
            for value in self.grid.pressures
            if _within(value, nearest_pressures, self.search.pressure_window_MPa)
            for point in self.grid.at_pressure(value)
            if point in near_temperature
        ]

    def lookup(self, temperature: float, pressure: float) -> CompressedLookup | None:
        candidates = self.candidates(temperature, pressure)
        if not candidates:
            logger.debug("No compressed grid candidates near T={} P={}", temperature, pressure)
            return None

        ranked = sorted(candidates, key=lambda point: self.distance(point, temperature, pressure))
        nearest = ranked[0]
        phases = {point.phase for point in ranked[: self.search.phase_check_neighbours]}

        warning = None
        if len(phases) > 1:
            warning = format_warning("PHASE_BOUNDARY", PHASE_WARNING_DETAIL)
            logger.warning(
                "Compressed lookup at T={} P={} spans phases {}",
                temperature,
                pressure,
                sorted(phases),
            )
        return CompressedLookup(data=nearest, warning=warning)


__all__ = ["CompressedEstimator", "nearest_coordinates"]
