"""Reference table store: dataset parsing and lookup indexes."""

from __future__ import annotations

import bisect
import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, NamedTuple, Sequence

from loguru import logger

from ..utils.warnings import format_warning
from .records import CompressedPoint, PropertyTriple, SaturationRow

SATURATION_COLUMNS = 13
COMPRESSED_COLUMNS = 7

AXES = ("temperature", "pressure")


class DatasetError(ValueError):
    """Raised when a dataset document does not have the expected shape."""


class BreakpointRange(NamedTuple):
    """Half-open interval ``[start, end)`` between two adjacent breakpoints."""

    start: float
    end: float
    index: int


def load_dataset(path: Path) -> Dict[str, Any]:
    """Read a dataset JSON document and check it carries a row list."""

    with Path(path).open("r", encoding="utf-8") as handle:
        document = json.load(handle)
    if not isinstance(document, Mapping) or not isinstance(document.get("data"), list):
        raise DatasetError(f"{path} has no 'data' row list")
    return dict(document)


def parse_saturation_row(row: Sequence[Any], keyed_by: str) -> SaturationRow:
    """Build a :class:`SaturationRow` from a positional dataset row.

    Column order is ``key, other, vf, vg, uf, ug, ufg, hf, hg, hfg, sf, sg,
    sfg`` where ``key`` is the temperature or the pressure depending on
    *keyed_by*. The specific-volume ``fg`` is derived as ``vg - vf``; the
    other ``fg`` values are taken from the table.
    """

    if keyed_by not in AXES:
        raise ValueError(f"Unknown table axis '{keyed_by}'")
    if len(row) < SATURATION_COLUMNS:
        raise DatasetError(f"Saturation row has {len(row)} columns, expected {SATURATION_COLUMNS}")
    key, other, vf, vg, uf, ug, ufg, hf, hg, hfg, sf, sg, sfg = (
        float(value) for value in row[:SATURATION_COLUMNS]
    )
    temperature, pressure = (key, other) if keyed_by == "temperature" else (other, key)
    return SaturationRow(
        temperature=temperature,
        pressure=pressure,
        specific_volume=PropertyTriple(f=vf, g=vg, fg=vg - vf),
        internal_energy=PropertyTriple(f=uf, g=ug, fg=ufg),
        enthalpy=PropertyTriple(f=hf, g=hg, fg=hfg),
        entropy=PropertyTriple(f=sf, g=sg, fg=sfg),
    )


def parse_compressed_row(row: Sequence[Any]) -> CompressedPoint:
    """Build a :class:`CompressedPoint`; the trailing phase label is optional."""

    if len(row) < COMPRESSED_COLUMNS:
        raise DatasetError(f"Compressed row has {len(row)} columns, expected {COMPRESSED_COLUMNS}")
    pressure, temperature, volume, density, energy, enthalpy, entropy = (
        float(value) for value in row[:COMPRESSED_COLUMNS]
    )
    phase = str(row[COMPRESSED_COLUMNS]) if len(row) > COMPRESSED_COLUMNS else ""
    return CompressedPoint(
        pressure=pressure,
        temperature=temperature,
        specific_volume=volume,
        density=density,
        internal_energy=energy,
        enthalpy=enthalpy,
        entropy=entropy,
        phase=phase,
    )


class SaturationTable:
    """Saturation rows indexed on one coordinate, sorted ascending."""

    def __init__(self, axis: str, rows: Iterable[SaturationRow] = ()) -> None:
        if axis not in AXES:
            raise ValueError(f"Unknown table axis '{axis}'")
        self.axis = axis
        index: Dict[float, SaturationRow] = {}
        for row in rows:
            index[row.coordinate(axis)] = row
        breakpoints = tuple(sorted(index))
        self._index: Mapping[float, SaturationRow] = MappingProxyType(index)
        self._breakpoints = breakpoints
        self._ranges = tuple(
            BreakpointRange(start, end, position)
            for position, (start, end) in enumerate(zip(breakpoints, breakpoints[1:]))
        )
        self._starts = tuple(item.start for item in self._ranges)

    @classmethod
    def from_rows(cls, axis: str, rows: Iterable[Sequence[Any]]) -> "SaturationTable":
        return cls(axis, (parse_saturation_row(row, axis) for row in rows))

    @classmethod
    def from_dataset(cls, path: Path, axis: str) -> "SaturationTable":
        """Load *path*; an unreadable or malformed dataset yields an empty table."""

        try:
            table = cls.from_rows(axis, load_dataset(path)["data"])
        except (OSError, TypeError, ValueError) as exc:
            logger.error(format_warning("TABLE_EMPTY", f"{axis} table from {path}: {exc}"))
            return cls(axis)
        logger.info("Loaded {} saturation rows keyed by {} from {}", len(table), axis, path)
        return table

    def __len__(self) -> int:
        return len(self._breakpoints)

    @property
    def rows(self) -> tuple[SaturationRow, ...]:
        return tuple(self._index[key] for key in self._breakpoints)

    @property
    def breakpoints(self) -> tuple[float, ...]:
        return self._breakpoints

    @property
    def ranges(self) -> tuple[BreakpointRange, ...]:
        return self._ranges

    def exact(self, coordinate: float) -> SaturationRow | None:
        return self._index.get(coordinate)

    def find_range(self, coordinate: float) -> BreakpointRange | None:
        """Binary search for the range containing *coordinate*."""

        position = bisect.bisect_right(self._starts, coordinate) - 1
        if position < 0:
            return None
        candidate = self._ranges[position]
        if candidate.start <= coordinate < candidate.end:
            return candidate
        return None

    def bracket(self, coordinate: float) -> tuple[SaturationRow, SaturationRow] | None:
        """Return the stored rows on either side of *coordinate*."""

        found = self.find_range(coordinate)
        if found is None:
            return None
        return self._index[found.start], self._index[found.end]


class CompressedGrid:
    """Compressed liquid / superheated points with temperature and pressure multi-maps."""

    def __init__(self, points: Iterable[CompressedPoint] = ()) -> None:
        self._points = tuple(points)
        by_temperature: Dict[float, List[CompressedPoint]] = {}
        by_pressure: Dict[float, List[CompressedPoint]] = {}
        for point in self._points:
            by_temperature.setdefault(point.temperature, []).append(point)
            by_pressure.setdefault(point.pressure, []).append(point)
        self._by_temperature: Mapping[float, tuple[CompressedPoint, ...]] = MappingProxyType(
            {key: tuple(group) for key, group in by_temperature.items()}
        )
        self._by_pressure: Mapping[float, tuple[CompressedPoint, ...]] = MappingProxyType(
            {key: tuple(group) for key, group in by_pressure.items()}
        )

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]]) -> "CompressedGrid":
        return cls(parse_compressed_row(row) for row in rows)

    @classmethod
    def from_dataset(cls, path: Path) -> "CompressedGrid":
        """Load *path*; an unreadable or malformed dataset yields an empty grid."""

        try:
            grid = cls.from_rows(load_dataset(path)["data"])
        except (OSError, TypeError, ValueError) as exc:
            logger.error(format_warning("TABLE_EMPTY", f"compressed grid from {path}: {exc}"))
            return cls()
        logger.info("Loaded {} compressed/superheated points from {}", len(grid), path)
        return grid

    def __len__(self) -> int:
        return len(self._points)

    @property
    def points(self) -> tuple[CompressedPoint, ...]:
        return self._points

    @property
    def temperatures(self) -> tuple[float, ...]:
        return tuple(self._by_temperature)

    @property
    def pressures(self) -> tuple[float, ...]:
        return tuple(self._by_pressure)

    def at_temperature(self, temperature: float) -> tuple[CompressedPoint, ...]:
        return self._by_temperature.get(temperature, ())

    def at_pressure(self, pressure: float) -> tuple[CompressedPoint, ...]:
        return self._by_pressure.get(pressure, ())


__all__ = [
    "BreakpointRange",
    "CompressedGrid",
    "DatasetError",
    "SaturationTable",
    "load_dataset",
    "parse_compressed_row",
    "parse_saturation_row",
]
