"""Property catalogue and display conversion for lookup results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

from loguru import logger

from ..tables.records import CompressedLookup, SaturationLookup, SaturationRow
from ..utils.units import NATIVE_UNITS, UnitPreferences, UnsupportedConversion, try_convert
from ..utils.warnings import format_warning

TEMPERATURE_LABEL = "°C"
DENSITY_UNIT = "kg/m³"

MODES = ("temperature", "pressure")


@dataclass(frozen=True)
class PropertySpec:
    """Static description of one displayable property."""

    id: str
    section: str
    title: str
    notation: str
    description: str
    category: str | None
    accessor: Callable[[Any], Any]


@dataclass(frozen=True)
class DisplayedProperty:
    """A property value converted to the caller's preferred unit."""

    id: str
    section: str
    title: str
    notation: str
    value: float | str
    unit: str
    description: str


_TRIPLE_SECTIONS: tuple[tuple[str, str, str, str], ...] = (
    ("Specific Volume", "specific_volume", "v", "specific_volume"),
    ("Internal Energy", "internal_energy", "u", "energy"),
    ("Enthalpy", "enthalpy", "h", "energy"),
    ("Entropy", "entropy", "s", "entropy"),
)

_TRIPLE_PARTS: tuple[tuple[str, str], ...] = (
    ("f", "Liquid"),
    ("g", "Vapor"),
    ("fg", "Vaporization"),
)


def _part_description(section: str, part: str) -> str:
    name = section.lower()
    label = name[:1].upper() + name[1:]
    if part == "f":
        return f"{label} of saturated liquid"
    if part == "g":
        return f"{label} of saturated vapor"
    return f"Change in {name} during vaporization"


def _triple_accessor(field_name: str, part: str) -> Callable[[SaturationRow], float]:
    return lambda row: getattr(getattr(row, field_name), part)


def _saturation_catalogue(mode: str) -> tuple[PropertySpec, ...]:
    if mode == "temperature":
        head = PropertySpec(
            id="pressure",
            section="Pressure",
            title="Saturation Pressure",
            notation="P(sat)",
            description="Pressure at which vapor and liquid phases coexist",
            category="pressure",
            accessor=lambda row: row.pressure,
        )
    else:
        head = PropertySpec(
            id="temperature",
            section="Temperature",
            title="Saturation Temperature",
            notation="T(sat)",
            description="Temperature at which vapor and liquid phases coexist",
            category="temperature",
            accessor=lambda row: row.temperature,
        )
    specs = [head]
    for section, field_name, symbol, category in _TRIPLE_SECTIONS:
        for part, title in _TRIPLE_PARTS:
            specs.append(
                PropertySpec(
                    id=f"{symbol}{part}",
                    section=section,
                    title=title,
                    notation=f"{symbol}({part})",
                    description=_part_description(section, part),
                    category=category,
                    accessor=_triple_accessor(field_name, part),
                )
            )
    return tuple(specs)


SATURATION_BY_TEMPERATURE = _saturation_catalogue("temperature")
SATURATION_BY_PRESSURE = _saturation_catalogue("pressure")

COMPRESSED_PROPERTIES: tuple[PropertySpec, ...] = (
    PropertySpec("phase", "Phase", "State", "φ", "Phase of water at given conditions", None, lambda p: p.phase),
    PropertySpec(
        "v", "Specific Volume", "Specific Volume", "v",
        "Specific volume at given conditions", "specific_volume", lambda p: p.specific_volume,
    ),
    PropertySpec("rho", "Density", "Density", "ρ", "Density at given conditions", None, lambda p: p.density),
    PropertySpec(
        "u", "Internal Energy", "Internal Energy", "u",
        "Internal energy at given conditions", "energy", lambda p: p.internal_energy,
    ),
    PropertySpec("h", "Enthalpy", "Enthalpy", "h", "Enthalpy at given conditions", "energy", lambda p: p.enthalpy),
    PropertySpec("s", "Entropy", "Entropy", "s", "Entropy at given conditions", "entropy", lambda p: p.entropy),
)


def saturation_catalogue(mode: str) -> tuple[PropertySpec, ...]:
    if mode not in MODES:
        raise ValueError(f"Unknown lookup mode '{mode}'")
    return SATURATION_BY_TEMPERATURE if mode == "temperature" else SATURATION_BY_PRESSURE


def _display_unit(spec: PropertySpec, preferences: UnitPreferences) -> str:
    if spec.category is None:
        return DENSITY_UNIT if spec.id == "rho" else ""
    if spec.category == "temperature":
        return TEMPERATURE_LABEL
    return preferences.unit_for(spec.category)


def _present(
    specs: Sequence[PropertySpec],
    record: Any,
    preferences: UnitPreferences,
    visible: Iterable[str] | None,
) -> list[DisplayedProperty]:
    selected = None if visible is None else set(visible)
    rows: list[DisplayedProperty] = []
    for spec in specs:
        if selected is not None and spec.id not in selected:
            continue
        raw = spec.accessor(record)
        unit = _display_unit(spec, preferences)
        value = raw
        if spec.category not in (None, "temperature"):
            native = NATIVE_UNITS[spec.category]
            converted = try_convert(float(raw), native, unit)
            if isinstance(converted, UnsupportedConversion):
                logger.error(format_warning("UNSUPPORTED_CONVERSION", converted.message))
                value, unit = float(raw), native
            else:
                value = converted.value
        rows.append(
            DisplayedProperty(
                id=spec.id,
                section=spec.section,
                title=spec.title,
                notation=spec.notation,
                value=value,
                unit=unit,
                description=spec.description,
            )
        )
    return rows


def present_saturation(
    result: SaturationLookup,
    mode: str,
    preferences: UnitPreferences | None = None,
    visible: Iterable[str] | None = None,
) -> list[DisplayedProperty]:
    """Convert a saturation result into display rows in the preferred units."""

    return _present(saturation_catalogue(mode), result.data, preferences or UnitPreferences(), visible)


def present_compressed(
    result: CompressedLookup,
    preferences: UnitPreferences | None = None,
    visible: Iterable[str] | None = None,
) -> list[DisplayedProperty]:
    """Convert a compressed/superheated result into display rows."""

    return _present(COMPRESSED_PROPERTIES, result.data, preferences or UnitPreferences(), visible)


def _coordinate_label(value: float, mode: str) -> str:
    if mode == "temperature":
        return f"{value:g}{TEMPERATURE_LABEL}"
    return f"{value:g} MPa"


def describe_bounds(result: SaturationLookup, mode: str) -> str:
    """One-line provenance of a saturation result."""

    bounds = result.bounds
    if bounds.is_exact:
        return f"Using exact data at {_coordinate_label(result.data.coordinate(mode), mode)}"
    return (
        "Interpolated value using data points at "
        f"{_coordinate_label(bounds.lower.coordinate(mode), mode)} and "
        f"{_coordinate_label(bounds.upper.coordinate(mode), mode)}"
    )


def bounds_rows(result: SaturationLookup, mode: str) -> list[tuple[str, float, float, str]]:
    """Lower/upper bound values of every field in native units."""

    rows: list[tuple[str, float, float, str]] = []
    lower, upper = result.bounds.lower, result.bounds.upper
    for spec in saturation_catalogue(mode):
        unit = TEMPERATURE_LABEL if spec.category == "temperature" else NATIVE_UNITS[spec.category]
        rows.append((spec.notation, float(spec.accessor(lower)), float(spec.accessor(upper)), unit))
    return rows


__all__ = [
    "COMPRESSED_PROPERTIES",
    "DisplayedProperty",
    "PropertySpec",
    "bounds_rows",
    "describe_bounds",
    "present_compressed",
    "present_saturation",
    "saturation_catalogue",
]
