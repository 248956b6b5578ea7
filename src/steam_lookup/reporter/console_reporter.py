"""Console presentation helpers for lookup results."""

from __future__ import annotations

import json
from itertools import groupby
from pathlib import Path
from typing import Iterable, Sequence

from ..tables.records import CompressedLookup, SaturationLookup
from ..utils.units import UnitPreferences
from .presentation import (
    DisplayedProperty,
    bounds_rows,
    describe_bounds,
    present_compressed,
    present_saturation,
)


def _format_block(title: str, lines: list[str]) -> str:
    divider = "=" * len(title)
    return "\n".join([title, divider, *lines])


def _format_value(value: float | str) -> str:
    if isinstance(value, str):
        return value
    return f"{value:.6g}"


def format_properties(properties: Sequence[DisplayedProperty]) -> list[str]:
    """Render display rows as blocks grouped by section."""

    blocks: list[str] = []
    for section, items in groupby(properties, key=lambda item: item.section):
        lines = [
            f"{item.notation:<7} {item.title:<22} {_format_value(item.value):>12} {item.unit}".rstrip()
            for item in items
        ]
        blocks.append(_format_block(section, lines))
    return blocks


def format_bounds(result: SaturationLookup, mode: str) -> list[str]:
    lines = [describe_bounds(result, mode)]
    if result.bounds.is_exact:
        return lines
    for notation, lower, upper, unit in bounds_rows(result, mode):
        lines.append(f"{notation:<7} {lower:>14.6f} {upper:>14.6f} {unit}")
    return lines


def render_saturation_view(
    query_label: str,
    result: SaturationLookup,
    mode: str,
    preferences: UnitPreferences | None = None,
    visible: Iterable[str] | None = None,
    show_bounds: bool = False,
) -> None:
    """Print a structured console view of a saturation lookup."""

    properties = present_saturation(result, mode, preferences, visible)
    print(_format_block(f"Saturated water at {query_label}", [describe_bounds(result, mode)]))
    for block in format_properties(properties):
        print()
        print(block)
    if show_bounds:
        print()
        print(_format_block("Interpolation Bounds", format_bounds(result, mode)))


def render_compressed_view(
    query_label: str,
    result: CompressedLookup,
    preferences: UnitPreferences | None = None,
    visible: Iterable[str] | None = None,
) -> None:
    """Print a structured console view of a compressed/superheated lookup."""

    point = result.data
    header = [f"Nearest grid point: {point.temperature:g}°C, {point.pressure:g} MPa"]
    if result.warning:
        header.append(result.warning)
    print(_format_block(f"Compressed liquid / superheated steam at {query_label}", header))
    for block in format_properties(present_compressed(result, preferences, visible)):
        print()
        print(block)


def export_lookup_json(result: SaturationLookup | CompressedLookup, output_path: Path) -> Path:
    """Persist a lookup result to disk as JSON."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(result.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
    return output_path


__all__ = [
    "export_lookup_json",
    "format_bounds",
    "format_properties",
    "render_compressed_view",
    "render_saturation_view",
]
