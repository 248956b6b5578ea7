"""Excel report generation."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from ..tables.records import CompressedLookup, SaturationLookup
from ..utils.units import UnitPreferences
from .presentation import (
    DisplayedProperty,
    bounds_rows,
    describe_bounds,
    present_compressed,
    present_saturation,
)


def _write_properties_sheet(
    workbook: Workbook, properties: Sequence[DisplayedProperty], notes: Sequence[str]
) -> None:
    sheet = workbook.active
    sheet.title = "Properties"
    sheet.append(["Section", "Property", "Notation", "Value", "Unit", "Description"])
    for item in properties:
        sheet.append([item.section, item.title, item.notation, item.value, item.unit, item.description])

    if notes:
        sheet.append([])
        for note in notes:
            sheet.append(["Note", note])

    widths = (18, 22, 10, 16, 14, 48)
    for column, width in enumerate(widths, start=1):
        sheet.column_dimensions[get_column_letter(column)].width = width


def _write_bounds_sheet(workbook: Workbook, result: SaturationLookup, mode: str) -> None:
    sheet = workbook.create_sheet("Interpolation")
    sheet.append(["Provenance", describe_bounds(result, mode)])
    sheet.append(["Exact", result.bounds.is_exact])
    sheet.append([])
    sheet.append(["Property", "Lower bound", "Upper bound", "Unit"])
    for notation, lower, upper, unit in bounds_rows(result, mode):
        sheet.append([notation, lower, upper, unit])
    for column in range(1, 5):
        sheet.column_dimensions[get_column_letter(column)].width = 20


def export_saturation_to_excel(
    result: SaturationLookup,
    mode: str,
    output_path: Path,
    preferences: UnitPreferences | None = None,
    visible: Iterable[str] | None = None,
) -> Path:
    """Create a workbook with the displayed properties and the interpolation bounds."""
    workbook = Workbook()
    _write_properties_sheet(workbook, present_saturation(result, mode, preferences, visible), [])
    _write_bounds_sheet(workbook, result, mode)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output_path)
    return output_path


def export_compressed_to_excel(
    result: CompressedLookup,
    output_path: Path,
    preferences: UnitPreferences | None = None,
    visible: Iterable[str] | None = None,
) -> Path:
    """Create a workbook with the nearest grid point and any phase warning."""
    workbook = Workbook()
    point = result.data
    notes = [f"Nearest grid point: {point.temperature:g}°C, {point.pressure:g} MPa"]
    if result.warning:
        notes.append(result.warning)
    _write_properties_sheet(workbook, present_compressed(result, preferences, visible), notes)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output_path)
    return output_path


__all__ = ["export_compressed_to_excel", "export_saturation_to_excel"]
