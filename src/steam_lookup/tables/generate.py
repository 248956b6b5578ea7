"""Rebuild the reference datasets from the IAPWS-IF97 formulation."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from iapws import IAPWS97
from loguru import logger

from ..utils.quantities import ensure_quantity

CRITICAL_TEMPERATURE_C = 373.946
CRITICAL_PRESSURE_MPA = 22.064
# Upper bound of the saturation temperature domain; the closing row is keyed here.
TABLE_LIMIT_TEMPERATURE_C = 373.95
TRIPLE_TEMPERATURE_C = 0.01
TRIPLE_PRESSURE_MPA = 0.000611657

SATURATION_HEADERS = ["vf", "vg", "uf", "ug", "ufg", "hf", "hg", "hfg", "sf", "sg", "sfg"]
COMPRESSED_HEADERS = ["P (MPa)", "T (°C)", "v", "density", "u", "h", "s", "phase"]

DEFAULT_TEMPERATURES: tuple[float, ...] = (TRIPLE_TEMPERATURE_C,) + tuple(float(t) for t in range(1, 374))
DEFAULT_PRESSURES: tuple[float, ...] = (
    TRIPLE_PRESSURE_MPA, 0.001, 0.002, 0.005, 0.01, 0.02, 0.05, 0.1, 0.101325, 0.2, 0.5,
    1.0, 2.0, 5.0, 10.0, 15.0, 20.0, 20.5, 21.0, 21.5, 22.0,
)
DEFAULT_GRID_PRESSURES: tuple[float, ...] = (0.01, 0.1, 0.5, 1.0, 5.0, 10.0, 20.0, 50.0, 100.0)
DEFAULT_GRID_TEMPERATURES: tuple[float, ...] = tuple(float(t) for t in range(25, 375, 25))

# Critical-point properties (IAPWS-95); v, u, h and s coincide for both phases.
CRITICAL_VALUES: tuple[float, ...] = (
    0.003106, 0.003106,
    2015.7, 2015.7, 0.0,
    2084.3, 2084.3, 0.0,
    4.4070, 4.4070, 0.0,
)

_PHASES: Mapping[str, str] = {
    "Liquid": "liquid",
    "Compressible liquid": "liquid",
    "Saturated liquid": "liquid",
    "Vapour": "vapor",
    "Saturated vapor": "vapor",
    "Supercritical fluid": "supercritical",
    "Gas": "vapor",
}


def _kelvin(temperature_c: float) -> float:
    return float(ensure_quantity(temperature_c, "degC").to("kelvin").magnitude)


def _saturation_values(liquid: Any, vapor: Any) -> list[float]:
    return [
        liquid.v, vapor.v,
        liquid.u, vapor.u, vapor.u - liquid.u,
        liquid.h, vapor.h, vapor.h - liquid.h,
        liquid.s, vapor.s, vapor.s - liquid.s,
    ]


def saturation_row_at_temperature(temperature_c: float) -> list[float]:
    kelvin = _kelvin(temperature_c)
    liquid = IAPWS97(T=kelvin, x=0.0)
    vapor = IAPWS97(T=kelvin, x=1.0)
    return [temperature_c, liquid.P, *_saturation_values(liquid, vapor)]


def saturation_row_at_pressure(pressure_mpa: float) -> list[float]:
    liquid = IAPWS97(P=pressure_mpa, x=0.0)
    vapor = IAPWS97(P=pressure_mpa, x=1.0)
    celsius = float(ensure_quantity(liquid.T, "kelvin").to("degC").magnitude)
    return [pressure_mpa, celsius, *_saturation_values(liquid, vapor)]


def compressed_row(pressure_mpa: float, temperature_c: float) -> list[Any]:
    state = IAPWS97(P=pressure_mpa, T=_kelvin(temperature_c))
    phase = _PHASES.get(str(state.phase), str(state.phase).lower())
    return [pressure_mpa, temperature_c, state.v, state.rho, state.u, state.h, state.s, phase]


def _document(title: str, headers: Sequence[str], rows: list[list[Any]]) -> dict[str, Any]:
    return {
        "title": title,
        "version": "generated",
        "author": "steam-lookup (IAPWS-IF97 via iapws)",
        "license": "MIT",
        "date": date.today().isoformat(),
        "headers": list(headers),
        "data": rows,
    }


def build_temperature_table(temperatures: Iterable[float] = DEFAULT_TEMPERATURES) -> dict[str, Any]:
    rows = [saturation_row_at_temperature(t) for t in temperatures if t < CRITICAL_TEMPERATURE_C]
    rows.append([TABLE_LIMIT_TEMPERATURE_C, CRITICAL_PRESSURE_MPA, *CRITICAL_VALUES])
    return _document("Saturated water - temperature table", ["T (°C)", "P (MPa)", *SATURATION_HEADERS], rows)


def build_pressure_table(pressures: Iterable[float] = DEFAULT_PRESSURES) -> dict[str, Any]:
    rows = [saturation_row_at_pressure(p) for p in pressures if p < CRITICAL_PRESSURE_MPA]
    rows.append([CRITICAL_PRESSURE_MPA, TABLE_LIMIT_TEMPERATURE_C, *CRITICAL_VALUES])
    return _document("Saturated water - pressure table", ["P (MPa)", "T (°C)", *SATURATION_HEADERS], rows)


def build_compressed_grid(
    pressures: Iterable[float] = DEFAULT_GRID_PRESSURES,
    temperatures: Iterable[float] = DEFAULT_GRID_TEMPERATURES,
) -> dict[str, Any]:
    grid_temperatures = tuple(temperatures)
    rows = [compressed_row(p, t) for p in pressures for t in grid_temperatures]
    return _document("Compressed liquid and superheated steam", COMPRESSED_HEADERS, rows)


def write_datasets(output_dir: Path) -> list[Path]:
    """Generate all three datasets into *output_dir* and return the written paths."""

    output_dir.mkdir(parents=True, exist_ok=True)
    documents = {
        "saturated_by_temperature.json": build_temperature_table(),
        "saturated_by_pressure.json": build_pressure_table(),
        "compressed_liquid_and_superheated_steam.json": build_compressed_grid(),
    }
    written = []
    for name, document in documents.items():
        path = output_dir / name
        path.write_text(json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8")
        logger.info("Wrote {} rows to {}", len(document["data"]), path)
        written.append(path)
    return written


__all__ = [
    "build_compressed_grid",
    "build_pressure_table",
    "build_temperature_table",
    "compressed_row",
    "saturation_row_at_pressure",
    "saturation_row_at_temperature",
    "write_datasets",
]
