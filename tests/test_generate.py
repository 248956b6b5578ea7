"""Dataset generation from IAPWS-IF97 (needs the ``tables`` extra)."""

import json

import pytest

pytest.importorskip("iapws")

from steam_lookup.interpolation.saturation import PressureInterpolator, TemperatureInterpolator  # noqa: E402
from steam_lookup.tables.generate import (  # noqa: E402
    build_compressed_grid,
    build_pressure_table,
    build_temperature_table,
    compressed_row,
    saturation_row_at_pressure,
    saturation_row_at_temperature,
    write_datasets,
)
from steam_lookup.tables.store import CompressedGrid, SaturationTable  # noqa: E402


def test_saturation_row_at_boiling_point():
    row = saturation_row_at_temperature(100.0)

    assert len(row) == 13
    assert row[1] == pytest.approx(0.101418, rel=1e-3)
    assert row[7] == pytest.approx(419.1, rel=1e-3)


def test_saturation_row_at_pressure():
    row = saturation_row_at_pressure(0.1)

    assert row[0] == 0.1
    assert row[1] == pytest.approx(99.61, abs=0.05)


def test_compressed_row_phase():
    assert compressed_row(1.0, 100.0)[-1] == "liquid"
    assert compressed_row(0.1, 150.0)[-1] == "vapor"


def test_generated_documents_load_into_tables():
    table = SaturationTable.from_rows("temperature", build_temperature_table([20.0, 30.0])["data"])
    grid = CompressedGrid.from_rows(build_compressed_grid([1.0], [100.0, 200.0])["data"])

    assert table.breakpoints == (20.0, 30.0, 373.95)
    assert len(grid) == 2


def test_write_datasets(tmp_path):
    paths = write_datasets(tmp_path / "generated")

    assert [path.name for path in paths] == [
        "saturated_by_temperature.json",
        "saturated_by_pressure.json",
        "compressed_liquid_and_superheated_steam.json",
    ]
    document = json.loads(paths[0].read_text(encoding="utf-8"))
    assert document["headers"][0] == "T (°C)"
    assert len(document["data"]) == 375


def test_tables_close_at_the_validated_upper_bounds():
    temperatures = build_temperature_table([372.0, 373.0])["data"]
    pressures = build_pressure_table([20.0, 21.0, 22.0])["data"]

    assert temperatures[-1][:2] == [373.95, 22.064]
    assert pressures[-1][:2] == [22.064, 373.95]


def test_written_tables_cover_the_near_critical_domain(tmp_path):
    paths = write_datasets(tmp_path)
    by_temperature = TemperatureInterpolator(SaturationTable.from_dataset(paths[0], axis="temperature"))
    by_pressure = PressureInterpolator(SaturationTable.from_dataset(paths[1], axis="pressure"))

    near_critical = by_temperature.lookup(373.5)
    assert near_critical is not None
    assert 21.0 < near_critical.data.pressure < 22.064
    assert by_temperature.lookup(373.95).bounds.is_exact

    high_pressure = by_pressure.lookup(21.0)
    assert high_pressure is not None
    assert 360.0 < high_pressure.data.temperature < 373.95
    assert by_pressure.lookup(21.7) is not None
    assert by_pressure.lookup(22.064).bounds.is_exact
