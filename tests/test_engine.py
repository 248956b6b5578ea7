"""Engine API over the packaged datasets."""

import json

import pytest

import steam_lookup
from steam_lookup.config import CONFIG_ENV_VAR, DATA_DIR_ENV_VAR

from .conftest import TEMPERATURE_ROWS


class TestPackagedTables:
    def test_initialization_is_idempotent(self, fresh_engine):
        first = fresh_engine.initialize_temperature_table()

        assert fresh_engine.initialize_temperature_table() is first
        assert len(first) > 0
        assert len(fresh_engine.initialize_pressure_table()) > 0
        assert len(fresh_engine.initialize_compressed_table()) > 0

    def test_exact_temperature_row(self, fresh_engine):
        result = fresh_engine.lookup_by_temperature(100)

        assert result.bounds.is_exact
        assert result.data.pressure == pytest.approx(0.10142)

    def test_interpolation_between_coarse_rows(self, fresh_engine):
        result = fresh_engine.lookup_by_temperature(102.5)

        assert (result.bounds.lower.temperature, result.bounds.upper.temperature) == (100, 110)
        assert 0.10142 < result.data.pressure < 0.14338

    def test_exact_pressure_row(self, fresh_engine):
        result = fresh_engine.lookup_by_pressure(0.1)

        assert result.bounds.is_exact
        assert result.data.temperature == pytest.approx(99.61)

    def test_critical_point_is_reachable(self, fresh_engine):
        assert fresh_engine.lookup_by_temperature(373.95).bounds.is_exact
        assert fresh_engine.lookup_by_pressure(22.064).bounds.is_exact

    def test_out_of_range_queries_return_none(self, fresh_engine):
        assert fresh_engine.lookup_by_temperature(500) is None
        assert fresh_engine.lookup_by_pressure(-1) is None

    def test_compressed_near_phase_boundary(self, fresh_engine):
        result = fresh_engine.lookup_compressed(100, 1)

        assert result.data.phase == "liquid"
        assert (result.data.temperature, result.data.pressure) == (100.0, 1.0)
        assert result.data.enthalpy == pytest.approx(419.76)
        assert result.warning

    def test_compressed_deep_in_liquid_region(self, fresh_engine):
        result = fresh_engine.lookup_compressed(200, 50)

        assert result.data.phase == "liquid"
        assert result.warning is None

    def test_convert_unit(self, fresh_engine):
        assert fresh_engine.convert_unit(1.0, "MPa", "bar") == pytest.approx(10.0)
        assert fresh_engine.convert_unit(7.0, "MPa", "kcal/kg") == 7.0

    def test_package_exports_engine_api(self):
        assert steam_lookup.lookup_by_temperature is not None
        assert isinstance(steam_lookup.get_version(), str)


class TestDataDirectoryOverride:
    def test_tables_come_from_override_directory(self, fresh_engine, tmp_path, monkeypatch):
        document = {"title": "small", "data": TEMPERATURE_ROWS}
        (tmp_path / "saturated_by_temperature.json").write_text(json.dumps(document), encoding="utf-8")
        monkeypatch.setenv(DATA_DIR_ENV_VAR, str(tmp_path))
        fresh_engine.reset_tables()

        result = fresh_engine.lookup_by_temperature(25)

        assert result.data.pressure == pytest.approx(0.003174, abs=1e-6)
        assert (result.bounds.lower.temperature, result.bounds.upper.temperature) == (24, 26)

    def test_missing_datasets_load_as_empty_tables(self, fresh_engine, tmp_path, monkeypatch):
        monkeypatch.setenv(DATA_DIR_ENV_VAR, str(tmp_path))
        fresh_engine.reset_tables()

        assert len(fresh_engine.initialize_pressure_table()) == 0
        assert fresh_engine.lookup_by_pressure(0.1) is None
        assert fresh_engine.lookup_compressed(100, 1) is None

    def test_config_file_renames_datasets(self, fresh_engine, tmp_path, monkeypatch):
        (tmp_path / "custom_t.json").write_text(json.dumps({"data": TEMPERATURE_ROWS}), encoding="utf-8")
        override = tmp_path / "override.json"
        override.write_text(
            json.dumps({"datasets": {"data_dir": str(tmp_path), "by_temperature": "custom_t.json"}}),
            encoding="utf-8",
        )
        monkeypatch.setenv(CONFIG_ENV_VAR, str(override))
        fresh_engine.reset_tables()

        assert len(fresh_engine.initialize_temperature_table()) == len(TEMPERATURE_ROWS)
