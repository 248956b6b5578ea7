"""Settings loading and overrides."""

import json

import pytest

from steam_lookup.config import (
    CONFIG_ENV_VAR,
    DATA_DIR_ENV_VAR,
    PACKAGE_DATA_DIR,
    build_settings,
    deep_merge,
    load_defaults,
    load_settings,
)
from steam_lookup.utils.validation import InputRangeError, validate_saturation_temperature


def test_deep_merge_does_not_mutate_inputs():
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    override = {"a": {"b": 10}, "e": 5}

    merged = deep_merge(base, override)

    assert merged == {"a": {"b": 10, "c": 2}, "d": 3, "e": 5}
    assert base == {"a": {"b": 1, "c": 2}, "d": 3}


def test_packaged_defaults(monkeypatch):
    monkeypatch.delenv(DATA_DIR_ENV_VAR, raising=False)
    settings = build_settings(load_defaults())

    assert settings.data_dir == PACKAGE_DATA_DIR
    assert settings.by_temperature_path.exists()
    assert settings.by_pressure_path.exists()
    assert settings.compressed_path.exists()
    assert settings.domain("saturation_temperature_C") == (0.01, 373.95)
    assert settings.compressed_search.phase_check_neighbours == 4
    assert settings.units["pressure"] == "MPa"


def test_data_dir_env_var_wins(monkeypatch, tmp_path):
    monkeypatch.setenv(DATA_DIR_ENV_VAR, str(tmp_path))

    settings = build_settings(load_defaults())

    assert settings.by_pressure_path == tmp_path / "saturated_by_pressure.json"


def test_override_file_narrows_domain(fresh_engine, monkeypatch, tmp_path):
    override = tmp_path / "override.json"
    override.write_text(
        json.dumps({"domains": {"saturation_temperature_C": [1, 200]}, "compressed_search": {"pressure_window_MPa": 0.5}}),
        encoding="utf-8",
    )
    monkeypatch.setenv(CONFIG_ENV_VAR, str(override))
    load_settings.cache_clear()

    settings = load_settings()

    assert settings.domain("saturation_temperature_C") == (1.0, 200.0)
    assert settings.domain("saturation_pressure_MPa") == (0.000611657, 22.064)
    assert settings.compressed_search.pressure_window_MPa == 0.5
    assert settings.compressed_search.temperature_window_C == 0.1
    with pytest.raises(InputRangeError, match="between 1°C and 200°C"):
        validate_saturation_temperature(250.0)
