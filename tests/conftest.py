"""Shared fixtures: small in-memory tables with known values."""

import pytest

from steam_lookup import engine
from steam_lookup.tables.store import CompressedGrid, SaturationTable

# temperature, pressure, vf, vg, uf, ug, ufg, hf, hg, hfg, sf, sg, sfg
TEMPERATURE_ROWS = [
    [26, 0.003363, 0.001003, 40.994, 108.99, 2410.5, 2301.5, 108.99, 2548.3, 2439.3, 0.3810, 8.5356, 8.1546],
    [20, 0.0023392, 0.001002, 57.762, 83.913, 2402.3, 2318.4, 83.915, 2537.4, 2453.5, 0.2965, 8.6661, 8.3696],
    [24, 0.002985, 0.001003, 45.884, 100.63, 2407.8, 2307.2, 100.63, 2544.7, 2444.0, 0.3530, 8.5777, 8.2247],
    [21, 0.0024881, 0.001002, 54.514, 88.096, 2403.7, 2315.6, 88.098, 2539.2, 2451.1, 0.3107, 8.6437, 8.3330],
]

# pressure, temperature, vf, vg, uf, ug, ufg, hf, hg, hfg, sf, sg, sfg
PRESSURE_ROWS = [
    [0.1, 99.61, 0.001043, 1.6941, 417.40, 2505.6, 2088.2, 417.51, 2675.0, 2257.5, 1.3028, 7.3589, 6.0562],
    [0.2, 120.21, 0.001061, 0.88578, 504.50, 2529.1, 2024.6, 504.71, 2706.3, 2201.6, 1.5302, 7.1270, 5.5968],
    [0.5, 151.83, 0.001093, 0.37483, 639.54, 2560.7, 1921.2, 640.09, 2748.1, 2108.0, 1.8604, 6.8207, 4.9603],
    [1.0, 179.88, 0.001127, 0.19436, 761.39, 2582.8, 1821.4, 762.51, 2777.1, 2014.6, 2.1381, 6.5850, 4.4470],
]

# pressure, temperature, v, density, u, h, s, phase
COMPRESSED_ROWS = [
    [0.1, 99.6, 0.001043, 958.8, 417.35, 417.45, 1.3026, "liquid"],
    [0.1, 100.0, 1.6959, 0.5897, 2506.2, 2675.8, 7.3611, "vapor"],
    [0.1, 150.0, 1.9367, 0.5163, 2582.9, 2776.6, 7.6148, "vapor"],
    [1.0, 99.6, 0.001043, 958.8, 417.20, 418.24, 1.3022, "liquid"],
    [1.0, 100.0, 0.001043, 958.8, 418.70, 419.76, 1.3062, "liquid"],
    [1.0, 150.0, 0.001090, 917.4, 631.40, 632.50, 1.8410, "liquid"],
    [10.0, 99.6, 0.001039, 962.5, 415.50, 425.90, 1.2978, "liquid"],
    [10.0, 100.0, 0.001039, 962.5, 416.90, 427.30, 1.3018, "liquid"],
    [10.0, 150.0, 0.001085, 921.7, 628.60, 639.40, 1.8300, "liquid"],
]


@pytest.fixture
def temperature_table():
    return SaturationTable.from_rows("temperature", TEMPERATURE_ROWS)


@pytest.fixture
def pressure_table():
    return SaturationTable.from_rows("pressure", PRESSURE_ROWS)


@pytest.fixture
def compressed_grid():
    return CompressedGrid.from_rows(COMPRESSED_ROWS)


@pytest.fixture
def fresh_engine():
    """Reload tables and settings before and after a test that changes them."""
    engine.reset_tables()
    yield engine
    engine.reset_tables()
