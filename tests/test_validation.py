"""Domain checks and their user-facing messages."""

import math

import pytest

from steam_lookup.utils.validation import (
    InputRangeError,
    read_pressure,
    read_temperature,
    validate_compressed_state,
    validate_saturation_pressure,
    validate_saturation_temperature,
)


def test_saturation_temperature_bounds_are_inclusive():
    assert validate_saturation_temperature(0.01) == 0.01
    assert validate_saturation_temperature(373.95) == 373.95


@pytest.mark.parametrize("value", [0.0, 400.0, -5.0])
def test_saturation_temperature_out_of_range(value):
    with pytest.raises(InputRangeError, match="Temperature must be between 0.01°C and 373.95°C"):
        validate_saturation_temperature(value)


def test_saturation_pressure_out_of_range():
    with pytest.raises(InputRangeError) as excinfo:
        validate_saturation_pressure(30.0)

    assert str(excinfo.value) == "Pressure must be between 0.000611657 MPa and 22.064 MPa"


def test_not_a_number():
    with pytest.raises(InputRangeError, match="Please enter a valid temperature"):
        validate_saturation_temperature(math.nan)
    with pytest.raises(InputRangeError, match="Please enter a valid pressure"):
        validate_saturation_pressure(math.inf)


def test_compressed_state_checks_both_coordinates():
    assert validate_compressed_state(100.0, 1.0) == (100.0, 1.0)
    with pytest.raises(InputRangeError, match="Pressure must be between 0.01 MPa and 1000 MPa"):
        validate_compressed_state(100.0, 2000.0)
    with pytest.raises(InputRangeError, match="Temperature"):
        validate_compressed_state(500.0, 1.0)


def test_read_helpers_wrap_parse_errors():
    assert read_temperature("298.15 K") == pytest.approx(25.0)
    assert read_pressure("10 bar") == pytest.approx(1.0)
    with pytest.raises(InputRangeError, match="Please enter a valid temperature"):
        read_temperature("warm")
    with pytest.raises(InputRangeError, match="Please enter a valid pressure"):
        read_pressure("high")
