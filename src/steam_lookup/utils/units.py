"""Factor-based conversion between the display unit variants of each quantity."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Final, Tuple, Union

from loguru import logger

from .warnings import format_warning

UnitPair = Tuple[str, str]

NATIVE_UNITS: Final[dict[str, str]] = {
    "temperature": "C",
    "pressure": "MPa",
    "specific_volume": "m³/kg",
    "energy": "kJ/kg",
    "entropy": "kJ/(kg·K)",
}

AVAILABLE_UNITS: Final[dict[str, tuple[str, ...]]] = {
    "temperature": ("C",),
    "pressure": ("MPa", "bar", "kPa", "psi"),
    "specific_volume": ("m³/kg", "cm³/g", "ft³/lb"),
    "energy": ("kJ/kg", "kcal/kg", "BTU/lb"),
    "entropy": ("kJ/(kg·K)", "kcal/(kg·K)", "BTU/(lb·°F)"),
}

_ALIASES: Dict[str, str] = {
    "°C": "C",
    "degC": "C",
    "m3/kg": "m³/kg",
    "cm3/g": "cm³/g",
    "ft3/lb": "ft³/lb",
    "Btu/lb": "BTU/lb",
    "kJ/(kg*K)": "kJ/(kg·K)",
    "kJ/kgK": "kJ/(kg·K)",
    "kcal/(kg*K)": "kcal/(kg·K)",
    "BTU/(lb*F)": "BTU/(lb·°F)",
    "Btu/(lb·°F)": "BTU/(lb·°F)",
}

UNIT_CONVERSIONS: Final[dict[str, dict[UnitPair, float]]] = {
    "pressure": {
        ("MPa", "bar"): 10.0,
        ("MPa", "kPa"): 1000.0,
        ("MPa", "psi"): 145.038,
        ("bar", "MPa"): 0.1,
        ("bar", "kPa"): 100.0,
        ("bar", "psi"): 14.5038,
        ("kPa", "MPa"): 0.001,
        ("kPa", "bar"): 0.01,
        ("kPa", "psi"): 0.145038,
        ("psi", "MPa"): 0.00689476,
        ("psi", "bar"): 0.0689476,
        ("psi", "kPa"): 6.89476,
    },
    "specific_volume": {
        ("m³/kg", "cm³/g"): 1000.0,
        ("m³/kg", "ft³/lb"): 16.0185,
        ("cm³/g", "m³/kg"): 0.001,
        ("cm³/g", "ft³/lb"): 0.0160185,
        ("ft³/lb", "m³/kg"): 0.062428,
        ("ft³/lb", "cm³/g"): 62.428,
    },
    "energy": {
        ("kJ/kg", "kcal/kg"): 0.239006,
        ("kJ/kg", "BTU/lb"): 0.429923,
        ("kcal/kg", "kJ/kg"): 4.184,
        ("kcal/kg", "BTU/lb"): 1.8,
        ("BTU/lb", "kJ/kg"): 2.326,
        ("BTU/lb", "kcal/kg"): 1.0 / 1.8,
    },
    "entropy": {
        ("kJ/(kg·K)", "kcal/(kg·K)"): 0.239006,
        ("kJ/(kg·K)", "BTU/(lb·°F)"): 0.239006,
        ("kcal/(kg·K)", "kJ/(kg·K)"): 4.184,
        ("kcal/(kg·K)", "BTU/(lb·°F)"): 1.0,
        ("BTU/(lb·°F)", "kJ/(kg·K)"): 4.184,
        ("BTU/(lb·°F)", "kcal/(kg·K)"): 1.0,
    },
}


def canonical_unit(unit: str) -> str:
    normalized = unit.strip()
    return _ALIASES.get(normalized, normalized)


def unit_category(unit: str) -> str | None:
    """Return the quantity category *unit* belongs to, if any."""

    target = canonical_unit(unit)
    for category, units in AVAILABLE_UNITS.items():
        if target in units:
            return category
    return None


def conversion_factor(from_unit: str, to_unit: str) -> float | None:
    key = (canonical_unit(from_unit), canonical_unit(to_unit))
    for conversions in UNIT_CONVERSIONS.values():
        if key in conversions:
            return conversions[key]
    return None


@dataclass(frozen=True)
class Converted:
    """Successful conversion."""

    value: float
    unit: str


@dataclass(frozen=True)
class UnsupportedConversion:
    """No direct factor exists for the requested unit pair."""

    value: float
    from_unit: str
    to_unit: str

    @property
    def message(self) -> str:
        return f"No conversion found for {self.from_unit} to {self.to_unit}"


ConversionResult = Union[Converted, UnsupportedConversion]


def try_convert(value: float, from_unit: str, to_unit: str) -> ConversionResult:
    """Convert *value* and report unsupported pairs as an explicit result."""

    source = canonical_unit(from_unit)
    target = canonical_unit(to_unit)
    if source == target:
        return Converted(value, target)
    factor = conversion_factor(source, target)
    if factor is None:
        return UnsupportedConversion(value, from_unit, to_unit)
    return Converted(value * factor, target)


def convert_value(value: float, from_unit: str, to_unit: str) -> float:
    """Convert *value*; an unsupported pair is logged and returns *value* unchanged."""

    result = try_convert(value, from_unit, to_unit)
    if isinstance(result, UnsupportedConversion):
        logger.error(format_warning("UNSUPPORTED_CONVERSION", result.message))
        return value
    return result.value


@dataclass(frozen=True)
class UnitPreferences:
    """Display unit chosen per quantity category; temperature is always °C."""

    pressure: str = "MPa"
    specific_volume: str = "m³/kg"
    energy: str = "kJ/kg"
    entropy: str = "kJ/(kg·K)"
    temperature: str = "C"

    @classmethod
    def from_mapping(cls, values: dict[str, str]) -> "UnitPreferences":
        """Build preferences from a mapping, keeping only units of the matching category."""

        known = {item.name for item in fields(cls)} - {"temperature"}
        chosen: dict[str, str] = {}
        for key, value in values.items():
            if key not in known:
                continue
            unit = canonical_unit(value)
            if unit_category(unit) != key:
                detail = f"'{value}' is not a {key} unit, using {NATIVE_UNITS[key]}"
                logger.warning(format_warning("UNSUPPORTED_CONVERSION", detail))
                continue
            chosen[key] = unit
        return cls(**chosen)

    def unit_for(self, category: str) -> str:
        return getattr(self, category)


__all__ = [
    "AVAILABLE_UNITS",
    "NATIVE_UNITS",
    "UNIT_CONVERSIONS",
    "ConversionResult",
    "Converted",
    "UnitPreferences",
    "UnsupportedConversion",
    "canonical_unit",
    "conversion_factor",
    "convert_value",
    "try_convert",
    "unit_category",
]
