"""Record types produced by the reference table store."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Literal

SATURATION_FIELDS: tuple[str, ...] = (
    "specific_volume",
    "internal_energy",
    "enthalpy",
    "entropy",
)


@dataclass(frozen=True)
class PropertyTriple:
    """Saturated liquid (f), saturated vapor (g) and vaporization (fg) values."""

    f: float
    g: float
    fg: float


@dataclass(frozen=True)
class SaturationRow:
    """One row of a saturation table, keyed by temperature or pressure."""

    temperature: float
    pressure: float
    specific_volume: PropertyTriple
    internal_energy: PropertyTriple
    enthalpy: PropertyTriple
    entropy: PropertyTriple
    kind: Literal["saturation"] = field(default="saturation", init=False)

    def coordinate(self, axis: str) -> float:
        """Return the value of *axis* (``"temperature"`` or ``"pressure"``)."""

        return float(getattr(self, axis))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CompressedPoint:
    """Single-phase state point of the compressed liquid / superheated grid."""

    pressure: float
    temperature: float
    specific_volume: float
    density: float
    internal_energy: float
    enthalpy: float
    entropy: float
    phase: str
    kind: Literal["compressed"] = field(default="compressed", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class InterpolationBounds:
    """Table rows bracketing a query; ``lower is upper`` for exact hits."""

    lower: SaturationRow
    upper: SaturationRow
    is_exact: bool


@dataclass(frozen=True)
class SaturationLookup:
    """Saturation lookup result with its interpolation provenance."""

    data: SaturationRow
    bounds: InterpolationBounds

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": self.data.to_dict(),
            "bounds": {
                "lower": self.bounds.lower.to_dict(),
                "upper": self.bounds.upper.to_dict(),
                "is_exact": self.bounds.is_exact,
            },
        }


@dataclass(frozen=True)
class CompressedLookup:
    """Nearest compressed/superheated grid point and an optional phase warning."""

    data: CompressedPoint
    warning: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return {"data": self.data.to_dict(), "warning": self.warning}


__all__ = [
    "SATURATION_FIELDS",
    "CompressedLookup",
    "CompressedPoint",
    "InterpolationBounds",
    "PropertyTriple",
    "SaturationLookup",
    "SaturationRow",
]
