"""Distance unit registry."""

from __future__ import annotations

import enum
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0
EARTH_RADIUS_MI = 3959.0
EARTH_RADIUS_NM = 3440.0


class Unit(str, enum.Enum):
    """Distance unit; the value is the command-line token."""

    KILOMETERS = "km"
    MILES = "mi"
    NAUTICAL_MILES = "nm"


@dataclass(frozen=True)
class UnitSpec:
    """Output labels and Earth radius for a single distance unit."""

    unit: Unit
    label: str                  # short label for terse output: "km", "miles", "nm"
    verbose_label: str          # "km", "miles", "nautical miles"
    earth_radius: float


UNITS: dict[Unit, UnitSpec] = {
    Unit.KILOMETERS: UnitSpec(
        unit=Unit.KILOMETERS,
        label="km",
        verbose_label="km",
        earth_radius=EARTH_RADIUS_KM,
    ),
    Unit.MILES: UnitSpec(
        unit=Unit.MILES,
        label="miles",
        verbose_label="miles",
        earth_radius=EARTH_RADIUS_MI,
    ),
    Unit.NAUTICAL_MILES: UnitSpec(
        unit=Unit.NAUTICAL_MILES,
        label="nm",
        verbose_label="nautical miles",
        earth_radius=EARTH_RADIUS_NM,
    ),
}

# Order used when a result is shown in every unit
UNIT_ORDER = [Unit.KILOMETERS, Unit.MILES, Unit.NAUTICAL_MILES]


def earth_radius(unit: Unit) -> float:
    return UNITS[unit].earth_radius


def unit_label(unit: Unit) -> str:
    """Short label printed after a distance, e.g. ``5325.2 km``."""
    return UNITS[unit].label


def unit_from_token(token: str) -> Unit:
    """Look up a unit by its command-line token (``km``, ``mi``, ``nm``).

    Raises:
        ValueError: If the token is not a known unit.
    """
    try:
        return Unit(token)
    except ValueError:
        raise ValueError(f"Unknown unit '{token}'. Use km, mi, or nm.") from None
