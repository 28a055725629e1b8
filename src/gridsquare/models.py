"""Value types passed between the locator decoder and the geodesy functions."""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict

from gridsquare.units import Unit


@dataclass(frozen=True)
class Coordinate:
    """Point on the sphere in decimal degrees. Range is not enforced."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class DistanceResult:
    """Distance and bearings between two decoded locators."""

    distance: float             # In `unit`
    bearing: float              # Initial bearing from -> to, [0, 360)
    back_bearing: float         # Initial bearing to -> from, [0, 360)
    from_coordinate: Coordinate
    to_coordinate: Coordinate
    unit: Unit = Unit.KILOMETERS

    def to_json(self) -> str:
        d = asdict(self)
        d["unit"] = self.unit.value
        return json.dumps(d)
