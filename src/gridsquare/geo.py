"""Spherical-Earth geodesy. Pure Python, no external deps."""

from __future__ import annotations

import math

from gridsquare.models import Coordinate
from gridsquare.units import EARTH_RADIUS_KM, Unit, earth_radius

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)
COMPASS_SECTOR = 360.0 / len(COMPASS_POINTS)


def haversine(
    lat1: float, lon1: float, lat2: float, lon2: float, radius: float = EARTH_RADIUS_KM,
) -> float:
    """Great-circle distance between two points on a sphere of ``radius``.

    Uses the Haversine formula. Inputs are decimal degrees; the result is in
    the same unit as ``radius``.
    """
    rlat1 = math.radians(lat1)
    rlat2 = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = math.sin(dlat / 2) ** 2 + math.cos(rlat1) * math.cos(rlat2) * math.sin(dlon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return radius * c


def great_circle_distance(a: Coordinate, b: Coordinate, unit: Unit = Unit.KILOMETERS) -> float:
    """Distance from ``a`` to ``b`` in ``unit``. Symmetric in its arguments."""
    return haversine(a.latitude, a.longitude, b.latitude, b.longitude, earth_radius(unit))


def normalize_angle(angle: float) -> float:
    """Map an angle in degrees into [0, 360)."""
    angle = math.fmod(angle, 360.0)
    if angle < 0:
        angle += 360.0
    # -1e-15 + 360.0 rounds to 360.0
    if angle >= 360.0:
        angle = 0.0
    return angle


def initial_bearing(a: Coordinate, b: Coordinate) -> float:
    """Initial great-circle bearing from ``a`` toward ``b`` in degrees [0, 360).

    0 is north, 90 east. Identical points give 0. The course back from ``b``
    is ``initial_bearing(b, a)``, which is generally not this value + 180.
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlon = math.radians(b.longitude - a.longitude)

    x = math.sin(dlon) * math.cos(lat2)
    y = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)

    return normalize_angle(math.degrees(math.atan2(x, y)))


def cardinal_direction(bearing: float) -> str:
    """16-point compass label for a bearing, e.g. 45 -> "NE".

    Each label covers a 22.5° sector centered on its point. Boundaries round
    up: 11.25 is "NNE".
    """
    index = math.floor(bearing / COMPASS_SECTOR + 0.5) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]
