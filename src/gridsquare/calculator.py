"""Distance and bearing between two Maidenhead locators."""

from __future__ import annotations

import logging

from gridsquare.geo import great_circle_distance, initial_bearing
from gridsquare.locator import decode
from gridsquare.models import DistanceResult
from gridsquare.units import Unit

logger = logging.getLogger(__name__)


def distance(grid1: str, grid2: str, unit: Unit = Unit.KILOMETERS) -> float:
    """Great-circle distance between the centers of two locators.

    Raises:
        InvalidFormat: If either locator is malformed.
    """
    return great_circle_distance(decode(grid1), decode(grid2), unit)


def bearing(grid1: str, grid2: str) -> float:
    """Initial bearing from ``grid1`` toward ``grid2`` in degrees [0, 360)."""
    return initial_bearing(decode(grid1), decode(grid2))


def evaluate(grid1: str, grid2: str, unit: Unit = Unit.KILOMETERS) -> DistanceResult:
    """Decode both locators and compute distance, bearing and back bearing.

    The back bearing is the initial bearing of the return path, computed from
    ``grid2`` toward ``grid1``.

    Raises:
        InvalidFormat: If either locator is malformed.
    """
    coord1 = decode(grid1)
    coord2 = decode(grid2)

    result = DistanceResult(
        distance=great_circle_distance(coord1, coord2, unit),
        bearing=initial_bearing(coord1, coord2),
        back_bearing=initial_bearing(coord2, coord1),
        from_coordinate=coord1,
        to_coordinate=coord2,
        unit=unit,
    )
    logger.debug(
        "%s -> %s: %.3f %s, bearing %.1f, back %.1f",
        grid1, grid2, result.distance, unit.value, result.bearing, result.back_bearing,
    )
    return result
