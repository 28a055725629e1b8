"""Maidenhead grid locator decoding, great-circle distance and bearing."""

from gridsquare.calculator import bearing, distance, evaluate
from gridsquare.geo import cardinal_direction, great_circle_distance, initial_bearing
from gridsquare.locator import InvalidFormat, decode
from gridsquare.models import Coordinate, DistanceResult
from gridsquare.units import Unit

__all__ = [
    "Coordinate",
    "DistanceResult",
    "InvalidFormat",
    "Unit",
    "bearing",
    "cardinal_direction",
    "decode",
    "distance",
    "evaluate",
    "great_circle_distance",
    "initial_bearing",
]
