"""Maidenhead locator decoding.

A locator is read pair by pair, each pair narrowing the cell found by the
previous one:

    field            letters  20°   x 10°
    square           digits    2°   x  1°
    subsquare        letters   5'   x  2.5'
    extended square  digits   30"   x 15"

The decoded point is the center of the finest cell present.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass

from gridsquare.models import Coordinate

logger = logging.getLogger(__name__)

VALID_LENGTHS = (2, 4, 6, 8)


class InvalidFormat(ValueError):
    """Raised when a locator fails length or character-class validation."""

    def __init__(self, locator: str, reason: str):
        self.locator = locator
        self.reason = reason
        super().__init__(reason)


@dataclass(frozen=True)
class _Tier:
    name: str
    alphabet: str               # Accepted characters (before upper-casing)
    base: str                   # Character that encodes 0
    lon_step: float             # Cell width in degrees
    lat_step: float             # Cell height in degrees
    error: str


_TIERS = (
    _Tier("field", string.ascii_letters, "A", 20.0, 10.0,
          "First two characters must be letters"),
    _Tier("square", string.digits, "0", 2.0, 1.0,
          "Characters 3-4 must be digits"),
    _Tier("subsquare", string.ascii_letters, "A", 2.0 / 24.0, 1.0 / 24.0,
          "Characters 5-6 must be letters"),
    _Tier("extended square", string.digits, "0", 2.0 / 240.0, 1.0 / 240.0,
          "Characters 7-8 must be digits"),
)


def validate(locator: str) -> None:
    """Check length and character classes of a locator.

    Raises:
        InvalidFormat: Naming the first rule the locator breaks.
    """
    if len(locator) not in VALID_LENGTHS:
        raise InvalidFormat(locator, "Grid square must be 2, 4, 6, or 8 characters")

    for i, tier in enumerate(_TIERS[: len(locator) // 2]):
        pair = locator[2 * i: 2 * i + 2]
        if not all(c in tier.alphabet for c in pair):
            raise InvalidFormat(locator, tier.error)


def decode(locator: str) -> Coordinate:
    """Convert a Maidenhead locator to the center of its cell.

    Args:
        locator: 2, 4, 6 or 8 character locator, any case (e.g. "FN42hn").

    Returns:
        Coordinate of the cell center.

    Raises:
        InvalidFormat: If the locator is malformed.
    """
    validate(locator)
    grid = locator.upper()
    tiers = _TIERS[: len(grid) // 2]

    # South-west corner of the field
    lon = -180.0
    lat = -90.0
    for i, tier in enumerate(tiers):
        lon += (ord(grid[2 * i]) - ord(tier.base)) * tier.lon_step
        lat += (ord(grid[2 * i + 1]) - ord(tier.base)) * tier.lat_step

    finest = tiers[-1]
    coord = Coordinate(
        latitude=lat + finest.lat_step / 2,
        longitude=lon + finest.lon_step / 2,
    )
    logger.debug("Decoded %s (%s) -> %s", locator, finest.name, coord)
    return coord
