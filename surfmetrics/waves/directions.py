# ABOUTME: Compass direction lookups and wind-vs-shore orientation
# ABOUTME: Unknown directions fall back to north rather than raising

import math
from typing import Literal, Optional

from surfmetrics.waves.units import round_half_up

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]
COMPASS_DEGREES = {point: index * 22.5 for index, point in enumerate(COMPASS_POINTS)}

ShoreRelation = Literal["offshore", "onshore", "cross_shore", "unknown"]

OFFSHORE_MIN_SEPARATION = 135.0
ONSHORE_MAX_SEPARATION = 45.0


def get_direction_degrees(direction: Optional[str]) -> float:
    """Degrees for a 16-point compass direction; anything unrecognised is 0 (north)"""
    if not isinstance(direction, str):
        return 0.0
    return COMPASS_DEGREES.get(direction, 0.0)


def degrees_to_compass(degrees: float) -> str:
    """Nearest 16-point compass direction for a bearing in degrees"""
    if not math.isfinite(degrees):
        return "N"
    index = int(round_half_up((degrees % 360) / 22.5)) % 16
    return COMPASS_POINTS[index]


def angular_separation(a: float, b: float) -> float:
    """Smallest angle between two bearings, 0-180"""
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


def shore_relation(wind_direction: Optional[str], shore_direction: Optional[str]) -> ShoreRelation:
    """
    Classify wind relative to the way a beach faces.

    Wind direction is where the wind comes FROM. A beach facing south has
    the ocean to its south, so wind from the south is onshore and wind from
    the north blows from the land out to sea.

    Args:
        wind_direction: Compass direction the wind blows from
        shore_direction: Compass direction the beach faces

    Returns:
        "offshore", "onshore", "cross_shore", or "unknown" if either
        direction isn't a compass point
    """
    if wind_direction not in COMPASS_DEGREES or shore_direction not in COMPASS_DEGREES:
        return "unknown"

    separation = angular_separation(
        COMPASS_DEGREES[wind_direction],
        COMPASS_DEGREES[shore_direction],
    )
    if separation >= OFFSHORE_MIN_SEPARATION:
        return "offshore"
    if separation <= ONSHORE_MAX_SEPARATION:
        return "onshore"
    return "cross_shore"
