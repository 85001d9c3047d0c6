#!/usr/bin/env python3
"""
Circle fitting through three coordinates.

The circumcenter is the intersection of the perpendicular bisectors of
c1-c2 and c2-c3, computed in floating degree space. This is only meaningful
for local geometry.
"""

from typing import Optional, Tuple
import logging
import math

from .config import DEFAULT_CONFIG
from .coordinate import Coordinate, MAX_LATITUDE, MAX_LONGITUDE, to_floating
from .distance import haversine_distance

logger = logging.getLogger(__name__)

EPSILON = DEFAULT_CONFIG.epsilon
MAX_CIRCLE_REORDERINGS = DEFAULT_CONFIG.max_circle_reorderings


def _is_zero(value: float) -> bool:
    return abs(value) < EPSILON


def _intersect_bisectors(
    c1: Coordinate, c2: Coordinate, c3: Coordinate, slope_a: float, slope_b: float
) -> Optional[Coordinate]:
    c1_x, c1_y = to_floating(c1.lon), to_floating(c1.lat)
    c2_x, c2_y = to_floating(c2.lon), to_floating(c2.lat)
    c3_x, c3_y = to_floating(c3.lon), to_floating(c3.lat)

    lon = (
        slope_a * slope_b * (c1_y - c3_y)
        + slope_b * (c1_x + c2_x)
        - slope_a * (c2_x + c3_x)
    ) / (2.0 * (slope_b - slope_a))
    lat = (0.5 * (c1_x + c2_x) - lon) / slope_a + 0.5 * (c1_y + c2_y)

    if abs(lon) > MAX_LONGITUDE or abs(lat) > MAX_LATITUDE:
        logger.debug(f"Circle center ({lon}, {lat}) is out of range")
        return None
    return Coordinate.from_floating(lon, lat)


def circle_center(c1: Coordinate, c2: Coordinate, c3: Coordinate) -> Optional[Coordinate]:
    """
    Find the center of the circle through three coordinates.

    Points whose first or second segment is vertical, or whose first segment
    is flat, are reordered so both segments have a usable finite slope. Each
    reordering moves the offending segment out of the first slope position,
    and the number of reorderings is bounded.

    Args:
        c1: First coordinate
        c2: Second coordinate
        c3: Third coordinate

    Returns:
        Center coordinate, or None for duplicate or collinear points and
        for centers outside geodetic bounds
    """
    if c1 == c2 or c2 == c3 or c1 == c3:
        return None

    points: Tuple[Coordinate, Coordinate, Coordinate] = (c1, c2, c3)
    for _ in range(MAX_CIRCLE_REORDERINGS + 1):
        p1, p2, p3 = points
        # Segment a is p1->p2, segment b is p2->p3
        a_lat = to_floating(p2.lat - p1.lat)
        a_lon = to_floating(p2.lon - p1.lon)
        b_lat = to_floating(p3.lat - p2.lat)
        b_lon = to_floating(p3.lon - p2.lon)

        collinear_lon = _is_zero(a_lon) and _is_zero(b_lon)
        collinear_lat = _is_zero(a_lat) and _is_zero(b_lat)
        if collinear_lon or collinear_lat:
            logger.debug(f"Points {points} are collinear along an axis")
            return None

        if _is_zero(a_lon):
            # vertical first segment: p1.lon == p2.lon != p3.lon
            points = (p1, p3, p2)
            continue

        if _is_zero(b_lon):
            # vertical second segment: p2.lon == p3.lon != p1.lon
            points = (p2, p1, p3)
            continue

        slope_a = a_lat / a_lon
        slope_b = b_lat / b_lon

        if _is_zero(slope_a):
            # flat first segment, reversing keeps both longitude deltas non-zero
            points = (p3, p2, p1)
            continue

        if _is_zero(slope_a - slope_b):
            logger.debug(f"Points {points} lie on one line")
            return None

        return _intersect_bisectors(p1, p2, p3, slope_a, slope_b)

    logger.debug(
        f"No usable ordering of {(c1, c2, c3)} after {MAX_CIRCLE_REORDERINGS} reorderings"
    )
    return None


def circle_radius(c1: Coordinate, c2: Coordinate, c3: Coordinate) -> float:
    """
    Radius in meters of the circle through three coordinates.

    Returns:
        Haversine distance from c1 to the center, or math.inf when the
        points do not define a circle
    """
    center = circle_center(c1, c2, c3)
    if center is None:
        return math.inf
    return haversine_distance(c1, center)
