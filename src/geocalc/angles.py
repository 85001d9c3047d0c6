#!/usr/bin/env python3
"""
Angular and rotational geometry on fixed-point coordinates.
"""

import math

from .coordinate import Coordinate, to_floating
from .trigonometry import atan2_lookup
from .web_mercator import lat_to_y


def _half_toward_zero(value: int) -> int:
    half = abs(value) // 2
    return half if value >= 0 else -half


def centroid(lhs: Coordinate, rhs: Coordinate) -> Coordinate:
    """
    Midpoint of two coordinates.

    Each fixed-point axis is averaged with integer division that truncates
    toward zero.
    """
    return Coordinate(
        _half_toward_zero(lhs.lon + rhs.lon), _half_toward_zero(lhs.lat + rhs.lat)
    )


def bearing(first: Coordinate, second: Coordinate) -> float:
    """
    Calculate the initial compass bearing from one coordinate to another.

    Args:
        first: Starting coordinate
        second: Target coordinate

    Returns:
        Bearing in degrees clockwise from north, within [0, 360)
    """
    lon_delta = math.radians(to_floating(second.lon - first.lon))
    lat1 = math.radians(to_floating(first.lat))
    lat2 = math.radians(to_floating(second.lat))

    y = math.sin(lon_delta) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(
        lon_delta
    )
    result = math.degrees(math.atan2(y, x))

    # Step instead of modulo so exact boundaries stay put
    while result < 0.0:
        result += 360.0
    while result >= 360.0:
        result -= 360.0
    return result


def compute_angle(first: Coordinate, second: Coordinate, third: Coordinate) -> float:
    """
    Calculate the turn angle at second between first->second and second->third.

    The vectors are taken in the Mercator plane and the angle between them is
    measured with atan2_lookup. Repeated points count as going straight.

    Args:
        first: Coordinate before the turn
        second: Turn location
        third: Coordinate after the turn

    Returns:
        Angle in degrees within [0, 360); 180 means straight on
    """
    if first == second or second == third:
        return 180.0

    assert first.is_valid(), f"Invalid coordinate {first}"
    assert second.is_valid(), f"Invalid coordinate {second}"
    assert third.is_valid(), f"Invalid coordinate {third}"

    second_y = lat_to_y(to_floating(second.lat))
    v1x = to_floating(first.lon - second.lon)
    v1y = lat_to_y(to_floating(first.lat)) - second_y
    v2x = to_floating(third.lon - second.lon)
    v2y = lat_to_y(to_floating(third.lat)) - second_y

    angle = math.degrees(atan2_lookup(v2y, v2x) - atan2_lookup(v1y, v1x))
    while angle < 0.0:
        angle += 360.0
    # both lookups can land exactly on pi and -pi
    while angle >= 360.0:
        angle -= 360.0

    assert 0.0 <= angle < 360.0
    return angle


def rotate_ccw_around_zero(coordinate: Coordinate, angle_in_radians: float) -> Coordinate:
    """
    Rotate a coordinate counter-clockwise around (0, 0).

    The coordinate is treated as a vector in degree space:

        | cos a   -sin a | . | lon |
        | sin a    cos a |   | lat |

    Args:
        coordinate: Vector to rotate
        angle_in_radians: Rotation angle

    Returns:
        Rotated vector; not necessarily a valid geodetic position
    """
    cos_alpha = math.cos(angle_in_radians)
    sin_alpha = math.sin(angle_in_radians)

    lon = to_floating(coordinate.lon)
    lat = to_floating(coordinate.lat)

    return Coordinate.from_floating(
        cos_alpha * lon - sin_alpha * lat, sin_alpha * lon + cos_alpha * lat
    )


def difference(lhs: Coordinate, rhs: Coordinate) -> Coordinate:
    """Component-wise fixed-point lhs - rhs, used as a direction vector."""
    return Coordinate(lhs.lon - rhs.lon, lhs.lat - rhs.lat)
