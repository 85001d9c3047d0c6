#!/usr/bin/env python3
"""
Distance calculations between fixed-point coordinates.

Three metrics with different cost/accuracy trade-offs are provided:
squared_euclidean_distance for cheap ranking, great_circle_distance
(equirectangular) for many short evaluations, and haversine_distance
where accuracy matters.
"""

from typing import Tuple
import math

from . import web_mercator
from .config import DEFAULT_CONFIG
from .coordinate import Coordinate, INVALID_FIXED, to_floating
from .shapely_utils import project_point_on_segment

EARTH_RADIUS = DEFAULT_CONFIG.earth_radius


def _assert_set(coordinate: Coordinate) -> None:
    assert coordinate.lon != INVALID_FIXED, f"Invalid longitude in {coordinate}"
    assert coordinate.lat != INVALID_FIXED, f"Invalid latitude in {coordinate}"


def squared_euclidean_distance(lhs: Coordinate, rhs: Coordinate) -> int:
    """
    Squared distance of the raw fixed-point components.

    Does not project the coordinates, so the result is only useful for
    ordering candidates.
    """
    dx = lhs.lon - rhs.lon
    dy = lhs.lat - rhs.lat
    return dx * dx + dy * dy


def haversine_distance(coord1: Coordinate, coord2: Coordinate) -> float:
    """
    Calculate Haversine distance between two coordinates.

    Uses Haversine formula for great circle distance along the Earth's surface.

    Args:
        coord1: First coordinate
        coord2: Second coordinate

    Returns:
        Distance in meters
    """
    _assert_set(coord1)
    _assert_set(coord2)

    lat1 = math.radians(to_floating(coord1.lat))
    lon1 = math.radians(to_floating(coord1.lon))
    lat2 = math.radians(to_floating(coord2.lat))
    lon2 = math.radians(to_floating(coord2.lon))

    dlon = lon1 - lon2
    dlat = lat1 - lat2

    a = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    )
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return EARTH_RADIUS * c


def great_circle_distance(coord1: Coordinate, coord2: Coordinate) -> float:
    """
    Calculate the equirectangular approximation of the distance between two
    coordinates.

    The longitude delta is scaled by the cosine of the mean latitude. This is
    cheaper than haversine_distance and accurate over short spans.

    Args:
        coord1: First coordinate
        coord2: Second coordinate

    Returns:
        Distance in meters
    """
    _assert_set(coord1)
    _assert_set(coord2)

    lat1 = math.radians(to_floating(coord1.lat))
    lon1 = math.radians(to_floating(coord1.lon))
    lat2 = math.radians(to_floating(coord2.lat))
    lon2 = math.radians(to_floating(coord2.lon))

    x_value = (lon2 - lon1) * math.cos((lat1 + lat2) / 2.0)
    y_value = lat2 - lat1
    return math.hypot(x_value, y_value) * EARTH_RADIUS


def nearest_on_segment(
    segment_source: Coordinate, segment_target: Coordinate, query: Coordinate
) -> Tuple[float, Coordinate]:
    """
    Find the nearest point on a segment using Web Mercator projected geometry.

    Returns:
        Tuple of (ratio, nearest_location), ratio in [0, 1]
    """
    ratio, projected_nearest = project_point_on_segment(
        web_mercator.from_wgs84(segment_source),
        web_mercator.from_wgs84(segment_target),
        web_mercator.from_wgs84(query),
    )
    return ratio, web_mercator.to_wgs84(projected_nearest)


def perpendicular_distance_with_location(
    segment_source: Coordinate, segment_target: Coordinate, query: Coordinate
) -> Tuple[float, float, Coordinate]:
    """
    Calculate the distance from a point to a segment and find the closest point
    on the segment.

    The closest point is found in the projected plane, the distance to it is
    then measured with great_circle_distance.

    Args:
        segment_source: Start of the segment
        segment_target: End of the segment
        query: Point to measure distance from

    Returns:
        Tuple of (distance, ratio, nearest_location) where:
        - distance: Distance from query to nearest_location in meters
        - ratio: Position along the segment (0=source, 1=target)
        - nearest_location: Closest point on the segment
    """
    assert query.is_valid(), f"Invalid query location {query}"

    ratio, nearest_location = nearest_on_segment(segment_source, segment_target, query)
    approximate_distance = great_circle_distance(query, nearest_location)
    assert approximate_distance >= 0.0
    return approximate_distance, ratio, nearest_location


def perpendicular_distance(
    segment_source: Coordinate, segment_target: Coordinate, query: Coordinate
) -> float:
    """Distance in meters from query to the closest point on the segment."""
    distance, _, _ = perpendicular_distance_with_location(
        segment_source, segment_target, query
    )
    return distance
