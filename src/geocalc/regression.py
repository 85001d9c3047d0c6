#!/usr/bin/env python3
"""
Regression and shape analysis over polylines of coordinates.
"""

from typing import List, Sequence, Tuple
import logging
import math
import sys

from .angles import bearing, difference, rotate_ccw_around_zero
from .config import DEFAULT_CONFIG
from .coordinate import Coordinate, to_fixed, to_floating
from .distance import haversine_distance, nearest_on_segment

logger = logging.getLogger(__name__)

EPSILON = DEFAULT_CONFIG.epsilon
REGRESSION_OFFSET = DEFAULT_CONFIG.regression_offset
PARALLEL_SLOPE_THRESHOLD = DEFAULT_CONFIG.parallel_slope_threshold

# Returned when there is no segment to measure against
NO_MEASUREMENT = sys.float_info.max

NULL_ISLAND = Coordinate(0, 0)


def interpolate_linear(factor: float, from_: Coordinate, to: Coordinate) -> Coordinate:
    """
    Linearly interpolate between two coordinates.

    Args:
        factor: Position between the coordinates, 0 yields from_ and 1 yields to
        from_: Start coordinate
        to: End coordinate

    Returns:
        Interpolated coordinate, truncated to fixed-point
    """
    assert 0.0 <= factor <= 1.0, f"Interpolation factor {factor} outside [0, 1]"

    return Coordinate(
        int(from_.lon + factor * (to.lon - from_.lon)),
        int(from_.lat + factor * (to.lat - from_.lat)),
    )


def signed_area(first: Coordinate, second: Coordinate, third: Coordinate) -> float:
    """Signed area of a triangle in square degrees, positive for CCW order."""
    lon_1, lat_1 = to_floating(first.lon), to_floating(first.lat)
    lon_2, lat_2 = to_floating(second.lon), to_floating(second.lat)
    lon_3, lat_3 = to_floating(third.lon), to_floating(third.lat)
    return 0.5 * (
        -lon_2 * lat_1
        + lon_3 * lat_1
        + lon_1 * lat_2
        - lon_3 * lat_2
        - lon_1 * lat_3
        + lon_2 * lat_3
    )


def is_ccw(first: Coordinate, second: Coordinate, third: Coordinate) -> bool:
    return signed_area(first, second, third) > 0


def least_square_regression(
    coordinates: Sequence[Coordinate],
) -> Tuple[Coordinate, Coordinate]:
    """
    Fit a line through coordinates with ordinary least squares (lat over lon).

    Args:
        coordinates: At least two coordinates

    Returns:
        Two coordinates on the fitted line, just beyond the smallest and
        largest input longitude. If the longitudes have no spread the first
        and last input coordinates are returned unchanged.
    """
    assert len(coordinates) >= 2, "Regression requires at least two coordinates"

    count = len(coordinates)
    sum_lon = sum_lat = sum_lon_lat = sum_lon_lon = 0.0
    min_lon = max_lon = to_floating(coordinates[0].lon)
    for coord in coordinates:
        lon = to_floating(coord.lon)
        lat = to_floating(coord.lat)
        min_lon = min(min_lon, lon)
        max_lon = max(max_lon, lon)
        sum_lon += lon
        sum_lon_lon += lon * lon
        sum_lat += lat
        sum_lon_lat += lon * lat

    dividend = count * sum_lon_lat - sum_lon * sum_lat
    divisor = count * sum_lon_lon - sum_lon * sum_lon
    if abs(divisor) < EPSILON:
        logger.debug(
            f"Regression over {count} coordinates is vertical, using endpoints"
        )
        return coordinates[0], coordinates[-1]

    slope = dividend / divisor
    intercept = (sum_lat - slope * sum_lon) / count

    def lat_at(lon: float) -> float:
        return intercept + slope * lon

    first_lon = min_lon - REGRESSION_OFFSET
    last_lon = max_lon + REGRESSION_OFFSET
    return (
        Coordinate(to_fixed(first_lon), to_fixed(lat_at(first_lon))),
        Coordinate(to_fixed(last_lon), to_fixed(lat_at(last_lon))),
    )


def find_closest_distance_to_segment(
    coordinate: Coordinate, segment_begin: Coordinate, segment_end: Coordinate
) -> float:
    """Haversine distance in meters from coordinate to the nearest point on a segment."""
    _, nearest = nearest_on_segment(segment_begin, segment_end, coordinate)
    return haversine_distance(coordinate, nearest)


def find_closest_distance(
    coordinate: Coordinate, coordinates: Sequence[Coordinate]
) -> float:
    """
    Find the closest distance between a coordinate and a polyline.

    Args:
        coordinate: Query coordinate
        coordinates: Polyline vertices

    Returns:
        Minimum distance in meters over all segments, or NO_MEASUREMENT if
        the polyline has fewer than two vertices
    """
    current_min = NO_MEASUREMENT
    for begin, end in zip(coordinates, coordinates[1:]):
        current_min = min(
            current_min, find_closest_distance_to_segment(coordinate, begin, end)
        )
    return current_min


def find_closest_distance_between(
    lhs: Sequence[Coordinate], rhs: Sequence[Coordinate]
) -> float:
    """
    Find the closest distance from the vertices of lhs to the polyline rhs.

    Only the vertices of lhs are used as query points, so the result is
    not symmetric in its arguments.
    """
    current_min = NO_MEASUREMENT
    for coordinate in lhs:
        current_min = min(current_min, find_closest_distance(coordinate, rhs))
    return current_min


def get_deviations(
    from_: Sequence[Coordinate], to: Sequence[Coordinate]
) -> List[float]:
    """Closest distance from each vertex of from_ to the polyline to, in order."""
    return [find_closest_distance(coordinate, to) for coordinate in from_]


def _slope(from_: Coordinate, to: Coordinate) -> float:
    diff_lat = from_.lat - to.lat
    diff_lon = from_.lon - to.lon
    if diff_lon == 0:
        return sys.float_info.max
    return diff_lat / diff_lon


def are_parallel(lhs: Sequence[Coordinate], rhs: Sequence[Coordinate]) -> bool:
    """
    Check whether two polylines run roughly parallel.

    Both polylines are fitted with least_square_regression. The fitted
    directions are rotated so that lhs points along bearing 90 (slope zero),
    after which rhs counts as parallel if its slope stays below
    PARALLEL_SLOPE_THRESHOLD.

    Args:
        lhs: Reference polyline, at least two coordinates
        rhs: Compared polyline, at least two coordinates

    Returns:
        True if the polylines are parallel
    """
    regression_lhs = least_square_regression(lhs)
    regression_rhs = least_square_regression(rhs)

    difference_lhs = difference(*regression_lhs)
    difference_rhs = difference(*regression_rhs)

    bearing_lhs = bearing(NULL_ISLAND, difference_lhs)
    rotation_angle_radians = math.radians(bearing_lhs - 90.0)

    rotated_difference_rhs = rotate_ccw_around_zero(
        difference_rhs, rotation_angle_radians
    )
    slope_rhs = _slope(NULL_ISLAND, rotated_difference_rhs)

    logger.debug(
        f"lhs bearing {bearing_lhs:.2f}°, rotated rhs slope {slope_rhs:.4f}"
    )
    return abs(slope_rhs) < PARALLEL_SLOPE_THRESHOLD
