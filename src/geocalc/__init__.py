#!/usr/bin/env python3
"""
Geocalc - coordinate calculations over fixed-point geographic coordinates.

This package provides distances, nearest points on segments, bearings and
turn angles, circle fitting, and regression based shape comparison of
polylines.
"""
import importlib.metadata

__version__ = importlib.metadata.version("geocalc")

# Import main functions for public API
from .coordinate import Coordinate, FloatCoordinate
from .distance import (
    squared_euclidean_distance,
    haversine_distance,
    great_circle_distance,
    perpendicular_distance,
    perpendicular_distance_with_location,
)
from .angles import (
    centroid,
    bearing,
    compute_angle,
    rotate_ccw_around_zero,
    difference,
)
from .circle import circle_center, circle_radius
from .regression import (
    NO_MEASUREMENT,
    interpolate_linear,
    signed_area,
    is_ccw,
    least_square_regression,
    find_closest_distance_to_segment,
    find_closest_distance,
    find_closest_distance_between,
    get_deviations,
    are_parallel,
)

__all__ = [
    "Coordinate",
    "FloatCoordinate",
    "squared_euclidean_distance",
    "haversine_distance",
    "great_circle_distance",
    "perpendicular_distance",
    "perpendicular_distance_with_location",
    "centroid",
    "bearing",
    "compute_angle",
    "rotate_ccw_around_zero",
    "difference",
    "circle_center",
    "circle_radius",
    "NO_MEASUREMENT",
    "interpolate_linear",
    "signed_area",
    "is_ccw",
    "least_square_regression",
    "find_closest_distance_to_segment",
    "find_closest_distance",
    "find_closest_distance_between",
    "get_deviations",
    "are_parallel",
]
