#!/usr/bin/env python3
"""
Web Mercator (EPSG:3857) projection of fixed-point coordinates.

Projected points are FloatCoordinate values in metres. Latitudes are clamped
to the square extent of the projection before projecting.
"""

import math
import pyproj

from .coordinate import Coordinate, FloatCoordinate, to_floating

# Spherical radius used by EPSG:3857
MERCATOR_RADIUS = 6378137.0
MERCATOR_MAX_LATITUDE = 85.051128779806592
METERS_PER_DEGREE = MERCATOR_RADIUS * math.pi / 180.0

_projection = pyproj.Proj("EPSG:3857")


def clamp_latitude(lat: float) -> float:
    return max(-MERCATOR_MAX_LATITUDE, min(MERCATOR_MAX_LATITUDE, lat))


def from_wgs84(coordinate: Coordinate) -> FloatCoordinate:
    """
    Project a coordinate into the Web Mercator plane.

    Args:
        coordinate: Fixed-point WGS84 coordinate

    Returns:
        FloatCoordinate in projected metres
    """
    x, y = _projection(
        to_floating(coordinate.lon), clamp_latitude(to_floating(coordinate.lat))
    )
    return FloatCoordinate(x, y)


def to_wgs84(point: FloatCoordinate) -> Coordinate:
    """
    Convert a projected point back to a fixed-point WGS84 coordinate.

    Args:
        point: FloatCoordinate in projected metres

    Returns:
        Coordinate rounded to fixed-point precision
    """
    lon, lat = _projection(point.lon, point.lat, inverse=True)
    return Coordinate.from_floating(lon, lat)


def lat_to_y(lat: float) -> float:
    """
    Map a latitude to its Mercator Y value expressed in degrees.

    The result shares units with longitude degrees, so (lon, lat_to_y(lat))
    forms a conformal plane.
    """
    _, y = _projection(0.0, clamp_latitude(lat))
    return y / METERS_PER_DEGREE
