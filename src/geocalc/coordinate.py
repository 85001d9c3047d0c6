#!/usr/bin/env python3
"""
Fixed-point geographic coordinates.

Longitude and latitude are stored as integers scaled by COORDINATE_PRECISION
(micro-degrees). FloatCoordinate carries the same pair as floats and is also
used for points in a projected plane.
"""

from typing import NamedTuple
import math

from .config import DEFAULT_CONFIG

COORDINATE_PRECISION = DEFAULT_CONFIG.coordinate_precision

# Minimum 32-bit integer marks an unset component
INVALID_FIXED = -(2**31)

MAX_LONGITUDE = 180.0
MAX_LATITUDE = 90.0


def to_fixed(value: float) -> int:
    """
    Convert degrees to fixed-point, rounding half away from zero.

    Args:
        value: Angle in decimal degrees

    Returns:
        Integer micro-degrees
    """
    scaled = value * COORDINATE_PRECISION
    return int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))


def to_floating(value: int) -> float:
    """Convert fixed-point micro-degrees to decimal degrees."""
    return value / COORDINATE_PRECISION


class FloatCoordinate(NamedTuple):
    """A floating (lon, lat) pair in degrees or projected plane units."""

    lon: float
    lat: float


class Coordinate(NamedTuple):
    """Represents a geographic position as fixed-point longitude and latitude."""

    lon: int
    lat: int

    @classmethod
    def from_floating(cls, lon: float, lat: float) -> "Coordinate":
        return cls(to_fixed(lon), to_fixed(lat))

    @classmethod
    def invalid(cls) -> "Coordinate":
        return cls(INVALID_FIXED, INVALID_FIXED)

    def to_floating(self) -> FloatCoordinate:
        return FloatCoordinate(to_floating(self.lon), to_floating(self.lat))

    def is_valid(self) -> bool:
        """
        Check that both components are set and inside geodetic bounds.

        Returns:
            True if longitude is within [-180, 180] and latitude within [-90, 90]
        """
        if self.lon == INVALID_FIXED or self.lat == INVALID_FIXED:
            return False
        return (
            abs(to_floating(self.lon)) <= MAX_LONGITUDE
            and abs(to_floating(self.lat)) <= MAX_LATITUDE
        )
