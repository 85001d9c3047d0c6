"""
Utility functions for planar segment geometry built on Shapely.

Points are FloatCoordinate values in any planar unit; callers project
geographic coordinates before using these helpers.
"""

from typing import Tuple
import logging
from shapely.geometry import LineString, Point

from .config import DEFAULT_CONFIG
from .coordinate import FloatCoordinate

logger = logging.getLogger(__name__)


def segment_to_linestring(
    source: FloatCoordinate, target: FloatCoordinate
) -> LineString:
    """
    Convert a pair of planar points to a two-vertex Shapely LineString.

    Args:
        source: Segment start
        target: Segment end

    Returns:
        LineString from source to target
    """
    return LineString([(source.lon, source.lat), (target.lon, target.lat)])


def project_point_on_segment(
    source: FloatCoordinate, target: FloatCoordinate, query: FloatCoordinate
) -> Tuple[float, FloatCoordinate]:
    """
    Find the point on a segment closest to a query point.

    Args:
        source: Segment start
        target: Segment end
        query: Point to project onto the segment

    Returns:
        Tuple of (ratio, nearest) where ratio is clamped to [0, 1]
        (0 at source, 1 at target) and nearest is the point on the segment
    """
    dx = target.lon - source.lon
    dy = target.lat - source.lat
    if dx * dx + dy * dy < DEFAULT_CONFIG.epsilon:
        logger.debug(f"Zero-length segment at {source}, snapping to source")
        return 0.0, source

    segment = segment_to_linestring(source, target)
    ratio = segment.project(Point(query.lon, query.lat), normalized=True)
    nearest = segment.interpolate(ratio, normalized=True)
    return ratio, FloatCoordinate(nearest.x, nearest.y)
