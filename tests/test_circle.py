import itertools
import math
import pytest

from geocalc.circle import circle_center, circle_radius
from geocalc.coordinate import Coordinate
from geocalc.distance import haversine_distance


def coord(lon, lat):
    return Coordinate.from_floating(lon, lat)


def test_circle_center_right_triangle():
    center = circle_center(coord(0.0, 0.0), coord(1.0, 0.0), coord(0.0, 1.0))
    assert center == coord(0.5, 0.5)


def test_circle_radius_right_triangle():
    radius = circle_radius(coord(0.0, 0.0), coord(1.0, 0.0), coord(0.0, 1.0))
    assert radius == pytest.approx(haversine_distance(coord(0.0, 0.0), coord(0.5, 0.5)))


@pytest.mark.parametrize(
    "points",
    [
        (coord(0.0, 0.0), coord(1.0, 0.0), coord(0.0, 1.0)),
        (coord(13.0, 52.0), coord(13.01, 52.005), coord(13.02, 51.998)),
        (coord(-73.99, 40.73), coord(-73.98, 40.73), coord(-73.985, 40.74)),
    ],
)
def test_circle_center_is_permutation_invariant(points):
    centers = [circle_center(*ordering) for ordering in itertools.permutations(points)]

    assert all(center is not None for center in centers)
    reference = centers[0]
    for center in centers[1:]:
        assert center.lon == pytest.approx(reference.lon, abs=10)
        assert center.lat == pytest.approx(reference.lat, abs=10)


def test_circle_center_handles_vertical_and_flat_segments():
    # first segment vertical, second flat
    center = circle_center(coord(0.0, 1.0), coord(0.0, 0.0), coord(1.0, 0.0))
    assert center == coord(0.5, 0.5)


def test_circle_center_requires_distinct_points():
    a = coord(1.0, 1.0)
    b = coord(2.0, 3.0)
    assert circle_center(a, a, b) is None
    assert circle_center(a, b, b) is None
    assert circle_center(b, a, b) is None


@pytest.mark.parametrize(
    "points",
    [
        (coord(1.0, 0.0), coord(1.0, 1.0), coord(1.0, 2.0)),
        (coord(0.0, 1.0), coord(1.0, 1.0), coord(2.0, 1.0)),
        (coord(0.0, 0.0), coord(1.0, 1.0), coord(2.0, 2.0)),
    ],
)
def test_circle_center_collinear_points(points):
    assert circle_center(*points) is None
    assert circle_radius(*points) == math.inf


def test_circle_center_out_of_range_is_absent():
    # almost collinear near the pole, the center would lie far below -90
    points = (coord(-1.0, 89.0), coord(0.0, 89.0001), coord(1.0, 89.0))
    assert circle_center(*points) is None
    assert circle_radius(*points) == math.inf


def test_circle_radius_matches_center_distance():
    points = (coord(13.0, 52.0), coord(13.01, 52.005), coord(13.02, 51.998))
    center = circle_center(*points)
    assert center is not None
    assert circle_radius(*points) == haversine_distance(points[0], center)
