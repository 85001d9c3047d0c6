import math
import pytest

from geocalc.coordinate import Coordinate, FloatCoordinate, to_fixed
from geocalc.shapely_utils import project_point_on_segment
from geocalc.trigonometry import atan2_lookup
from geocalc.web_mercator import (
    MERCATOR_RADIUS,
    from_wgs84,
    to_wgs84,
    lat_to_y,
)


def test_to_fixed_rounds_to_nearest_micro_degree():
    assert to_fixed(0.0000004) == 0
    assert to_fixed(0.0000006) == 1
    assert to_fixed(-0.0000006) == -1
    assert to_fixed(13.388860) == 13388860


def test_coordinate_validity():
    assert Coordinate.from_floating(180.0, -90.0).is_valid()
    assert not Coordinate.from_floating(180.000001, 0.0).is_valid()
    assert not Coordinate.from_floating(0.0, 90.5).is_valid()
    assert not Coordinate.invalid().is_valid()


def test_coordinate_to_floating():
    assert Coordinate(13388860, 52517037).to_floating() == FloatCoordinate(
        13.38886, 52.517037
    )


def test_from_wgs84_origin_and_equator():
    assert from_wgs84(Coordinate(0, 0)) == pytest.approx((0.0, 0.0), abs=1e-6)
    x, y = from_wgs84(Coordinate.from_floating(1.0, 0.0))
    assert x == pytest.approx(MERCATOR_RADIUS * math.radians(1.0))
    assert y == pytest.approx(0.0, abs=1e-6)


def test_mercator_round_trip():
    original = Coordinate.from_floating(13.388860, 52.517037)
    restored = to_wgs84(from_wgs84(original))
    assert restored.lon == pytest.approx(original.lon, abs=1)
    assert restored.lat == pytest.approx(original.lat, abs=1)


def test_lat_to_y_is_odd_and_grows_toward_poles():
    assert lat_to_y(0.0) == pytest.approx(0.0, abs=1e-9)
    assert lat_to_y(-45.0) == pytest.approx(-lat_to_y(45.0))
    assert lat_to_y(60.0) > 60.0
    # clamped to the square Mercator extent
    assert lat_to_y(90.0) == pytest.approx(lat_to_y(85.051128779806592))


def test_project_point_on_segment_inside():
    ratio, nearest = project_point_on_segment(
        FloatCoordinate(0.0, 0.0), FloatCoordinate(10.0, 0.0), FloatCoordinate(2.5, 3.0)
    )
    assert ratio == pytest.approx(0.25)
    assert nearest == pytest.approx((2.5, 0.0))


def test_project_point_on_segment_clamps_ratio():
    source = FloatCoordinate(0.0, 0.0)
    target = FloatCoordinate(0.0, 10.0)
    assert project_point_on_segment(source, target, FloatCoordinate(1.0, -5.0)) == (
        0.0,
        source,
    )
    ratio, nearest = project_point_on_segment(source, target, FloatCoordinate(1.0, 15.0))
    assert ratio == 1.0
    assert nearest == pytest.approx(tuple(target))


def test_project_point_on_zero_length_segment():
    source = FloatCoordinate(4.0, 2.0)
    assert project_point_on_segment(source, source, FloatCoordinate(7.0, 7.0)) == (
        0.0,
        source,
    )


@pytest.mark.parametrize(
    "y, x",
    [(0.0, 1.0), (1.0, 1.0), (1.0, 0.0), (1.0, -1.0), (0.5, -2.0),
     (-0.5, -2.0), (-1.0, 0.0), (-3.0, 1.0), (-1.0, 3.0), (2.0, 0.3)],
)
def test_atan2_lookup_matches_atan2(y, x):
    assert atan2_lookup(y, x) == pytest.approx(math.atan2(y, x), abs=1e-3)


def test_atan2_lookup_of_zero_vector():
    assert atan2_lookup(0.0, 0.0) == 0.0


def test_project_point_on_diagonal_segment():
    ratio, nearest = project_point_on_segment(
        FloatCoordinate(0.0, 0.0), FloatCoordinate(4.0, 4.0), FloatCoordinate(4.0, 0.0)
    )
    assert ratio == pytest.approx(0.5)
    assert nearest == pytest.approx((2.0, 2.0))
