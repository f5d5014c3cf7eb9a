import pytest

from mapline.core.geo import GeoCoordinate
from mapline.core.projection import ScreenPoint, Viewport, to_screen_point, to_screen_points


VIEWPORT = Viewport(center=GeoCoordinate(lat=37.0, lon=-122.0), lat_span=0.1, lon_span=0.2)


def test_center_projects_to_screen_center():
    p = to_screen_point(VIEWPORT.center, VIEWPORT, 390, 844)
    assert p == ScreenPoint(x=195, y=422)


def test_north_is_up_and_east_is_right():
    north = to_screen_point(GeoCoordinate(lat=37.05, lon=-122.0), VIEWPORT, 400, 800)
    east = to_screen_point(GeoCoordinate(lat=37.0, lon=-121.9), VIEWPORT, 400, 800)
    # Half a latitude span north moves up by half the screen height.
    assert north.x == pytest.approx(200, abs=1e-6)
    assert north.y == pytest.approx(0, abs=1e-6)
    assert east.x == pytest.approx(400, abs=1e-6)
    assert east.y == pytest.approx(400, abs=1e-6)


def test_to_screen_points_keeps_order():
    coords = [GeoCoordinate(lat=37.0, lon=-122.0), GeoCoordinate(lat=36.95, lon=-122.1)]
    points = to_screen_points(coords, VIEWPORT, 400, 800)
    assert points[0] == ScreenPoint(x=200, y=400)
    assert points[1].x == pytest.approx(0, abs=1e-6)
    assert points[1].y == pytest.approx(800, abs=1e-6)


@pytest.mark.parametrize("lat_span,lon_span", [(0, 0.1), (0.1, -1)])
def test_viewport_rejects_non_positive_spans(lat_span, lon_span):
    with pytest.raises(ValueError, match="spans must be > 0"):
        Viewport(center=GeoCoordinate(lat=0, lon=0), lat_span=lat_span, lon_span=lon_span)
