from mapline.core.geo import GeoCoordinate
from mapline.core.projection import Viewport
from mapline.waypoints.store import WaypointStore


def _viewport(lat: float = 37.0, lon: float = -122.0) -> Viewport:
    return Viewport(center=GeoCoordinate(lat=lat, lon=lon), lat_span=0.1, lon_span=0.1)


def test_start_is_idempotent():
    store = WaypointStore()
    first = store.start(_viewport())
    assert first is not None
    assert store.start(_viewport(1, 1)) is None
    assert len(store) == 1
    assert store.snapshot()[0].coordinate == GeoCoordinate(lat=37.0, lon=-122.0)


def test_add_appends_in_call_order_with_unique_ids():
    store = WaypointStore()
    store.start(_viewport())
    for i in range(5):
        store.add(_viewport(lat=float(i)))

    snap = store.snapshot()
    assert len(snap) == 6
    assert [wp.coordinate.lat for wp in snap[1:]] == [0.0, 1.0, 2.0, 3.0, 4.0]
    ids = [wp.id for wp in snap]
    assert len(set(ids)) == len(ids)
    assert ids == sorted(ids)


def test_add_works_on_empty_store():
    store = WaypointStore()
    store.add(_viewport())
    store.add(_viewport())
    assert len(store) == 2


def test_remove_last_past_empty_is_a_no_op():
    store = WaypointStore()
    for _ in range(3):
        store.add(_viewport())
    removed = [store.remove_last() for _ in range(4)]
    assert len(store) == 0
    assert removed[-1] is None
    assert all(wp is not None for wp in removed[:3])


def test_ids_are_not_reused_after_removal():
    store = WaypointStore()
    a = store.add(_viewport())
    store.remove_last()
    b = store.add(_viewport())
    assert b.id > a.id


def test_sync_last_to_center_only_moves_the_last_waypoint():
    store = WaypointStore()
    store.start(_viewport())
    store.add(_viewport())
    store.add(_viewport())
    before = store.snapshot()

    target = GeoCoordinate(lat=37.5, lon=-121.5)
    store.sync_last_to_center(target)
    after = store.snapshot()

    assert [wp.id for wp in after] == [wp.id for wp in before]
    assert after[:-1] == before[:-1]
    assert after[-1].coordinate == target


def test_sync_on_empty_store_is_a_no_op():
    store = WaypointStore()
    assert store.sync_last_to_center(GeoCoordinate(lat=1, lon=1)) is None
    assert store.snapshot() == ()


def test_snapshot_is_detached_from_later_mutations():
    store = WaypointStore()
    store.add(_viewport())
    snap = store.snapshot()
    store.add(_viewport())
    assert len(snap) == 1


def test_reset_clears_everything():
    store = WaypointStore()
    store.add(_viewport())
    store.add(_viewport())
    assert store.reset() == 2
    assert len(store) == 0
    assert store.start(_viewport()) is not None
