"""
Viewport controller.

Receives viewport-change notifications from the map widget and keeps the most
recently placed waypoint on the map center ("drag-to-place": the user aims by
panning the map instead of tapping an exact spot).

The controller also exposes the handlers behind the map buttons
(start line / add point / remove last point), which always place points at the
current viewport center.
"""

from __future__ import annotations

import logging
import threading

from mapline.config.settings import Settings
from mapline.core.geo import GeoCoordinate
from mapline.core.projection import Viewport
from mapline.waypoints.store import Waypoint, WaypointStore

logger = logging.getLogger(__name__)


class ViewportController:
    def __init__(self, store: WaypointStore, initial_viewport: Viewport):
        self._store = store
        self._viewport = initial_viewport
        # Keeps "read viewport, then mutate store" pairs from interleaving with viewport updates.
        self._lock = threading.Lock()

    @property
    def store(self) -> WaypointStore:
        return self._store

    @property
    def viewport(self) -> Viewport:
        with self._lock:
            return self._viewport

    def state(self) -> tuple[Viewport, tuple[Waypoint, ...]]:
        """Current viewport and waypoints, read together."""
        with self._lock:
            return self._viewport, self._store.snapshot()

    def on_viewport_changed(self, new_viewport: Viewport) -> None:
        """Adopt `new_viewport` and drag the last waypoint (if any) to its center."""
        with self._lock:
            self._viewport = new_viewport
            self._store.sync_last_to_center(new_viewport.center)

    def start_line(self) -> Waypoint | None:
        with self._lock:
            return self._store.start(self._viewport)

    def add_point(self) -> Waypoint:
        with self._lock:
            return self._store.add(self._viewport)

    def remove_last_point(self) -> Waypoint | None:
        with self._lock:
            return self._store.remove_last()

    def reset(self) -> int:
        with self._lock:
            return self._store.reset()


def initial_viewport(settings: Settings) -> Viewport:
    cfg = settings.map.initial_viewport
    return Viewport(
        center=GeoCoordinate(lat=cfg.lat, lon=cfg.lon),
        lat_span=cfg.lat_span,
        lon_span=cfg.lon_span,
    )


def build_controller(settings: Settings, store: WaypointStore | None = None) -> ViewportController:
    """Create a controller (and a fresh store unless one is given) from settings."""
    vp = initial_viewport(settings)
    logger.info(
        "New map session at lat=%.5f lon=%.5f (spans %.4f x %.4f)",
        vp.center.lat,
        vp.center.lon,
        vp.lat_span,
        vp.lon_span,
    )
    return ViewportController(store if store is not None else WaypointStore(), vp)
