"""
Waypoint store.

The ordered list of waypoints the user has placed. Insertion order is the
drawing order of the outline, and the last waypoint is the one that follows the
map center while the user pans.

Every operation is a no-op rather than an error when it does not apply
(removing from an empty store, starting a non-empty one, syncing an empty one),
so the interaction never has a failure path.
"""

from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass, replace

from mapline.core.geo import GeoCoordinate
from mapline.core.projection import Viewport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Waypoint:
    """One placed point; `id` is unique within its store and increases with insertion."""

    id: int
    coordinate: GeoCoordinate


class WaypointStore:
    def __init__(self) -> None:
        self._waypoints: list[Waypoint] = []
        # Ids are never reused, even after removals.
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._waypoints)

    def _append(self, coordinate: GeoCoordinate) -> Waypoint:
        wp = Waypoint(id=next(self._ids), coordinate=coordinate)
        self._waypoints.append(wp)
        logger.debug("Added waypoint id=%s at lat=%.6f lon=%.6f", wp.id, coordinate.lat, coordinate.lon)
        return wp

    def start(self, viewport: Viewport) -> Waypoint | None:
        """Place the first waypoint at the viewport center; no-op if any waypoint exists."""
        with self._lock:
            if self._waypoints:
                return None
            wp = self._append(viewport.center)
        logger.info("Started waypoint line at lat=%.6f lon=%.6f", wp.coordinate.lat, wp.coordinate.lon)
        return wp

    def add(self, viewport: Viewport) -> Waypoint:
        """Append a waypoint at the viewport center."""
        with self._lock:
            return self._append(viewport.center)

    def remove_last(self) -> Waypoint | None:
        with self._lock:
            if not self._waypoints:
                return None
            wp = self._waypoints.pop()
        logger.debug("Removed waypoint id=%s", wp.id)
        return wp

    def sync_last_to_center(self, coordinate: GeoCoordinate) -> Waypoint | None:
        """Move the last waypoint to `coordinate`, keeping its id."""
        with self._lock:
            if not self._waypoints:
                return None
            wp = replace(self._waypoints[-1], coordinate=coordinate)
            self._waypoints[-1] = wp
            return wp

    def reset(self) -> int:
        """Drop every waypoint; returns how many were removed."""
        with self._lock:
            removed = len(self._waypoints)
            self._waypoints.clear()
        logger.info("Reset waypoint store (removed=%s)", removed)
        return removed

    def snapshot(self) -> tuple[Waypoint, ...]:
        with self._lock:
            return tuple(self._waypoints)
