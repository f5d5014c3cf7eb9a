"""
Distance reporting.

The distance label is only defined for exactly two waypoints. Longer outlines
(path length, perimeter) are not summed here.
"""

from __future__ import annotations

from typing import Sequence

from mapline.config.settings import DistanceSettings, get_settings
from mapline.core.geo import haversine_m
from mapline.waypoints.store import Waypoint


def current_distance_m(waypoints: Sequence[Waypoint]) -> float | None:
    """Full-precision distance between the two waypoints, or None for any other count."""
    if len(waypoints) != 2:
        return None
    return haversine_m(waypoints[0].coordinate, waypoints[1].coordinate)


def current_distance_label(waypoints: Sequence[Waypoint], cfg: DistanceSettings | None = None) -> str:
    """Human-facing label; decimals, unit and the "not available" text come from `distance` settings."""
    cfg = cfg if cfg is not None else get_settings().distance
    meters = current_distance_m(waypoints)
    if meters is None:
        return cfg.unavailable_label
    return f"{meters:.{cfg.decimals}f} {cfg.unit_suffix}"
