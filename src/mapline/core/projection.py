"""
Screen-space projection for custom overlays.

This is a linear approximation, not a real map projection: degree offsets from
the viewport center are scaled by the viewport spans onto the screen. It is only
accurate near the center and distorts toward the edges, which is acceptable for
drawing overlays without asking the map widget for its own projection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from mapline.core.geo import GeoCoordinate


@dataclass(frozen=True)
class Viewport:
    """Visible map extent: center plus angular height/width in degrees."""

    center: GeoCoordinate
    lat_span: float
    lon_span: float

    def __post_init__(self) -> None:
        if self.lat_span <= 0 or self.lon_span <= 0:
            raise ValueError(
                f"viewport spans must be > 0 (lat_span={self.lat_span}, lon_span={self.lon_span})"
            )


@dataclass(frozen=True)
class ScreenPoint:
    x: float
    y: float


def to_screen_point(
    coordinate: GeoCoordinate,
    viewport: Viewport,
    screen_width: float,
    screen_height: float,
) -> ScreenPoint:
    """Project `coordinate` into pixel space for the given viewport and screen size.

    Latitude grows upwards, so the y axis is inverted.
    """
    lat_offset = coordinate.lat - viewport.center.lat
    lon_offset = coordinate.lon - viewport.center.lon
    x = screen_width / 2 + (lon_offset / viewport.lon_span) * screen_width
    y = screen_height / 2 - (lat_offset / viewport.lat_span) * screen_height
    return ScreenPoint(x=x, y=y)


def to_screen_points(
    coordinates: Iterable[GeoCoordinate],
    viewport: Viewport,
    screen_width: float,
    screen_height: float,
) -> list[ScreenPoint]:
    return [to_screen_point(c, viewport, screen_width, screen_height) for c in coordinates]
