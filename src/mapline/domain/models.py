"""
Domain models (Pydantic).

These types are the JSON contract at the API/CLI boundary:
- inputs from the map widget (`ViewportIn`)
- session state (`SessionState`, `WaypointOut`)
- what the map widget should draw (`RenderDescription`)

The geometry core works on plain frozen dataclasses (`mapline.core`); these
models validate ranges on the way in and convert to/from the core types.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from mapline.core.geo import GeoCoordinate
from mapline.core.projection import ScreenPoint, Viewport
from mapline.waypoints.store import Waypoint


class GeoPoint(BaseModel):
    """A geographic point in decimal degrees."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)

    def to_core(self) -> GeoCoordinate:
        return GeoCoordinate(lat=self.lat, lon=self.lon)

    @classmethod
    def from_core(cls, coordinate: GeoCoordinate) -> "GeoPoint":
        return cls.model_construct(lat=coordinate.lat, lon=coordinate.lon)


class ViewportIn(BaseModel):
    """Visible region reported by the map widget (center + spans in degrees)."""

    center: GeoPoint
    lat_span: float = Field(..., gt=0)
    lon_span: float = Field(..., gt=0)

    def to_core(self) -> Viewport:
        return Viewport(center=self.center.to_core(), lat_span=self.lat_span, lon_span=self.lon_span)

    @classmethod
    def from_core(cls, viewport: Viewport) -> "ViewportIn":
        return cls.model_construct(
            center=GeoPoint.from_core(viewport.center),
            lat_span=viewport.lat_span,
            lon_span=viewport.lon_span,
        )


class WaypointOut(BaseModel):
    id: int
    location: GeoPoint

    @classmethod
    def from_core(cls, waypoint: Waypoint) -> "WaypointOut":
        return cls(id=waypoint.id, location=GeoPoint.from_core(waypoint.coordinate))


class DistanceOut(BaseModel):
    label: str
    meters: float | None = None


class SessionState(BaseModel):
    """Current viewport, placed waypoints and the derived distance."""

    viewport: ViewportIn
    waypoints: list[WaypointOut]
    distance: DistanceOut


class OverlayStyle(str, Enum):
    """How the waypoints are connected on the map; chosen by the caller."""

    line = "line"
    polygon = "polygon"
    circle = "circle"


class Marker(BaseModel):
    key: int
    coordinate: GeoPoint


class Overlay(BaseModel):
    """One primitive shape for the map widget.

    `coordinates` is used by lines and polygons; `center`/`radius_m` by circles.
    Polygons are implicitly closed by the renderer.
    """

    kind: Literal["line", "polygon", "circle"]
    coordinates: list[GeoPoint] = Field(default_factory=list)
    center: GeoPoint | None = None
    radius_m: float | None = None
    stroke_color: str
    fill_color: str | None = None
    stroke_width: float


class RenderDescription(BaseModel):
    style: OverlayStyle
    markers: list[Marker]
    overlay: Overlay | None = None


class ScreenPointOut(BaseModel):
    id: int
    x: float
    y: float

    @classmethod
    def from_core(cls, waypoint_id: int, point: ScreenPoint) -> "ScreenPointOut":
        return cls(id=waypoint_id, x=point.x, y=point.y)


class ScreenProjection(BaseModel):
    width: float
    height: float
    points: list[ScreenPointOut]
