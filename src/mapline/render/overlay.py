"""
Render description for the map widget.

Turns the waypoint list into primitives the map widget can draw: one marker per
waypoint plus at most one connecting overlay. The overlay style is picked by the
caller (`OverlayStyle`), not fixed here:
- `line`: open polyline through the waypoints, in order (2+ waypoints)
- `polygon`: closed outline through the waypoints, in order (2+ waypoints)
- `circle`: centered on the first waypoint and passing through the second
  (exactly 2 waypoints)
"""

from __future__ import annotations

from typing import Sequence

from mapline.config.settings import OverlaySettings
from mapline.core.geo import circle_radius_m
from mapline.domain.models import GeoPoint, Marker, Overlay, OverlayStyle, RenderDescription
from mapline.waypoints.store import Waypoint


def _path_overlay(kind: str, waypoints: Sequence[Waypoint], cfg: OverlaySettings) -> Overlay:
    return Overlay(
        kind=kind,
        coordinates=[GeoPoint.from_core(wp.coordinate) for wp in waypoints],
        stroke_color=cfg.stroke_color,
        # Lines have no interior.
        fill_color=cfg.fill_color if kind == "polygon" else None,
        stroke_width=cfg.stroke_width,
    )


def build_overlay(
    waypoints: Sequence[Waypoint], style: OverlayStyle, cfg: OverlaySettings
) -> Overlay | None:
    if style is OverlayStyle.circle:
        if len(waypoints) != 2:
            return None
        center, edge = waypoints[0].coordinate, waypoints[1].coordinate
        return Overlay(
            kind="circle",
            center=GeoPoint.from_core(center),
            radius_m=circle_radius_m(center, edge),
            stroke_color=cfg.stroke_color,
            fill_color=cfg.fill_color,
            stroke_width=cfg.stroke_width,
        )
    if len(waypoints) < 2:
        return None
    return _path_overlay(style.value, waypoints, cfg)


def build_render_description(
    waypoints: Sequence[Waypoint],
    style: OverlayStyle | str,
    cfg: OverlaySettings,
) -> RenderDescription:
    """Describe markers and the connecting overlay for `waypoints`."""
    style = OverlayStyle(style)
    markers = [Marker(key=wp.id, coordinate=GeoPoint.from_core(wp.coordinate)) for wp in waypoints]
    return RenderDescription(style=style, markers=markers, overlay=build_overlay(waypoints, style, cfg))
