"""
API routes.

Endpoints:
- GET  `/api/state`: viewport, waypoints and distance of the current session.
- POST `/api/viewport`: viewport-change notification from the map widget.
- POST `/api/waypoints/{start,add,remove-last,reset}`: the map buttons.
- GET  `/api/distance`: distance label (defined for exactly two waypoints).
- GET  `/api/render`: markers + overlay for a caller-chosen style.
- GET  `/api/screen-points`: waypoints projected into screen pixels.
- GET  `/api/settings`: public settings for the map UI.

The app serves one in-process map session.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import APIRouter, HTTPException, Query

from mapline.config.settings import get_settings
from mapline.core.projection import to_screen_points
from mapline.domain.models import (
    DistanceOut,
    OverlayStyle,
    RenderDescription,
    ScreenPointOut,
    ScreenProjection,
    SessionState,
    ViewportIn,
    WaypointOut,
)
from mapline.render.overlay import build_render_description
from mapline.waypoints.controller import ViewportController, build_controller
from mapline.waypoints.distance import current_distance_label, current_distance_m
from mapline.waypoints.store import Waypoint

router = APIRouter()


@lru_cache
def _controller() -> ViewportController:
    return build_controller(get_settings())


def _distance(waypoints: tuple[Waypoint, ...]) -> DistanceOut:
    label = current_distance_label(waypoints, get_settings().distance)
    return DistanceOut(label=label, meters=current_distance_m(waypoints))


def _state(controller: ViewportController) -> SessionState:
    viewport, waypoints = controller.state()
    return SessionState(
        viewport=ViewportIn.from_core(viewport),
        waypoints=[WaypointOut.from_core(wp) for wp in waypoints],
        distance=_distance(waypoints),
    )


@router.get("/api/state", response_model=SessionState)
def get_state() -> SessionState:
    return _state(_controller())


@router.post("/api/viewport", response_model=SessionState)
def post_viewport(viewport: ViewportIn) -> SessionState:
    """Adopt the new visible region; the last waypoint follows its center."""
    controller = _controller()
    try:
        controller.on_viewport_changed(viewport.to_core())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return _state(controller)


@router.post("/api/waypoints/start", response_model=SessionState)
def post_start() -> SessionState:
    """Place the first waypoint at the map center (no-op once a line exists)."""
    controller = _controller()
    controller.start_line()
    return _state(controller)


@router.post("/api/waypoints/add", response_model=SessionState)
def post_add() -> SessionState:
    controller = _controller()
    controller.add_point()
    return _state(controller)


@router.post("/api/waypoints/remove-last", response_model=SessionState)
def post_remove_last() -> SessionState:
    controller = _controller()
    controller.remove_last_point()
    return _state(controller)


@router.post("/api/waypoints/reset", response_model=SessionState)
def post_reset() -> SessionState:
    controller = _controller()
    controller.reset()
    return _state(controller)


@router.get("/api/distance", response_model=DistanceOut)
def get_distance() -> DistanceOut:
    return _distance(_controller().store.snapshot())


@router.get("/api/render", response_model=RenderDescription)
def get_render(style: OverlayStyle | None = Query(default=None)) -> RenderDescription:
    """Markers plus the connecting overlay; `style` defaults to the configured one."""
    cfg = get_settings().overlay
    return build_render_description(_controller().store.snapshot(), style or cfg.style, cfg)


@router.get("/api/screen-points", response_model=ScreenProjection)
def get_screen_points(
    width: float | None = Query(default=None, gt=0),
    height: float | None = Query(default=None, gt=0),
) -> ScreenProjection:
    screen = get_settings().screen
    w = width if width is not None else screen.width
    h = height if height is not None else screen.height
    controller = _controller()
    viewport, waypoints = controller.state()
    points = to_screen_points((wp.coordinate for wp in waypoints), viewport, w, h)
    return ScreenProjection(
        width=w,
        height=h,
        points=[ScreenPointOut.from_core(wp.id, p) for wp, p in zip(waypoints, points)],
    )


@router.get("/api/settings")
def get_public_settings() -> dict:
    """Return settings the map UI needs (initial viewport, screen, overlay, distance)."""
    settings = get_settings()
    return settings.model_dump(mode="json", include={"map", "screen", "overlay", "distance"})
