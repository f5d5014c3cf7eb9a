"""
MapLine CLI entrypoint.

This CLI is intended for quick local checks without a map frontend:
- `distance`: great-circle distance label between two points
- `project`: where a point lands on screen for a given viewport
- `replay`: feed a recorded list of map events through a session and print the result
- `serve`: run the HTTP API with uvicorn
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from mapline.config.settings import get_settings
from mapline.core.geo import GeoCoordinate, haversine_m
from mapline.core.logging import configure_logging
from mapline.core.projection import Viewport, to_screen_point
from mapline.domain.models import OverlayStyle, ViewportIn
from mapline.render.overlay import build_render_description
from mapline.waypoints.controller import ViewportController, build_controller
from mapline.waypoints.distance import current_distance_label, current_distance_m


def _cmd_distance(args: argparse.Namespace) -> int:
    cfg = get_settings().distance
    a = GeoCoordinate(lat=float(args.lat1), lon=float(args.lon1))
    b = GeoCoordinate(lat=float(args.lat2), lon=float(args.lon2))
    meters = haversine_m(a, b)
    if args.json:
        print(json.dumps({"meters": meters}))
        return 0
    print(f"{meters:.{cfg.decimals}f} {cfg.unit_suffix}")
    return 0


def _cmd_project(args: argparse.Namespace) -> int:
    settings = get_settings()
    init = settings.map.initial_viewport
    try:
        viewport = Viewport(
            center=GeoCoordinate(
                lat=float(args.center_lat if args.center_lat is not None else init.lat),
                lon=float(args.center_lon if args.center_lon is not None else init.lon),
            ),
            lat_span=float(args.lat_span if args.lat_span is not None else init.lat_span),
            lon_span=float(args.lon_span if args.lon_span is not None else init.lon_span),
        )
    except ValueError as e:
        print(f"project failed: {e}", file=sys.stderr)
        return 2
    width = float(args.width if args.width is not None else settings.screen.width)
    height = float(args.height if args.height is not None else settings.screen.height)
    p = to_screen_point(GeoCoordinate(lat=float(args.lat), lon=float(args.lon)), viewport, width, height)
    print(json.dumps({"x": p.x, "y": p.y}))
    return 0


def apply_event(controller: ViewportController, event: Any, index: int = 0) -> None:
    """Apply one recorded event (`"add"` or `{"type": "viewport", ...}`) to a session."""
    if isinstance(event, str):
        event = {"type": event}
    if not isinstance(event, dict) or "type" not in event:
        raise ValueError(f"Event #{index}: expected a string or an object with a 'type' key")

    kind = str(event["type"]).strip().lower()
    if kind == "start":
        controller.start_line()
    elif kind == "add":
        controller.add_point()
    elif kind in {"remove", "remove_last"}:
        controller.remove_last_point()
    elif kind == "reset":
        controller.reset()
    elif kind == "viewport":
        payload = {k: v for k, v in event.items() if k != "type"}
        controller.on_viewport_changed(ViewportIn.model_validate(payload).to_core())
    else:
        raise ValueError(f"Event #{index}: unknown event type '{event['type']}'")


def load_events(path: str | Path) -> list[Any]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("events")
    if not isinstance(data, list):
        raise ValueError(f"Invalid replay file {path}; expected a list of events.")
    return data


def _cmd_replay(args: argparse.Namespace) -> int:
    settings = get_settings()
    controller = build_controller(settings)
    try:
        for i, event in enumerate(load_events(args.path)):
            apply_event(controller, event, i)
    except (OSError, ValueError) as e:
        print(f"replay failed: {e}", file=sys.stderr)
        return 2

    waypoints = controller.store.snapshot()
    style = OverlayStyle(args.style or settings.overlay.style)
    render = build_render_description(waypoints, style, settings.overlay)
    label = current_distance_label(waypoints, settings.distance)

    if args.json:
        out = {
            "waypoints": [{"id": wp.id, "lat": wp.coordinate.lat, "lon": wp.coordinate.lon} for wp in waypoints],
            "distance": {"label": label, "meters": current_distance_m(waypoints)},
            "render": render.model_dump(mode="json"),
        }
        print(json.dumps(out, ensure_ascii=False, indent=2))
        return 0

    print(f"Waypoints: {len(waypoints)}")
    for wp in waypoints:
        print(f"  #{wp.id}: lat={wp.coordinate.lat:.6f} lon={wp.coordinate.lon:.6f}")
    print(f"Distance: {label}")
    overlay = render.overlay.kind if render.overlay else "none"
    print(f"Overlay: {overlay} (style={style.value})")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("mapline.api.app:app", host=args.host, port=int(args.port), log_config=None)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the MapLine CLI."""
    parser = argparse.ArgumentParser(prog="mapline")
    sub = parser.add_subparsers(dest="command", required=True)

    dist = sub.add_parser("distance", help="Great-circle distance between two points.")
    dist.add_argument("lat1", type=float)
    dist.add_argument("lon1", type=float)
    dist.add_argument("lat2", type=float)
    dist.add_argument("lon2", type=float)
    dist.add_argument("--json", action="store_true", help="Output full-precision meters as JSON")
    dist.set_defaults(func=_cmd_distance)

    proj = sub.add_parser("project", help="Project a point onto the screen for a viewport.")
    proj.add_argument("lat", type=float)
    proj.add_argument("lon", type=float)
    proj.add_argument("--center-lat", type=float, default=None, help="Defaults to the configured initial viewport")
    proj.add_argument("--center-lon", type=float, default=None)
    proj.add_argument("--lat-span", type=float, default=None)
    proj.add_argument("--lon-span", type=float, default=None)
    proj.add_argument("--width", type=float, default=None, help="Screen width in px (default from config)")
    proj.add_argument("--height", type=float, default=None)
    proj.set_defaults(func=_cmd_project)

    rep = sub.add_parser("replay", help="Replay a JSON list of map events through a session.")
    rep.add_argument("path", help="JSON file: a list of events, or {\"events\": [...]}")
    rep.add_argument("--style", choices=[s.value for s in OverlayStyle], default=None)
    rep.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    rep.set_defaults(func=_cmd_replay)

    srv = sub.add_parser("serve", help="Run the HTTP API (one in-process map session).")
    srv.add_argument("--host", default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.set_defaults(func=_cmd_serve)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m mapline.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    return int(func(args))


if __name__ == "__main__":
    raise SystemExit(main())
