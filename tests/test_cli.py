import json

import pytest

from mapline.cli import apply_event, load_events, main
from mapline.core.geo import GeoCoordinate
from mapline.core.projection import Viewport
from mapline.waypoints.controller import ViewportController
from mapline.waypoints.store import WaypointStore


def test_distance_command(capsys):
    assert main(["distance", "0", "0", "0", "1"]) == 0
    assert capsys.readouterr().out.strip() == "111194.93 meters"


def test_distance_command_json(capsys):
    assert main(["distance", "37.78825", "-122.4324", "37.78825", "-122.4324", "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == {"meters": 0.0}


def test_project_command(capsys):
    args = ["project", "37.0", "-122.0", "--center-lat", "37.0", "--center-lon", "-122.0"]
    assert main([*args, "--width", "400", "--height", "800"]) == 0
    assert json.loads(capsys.readouterr().out) == {"x": 200.0, "y": 400.0}


def test_project_command_rejects_bad_span(capsys):
    assert main(["project", "0", "0", "--lat-span", "0"]) == 2
    assert "spans must be > 0" in capsys.readouterr().err


def test_replay_command(tmp_path, capsys):
    events = [
        {"type": "viewport", "center": {"lat": 37.0, "lon": -122.0}, "lat_span": 0.1, "lon_span": 0.1},
        "start",
        "add",
        {"type": "viewport", "center": {"lat": 37.01, "lon": -122.0}, "lat_span": 0.1, "lon_span": 0.1},
    ]
    path = tmp_path / "events.json"
    path.write_text(json.dumps(events), encoding="utf-8")

    assert main(["replay", str(path), "--json", "--style", "line"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert [wp["lat"] for wp in out["waypoints"]] == [37.0, 37.01]
    assert out["distance"]["meters"] == pytest.approx(1111.95, abs=1)
    assert out["render"]["overlay"]["kind"] == "line"


def test_replay_reports_bad_events(tmp_path, capsys):
    path = tmp_path / "events.json"
    path.write_text(json.dumps({"events": ["start", "jump"]}), encoding="utf-8")
    assert main(["replay", str(path)]) == 2
    assert "Event #1" in capsys.readouterr().err


def test_replay_reports_missing_file(tmp_path, capsys):
    assert main(["replay", str(tmp_path / "missing.json")]) == 2
    err = capsys.readouterr().err
    assert "replay failed" in err
    assert "Traceback" not in err


def test_load_events_rejects_non_list(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps({"nope": 1}), encoding="utf-8")
    with pytest.raises(ValueError, match="expected a list of events"):
        load_events(path)


def test_apply_event_aliases():
    viewport = Viewport(center=GeoCoordinate(lat=0, lon=0), lat_span=1, lon_span=1)
    controller = ViewportController(WaypointStore(), viewport)
    for i, event in enumerate(["add", "add", {"type": "remove_last"}, "REMOVE"]):
        apply_event(controller, event, i)
    assert len(controller.store) == 0
