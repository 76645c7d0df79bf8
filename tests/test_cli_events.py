import json
from pathlib import Path

from typer.testing import CliRunner

from steppack.cli.app import app


def _write_trace_fixture(path: Path) -> Path:
    payload = {
        "event_types": [
            {"name": "draw"},
            {"name": "internal", "hidden": True},
            {"name": "wtf.webgl#setContext", "hidden": True},
        ],
        "events": [
            {"type": "draw", "time": 0},
            {"type": "internal", "time": 1},
            {"type": "wtf.webgl#setContext", "time": 2, "args": {"handle": 1}},
            {"type": "internal", "time": 3},
            {"type": "draw", "time": 4},
        ],
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_cli_events_lists_all_events(tmp_path: Path) -> None:
    trace = _write_trace_fixture(tmp_path / "trace.json")
    runner = CliRunner()
    result = runner.invoke(app, ["events", str(trace), "0"])

    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert lines[0] == "step 0: events 0-4 (5 events, 3 visible, no frame)"
    assert lines[1:] == [
        "  0: draw @ 0",
        "  1: internal @ 1 (hidden)",
        "  2: wtf.webgl#setContext @ 2 (hidden)",
        "  3: internal @ 3 (hidden)",
        "  4: draw @ 4",
    ]


def test_cli_events_visible_json(tmp_path: Path) -> None:
    trace = _write_trace_fixture(tmp_path / "trace.json")
    runner = CliRunner()
    result = runner.invoke(app, ["events", str(trace), "0", "--visible", "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout.strip())
    assert payload["visible_only"] is True
    assert [event["index"] for event in payload["events"]] == [0, 2, 4]
    assert payload["events"][1]["args"] == {"handle": 1}


def test_cli_events_pretty_json(tmp_path: Path) -> None:
    trace = _write_trace_fixture(tmp_path / "trace.json")
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["--pretty-json", "events", str(trace), "0", "--visible", "--json"],
    )

    assert result.exit_code == 0
    assert "\n  " in result.stdout
    assert json.loads(result.stdout)["step"] == 0


def test_cli_events_step_out_of_range(tmp_path: Path) -> None:
    trace = _write_trace_fixture(tmp_path / "trace.json")
    runner = CliRunner()
    result = runner.invoke(app, ["events", str(trace), "3", "--json"])

    assert result.exit_code == 2
    payload = json.loads(result.stdout.strip())
    assert payload["status"] == "error"
    assert "out of range" in payload["message"]
