import json
from pathlib import Path

from typer.testing import CliRunner

from steppack.cli.app import app


def _write_trace_fixture(path: Path) -> Path:
    payload = {
        "event_types": [
            {"name": "draw"},
            {"name": "internal", "hidden": True},
            {"name": "wtf.webgl#createContext", "hidden": True},
            {"name": "wtf.timing#frameStart", "hidden": True},
            {"name": "wtf.timing#frameEnd", "hidden": True},
        ],
        "events": [
            {"type": "wtf.webgl#createContext", "time": 0, "args": {"handle": 1}},
            {"type": "internal", "time": 1},
            {"type": "wtf.timing#frameStart", "time": 2, "args": {"number": 0}},
            {"type": "draw", "time": 3},
            {"type": "wtf.timing#frameEnd", "time": 4},
            {"type": "draw", "time": 5},
        ],
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_cli_steps_text_output(tmp_path: Path) -> None:
    trace = _write_trace_fixture(tmp_path / "trace.json")
    runner = CliRunner()
    result = runner.invoke(app, ["steps", str(trace)])

    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert lines == [
        "step 0: events 0-1 (2 events, 1 visible, no frame)",
        "step 1: events 2-4 (3 events, 1 visible, frame 0)",
        "step 2: events 5-5 (1 events, 1 visible, no frame)",
    ]


def test_cli_steps_json_output(tmp_path: Path) -> None:
    trace = _write_trace_fixture(tmp_path / "trace.json")
    runner = CliRunner()
    result = runner.invoke(app, ["steps", str(trace), "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout.strip())

    assert payload["status"] == "ok"
    assert payload["total_events"] == 6
    assert [step["start_event_id"] for step in payload["steps"]] == [0, 2, 5]
    assert payload["steps"][1]["frame"] == {"number": 0, "start_event_id": 2, "end_event_id": 4}
    assert payload["steps"][1]["initial_contexts"] == ["1"]


def test_cli_steps_always_visible_option(tmp_path: Path) -> None:
    trace = _write_trace_fixture(tmp_path / "trace.json")
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["steps", str(trace), "--always-visible", "internal", "--json"],
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout.strip())
    assert payload["steps"][0]["visible_event_count"] == 2


def test_cli_steps_invalid_always_visible_name(tmp_path: Path) -> None:
    trace = _write_trace_fixture(tmp_path / "trace.json")
    runner = CliRunner()
    result = runner.invoke(app, ["steps", str(trace), "--always-visible", " "])

    assert result.exit_code == 2
    assert "steps failed" in result.output


def test_cli_steps_missing_trace_json_error(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["steps", str(tmp_path / "missing.json"), "--json"])

    assert result.exit_code == 1
    payload = json.loads(result.stdout.strip())
    assert payload["status"] == "error"
    assert payload["exit_code"] == 1


def test_cli_steps_malformed_trace(tmp_path: Path) -> None:
    trace = tmp_path / "broken.json"
    trace.write_text("[]", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["steps", str(trace)])

    assert result.exit_code == 1
    assert "root must be an object" in result.output


def test_cli_steps_empty_trace(tmp_path: Path) -> None:
    trace = tmp_path / "empty.json"
    trace.write_text("{}", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["steps", str(trace)])

    assert result.exit_code == 0
    assert "no steps" in result.stdout


def test_cli_quiet_suppresses_text_output(tmp_path: Path) -> None:
    trace = _write_trace_fixture(tmp_path / "trace.json")
    runner = CliRunner()
    result = runner.invoke(app, ["--quiet", "steps", str(trace)])

    assert result.exit_code == 0
    assert result.stdout == ""


def test_cli_steps_directory_path_json_error(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["steps", str(tmp_path), "--json"])

    assert result.exit_code == 1
    payload = json.loads(result.stdout.strip())
    assert payload["status"] == "error"
    assert "could not be read" in payload["message"]


def test_cli_steps_unhashable_context_handle_json_error(tmp_path: Path) -> None:
    trace = tmp_path / "trace.json"
    trace.write_text(
        json.dumps(
            {
                "event_types": [{"name": "wtf.webgl#createContext", "hidden": True}],
                "events": [
                    {"type": "wtf.webgl#createContext", "time": 0, "args": {"handle": {"id": 1}}}
                ],
            }
        ),
        encoding="utf-8",
    )
    runner = CliRunner()
    result = runner.invoke(app, ["steps", str(trace), "--json"])

    assert result.exit_code == 1
    payload = json.loads(result.stdout.strip())
    assert payload["status"] == "error"
    assert "context handle must be a scalar" in payload["message"]
