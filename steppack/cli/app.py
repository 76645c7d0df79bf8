"""Command-line interface for listing trace steps and their events."""

from dataclasses import dataclass
import json
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
from typing import Any

import typer

from steppack.db.event_list import EventList
from steppack.replay import (
    DEFAULT_VISIBILITY_POLICY,
    ReplayError,
    Step,
    build_steps,
)
from steppack.trace import TraceError, read_trace

app = typer.Typer(help="StepKit CLI")


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("stepkit")
    except PackageNotFoundError:
        from steppack import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show StepKit version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json


def _echo(message: str, *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
        )
    typer.echo(rendered, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _fail(message: str, *, code: int, json_output: bool, trace: Path) -> typer.Exit:
    if json_output:
        _echo_json(
            {
                "status": "error",
                "exit_code": code,
                "message": message,
                "trace_path": str(trace),
            }
        )
    else:
        _echo(message, err=True)
    return typer.Exit(code=code)


def _load_steps(
    trace: Path,
    always_visible: list[str] | None,
    *,
    command: str,
    json_output: bool,
) -> tuple[EventList, list[Step]]:
    try:
        policy = (
            DEFAULT_VISIBILITY_POLICY.with_names(*always_visible)
            if always_visible
            else DEFAULT_VISIBILITY_POLICY
        )
    except ReplayError as error:
        raise _fail(
            f"{command} failed: {error}", code=2, json_output=json_output, trace=trace
        ) from error

    try:
        event_list = read_trace(trace)
        steps = build_steps(event_list, policy=policy)
    except (TraceError, ReplayError) as error:
        raise _fail(
            f"{command} failed: {error}", code=1, json_output=json_output, trace=trace
        ) from error
    return event_list, steps


def _render_step_line(position: int, step: Step) -> str:
    frame = f"frame {step.frame.number}" if step.frame is not None else "no frame"
    last = step.end_event_id - 1
    return (
        f"step {position}: events {step.start_event_id}-{last} "
        f"({step.event_count} events, {step.visible_event_count} visible, {frame})"
    )


@app.command()
def steps(
    trace: Path = typer.Argument(..., help="Path to JSON trace file."),
    always_visible: list[str] | None = typer.Option(
        None,
        "--always-visible",
        help="Event type name to keep visible even when hidden. Repeatable.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable step listing.",
    ),
) -> None:
    """List the steps of a trace."""
    event_list, built = _load_steps(
        trace, always_visible, command="steps", json_output=json_output
    )

    if json_output:
        _echo_json(
            {
                "status": "ok",
                "exit_code": 0,
                "trace_path": str(trace),
                "total_events": len(event_list),
                "steps": [step.to_dict() for step in built],
            }
        )
        return

    if not built:
        _echo(f"no steps: {trace} contains no events")
        return
    for position, step in enumerate(built):
        _echo(_render_step_line(position, step))


@app.command()
def events(
    trace: Path = typer.Argument(..., help="Path to JSON trace file."),
    step: int = typer.Argument(..., help="Zero-based step index."),
    visible: bool = typer.Option(
        False,
        "--visible",
        help="Only list visible events.",
    ),
    always_visible: list[str] | None = typer.Option(
        None,
        "--always-visible",
        help="Event type name to keep visible even when hidden. Repeatable.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable event listing.",
    ),
) -> None:
    """List the events of one step."""
    _, built = _load_steps(trace, always_visible, command="events", json_output=json_output)

    if step < 0 or step >= len(built):
        raise _fail(
            f"events failed: step {step} out of range (trace has {len(built)} steps)",
            code=2,
            json_output=json_output,
            trace=trace,
        )

    selected = built[step]
    listed = list(selected.get_event_iterator(visible=visible))

    if json_output:
        _echo_json(
            {
                "status": "ok",
                "exit_code": 0,
                "trace_path": str(trace),
                "step": step,
                "visible_only": visible,
                "events": [event.to_dict() for event in listed],
            }
        )
        return

    _echo(_render_step_line(step, selected))
    for event in listed:
        marker = " (hidden)" if event.hidden else ""
        _echo(f"  {event.index}: {event.name} @ {event.time:g}{marker}")


def main() -> None:
    app()
