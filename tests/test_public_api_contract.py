import inspect
import json
from pathlib import Path

import stepkit
from steppack.replay import Step


def test_public_api_symbol_list_is_explicit_and_stable() -> None:
    assert stepkit.__all__ == [
        "__version__",
        "EventList",
        "Frame",
        "Step",
        "VisibilityPolicy",
        "find_frames",
        "load_trace",
        "build_steps",
    ]


def test_public_api_function_signatures_and_annotations() -> None:
    expected_parameter_order = {
        "load_trace": ("path",),
        "build_steps": ("trace", "frames", "always_visible"),
    }

    for name, parameters in expected_parameter_order.items():
        function = getattr(stepkit, name)
        signature = inspect.signature(function)
        assert tuple(signature.parameters.keys()) == parameters
        assert "return" in function.__annotations__


def test_public_api_build_steps_from_path(tmp_path: Path) -> None:
    trace = tmp_path / "trace.json"
    trace.write_text(
        json.dumps(
            {
                "event_types": [{"name": "draw"}, {"name": "internal", "hidden": True}],
                "events": [{"type": "draw", "time": 0}, {"type": "internal", "time": 1}],
            }
        ),
        encoding="utf-8",
    )

    steps = stepkit.build_steps(trace)
    pinned = stepkit.build_steps(stepkit.load_trace(trace), always_visible=["internal"])

    assert len(steps) == 1
    assert isinstance(steps[0], Step)
    assert steps[0].visible_events == (0,)
    assert pinned[0].visible_events == (0, 1)
