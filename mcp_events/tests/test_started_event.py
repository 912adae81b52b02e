import json
import time

import pytest

from mcp_events.events.started import ToolExecutionStartedEvent


def test_started_event_properties():
    timestamp = time.time()
    arguments = {"arg1": "value1"}

    event = ToolExecutionStartedEvent(
        tool_name="test_tool",
        plugin_id="my_module.test_tool",
        arguments=arguments,
        request_id="req-123",
        timestamp=timestamp,
    )

    assert event.tool_name == "test_tool"
    assert event.plugin_id == "my_module.test_tool"
    assert event.arguments == {"arg1": "value1"}
    assert event.request_id == "req-123"
    assert event.timestamp == timestamp


@pytest.mark.parametrize("request_id", [None, 42, "req-123"])
def test_started_event_keeps_request_id_type(request_id):
    event = ToolExecutionStartedEvent(
        tool_name="test_tool",
        plugin_id="my_module.test_tool",
        arguments={},
        request_id=request_id,
        timestamp=1.0,
    )

    assert event.request_id == request_id
    assert type(event.to_json()["request_id"]) is type(request_id)
    assert json.loads(event.to_json_string())["request_id"] == request_id


def test_started_event_is_immutable():
    event = ToolExecutionStartedEvent("t", "p", {}, None, 1.0)

    with pytest.raises(AttributeError):
        event.tool_name = "other"  # type: ignore[misc]


def test_started_event_detaches_from_caller_arguments():
    arguments = {"path": "/tmp/a"}
    event = ToolExecutionStartedEvent("t", "p", arguments, None, 1.0)

    arguments["path"] = "/tmp/b"
    event.to_json()["arguments"]["path"] = "/tmp/c"

    assert event.arguments == {"path": "/tmp/a"}


def test_started_event_json_projection():
    timestamp = 1704067200.123456
    event = ToolExecutionStartedEvent(
        tool_name="test_tool",
        plugin_id="my_module.test_tool",
        arguments={"key": "value"},
        request_id="req-123",
        timestamp=timestamp,
    )

    assert event.to_json() == {
        "event": "tool_execution_started",
        "tool_name": "test_tool",
        "plugin_id": "my_module.test_tool",
        "arguments": {"key": "value"},
        "request_id": "req-123",
        "timestamp": timestamp,
    }

    encoded = event.to_json_string()
    assert "tool_execution_started" in encoded
    assert json.loads(encoded)["timestamp"] == 1704067200.123456
