import os

import pytest

from mcp_events.core.config import EventSettings
from mcp_events.core.exceptions import ConfigurationError
from mcp_events.core.logging_config import _file_handler, _plain_text_renderer


@pytest.fixture(autouse=True)
def _restore_env():
    original = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original)


def test_event_settings_reads_env(monkeypatch):
    monkeypatch.setenv("MCP_EVENTS_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("MCP_EVENTS_LOG_ARGUMENTS", "1")
    monkeypatch.setenv("MCP_EVENTS_APP_ENV", "production")

    settings = EventSettings()

    assert settings.log_level == "DEBUG"
    assert settings.log_arguments is True
    assert settings.app_env == "production"


def test_event_settings_defaults(monkeypatch):
    for name in ("MCP_EVENTS_LOG_LEVEL", "MCP_EVENTS_LOG_FILE", "MCP_EVENTS_LOG_ARGUMENTS"):
        monkeypatch.delenv(name, raising=False)

    settings = EventSettings(_env_file=None)

    assert settings.log_level == "INFO"
    assert settings.log_file is None
    assert settings.log_arguments is False


def test_file_handler_rejects_unwritable_path(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")

    with pytest.raises(ConfigurationError):
        _file_handler(str(blocker / "events.log"), "INFO")


def test_plain_text_renderer_formats_key_values():
    line = _plain_text_renderer(
        None,
        "warning",
        {
            "timestamp": "2024-01-01T00:00:00Z",
            "level": "warning",
            "event": "tool_execution_failed",
            "reason": "policy_blocked",
            "request_id": None,
        },
    )

    assert line == "2024-01-01T00:00:00Z [WARNING] tool_execution_failed reason=policy_blocked"
