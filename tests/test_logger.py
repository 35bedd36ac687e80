import json
import logging

import pytest

from todoist_mcp.utils.logger import StructuredLogger, get_logger, redact


def test_redact_drops_credential_keys():
    assert redact({"task_name": "milk", "api_token": "x", "Password": "y"}) == {"task_name": "milk"}
    assert redact(None) == {}


def test_structured_logger_writes_json(caplog):
    audit = get_logger("todoist_mcp.test_audit")

    with caplog.at_level(logging.INFO, logger="todoist_mcp.test_audit"):
        audit.info("tool_invocation", tool="todoist_get_tasks", params={"limit": 3})

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["message"] == "tool_invocation"
    assert payload["level"] == "INFO"
    assert payload["service"] == "todoist_mcp.test_audit"
    assert payload["tool"] == "todoist_get_tasks"
    assert payload["params"] == {"limit": 3}


def test_structured_logger_exposes_only_info():
    assert not hasattr(StructuredLogger, "debug")
    assert not hasattr(StructuredLogger, "warning")
    assert not hasattr(StructuredLogger, "error")


@pytest.mark.asyncio
async def test_tool_call_is_audited_without_credentials(server, seeded_client, caplog):
    with caplog.at_level(logging.INFO, logger="todoist_mcp.audit"):
        await server.call_tool("todoist_get_tasks", {"filter": "today", "api_token": "x"})

    audits = [json.loads(r.getMessage()) for r in caplog.records if r.name == "todoist_mcp.audit"]
    assert audits[-1]["tool"] == "todoist_get_tasks"
    assert "api_token" not in audits[-1]["params"]
