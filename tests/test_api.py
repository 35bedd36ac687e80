"""Tests for the HTTP surface."""
import pytest
from fastapi.testclient import TestClient

from todoist_mcp.api import create_app


@pytest.fixture
def http(server, seeded_client):
    with TestClient(create_app(server)) as test_client:
        yield test_client


def test_health(http):
    response = http.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_list_tools_in_catalog_order(http, server):
    response = http.get("/tools")

    assert response.status_code == 200
    tools = response.json()["tools"]
    assert [t["name"] for t in tools] == server.list_tools()
    assert tools[0]["inputSchema"]["required"] == ["content"]


def test_call_tool_success(http):
    response = http.post("/tools/todoist_get_projects/call", json={"arguments": {"limit": 1}})

    assert response.status_code == 200
    assert response.json() == {
        "content": [{"type": "text", "text": "Projects:\n\n- **Work** (ID: p1)\n  Color: blue"}],
        "isError": False,
    }


def test_call_unknown_tool_is_not_an_http_failure(http):
    response = http.post("/tools/todoist_nope/call", json={"arguments": {}})

    assert response.status_code == 200
    assert response.json()["isError"] is True
    assert response.json()["content"][0]["text"] == "Unknown tool: todoist_nope"


def test_call_without_arguments(http):
    response = http.post("/tools/todoist_get_tasks/call", json={})

    assert response.status_code == 200
    assert response.json()["isError"] is True
    assert response.json()["content"][0]["text"] == "Error: No arguments provided"


def test_metrics_endpoint(http):
    http.post("/tools/todoist_get_tasks/call", json={"arguments": {}})

    counters = http.get("/metrics").json()["counters"]
    assert counters["tool_calls_total"] == 1
