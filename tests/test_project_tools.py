"""Tests for the project tools."""
import pytest

from todoist_mcp.schemas.todoist import Project


@pytest.mark.asyncio
async def test_get_projects_limit_one(server, client):
    client.projects = [
        Project(id="p1", name="Inbox"),
        Project(id="p2", name="Work"),
        Project(id="p3", name="Home"),
    ]

    result = await server.call_tool("todoist_get_projects", {"limit": 1})

    assert not result.is_error
    assert result.text == "Projects:\n\n- **Inbox** (ID: p1)"


@pytest.mark.asyncio
async def test_get_projects_renders_optional_fields(server, seeded_client):
    seeded_client.projects.append(Project(id="p3", name="Garden", parent_id="p2"))

    result = await server.call_tool("todoist_get_projects", {})

    assert result.text == (
        "Projects:\n\n"
        "- **Work** (ID: p1)\n  Color: blue"
        "\n\n- **Home Errands** (ID: p2)\n  Favorite: Yes"
        "\n\n- **Garden** (ID: p3)\n  Parent ID: p2"
    )


@pytest.mark.asyncio
async def test_get_projects_empty(server, client):
    result = await server.call_tool("todoist_get_projects", {})
    assert result.text == "No projects found"
    assert not result.is_error


@pytest.mark.asyncio
async def test_create_project(server, client):
    result = await server.call_tool("todoist_create_project", {"name": "Garden", "color": "green"})

    assert client.called("add_project") == [{"name": "Garden", "color": "green", "parent_id": None}]
    assert result.text == "Project created:\nName: Garden\nID: 1001\nColor: green"


@pytest.mark.asyncio
async def test_update_project_by_name_fragment(server, seeded_client):
    result = await server.call_tool("todoist_update_project", {"project_name": "errands", "name": "Chores"})

    assert seeded_client.called("update_project") == [{"project_id": "p2", "name": "Chores", "color": None}]
    assert result.text == 'Project "Home Errands" updated:\nNew Name: Chores'


@pytest.mark.asyncio
async def test_update_project_not_found(server, seeded_client):
    result = await server.call_tool("todoist_update_project", {"project_name": "Garden", "name": "x"})

    assert result.is_error
    assert result.text == 'Could not find a project matching "Garden"'
    assert seeded_client.called("update_project") == []


@pytest.mark.asyncio
async def test_delete_project(server, seeded_client):
    result = await server.call_tool("todoist_delete_project", {"project_name": "WORK"})

    assert result.text == 'Successfully deleted project: "Work"'
    assert seeded_client.called("delete_project") == [{"project_id": "p1"}]
