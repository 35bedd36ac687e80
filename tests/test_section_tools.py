"""Tests for the section tools: project lookup first, then section lookup within it."""
import pytest

from todoist_mcp.schemas.todoist import Section


@pytest.mark.asyncio
async def test_get_sections_of_project(server, seeded_client):
    result = await server.call_tool("todoist_get_sections", {"project_name": "work"})

    assert seeded_client.called("get_sections") == [{"project_id": "p1"}]
    assert result.text == (
        'Sections in project "Work":\n\n'
        "- **Backlog** (ID: s1)\n  Order: 1"
        "\n\n- **In Progress** (ID: s2)\n  Order: 2"
    )


@pytest.mark.asyncio
async def test_get_sections_limit(server, seeded_client):
    result = await server.call_tool("todoist_get_sections", {"project_name": "work", "limit": 1})
    assert "In Progress" not in result.text
    assert "Backlog" in result.text


@pytest.mark.asyncio
async def test_get_sections_empty_project(server, seeded_client):
    seeded_client.sections = []

    result = await server.call_tool("todoist_get_sections", {"project_name": "home"})

    assert not result.is_error
    assert result.text == 'No sections found in project "Home Errands"'


@pytest.mark.asyncio
async def test_create_section_in_project(server, seeded_client):
    result = await server.call_tool("todoist_create_section", {"name": "Done", "project_name": "Work", "order": 3})

    assert seeded_client.called("add_section") == [{"name": "Done", "project_id": "p1", "order": 3}]
    assert result.text == "Section created:\nName: Done\nID: 1001\nProject: Work\nOrder: 3"


@pytest.mark.asyncio
async def test_create_section_unknown_project(server, seeded_client):
    result = await server.call_tool("todoist_create_section", {"name": "Done", "project_name": "Garden"})

    assert result.is_error
    assert result.text == 'Could not find a project matching "Garden"'
    assert seeded_client.called("add_section") == []


@pytest.mark.asyncio
async def test_update_section_resolves_within_project(server, seeded_client):
    # "Backlog" exists in both projects; the Home Errands one must be chosen
    result = await server.call_tool("todoist_update_section", {
        "section_name": "backlog",
        "project_name": "home",
        "name": "Someday",
    })

    assert seeded_client.called("update_section") == [{"section_id": "s3", "name": "Someday"}]
    assert result.text == 'Section "Backlog" updated:\nNew Name: Someday\nProject: Home Errands'


@pytest.mark.asyncio
async def test_delete_section(server, seeded_client):
    result = await server.call_tool("todoist_delete_section", {"section_name": "progress", "project_name": "Work"})

    assert result.text == 'Successfully deleted section: "In Progress" from project "Work"'
    assert seeded_client.called("delete_section") == [{"section_id": "s2"}]


@pytest.mark.asyncio
@pytest.mark.parametrize("tool_name", ["todoist_update_section", "todoist_delete_section"])
async def test_unknown_project_short_circuits_section_lookup(server, seeded_client, tool_name):
    result = await server.call_tool(tool_name, {"section_name": "Backlog", "project_name": "Garden", "name": "x"})

    assert result.is_error
    assert result.text == 'Could not find a project matching "Garden"'
    assert seeded_client.called("get_sections") == []


@pytest.mark.asyncio
async def test_unknown_section_reports_both_names(server, seeded_client):
    result = await server.call_tool("todoist_delete_section", {"section_name": "Archive", "project_name": "Work"})

    assert result.is_error
    assert result.text == 'Could not find a section matching "Archive" in project "Work"'
    assert seeded_client.called("delete_section") == []


def test_section_order_accepts_api_alias():
    section = Section.model_validate({"id": 7, "name": "Backlog", "project_id": "p1", "section_order": 4})
    assert section.id == "7"
    assert section.order == 4
