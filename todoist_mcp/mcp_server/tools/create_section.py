"""
Create Section MCP Tool

Creates a section inside a project found by name fragment.
"""

from typing import Optional

from todoist_mcp.mcp_server.base_tool import BaseTodoistTool, register_tool_class
from todoist_mcp.mcp_server.formatting import format_section_created


class CreateSectionTool(BaseTodoistTool):
    """MCP Tool for creating sections"""

    name = "todoist_create_section"
    description = "Create a new section in a Todoist project found by name"
    input_schema = {
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "description": "Name of the section",
            },
            "project_name": {
                "type": "string",
                "description": "Name of the project to add the section to",
            },
            "order": {
                "type": "number",
                "description": "Position of the section within the project (optional)",
            },
        },
        "required": ["name", "project_name"],
    }

    async def execute(self, name: str, project_name: str,
                      order: Optional[int] = None, **kwargs) -> str:
        project = await self.find_project(project_name)
        section = await self.client.add_section(name=name, project_id=project.id, order=order)
        return format_section_created(project, section)


def register_create_section_tool(mcp_server, client):
    """Register todoist_create_section with MCP server"""
    register_tool_class(mcp_server, CreateSectionTool, client)
