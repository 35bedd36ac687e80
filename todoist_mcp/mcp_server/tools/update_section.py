"""
Update Section MCP Tool

Renames a section found by name fragment within a project found by name
fragment.
"""

from typing import Optional

from todoist_mcp.mcp_server.base_tool import BaseTodoistTool, register_tool_class
from todoist_mcp.mcp_server.formatting import format_section_updated


class UpdateSectionTool(BaseTodoistTool):
    """MCP Tool for renaming sections"""

    name = "todoist_update_section"
    description = "Update a section in a Todoist project by searching for the project and section by name"
    input_schema = {
        "type": "object",
        "properties": {
            "section_name": {
                "type": "string",
                "description": "Name of the section to search for and update",
            },
            "project_name": {
                "type": "string",
                "description": "Name of the project containing the section",
            },
            "name": {
                "type": "string",
                "description": "New name for the section (optional)",
            },
        },
        "required": ["section_name", "project_name"],
    }

    async def execute(self, section_name: str, project_name: str,
                      name: Optional[str] = None, **kwargs) -> str:
        project = await self.find_project(project_name)
        section = await self.find_section(project, section_name)

        # Nothing to rename to: report the section unchanged
        if name is None:
            return format_section_updated(project, section, section)

        updated = await self.client.update_section(section.id, name=name)
        return format_section_updated(project, section, updated)


def register_update_section_tool(mcp_server, client):
    """Register todoist_update_section with MCP server"""
    register_tool_class(mcp_server, UpdateSectionTool, client)
