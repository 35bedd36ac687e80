"""
Get Sections MCP Tool

Lists the sections of a project found by name fragment.
"""

from typing import Optional

from todoist_mcp.mcp_server.base_tool import BaseTodoistTool, register_tool_class
from todoist_mcp.mcp_server.formatting import format_section_list


class GetSectionsTool(BaseTodoistTool):
    """MCP Tool for listing the sections of a project"""

    name = "todoist_get_sections"
    description = "Get a list of sections in a Todoist project found by name"
    input_schema = {
        "type": "object",
        "properties": {
            "project_name": {
                "type": "string",
                "description": "Name of the project to list sections for",
            },
            "limit": {
                "type": "number",
                "description": "Maximum number of sections to return (optional)",
                "default": 50,
            },
        },
        "required": ["project_name"],
    }

    async def execute(self, project_name: str, limit: Optional[int] = None, **kwargs) -> str:
        project = await self.find_project(project_name)
        sections = await self.client.get_sections(project_id=project.id)
        if limit is not None and limit > 0:
            sections = sections[:int(limit)]
        return format_section_list(project, sections)


def register_get_sections_tool(mcp_server, client):
    """Register todoist_get_sections with MCP server"""
    register_tool_class(mcp_server, GetSectionsTool, client)
