"""
Update Project MCP Tool

Finds a project by name fragment and renames or recolors it.
"""

from typing import Optional

from todoist_mcp.mcp_server.base_tool import BaseTodoistTool, register_tool_class
from todoist_mcp.mcp_server.formatting import format_project_updated


class UpdateProjectTool(BaseTodoistTool):
    """MCP Tool for updating projects found by name"""

    name = "todoist_update_project"
    description = "Update an existing project in Todoist by searching for it by name and then updating it"
    input_schema = {
        "type": "object",
        "properties": {
            "project_name": {
                "type": "string",
                "description": "Name of the project to search for and update",
            },
            "name": {
                "type": "string",
                "description": "New name for the project (optional)",
            },
            "color": {
                "type": "string",
                "description": "New color for the project (optional)",
            },
        },
        "required": ["project_name"],
    }

    async def execute(self, project_name: str, name: Optional[str] = None,
                      color: Optional[str] = None, **kwargs) -> str:
        project = await self.find_project(project_name)
        updated = await self.client.update_project(project.id, name=name, color=color)
        return format_project_updated(project, updated)


def register_update_project_tool(mcp_server, client):
    """Register todoist_update_project with MCP server"""
    register_tool_class(mcp_server, UpdateProjectTool, client)
