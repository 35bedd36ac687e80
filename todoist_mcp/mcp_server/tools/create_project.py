"""
Create Project MCP Tool

Creates a new project, optionally nested under a parent project.
"""

from typing import Optional

from todoist_mcp.mcp_server.base_tool import BaseTodoistTool, register_tool_class
from todoist_mcp.mcp_server.formatting import format_project_created


class CreateProjectTool(BaseTodoistTool):
    """MCP Tool for creating projects"""

    name = "todoist_create_project"
    description = "Create a new project in Todoist with optional color and parent project"
    input_schema = {
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "description": "Name of the project",
            },
            "color": {
                "type": "string",
                "description": "Color of the project like 'red', 'blue', 'berry_red' (optional)",
            },
            "parent_id": {
                "type": "string",
                "description": "ID of the parent project to nest this project under (optional)",
            },
        },
        "required": ["name"],
    }

    async def execute(self, name: str, color: Optional[str] = None,
                      parent_id: Optional[str] = None, **kwargs) -> str:
        project = await self.client.add_project(name=name, color=color, parent_id=parent_id)
        return format_project_created(project)


def register_create_project_tool(mcp_server, client):
    """Register todoist_create_project with MCP server"""
    register_tool_class(mcp_server, CreateProjectTool, client)
