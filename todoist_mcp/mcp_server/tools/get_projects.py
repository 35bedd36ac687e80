"""
Get Projects MCP Tool

Lists all projects, truncated to a limit.
"""

from typing import Optional

from todoist_mcp.mcp_server.base_tool import BaseTodoistTool, register_tool_class
from todoist_mcp.mcp_server.formatting import format_project_list


class GetProjectsTool(BaseTodoistTool):
    """MCP Tool for listing projects"""

    name = "todoist_get_projects"
    description = "Get a list of all projects from Todoist"
    input_schema = {
        "type": "object",
        "properties": {
            "limit": {
                "type": "number",
                "description": "Maximum number of projects to return (optional)",
                "default": 50,
            },
        },
    }

    async def execute(self, limit: Optional[int] = None, **kwargs) -> str:
        projects = await self.client.get_projects()
        if limit is not None and limit > 0:
            projects = projects[:int(limit)]
        return format_project_list(projects)


def register_get_projects_tool(mcp_server, client):
    """Register todoist_get_projects with MCP server"""
    register_tool_class(mcp_server, GetProjectsTool, client)
