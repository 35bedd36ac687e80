"""
Delete Project MCP Tool

Finds a project by name fragment and deletes it along with its tasks.
"""

from todoist_mcp.mcp_server.base_tool import BaseTodoistTool, register_tool_class


class DeleteProjectTool(BaseTodoistTool):
    """MCP Tool for deleting projects found by name"""

    name = "todoist_delete_project"
    description = "Delete a project from Todoist by searching for it by name"
    input_schema = {
        "type": "object",
        "properties": {
            "project_name": {
                "type": "string",
                "description": "Name of the project to search for and delete",
            },
        },
        "required": ["project_name"],
    }

    async def execute(self, project_name: str, **kwargs) -> str:
        project = await self.find_project(project_name)
        await self.client.delete_project(project.id)
        return f'Successfully deleted project: "{project.name}"'


def register_delete_project_tool(mcp_server, client):
    """Register todoist_delete_project with MCP server"""
    register_tool_class(mcp_server, DeleteProjectTool, client)
