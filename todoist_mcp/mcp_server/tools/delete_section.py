"""
Delete Section MCP Tool

Deletes a section found by name fragment within a project found by name
fragment.
"""

from todoist_mcp.mcp_server.base_tool import BaseTodoistTool, register_tool_class


class DeleteSectionTool(BaseTodoistTool):
    """MCP Tool for deleting sections"""

    name = "todoist_delete_section"
    description = "Delete a section from a Todoist project by searching for the project and section by name"
    input_schema = {
        "type": "object",
        "properties": {
            "section_name": {
                "type": "string",
                "description": "Name of the section to search for and delete",
            },
            "project_name": {
                "type": "string",
                "description": "Name of the project containing the section",
            },
        },
        "required": ["section_name", "project_name"],
    }

    async def execute(self, section_name: str, project_name: str, **kwargs) -> str:
        project = await self.find_project(project_name)
        section = await self.find_section(project, section_name)
        await self.client.delete_section(section.id)
        return f'Successfully deleted section: "{section.name}" from project "{project.name}"'


def register_delete_section_tool(mcp_server, client):
    """Register todoist_delete_section with MCP server"""
    register_tool_class(mcp_server, DeleteSectionTool, client)
