"""
Get Tasks MCP Tool

Lists active tasks with optional project, section, priority and filter
narrowing, truncated to a limit.
"""

from typing import Optional

from todoist_mcp.mcp_server.base_tool import BaseTodoistTool, register_tool_class
from todoist_mcp.mcp_server.formatting import format_task_list


class GetTasksTool(BaseTodoistTool):
    """MCP Tool for listing tasks"""

    name = "todoist_get_tasks"
    description = "Get a list of tasks from Todoist with various filters"
    input_schema = {
        "type": "object",
        "properties": {
            "project_id": {
                "type": "string",
                "description": "Filter tasks by project ID (optional)",
            },
            "filter": {
                "type": "string",
                "description": "Natural language filter like 'today', 'tomorrow', 'next week', 'priority 1', 'overdue' (optional)",
            },
            "priority": {
                "type": "number",
                "description": "Filter by priority level (1-4) (optional)",
                "enum": [1, 2, 3, 4],
            },
            "limit": {
                "type": "number",
                "description": "Maximum number of tasks to return (optional)",
                "default": 10,
            },
            "section_id": {
                "type": "string",
                "description": "Filter tasks by section ID (optional)",
            },
        },
    }

    async def execute(self, project_id: Optional[str] = None, filter: Optional[str] = None,
                      priority: Optional[int] = None, limit: Optional[int] = None,
                      section_id: Optional[str] = None, **kwargs) -> str:
        tasks = await self.client.get_tasks(project_id=project_id, filter=filter)

        # Exact-match filters applied locally, in the order the API returned tasks
        if priority is not None:
            tasks = [t for t in tasks if t.priority == priority]
        if section_id is not None:
            tasks = [t for t in tasks if t.section_id == section_id]
        if limit is not None and limit > 0:
            tasks = tasks[:int(limit)]

        return format_task_list(tasks)


def register_get_tasks_tool(mcp_server, client):
    """Register todoist_get_tasks with MCP server"""
    register_tool_class(mcp_server, GetTasksTool, client)
