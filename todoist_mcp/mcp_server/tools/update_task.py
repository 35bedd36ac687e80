"""
Update Task MCP Tool

Finds a task by content fragment and updates it. Field changes go
through the update call; a new section or project goes through the move
call, and only the calls that have something to send are made.
"""

from typing import Optional

from todoist_mcp.mcp_server.base_tool import BaseTodoistTool, register_tool_class
from todoist_mcp.mcp_server.formatting import format_task_updated


class UpdateTaskTool(BaseTodoistTool):
    """MCP Tool for updating tasks found by name"""

    name = "todoist_update_task"
    description = "Update an existing task in Todoist by searching for it by name and then updating it"
    input_schema = {
        "type": "object",
        "properties": {
            "task_name": {
                "type": "string",
                "description": "Name/content of the task to search for and update",
            },
            "content": {
                "type": "string",
                "description": "New content/title for the task (optional)",
            },
            "description": {
                "type": "string",
                "description": "New description for the task (optional)",
            },
            "due_string": {
                "type": "string",
                "description": "New due date in natural language like 'tomorrow', 'next Monday' (optional)",
            },
            "priority": {
                "type": "number",
                "description": "New priority level from 1 (normal) to 4 (urgent) (optional)",
                "enum": [1, 2, 3, 4],
            },
            "project_id": {
                "type": "string",
                "description": "ID of the project to move the task to (optional)",
            },
            "section_id": {
                "type": "string",
                "description": "ID of the section to move the task to (optional)",
            },
        },
        "required": ["task_name"],
    }

    async def execute(self, task_name: str, content: Optional[str] = None,
                      description: Optional[str] = None, due_string: Optional[str] = None,
                      priority: Optional[int] = None, project_id: Optional[str] = None,
                      section_id: Optional[str] = None, **kwargs) -> str:
        task = await self.find_task(task_name)
        updated = task

        fields = {"content": content, "description": description, "due_string": due_string, "priority": priority}
        if any(value is not None for value in fields.values()):
            updated = await self.client.update_task(task.id, **fields)

        # The move endpoint takes a single destination; a section implies its project
        if section_id is not None:
            moved = await self.client.move_task(task.id, section_id=section_id)
        elif project_id is not None:
            moved = await self.client.move_task(task.id, project_id=project_id)
        else:
            moved = None
        if moved is not None:
            updated = moved

        return format_task_updated(task, updated)


def register_update_task_tool(mcp_server, client):
    """Register todoist_update_task with MCP server"""
    register_tool_class(mcp_server, UpdateTaskTool, client)
