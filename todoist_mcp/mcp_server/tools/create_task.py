"""
Create Task MCP Tool

Creates a new task in Todoist.
"""

from typing import Optional

from todoist_mcp.mcp_server.base_tool import BaseTodoistTool, register_tool_class
from todoist_mcp.mcp_server.formatting import format_task_created


class CreateTaskTool(BaseTodoistTool):
    """MCP Tool for creating tasks"""

    name = "todoist_create_task"
    description = "Create a new task in Todoist with optional description, due date, and priority"
    input_schema = {
        "type": "object",
        "properties": {
            "content": {
                "type": "string",
                "description": "The content/title of the task",
            },
            "description": {
                "type": "string",
                "description": "Detailed description of the task (optional)",
            },
            "due_string": {
                "type": "string",
                "description": "Natural language due date like 'tomorrow', 'next Monday', 'Jan 23' (optional)",
            },
            "priority": {
                "type": "number",
                "description": "Task priority from 1 (normal) to 4 (urgent) (optional)",
                "enum": [1, 2, 3, 4],
            },
            "project_id": {
                "type": "string",
                "description": "ID of the project to add the task to (optional)",
            },
            "section_id": {
                "type": "string",
                "description": "ID of the section to add the task to (optional)",
            },
        },
        "required": ["content"],
    }

    async def execute(self, content: str, description: Optional[str] = None,
                      due_string: Optional[str] = None, priority: Optional[int] = None,
                      project_id: Optional[str] = None, section_id: Optional[str] = None,
                      **kwargs) -> str:
        task = await self.client.add_task(
            content=content,
            description=description,
            due_string=due_string,
            priority=priority,
            project_id=project_id,
            section_id=section_id,
        )
        return format_task_created(task)


def register_create_task_tool(mcp_server, client):
    """Register todoist_create_task with MCP server"""
    register_tool_class(mcp_server, CreateTaskTool, client)
