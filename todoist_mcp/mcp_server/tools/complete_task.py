"""
Complete Task MCP Tool

Finds a task by content fragment and marks it as completed.
"""

from todoist_mcp.mcp_server.base_tool import BaseTodoistTool, register_tool_class


class CompleteTaskTool(BaseTodoistTool):
    """MCP Tool for completing tasks found by name"""

    name = "todoist_complete_task"
    description = "Mark a task as complete by searching for it by name"
    input_schema = {
        "type": "object",
        "properties": {
            "task_name": {
                "type": "string",
                "description": "Name/content of the task to search for and complete",
            },
        },
        "required": ["task_name"],
    }

    async def execute(self, task_name: str, **kwargs) -> str:
        task = await self.find_task(task_name)
        await self.client.close_task(task.id)
        return f'Successfully completed task: "{task.content}"'


def register_complete_task_tool(mcp_server, client):
    """Register todoist_complete_task with MCP server"""
    register_tool_class(mcp_server, CompleteTaskTool, client)
