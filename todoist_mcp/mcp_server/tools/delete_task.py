"""
Delete Task MCP Tool

Finds a task by content fragment and deletes it permanently.
"""

from todoist_mcp.mcp_server.base_tool import BaseTodoistTool, register_tool_class


class DeleteTaskTool(BaseTodoistTool):
    """MCP Tool for deleting tasks found by name"""

    name = "todoist_delete_task"
    description = "Delete a task from Todoist by searching for it by name"
    input_schema = {
        "type": "object",
        "properties": {
            "task_name": {
                "type": "string",
                "description": "Name/content of the task to search for and delete",
            },
        },
        "required": ["task_name"],
    }

    async def execute(self, task_name: str, **kwargs) -> str:
        task = await self.find_task(task_name)
        await self.client.delete_task(task.id)
        return f'Successfully deleted task: "{task.content}"'


def register_delete_task_tool(mcp_server, client):
    """Register todoist_delete_task with MCP server"""
    register_tool_class(mcp_server, DeleteTaskTool, client)
