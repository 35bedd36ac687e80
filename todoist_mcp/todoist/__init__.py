"""Todoist REST API client."""
from todoist_mcp.todoist.client import TodoistAPIError, TodoistClient

__all__ = ["TodoistAPIError", "TodoistClient"]
