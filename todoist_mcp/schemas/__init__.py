"""Schemas for Todoist entities."""
from todoist_mcp.schemas.todoist import Due, Project, Section, Task

__all__ = ["Due", "Project", "Section", "Task"]
