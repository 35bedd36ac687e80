"""
Todoist MCP Server Package

Exposes the Todoist API as MCP tools so AI agents can manage tasks,
projects and sections.
"""

__version__ = "0.1.0"
