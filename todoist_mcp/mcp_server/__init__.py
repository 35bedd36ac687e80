"""
MCP (Model Context Protocol) Server Package

This package implements the tool catalog, argument validation and
dispatch that expose Todoist to AI agents.
"""
