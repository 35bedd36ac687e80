"""
Tool Catalog

Registers the fixed, ordered set of Todoist tools. The order here is the
order clients see in "list tools".
"""

from typing import Optional
import logging

from todoist_mcp.mcp_server.server import MCPServer
from todoist_mcp.mcp_server.tools.create_task import register_create_task_tool
from todoist_mcp.mcp_server.tools.get_tasks import register_get_tasks_tool
from todoist_mcp.mcp_server.tools.update_task import register_update_task_tool
from todoist_mcp.mcp_server.tools.delete_task import register_delete_task_tool
from todoist_mcp.mcp_server.tools.complete_task import register_complete_task_tool
from todoist_mcp.mcp_server.tools.get_projects import register_get_projects_tool
from todoist_mcp.mcp_server.tools.create_project import register_create_project_tool
from todoist_mcp.mcp_server.tools.update_project import register_update_project_tool
from todoist_mcp.mcp_server.tools.delete_project import register_delete_project_tool
from todoist_mcp.mcp_server.tools.get_sections import register_get_sections_tool
from todoist_mcp.mcp_server.tools.create_section import register_create_section_tool
from todoist_mcp.mcp_server.tools.update_section import register_update_section_tool
from todoist_mcp.mcp_server.tools.delete_section import register_delete_section_tool
from todoist_mcp.utils.metrics import MetricsCollector

logger = logging.getLogger(__name__)

TOOL_REGISTRATIONS = (
    register_create_task_tool,
    register_get_tasks_tool,
    register_update_task_tool,
    register_delete_task_tool,
    register_complete_task_tool,
    register_get_projects_tool,
    register_create_project_tool,
    register_update_project_tool,
    register_delete_project_tool,
    register_get_sections_tool,
    register_create_section_tool,
    register_update_section_tool,
    register_delete_section_tool,
)


def register_all_tools(mcp_server: MCPServer, client) -> None:
    """Register every Todoist tool, in catalog order, bound to one client"""
    for register in TOOL_REGISTRATIONS:
        register(mcp_server, client)


def create_mcp_server(client, metrics: Optional[MetricsCollector] = None) -> MCPServer:
    """
    Build an MCPServer with the full tool catalog

    Args:
        client: Todoist collaborator (TodoistClient or any object with the same methods)
        metrics: Optional metrics collector to share with other components

    Returns:
        Ready-to-serve MCPServer
    """
    mcp_server = MCPServer(metrics=metrics)
    register_all_tools(mcp_server, client)
    logger.info(f"MCP Server initialized with tools: {mcp_server.list_tools()}")
    return mcp_server
