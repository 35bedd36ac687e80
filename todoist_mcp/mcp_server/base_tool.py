"""
MCP Base Tool Interface

Provides base functionality for all Todoist MCP tools including:
- Tool descriptor (name, description, input schema) on the class
- Name-fragment lookup of tasks, projects and sections
- Error type and error codes
- Audit logging
"""

from typing import Any, Callable, Dict, Iterable, Optional, TypeVar
from abc import ABC, abstractmethod
import logging

from todoist_mcp.schemas.todoist import Project, Section, Task
from todoist_mcp.utils.logger import get_logger, redact

logger = logging.getLogger(__name__)
audit_logger = get_logger("todoist_mcp.audit")

INVALID_ARGUMENTS = "INVALID_ARGUMENTS"
NOT_FOUND = "NOT_FOUND"
UNKNOWN_TOOL = "UNKNOWN_TOOL"
INTERNAL_ERROR = "INTERNAL_ERROR"

T = TypeVar("T")


class MCPToolError(Exception):
    """Base exception for MCP tool errors"""
    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


def find_first_match(items: Iterable[T], fragment: str, key: Callable[[T], str]) -> Optional[T]:
    """
    Return the first item whose key contains the fragment, ignoring case

    Args:
        items: Candidates in the order the remote service returned them
        fragment: Human-readable name fragment to search for
        key: Extracts the searchable text from an item

    Returns:
        The first matching item, or None
    """
    needle = fragment.lower()
    for item in items:
        if needle in (key(item) or "").lower():
            return item
    return None


class BaseTodoistTool(ABC):
    """
    Base class for all Todoist MCP tools

    Subclasses declare `name`, `description` and `input_schema`; the schema
    is the only place a tool's argument contract is written down.
    """

    name: str = ""
    description: str = ""
    input_schema: Dict[str, Any] = {"type": "object", "properties": {}}

    def __init__(self, client):
        self.client = client

    def log_tool_invocation(self, params: Dict[str, Any]) -> None:
        """
        Log MCP tool invocation for audit trail

        Args:
            params: Tool parameters (credential-like keys are dropped)
        """
        audit_logger.info("tool_invocation", tool=self.name, params=redact(params))

    async def find_task(self, task_name: str) -> Task:
        """
        Resolve a task by content fragment

        Raises:
            MCPToolError: NOT_FOUND if no active task matches
        """
        tasks = await self.client.get_tasks()
        task = find_first_match(tasks, task_name, lambda t: t.content)
        if task is None:
            logger.warning(f"{self.name}: no task matching '{task_name}' among {len(tasks)} tasks")
            raise MCPToolError(
                code=NOT_FOUND,
                message=f'Could not find a task matching "{task_name}"',
                details={"task_name": task_name}
            )
        return task

    async def find_project(self, project_name: str) -> Project:
        """
        Resolve a project by name fragment

        Raises:
            MCPToolError: NOT_FOUND if no project matches
        """
        projects = await self.client.get_projects()
        project = find_first_match(projects, project_name, lambda p: p.name)
        if project is None:
            logger.warning(f"{self.name}: no project matching '{project_name}'")
            raise MCPToolError(
                code=NOT_FOUND,
                message=f'Could not find a project matching "{project_name}"',
                details={"project_name": project_name}
            )
        return project

    async def find_section(self, project: Project, section_name: str) -> Section:
        """
        Resolve a section by name fragment within one project

        Raises:
            MCPToolError: NOT_FOUND if no section of the project matches
        """
        sections = await self.client.get_sections(project_id=project.id)
        section = find_first_match(sections, section_name, lambda s: s.name)
        if section is None:
            logger.warning(f"{self.name}: no section matching '{section_name}' in project {project.id}")
            raise MCPToolError(
                code=NOT_FOUND,
                message=f'Could not find a section matching "{section_name}" in project "{project.name}"',
                details={"section_name": section_name, "project_id": project.id}
            )
        return section

    @classmethod
    def descriptor(cls) -> Dict[str, Any]:
        """Wire form of the tool descriptor"""
        return {
            "name": cls.name,
            "description": cls.description,
            "inputSchema": cls.input_schema,
        }

    @abstractmethod
    async def execute(self, **kwargs) -> str:
        """
        Execute the tool logic

        Must be implemented by subclasses

        Args:
            **kwargs: Validated tool arguments

        Returns:
            Human-readable result text
        """


def register_tool_class(mcp_server, tool_cls, client) -> None:
    """Register a BaseTodoistTool subclass with the MCP server"""
    from todoist_mcp.mcp_server.server import MCPTool

    async def handler(arguments: Dict[str, Any]) -> str:
        tool = tool_cls(client)
        tool.log_tool_invocation(arguments)
        return await tool.execute(**arguments)

    mcp_server.register_tool(MCPTool(
        name=tool_cls.name,
        description=tool_cls.description,
        input_schema=tool_cls.input_schema,
        handler=handler,
    ))
