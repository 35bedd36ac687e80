"""
MCP Server Implementation

This module implements the tool registry and dispatcher behind the
Todoist MCP server. Every call produces a ToolResult; failures are
reported as error-flagged results, never raised to the transport.
"""

from typing import Any, Awaitable, Callable, Dict, List, Optional
from dataclasses import dataclass
import logging

from todoist_mcp import __version__
from todoist_mcp.mcp_server.base_tool import (
    INTERNAL_ERROR,
    INVALID_ARGUMENTS,
    NOT_FOUND,
    UNKNOWN_TOOL,
    MCPToolError,
)
from todoist_mcp.mcp_server.validation import validate_arguments
from todoist_mcp.utils.metrics import MetricsCollector

logger = logging.getLogger(__name__)

SERVER_NAME = "todoist-mcp-server"


@dataclass(frozen=True)
class MCPTool:
    """MCP Tool definition"""
    name: str
    description: str
    input_schema: Dict[str, Any]
    handler: Callable[[Dict[str, Any]], Awaitable[str]]


@dataclass(frozen=True)
class ToolResult:
    """Outcome of one tool call: a text block plus an error flag"""
    text: str
    is_error: bool = False
    error_code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }


def create_error_result(error: MCPToolError) -> ToolResult:
    """
    Convert an MCPToolError into an error-flagged result

    Not-found messages are shown as-is; everything else is prefixed with "Error: ".
    """
    text = error.message if error.code == NOT_FOUND else f"Error: {error.message}"
    return ToolResult(text=text, is_error=True, error_code=error.code)


class MCPServer:
    """
    MCP Server for Todoist

    Holds the ordered tool catalog and dispatches tool calls to handlers.
    """

    def __init__(self, name: str = SERVER_NAME, version: str = __version__,
                 metrics: Optional[MetricsCollector] = None):
        self.tools: Dict[str, MCPTool] = {}
        self.name = name
        self.version = version
        self.metrics = metrics or MetricsCollector()
        logger.info(f"Initializing MCP Server: {self.name}")

    def register_tool(self, tool: MCPTool):
        """Register a tool with the MCP server"""
        if tool.name in self.tools:
            logger.warning(f"Tool {tool.name} already registered, overwriting")

        self.tools[tool.name] = tool
        logger.debug(f"Registered MCP tool: {tool.name}")

    def get_tool(self, name: str) -> Optional[MCPTool]:
        """Get a registered tool by name"""
        return self.tools.get(name)

    def list_tools(self) -> List[str]:
        """List all registered tool names in registration order"""
        return list(self.tools.keys())

    def get_tool_schemas(self) -> List[Dict[str, Any]]:
        """Get descriptors for all registered tools, in registration order"""
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "inputSchema": tool.input_schema,
            }
            for tool in self.tools.values()
        ]

    async def call_tool(self, tool_name: str, arguments: Optional[Dict[str, Any]]) -> ToolResult:
        """
        Invoke a tool and render its outcome

        Args:
            tool_name: Name of the tool to invoke
            arguments: Untyped argument mapping from the caller (may be None)

        Returns:
            ToolResult; is_error is set for invalid arguments, unknown tools,
            lookups that matched nothing and any failure of the remote call
        """
        self.metrics.tool_called(tool_name)

        with self.metrics.time_operation(f"tool_duration_seconds:{tool_name}"):
            result = await self._dispatch(tool_name, arguments)

        if result.is_error:
            self.metrics.tool_failed(tool_name, result.error_code or INTERNAL_ERROR)
        return result

    async def _dispatch(self, tool_name: str, arguments: Optional[Dict[str, Any]]) -> ToolResult:
        try:
            if arguments is None:
                raise MCPToolError(code=INVALID_ARGUMENTS, message="No arguments provided")

            tool = self.get_tool(tool_name)
            if tool is None:
                logger.warning(f"Unknown tool requested: {tool_name}")
                return ToolResult(text=f"Unknown tool: {tool_name}", is_error=True, error_code=UNKNOWN_TOOL)

            validated = validate_arguments(tool.name, tool.input_schema, arguments)

            logger.info(f"Invoking MCP tool: {tool_name}")
            text = await tool.handler(validated)
            logger.info(f"Tool {tool_name} executed successfully")
            return ToolResult(text=text)

        except MCPToolError as e:
            if e.code == NOT_FOUND:
                logger.warning(f"Tool {tool_name}: {e.message}")
            else:
                logger.error(f"Tool {tool_name} failed: {e.message}")
            return create_error_result(e)

        except Exception as e:
            logger.exception(f"Tool {tool_name} failed: {str(e)}")
            return create_error_result(MCPToolError(code=INTERNAL_ERROR, message=str(e)))
