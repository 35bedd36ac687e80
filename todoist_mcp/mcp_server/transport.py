"""
MCP stdio transport

Binds an MCPServer to the MCP SDK's low-level server and serves it over
stdin/stdout.
"""

from typing import List
import logging

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from todoist_mcp.mcp_server.server import MCPServer

logger = logging.getLogger(__name__)


def build_sdk_server(mcp_server: MCPServer) -> Server:
    """Create an SDK Server whose list/call handlers delegate to mcp_server"""
    server = Server(mcp_server.name, version=mcp_server.version)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=schema["name"],
                description=schema["description"],
                inputSchema=schema["inputSchema"],
            )
            for schema in mcp_server.get_tool_schemas()
        ]

    # Registered directly rather than through @server.call_tool(): the SDK
    # decorator replaces absent arguments with {} and runs its own jsonschema
    # check, and MCPServer.call_tool must see the arguments untouched.
    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await mcp_server.call_tool(req.params.name, req.params.arguments)
        return types.ServerResult(
            types.CallToolResult(
                content=[types.TextContent(type="text", text=result.text)],
                isError=result.is_error,
            )
        )

    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def run_stdio_server(mcp_server: MCPServer) -> None:
    """Serve until stdin closes"""
    server = build_sdk_server(mcp_server)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Todoist MCP Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())
