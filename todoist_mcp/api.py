"""
HTTP API for the Todoist MCP Server

Exposes the same tool catalog and dispatcher as the stdio transport over
plain JSON endpoints.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, List

from fastapi import FastAPI
from pydantic import BaseModel

from todoist_mcp.mcp_server.server import MCPServer

import logging

logger = logging.getLogger(__name__)


class CallToolRequest(BaseModel):
    """Call tool request schema"""
    arguments: Any = None


class TextContent(BaseModel):
    type: str = "text"
    text: str


class CallToolResponse(BaseModel):
    """Call tool response schema"""
    content: List[TextContent]
    isError: bool


class ListToolsResponse(BaseModel):
    """List tools response schema"""
    tools: List[Dict[str, Any]]


def create_app(mcp_server: MCPServer, client=None) -> FastAPI:
    """
    Create the FastAPI application

    Args:
        mcp_server: Server holding the tool catalog
        client: Todoist client to close on shutdown (optional)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"HTTP API serving tools: {mcp_server.list_tools()}")
        yield
        if client is not None:
            await client.close()

    app = FastAPI(
        title="Todoist MCP Server",
        description="Todoist tools for AI agents over HTTP",
        version=mcp_server.version,
        lifespan=lifespan,
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": mcp_server.version}

    @app.get("/tools", response_model=ListToolsResponse)
    async def list_tools():
        """List the tool catalog in order."""
        return {"tools": mcp_server.get_tool_schemas()}

    @app.post("/tools/{tool_name}/call", response_model=CallToolResponse)
    async def call_tool(tool_name: str, request: CallToolRequest):
        """
        Invoke one tool

        Tool failures are reported in the body with isError set; the HTTP
        call itself still succeeds.
        """
        result = await mcp_server.call_tool(tool_name, request.arguments)
        return result.to_dict()

    @app.get("/metrics")
    async def metrics():
        """Tool invocation counters and timers."""
        return mcp_server.metrics.get_metrics()

    return app
