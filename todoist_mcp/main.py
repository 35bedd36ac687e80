"""Main entry point for the Todoist MCP Server."""
import asyncio
import logging
import sys

from todoist_mcp.config import ConfigurationError, Settings, get_settings
from todoist_mcp.mcp_server.catalog import create_mcp_server
from todoist_mcp.todoist.client import TodoistClient
from todoist_mcp.utils.logger import configure_logging

logger = logging.getLogger(__name__)


async def serve_stdio(settings: Settings) -> None:
    """Serve the tool catalog over stdio until the client disconnects."""
    from todoist_mcp.mcp_server.transport import run_stdio_server

    async with TodoistClient.from_settings(settings) as client:
        mcp_server = create_mcp_server(client)
        await run_stdio_server(mcp_server)


def serve_http(settings: Settings) -> None:
    """Serve the tool catalog over HTTP with uvicorn."""
    import uvicorn
    from todoist_mcp.api import create_app

    client = TodoistClient.from_settings(settings)
    app = create_app(create_mcp_server(client), client=client)
    uvicorn.run(
        app,
        host=settings.http_host,
        port=settings.http_port,
        log_level=settings.log_level.lower(),
    )


def main() -> None:
    try:
        settings = get_settings()
    except ConfigurationError as e:
        configure_logging()
        logger.error(f"Error: {e}")
        sys.exit(1)

    configure_logging(settings.log_level)
    logger.info(f"Starting Todoist MCP Server ({settings.transport})...")

    try:
        if settings.transport == "http":
            serve_http(settings)
        else:
            asyncio.run(serve_stdio(settings))
    except KeyboardInterrupt:
        logger.info("Todoist MCP Server stopped")
    except Exception as e:
        logger.exception(f"Fatal error running server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
