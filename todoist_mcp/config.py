"""Configuration for the Todoist MCP Server."""
from dataclasses import dataclass
from typing import Mapping, Optional
import os

from dotenv import load_dotenv

# Load environment variables from a local .env file if present
load_dotenv()

DEFAULT_API_BASE_URL = "https://api.todoist.com/api/v1"
DEFAULT_REQUEST_TIMEOUT = 30.0
VALID_TRANSPORTS = ("stdio", "http")


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Process settings, built once at startup and passed to the factories."""
    api_token: str
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    transport: str = "stdio"
    http_host: str = "127.0.0.1"
    http_port: int = 8000
    log_level: str = "INFO"


def get_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build settings from the environment

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If TODOIST_API_TOKEN is missing or a value is malformed
    """
    env = os.environ if environ is None else environ

    api_token = env.get("TODOIST_API_TOKEN", "").strip()
    if not api_token:
        raise ConfigurationError(
            "TODOIST_API_TOKEN environment variable is required. "
            "You can find your API token at: Todoist Settings -> Integrations -> Developer"
        )

    transport = env.get("TODOIST_MCP_TRANSPORT", "stdio").strip().lower()
    if transport not in VALID_TRANSPORTS:
        raise ConfigurationError(
            f"TODOIST_MCP_TRANSPORT must be one of: {', '.join(VALID_TRANSPORTS)}"
        )

    try:
        request_timeout = float(env.get("TODOIST_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT))
        http_port = int(env.get("TODOIST_MCP_PORT", "8000"))
    except ValueError as e:
        raise ConfigurationError(f"Invalid numeric setting: {e}") from e

    return Settings(
        api_token=api_token,
        api_base_url=env.get("TODOIST_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
        request_timeout=request_timeout,
        transport=transport,
        http_host=env.get("TODOIST_MCP_HOST", "127.0.0.1"),
        http_port=http_port,
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
    )
