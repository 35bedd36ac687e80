"""
Logging Utility for the MCP Server.

Provides structured logging with appropriate levels and formats.
All output goes to stderr because stdout carries the MCP protocol.
"""

import logging
import sys
from typing import Any, Dict, Optional
from datetime import datetime, timezone
import json

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

SENSITIVE_KEYS = ("password", "token", "secret", "api_key")


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger with a single stderr handler.

    Args:
        level: Logging level name (e.g. "INFO", "DEBUG")
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def redact(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Drop parameters whose names look like credentials."""
    if not params:
        return {}
    return {
        k: v for k, v in params.items()
        if not any(s in str(k).lower() for s in SENSITIVE_KEYS)
    }


class StructuredLogger:
    """Structured (JSON) logger for audit events."""

    def __init__(self, name: str, level: int = logging.INFO):
        """
        Initialize structured logger.

        Args:
            name: Logger name
            level: Logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

    def _log_structured(self, level: int, message: str, **kwargs):
        """
        Log a structured message.

        Args:
            level: Logging level
            message: Log message
            **kwargs: Additional structured data
        """
        if self.logger.isEnabledFor(level):
            log_data = {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "level": logging.getLevelName(level),
                "message": message,
                "service": self.logger.name
            }
            log_data.update(kwargs)

            self.logger.log(level, json.dumps(log_data, default=str))

    def info(self, message: str, **kwargs):
        """Log info message."""
        self._log_structured(logging.INFO, message, **kwargs)


def get_logger(service_name: str) -> StructuredLogger:
    """
    Get a structured logger for the specified component.

    Args:
        service_name: Name of the component

    Returns:
        StructuredLogger instance
    """
    return StructuredLogger(service_name)
