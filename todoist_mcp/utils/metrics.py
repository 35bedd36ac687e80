"""
Metrics Collection for the MCP Server.

Counts tool invocations and failures and accumulates per-tool timings.
"""

import time
from contextlib import contextmanager
from typing import Dict, Any, Iterator
from collections import defaultdict
from datetime import datetime, timezone
import threading


class MetricsCollector:
    """Collects and manages tool invocation metrics."""

    def __init__(self):
        """Initialize metrics collector."""
        self.metrics = defaultdict(int)
        self.timers = defaultdict(float)
        self.lock = threading.Lock()

        self.metrics["tool_calls_total"] = 0
        self.metrics["tool_errors_total"] = 0

    def increment_counter(self, metric_name: str, value: int = 1):
        """Increment a counter metric."""
        with self.lock:
            self.metrics[metric_name] += value

    def record_timer(self, metric_name: str, duration: float):
        """Record a timing metric."""
        with self.lock:
            self.timers[metric_name] += duration

    def get_metrics(self) -> Dict[str, Any]:
        """Get current metrics values."""
        with self.lock:
            return {
                "counters": dict(self.metrics),
                "timers": dict(self.timers),
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

    def tool_called(self, tool_name: str):
        """Record that a tool was invoked."""
        self.increment_counter("tool_calls_total")
        self.increment_counter(f"tool_calls_total:{tool_name}")

    def tool_failed(self, tool_name: str, code: str):
        """Record that a tool invocation produced an error result."""
        self.increment_counter("tool_errors_total")
        self.increment_counter(f"tool_errors_total:{tool_name}")
        self.increment_counter(f"tool_errors_total:{code}")

    @contextmanager
    def time_operation(self, metric_name: str) -> Iterator[None]:
        """Context manager to time an operation."""
        start_time = time.perf_counter()
        try:
            yield
        finally:
            self.record_timer(metric_name, time.perf_counter() - start_time)
