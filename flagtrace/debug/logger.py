"""
FlagTrace Debug Logger Utility

Two outputs live here: the error log stream that traces and exception
records are written to, and area-gated debug messages that only show when
the matching flag is enabled in a registry.
"""
import json
from typing import Any, Optional, Union

from flagtrace.src.core.logging import get_logger

log = get_logger("flagtrace.debug")


def emit_error_log(payload: Any, prefix: str = ""):
    """Write a pretty-printed JSON payload to the error log stream."""
    log.error(prefix + json.dumps(payload, indent=4, default=str))


class DebugLogger:
    """Logs debug messages for an area only while its flag is enabled."""

    def __init__(self, registry=None):
        self._registry = registry

    @property
    def registry(self):
        if self._registry is None:
            from flagtrace.debug.registry import get_registry
            return get_registry()
        return self._registry

    def log(self, area: str, message: str, level: Optional[Union[bool, int]] = None, **context):
        """
        Log a debug message if the area is enabled.

        Args:
            area: Flag name gating this message
            message: Human-readable log message
            level: Optional check value passed to is_enabled (e.g. a verbosity threshold)
            **context: Additional context key-value pairs
        """
        if not self.registry.is_enabled(area, level):
            return

        line = message
        if context:
            ctx_str = " | ".join(f"{k}={v}" for k, v in context.items())
            line += f" | {ctx_str}"
        log.bind(area=area).debug(f"[{area}] {line}")

    def log_section(self, area: str, title: str, content: Any):
        """Log a multi-line section with title."""
        if not self.registry.is_enabled(area):
            return

        rule = "═" * 50
        log.bind(area=area).debug(f"[{area}] ═══ {title} ═══\n{content}\n{rule}")


# Convenience function
def debug_log(area: str, message: str, level: Optional[Union[bool, int]] = None, **context):
    """Shortcut for DebugLogger().log() against the default registry"""
    DebugLogger().log(area, message, level, **context)
