"""
FlagTrace - debug flag registry and diagnostic helpers.

Named debug flags (booleans or integers) with type-sensitive checks, stack
trace capture, a simple key=value flag file format and exception records
ready for structured logging.
"""

__version__ = "1.0.0"

from .debug.registry import (
    DebugRegistry,
    get_flag,
    get_registry,
    is_enabled,
    load_config,
    parse_exception,
    set_flag,
    trace,
)
from .src.core.config import DebugSettings
from .src.core.errors import FlagTraceError, MalformedConfigEntry, SettingsLoadError
from .src.core.models import FlagLoadResult, FrameRecord, LogRecord

__all__ = [
    "DebugRegistry",
    "DebugSettings",
    "get_registry",
    "get_flag",
    "set_flag",
    "is_enabled",
    "trace",
    "load_config",
    "parse_exception",
    "FlagLoadResult",
    "FrameRecord",
    "LogRecord",
    "FlagTraceError",
    "MalformedConfigEntry",
    "SettingsLoadError",
    "__version__",
]
