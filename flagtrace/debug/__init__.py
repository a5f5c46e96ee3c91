"""
FlagTrace Debug System

Debug flag registry, flag file loading and diagnostic logging.
"""
from .config import parse_flag_text, parse_flag_value
from .logger import DebugLogger, debug_log, emit_error_log
from .registry import (
    DebugRegistry,
    get_flag,
    get_registry,
    is_enabled,
    load_config,
    parse_exception,
    set_flag,
    trace,
)

__all__ = [
    "DebugRegistry",
    "get_registry",
    "get_flag",
    "set_flag",
    "is_enabled",
    "trace",
    "load_config",
    "parse_exception",
    "parse_flag_text",
    "parse_flag_value",
    "DebugLogger",
    "debug_log",
    "emit_error_log",
]
