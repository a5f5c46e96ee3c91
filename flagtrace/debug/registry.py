"""
FlagTrace Debug Registry

Holds named debug flags (booleans or integers) and answers flag queries.
One default registry exists per process (see get_registry), but any code
can build its own DebugRegistry and pass it around instead.
"""
import re
import sys
import threading
import traceback
from pathlib import Path
from types import FrameType
from typing import Dict, List, Optional, Union

from flagtrace.debug.config import parse_flag_text
from flagtrace.debug.logger import emit_error_log
from flagtrace.src.core.logging import get_logger
from flagtrace.src.core.models import (
    BoolFlag,
    FlagLoadResult,
    FlagValue,
    FrameRecord,
    IntFlag,
    LogRecord,
    RawFlagValue,
    wrap_value,
)

logger = get_logger("flagtrace.registry")

EXCEPTION_FLAG = "exception"
EXCEPTION_LOG_PREFIX = "Exception occurred: "
NUMERIC_STRING = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*")


def _frame_records(summaries) -> List[FrameRecord]:
    # Innermost first
    return [
        FrameRecord(function=fs.name, file=fs.filename, line=fs.lineno, code=fs.line or None)
        for fs in reversed(summaries)
    ]


def _as_number(value):
    """Numeric strings ("5", " -2.5") compare as numbers; anything else is returned unchanged."""
    if isinstance(value, str) and NUMERIC_STRING.fullmatch(value):
        try:
            return int(value)
        except ValueError:
            return float(value)
    return value


def _error_code(exception: BaseException) -> int:
    for attr in ("code", "errno"):
        value = getattr(exception, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return 0


class DebugRegistry:
    """Thread-safe store of debug flags."""

    def __init__(self, on_malformed: str = "raise"):
        self._flags: Dict[str, FlagValue] = {}
        self._lock = threading.RLock()
        self.on_malformed = on_malformed

    @classmethod
    def from_settings(cls, settings) -> "DebugRegistry":
        """Build a registry and load the flag file named in DebugSettings, if any."""
        registry = cls(on_malformed=settings.flags.on_malformed)
        if settings.flags.flag_file is not None:
            registry.load_config(settings.flags.flag_file)
        return registry

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get(self, flag: str, default: Optional[RawFlagValue] = None) -> Optional[RawFlagValue]:
        with self._lock:
            stored = self._flags.get(flag)
        return default if stored is None else stored.value

    def set(self, flag: str, value: RawFlagValue):
        wrapped = wrap_value(value)
        with self._lock:
            self._flags[flag] = wrapped

    def flags(self) -> Dict[str, RawFlagValue]:
        with self._lock:
            return {name: stored.value for name, stored in self._flags.items()}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_enabled(self, flag: str, check_value=None) -> bool:
        """
        Is a debugging flag set?

        Args:
            flag: The flag name
            check_value: If boolean, the stored value must be the same boolean.
                If numeric (numeric strings included), a stored integer must be >= to it.
                If some other value, stored and check must be both truthy or both falsy.
                If omitted, booleans are returned as-is and integers must be > 0.

        Returns:
            True if the flag is set and matches check_value
        """
        with self._lock:
            stored = self._flags.get(flag)
        if stored is None:
            return False

        check_value = _as_number(check_value)
        check_is_bool = isinstance(check_value, bool)
        check_is_number = isinstance(check_value, (int, float)) and not check_is_bool

        if check_is_bool and isinstance(stored, BoolFlag):
            return check_value == stored.value
        if check_is_number and isinstance(stored, IntFlag):
            return stored.value >= check_value
        if check_value is not None:
            return bool(check_value) == bool(stored.value)
        if isinstance(stored, BoolFlag):
            return stored.value
        return stored.value > 0

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def trace(self, log: bool = True, limit: int = 0) -> List[FrameRecord]:
        """
        Capture the caller's stack, innermost frame first.

        Args:
            log: If true, write the frames to the error log
            limit: Maximum number of frames, 0 (or less) for all of them
        """
        return self._trace_from(sys._getframe(1), log, limit)

    def _trace_from(self, frame: FrameType, log: bool, limit: int) -> List[FrameRecord]:
        summaries = traceback.extract_stack(frame, limit=limit if limit > 0 else None)
        frames = _frame_records(summaries)
        if log:
            emit_error_log([f.model_dump() for f in frames])
        return frames

    def parse_exception(self, exception: BaseException, errorlog: bool = False) -> LogRecord:
        """
        Parse an exception into a log record.

        The stack trace is only attached while the "exception" flag is enabled.
        """
        entries = traceback.extract_tb(exception.__traceback__)
        origin = entries[-1] if entries else None

        record = LogRecord(
            classname=type(exception).__name__,
            message=str(exception),
            code=_error_code(exception),
            file=origin.filename if origin else None,
            line=origin.lineno if origin else None,
        )
        if self.is_enabled(EXCEPTION_FLAG):
            record.trace = _frame_records(entries)
        if errorlog:
            emit_error_log(record.as_dict(), prefix=EXCEPTION_LOG_PREFIX)
        return record

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_config(self, path: Union[str, Path], on_malformed: Optional[str] = None) -> FlagLoadResult:
        """
        Look for, and if found, load a flag file.

        A missing file is not an error. With the "raise" policy a malformed
        entry aborts the load before any flag from the file is applied.
        """
        path = Path(path)
        result = FlagLoadResult(path=path)
        if not path.exists():
            logger.debug(f"No debug flag file at {path}")
            return result

        policy = on_malformed or self.on_malformed
        text = path.read_text(encoding="utf-8", errors="replace")
        pairs, skipped = parse_flag_text(text, on_malformed=policy, path=path)
        for token in skipped:
            logger.warning(f"Skipping malformed debug flag entry {token!r} in {path}")

        with self._lock:
            for key, value in pairs:
                self.set(key, value)

        result.found = True
        result.loaded = dict(pairs)
        result.skipped = skipped
        logger.debug(f"Loaded {len(pairs)} debug flag(s) from {path}")
        return result


_default_registry = DebugRegistry()


def get_registry() -> DebugRegistry:
    """The process-wide default registry."""
    return _default_registry


def get_flag(flag: str, default: Optional[RawFlagValue] = None) -> Optional[RawFlagValue]:
    return _default_registry.get(flag, default)


def set_flag(flag: str, value: RawFlagValue):
    _default_registry.set(flag, value)


def is_enabled(flag: str, check_value=None) -> bool:
    return _default_registry.is_enabled(flag, check_value)


def trace(log: bool = True, limit: int = 0) -> List[FrameRecord]:
    return _default_registry._trace_from(sys._getframe(1), log, limit)


def load_config(path: Union[str, Path], on_malformed: Optional[str] = None) -> FlagLoadResult:
    return _default_registry.load_config(path, on_malformed)


def parse_exception(exception: BaseException, errorlog: bool = False) -> LogRecord:
    return _default_registry.parse_exception(exception, errorlog)
