# Copyright (c) 2025 GÖKSEL ÖZKAN
# Error types for FlagTrace

from pathlib import Path
from typing import Optional


class FlagTraceError(Exception):
    """Base for internal errors."""


class MalformedConfigEntry(FlagTraceError):
    """A flag file record has no '=' separator."""

    def __init__(self, token: str, path: Optional[Path] = None):
        where = f" in '{path}'" if path is not None else ""
        super().__init__(f"Malformed flag entry{where}: {token!r} (expected key=value)")
        self.token = token
        self.path = path


class SettingsLoadError(FlagTraceError):
    def __init__(self, path: Path, detail: str):
        super().__init__(f"Failed loading settings '{path}': {detail}")
        self.path = path
        self.detail = detail
