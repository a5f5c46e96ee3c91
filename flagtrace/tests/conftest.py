# FlagTrace Test Configuration
import pytest
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from loguru import logger


@pytest.fixture
def registry():
    """Fresh registry, independent of the process default"""
    from flagtrace.debug.registry import DebugRegistry
    return DebugRegistry()


@pytest.fixture
def default_registry(monkeypatch):
    """Swaps a fresh registry in as the process default for one test"""
    from flagtrace.debug import registry as registry_module
    fresh = registry_module.DebugRegistry()
    monkeypatch.setattr(registry_module, "_default_registry", fresh)
    return fresh


@pytest.fixture
def log_messages():
    """Collects every loguru message emitted during the test"""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record), level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def flag_file(tmp_path):
    """Writes flag file text and returns its path"""
    def _write(text: str, name: str = "debug.conf") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
