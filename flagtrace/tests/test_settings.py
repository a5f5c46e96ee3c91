# Copyright (c) 2025 GÖKSEL ÖZKAN
# Settings Tests

import pytest

from flagtrace.debug.registry import DebugRegistry
from flagtrace.src.core.config import DebugSettings, FlagConfig, LoggingConfig
from flagtrace.src.core.errors import MalformedConfigEntry, SettingsLoadError


class TestDebugSettings:
    """Tests for DebugSettings model"""

    def test_default_values(self):
        settings = DebugSettings()

        assert settings.logging.level == "INFO"
        assert settings.logging.log_to_file is False
        assert settings.flags.flag_file is None
        assert settings.flags.on_malformed == "raise"

    def test_missing_file_gives_defaults(self, tmp_path):
        assert DebugSettings.load(tmp_path / "nope.yaml") == DebugSettings()

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "logging:\n  level: DEBUG\nflags:\n  flag_file: debug.conf\n  on_malformed: skip\n",
            encoding="utf-8",
        )
        settings = DebugSettings.load(path)

        assert settings.logging.level == "DEBUG"
        assert settings.flags.flag_file.name == "debug.conf"
        assert settings.flags.on_malformed == "skip"

    def test_save_round_trip(self, tmp_path):
        path = tmp_path / "settings.yaml"
        original = DebugSettings(flags=FlagConfig(on_malformed="skip"), logging=LoggingConfig(level="WARNING"))
        original.save(path)
        assert DebugSettings.load(path) == original

    def test_invalid_policy_rejected(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("flags:\n  on_malformed: ignore\n", encoding="utf-8")
        with pytest.raises(SettingsLoadError):
            DebugSettings.load(path)

    def test_broken_yaml_rejected(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("flags: [unclosed\n", encoding="utf-8")
        with pytest.raises(SettingsLoadError):
            DebugSettings.load(path)


class TestRegistryFromSettings:
    def test_loads_flag_file(self, flag_file):
        path = flag_file("exception=true,level=2")
        registry = DebugRegistry.from_settings(DebugSettings(flags=FlagConfig(flag_file=path)))

        assert registry.is_enabled("exception")
        assert registry.get("level") == 2

    def test_no_flag_file(self):
        registry = DebugRegistry.from_settings(DebugSettings())
        assert registry.flags() == {}

    def test_policy_carries_over(self, flag_file):
        path = flag_file("a=1,junk")
        registry = DebugRegistry.from_settings(
            DebugSettings(flags=FlagConfig(flag_file=path, on_malformed="skip"))
        )
        assert registry.flags() == {"a": 1}

        with pytest.raises(MalformedConfigEntry):
            DebugRegistry.from_settings(DebugSettings(flags=FlagConfig(flag_file=path)))
