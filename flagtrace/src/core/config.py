from pathlib import Path
from typing import Literal, Optional
from pydantic import BaseModel, Field, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from flagtrace.src.core.errors import SettingsLoadError

yaml = YAML()

MalformedPolicy = Literal["raise", "skip"]


class LoggingConfig(BaseModel):
    level: str = "INFO"
    log_to_file: bool = False
    log_dir: Optional[Path] = None  # None = current working directory


class FlagConfig(BaseModel):
    flag_file: Optional[Path] = None  # Loaded into the registry at startup
    on_malformed: MalformedPolicy = "raise"  # raise = MalformedConfigEntry, skip = warn and continue


class DebugSettings(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    flags: FlagConfig = Field(default_factory=FlagConfig)

    @classmethod
    def load(cls, path: Path) -> "DebugSettings":
        path = Path(path)
        if not path.exists():
            return cls()
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.load(f) or {}
            return cls(**data)
        except (YAMLError, ValidationError, TypeError) as e:
            raise SettingsLoadError(path, str(e)) from e

    def save(self, path: Path):
        # Dump model to dict then to yaml
        data = self.model_dump(mode='json')
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f)
