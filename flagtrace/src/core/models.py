from pathlib import Path
from typing import Annotated, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field

RawFlagValue = Union[bool, int]


class BoolFlag(BaseModel):
    kind: Literal["bool"] = "bool"
    value: bool


class IntFlag(BaseModel):
    kind: Literal["int"] = "int"
    value: int


# Tagged union stored per flag name
FlagValue = Annotated[Union[BoolFlag, IntFlag], Field(discriminator="kind")]


def wrap_value(value: RawFlagValue) -> Union[BoolFlag, IntFlag]:
    """Wrap a raw bool/int into its tagged form. bool is checked first since it subclasses int."""
    if isinstance(value, bool):
        return BoolFlag(value=value)
    if isinstance(value, int):
        return IntFlag(value=value)
    raise TypeError(f"Flag values must be bool or int, got {type(value).__name__}")


class FrameRecord(BaseModel):
    """One call-stack entry. Never carries argument or local data."""
    function: str
    file: str
    line: Optional[int] = None
    code: Optional[str] = None


class LogRecord(BaseModel):
    classname: str
    message: str
    code: int = 0
    file: Optional[str] = None
    line: Optional[int] = None
    trace: Optional[List[FrameRecord]] = None

    def as_dict(self) -> dict:
        data = self.model_dump(mode="json")
        if self.trace is None:
            data.pop("trace")
        return data


class FlagLoadResult(BaseModel):
    path: Path
    found: bool = False
    loaded: Dict[str, RawFlagValue] = Field(default_factory=dict)
    skipped: List[str] = Field(default_factory=list)
