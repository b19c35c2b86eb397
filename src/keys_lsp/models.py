from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0)
    column: int = Field(ge=0)


class PathSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    prefix: str
    segments: tuple[str, ...] = ()


class Definition(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: Path
    position: Position
