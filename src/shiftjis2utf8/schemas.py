"""Pydantic schemas for runtime validation of the YAML configuration file."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shiftjis2utf8.application.options import (
    DEFAULT_DEPTH,
    DEFAULT_PATTERNS,
    RunConfig,
)
from shiftjis2utf8.types import RunMode


class ConfigFileSchema(BaseModel):
    """Validated content of ``.shiftjis2utf8.yaml``."""

    model_config = ConfigDict(extra="forbid")

    mode: RunMode
    files: list[str] = Field(default_factory=list)
    dir: str = "."
    patterns: list[str] = Field(default_factory=lambda: list(DEFAULT_PATTERNS))
    depth: int = Field(default=DEFAULT_DEPTH, ge=0)

    @field_validator("files", "patterns", mode="before")
    @classmethod
    def _coerce_list(cls, value: object) -> object:
        # A bare string is accepted as a one-item list.
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @model_validator(mode="after")
    def _check_mode_fields(self) -> ConfigFileSchema:
        if self.mode == "files" and not [f for f in self.files if f.strip()]:
            raise ValueError("files mode requires a non-empty 'files' list.")
        if self.mode == "dir":
            if not self.patterns:
                self.patterns = list(DEFAULT_PATTERNS)
            elif not [p for p in self.patterns if p.strip()]:
                raise ValueError("dir mode requires at least one non-blank pattern.")
        return self

    def to_run_config(self) -> RunConfig:
        """Convert the file schema into the shared run configuration."""
        if self.mode == "files":
            return RunConfig.for_files(self.files)
        if self.mode == "dir":
            return RunConfig.for_directory(self.dir or ".", self.patterns, self.depth)
        return RunConfig.for_clear()
