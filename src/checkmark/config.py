"""Configuration models for checkmark."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class StorageConfig(BaseModel):
    """Configuration for the persisted task list."""

    directory: str = ".checkmark"
    key: str = "todos"
    schema_version: Literal["v1", "v2"] = "v2"
    # "async" dispatches writes on the event loop without awaiting them
    backend: Literal["sync", "async"] = "sync"

    @field_validator("key")
    @classmethod
    def check_key(cls, value: str) -> str:
        # Task files share the directory with config.json
        if not value or value == CONFIG_FILE.stem:
            raise ValueError(f"storage key {value!r} is reserved or empty")
        return value


class IdsConfig(BaseModel):
    """Configuration for task identifier generation."""

    strategy: Literal["counter", "timestamp"] = "counter"
    start: int = 0


class ChartConfig(BaseModel):
    """Configuration for the completion chart."""

    completed_color: str = "#4CAF50"
    remaining_color: str = "#ddd"
    completed_hover_color: str = "#66BB6A"
    remaining_hover_color: str = "#ccc"
    tooltip_limit: int = 5


class ExportConfig(BaseModel):
    """Configuration for markdown export."""

    template_path: str | None = None
    include_completed: bool = False


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


class CheckmarkConfig(BaseModel):
    """Main configuration for checkmark."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    ids: IdsConfig = Field(default_factory=IdsConfig)
    chart: ChartConfig = Field(default_factory=ChartConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> CheckmarkConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.model_dump(exclude_none=True), f, indent=2)


# Default config directory
CHECKMARK_DIR = Path(".checkmark")
CONFIG_FILE = CHECKMARK_DIR / "config.json"
