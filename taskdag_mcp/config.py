"""Environment-driven settings for Taskdag MCP."""

from __future__ import annotations

import os
from datetime import timedelta
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_DATA_FILE = Path("~/.taskdag/tasks.json")


class Settings(BaseModel):
    """Server settings, normally built from ``TASKDAG_*`` environment variables."""

    data_file: Path = Field(
        default=DEFAULT_DATA_FILE,
        validate_default=True,
        description="JSON file holding tasks and dependencies",
    )
    log_level: str = Field(default="WARNING", description="Root log level for the server")
    start_step_hours: float = Field(
        default=24.0,
        gt=0,
        description="Gap between a predecessor's finish time and a dependent's earliest start",
    )

    @field_validator("data_file")
    @classmethod
    def expand_data_file(cls, v: Path) -> Path:
        return v.expanduser()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @property
    def start_step(self) -> timedelta:
        return timedelta(hours=self.start_step_hours)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Validated Settings; unset variables fall back to defaults
        """
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        if env.get("TASKDAG_DATA_FILE"):
            values["data_file"] = env["TASKDAG_DATA_FILE"]
        if env.get("TASKDAG_LOG_LEVEL"):
            values["log_level"] = env["TASKDAG_LOG_LEVEL"]
        if env.get("TASKDAG_START_STEP_HOURS"):
            values["start_step_hours"] = env["TASKDAG_START_STEP_HOURS"]
        return cls.model_validate(values)
