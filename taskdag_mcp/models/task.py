"""Core task and dependency models for Taskdag MCP."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _ensure_aware(value: datetime) -> datetime:
    # Naive timestamps are taken as UTC so every comparison is well-defined
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class TaskModel(BaseModel):
    """A task: immutable after creation, removable by the store."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: int = Field(..., ge=1)
    title: str = Field(..., min_length=1)
    due_date: datetime | None = None
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def validate_created_at(cls, v: datetime) -> datetime:
        return _ensure_aware(v)

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, v: datetime | None) -> datetime | None:
        return _ensure_aware(v) if v is not None else None

    @property
    def finish_time(self) -> datetime:
        """Due date if set, otherwise the creation timestamp."""
        return self.due_date or self.created_at


class DependencyEdge(BaseModel):
    """Directed edge: ``parent_id`` must finish before ``child_id`` starts."""

    model_config = ConfigDict(frozen=True)

    parent_id: int
    child_id: int

    def as_pair(self) -> tuple[int, int]:
        return (self.parent_id, self.child_id)
