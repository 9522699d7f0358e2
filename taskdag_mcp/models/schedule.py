"""Output models for edge checks and schedules."""

from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from taskdag_mcp.enums import REJECTION_MESSAGES, EdgeRejection
from taskdag_mcp.models.task import TaskModel


class EdgeCheckResult(BaseModel):
    """Outcome of validating a proposed dependency edge."""

    accepted: bool
    reason: EdgeRejection | None = None
    message: str | None = None

    @classmethod
    def accept(cls) -> "EdgeCheckResult":
        return cls(accepted=True)

    @classmethod
    def reject(cls, reason: EdgeRejection, message: str | None = None) -> "EdgeCheckResult":
        return cls(accepted=False, reason=reason, message=message or REJECTION_MESSAGES[reason])


class ScheduledTask(BaseModel):
    """A task annotated with its computed earliest start and finish time."""

    task: TaskModel
    earliest_start: datetime
    finish_time: datetime


class ScheduleResult(BaseModel):
    """Tasks in topological order plus the critical path through them."""

    ordered_tasks: list[ScheduledTask] = Field(default_factory=list)
    critical_path: list[int] = Field(default_factory=list)
    critical_duration: timedelta = timedelta(0)
