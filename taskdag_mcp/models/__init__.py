"""Pydantic models for Taskdag MCP."""

from taskdag_mcp.models.graph import GraphSnapshot, Predecessor
from taskdag_mcp.models.inputs import (
    AddTaskInput,
    CheckDependencyInput,
    DeleteTaskInput,
    DependencyInput,
    GetTaskInput,
    ListTasksInput,
    ScheduleInput,
)
from taskdag_mcp.models.schedule import EdgeCheckResult, ScheduledTask, ScheduleResult
from taskdag_mcp.models.task import DependencyEdge, TaskModel

__all__ = [
    # Task models
    "TaskModel",
    "DependencyEdge",
    # Graph models
    "Predecessor",
    "GraphSnapshot",
    # Result models
    "EdgeCheckResult",
    "ScheduledTask",
    "ScheduleResult",
    # Tool input models
    "AddTaskInput",
    "GetTaskInput",
    "ListTasksInput",
    "DeleteTaskInput",
    "DependencyInput",
    "CheckDependencyInput",
    "ScheduleInput",
]
