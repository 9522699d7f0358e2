"""Utility functions for Taskdag MCP."""

from taskdag_mcp.utils.formatters import (
    _format_duration,
    _format_schedule_concise,
    _format_schedule_markdown,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
    _format_timestamp,
)
from taskdag_mcp.utils.parsers import _parse_due_date, _parse_edges, _parse_task_id, _parse_tasks

__all__ = [
    "_parse_task_id",
    "_parse_due_date",
    "_parse_tasks",
    "_parse_edges",
    "_format_timestamp",
    "_format_duration",
    "_format_task_concise",
    "_format_tasks_concise",
    "_format_task_markdown",
    "_format_tasks_markdown",
    "_format_schedule_concise",
    "_format_schedule_markdown",
]
