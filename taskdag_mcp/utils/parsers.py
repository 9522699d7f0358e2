"""Parser helpers for task ids, due dates and stored data."""

from datetime import date, datetime, time, timedelta
from typing import Any

from taskdag_mcp.errors import InvalidIdentifierError
from taskdag_mcp.models.task import DependencyEdge, TaskModel

# Date-only due dates mean "by the end of that day", local time
END_OF_DAY = time(23, 59)


def _parse_task_id(value: Any) -> int:
    """
    Coerce a task id to a positive integer.

    Args:
        value: Integer or numeric string (e.g. 5, "5", " 5 ")

    Returns:
        The id as int

    Raises:
        InvalidIdentifierError: If the value is missing, boolean, non-numeric or not positive
    """
    if value is None or isinstance(value, bool):
        raise InvalidIdentifierError(f"Invalid task id: {value!r}")
    if isinstance(value, int):
        task_id = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        # isdigit() alone also accepts superscripts such as "²", which int() rejects
        task_id = int(value.strip())
    else:
        raise InvalidIdentifierError(f"Invalid task id: {value!r}")
    if task_id < 1:
        raise InvalidIdentifierError(f"Invalid task id: {value!r}")
    return task_id


def _parse_due_date(value: str, now: datetime | None = None) -> datetime:
    """
    Parse a user-supplied due date.

    Accepts 'today', 'tomorrow', a calendar date ('2025-03-14', read as 23:59
    local time that day) or a full ISO 8601 datetime. Naive datetimes are
    taken as local time.

    Raises:
        ValueError: If the value matches none of the accepted forms
    """
    text = value.strip().lower()
    now = now or datetime.now().astimezone()

    if text in ("today", "tomorrow"):
        day = now.date() if text == "today" else now.date() + timedelta(days=1)
        return datetime.combine(day, END_OF_DAY).astimezone()

    try:
        day = date.fromisoformat(text)
    except ValueError:
        pass
    else:
        return datetime.combine(day, END_OF_DAY).astimezone()

    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        raise ValueError(
            f"Invalid due date: {value!r}. Use YYYY-MM-DD, an ISO datetime, 'today' or 'tomorrow'."
        ) from None
    return parsed if parsed.tzinfo else parsed.astimezone()


def _parse_tasks(tasks: list[dict[str, Any]]) -> list[TaskModel]:
    """Validate a list of task dictionaries into TaskModel instances."""
    return [TaskModel.model_validate(t) for t in tasks]


def _parse_edges(edges: list[dict[str, Any]]) -> list[DependencyEdge]:
    """Validate a list of edge dictionaries into DependencyEdge instances."""
    return [DependencyEdge.model_validate(e) for e in edges]
