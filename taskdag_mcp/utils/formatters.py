"""Formatting utilities for task and schedule output."""

from datetime import datetime, timedelta

from taskdag_mcp.models.schedule import ScheduleResult
from taskdag_mcp.models.task import TaskModel


def _format_timestamp(value: datetime | None) -> str:
    """Render a timestamp as 'YYYY-MM-DD HH:MM' in its own timezone."""
    if value is None:
        return "-"
    return value.strftime("%Y-%m-%d %H:%M")


def _format_duration(value: timedelta) -> str:
    """Render a duration as '3d 4h' / '5h 20m' / '0m'."""
    total_minutes = int(value.total_seconds() // 60)
    days, rem = divmod(total_minutes, 24 * 60)
    hours, minutes = divmod(rem, 60)
    if days:
        return f"{days}d {hours}h"
    if hours:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def _format_task_concise(task: TaskModel) -> str:
    """
    Format a single task in concise format for token efficiency.

    Output: "#5: Title (due:2024-12-31)"
    """
    title = task.title[:50]
    if task.due_date:
        return f"#{task.id}: {title} (due:{task.due_date.date().isoformat()})"
    return f"#{task.id}: {title}"


def _format_tasks_concise(tasks: list[TaskModel], title: str | None = None) -> str:
    """
    Format a list of tasks in concise format.

    Output:
    2 task(s) | ready
    #1: Task one (due:2024-12-31)
    #2: Task two
    """
    if not tasks:
        return "0 tasks"

    header = f"{len(tasks)} task(s)"
    if title:
        header = f"{len(tasks)} task(s) | {title}"

    lines = [header]
    lines.extend(_format_task_concise(task) for task in tasks)
    return "\n".join(lines)


def _format_task_markdown(
    task: TaskModel,
    parents: list[TaskModel] | None = None,
    children: list[TaskModel] | None = None,
    earliest_start: datetime | None = None,
) -> str:
    """Format a single task as markdown, optionally with its neighbours."""
    lines = [f"### [{task.id}] {task.title}"]

    details = [f"**Created**: {_format_timestamp(task.created_at)}"]
    if task.due_date:
        details.append(f"**Due**: {_format_timestamp(task.due_date)}")
    if earliest_start is not None:
        details.append(f"**Earliest start**: {_format_timestamp(earliest_start)}")
    lines.append(" | ".join(details))

    if parents:
        lines.append("**Depends on:**")
        for p in parents:
            lines.append(f"  - #{p.id}: {p.title}")
    if children:
        lines.append("**Blocks:**")
        for c in children:
            lines.append(f"  - #{c.id}: {c.title}")

    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[TaskModel], title: str = "Tasks") -> str:
    """Format a list of tasks as markdown."""
    if not tasks:
        return f"# {title}\n\nNo tasks found."

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]
    for task in tasks:
        lines.append(_format_task_markdown(task))
        lines.append("")
    return "\n".join(lines)


def _format_schedule_concise(result: ScheduleResult, critical_only: bool = False) -> str:
    """
    Format a schedule compactly, one task per line in topological order.

    Output:
    3 task(s) | critical: 1 > 2 > 3 (4d 23h)
    #1: Design start:2025-01-01 finish:2025-01-03 *
    """
    if not result.ordered_tasks:
        return "0 tasks"

    critical = set(result.critical_path)
    entries = [s for s in result.ordered_tasks if not critical_only or s.task.id in critical]
    path = " > ".join(str(task_id) for task_id in result.critical_path)
    lines = [f"{len(entries)} task(s) | critical: {path} ({_format_duration(result.critical_duration)})"]
    for s in entries:
        marker = " *" if s.task.id in critical else ""
        lines.append(
            f"#{s.task.id}: {s.task.title[:40]} "
            f"start:{s.earliest_start.date().isoformat()} finish:{s.finish_time.date().isoformat()}{marker}"
        )
    return "\n".join(lines)


def _format_schedule_markdown(result: ScheduleResult, critical_only: bool = False) -> str:
    """Format a schedule as a markdown table followed by the critical path."""
    if not result.ordered_tasks:
        return "# Schedule\n\nNo tasks found."

    critical = set(result.critical_path)
    entries = [s for s in result.ordered_tasks if not critical_only or s.task.id in critical]
    titles = {s.task.id: s.task.title for s in result.ordered_tasks}

    lines = [f"# Schedule ({len(entries)} tasks)", ""]
    lines.append("| ID | Task | Earliest Start | Finish | Critical |")
    lines.append("|----|------|----------------|--------|----------|")
    for s in entries:
        mark = "yes" if s.task.id in critical else ""
        lines.append(
            f"| {s.task.id} | {s.task.title[:40]} | {_format_timestamp(s.earliest_start)} "
            f"| {_format_timestamp(s.finish_time)} | {mark} |"
        )
    lines.append("")

    lines.append(f"### Critical Path ({_format_duration(result.critical_duration)})")
    lines.append(" -> ".join(f"#{task_id} {titles[task_id]}" for task_id in result.critical_path))
    return "\n".join(lines)
