"""Core task MCP tool definitions for Taskdag."""

import json
import logging

from mcp.types import ToolAnnotations

from taskdag_mcp.enums import ResponseFormat
from taskdag_mcp.errors import IntegrityViolationError, InvalidIdentifierError, StoreError, TaskNotFoundError
from taskdag_mcp.graph.scheduler import compute_schedule
from taskdag_mcp.models.inputs import AddTaskInput, DeleteTaskInput, GetTaskInput, ListTasksInput
from taskdag_mcp.server import mcp
from taskdag_mcp.store import get_store
from taskdag_mcp.utils.formatters import (
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
    _format_timestamp,
)
from taskdag_mcp.utils.parsers import _parse_due_date, _parse_task_id

logger = logging.getLogger(__name__)


def _not_found_message(task_id: object) -> str:
    return f"Error: Task '{task_id}' not found.\nTip: Use taskdag_list to find valid task IDs."


def _integrity_message(error: IntegrityViolationError) -> str:
    logger.error("Integrity violation in stored task graph: %s", error)
    return (
        f"Error: Integrity violation - {error}\n"
        f"Tip: The stored dependency data is inconsistent; no schedule was produced."
    )


@mcp.tool(
    name="taskdag_add",
    annotations=ToolAnnotations(
        title="Add Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def taskdag_add(params: AddTaskInput) -> str:
    """
    Create a new task, optionally depending on existing tasks.

    USE THIS WHEN:
    - User wants to add a task or todo
    - A new task must wait on one or more existing tasks

    DO NOT USE WHEN:
    - Linking two existing tasks → use taskdag_depend instead

    Dependencies are validated one by one; a rejected dependency (unknown
    task, cycle, duplicate) does not undo the task or the other edges.

    Args:
        params: AddTaskInput with title, optional due date and depends_on IDs

    Returns:
        Confirmation with the new task ID and the outcome of each dependency

    Examples:
        - Simple task: params with title="Write report"
        - With deadline: params with title="Ship", due="2025-03-14"
        - Dependent task: params with title="Deploy", depends_on=["3", "4"]
    """
    due_date = None
    if params.due:
        try:
            due_date = _parse_due_date(params.due)
        except ValueError as e:
            return f"Error: {e}"

    try:
        store = get_store()
        task = store.create_task(params.title, due_date)
    except StoreError as e:
        return f"Error: {e}"

    lines = [f"Task created successfully: #{task.id} {task.title}"]
    if task.due_date:
        lines.append(f"Due: {_format_timestamp(task.due_date)}")

    for parent_id in params.depends_on or []:
        try:
            result = store.add_dependency(parent_id, task.id)
        except StoreError as e:
            lines.append(f"- Dependency on '{parent_id}' failed: {e}")
            continue
        if result.accepted:
            lines.append(f"- Depends on #{_parse_task_id(parent_id)}")
        else:
            lines.append(f"- Dependency on '{parent_id}' rejected ({result.reason.value}): {result.message}")

    return "\n".join(lines)


@mcp.tool(
    name="taskdag_get",
    annotations=ToolAnnotations(
        title="Get Task",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskdag_get(params: GetTaskInput) -> str:
    """
    Get one task with its dependencies, dependents and computed times.

    USE THIS WHEN:
    - You need details about a specific task
    - You want to know what a task waits on and what it blocks

    DO NOT USE WHEN:
    - You want the whole plan → use taskdag_schedule instead

    Args:
        params: GetTaskInput with task_id and response_format

    Returns:
        Task details including earliest start and finish time
    """
    try:
        task_id = _parse_task_id(params.task_id)
    except InvalidIdentifierError as e:
        return f"Error: {e}"

    try:
        store = get_store()
    except StoreError as e:
        return f"Error: {e}"
    tasks, edges = store.snapshot()
    by_id = {t.id: t for t in tasks}
    task = by_id.get(task_id)
    if task is None:
        return _not_found_message(params.task_id)

    try:
        schedule = compute_schedule(tasks, edges, store.start_step)
    except IntegrityViolationError as e:
        return _integrity_message(e)

    scheduled = next(s for s in schedule.ordered_tasks if s.task.id == task_id)
    parents = [by_id[e.parent_id] for e in edges if e.child_id == task_id]
    children = [by_id[e.child_id] for e in edges if e.parent_id == task_id]

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "task": task.model_dump(mode="json"),
                "earliest_start": scheduled.earliest_start.isoformat(),
                "finish_time": scheduled.finish_time.isoformat(),
                "parents": [p.id for p in parents],
                "children": [c.id for c in children],
                "on_critical_path": task_id in schedule.critical_path,
            },
            indent=2,
        )

    return _format_task_markdown(task, parents, children, scheduled.earliest_start)


@mcp.tool(
    name="taskdag_list",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskdag_list(params: ListTasksInput) -> str:
    """
    List tasks in creation order.

    USE THIS WHEN:
    - Looking up task IDs
    - Getting a quick overview of what exists

    DO NOT USE WHEN:
    - You want dependency order, start dates or the critical path → use taskdag_schedule

    Args:
        params: ListTasksInput with limit and response_format

    Returns:
        Formatted list of tasks
    """
    try:
        tasks = get_store().list_tasks()
    except StoreError as e:
        return f"Error: {e}"
    total_count = len(tasks)

    if params.limit and len(tasks) > params.limit:
        tasks = tasks[: params.limit]

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {"total": total_count, "count": len(tasks), "tasks": [t.model_dump(mode="json") for t in tasks]},
            indent=2,
        )

    if params.response_format == ResponseFormat.CONCISE:
        return _format_tasks_concise(tasks)

    return _format_tasks_markdown(tasks)


@mcp.tool(
    name="taskdag_delete",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def taskdag_delete(params: DeleteTaskInput) -> str:
    """
    Delete a task together with every dependency that references it.

    Args:
        params: DeleteTaskInput with task_id

    Returns:
        Confirmation with the number of dependencies removed
    """
    try:
        task_id = _parse_task_id(params.task_id)
    except InvalidIdentifierError as e:
        return f"Error: {e}"

    try:
        task, removed = get_store().delete_task(task_id)
    except TaskNotFoundError:
        return _not_found_message(params.task_id)
    except StoreError as e:
        return f"Error: {e}"

    return f"Task deleted successfully: #{task.id} {task.title}\nRemoved {removed} dependency edge(s)."
