"""Dependency graph MCP tools for Taskdag."""

import json

from mcp.types import ToolAnnotations

from taskdag_mcp.enums import ResponseFormat
from taskdag_mcp.errors import IntegrityViolationError, InvalidIdentifierError, StoreError
from taskdag_mcp.graph.cycles import check_new_edge
from taskdag_mcp.graph.scheduler import compute_schedule
from taskdag_mcp.models.inputs import CheckDependencyInput, DependencyInput, ScheduleInput
from taskdag_mcp.models.schedule import EdgeCheckResult
from taskdag_mcp.server import mcp
from taskdag_mcp.store import get_store
from taskdag_mcp.tools.core import _integrity_message
from taskdag_mcp.utils.formatters import _format_duration, _format_schedule_concise, _format_schedule_markdown
from taskdag_mcp.utils.parsers import _parse_task_id


def _rejection_message(result: EdgeCheckResult) -> str:
    reason = result.reason.value if result.reason else "unknown"
    return f"Error: {result.message} (reason: {reason})"


@mcp.tool(
    name="taskdag_depend",
    annotations=ToolAnnotations(
        title="Add Dependency",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def taskdag_depend(params: DependencyInput) -> str:
    """
    Make one task depend on another (parent must finish before child starts).

    The edge is validated and stored in one step. It is refused when an id is
    invalid, the task would depend on itself, either task is missing, the
    edge already exists, or the edge would create a circular dependency.

    Args:
        params: DependencyInput with parent_id and child_id

    Returns:
        Confirmation, or an error carrying the structured rejection reason

    Examples:
        - "Deploy (#4) waits on Test (#3)": params with parent_id="3", child_id="4"
    """
    try:
        result = get_store().add_dependency(params.parent_id, params.child_id)
    except StoreError as e:
        return f"Error: {e}"

    if not result.accepted:
        return _rejection_message(result)
    return (
        f"Dependency added: #{_parse_task_id(params.parent_id)} must finish before "
        f"#{_parse_task_id(params.child_id)} starts."
    )


@mcp.tool(
    name="taskdag_undepend",
    annotations=ToolAnnotations(
        title="Remove Dependency",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskdag_undepend(params: DependencyInput) -> str:
    """
    Remove the dependency between two tasks.

    Args:
        params: DependencyInput with parent_id and child_id

    Returns:
        Confirmation, or an error if no such dependency exists
    """
    try:
        parent_id = _parse_task_id(params.parent_id)
        child_id = _parse_task_id(params.child_id)
    except InvalidIdentifierError as e:
        return f"Error: {e}"

    try:
        removed = get_store().remove_dependency(parent_id, child_id)
    except StoreError as e:
        return f"Error: {e}"

    if not removed:
        return f"Error: No dependency #{parent_id} -> #{child_id} exists."
    return f"Dependency removed: #{parent_id} -> #{child_id}"


@mcp.tool(
    name="taskdag_check_dependency",
    annotations=ToolAnnotations(
        title="Check Dependency",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskdag_check_dependency(params: CheckDependencyInput) -> str:
    """
    Check whether a dependency could be added, without adding it.

    USE THIS WHEN:
    - Planning edges and you want to know if one would create a cycle

    DO NOT USE WHEN:
    - You actually want the dependency → use taskdag_depend (it runs the same checks)

    Args:
        params: CheckDependencyInput with parent_id, child_id and response_format

    Returns:
        Whether the edge is accepted and, if not, why
    """
    try:
        tasks, edges = get_store().snapshot()
    except StoreError as e:
        return f"Error: {e}"
    result = check_new_edge(params.parent_id, params.child_id, {t.id: t for t in tasks}, edges)

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(result.model_dump(mode="json"), indent=2)

    if result.accepted:
        return f"OK: #{_parse_task_id(params.parent_id)} -> #{_parse_task_id(params.child_id)} can be added."
    return _rejection_message(result)


@mcp.tool(
    name="taskdag_schedule",
    annotations=ToolAnnotations(
        title="Schedule & Critical Path",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskdag_schedule(params: ScheduleInput) -> str:
    """
    Compute earliest start dates and the critical path for all tasks.

    Tasks are listed in dependency order. A task without dependencies can
    start when it was created; any other task can start the day after its
    latest-finishing dependency. A task finishes at its due date, or at its
    creation time if it has none. The critical path is the longest chain of
    dependent tasks by elapsed time.

    USE THIS WHEN:
    - User asks when tasks can start, or what determines the overall finish
    - Planning work in dependency order

    Args:
        params: ScheduleInput with critical_only and response_format

    Returns:
        Ordered tasks with earliest start / finish, plus the critical path
    """
    try:
        store = get_store()
    except StoreError as e:
        return f"Error: {e}"
    tasks, edges = store.snapshot()
    try:
        result = compute_schedule(tasks, edges, store.start_step)
    except IntegrityViolationError as e:
        return _integrity_message(e)

    if params.response_format == ResponseFormat.JSON:
        critical = set(result.critical_path)
        entries = [s for s in result.ordered_tasks if not params.critical_only or s.task.id in critical]
        return json.dumps(
            {
                "tasks": [
                    {
                        **s.task.model_dump(mode="json"),
                        "earliest_start": s.earliest_start.isoformat(),
                        "finish_time": s.finish_time.isoformat(),
                    }
                    for s in entries
                ],
                "critical_path": result.critical_path,
                "critical_duration": _format_duration(result.critical_duration),
                "critical_duration_seconds": result.critical_duration.total_seconds(),
            },
            indent=2,
        )

    if params.response_format == ResponseFormat.CONCISE:
        return _format_schedule_concise(result, params.critical_only)

    return _format_schedule_markdown(result, params.critical_only)
