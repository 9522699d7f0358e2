"""Topological ordering, earliest starts and critical path over a task DAG."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from datetime import datetime, timedelta

from taskdag_mcp.errors import IntegrityViolationError
from taskdag_mcp.graph.builder import build_graph
from taskdag_mcp.models.graph import GraphSnapshot
from taskdag_mcp.models.schedule import ScheduledTask, ScheduleResult
from taskdag_mcp.models.task import DependencyEdge, TaskModel

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


def topological_order(snapshot: GraphSnapshot) -> list[int]:
    """
    Order task ids so every parent precedes its children (Kahn's algorithm).

    Zero in-degree tasks are seeded in task order and children are released
    in edge order, so the result is stable for a given snapshot.

    Raises:
        IntegrityViolationError: If some tasks can never be released (a cycle)
    """
    indegree = {task_id: len(preds) for task_id, preds in snapshot.predecessors.items()}
    queue = deque(task_id for task_id in snapshot.tasks if indegree[task_id] == 0)
    order: list[int] = []

    while queue:
        task_id = queue.popleft()
        order.append(task_id)
        for child_id in snapshot.successors[task_id]:
            indegree[child_id] -= 1
            if indegree[child_id] == 0:
                queue.append(child_id)

    if len(order) != len(snapshot.tasks):
        stuck = sorted(task_id for task_id, degree in indegree.items() if degree > 0)
        raise IntegrityViolationError(
            f"Dependency graph contains a cycle; unresolved tasks: {', '.join(f'#{t}' for t in stuck)}"
        )
    return order


def earliest_starts(
    snapshot: GraphSnapshot,
    order: list[int],
    start_step: timedelta = ONE_DAY,
) -> dict[int, datetime]:
    """Earliest start per task: creation time for sources, else latest parent finish + step."""
    starts: dict[int, datetime] = {}
    for task_id in order:
        preds = snapshot.predecessors[task_id]
        if not preds:
            starts[task_id] = snapshot.tasks[task_id].created_at
        else:
            starts[task_id] = max(p.finish_time for p in preds) + start_step
    return starts


def critical_path(
    snapshot: GraphSnapshot,
    order: list[int],
    starts: dict[int, datetime],
) -> tuple[list[int], timedelta]:
    """
    Longest chain through the DAG by cumulative task duration.

    A task's duration is ``max(0, finish_time - earliest_start)``. Ties pick
    the first predecessor seen and the first end task in topological order.

    Returns:
        Tuple of (task ids from source to sink, cumulative duration)
    """
    best: dict[int, timedelta] = {}
    best_parent: dict[int, int | None] = {}

    for task_id in order:
        duration = max(timedelta(0), snapshot.tasks[task_id].finish_time - starts[task_id])
        parent_id: int | None = None
        parent_value: timedelta | None = None
        for pred in snapshot.predecessors[task_id]:
            if parent_value is None or best[pred.task_id] > parent_value:
                parent_id, parent_value = pred.task_id, best[pred.task_id]
        best[task_id] = duration if parent_value is None else parent_value + duration
        best_parent[task_id] = parent_id

    if not order:
        return [], timedelta(0)

    end_id = order[0]
    for task_id in order:
        if best[task_id] > best[end_id]:
            end_id = task_id

    path: list[int] = []
    current: int | None = end_id
    while current is not None:
        path.append(current)
        current = best_parent[current]
    path.reverse()
    return path, best[end_id]


def compute_schedule(
    tasks: Iterable[TaskModel],
    edges: Iterable[DependencyEdge],
    start_step: timedelta = ONE_DAY,
) -> ScheduleResult:
    """
    Compute the full schedule for one snapshot of tasks and edges.

    Pure function of its inputs: no state survives between calls, so two
    calls on the same snapshot return identical results.

    Args:
        tasks: Every task in the graph
        edges: Every dependency edge
        start_step: Gap between a predecessor's finish and a dependent's start

    Returns:
        ScheduleResult with tasks in topological order and the critical path

    Raises:
        IntegrityViolationError: If the data is not a valid DAG over the task set
    """
    snapshot = build_graph(tasks, edges)
    order = topological_order(snapshot)
    starts = earliest_starts(snapshot, order, start_step)
    path, duration = critical_path(snapshot, order, starts)

    ordered = [
        ScheduledTask(
            task=snapshot.tasks[task_id],
            earliest_start=starts[task_id],
            finish_time=snapshot.tasks[task_id].finish_time,
        )
        for task_id in order
    ]
    logger.debug("Scheduled %d tasks; critical path length %d", len(ordered), len(path))
    return ScheduleResult(ordered_tasks=ordered, critical_path=path, critical_duration=duration)
