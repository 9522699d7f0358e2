"""Adjacency construction shared by the cycle checker and the scheduler."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from taskdag_mcp.errors import IntegrityViolationError
from taskdag_mcp.models.graph import GraphSnapshot, Predecessor
from taskdag_mcp.models.task import DependencyEdge, TaskModel

logger = logging.getLogger(__name__)


def build_successors(edges: Iterable[DependencyEdge]) -> dict[int, list[int]]:
    """Map each parent id to its child ids, in edge order."""
    successors: dict[int, list[int]] = {}
    for edge in edges:
        successors.setdefault(edge.parent_id, []).append(edge.child_id)
    return successors


def build_graph(tasks: Iterable[TaskModel], edges: Iterable[DependencyEdge]) -> GraphSnapshot:
    """
    Build a GraphSnapshot from a flat task collection and parent->child edges.

    Runs in O(tasks + edges) and performs no ordering; task order is kept as
    given and neighbour lists follow edge order.

    Args:
        tasks: Every task in the graph
        edges: Every dependency edge between those tasks

    Returns:
        Snapshot with successors and predecessors for every task

    Raises:
        IntegrityViolationError: If a task id repeats or an edge references an unknown task
    """
    by_id: dict[int, TaskModel] = {}
    for task in tasks:
        if task.id in by_id:
            raise IntegrityViolationError(f"Duplicate task id {task.id} in task set")
        by_id[task.id] = task

    successors: dict[int, list[int]] = {task_id: [] for task_id in by_id}
    predecessors: dict[int, list[Predecessor]] = {task_id: [] for task_id in by_id}

    for edge in edges:
        parent = by_id.get(edge.parent_id)
        if parent is None or edge.child_id not in by_id:
            missing = edge.parent_id if parent is None else edge.child_id
            raise IntegrityViolationError(
                f"Dependency {edge.parent_id} -> {edge.child_id} references missing task {missing}"
            )
        successors[edge.parent_id].append(edge.child_id)
        predecessors[edge.child_id].append(Predecessor(task_id=parent.id, finish_time=parent.finish_time))

    snapshot = GraphSnapshot(tasks=by_id, successors=successors, predecessors=predecessors)
    logger.debug("Built graph snapshot: %d tasks, %d edges", len(by_id), snapshot.edge_count)
    return snapshot
