"""Cycle checking for proposed dependency edges."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from taskdag_mcp.enums import EdgeRejection
from taskdag_mcp.errors import InvalidIdentifierError
from taskdag_mcp.graph.builder import build_successors
from taskdag_mcp.models.schedule import EdgeCheckResult
from taskdag_mcp.models.task import DependencyEdge, TaskModel
from taskdag_mcp.utils.parsers import _parse_task_id

logger = logging.getLogger(__name__)


def would_create_cycle(parent_id: int, child_id: int, existing_edges: Iterable[DependencyEdge]) -> bool:
    """
    Check whether adding parent -> child to the edge set would close a cycle.

    The hypothetical edge is added to a private adjacency map and a DFS runs
    from ``child_id``; reaching ``parent_id`` means the new edge plus that path
    forms a loop. Each node is expanded at most once. Callers reject
    self-loops before getting here.

    Args:
        parent_id: Task that would have to finish first
        child_id: Task that would depend on it
        existing_edges: Current persisted edges (not mutated)

    Returns:
        True if the edge would create a cycle
    """
    graph = build_successors(existing_edges)
    graph.setdefault(parent_id, []).append(child_id)

    stack = [child_id]
    visited: set[int] = set()
    while stack:
        node = stack.pop()
        if node == parent_id:
            return True
        if node in visited:
            continue
        visited.add(node)
        stack.extend(graph.get(node, []))
    return False


def check_new_edge(
    parent_id: Any,
    child_id: Any,
    tasks: Mapping[int, TaskModel],
    edges: Iterable[DependencyEdge],
) -> EdgeCheckResult:
    """
    Decide whether the dependency parent -> child may be persisted.

    Checks run in order: id syntax, self-dependency, task existence,
    duplicates, then graph reachability. Nothing is mutated; the store is
    expected to call this under its write lock right before committing.

    Args:
        parent_id: Id of the task that must finish first (int or numeric string)
        child_id: Id of the dependent task (int or numeric string)
        tasks: Task lookup by id
        edges: Current edge set

    Returns:
        EdgeCheckResult with ``accepted`` and, on rejection, a reason
    """
    try:
        parent = _parse_task_id(parent_id)
        child = _parse_task_id(child_id)
    except InvalidIdentifierError as e:
        return EdgeCheckResult.reject(EdgeRejection.INVALID_IDENTIFIER, f"Invalid ids: {e}")

    if parent == child:
        return EdgeCheckResult.reject(EdgeRejection.SELF_DEPENDENCY)

    missing = [task_id for task_id in (parent, child) if task_id not in tasks]
    if missing:
        return EdgeCheckResult.reject(
            EdgeRejection.TASK_NOT_FOUND,
            f"Task not found: {', '.join(f'#{task_id}' for task_id in missing)}",
        )

    edge_list = list(edges)
    if any(e.parent_id == parent and e.child_id == child for e in edge_list):
        return EdgeCheckResult.reject(EdgeRejection.DUPLICATE_DEPENDENCY)

    if would_create_cycle(parent, child, edge_list):
        logger.debug("Edge %d -> %d closes a cycle", parent, child)
        return EdgeCheckResult.reject(
            EdgeRejection.CYCLE_DETECTED,
            f"Circular dependency detected: #{child} already leads to #{parent}",
        )

    return EdgeCheckResult.accept()
