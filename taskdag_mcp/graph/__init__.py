"""Dependency-graph engine: adjacency building, cycle checks and scheduling."""

from taskdag_mcp.graph.builder import build_graph, build_successors
from taskdag_mcp.graph.cycles import check_new_edge, would_create_cycle
from taskdag_mcp.graph.scheduler import (
    ONE_DAY,
    compute_schedule,
    critical_path,
    earliest_starts,
    topological_order,
)

__all__ = [
    "ONE_DAY",
    "build_graph",
    "build_successors",
    "check_new_edge",
    "compute_schedule",
    "critical_path",
    "earliest_starts",
    "topological_order",
    "would_create_cycle",
]
