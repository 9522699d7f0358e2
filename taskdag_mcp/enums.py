"""Enums for Taskdag MCP."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # Minimal output for chaining
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class EdgeRejection(str, Enum):
    """Reasons a proposed dependency edge is refused."""

    INVALID_IDENTIFIER = "invalid_identifier"
    SELF_DEPENDENCY = "self_dependency"
    TASK_NOT_FOUND = "task_not_found"
    CYCLE_DETECTED = "cycle_detected"
    DUPLICATE_DEPENDENCY = "duplicate_dependency"


REJECTION_MESSAGES: dict[EdgeRejection, str] = {
    EdgeRejection.INVALID_IDENTIFIER: "Invalid task ids",
    EdgeRejection.SELF_DEPENDENCY: "Task cannot depend on itself",
    EdgeRejection.TASK_NOT_FOUND: "Task not found",
    EdgeRejection.CYCLE_DETECTED: "Circular dependency detected",
    EdgeRejection.DUPLICATE_DEPENDENCY: "Dependency already exists",
}
