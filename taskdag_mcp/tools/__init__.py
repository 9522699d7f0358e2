"""MCP tool definitions for Taskdag."""

# Import all tools to register them with the MCP server
from taskdag_mcp.tools.core import taskdag_add, taskdag_delete, taskdag_get, taskdag_list
from taskdag_mcp.tools.graph import (
    taskdag_check_dependency,
    taskdag_depend,
    taskdag_schedule,
    taskdag_undepend,
)

__all__ = [
    # Task tools
    "taskdag_add",
    "taskdag_get",
    "taskdag_list",
    "taskdag_delete",
    # Dependency graph tools
    "taskdag_depend",
    "taskdag_undepend",
    "taskdag_check_dependency",
    "taskdag_schedule",
]
