"""
MCP Server for task dependency graphs.

This server lets agents create tasks with optional due dates, link them with
dependencies that are guaranteed never to form a cycle, and compute each
task's earliest start together with the critical path through the plan.
"""

# Re-export configuration and errors
from taskdag_mcp.config import Settings

# Re-export enums
from taskdag_mcp.enums import EdgeRejection, ResponseFormat
from taskdag_mcp.errors import (
    IntegrityViolationError,
    InvalidIdentifierError,
    StoreError,
    TaskDagError,
    TaskNotFoundError,
)

# Re-export the graph engine
from taskdag_mcp.graph import (
    build_graph,
    check_new_edge,
    compute_schedule,
    critical_path,
    earliest_starts,
    topological_order,
    would_create_cycle,
)

# Re-export models
from taskdag_mcp.models import (
    AddTaskInput,
    CheckDependencyInput,
    DeleteTaskInput,
    DependencyEdge,
    DependencyInput,
    EdgeCheckResult,
    GetTaskInput,
    GraphSnapshot,
    ListTasksInput,
    Predecessor,
    ScheduledTask,
    ScheduleInput,
    ScheduleResult,
    TaskModel,
)

# Re-export MCP server instance
from taskdag_mcp.server import mcp

# Re-export the store
from taskdag_mcp.store import TaskStore, get_store, set_store

# Re-export tools
from taskdag_mcp.tools import (
    taskdag_add,
    taskdag_check_dependency,
    taskdag_delete,
    taskdag_depend,
    taskdag_get,
    taskdag_list,
    taskdag_schedule,
    taskdag_undepend,
)

# Re-export utilities (including private functions used by tests)
from taskdag_mcp.utils import (
    _format_duration,
    _format_schedule_concise,
    _format_schedule_markdown,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
    _parse_due_date,
    _parse_task_id,
)

__all__ = [
    # Configuration
    "Settings",
    # Enums
    "ResponseFormat",
    "EdgeRejection",
    # Errors
    "TaskDagError",
    "InvalidIdentifierError",
    "TaskNotFoundError",
    "IntegrityViolationError",
    "StoreError",
    # Models
    "TaskModel",
    "DependencyEdge",
    "Predecessor",
    "GraphSnapshot",
    "EdgeCheckResult",
    "ScheduledTask",
    "ScheduleResult",
    # Input models
    "AddTaskInput",
    "GetTaskInput",
    "ListTasksInput",
    "DeleteTaskInput",
    "DependencyInput",
    "CheckDependencyInput",
    "ScheduleInput",
    # Graph engine
    "build_graph",
    "would_create_cycle",
    "check_new_edge",
    "topological_order",
    "earliest_starts",
    "critical_path",
    "compute_schedule",
    # Store
    "TaskStore",
    "get_store",
    "set_store",
    # Utility functions
    "_parse_task_id",
    "_parse_due_date",
    "_format_duration",
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
    "_format_schedule_concise",
    "_format_schedule_markdown",
    # Tools
    "taskdag_add",
    "taskdag_get",
    "taskdag_list",
    "taskdag_delete",
    "taskdag_depend",
    "taskdag_undepend",
    "taskdag_check_dependency",
    "taskdag_schedule",
    # MCP server instance
    "mcp",
]
