"""Input models for Taskdag MCP tools."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskdag_mcp.enums import ResponseFormat

# ============================================================================
# Task Tool Input Models
# ============================================================================


class AddTaskInput(BaseModel):
    """Input model for adding a new task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., description="Task title (required)", min_length=1, max_length=1000)
    due: str | None = Field(
        default=None,
        description="Due date: 'YYYY-MM-DD' (end of that day), an ISO datetime, 'today' or 'tomorrow'",
    )
    depends_on: list[str] | None = Field(
        default=None,
        description="IDs of tasks that must finish before this one starts",
        max_length=50,
    )

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()

    @field_validator("due")
    @classmethod
    def validate_due(cls, v: str | None) -> str | None:
        # Empty string means "no due date"
        return v or None


class GetTaskInput(BaseModel):
    """Input model for getting a single task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID to retrieve", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class ListTasksInput(BaseModel):
    """Input model for listing tasks."""

    model_config = ConfigDict(str_strip_whitespace=True)

    limit: int | None = Field(default=50, description="Maximum number of tasks to return", ge=1, le=500)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID to delete (its dependencies are removed too)", min_length=1)


# ============================================================================
# Dependency Graph Input Models
# ============================================================================


class DependencyInput(BaseModel):
    """Input model for adding or removing a dependency edge."""

    model_config = ConfigDict(str_strip_whitespace=True)

    parent_id: str = Field(..., description="Task that must finish first", min_length=1)
    child_id: str = Field(..., description="Task that depends on the parent", min_length=1)


class CheckDependencyInput(BaseModel):
    """Input model for a dry-run dependency check."""

    model_config = ConfigDict(str_strip_whitespace=True)

    parent_id: str = Field(..., description="Task that would have to finish first", min_length=1)
    child_id: str = Field(..., description="Task that would depend on the parent", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class ScheduleInput(BaseModel):
    """Input model for computing the schedule and critical path."""

    model_config = ConfigDict(str_strip_whitespace=True)

    critical_only: bool = Field(
        default=False,
        description="Only list tasks on the critical path",
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )
