"""Exception hierarchy for Taskdag MCP."""


class TaskDagError(Exception):
    """Base class for all Taskdag errors."""


class InvalidIdentifierError(TaskDagError, ValueError):
    """A task id was missing or not a positive integer."""


class TaskNotFoundError(TaskDagError, LookupError):
    """No task exists with the requested id."""

    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class IntegrityViolationError(TaskDagError):
    """Stored graph data breaks the DAG invariant.

    Raised when an edge references a task that does not exist, when a task id
    appears twice, or when a topological sort cannot consume every task. This
    signals corruption upstream and is never a user input error.
    """


class StoreError(TaskDagError):
    """The task store could not read or write its data file."""
