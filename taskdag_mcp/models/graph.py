"""Graph snapshot models built per query from tasks and edges."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from taskdag_mcp.models.task import TaskModel


class Predecessor(BaseModel):
    """A direct parent as seen from its child, with its finish time precomputed."""

    model_config = ConfigDict(frozen=True)

    task_id: int
    finish_time: datetime


class GraphSnapshot(BaseModel):
    """
    Read-only adjacency view of the task graph.

    Neighbours are referenced by id in both directions; the task objects live
    only in ``tasks``. Every task has an entry (possibly empty) in
    ``successors`` and ``predecessors``, and neighbour lists keep edge order.
    """

    tasks: dict[int, TaskModel] = Field(default_factory=dict)
    successors: dict[int, list[int]] = Field(default_factory=dict)
    predecessors: dict[int, list[Predecessor]] = Field(default_factory=dict)

    @property
    def edge_count(self) -> int:
        return sum(len(children) for children in self.successors.values())
