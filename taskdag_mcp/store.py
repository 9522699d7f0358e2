"""JSON-file task store with serialized, validated dependency insertion."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from taskdag_mcp.config import Settings
from taskdag_mcp.errors import StoreError, TaskNotFoundError
from taskdag_mcp.graph.cycles import check_new_edge
from taskdag_mcp.graph.scheduler import ONE_DAY
from taskdag_mcp.models.schedule import EdgeCheckResult
from taskdag_mcp.models.task import DependencyEdge, TaskModel
from taskdag_mcp.utils.parsers import _parse_edges, _parse_task_id, _parse_tasks

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Durable store for tasks and dependency edges.

    Every mutation runs under one lock, and ``add_dependency`` performs the
    cycle check and the insert inside that same critical section, so two
    concurrent insertions can never both pass against a stale edge set.
    Reads copy a consistent snapshot under the lock.

    Args:
        path: JSON data file, created on first write; None keeps data in memory
        start_step: Gap between a predecessor's finish and a dependent's earliest start
    """

    def __init__(self, path: Path | None = None, start_step: timedelta = ONE_DAY):
        self.path = path
        self.start_step = start_step
        self._lock = threading.RLock()
        self._next_id = 1
        self._tasks: list[TaskModel] = []
        self._edges: list[DependencyEdge] = []
        if path is not None and path.exists():
            self._load(path)

    # -- persistence ---------------------------------------------------------

    def _load(self, path: Path) -> None:
        try:
            data: dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
            tasks = _parse_tasks(data.get("tasks", []))
            edges = _parse_edges(data.get("edges", []))
            stored_next_id = int(data.get("next_id", 1))
        except (OSError, json.JSONDecodeError, ValidationError, AttributeError, TypeError, ValueError) as e:
            raise StoreError(f"Failed to load task data from {path} - {type(e).__name__}: {e}") from e

        self._tasks = tasks
        self._edges = edges
        highest = max((t.id for t in tasks), default=0)
        self._next_id = max(stored_next_id, highest + 1)
        logger.debug("Loaded %d tasks and %d edges from %s", len(tasks), len(edges), path)

    def _commit(self, tasks: list[TaskModel], edges: list[DependencyEdge], next_id: int) -> None:
        """Persist the new state, then adopt it; a failed write leaves memory untouched."""
        if self.path is not None:
            self._write(self.path, tasks, edges, next_id)
        self._tasks = tasks
        self._edges = edges
        self._next_id = next_id

    def _write(self, path: Path, tasks: list[TaskModel], edges: list[DependencyEdge], next_id: int) -> None:
        payload = {
            "next_id": next_id,
            "tasks": [t.model_dump(mode="json") for t in tasks],
            "edges": [e.model_dump(mode="json") for e in edges],
        }
        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".tasks-", suffix=".json")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, indent=2)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StoreError(f"Failed to write task data to {path} - {e}") from e
        logger.debug("Saved %d tasks and %d edges to %s", len(tasks), len(edges), path)

    # -- reads ---------------------------------------------------------------

    def list_tasks(self) -> list[TaskModel]:
        with self._lock:
            return list(self._tasks)

    def get_task(self, task_id: int) -> TaskModel | None:
        with self._lock:
            return next((t for t in self._tasks if t.id == task_id), None)

    def tasks_by_id(self) -> dict[int, TaskModel]:
        with self._lock:
            return {t.id: t for t in self._tasks}

    def list_edges(self) -> list[DependencyEdge]:
        with self._lock:
            return list(self._edges)

    def snapshot(self) -> tuple[list[TaskModel], list[DependencyEdge]]:
        """Return a consistent (tasks, edges) pair."""
        with self._lock:
            return list(self._tasks), list(self._edges)

    # -- writes --------------------------------------------------------------

    def create_task(self, title: str, due_date: datetime | None = None) -> TaskModel:
        with self._lock:
            task = TaskModel(
                id=self._next_id,
                title=title,
                due_date=due_date,
                created_at=datetime.now(timezone.utc),
            )
            self._commit([*self._tasks, task], self._edges, self._next_id + 1)
        logger.info("Created task #%d: %s", task.id, task.title)
        return task

    def delete_task(self, task_id: int) -> tuple[TaskModel, int]:
        """
        Delete a task and every edge that references it.

        Returns:
            Tuple of (deleted task, number of edges removed)

        Raises:
            TaskNotFoundError: If no task has this id
        """
        with self._lock:
            task = self.get_task(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            kept = [e for e in self._edges if task_id not in (e.parent_id, e.child_id)]
            removed = len(self._edges) - len(kept)
            self._commit([t for t in self._tasks if t.id != task_id], kept, self._next_id)
        logger.info("Deleted task #%d and %d dependency edge(s)", task_id, removed)
        return task, removed

    def add_dependency(self, parent_id: Any, child_id: Any) -> EdgeCheckResult:
        """
        Validate and insert the edge parent -> child as one atomic step.

        Returns:
            The EdgeCheckResult; the edge is persisted only when accepted

        Raises:
            StoreError: If the accepted edge could not be written (it is not kept)
        """
        with self._lock:
            result = check_new_edge(parent_id, child_id, self.tasks_by_id(), self._edges)
            if not result.accepted:
                logger.warning("Rejected dependency %s -> %s: %s", parent_id, child_id, result.message)
                return result
            edge = DependencyEdge(parent_id=_parse_task_id(parent_id), child_id=_parse_task_id(child_id))
            self._commit(self._tasks, [*self._edges, edge], self._next_id)
        logger.info("Added dependency #%d -> #%d", edge.parent_id, edge.child_id)
        return result

    def remove_dependency(self, parent_id: int, child_id: int) -> bool:
        with self._lock:
            kept = [e for e in self._edges if e.as_pair() != (parent_id, child_id)]
            if len(kept) == len(self._edges):
                return False
            self._commit(self._tasks, kept, self._next_id)
        logger.info("Removed dependency #%d -> #%d", parent_id, child_id)
        return True


_store: TaskStore | None = None
_store_lock = threading.Lock()


def get_store() -> TaskStore:
    """
    Return the process-wide store, creating it from the environment on first use.

    Raises:
        StoreError: If the settings are invalid or the data file cannot be loaded
    """
    global _store
    with _store_lock:
        if _store is None:
            try:
                settings = Settings.from_env()
            except ValidationError as e:
                raise StoreError(f"Invalid TASKDAG_* settings - {e}") from e
            _store = TaskStore(settings.data_file, settings.start_step)
        return _store


def set_store(store: TaskStore | None) -> None:
    """Install a specific store (or reset with None)."""
    global _store
    with _store_lock:
        _store = store
