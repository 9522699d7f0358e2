"""Pytest configuration and fixtures for taskdag-mcp tests."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from taskdag_mcp.models.task import DependencyEdge, TaskModel
from taskdag_mcp.store import TaskStore, set_store

BASE = datetime(2025, 1, 1, tzinfo=timezone.utc)


def day(n: float) -> datetime:
    """Timestamp ``n`` days after the fixed base date."""
    return BASE + timedelta(days=n)


def make_task(task_id: int, created: float = 0, due: float | None = None, title: str | None = None) -> TaskModel:
    return TaskModel(
        id=task_id,
        title=title or f"Task {task_id}",
        created_at=day(created),
        due_date=day(due) if due is not None else None,
    )


def make_edges(*pairs: tuple[int, int]) -> list[DependencyEdge]:
    return [DependencyEdge(parent_id=p, child_id=c) for p, c in pairs]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host TASKDAG_* variables out of the tests."""
    for name in ("TASKDAG_DATA_FILE", "TASKDAG_LOG_LEVEL", "TASKDAG_START_STEP_HOURS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "tasks.json"


@pytest.fixture
def store(data_file):
    """A file-backed store installed as the process-wide store for tool calls."""
    task_store = TaskStore(data_file)
    set_store(task_store)
    yield task_store
    set_store(None)


@pytest.fixture
def write_data(data_file):
    """Write raw task/edge data to the data file and install a store over it."""

    def _write(tasks, edges, next_id=None, start_step=timedelta(days=1)):
        payload = {
            "next_id": next_id or len(tasks) + 1,
            "tasks": [t.model_dump(mode="json") for t in tasks],
            "edges": [e.model_dump(mode="json") for e in edges],
        }
        data_file.write_text(json.dumps(payload), encoding="utf-8")
        task_store = TaskStore(data_file, start_step)
        set_store(task_store)
        return task_store

    yield _write
    set_store(None)
