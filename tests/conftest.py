"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from tasker.config import Settings
from tasker.models import Task
from tasker.store import TaskStore


@pytest.fixture()
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the home directory so the task file lands under tmp_path."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    return home_dir


@pytest.fixture()
def tasks_path(home: Path) -> Path:
    return Settings.from_env().tasks_path


@pytest.fixture()
def seeded_store(tasks_path: Path) -> TaskStore:
    store = TaskStore(tasks_path)
    store.save(
        [
            Task(id=1, description="buy milk"),
            Task(id=2, description="walk the dog", done=True),
            Task(id=4, description="file taxes"),
        ],
    )
    return store
