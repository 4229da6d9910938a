# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskbook.core.ports import TaskModel
from taskbook.core.state import AppState
from taskbook.tasks.memory_model import InMemoryModel
from taskbook.tasks.persistent_model import PersistentModel


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap helpers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="taskbook-test",
        log_level="DEBUG",
        backend="persistent",
        seed_defaults=False,
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.json",
        id_path=tmp_path / "id.json",
    )


@pytest.fixture(params=["memory", "persistent"])
def model(request: pytest.FixtureRequest, tmp_path: Path) -> TaskModel:
    """Every backend, empty. Contract tests run once per backend."""
    if request.param == "memory":
        return InMemoryModel()
    return PersistentModel(tmp_path / "tasks.json", tmp_path / "id.json")


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired with a real file-backed model under tmp_path.
    """
    return AppState(
        settings=settings,
        model=PersistentModel(settings.tasks_path, settings.id_path),
        backend=settings.backend,
    )
