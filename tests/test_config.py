# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskbook.cli.bootstrap import create_initial_state
from taskbook.config import Settings
from taskbook.tasks.ids import Id
from taskbook.tasks.memory_model import InMemoryModel
from taskbook.tasks.persistent_model import PersistentModel
from taskbook.tasks.task_models import ACTIVE, Task

_VARS = (
    "TASKBOOK_APP_NAME",
    "TASKBOOK_LOG_LEVEL",
    "TASKBOOK_BACKEND",
    "TASKBOOK_SEED_DEFAULTS",
    "TASKBOOK_DATA_DIR",
    "TASKBOOK_TASKS_PATH",
    "TASKBOOK_ID_PATH",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "taskbook"
    assert s.log_level == "INFO"
    assert s.backend == "persistent"
    assert s.seed_defaults is True
    assert s.tasks_path == Path(".local/taskbook") / "tasks.json"
    assert s.id_path == Path(".local/taskbook") / "id.json"


def test_paths_follow_data_dir_unless_overridden(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKBOOK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKBOOK_ID_PATH", str(tmp_path / "counter.json"))
    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "tasks.json"
    assert s.id_path == tmp_path / "counter.json"


def test_unknown_backend_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKBOOK_BACKEND", "redis")
    assert Settings.from_env().backend == "persistent"
    monkeypatch.setenv("TASKBOOK_BACKEND", " Memory ")
    assert Settings.from_env().backend == "memory"


def test_bootstrap_picks_backend(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKBOOK_DATA_DIR", str(tmp_path / "data"))

    state = create_initial_state(settings=Settings.from_env())
    assert isinstance(state.model, PersistentModel)
    assert state.model.tasks_path == tmp_path / "data" / "tasks.json"
    assert (tmp_path / "data").is_dir()

    monkeypatch.setenv("TASKBOOK_BACKEND", "memory")
    state = create_initial_state(settings=Settings.from_env())
    assert isinstance(state.model, InMemoryModel)
    assert len(state.model.tasks()) == 3

    monkeypatch.setenv("TASKBOOK_SEED_DEFAULTS", "off")
    state = create_initial_state(settings=Settings.from_env())
    assert len(state.model.tasks()) == 0
    assert state.model.create(Task(ACTIVE, "first")) == Id(0)
