# src/taskbook/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the task backend and wires it into AppState.
"""

from __future__ import annotations

import logging

from ..config import BACKEND_MEMORY, get_settings
from ..core.ports import TaskModel
from ..core.state import AppState
from ..tasks.memory_model import InMemoryModel, default_tasks
from ..tasks.persistent_model import PersistentModel

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)
    settings.id_path.parent.mkdir(parents=True, exist_ok=True)


def create_model(settings) -> TaskModel:
    if settings.backend == BACKEND_MEMORY:
        seed = default_tasks() if settings.seed_defaults else None
        return InMemoryModel(seed)
    return PersistentModel(settings.tasks_path, settings.id_path)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    model = create_model(settings)
    logger.info("Using %s task backend", settings.backend)
    return AppState(settings=settings, model=model, backend=settings.backend)
