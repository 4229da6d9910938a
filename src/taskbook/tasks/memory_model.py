# src/taskbook/tasks/memory_model.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.ports import TaskTransform
from .ids import Id, IdGenerator
from .task_models import ACTIVE, Tag, Tags, Task, Tasks, completed_now

logger = logging.getLogger(__name__)


def default_tasks() -> list[tuple[Id, Task]]:
    """Demo tasks a fresh in-memory store can start with."""
    return [
        (
            Id(0),
            Task(
                completed_now(),
                "Set up the taskbook project",
                None,
                (Tag("programming"), Tag("python")),
            ),
        ),
        (
            Id(1),
            Task(
                ACTIVE,
                "Write tests for both storage backends",
                "Run the same contract checks against memory and JSON files",
                (Tag("programming"), Tag("python"), Tag("testing"), Tag("pytest")),
            ),
        ),
        (
            Id(2),
            Task(
                ACTIVE,
                "Make a sandwich",
                "Cheese and salad or ham and tomato?",
                (Tag("food"), Tag("lunch")),
            ),
        ),
    ]


class InMemoryModel:
    """
    Task store kept entirely in process memory (lost on restart).

    Entries live in a dict, which keeps insertion order, so listings stay
    stable across create/update.

    Thread-safety:
    - none; wrap calls in a lock if several threads share one instance
    """

    def __init__(self, seed: Iterable[tuple[Id, Task]] | None = None) -> None:
        self._store: dict[Id, Task] = dict(seed or ())
        start = max(self._store).next() if self._store else Id(0)
        self._ids = IdGenerator(start)
        logger.info("InMemoryModel ready total=%d next_id=%s", len(self._store), start)

    def create(self, task: Task) -> Id:
        task_id = self._ids.next_id()
        self._store[task_id] = task
        logger.debug("Task created id=%s", task_id)
        return task_id

    def read(self, task_id: Id) -> Task | None:
        return self._store.get(task_id)

    def update(self, task_id: Id, transform: TaskTransform) -> Task | None:
        task = self._store.get(task_id)
        if task is None:
            return None
        updated = transform(task)
        # assigning to an existing key keeps its position
        self._store[task_id] = updated
        logger.debug("Task updated id=%s", task_id)
        return updated

    def complete(self, task_id: Id) -> Task | None:
        return self.update(task_id, Task.complete)

    def delete(self, task_id: Id) -> bool:
        found = self._store.pop(task_id, None) is not None
        if found:
            logger.debug("Task deleted id=%s", task_id)
        return found

    def tasks(self, tag: Tag | None = None) -> Tasks:
        snapshot = Tasks.from_mapping(self._store)
        return snapshot if tag is None else snapshot.with_tag(tag)

    def tags(self) -> Tags:
        return Tags.from_tasks(self._store.values())

    def clear(self) -> None:
        self._store.clear()
        self._ids = IdGenerator(Id(0))
        logger.info("InMemoryModel cleared")
