# src/taskbook/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The front-end depends on the TaskModel Protocol instead of a concrete backend,
so the in-memory and file-backed stores stay swappable and tests can run
the same checks against both.
"""

from collections.abc import Callable
from typing import Protocol

from ..tasks.ids import Id
from ..tasks.task_models import Tag, Tags, Task, Tasks

TaskTransform = Callable[[Task], Task]


class TaskModel(Protocol):
    """
    Storage contract shared by every task backend.

    Missing ids are not errors: read/update/complete return None and
    delete returns False.
    """

    def create(self, task: Task) -> Id: ...
    def read(self, task_id: Id) -> Task | None: ...
    def update(self, task_id: Id, transform: TaskTransform) -> Task | None: ...
    def complete(self, task_id: Id) -> Task | None: ...
    def delete(self, task_id: Id) -> bool: ...

    def tasks(self, tag: Tag | None = None) -> Tasks: ...
    def tags(self) -> Tags: ...

    def clear(self) -> None: ...
