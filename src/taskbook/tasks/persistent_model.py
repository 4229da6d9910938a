# src/taskbook/tasks/persistent_model.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from ..core.ports import TaskTransform
from .codecs import DecodeError, decode_id, decode_tasks, encode_id, encode_tasks
from .ids import Id
from .task_models import Tag, Tags, Task, Tasks

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PersistentModel:
    """
    JSON-file task store.

    State lives in two documents:
    - tasks_path: [{"id": n, "task": {...}}, ...]
    - id_path:    {"id": n}, the next unused id

    Every call re-reads the files and rewrites whatever it changed in full.
    Files are written to a sibling temp file and moved into place, so a crash
    never leaves a half-written document.

    Id safety:
    - create() saves the advanced counter before the tasks file; a crash in
      between skips an id instead of reusing it
    - create() never hands out an id at or below the largest stored one, even
      if id.json is stale or missing

    Thread-safety:
    - none; concurrent writers can lose updates
    """

    def __init__(
        self,
        tasks_path: str | Path = "tasks.json",
        id_path: str | Path = "id.json",
    ) -> None:
        self.tasks_path = Path(tasks_path)
        self.id_path = Path(id_path)
        logger.info("PersistentModel ready tasks=%s id=%s", self.tasks_path, self.id_path)

    # ---- low-level helpers ----

    @staticmethod
    def _load(path: Path, decoder: Callable[[Any], T]) -> T:
        raw = path.read_text("utf-8")
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"{path}: malformed JSON: {exc}") from exc
        try:
            return decoder(data)
        except DecodeError as exc:
            raise DecodeError(f"{path}: {exc}") from exc

    @staticmethod
    def _save(path: Path, data: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(path.name + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, path)

    def load_tasks(self) -> Tasks:
        """Load all tasks; empty if the file does not exist. Raises DecodeError on bad data."""
        if not self.tasks_path.exists():
            return Tasks.empty()
        return self._load(self.tasks_path, decode_tasks)

    def load_id(self) -> Id:
        """Load the next unused id; Id(0) if the file does not exist. Raises DecodeError on bad data."""
        if not self.id_path.exists():
            return Id(0)
        return self._load(self.id_path, decode_id)

    def save_tasks(self, tasks: Tasks) -> None:
        self._save(self.tasks_path, encode_tasks(tasks))

    def save_id(self, task_id: Id) -> None:
        self._save(self.id_path, encode_id(task_id))

    # ---- public API ----

    def create(self, task: Task) -> Id:
        current = self.load_tasks()
        task_id = self.load_id()
        if len(current):
            task_id = max(task_id, max(current.ids()).next())

        entries = current.as_dict()
        entries[task_id] = task

        self.save_id(task_id.next())
        self.save_tasks(Tasks.from_mapping(entries))
        logger.debug("Task created id=%s", task_id)
        return task_id

    def read(self, task_id: Id) -> Task | None:
        return self.load_tasks().get(task_id)

    def update(self, task_id: Id, transform: TaskTransform) -> Task | None:
        entries = self.load_tasks().as_dict()
        task = entries.get(task_id)
        if task is None:
            return None
        updated = transform(task)
        entries[task_id] = updated
        self.save_tasks(Tasks.from_mapping(entries))
        logger.debug("Task updated id=%s", task_id)
        return updated

    def complete(self, task_id: Id) -> Task | None:
        return self.update(task_id, Task.complete)

    def delete(self, task_id: Id) -> bool:
        entries = self.load_tasks().as_dict()
        if entries.pop(task_id, None) is None:
            return False
        self.save_tasks(Tasks.from_mapping(entries))
        logger.debug("Task deleted id=%s", task_id)
        return True

    def tasks(self, tag: Tag | None = None) -> Tasks:
        snapshot = self.load_tasks()
        return snapshot if tag is None else snapshot.with_tag(tag)

    def tags(self) -> Tags:
        return Tags.from_tasks(task for _, task in self.load_tasks())

    def clear(self) -> None:
        self.save_id(Id(0))
        self.save_tasks(Tasks.empty())
        logger.info("PersistentModel cleared tasks=%s", self.tasks_path)
