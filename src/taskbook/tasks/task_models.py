# src/taskbook/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from enum import StrEnum

from .ids import Id


class StateKind(StrEnum):
    """Wire names of the task lifecycle states."""

    ACTIVE = "active"
    COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class Active:
    kind = StateKind.ACTIVE


@dataclass(frozen=True, slots=True)
class Completed:
    date: datetime
    kind = StateKind.COMPLETED

    def __post_init__(self) -> None:
        # naive dates are taken as local time so they survive a JSON round trip
        if self.date.tzinfo is None:
            object.__setattr__(self, "date", self.date.astimezone())


State = Active | Completed

ACTIVE = Active()


def completed_now() -> Completed:
    return Completed(datetime.now().astimezone())


@dataclass(frozen=True, slots=True)
class Tag:
    tag: str

    def __post_init__(self) -> None:
        if not self.tag or not self.tag.strip():
            raise ValueError("tag must be a non-empty string")

    def __str__(self) -> str:
        return self.tag


@dataclass(frozen=True, slots=True)
class Task:
    state: State
    description: str
    notes: str | None = None
    tags: tuple[Tag, ...] = ()

    @property
    def is_completed(self) -> bool:
        return isinstance(self.state, Completed)

    def complete(self, now: datetime | None = None) -> Task:
        """
        Return a completed copy of this task.

        An already completed task is returned unchanged, keeping its original date.
        """
        if isinstance(self.state, Completed):
            return self
        date = now if now is not None else datetime.now().astimezone()
        return replace(self, state=Completed(date))

    def has_tag(self, tag: Tag) -> bool:
        return tag in self.tags


@dataclass(frozen=True, slots=True)
class Tasks:
    """Ordered snapshot of (Id, Task) entries, in insertion order."""

    entries: tuple[tuple[Id, Task], ...] = ()

    @classmethod
    def empty(cls) -> Tasks:
        return cls()

    @classmethod
    def from_mapping(cls, mapping: Mapping[Id, Task]) -> Tasks:
        return cls(tuple(mapping.items()))

    def __iter__(self) -> Iterator[tuple[Id, Task]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, task_id: object) -> bool:
        return any(i == task_id for i, _ in self.entries)

    def get(self, task_id: Id) -> Task | None:
        for i, task in self.entries:
            if i == task_id:
                return task
        return None

    def ids(self) -> list[Id]:
        return [i for i, _ in self.entries]

    def as_dict(self) -> dict[Id, Task]:
        return dict(self.entries)

    def with_tag(self, tag: Tag) -> Tasks:
        return Tasks(tuple((i, t) for i, t in self.entries if t.has_tag(tag)))


@dataclass(frozen=True, slots=True)
class Tags:
    tags: tuple[Tag, ...] = ()

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> Tags:
        # dict keeps first-seen order while dropping duplicates
        seen: dict[Tag, None] = {}
        for task in tasks:
            for tag in task.tags:
                seen.setdefault(tag, None)
        return cls(tuple(seen))

    def __iter__(self) -> Iterator[Tag]:
        return iter(self.tags)

    def __len__(self) -> int:
        return len(self.tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self.tags
