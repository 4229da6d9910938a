# src/taskbook/tasks/ids.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Id:
    """Task identifier. Wraps a non-negative int so ids don't mix with other ints."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Id must be non-negative, got {self.value}")

    def next(self) -> Id:
        return Id(self.value + 1)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class IdGenerator:
    """
    Hands out strictly increasing Ids starting from `start`.

    Not thread-safe: callers sharing a generator must synchronize themselves.
    """

    def __init__(self, start: Id) -> None:
        self._id = start

    def next_id(self) -> Id:
        current = self._id
        self._id = current.next()
        return current

    def peek(self) -> Id:
        return self._id
